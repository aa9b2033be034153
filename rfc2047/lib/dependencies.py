"""
Lazily imported third-party modules. Each dependency is declared by a decorated import function;
the import is only attempted when the module is first requested. The setup script collects all
declared dependencies from `rfc2047.lib.dependencies.registry` to compute the requirements.
"""
from __future__ import annotations

from typing import Callable, Collection, Generic, TypeVar, cast

Mod = TypeVar('Mod')


class MissingDependency(ImportError):
    """
    Raised when a module that is required for the requested operation can not be imported.
    """
    def __init__(self, name: str, install: Collection[str], info: str | None = None):
        packages = ' '.join(sorted(install))
        message = F'the module "{name}" is required but could not be imported; install it with: pip install {packages}'
        if info:
            message = F'{message} ({info})'
        super().__init__(message, name=name)
        self.install = install
        self.info = info


class MissingModule:
    """
    This class can wrap a module import that is currently missing. If any attribute of the missing
    module is accessed, it raises `rfc2047.lib.dependencies.MissingDependency`.
    """
    def __init__(self, name, install=None, info=None, error=None):
        self.name = name
        self.install = install or [name]
        self.info = info
        self.error = error

    def __getattr__(self, key: str):
        if key.startswith('__') and key.endswith('__'):
            raise AttributeError(key)
        raise MissingDependency(self.name, self.install, info=self.info) from self.error


class LazyDependency(Generic[Mod]):
    """
    A lazily evaluated dependency. Functions decorated with `rfc2047.lib.dependencies.dependency`
    are converted into this type. Calling the object returns either the return value of that
    function, which should be an imported module, or a `rfc2047.lib.dependencies.MissingModule`
    wrapper which will raise a `rfc2047.lib.dependencies.MissingDependency` exception as soon
    as any of its members is accessed.
    """
    _mod: Mod | None
    _imp: Callable[[], Mod]
    name: str
    dist: Collection[str]
    info: str | None

    __slots__ = (
        '_mod',
        '_imp',
        'name',
        'dist',
        'info',
    )

    def __init__(self, imp: Callable[[], Mod], name: str, dist: Collection[str], info: str | None):
        self.name = name
        self.dist = dist
        self.info = info
        self._imp = imp
        self._mod = None

    @property
    def required(self) -> bool:
        return not self.dist

    def __call__(self) -> Mod:
        if (mod := self._mod) is None:
            try:
                mod = self._imp()
            except ImportError as error:
                mod = cast(Mod, MissingModule(
                    self.name, install={self.name}, info=self.info, error=error))
            self._mod = mod
        return mod


registry: dict[str, LazyDependency] = {}


def dependency(name: str, dist: Collection[str] = (), info: str | None = None):
    """
    A decorator to mark up a third-party dependency. The decorated function can import the module
    and return the module object. The `name` argument of the decorator specifies the name of the
    dependency, while `dist` specifies a sequence of extra buckets at which this dependency will
    be installed by the setup script. A dependency without any extra bucket is a requirement of
    the package. Functions that are decorated with this method will turn into a
    `rfc2047.lib.dependencies.LazyDependency`.
    """
    def decorator(imp: Callable[[], Mod]):
        registry[name] = dep = LazyDependency(imp, name, dist, info)
        return dep
    return decorator


def requirements() -> tuple[list[str], dict[str, list[str]]]:
    """
    Compute the list of required packages and the extras buckets from all declared dependencies.
    """
    required: set[str] = set()
    extras: dict[str, set[str]] = {}
    for name, dep in registry.items():
        if dep.required:
            required.add(name)
            continue
        for bucket in dep.dist:
            extras.setdefault(bucket, set()).add(name)
    if extras:
        extras['all'] = set().union(*extras.values())
    return sorted(required), {k: sorted(v) for k, v in extras.items()}

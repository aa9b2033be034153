#!/usr/bin/env python3
from __future__ import annotations

import setuptools
import pathlib
import sys
import toml

__minver__ = '3.8'
__author__ = 'rfc2047-decoder contributors'
__slogan__ = 'A decoder for MIME encoded words (RFC 2047) in mail header values.'
__topics__ = [
    'Development Status :: 4 - Beta',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Communications :: Email',
    'Topic :: Text Processing',
]


def get_config():
    here = pathlib.Path(__file__).parent.absolute()
    sys.path.insert(0, str(here))

    import rfc2047
    import rfc2047.charsets  # noqa: registers the lazily imported dependencies
    import rfc2047.lib.dependencies

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = here.joinpath('README.md')
        try:
            README = open(filename, 'r', encoding='UTF8')
        except FileNotFoundError:
            return __slogan__
        with README:
            return README.read()

    ppcfg: dict[str, dict[str, list[str]]] = toml.load(str(here.joinpath('pyproject.toml')))
    requirements, extras = rfc2047.lib.dependencies.requirements()
    extras.update(ppcfg.get('tool', {}).get('rfc2047', {}).get('extras', {}))

    return dict(
        name=rfc2047.__distribution__,
        version=rfc2047.__version__,
        long_description=get_setup_readme(),
        long_description_content_type='text/markdown',
        author=__author__,
        description=__slogan__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('rfc2047*',)),
        install_requires=requirements,
        extras_require=extras,
        entry_points={'console_scripts': ['rfc2047=rfc2047.__main__:main']},
    )


if __name__ == '__main__':
    setuptools.setup(**get_config())

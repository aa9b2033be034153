#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A common interface to the settings that are available via environment variables. They only
affect logging; the decoding itself is configured explicitly. This module is also host to the
logging configuration.
"""
from __future__ import annotations

import os
import logging

from enum import IntEnum
from typing import Optional, TypeVar, Generic

_T = TypeVar('_T')

Logger = logging.Logger

PREFIX = 'RFC2047'


class LogLevel(IntEnum):
    """
    An enumeration representing the current log level:
    """
    DETACHED = logging.CRITICAL + 100
    """
    The decoder is used as a library and should communicate problems only by raising exceptions.
    """
    NONE = logging.CRITICAL + 50

    @classmethod
    def FromVerbosity(cls, verbosity: int):
        if verbosity < 0:
            return cls.DETACHED
        return {
            0: cls.WARNING,
            1: cls.INFO,
            2: cls.DEBUG
        }.get(verbosity, cls.DEBUG)

    NOTSET   = logging.NOTSET    # noqa
    CRITICAL = logging.CRITICAL  # noqa
    FATAL    = logging.FATAL     # noqa
    ERROR    = logging.ERROR     # noqa
    WARNING  = logging.WARNING   # noqa
    WARN     = logging.WARN      # noqa
    INFO     = logging.INFO      # noqa
    DEBUG    = logging.DEBUG     # noqa

    @property
    def verbosity(self) -> int:
        if self.value >= LogLevel.DETACHED:
            return -1
        if self.value >= LogLevel.WARNING:
            return +0
        if self.value >= LogLevel.INFO:
            return +1
        if self.value >= LogLevel.DEBUG:
            return +2
        else:
            return -1


class DecoderFormatter(logging.Formatter):

    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def __init__(self, format, **kwargs):
        super().__init__(format, **kwargs)

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, 'message')
        return super().formatMessage(record)


class EnvironmentVariableSetting(Generic[_T]):
    key: str
    value: Optional[_T]

    def __init__(self, name: str):
        self.key = F'{PREFIX}_{name}'
        self.value = self.read()

    def read(self) -> _T:
        return None


class EVLog(EnvironmentVariableSetting[Optional[LogLevel]]):
    def read(self):
        try:
            loglevel = os.environ[self.key]
        except KeyError:
            return None
        if loglevel.isdigit():
            return LogLevel.FromVerbosity(int(loglevel))
        try:
            loglevel = LogLevel[loglevel.upper()]
        except KeyError:
            levels = ', '.join(ll.name for ll in LogLevel)
            logging.getLogger(__name__).warning(
                F'ignoring unknown verbosity "{loglevel!r}"; pick from: {levels}')
            return None
        else:
            return loglevel


class environment:
    verbosity = EVLog('VERBOSITY')


def logger(name: str) -> logging.Logger:
    """
    Obtain a logger which is configured with the default decoder format. The log level is taken
    from the `RFC2047_VERBOSITY` environment variable and defaults to warnings only.
    """
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        stream = logging.StreamHandler()
        stream.setFormatter(DecoderFormatter(
            '({asctime}) {custom_level_name} in {name}: {message}',
            style='{',
            datefmt='%H:%M:%S',
        ))
        logger.addHandler(stream)
        logger.setLevel(environment.verbosity.value or LogLevel.WARNING)
    logger.propagate = False
    return logger


def set_verbosity(level: LogLevel | int):
    """
    Change the log level of every logger that was created by `rfc2047.lib.environment.logger`.
    """
    level = LogLevel(level)
    for name, log in logging.Logger.manager.loggerDict.items():
        if not isinstance(log, logging.Logger):
            continue
        if name == PREFIX.lower() or name.startswith(F'{PREFIX.lower()}.'):
            log.setLevel(level)

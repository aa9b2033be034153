import logging
import os

from unittest import mock

from rfc2047.lib.environment import (
    DecoderFormatter,
    EVLog,
    LogLevel,
    logger,
    set_verbosity,
)

from .. import TestBase


class TestEnvironment(TestBase):

    def test_setting_key(self):
        self.assertEqual(EVLog('VERBOSITY').key, 'RFC2047_VERBOSITY')

    def test_unset_verbosity(self):
        self.assertIsNone(EVLog('VERBOSITY').value)

    def test_verbosity_by_name(self):
        with mock.patch.dict(os.environ, {'RFC2047_VERBOSITY': 'debug'}):
            self.assertIs(EVLog('VERBOSITY').value, LogLevel.DEBUG)
        with mock.patch.dict(os.environ, {'RFC2047_VERBOSITY': 'DETACHED'}):
            self.assertIs(EVLog('VERBOSITY').value, LogLevel.DETACHED)

    def test_verbosity_by_number(self):
        with mock.patch.dict(os.environ, {'RFC2047_VERBOSITY': '1'}):
            self.assertIs(EVLog('VERBOSITY').value, LogLevel.INFO)

    def test_invalid_verbosity(self):
        with mock.patch.dict(os.environ, {'RFC2047_VERBOSITY': 'chatty'}):
            self.assertIsNone(EVLog('VERBOSITY').value)

    def test_verbosity_levels(self):
        self.assertEqual(LogLevel.FromVerbosity(-1), LogLevel.DETACHED)
        self.assertEqual(LogLevel.FromVerbosity(0), LogLevel.WARNING)
        self.assertEqual(LogLevel.FromVerbosity(7), LogLevel.DEBUG)
        self.assertEqual(LogLevel.INFO.verbosity, 1)
        self.assertEqual(LogLevel.DETACHED.verbosity, -1)

    def test_formatter(self):
        formatter = DecoderFormatter('{custom_level_name}: {message}', style='{')
        record = logging.LogRecord('rfc2047', logging.INFO, __file__, 1, 'hello', None, None)
        self.assertEqual(formatter.format(record), 'comment: hello')

    def test_logger_is_configured_once(self):
        log = logger('rfc2047.test.environment')
        count = len(log.handlers)
        self.assertIs(logger('rfc2047.test.environment'), log)
        self.assertEqual(len(log.handlers), count)
        self.assertFalse(log.propagate)

    def test_set_verbosity(self):
        log = logger('rfc2047.test.verbosity')
        other = logging.getLogger('unrelated.test.verbosity')
        level = other.level
        set_verbosity(LogLevel.DEBUG)
        self.addCleanup(set_verbosity, LogLevel.WARNING)
        self.assertEqual(log.level, LogLevel.DEBUG)
        self.assertEqual(other.level, level)

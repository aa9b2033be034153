import logging
import os
import random
import string
import unittest

from unittest import mock

import rfc2047

from rfc2047.model import MAX_LENGTH


__all__ = ['rfc2047', 'TestBase']


class TestBase(unittest.TestCase):

    def generate_random_text(self, size):
        return ''.join(string.printable[
            random.randrange(0, len(string.printable))] for _ in range(size)).encode('UTF8')

    def generate_long_word(self, size=MAX_LENGTH + 2, charset='ISO-8859-1', encoding='Q'):
        overhead = len(charset) + len(encoding) + 6
        return F'=?{charset}?{encoding}?{"a" * (size - overhead)}?='

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' buffers
        logging.disable(logging.CRITICAL)
        self.addCleanup(logging.disable, logging.NOTSET)
        # settings must not leak in from the environment of the test runner
        environ = {k: v for k, v in os.environ.items() if not k.startswith('RFC2047_')}
        patcher = mock.patch.dict(os.environ, environ, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

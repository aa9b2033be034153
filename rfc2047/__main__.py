#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Decodes RFC 2047 header values from the command line. Each argument is decoded and printed on its
own line; without arguments, every line from standard input is decoded.
"""
from __future__ import annotations

import argparse
import sys

from typing import Iterable

from rfc2047 import Decoder, Error, __version__
from rfc2047.lib.environment import LogLevel, set_verbosity
from rfc2047.lib.tools import exception_to_string
from rfc2047.model import CharsetPolicy, RecoverStrategy


def _arguments(argv: list[str] | None = None) -> argparse.Namespace:
    argp = argparse.ArgumentParser(prog='rfc2047', description=__doc__)
    argp.add_argument('values', nargs='*', metavar='value',
        help='header values to decode; read lines from standard input if none are given.')
    argp.add_argument('-s', '--strategy', choices=[str(s) for s in RecoverStrategy], default=None,
        help='treatment of encoded words longer than 75 characters; the default is abort.')
    argp.add_argument('-c', '--charset', choices=[str(c) for c in CharsetPolicy], default=None,
        help='treatment of unknown charsets; the default is ascii.')
    argp.add_argument('-v', '--verbose', action='count', default=0,
        help='increase the verbosity; can be specified twice.')
    argp.add_argument('--version', action='version', version=F'%(prog)s {__version__}')
    return argp.parse_args(argv)


def _lines(stream) -> Iterable[bytes]:
    for line in stream:
        yield line.rstrip(B'\r\n')


def main(argv: list[str] | None = None) -> int:
    args = _arguments(argv)
    if args.verbose:
        set_verbosity(LogLevel.FromVerbosity(args.verbose))
    decoder = Decoder(args.strategy, args.charset)
    if args.values:
        values = [v.encode('utf8', errors='surrogateescape') for v in args.values]
    else:
        values = _lines(sys.stdin.buffer)
    errors = 0
    for value in values:
        try:
            print(decoder.decode(value))
        except Error as error:
            errors += 1
            print(F'{error.stage} error: {exception_to_string(error)}', file=sys.stderr)
    return 1 if errors else 0


if __name__ == '__main__':
    sys.exit(main())

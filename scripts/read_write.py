#!/usr/bin/env python3
'''
Parse each MSBT file passed as argument and write it back next to the
original with the suffix "-new": for an untouched file the two must be
identical.
'''
import os
import sys
import logging

from msbt import MsbtFile
from msbt.exceptions import MsbtException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

SUFFIX = '-new'


def usage(progname):
    print('usage: %s <msbt file> [<msbt file>...]' % progname)
    sys.exit(1)


def read_write(path):
    msbt = MsbtFile(path)
    msbt.save(path + SUFFIX)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    failed = 0
    for path in sys.argv[1:]:
        try:
            read_write(path)
        except (MsbtException, OSError):
            logger.error(f'failed to handle file at path \'{path}\'', exc_info=True)
            failed += 1
            continue

        logger.info(f'written \'{path}{SUFFIX}\'')

    sys.exit(1 if failed else 0)

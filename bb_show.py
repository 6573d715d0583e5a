#!/usr/bin/pypy3
# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from bb_args import ArgumentParser, tm_args
from bb_report import print_report
from bb_tm import TMFormatError, TransitionTable
import logging

def main(argv=None):
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s %(name)s %(levelname)s: %(message)s')
    ap = ArgumentParser(description='Parse a TM in standard text format and list its transitions.', parents=[tm_args()])
    args = ap.parse_args(argv)
    if args.filename is not None:
        print(args.filename)
    if args.machine:
        print('Machine definition:', args.machine)
        try:
            table = TransitionTable.from_text(args.machine)
        except TMFormatError as e:
            logging.getLogger('bb_show').error('%s', e)
            return 1
        print_report(table)
    return 0

if __name__ == '__main__':
    raise SystemExit(main())

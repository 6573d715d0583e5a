# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from argparse import ArgumentParser

def tm_args():
    """Return an ArgumentParser that takes one TM in standard text format ('machine') and an optional file name to echo ('filename'). """
    ap = ArgumentParser(add_help=False)
    ap.add_argument('machine', help='Standard text TM, e.g. 1RB1LB_1LA---')
    ap.add_argument('-f', '--filename', help='Name of the file to process')
    return ap

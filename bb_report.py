# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
# Printed in place of a target state when a transition halts.
HALT_SENTINEL = 2**64 - 1

def ithl(i):
    return chr(ord("A")+i)

def header(table):
    if table.transition_count == 2:
        return f'BB({table.state_count})'
    return f'BB({table.state_count}, {table.transition_count})'

def report_lines(table):
    """ Yield the lines of the report: a BB(...) header, then one block of transitions per state, each block followed by a blank line. """
    yield header(table)
    for row in table.states:
        for tr in row:
            yield f'To write: {tr.write}'
            yield f'Direction: {tr.direction.label}'
            yield f'To state: {HALT_SENTINEL if tr.next_state is None else tr.next_state}'
        yield ''

def print_report(table, file=None):
    for line in report_lines(table):
        print(line, file=file)

def pptm(table, return_repr=False):
    from tabulate import tabulate
    headers = ["s"] + [str(r) for r in range(table.transition_count)]
    rows = [[ithl(f)] + [str(tr) for tr in row] for f, row in enumerate(table.states)]
    if not return_repr:
        print(tabulate(rows, headers=headers))
    else:
        return tabulate(rows, headers=headers)

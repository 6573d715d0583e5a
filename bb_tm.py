#!/usr/bin/pypy3
# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from dataclasses import dataclass
from enum import Enum, IntEnum
import logging
from typing import Optional

CHUNK = 3
STATE_SEP = '_'
DIGITS = '0123456789'
LETTERS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'

logger = logging.getLogger(__name__)

class Direction(IntEnum):
    HALT, R, L = range(-1, 2)

    @property
    def label(self):
        return ('Halt', 'Right', 'Left')[self + 1]

class ErrorKind(Enum):
    ENCODING = 'chunk is not valid text'
    INVALID_LENGTH = 'chunk is longer than 3 characters'
    MISSING_WRITE = 'nothing to write'
    MISSING_DIRECTION = 'no direction'
    MISSING_TARGET = 'no target state'
    INVALID_WRITE = 'invalid write symbol'
    INVALID_DIRECTION = 'invalid direction'
    INVALID_TARGET = 'invalid target state'
    ROW_LENGTH = 'state has the wrong number of transitions'
    DANGLING_REFERENCE = 'target state out of range'

class TMFormatError(ValueError):
    def __init__(self, kind, detail='', state=None, symbol=None, position=None):
        self.kind, self.detail = kind, detail
        self.state, self.symbol, self.position = state, symbol, position
        super().__init__(str(self))

    def located(self, state=None, symbol=None, offset=0):
        """ Return a copy with the state/symbol filled in and the position shifted into the full definition. """
        position = None if self.position is None else self.position + offset
        return type(self)(self.kind, self.detail,
                          self.state if state is None else state,
                          self.symbol if symbol is None else symbol,
                          position)

    def __str__(self):
        where = []
        if self.state is not None: where.append(f'state {self.state}')
        if self.symbol is not None: where.append(f'symbol {self.symbol}')
        if self.position is not None: where.append(f'position {self.position}')
        msg = f'error: {self.kind.value}'
        if self.detail: msg += f' {self.detail}'
        return msg + (f' ({", ".join(where)})' if where else '')

@dataclass(frozen=True)
class Transition:
    write: int
    direction: Direction
    next_state: Optional[int]

    @property
    def halts(self):
        return self.next_state is None

    def __str__(self):
        if self.halts and self.direction == Direction.HALT and not self.write:
            return '---'
        w = str(self.write)
        d = '-' if self.direction == Direction.HALT else 'RL'[self.direction]
        t = '-' if self.next_state is None else chr(65+self.next_state)
        return w + d + t

def split_chunks(text, width=CHUNK):
    """ Split text into width-character pieces; the last one may be short. Joining them gives back the text. """
    if width <= 0:
        raise ValueError(f'Chunk width must be positive: {width}')
    raw = text.encode()
    chunks = []
    for i in range(0, len(raw), width):
        try:
            chunks.append(raw[i:i+width].decode())
        except UnicodeDecodeError:
            raise TMFormatError(ErrorKind.ENCODING, repr(raw[i:i+width]), position=i) from None
    return chunks

def decode_transition(chunk):
    """ Decode a 3-character chunk like '1RB' or '---'. Positions in errors are relative to the chunk. """
    if len(chunk) > CHUNK:
        raise TMFormatError(ErrorKind.INVALID_LENGTH, repr(chunk), position=CHUNK)
    missing = (ErrorKind.MISSING_WRITE, ErrorKind.MISSING_DIRECTION, ErrorKind.MISSING_TARGET)
    if len(chunk) < CHUNK:
        raise TMFormatError(missing[len(chunk)], repr(chunk), position=len(chunk))
    w, d, t = chunk
    if w == '-':
        write = 0
    elif w in DIGITS:
        write = ord(w) - ord('0')
    else:
        raise TMFormatError(ErrorKind.INVALID_WRITE, repr(w), position=0)
    try:
        direction = {'-': Direction.HALT, 'L': Direction.L, 'R': Direction.R}[d]
    except KeyError:
        raise TMFormatError(ErrorKind.INVALID_DIRECTION, repr(d), position=1) from None
    if t == '-':
        next_state = None
    elif t in LETTERS:
        next_state = ord(t) - ord('A')
    else:
        raise TMFormatError(ErrorKind.INVALID_TARGET, repr(t), position=2)
    return Transition(write, direction, next_state)

class TransitionTable:
    __slots__ = ('states', 'state_count', 'transition_count')
    def __init__(self, states, transition_count=None):
        self.states = tuple(map(tuple, states))
        self.state_count = len(self.states)
        if transition_count is None:
            transition_count = len(self.states[0]) if self.states else 0
        self.transition_count = transition_count

    def transition(self, from_state, read_symbol):
        """ Return the Transition taken from from_state on reading read_symbol. """
        return self.states[from_state][read_symbol]

    def transitions(self):
        """ Yield tuples (from_state, read, write, direction, to_state). (to_state is None for a halt.) """
        for f, row in enumerate(self.states):
            for r, tr in enumerate(row):
                yield f, r, tr.write, tr.direction, tr.next_state

    def validate(self):
        """ Check every target is a real state; return self so calls can chain. """
        for f, r, w, d, t in self.transitions():
            if t is not None and t >= self.state_count:
                raise TMFormatError(ErrorKind.DANGLING_REFERENCE, f'{chr(65+t)!r} in a {self.state_count}-state table', state=f, symbol=r)
        return self

    def __eq__(self, other):
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self.transition_count == other.transition_count and self.states == other.states

    def __repr__(self):
        return f'{type(self).__name__}.from_text({str(self)!r})'

    def __str__(self):
        return STATE_SEP.join(''.join(map(str, row)) for row in self.states)

    @classmethod
    def from_text(cls, text):
        tt_rows = text.split(STATE_SEP)
        N, S = len(tt_rows), len(tt_rows[0].encode())//CHUNK
        states = []
        offset = 0
        for f, row in enumerate(tt_rows):
            try:
                chunks = split_chunks(row)
            except TMFormatError as e:
                raise e.located(state=f, offset=offset) from None
            decoded = []
            for r, chunk in enumerate(chunks):
                try:
                    decoded.append(decode_transition(chunk))
                except TMFormatError as e:
                    raise e.located(state=f, symbol=r, offset=offset + CHUNK*r) from None
            if len(decoded) != S:
                raise TMFormatError(ErrorKind.ROW_LENGTH, f'(expected {S}, got {len(decoded)}) in {text!r}', state=f)
            states.append(decoded)
            offset += len(row.encode()) + len(STATE_SEP)
        logger.debug('Parsed %r: %s states x %s symbols', text, N, S)
        return cls(states, S)

# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45

"""Reads a config file into a `ConfigStore`.

Supported lines (after trimming):

    ```ini
    ; a comment, first non-space char is ';'
    [mysql]
    db1.Host = 127.0.0.1  ; => key `db1_Host`
    ```

Note there are no trailing comments: everything after the first `=` is
the value (`127.0.0.1;=>key...` above), and EVERY space inside a key-value
line is dropped (`a b = c d` => `ab`: `cd`).
A line holding `[` anywhere is taken as a section header,
even a commented one, so it must end with `]`.
"""

import logging
from enum import Enum
from io import StringIO, TextIOBase
from typing import NamedTuple

from ..abstract import FileHandler
from ..errors import MissingSection, ParseError
from .model import ConfigStore

__all__ = ['LineKind', 'Line', 'classify', 'ConfigParser', 'load']

_log = logging.getLogger(__name__)


class LineKind(Enum):
    BLANK = 0
    COMMENT = 1
    SECTION = 2
    PAIR = 3


class Line(NamedTuple):
    kind: LineKind
    # section name for SECTION, key for PAIR.
    name: str = ''
    value: str = ''


def classify(line: str) -> Line:
    """Tell what a single line of config is.

    Raises:
        ParseError: on an unclosed header like `[mysql`,
            or a non-comment line without `=`.
    """
    line = line.strip()
    if not line:
        return Line(LineKind.BLANK)

    if '[' in line:
        if line[-1] != ']':
            raise ParseError(line)
        return Line(LineKind.SECTION, line[1:-1])

    pair = line.replace(' ', '')
    if pair[0] == ';':
        return Line(LineKind.COMMENT)
    key, sep, val = pair.partition('=')
    if not sep:
        raise ParseError(line)
    return Line(LineKind.PAIR, key.replace('.', '_'), val)


class ConfigParser(FileHandler[ConfigStore]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def readstream(buf: TextIOBase) -> ConfigStore:
        """读取解码好的字符串流。

        Stops at the first bad line; a half-filled store is never returned.
        """
        ret = ConfigStore()
        this_sect = ''
        lineno = 0
        while i := buf.readline():
            lineno += 1
            try:
                line = classify(i)
            except ParseError as e:
                raise ParseError(e.line, lineno) from None

            if line.kind is LineKind.SECTION:
                this_sect = line.name
                ret._setdefault(this_sect)
            elif line.kind is LineKind.PAIR:
                # `[]` is a legal header, so check membership, not emptiness.
                if this_sect not in ret:
                    raise MissingSection(i.strip(), lineno)
                ret._setdefault(this_sect)[line.name] = line.value
        return ret

    def read(self) -> ConfigStore:
        """Load the file given to the constructor.

        Raises:
            ConfigFileNotFound: the path doesn't exist.
            FileOpenError: any other OS error while opening or reading.
            ParseError, MissingSection: see `readstream()`.
        """
        ret = self.readstream(StringIO(self.read_text()))
        _log.debug('loaded %s: %d section(s)', self._fn, len(ret))
        return ret

    def __str__(self) -> str:
        return "Config file: " + super().__str__() + f"({self.encoding})"


def load(filename: str, encoding: str | None = None) -> ConfigStore:
    """Shortcut of `ConfigParser(filename, encoding).read()`."""
    return ConfigParser(filename, encoding).read()

# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:18

"""Exceptions raised by pyfconf.

Each one also derives from the closest builtin,
so `except OSError` or `except ValueError` keep working for callers
who don't care about this package.
"""

__all__ = [
    'ConfError',
    'ConfigFileNotFound', 'FileOpenError',
    'ParseError', 'MissingSection',
    'TagNotFound', 'NumericParseError', 'WriteFailure'
]


class ConfError(Exception):
    """Base class of everything raised here."""
    pass


class ConfigFileNotFound(ConfError, FileNotFoundError):
    def __init__(self, filename: str) -> None:
        super().__init__(f'File not exists: {filename}')
        self.path = filename


class FileOpenError(ConfError, OSError):
    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(f'Can not read file "{filename}": {cause}')
        self.path = filename


class ParseError(ConfError, ValueError):
    """A line the classifier refuses, e.g. `[mysql` or `key value`."""
    def __init__(self, line: str, lineno: int | None = None,
                 reason: str = 'failed to parse') -> None:
        where = '' if lineno is None else f' (line {lineno})'
        super().__init__(f'{reason}{where}: "{line}"')
        self.line = line
        self.lineno = lineno


class MissingSection(ParseError):
    """A key-value pair showed up before any `[section]` header."""
    def __init__(self, line: str, lineno: int | None = None) -> None:
        super().__init__(line, lineno, 'key outside of any section')


class TagNotFound(ConfError, LookupError):
    def __init__(self, tag: str, filename: str | None = None) -> None:
        where = '' if filename is None else f' in {filename}'
        super().__init__(f'No assignment of "{tag}"{where}')
        self.tag = tag
        self.path = filename


class NumericParseError(ConfError, ValueError):
    def __init__(self, path: str, value: str, kind: str) -> None:
        super().__init__(f'"{path}" = "{value}" is not a valid {kind}')
        self.path = path
        self.value = value


class WriteFailure(ConfError, OSError):
    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(f'Can not write file "{filename}": {cause}')
        self.path = filename

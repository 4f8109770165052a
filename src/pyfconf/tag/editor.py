# -*- encoding: utf-8 -*-
# @File   : editor.py
# @Time   : 2024/10/14 23:05:37

"""Read or rewrite one `tag = value` assignment in place.

Unlike `ConfigParser`, nothing gets parsed into a store here.
The raw text is scanned line by line, and on writing only the value
characters change, leaving comments, blank lines, spacing and ordering
exactly as they were.

Tags are NOT scoped by section: the first assignment in the file wins.

CAUTION:
    `TagEditor.set()` is a read-modify-write with no locking.
    Two writers on one file may lose an update, so callers have to
    serialize writes to a path themselves.
    The file itself is swapped atomically, thus a reader sees either
    the old content or the new one, never a truncated file.
"""

import logging
import os
import re
import stat
from contextlib import suppress
from os.path import abspath, basename, dirname
from tempfile import NamedTemporaryFile
from typing import NamedTuple

from ..abstract import FileHandler
from ..errors import ConfigFileNotFound, TagNotFound, WriteFailure

__all__ = [
    'DEFAULT_SECTION', 'TagMatch', 'TagEditor',
    'find_tag', 'read_tag', 'write_tag'
]

DEFAULT_SECTION = 'MicETL'

# a line with its `\n`, or the unterminated last line.
# a lone `\r` is not a terminator, same as for `ConfigParser`.
_LINE = re.compile(r'[^\n]*\n|[^\n]+$')
_NEWLINE = re.compile(r'[\r\n]')

_log = logging.getLogger(__name__)


class TagMatch(NamedTuple):
    tag: str
    value: str
    # value span within the scanned text.
    start: int
    end: int
    lineno: int


def _check_tag(tag: str) -> None:
    # `;x = 1` reads as a comment, `x[0 = 1` as a broken section header.
    if not tag or tag != tag.strip() or tag[0] == ';' \
            or _NEWLINE.search(tag) or '=' in tag or '[' in tag:
        raise ValueError(f'Invalid tag: {tag!r}')


def find_tag(text: str, tag: str) -> TagMatch | None:
    """Find the first `tag = value` line of `text`.

    Blank lines and comments (first non-space char `;`) are skipped.
    The tag must be the whole key, so `Port` doesn't hit `DBPort = 1`.
    An assignment with nothing after `=` is found, with value `''`.
    """
    _check_tag(tag)
    pattern = re.compile(rf'[ \t]*{re.escape(tag)}[ \t]*=[ \t]*')
    for lineno, line in enumerate(_LINE.finditer(text), 1):
        body = line.group().rstrip('\r\n')
        trimmed = body.strip()
        if not trimmed or trimmed[0] == ';':
            continue
        if (m := pattern.match(body)) is None:
            continue
        return TagMatch(tag, body[m.end():],
                        line.start() + m.end(), line.start() + len(body),
                        lineno)
    return None


class TagEditor(FileHandler[str]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        default_section: str | None = DEFAULT_SECTION
    ) -> None:
        """
        Args:
            default_section: header to start with when `set()` finds
                no readable file. `None` to start from an empty one.
        """
        super().__init__(filename, encoding)
        self._default_section = default_section

    def read(self) -> str:
        """The whole raw text, read afresh on every call."""
        return self.read_text()

    def find(self, tag: str) -> TagMatch | None:
        return find_tag(self.read(), tag)

    def get(self, tag: str) -> str:
        """Value of the first assignment of `tag`.

        Raises:
            TagNotFound: no such assignment, which is not the same as
                an empty value.
            ConfigFileNotFound, FileOpenError: unable to read the file.
        """
        if (ret := self.find(tag)) is None:
            raise TagNotFound(tag, self._fn)
        return ret.value

    def set(self, tag: str, content: str) -> None:
        """Replace the value of `tag`, or append `tag = content` at the end.

        Raises:
            ValueError: bad `tag`, or `content` spans more than one line,
                or starts with blanks (those would be read back as part
                of the `=` separator).
            FileOpenError: the file exists but can't be decoded.
            WriteFailure: unable to save.
        """
        _check_tag(tag)
        if _NEWLINE.search(content):
            raise ValueError(f'Value of "{tag}" must be a single line.')
        if content[:1] in (' ', '\t'):
            raise ValueError(f'Value of "{tag}" must not start with blanks.')
        try:
            text = self.read()
        except ConfigFileNotFound:
            _log.info('%s not found, creating it.', self._fn)
            text = self._initial_text()
        except OSError as e:
            # readable but undecodable: overwriting would lose the file.
            if isinstance(e.__cause__, UnicodeDecodeError):
                raise
            _log.warning('Unable to read %s, starting over: %s', self._fn, e)
            text = self._initial_text()

        if (m := find_tag(text, tag)) is not None:
            text = text[:m.start] + content + text[m.end:]
        else:
            newline = '\r\n' if '\r\n' in text else '\n'
            if text and text[-1] != '\n':
                text += newline
            text += f'{tag} = {content}{newline}'
        self.write(text)

    def _initial_text(self) -> str:
        if self._default_section is None:
            return ''
        return f'[{self._default_section}]\n'

    def write(self, instance: str) -> None:
        """Save `instance` as the whole file.

        Goes to a temporary sibling first and then replaces the target,
        keeping its permission bits (0644 for a new file).

        Raises:
            WriteFailure: the text doesn't fit the file's codec,
                or any OS error on the way.
        """
        try:
            data = instance.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise WriteFailure(self._fn, e) from e
        try:
            mode = stat.S_IMODE(os.stat(self._fn).st_mode)
        except OSError:
            mode = 0o644

        tmp = None
        try:
            with NamedTemporaryFile(
                'wb', dir=dirname(abspath(self._fn)),
                prefix=f'.{basename(self._fn)}.', suffix='.tmp',
                delete=False
            ) as fp:
                tmp = fp.name
                fp.write(data)
                fp.flush()
                os.fsync(fp.fileno())
            os.chmod(tmp, mode)
            os.replace(tmp, self._fn)
        except OSError as e:
            if tmp is not None:
                with suppress(OSError):
                    os.remove(tmp)
            raise WriteFailure(self._fn, e) from e
        _log.debug('saved %s (%d bytes)', self._fn, len(data))

    def __str__(self) -> str:
        return "Tag editor: " + super().__str__() + f"({self.encoding})"


def read_tag(filename: str, tag: str, encoding: str | None = None) -> str:
    return TagEditor(filename, encoding).get(tag)


def write_tag(
    filename: str, tag: str, content: str, *,
    default_section: str | None = DEFAULT_SECTION,
    encoding: str | None = None
) -> None:
    TagEditor(filename, encoding, default_section=default_section) \
        .set(tag, content)

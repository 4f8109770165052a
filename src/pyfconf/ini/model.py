# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10

"""
Basically a two-level INI structure: section -> key -> value.

Values are all `str` as they were written (minus spaces).
Lookups go by dotted path, `"mysql.db1.Host"` reading key `db1_Host`
of section `mysql`, since that is how such keys are stored on disk.
"""

import re
from collections.abc import Callable, Iterator, Mapping
from typing import TypeVar

from ..errors import NumericParseError

__all__ = ['ConfigSection', 'ConfigStore']

N = TypeVar('N')

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1


class ConfigSection(Mapping[str, str]):
    """Read-only view of a section's key-value pairs.

    Keys are exactly as stored, i.e. with `.` already turned into `_`.
    """
    def __init__(self, section_name: str, data: dict[str, str]) -> None:
        self._name = section_name
        # shared with ConfigStore, so a re-opened section sees the same dict.
        self._data = data

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class ConfigStore(Mapping[str, ConfigSection]):
    """A loaded config file. Case sensitive, no normalization.

    Only the parser fills it (through `_setdefault()`).
    Callers get a snapshot: nothing here writes back to the file.
    """
    def __init__(self) -> None:
        self.__raw_dicts: dict[str, dict[str, str]] = {}

    def __getitem__(self, key: str) -> ConfigSection:
        return ConfigSection(key, self.__raw_dicts[key])

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return f'<ConfigStore sections={list(self.__raw_dicts)}>'

    def _setdefault(self, section: str) -> dict[str, str]:
        """for ConfigParser. Re-entering a section keeps its pairs."""
        return self.__raw_dicts.setdefault(section, {})

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.copy() for k, v in self.__raw_dicts.items()}

    def get_str(self, path: str) -> str:
        """Resolve `"section.k1.k2...kn"` to the value of key `k1_k2_..._kn`.

        Never raises. Unknown sections or keys, a path without a key part
        (`"mysql"`, `"mysql."`), all give `""`.
        """
        spl = path.split('.')
        if len(spl) < 2 or spl[1] == '':
            return ''
        section = self.__raw_dicts.get(spl[0])
        if section is None:
            return ''
        return section.get('_'.join(spl[1:]), '')

    def __convert(self, path: str, kind: str,
                  converter: Callable[[str], N]) -> N:
        value = self.get_str(path)
        try:
            return converter(value)
        except ValueError as e:
            raise NumericParseError(path, value, kind) from e

    def get_int(self, path: str) -> int:
        return self.__convert(path, 'int', _to_int)

    def get_int64(self, path: str) -> int:
        return self.__convert(path, 'int64', _to_int64)

    def get_float64(self, path: str) -> float:
        return self.__convert(path, 'float64', _to_float)


# int() and float() are looser than a config value should be:
# they take "1_000", " 1" and so on.
def _to_int(value: str) -> int:
    if _INT_PATTERN.fullmatch(value) is None:
        raise ValueError(f'invalid decimal integer: {value!r}')
    return int(value)


def _to_int64(value: str) -> int:
    ret = _to_int(value)
    if not _INT64_MIN <= ret <= _INT64_MAX:
        raise ValueError(f'out of int64 range: {value!r}')
    return ret


def _to_float(value: str) -> float:
    if '_' in value or value != value.strip():
        raise ValueError(f'invalid float: {value!r}')
    return float(value)

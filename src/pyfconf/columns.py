# -*- encoding: utf-8 -*-
# @File   : columns.py
# @Time   : 2024/10/16 19:48:02

"""Helpers for database column lists kept in config values,
like `colname = id:int,name:varchar(32),price:float`.
"""

import re
from collections.abc import Iterable
from typing import NamedTuple

__all__ = [
    'DbColumn', 'delete_extra_space',
    'get_db_columns', 'get_db_columns_str'
]

_SPACES = re.compile(r'\s{2,}')


class DbColumn(NamedTuple):
    name: str
    col_type: str = ''


def delete_extra_space(s: str) -> str:
    """Tabs become spaces, then each whitespace run keeps its first char."""
    return _SPACES.sub(lambda m: m.group()[0], s.replace('\t', ' '))


def get_db_columns(s: str) -> list[DbColumn]:
    """Split `"name:type, name:type, name"` into `DbColumn`s.

    A column without `:` gets an empty `col_type`.
    Anything after a second `:` is ignored.
    """
    ret = []
    for i in delete_extra_space(s).split(','):
        fields = [j.strip() for j in delete_extra_space(i).split(':')]
        ret.append(DbColumn(*fields[:2]))
    return ret


def get_db_columns_str(columns: Iterable[DbColumn]) -> str:
    """Column names only, ready for `SELECT ... FROM`."""
    return ','.join(i.name for i in columns)

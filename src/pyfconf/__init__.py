# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:20:17

import logging

from .columns import (
    DbColumn,
    delete_extra_space,
    get_db_columns,
    get_db_columns_str
)
from .daylog import write_log
from .errors import (
    ConfError,
    ConfigFileNotFound,
    FileOpenError,
    MissingSection,
    NumericParseError,
    ParseError,
    TagNotFound,
    WriteFailure
)
from .ini import (
    ConfigParser,
    ConfigSection,
    ConfigStore,
    Line,
    LineKind,
    classify,
    load
)
from .tag import (
    DEFAULT_SECTION,
    TagEditor,
    TagMatch,
    find_tag,
    read_tag,
    write_tag
)

__all__ = [
    'load', 'ConfigParser', 'ConfigStore', 'ConfigSection',
    'classify', 'Line', 'LineKind',
    'read_tag', 'write_tag', 'find_tag',
    'TagEditor', 'TagMatch', 'DEFAULT_SECTION',
    'delete_extra_space', 'DbColumn',
    'get_db_columns', 'get_db_columns_str',
    'write_log',
    'ConfError', 'ConfigFileNotFound', 'FileOpenError',
    'ParseError', 'MissingSection', 'TagNotFound',
    'NumericParseError', 'WriteFailure'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

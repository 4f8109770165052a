# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 23:04:12

from .editor import (
    DEFAULT_SECTION,
    TagEditor,
    TagMatch,
    find_tag,
    read_tag,
    write_tag
)

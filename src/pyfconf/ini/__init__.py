# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53

from .model import ConfigSection, ConfigStore
from .parser import ConfigParser, Line, LineKind, classify, load

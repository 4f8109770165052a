# -*- encoding: utf-8 -*-
# @File   : daylog.py
# @Time   : 2024/10/16 20:31:55

import logging
from datetime import datetime

__all__ = ['write_log']

_log = logging.getLogger(__name__)


def write_log(base_path: str, content: str,
              now: datetime | None = None) -> bool:
    """Append `content` to today's log, `{base_path}_YYYY-MM-DD.txt`.

    Hint:
        If the log is NOT WRITABLE, a warning gets logged and
        `False` is returned instead of raising.
    """
    if now is None:
        now = datetime.now()
    name = f'{base_path}_{now:%Y-%m-%d}.txt'
    try:
        with open(name, 'a', encoding='utf-8') as fp:
            fp.write(f'{now:%Y-%m-%d %H:%M:%S}  {content}\n')
    except OSError as e:
        _log.warning('Unable to write log %s: %s', name, e)
        return False
    return True

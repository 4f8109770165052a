# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30

import logging
from abc import ABCMeta, abstractmethod
from os.path import exists
from typing import Generic, TypeVar

import chardet

from .errors import ConfigFileNotFound, FileOpenError

T = TypeVar('T')

_log = logging.getLogger(__name__)


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def encoding(self) -> str:
        """Codec the last read actually used (UTF-8 until told otherwise)."""
        return self._codec or 'utf-8'

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def _read_bytes(self) -> bytes:
        if not exists(self._fn):
            raise ConfigFileNotFound(self._fn)
        try:
            with open(self._fn, 'rb') as fp:
                return fp.read()
        except FileNotFoundError as e:
            raise ConfigFileNotFound(self._fn) from e
        except OSError as e:
            raise FileOpenError(self._fn, e) from e

    def _decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError:
            pass

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        _log.debug('%s is not %s, trying %s',
                   self._fn, self.encoding, codec['encoding'])

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            codec = {'encoding': 'gbk'}
            try:
                buf = raw.decode('gbk')
            except UnicodeDecodeError as e:
                raise FileOpenError(self._fn, e) from e
        self._codec = codec['encoding']
        return buf

    def read_text(self) -> str:
        """Whole file as text, line terminators left untranslated."""
        return self._decode(self._read_bytes())

    def __str__(self) -> str:
        return self._fn

# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 14:30:12
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

from .consts import ImiFlag

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def read(self, flags: ImiFlag = ImiFlag.INISTYLE) -> T | None:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T, flags: ImiFlag = ImiFlag.INISTYLE) -> bool:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn

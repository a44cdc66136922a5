# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 15:40:27
# @Author : Kariko Lin

"""
Flat INI records, kept in the order they came in.

Unlike a dict of dicts, keys stay flat (`section.sub.key`)
and the section path is derived from the key itself.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterator, overload

from ..consts import DOT_DEPTH
from .textutil import extract_parent


@dataclass(kw_only=True)
class ImiEntry:
    """One `key = value` line, or one bare `[section]` marker.

    Markers have no key and no value, their `parent` is the section name.
    """
    key: str | None
    value: str | None = None
    comment: str | None = None
    parent: str = ''

    @classmethod
    def pair(
        cls, key: str, value: str, depth: int = DOT_DEPTH,
        comment: str | None = None
    ) -> 'ImiEntry':
        return cls(
            key=key, value=value, comment=comment,
            parent=extract_parent(key, depth))

    @classmethod
    def section(cls, name: str, comment: str | None = None) -> 'ImiEntry':
        return cls(key=None, comment=comment, parent=name)

    @property
    def is_section(self) -> bool:
        return self.key is None


class ImiStore(Sequence[ImiEntry]):
    """Ordered entries of one config snapshot.

    Appending never checks for duplicates,
    while lookups always stop at the *first* match.
    """
    def __init__(self, dot_depth: int = DOT_DEPTH) -> None:
        if dot_depth < 1:
            raise ValueError(f'dot_depth should be at least 1, got {dot_depth}')
        self.__entries: list[ImiEntry] = []
        self.__depth = dot_depth

    @property
    def dot_depth(self) -> int:
        return self.__depth

    @overload
    def __getitem__(self, index: int) -> ImiEntry: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[ImiEntry]: ...

    def __getitem__(self, index: int | slice) -> ImiEntry | Sequence[ImiEntry]:
        return self.__entries[index]

    def __len__(self) -> int:
        return len(self.__entries)

    def __iter__(self) -> Iterator[ImiEntry]:
        return iter(self.__entries)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, ImiEntry):
            return any(i is key for i in self.__entries)
        return isinstance(key, str) and self.find(key) is not None

    def __repr__(self) -> str:
        return '%s { .cnt = %d, .depth = %d }' % (
            type(self).__name__, len(self.__entries), self.__depth)

    def append(self, entry: ImiEntry) -> None:
        self.__entries.append(entry)

    def find(self, key: str) -> ImiEntry | None:
        for i in self.__entries:
            if i.key is not None and i.key == key:
                return i
        return None

    def find_section(self, name: str) -> ImiEntry | None:
        for i in self.__entries:
            if i.key is None and i.parent == name:
                return i
        return None

    def remove(self, key: str) -> bool:
        """Drop the first entry with `key`. `False` if there's none."""
        for idx, i in enumerate(self.__entries):
            if i.key is not None and i.key == key:
                del self.__entries[idx]
                return True
        return False

    def clear(self) -> None:
        self.__entries.clear()

# -*- encoding: utf-8 -*-
# @File   : document.py
# @Time   : 2024/11/03 11:30:04
# @Author : Kariko Lin

"""Typed getters and setters over an `ImiStore`.

All of them work with the first entry of a given key,
i.e. the same one `ImiStore.find()` gives.
"""

from re import IGNORECASE
from re import compile as regex
from typing import Iterable

from ..consts import ImiFlag
from .merge import merge
from .model import ImiEntry, ImiStore
from .textutil import join_list, split_list

# leading numbers only, like what atoi / atof do.
_INT_PREFIX = regex(r'\s*([+-]?\d+)')
_FLOAT_PREFIX = regex(
    r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)', IGNORECASE)


class ImiDocument(ImiStore):
    """一个配置文件（或者合并过的若干个）的完整表示。

    ```ini
    top = value         ; getstr('top')

    [web]
    port = 8080         ; getint('web.port')
    plugins = a, b, c   ; getarr('web.plugins')
    ```
    """

    def getstr(self, key: str, default: str | None = None) -> str | None:
        if (e := self.find(key)) is None:
            return default
        return e.value

    def getint(self, key: str, default: int = 0) -> int:
        if (v := self.getstr(key)) is None:
            return default
        m = _INT_PREFIX.match(v)
        return int(m.group(1)) if m else 0

    def getdbl(self, key: str, default: float = 0.0) -> float:
        if (v := self.getstr(key)) is None:
            return default
        m = _FLOAT_PREFIX.match(v)
        return float(m.group(1)) if m else 0.0

    # lazy to implement auto converter. just manual.
    def getbool(self, key: str, default: bool | None = None) -> bool | None:
        if (v := self.getstr(key)) is None:
            return default
        return bool(v) and v[0].lower() in ('1', 'y', 't')

    def getarr(self, key: str) -> list[str]:
        return split_list(self.getstr(key))

    def isval(self, key: str, candidate: str | None) -> bool:
        """`True` only if `key` exists and its value equals `candidate`."""
        if candidate is None or (e := self.find(key)) is None:
            return False
        return e.value is not None and e.value == candidate

    def getsub(self, section: str | None = None) -> list[str]:
        """List sections, or leaf names under `section`.

        Without `section`, returns every distinct (non-empty) parent,
        in the order they first appear.
        Otherwise returns what follows `section.` in each key.
        """
        if not section:
            ret: dict[str, None] = {}
            for i in self:
                if i.parent:
                    ret.setdefault(i.parent, None)
            return list(ret.keys())

        prefix = f'{section}.'
        return [
            i.key[len(prefix):] for i in self
            if i.key is not None and i.key.startswith(prefix)
        ]

    def setstr(self, key: str, value: str) -> None:
        if (e := self.find(key)) is not None:
            e.value = value
            return
        self.append(ImiEntry.pair(key, value, self.dot_depth))

    def setint(self, key: str, value: int) -> None:
        self.setstr(key, '%d' % value)

    def setdbl(self, key: str, value: float) -> None:
        self.setstr(key, '%.6g' % value)

    def setarr(self, key: str, values: Iterable[object]) -> None:
        self.setstr(key, join_list(values))

    def comment(self, key: str, text: str) -> bool:
        """Overwrite the comment of `key`. `False` if there's no such key."""
        if (e := self.find(key)) is None:
            return False
        e.comment = text
        return True

    def add_section(self, name: str, comment: str | None = None) -> ImiEntry:
        """Declare `[name]` even if no keys go there (yet)."""
        entry = ImiEntry.section(name, comment)
        self.append(entry)
        return entry

    def merge(
        self, overlay: ImiStore, flags: ImiFlag = ImiFlag.INISTYLE
    ) -> int:
        return merge(self, overlay, flags)

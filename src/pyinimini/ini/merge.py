# -*- encoding: utf-8 -*-
# @File   : merge.py
# @Time   : 2024/11/03 10:12:55
# @Author : Kariko Lin

import logging

from ..consts import COMMENT_SEP, ImiFlag
from .model import ImiEntry, ImiStore


def _lookup(base: ImiStore, entry: ImiEntry) -> ImiEntry | None:
    # markers have no key, they match by section name instead.
    if entry.is_section:
        return base.find_section(entry.parent)
    return base.find(entry.key)


def merge(
    base: ImiStore, overlay: ImiStore,
    flags: ImiFlag = ImiFlag.INISTYLE
) -> int:
    """Merge `overlay` into `base`, overlay values always win.

    With `ImiFlag.COMMENTS`, comments of two matching section markers
    are joined as `base | overlay`, other comments just get replaced.
    Note that merging the same overlay again keeps joining marker
    comments, i.e. `a | b | b`.

    Returns how many entries got appended to `base`.
    """
    keep_comments = bool(flags & ImiFlag.COMMENTS)
    appended = 0
    # snapshot, in case `base` and `overlay` are the same store.
    for o in list(overlay):
        if (b := _lookup(base, o)) is None:
            base.append(ImiEntry(
                key=o.key, value=o.value,
                comment=o.comment, parent=o.parent))
            appended += 1
            continue

        if not o.is_section:
            b.value = o.value
        if not keep_comments or o.comment is None:
            continue
        if o.is_section and b.comment:
            b.comment = f'{b.comment}{COMMENT_SEP}{o.comment}'
        else:
            b.comment = o.comment

    logging.debug(
        f'Merged {len(overlay)} entries, {appended} of them are new.')
    return appended

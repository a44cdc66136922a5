# -*- encoding: utf-8 -*-
# @File   : textutil.py
# @Time   : 2024/11/02 15:02:41
# @Author : Kariko Lin

"""Pure string helpers shared by the parser, serializer and accessors."""

import os
from typing import Callable, Iterable
from warnings import warn

from ..consts import DOT_DEPTH, EXPAND_LIMIT, VARNAME_LIMIT

EnvLookup = Callable[[str], str | None]


def trim(s: str | None) -> str | None:
    if not s:
        return s
    return s.strip()


def expand_env(
    text: str | None,
    lookup: EnvLookup | None = None,
    limit: int = EXPAND_LIMIT
) -> str:
    """Replace every `${NAME}` with the value `lookup(NAME)` gives.

    - unset names expand to an empty string;
    - an unterminated `${` stops the expansion,
      only the text before it is kept;
    - names longer than `VARNAME_LIMIT` are cut before the lookup;
    - the result never exceeds `limit` characters. Anything past it
      gets cut (with a `UserWarning`), the caller still gets a value.

    `lookup` defaults to `os.environ.get`.
    """
    if text is None:
        return ''
    if lookup is None:
        lookup = os.environ.get

    buf: list[str] = []
    cursor = 0
    while (start := text.find('${', cursor)) >= 0:
        buf.append(text[cursor:start])
        end = text.find('}', start + 2)
        if end < 0:
            break
        val = lookup(text[start + 2:end][:VARNAME_LIMIT])
        if val is not None:
            buf.append(val)
        cursor = end + 1
    else:
        buf.append(text[cursor:])

    ret = ''.join(buf)
    if len(ret) > limit:
        warn(f'Expanded value cut at {limit} characters: "{ret[:32]}..."')
        ret = ret[:limit]
    return ret


def extract_parent(key: str | None, depth: int = DOT_DEPTH) -> str:
    """`web.server.port` -> `web.server` (depth 2).

    Keys with fewer than `depth` dots are their own parent,
    i.e. `web.port` -> `web.port`.
    """
    if key is None:
        return ''
    pos = 0
    for _ in range(depth):
        # a leading dot never splits.
        pos = key.find('.', pos + 1)
        if pos < 0:
            return key
    return key[:pos]


def split_section(key: str, depth: int = DOT_DEPTH) -> tuple[str, str]:
    """Get the header name and the leaf name to write a key with.

    Reading `[section]` + `leaf = ...` back gives `section.leaf` again.
    """
    parent = extract_parent(key, depth)
    if parent != key:
        return parent, key[len(parent) + 1:]
    # top level one, so split at its last dot (if any).
    section, _, leaf = key.rpartition('.')
    return section, leaf


def split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [j for i in value.split(',') if (j := i.strip())]


def join_list(items: Iterable[object]) -> str:
    return ', '.join(str(i) for i in items)

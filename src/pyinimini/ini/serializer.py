# -*- encoding: utf-8 -*-
# @File   : serializer.py
# @Time   : 2024/11/03 14:48:19
# @Author : Kariko Lin

"""Write an `ImiStore` back to text.

Entries are written in store order. Consecutive entries sharing
a header are grouped under one `[section]`, so edits made in between
won't mess the layout up.
"""

from io import StringIO
from typing import Iterator, TextIO

from ..consts import ImiFlag
from .model import ImiEntry, ImiStore
from .textutil import split_section


def _header(name: str, flags: ImiFlag) -> str:
    if flags & ImiFlag.GITSTYLE and ' ' in name:
        return f'[{name} "{name}"]'
    return f'[{name}]'


def _comment_lines(lines: list[str], indent: str) -> list[str]:
    return [f'{indent}; {i}' for i in lines]


def _split(entry: ImiEntry, depth: int) -> tuple[str, str]:
    if entry.is_section:
        return entry.parent, ''
    return split_section(entry.key, depth)


def iterlines(store: ImiStore, flags: ImiFlag = ImiFlag.INISTYLE) -> Iterator[str]:
    """Yield output lines (without line breaks) of `store`."""
    keep_comments = bool(flags & ImiFlag.COMMENTS)
    indent = '\t' if flags & ImiFlag.GITSTYLE else ''
    depth = store.dot_depth
    prev: str | None = None
    written = False

    for e in store:
        section, leaf = _split(e, depth)
        if (not e.is_section and prev and section != prev
                and e.key.startswith(f'{prev}.')):
            # still reads back as the same key under the current header.
            section, leaf = prev, e.key[len(prev) + 1:]

        if e.is_section or section != prev:
            # nothing to declare for top level pairs at the very beginning.
            declare = written or bool(section)
            if written:
                yield ''
            if e.is_section and keep_comments and e.comment:
                # comments *above* a header belong to its marker.
                yield from _comment_lines(e.comment.split('\n'), '')
                written = True
            if declare:
                yield _header(section, flags)
                written = True
        prev = section
        if e.is_section:
            continue

        line = f'{indent}{leaf} = {e.value or ""}'
        if keep_comments and e.comment:
            *above, inline = e.comment.split('\n')
            yield from _comment_lines(above, indent)
            line += f' ; {inline}'
        yield line
        written = True


def writestream(
    store: ImiStore, fp: TextIO, flags: ImiFlag = ImiFlag.INISTYLE
) -> None:
    for i in iterlines(store, flags):
        fp.write(i)
        fp.write('\n')


def dumps(store: ImiStore, flags: ImiFlag = ImiFlag.INISTYLE) -> str:
    buf = StringIO()
    writestream(store, buf, flags)
    return buf.getvalue()

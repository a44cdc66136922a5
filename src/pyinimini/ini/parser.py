# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 16:20:37
# @Author : Kariko Lin

"""Read INI (or git config styled) text into an `ImiDocument`.

What a line could be, checked in order:

    ```ini
                        ; blank line, drops comments collected so far.
    ; comment           ; or `# comment`, collected for the next entry.
    [section]           ; or `[section "section"]` in git style.
    key = "value"       ; quotes stripped, ${VAR} expanded.
    ```

Lines broken in any other way (`[section` or `key` without `=`)
are just skipped.
"""

import logging
import os
import sys
from io import StringIO
from os.path import exists, join
from typing import Mapping, Protocol
from warnings import warn

import chardet

from ..abstract import FileHandler
from ..consts import CONF_SUFFIX, DOT_DEPTH, KEY_LIMIT, ImiFlag
from .document import ImiDocument
from .model import ImiEntry
from .serializer import writestream
from .textutil import EnvLookup, expand_env, trim


class _LineReader(Protocol):
    def readline(self) -> str: ...


def _join_comment(pending: str, text: str) -> str:
    return f'{pending}\n{text}' if pending else text


def _parse_header(line: str, flags: ImiFlag) -> str | None:
    """`[name]` -> `name`, `None` if there's no closing bracket."""
    if (end := line.find(']', 1)) < 0:
        return None
    name = line[1:end].strip()
    if not flags & ImiFlag.GITSTYLE or not name.endswith('"'):
        return name
    # [section "sub"], while the quoted part equals to the section name
    # when we write it ourselves.
    if (quote := name.find('"')) == len(name) - 1:
        return name
    head, sub = name[:quote].strip(), name[quote + 1:-1]
    if not head or head == sub:
        return sub
    return f'{head}.{sub}'


def readstream(
    buf: _LineReader,
    doc: ImiDocument | None = None,
    flags: ImiFlag = ImiFlag.INISTYLE,
    lookup: EnvLookup | None = None
) -> ImiDocument:
    """读取解码好的字符串流，逐行追加到`doc`（不传则新建一个）。

    `lookup` is used to expand `${VAR}`, defaults to `os.environ.get`.
    """
    if doc is None:
        doc = ImiDocument()
    keep_comments = bool(flags & ImiFlag.COMMENTS)
    section, pending = '', ''
    lineno = 0

    while i := buf.readline():
        lineno += 1
        line = trim(i)
        if not line:
            # comments never go across blank lines.
            pending = ''
            continue

        if line[0] in ';#':
            pending = _join_comment(pending, trim(line[1:]))
            continue

        if line[0] == '[':
            if (name := _parse_header(line, flags)) is None:
                logging.debug(f'Line {lineno}: unclosed section header skipped.')
                continue
            # `[]` gets back to top level, nothing to declare.
            if name:
                doc.add_section(name, pending or None)
            section, pending = name, ''
            continue

        key, sep, val = line.partition('=')
        if not sep:
            logging.debug(f'Line {lineno}: no "=" found, skipped.')
            continue
        key, val = key.strip(), val.strip()
        if len(val) >= 2 and val[0] == '"' and val[-1] == '"':
            val = val[1:-1]

        if keep_comments:
            # `;` first, and `#` only if there's no `;`.
            for mark in ';#':
                if (pos := val.find(mark)) >= 0:
                    pending = _join_comment(pending, val[pos + 1:].strip())
                    val = val[:pos].strip()
                    break

        fullkey = f'{section}.{key}' if section else key
        if len(fullkey) > KEY_LIMIT:
            warn(f'第 {lineno} 行的键过长，已截断至 {KEY_LIMIT} 个字符：{fullkey[:32]}...')
            fullkey = fullkey[:KEY_LIMIT]
        if not flags & ImiFlag.KEEPVARS:
            val = expand_env(val, lookup)

        doc.append(ImiEntry.pair(fullkey, val, doc.dot_depth, pending or None))
        pending = ''
    return doc


class ImiParser(FileHandler[ImiDocument]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        dot_depth: int = DOT_DEPTH
    ) -> None:
        super().__init__(filename, encoding)
        self._depth = dot_depth

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < 0.8):
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            # unknown codec names come from chardet too.
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(
        self, flags: ImiFlag = ImiFlag.INISTYLE,
        doc: ImiDocument | None = None
    ) -> ImiDocument | None:
        """读取`ImiParser`实例指定的文件。

        Entries are appended to `doc` if given, otherwise to a new document.
        If the file is not readable, `None` is returned and `doc`
        is left untouched.
        """
        scratch = ImiDocument(self._depth if doc is None else doc.dot_depth)
        try:
            try:
                # when encoding is None, `open()` would fallback to system default.
                # and when encoding got wrong, fallback to `chardet`.
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    readstream(fp, scratch, flags)
            except UnicodeDecodeError:
                scratch.clear()
                readstream(self._decode_file(self._fn), scratch, flags)
        except (OSError, UnicodeDecodeError) as e:
            logging.warning(f'Config not loaded: {self._fn}\n  {e}')
            return None

        if doc is None:
            return scratch
        for i in scratch:
            doc.append(i)
        return doc

    def write(
        self, instance: ImiDocument, flags: ImiFlag = ImiFlag.INISTYLE
    ) -> bool:
        """保存到*一个*配置文件。

        Lines are written as they come, so a failure halfway
        leaves a truncated file behind.
        """
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                writestream(instance, fp, flags)
        except OSError as e:
            logging.warning(f'Config not saved: {self._fn}\n  {e}')
            return False
        return True

    def __str__(self) -> str:
        return "Config file: " + super().__str__() + f"({self._codec})"


class ImiStackLoader:
    """Read the system, user and local config of a program in turn,
    later ones override earlier ones:

        /etc/{prog}/{prog}.conf
        -> $XDG_CONFIG_HOME/{prog}/{prog}.conf (or ~/.{prog}.conf)
        -> ./.{prog}.conf
    """
    def __init__(
        self, progname: str, suffix: str = CONF_SUFFIX, *,
        encoding: str | None = None,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None
    ) -> None:
        self._prog = progname
        self._suffix = suffix
        self._codec = encoding
        self._env = os.environ if environ is None else environ
        self._platform = sys.platform if platform is None else platform

    def _user_path(self) -> str | None:
        p, name = self._prog, f'{self._prog}.{self._suffix}'
        env = self._env
        match self._platform:
            case 'win32':
                if home := env.get('APPDATA'):
                    return join(home, name)
                if home := env.get('USERPROFILE'):
                    return join(home, '.config', name)
            case 'android':
                if home := env.get('HOME'):
                    return join(home, f'.{name}')
                if home := env.get('ANDROID_APP_DIR'):
                    return join(home, 'config', name)
            case 'darwin':
                if home := env.get('HOME'):
                    return join(home, f'.{name}')
            case _:
                if home := env.get('XDG_CONFIG_HOME'):
                    return join(home, p, name)
                if home := env.get('HOME'):
                    return join(home, f'.{name}')
        return None

    def paths(self) -> list[str]:
        """Candidate files, from the lowest priority to the highest."""
        p, name = self._prog, f'{self._prog}.{self._suffix}'
        ret = [
            f'C:/ProgramData/{p}/{name}' if self._platform == 'win32'
            else f'/etc/{p}/{name}'
        ]
        if (user := self._user_path()) is not None:
            ret.append(user)
        ret.append(join('.', f'.{name}'))
        return ret

    def load(
        self, doc: ImiDocument,
        flags: ImiFlag = ImiFlag.INISTYLE,
        paths: list[str] | None = None
    ) -> int:
        """Merge every existing candidate into `doc`.

        Returns how many files got loaded.
        """
        loaded = 0
        for i in self.paths() if paths is None else paths:
            if not exists(i):
                continue
            parser = ImiParser(i, self._codec, dot_depth=doc.dot_depth)
            if (part := parser.read(flags)) is None:
                continue
            doc.merge(part, flags)
            loaded += 1
            logging.info(f'Config loaded: {i}')
        return loaded

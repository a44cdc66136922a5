# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 14:18:36
# @Author : Kariko Lin

import logging

from .consts import (
    COMMENT_SEP,
    CONF_SUFFIX,
    DOT_DEPTH,
    EXPAND_LIMIT,
    KEY_LIMIT,
    VARNAME_LIMIT,
    ImiFlag
)
from .ini import (
    ImiDocument,
    ImiEntry,
    ImiParser,
    ImiStackLoader,
    ImiStore,
    dumps,
    expand_env,
    extract_parent,
    join_list,
    merge,
    readstream,
    split_list,
    split_section,
    trim,
    writestream
)

__all__ = [
    'ImiFlag', 'DOT_DEPTH', 'EXPAND_LIMIT', 'VARNAME_LIMIT', 'KEY_LIMIT',
    'COMMENT_SEP', 'CONF_SUFFIX',
    'ImiEntry', 'ImiStore', 'ImiDocument',
    'ImiParser', 'ImiStackLoader', 'readstream',
    'dumps', 'writestream', 'merge',
    'trim', 'expand_env', 'extract_parent', 'split_section',
    'split_list', 'join_list'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

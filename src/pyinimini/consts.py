# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 14:21:08
# @Author : Kariko Lin

from enum import IntFlag


# flags only decide how things get read or written,
# the store itself always keeps flat keys.
class ImiFlag(IntFlag):
    INISTYLE = 0x0000  # [section] key = value
    GITSTYLE = 0x0001  # [section "name"] <tab>key = value
    SUBSTYLE = 0x0002  # [section.sub] key = value
    KEEPVARS = 0x0004  # leave ${VAR} as is on reading
    COMMENTS = 0x0008  # keep comments on read, write and merge


# how many dots of a flat key make up its section path.
DOT_DEPTH = 2

# boundaries below are cut, never grown.
EXPAND_LIMIT = 8191
VARNAME_LIMIT = 255
KEY_LIMIT = 1023

COMMENT_SEP = ' | '
CONF_SUFFIX = 'conf'

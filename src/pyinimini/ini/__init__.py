# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 17:05:11
# @Author : Kariko Lin

from .model import ImiEntry, ImiStore
from .document import ImiDocument
from .merge import merge
from .parser import ImiParser, ImiStackLoader, readstream
from .serializer import dumps, iterlines, writestream
from .textutil import (
    expand_env,
    extract_parent,
    join_list,
    split_list,
    split_section,
    trim
)

# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 16:20:13
# @Author : Kariko Lin

from .accessor import Ini, to_ini_value
from .consts import GLOBAL_SECTION, STR_MAX_LENGTH
from .errors import (
    CapacityError,
    IniError,
    IniIOError,
    IniSyntaxError,
    IniTypeError,
    KeyNotFound
)
from .exchange import IniJsonParser, IniYamlParser
from .model import (
    Float,
    IniDocument,
    IniKey,
    IniSection,
    IniValue,
    Integer,
    Text
)
from .parser import IniParser

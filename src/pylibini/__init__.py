# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 16:21:40
# @Author : Kariko Lin

from .ini import (
    GLOBAL_SECTION,
    STR_MAX_LENGTH,
    CapacityError,
    Float,
    Ini,
    IniDocument,
    IniError,
    IniIOError,
    IniJsonParser,
    IniKey,
    IniParser,
    IniSection,
    IniSyntaxError,
    IniTypeError,
    IniValue,
    IniYamlParser,
    Integer,
    KeyNotFound,
    Text,
)

__all__ = [
    'Ini', 'IniDocument', 'IniSection', 'IniKey',
    'IniValue', 'Integer', 'Float', 'Text',
    'IniParser', 'IniJsonParser', 'IniYamlParser',
    'IniError', 'IniIOError', 'IniSyntaxError', 'CapacityError',
    'KeyNotFound', 'IniTypeError',
    'GLOBAL_SECTION', 'STR_MAX_LENGTH',
]

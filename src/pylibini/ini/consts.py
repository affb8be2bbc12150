# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/18 14:05:37
# @Author : Kariko Lin

from enum import Enum

# fixed buffer size of names and text values, terminator included.
STR_MAX_LENGTH = 128
STR_MAX_CONTENT = STR_MAX_LENGTH - 1

# C `int`.
INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

GLOBAL_SECTION = ''
DEFAULT_ENCODING = 'utf-8'


class IniMark(int, Enum):
    COMMENT = ord(';')
    SECTION_BEGIN = ord('[')
    SECTION_END = ord(']')
    PAIRING = ord('=')
    NEWLINE = ord('\n')
    CARRIAGE = ord('\r')
    FLOAT_POINT = ord('.')


# C locale <ctype.h> classes.
WHITESPACE = frozenset(b' \t\n\v\f\r')
CONTROL = frozenset(range(0x20)) | {0x7f}
ALPHABETIC = frozenset(
    b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz')

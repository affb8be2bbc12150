# -*- encoding: utf-8 -*-
# @File   : accessor.py
# @Time   : 2026/10/18 15:21:48
# @Author : Kariko Lin

import warnings
from os import PathLike
from typing import TypeVar

from .consts import DEFAULT_ENCODING
from .errors import IniTypeError
from .model import Float, IniDocument, IniValue, Integer, Text
from .parser import IniParser

PyValue = int | float | str
D = TypeVar('D')


def to_ini_value(value: IniValue | PyValue) -> IniValue:
    """Wrap a plain `int`, `float` or `str` into its value variant."""
    match value:
        case Integer() | Float() | Text():
            return value
        case bool():
            raise TypeError('bool is not an INI value, use 0 or 1.')
        case int():
            return Integer(value)
        case float():
            return Float(value)
        case str():
            return Text(value)
        case _:
            raise TypeError(
                f'unsupported INI value type: {type(value).__name__}')


class Ini:
    """Typed get/set access to an `IniDocument`.

    ```python
    ini = Ini()
    ini.set('', 'GlobalKey', 1)
    ini.set('Person.Attributes', 'Name', 'John')
    ini.serialize('my_file.ini')
    ```

    `get()` requires the key to exist (`KeyNotFound` otherwise),
    check with `exists()` or use `get_opt()` when unsure.
    """

    def __init__(self, document: IniDocument | None = None) -> None:
        self._doc = IniDocument() if document is None else document

    @property
    def document(self) -> IniDocument:
        return self._doc

    def set(self, section: str, key: str, value: IniValue | PyValue) -> None:
        """Add a key. It *never replaces* an existing one of the same name,
        and `get()` keeps returning the first."""
        value = to_ini_value(value)
        if self._doc.exists(section, key):
            warnings.warn(
                f'[{section}] already has key "{key}", the new value is '
                'appended and will be shadowed by the old one on get().')
        self._doc.add_or_append_key(section, key, value)

    def exists(self, section: str, key: str) -> bool:
        return self._doc.exists(section, key)

    def get_value(self, section: str, key: str) -> IniValue:
        return self._doc.get(section, key)

    def get(self, section: str, key: str) -> PyValue:
        return self._doc.get(section, key).value

    def get_or_absent(self, section: str, key: str) -> IniValue | None:
        return self._doc.get_or_absent(section, key)

    def get_opt(
        self, section: str, key: str, default: D | None = None
    ) -> PyValue | D | None:
        if (value := self._doc.get_or_absent(section, key)) is None:
            return default
        return value.value

    def get_int(self, section: str, key: str) -> int:
        match self._doc.get(section, key):
            case Integer(value=v):
                return v
            case other:
                raise IniTypeError(
                    f'[{section}] "{key}" holds {other!r}, not an Integer')

    def get_float(self, section: str, key: str) -> float:
        match self._doc.get(section, key):
            case Float(value=v):
                return v
            case Integer(value=v):
                return float(v)
            case other:
                raise IniTypeError(
                    f'[{section}] "{key}" holds {other!r}, not a Float')

    def get_str(self, section: str, key: str) -> str:
        match self._doc.get(section, key):
            case Text(value=v):
                return v
            case other:
                raise IniTypeError(
                    f'[{section}] "{key}" holds {other!r}, not a Text')

    def serialize(
        self, path: str | PathLike[str],
        encoding: str | None = None, *,
        blank_lines: int = 1
    ) -> None:
        IniParser(path, encoding).write(self._doc, blank_lines=blank_lines)

    def parse(
        self, path: str | PathLike[str], encoding: str | None = None
    ) -> None:
        """Read an INI file *into* this instance, after what it has."""
        IniParser(path, encoding).read(self._doc)

    def to_bytes(self, encoding: str = DEFAULT_ENCODING) -> bytes:
        return IniParser.serialize(self._doc, encoding)

    @classmethod
    def from_bytes(
        cls, buf: bytes, encoding: str = DEFAULT_ENCODING
    ) -> 'Ini':
        return cls(IniParser.parse(buf, encoding=encoding))

# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/18 14:16:20
# @Author : Kariko Lin

"""
Basically INI structure: a document of sections, sections of typed keys.

Nothing here is unique by name. Lookups just return the first match,
which is also what `IniParser` relies on for repeated `[section]` headers.
"""

from collections.abc import Sequence
from dataclasses import InitVar, dataclass
from struct import pack, unpack
from typing import Iterator

from .consts import (
    DEFAULT_ENCODING,
    GLOBAL_SECTION,
    INT_MAX,
    INT_MIN,
    STR_MAX_CONTENT
)
from .errors import CapacityError, KeyNotFound


def check_capacity(
    text: str, what: str, encoding: str = DEFAULT_ENCODING
) -> str:
    """Names and text values are counted in bytes of the file encoding,
    UTF-8 for whatever is built in memory."""
    if not isinstance(text, str):
        raise TypeError(f'{what} should be str, got {type(text).__name__}')
    if (size := len(text.encode(encoding))) > STR_MAX_CONTENT:
        raise CapacityError(
            f'{what} too long: {size} bytes, '
            f'at most {STR_MAX_CONTENT} allowed ({text[:16]!r}...)')
    return text


@dataclass(frozen=True)
class Integer:
    value: int

    def __post_init__(self) -> None:
        # bool is an int, but never an INI integer.
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f'Integer expects int, got {self.value!r}')
        if not INT_MIN <= self.value <= INT_MAX:
            raise CapacityError(f'integer out of range: {self.value}')

    def __str__(self) -> str:
        return '%d' % self.value


@dataclass(frozen=True)
class Float:
    """Single precision. The value gets rounded to binary32 on creation."""
    value: float

    def __post_init__(self) -> None:
        if (isinstance(self.value, bool)
                or not isinstance(self.value, (int, float))):
            raise TypeError(f'Float expects float, got {self.value!r}')
        try:
            single = unpack('<f', pack('<f', self.value))[0]
        except OverflowError as e:
            raise CapacityError(f'float out of range: {self.value}') from e
        object.__setattr__(self, 'value', single)

    def __str__(self) -> str:
        return '%f' % self.value


@dataclass(frozen=True)
class Text:
    value: str
    encoding: InitVar[str] = DEFAULT_ENCODING

    def __post_init__(self, encoding: str) -> None:
        check_capacity(self.value, 'text value', encoding)

    def __str__(self) -> str:
        return self.value


IniValue = Integer | Float | Text


@dataclass
class IniKey:
    name: str
    value: IniValue
    encoding: InitVar[str] = DEFAULT_ENCODING

    def __post_init__(self, encoding: str) -> None:
        check_capacity(self.name, 'key name', encoding)
        if not isinstance(self.value, IniValue):
            raise TypeError(
                f'{self.name}: expecting Integer, Float or Text, '
                f'got {type(self.value).__name__}')

    def __str__(self) -> str:
        return f'{self.name}={self.value}'


class IniSection(Sequence[IniKey]):
    """Keys in insertion order. Duplicated names are kept as is."""

    def __init__(
        self, name: str, encoding: str = DEFAULT_ENCODING
    ) -> None:
        self._name = check_capacity(name, 'section name', encoding)
        self._keys: list[IniKey] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_global(self) -> bool:
        return self._name == GLOBAL_SECTION

    def __getitem__(self, index: int) -> IniKey:
        return self._keys[index]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[IniKey]:
        return iter(self._keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return self._name == other._name and self._keys == other._keys

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._keys))

    def find_key(self, name: str) -> IniKey | None:
        for key in self._keys:
            if key.name == name:
                return key
        return None

    def append(self, name: str, value: IniValue) -> IniKey:
        return self.append_key(IniKey(name, value))

    def append_key(self, key: IniKey) -> IniKey:
        """Append an already checked key, e.g. one built by the parser
        against the file encoding."""
        if not isinstance(key, IniKey):
            raise TypeError(f'expecting IniKey, got {type(key).__name__}')
        self._keys.append(key)
        return key


class IniDocument(Sequence[IniSection]):
    """A whole INI file: sections in the order they were added or read.

    The global (unnamed) section is just a section named `''`.
    """

    def __init__(self) -> None:
        self._sections: list[IniSection] = []

    def __getitem__(self, index: int) -> IniSection:
        return self._sections[index]

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[IniSection]:
        return iter(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return '<IniDocument { .sections = %r }>' % self._sections

    def find_section(self, name: str) -> IniSection | None:
        for section in self._sections:
            if section.name == name:
                return section
        return None

    def append_section(
        self, name: str, encoding: str = DEFAULT_ENCODING
    ) -> IniSection:
        """Always appends a brand new section, even if the name exists."""
        section = IniSection(name, encoding)
        self._sections.append(section)
        return section

    def add_or_append_key(
        self, section_name: str, key_name: str, value: IniValue
    ) -> IniKey:
        """Append a key to the first section called `section_name`,
        creating that section at the end if there is none yet."""
        # validate before growing the document.
        key = IniKey(key_name, value)
        if (section := self.find_section(section_name)) is None:
            section = self.append_section(section_name)
        return section.append_key(key)

    def find_key(self, section_name: str, key_name: str) -> IniKey | None:
        if (section := self.find_section(section_name)) is None:
            return None
        return section.find_key(key_name)

    def exists(self, section_name: str, key_name: str) -> bool:
        return self.find_key(section_name, key_name) is not None

    def get(self, section_name: str, key_name: str) -> IniValue:
        if (key := self.find_key(section_name, key_name)) is None:
            raise KeyNotFound(section_name, key_name)
        return key.value

    def get_or_absent(
        self, section_name: str, key_name: str
    ) -> IniValue | None:
        try:
            return self.get(section_name, key_name)
        except KeyNotFound:
            return None

    def triples(self) -> Iterator[tuple[str, str, IniValue]]:
        """Walk every `(section, key, value)` in document order."""
        for section in self._sections:
            for key in section:
                yield section.name, key.name, key.value

    def _extend(self, other: 'IniDocument') -> None:
        """for IniParser.parse(), moves sections of `other` into self."""
        self._sections.extend(other._sections)
        other._sections = []

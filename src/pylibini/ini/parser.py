# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/18 14:40:05
# @Author : Kariko Lin

"""Reads and writes the plain `name=value` INI dialect:

```ini
GlobalKey=1     ; keys before any header go to the global section.

[Person.Attributes]
Name=John
Age=32
RandomNum=654.955994
```

There is no type marker in the file. On reading, a value with any
letter or whitespace is text, otherwise a `.` makes it a float,
otherwise it's an integer.

Nothing gets escaped on writing either, so `=`, `[`, `]`, `;` or line
breaks inside names and values won't survive a round trip.
"""

import logging
from enum import Enum, auto
from io import StringIO
from os import PathLike
from re import compile as regex

import chardet

from ..abstract import FileHandler
from .consts import (
    ALPHABETIC,
    CONTROL,
    DEFAULT_ENCODING,
    GLOBAL_SECTION,
    STR_MAX_CONTENT,
    WHITESPACE,
    IniMark,
)
from .errors import CapacityError, IniIOError, IniSyntaxError
from .model import (
    Float,
    IniDocument,
    IniKey,
    IniSection,
    IniValue,
    Integer,
    Text,
    check_capacity
)

_logger = logging.getLogger(__name__)

# what atoi() / atof() would take, no exponent since letters mean text.
_INT_PREFIX = regex(rb'[+-]?\d+')
_FLOAT_PREFIX = regex(rb'[+-]?(?:\d+(?:\.\d*)?|\.\d+)')


class _State(Enum):
    TOP = auto()
    COMMENT = auto()
    KEY_NAME = auto()
    VALUE = auto()
    SECTION_NAME = auto()
    DONE = auto()


class _IniScanner:
    """One-shot state machine over a whole INI buffer."""

    def __init__(self, buf: bytes, encoding: str) -> None:
        self._buf = buf
        self._codec = encoding
        self._pos = 0
        self._doc = IniDocument()
        self._current: IniSection | None = None
        self._key_name = ''

    def run(self) -> IniDocument:
        state = _State.TOP
        while True:
            match state:
                case _State.TOP:
                    state = self._top()
                case _State.COMMENT:
                    state = self._comment()
                case _State.KEY_NAME:
                    state = self._key()
                case _State.VALUE:
                    state = self._value()
                case _State.SECTION_NAME:
                    state = self._section()
                case _State.DONE:
                    return self._doc

    def _top(self) -> _State:
        while self._pos < len(self._buf):
            c = self._buf[self._pos]
            if c in WHITESPACE:
                self._pos += 1
                continue
            if c in CONTROL:
                # NUL-padded buffers used to end this way.
                _logger.debug(
                    'control byte 0x%02x at offset %d, stop reading.',
                    c, self._pos)
                return _State.DONE
            match c:
                case IniMark.COMMENT:
                    self._pos += 1
                    return _State.COMMENT
                case IniMark.SECTION_BEGIN:
                    self._pos += 1
                    return _State.SECTION_NAME
                case _ if c in ALPHABETIC:
                    return _State.KEY_NAME
                case _:
                    raise IniSyntaxError('unexpected byte', self._pos, c)
        return _State.DONE

    def _comment(self) -> _State:
        while self._pos < len(self._buf):
            c = self._buf[self._pos]
            if c == IniMark.NEWLINE:
                self._pos += 1
                return _State.TOP
            # unlike Top, tabs and the CR of CRLF don't end the parse here.
            if c in CONTROL and c not in WHITESPACE:
                _logger.debug(
                    'control byte 0x%02x in comment at offset %d, '
                    'stop reading.', c, self._pos)
                return _State.DONE
            self._pos += 1
        return _State.DONE

    def _key(self) -> _State:
        start = self._pos
        self._key_name = self._decode(
            self._scan_until(IniMark.PAIRING, 'key name'), start)
        return _State.VALUE

    def _section(self) -> _State:
        start = self._pos
        name = self._decode(
            self._scan_until(IniMark.SECTION_END, 'section name'), start)
        # never merged into an earlier section of the same name.
        self._current = self._doc.append_section(name, self._codec)
        return _State.TOP

    def _value(self) -> _State:
        start = self._pos
        end = self._buf.find(IniMark.NEWLINE, start)
        if end < 0:
            end = len(self._buf)
        raw = self._buf[start:end]
        self._pos = end + 1
        # CRLF files: a trailing CR is not part of the value.
        if raw and raw[-1] == IniMark.CARRIAGE:
            raw = raw[:-1]
        self._check_capacity(raw, 'value', start)

        value = self._classify(raw, start)
        if self._current is None:
            self._current = self._doc.append_section(GLOBAL_SECTION)
        self._current.append_key(IniKey(self._key_name, value, self._codec))
        return _State.TOP

    def _scan_until(self, stop: IniMark, what: str) -> bytes:
        start = self._pos
        end = self._buf.find(stop, start)
        if end < 0:
            raise IniSyntaxError(
                f'unterminated {what}, expecting "{chr(stop)}"', start)
        raw = self._buf[start:end]
        self._check_capacity(raw, what, start)
        self._pos = end + 1
        return raw

    def _classify(self, raw: bytes, offset: int) -> IniValue:
        if any(c in WHITESPACE or c in ALPHABETIC for c in raw):
            return Text(self._decode(raw, offset), self._codec)
        if IniMark.FLOAT_POINT in raw:
            return Float(float(self._number(_FLOAT_PREFIX, raw, offset)))
        return Integer(int(self._number(_INT_PREFIX, raw, offset)))

    @staticmethod
    def _number(pattern, raw: bytes, offset: int) -> bytes:
        # lenient like atoi/atof: leading number only, 0 for none.
        m = pattern.match(raw)
        if m is None:
            if raw:
                _logger.warning(
                    'value %r at offset %d is not a number, read as 0.',
                    raw, offset)
            return b'0'
        if m.end() != len(raw):
            _logger.warning(
                'value %r at offset %d has trailing garbage, read as %r.',
                raw, offset, m.group())
        return m.group()

    @staticmethod
    def _check_capacity(raw: bytes, what: str, offset: int) -> None:
        if len(raw) > STR_MAX_CONTENT:
            raise CapacityError(
                f'{what} at offset {offset} too long: {len(raw)} bytes, '
                f'at most {STR_MAX_CONTENT} allowed')

    def _decode(self, raw: bytes, offset: int) -> str:
        try:
            return raw.decode(self._codec)
        except UnicodeDecodeError as e:
            raise IniSyntaxError(
                f'not decodable as {self._codec}',
                offset + e.start, raw[e.start]) from e


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        """`encoding=None` lets `chardet` guess it on reading,
        and means UTF-8 on writing."""
        super().__init__(filename, encoding)

    @staticmethod
    def parse(
        buf: bytes,
        ins: IniDocument | None = None,
        encoding: str = DEFAULT_ENCODING
    ) -> IniDocument:
        """Parse a whole INI buffer.

        If `ins` is given, the sections read are appended to it,
        but only when the whole buffer parsed fine.
        A failed parse raises and leaves nothing behind.
        """
        doc = _IniScanner(bytes(buf), encoding).run()
        _logger.debug(
            'parsed %d bytes into %d sections.', len(buf), len(doc))
        if ins is None:
            return doc
        ins._extend(doc)
        return ins

    @staticmethod
    def serialize(
        doc: IniDocument,
        encoding: str = DEFAULT_ENCODING, *,
        blank_lines: int = 1
    ) -> bytes:
        """Render `doc` as INI text: `[name]` headers (none for the
        global section), one `name=value` per key, then blank line(s).

        Names and text values must fit in `encoding` too, or
        `CapacityError` is raised.
        """
        buf = StringIO()
        for section in doc:
            if not section.is_global:
                check_capacity(section.name, 'section name', encoding)
                buf.write(f'{section}\n')
            for key in section:
                check_capacity(key.name, 'key name', encoding)
                if isinstance(key.value, Text):
                    check_capacity(key.value.value, 'text value', encoding)
                buf.write(f'{key}\n')
            buf.write('\n' * blank_lines)
        return buf.getvalue().encode(encoding)

    @staticmethod
    def _guess_codec(raw: bytes) -> str:
        guess = chardet.detect(raw)
        codec = guess['encoding']
        if codec is None or guess['confidence'] < 0.8:
            codec = DEFAULT_ENCODING
        # fallbacks
        try:
            raw.decode(codec)
        except (UnicodeDecodeError, LookupError):
            return 'latin-1'
        return codec

    def read(self, ins: IniDocument | None = None) -> IniDocument:
        """Read the file given to this `IniParser`.

        The file is read as a whole before parsing.
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            _logger.warning('unable to read %s: %s', self._fn, e)
            raise IniIOError(f'unable to read {self._fn}: {e}') from e

        codec = self._codec or self._guess_codec(raw)
        _logger.debug('reading %s as %s.', self._fn, codec)
        return self.parse(raw, ins, codec)

    def write(
        self, instance: IniDocument, *, blank_lines: int = 1
    ) -> None:
        """Save to *one* INI file, replacing whatever was there."""
        raw = self.serialize(
            instance, self._codec or DEFAULT_ENCODING,
            blank_lines=blank_lines)
        try:
            with open(self._fn, 'wb') as fp:
                fp.write(raw)
        except OSError as e:
            _logger.warning('unable to write %s: %s', self._fn, e)
            raise IniIOError(f'unable to write {self._fn}: {e}') from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__()

# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/18 14:09:52
# @Author : Kariko Lin


class IniError(Exception):
    """Base of everything this package raises on purpose."""
    pass


class IniIOError(IniError, OSError):
    """An INI source or destination could not be opened, read or written."""
    pass


class IniSyntaxError(IniError, ValueError):
    """Unexpected byte, or a name scan that never got terminated."""

    def __init__(self, message: str, offset: int, byte: int | None = None):
        self.offset = offset
        self.byte = byte
        if byte is not None:
            message = f'{message}: byte 0x{byte:02x} at offset {offset}'
        else:
            message = f'{message} (offset {offset})'
        super().__init__(message)


class CapacityError(IniError, ValueError):
    """Name or value does not fit the format's fixed limits."""
    pass


class KeyNotFound(IniError, KeyError):
    def __init__(self, section: str, key: str) -> None:
        self.section = section
        self.key = key
        super().__init__(f'[{section}] has no key "{key}"')

    # KeyError would repr() the message otherwise.
    def __str__(self) -> str:
        return self.args[0]


class IniTypeError(IniError, TypeError):
    """Typed getter called on a key holding another value variant."""
    pass

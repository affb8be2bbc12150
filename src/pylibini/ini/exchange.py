# -*- encoding: utf-8 -*-
# @File   : exchange.py
# @Time   : 2026/10/18 16:02:30
# @Author : Kariko Lin

"""JSON & YAML views of an `IniDocument`.

Unlike INI text, both keep the value types explicit, so a float without
fraction digits or a numeric-looking string comes back as it went out.
Repeated sections and keys are kept, in order:

```yaml
- section: ''
  keys:
  - GlobalKey: 1
- section: Person.Attributes
  keys:
  - Name: John
```
"""

import json
import logging
from abc import abstractmethod
from os import PathLike
from typing import Any, TypedDict

import yaml

from ..abstract import FileHandler
from .errors import IniError, IniIOError
from .model import Float, IniDocument, IniValue, Integer, Text

_logger = logging.getLogger(__name__)


class _SectionRecord(TypedDict):
    section: str
    keys: list[dict[str, int | float | str]]


def _to_records(doc: IniDocument) -> list[_SectionRecord]:
    return [
        _SectionRecord(
            section=section.name,
            keys=[{key.name: key.value.value} for key in section])
        for section in doc
    ]


def _to_value(raw: Any, where: str) -> IniValue:
    match raw:
        case bool():
            pass
        case int():
            return Integer(raw)
        case float():
            return Float(raw)
        case str():
            return Text(raw)
    raise IniError(f'{where}: {raw!r} is not an int, float or str.')


def _from_records(src: Any) -> IniDocument:
    if not isinstance(src, list):
        raise IniError('expecting a list of section records.')
    ret = IniDocument()
    for i, record in enumerate(src):
        if (not isinstance(record, dict)
                or not isinstance(record.get('section'), str)):
            raise IniError(f'record #{i} is not a section record.')
        section = ret.append_section(record['section'])
        for pair in record.get('keys') or []:
            if not isinstance(pair, dict) or len(pair) != 1:
                raise IniError(
                    f'{section}: key records are single-entry mappings, '
                    f'got {pair!r}.')
            (name, raw), = pair.items()
            section.append(str(name), _to_value(raw, f'{section} {name}'))
    return ret


class _ExchangeParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    @abstractmethod
    def _load(self, fp) -> Any:
        raise NotImplementedError

    @abstractmethod
    def _dump(self, records: list[_SectionRecord], fp) -> None:
        raise NotImplementedError

    def read(self) -> IniDocument:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                src = self._load(fp)
        except OSError as e:
            _logger.warning('unable to read %s: %s', self._fn, e)
            raise IniIOError(f'unable to read {self._fn}: {e}') from e
        except UnicodeDecodeError as e:
            raise IniError(f'{self._fn} is not {self._codec}: {e}') from e
        return _from_records(src)

    def write(self, instance: IniDocument) -> None:
        records = _to_records(instance)
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                self._dump(records, fp)
        except OSError as e:
            _logger.warning('unable to write %s: %s', self._fn, e)
            raise IniIOError(f'unable to write {self._fn}: {e}') from e


class IniJsonParser(_ExchangeParser):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8', *, indent: int = 2
    ) -> None:
        super().__init__(filename, encoding)
        self._indent = indent

    def _load(self, fp) -> Any:
        try:
            return json.load(fp)
        except json.JSONDecodeError as e:
            raise IniError(f'{self._fn} is not valid JSON: {e}') from e

    def _dump(self, records: list[_SectionRecord], fp) -> None:
        json.dump(records, fp, ensure_ascii=False, indent=self._indent)


class IniYamlParser(_ExchangeParser):
    def _load(self, fp) -> Any:
        try:
            return yaml.safe_load(fp)
        except yaml.YAMLError as e:
            raise IniError(f'{self._fn} is not valid YAML: {e}') from e

    def _dump(self, records: list[_SectionRecord], fp) -> None:
        yaml.safe_dump(
            records, fp, allow_unicode=True, sort_keys=False)

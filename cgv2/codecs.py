"""
cgv2 Value Codecs
Decoding and encoding strategies for the cgroup v2 interface file formats

Every interface file is one of a handful of shapes:

- Scalar:       one value, e.g. ``cpu.weight`` -> ``100``
- SpaceList:    whitespace separated values, e.g. ``cgroup.controllers``
- NewlineList:  one value per line, e.g. ``cgroup.procs``
- FlatKeyed:    ``key value`` per line, e.g. ``cpu.stat``
- NestedKeyed:  ``key1 k=v k=v`` per line, e.g. ``io.stat``

A codec is built from a parse callable (``str -> T``) that raises
MalformedField on bad input. Keyed shapes decode into record types derived
from KeyedRecord.
"""

import dataclasses
import logging
from typing import Any, Callable, ClassVar, Dict, Generic, List, Type, TypeVar

from .common import parse_uint
from .exceptions import EmptyFile, MalformedField

logger = logging.getLogger('cgv2.codecs')

T = TypeVar('T')
K = TypeVar('K')
R = TypeVar('R', bound='KeyedRecord')


class KeyedRecord:
    """Capability shared by every fixed-shape keyed record

    Subclasses are frozen dataclasses whose field defaults form the
    all-zero record, and declare ``FIELDS`` mapping each kernel key to the
    parser of its value. Kernel keys are the dataclass field names.
    """

    FIELDS: ClassVar[Dict[str, Callable[[str], Any]]] = {}

    @classmethod
    def default(cls: Type[R]) -> R:
        return cls()

    def set_field(self: R, key: str, raw: str) -> R:
        """Return a copy with ``key`` set from ``raw``; unknown keys are a no-op"""
        parse = self.FIELDS.get(key)
        if parse is None:
            return self
        return dataclasses.replace(self, **{key: parse(raw)})


def _strip_newline(text: str) -> str:
    return text[:-1] if text.endswith('\n') else text


class Scalar(Generic[T]):
    """Single-value files"""

    def __init__(self, parse: Callable[[str], T], format: Callable[[T], str] = str):
        self.parse = parse
        self.format = format

    def decode(self, text: str, source: str = "") -> T:
        content = _strip_newline(text)
        if not content:
            raise EmptyFile(source)
        return self.parse(content)

    def encode(self, value: T) -> str:
        return self.format(value)


class SpaceList(Generic[T]):
    """Whitespace separated values; tokens that fail to decode are dropped"""

    def __init__(self, parse: Callable[[str], T]):
        self.parse = parse

    def _tokens(self, text: str) -> List[str]:
        return text.split()

    def decode(self, text: str, source: str = "") -> List[T]:
        values = []
        for token in self._tokens(text):
            try:
                values.append(self.parse(token))
            except MalformedField as e:
                logger.debug(f"Discarding token {token!r} in {source or 'list'}: {e}")
        return values


class NewlineList(SpaceList[T]):
    """One value per line; blank lines are skipped, bad lines dropped"""

    def _tokens(self, text: str) -> List[str]:
        return [line for line in text.split('\n') if line]


def _flat_lines(text: str):
    for line in text.split('\n'):
        if not line.strip():
            break
        yield line.split()


class FlatKeyed(Generic[R]):
    """``key value`` lines decoded into a fixed-shape record"""

    def __init__(self, record: Type[R]):
        self.record = record

    def decode(self, text: str, source: str = "") -> R:
        record = self.record.default()
        for parts in _flat_lines(text):
            key = parts[0]
            if key not in record.FIELDS:
                continue
            if len(parts) != 2:
                raise MalformedField(' '.join(parts), f"expected '{key} <value>'")
            record = record.set_field(key, parts[1])
        return record


class FlatKeyedMap:
    """``key value`` lines decoded into an open mapping of integers"""

    def __init__(self, parse: Callable[[str], Any] = parse_uint):
        self.parse = parse

    def decode(self, text: str, source: str = "") -> Dict[str, Any]:
        result = {}
        for parts in _flat_lines(text):
            if len(parts) != 2:
                raise MalformedField(' '.join(parts), "expected '<key> <value>'")
            key, value = parts
            result[key] = self.parse(value)
        return result


def decode_inline(record: R, segments: List[str]) -> R:
    """Apply ``k=v`` segments to a record, ignoring unrecognized keys"""
    for segment in segments:
        key, sep, value = segment.partition('=')
        if key not in record.FIELDS:
            continue
        if not sep:
            raise MalformedField(segment, f"expected '{key}=<value>'")
        record = record.set_field(key, value)
    return record


class NestedKeyed(Generic[K, R]):
    """``key1 k=v k=v ...`` lines decoded into a mapping of records"""

    def __init__(self, parse_key: Callable[[str], K], record: Type[R]):
        self.parse_key = parse_key
        self.record = record

    def decode(self, text: str, source: str = "") -> Dict[K, R]:
        result = {}
        for parts in _flat_lines(text):
            key = self.parse_key(parts[0])
            result[key] = decode_inline(self.record.default(), parts[1:])
        return result

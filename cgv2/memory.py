"""
cgv2 Memory Controller
Typed accessors for the memory.* interface files
"""

from dataclasses import dataclass
from typing import Dict, Union

from .base import CGroupView
from .codecs import FlatKeyed, FlatKeyedMap, KeyedRecord, Scalar
from .common import Max, format_flag, parse_flag, parse_uint
from .psi import MemoryPressure

MaxLike = Union[Max, int, None]


@dataclass(frozen=True)
class Event(KeyedRecord):
    """memory.events and memory.events.local"""
    low: int = 0
    high: int = 0
    max: int = 0
    oom: int = 0
    oom_kill: int = 0

    FIELDS = {
        'low': parse_uint,
        'high': parse_uint,
        'max': parse_uint,
        'oom': parse_uint,
        'oom_kill': parse_uint,
    }


@dataclass(frozen=True)
class SwapEvent(KeyedRecord):
    """memory.swap.events"""
    high: int = 0
    max: int = 0
    fail: int = 0

    FIELDS = {
        'high': parse_uint,
        'max': parse_uint,
        'fail': parse_uint,
    }


BYTES = Scalar(parse_uint)
LIMIT = Scalar(Max.parse, Max.format)
FLAG = Scalar(parse_flag, format_flag)
EVENTS = FlatKeyed(Event)
SWAP_EVENTS = FlatKeyed(SwapEvent)
STAT = FlatKeyedMap()
PRESSURE = Scalar(MemoryPressure.parse)


class Memory(CGroupView):
    """Memory controller interface files

    All amounts are in bytes. Writes of byte counts are rounded up to the
    page size by the kernel.
    """

    def current(self) -> int:
        return self._read("memory.current", BYTES)

    def min(self) -> int:
        """Hard memory protection"""
        return self._read("memory.min", BYTES)

    def set_min(self, min: int):
        self._write("memory.min", BYTES, min)

    def low(self) -> int:
        """Best-effort memory protection"""
        return self._read("memory.low", BYTES)

    def set_low(self, low: int):
        self._write("memory.low", BYTES, low)

    def high(self) -> Max:
        """Throttle limit"""
        return self._read("memory.high", LIMIT)

    def set_high(self, high: MaxLike):
        self._write("memory.high", LIMIT, Max.coerce(high))

    def max(self) -> Max:
        """Hard limit; the OOM killer is invoked past it"""
        return self._read("memory.max", LIMIT)

    def set_max(self, max: MaxLike):
        self._write("memory.max", LIMIT, Max.coerce(max))

    def oom_group(self) -> bool:
        return self._read("memory.oom.group", FLAG)

    def set_oom_group(self, enabled: bool):
        """Make the OOM killer treat the cgroup as one unit"""
        self._write("memory.oom.group", FLAG, enabled)

    def events(self) -> Event:
        return self._read("memory.events", EVENTS)

    def events_local(self) -> Event:
        return self._read("memory.events.local", EVENTS)

    def stat(self) -> Dict[str, int]:
        return self._read("memory.stat", STAT)

    def swap_current(self) -> int:
        return self._read("memory.swap.current", BYTES)

    def swap_high(self) -> Max:
        return self._read("memory.swap.high", LIMIT)

    def set_swap_high(self, high: MaxLike):
        self._write("memory.swap.high", LIMIT, Max.coerce(high))

    def swap_max(self) -> Max:
        return self._read("memory.swap.max", LIMIT)

    def set_swap_max(self, max: MaxLike):
        self._write("memory.swap.max", LIMIT, Max.coerce(max))

    def swap_events(self) -> SwapEvent:
        return self._read("memory.swap.events", SWAP_EVENTS)

    def pressure(self) -> MemoryPressure:
        return self._read("memory.pressure", PRESSURE)

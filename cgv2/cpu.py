"""
cgv2 CPU Controller
Typed accessors for the cpu.* interface files
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from .base import CGroupView
from .codecs import FlatKeyed, KeyedRecord, Scalar
from .common import Max, parse_int, parse_uint
from .exceptions import MalformedField
from .psi import CPUPressure

logger = logging.getLogger('cgv2.cpu')


@dataclass(frozen=True)
class Stat(KeyedRecord):
    """cpu.stat"""
    usage_usec: int = 0
    user_usec: int = 0
    system_usec: int = 0

    # Reported only while the cpu controller is enabled
    nr_periods: int = 0
    nr_throttled: int = 0
    throttled_usec: int = 0

    FIELDS = {
        'usage_usec': parse_uint,
        'user_usec': parse_uint,
        'system_usec': parse_uint,
        'nr_periods': parse_uint,
        'nr_throttled': parse_uint,
        'throttled_usec': parse_uint,
    }


@dataclass(frozen=True)
class CPUMax:
    """cpu.max: bandwidth quota and optional period, in microseconds"""
    max: Max = field(default_factory=Max)
    period: Optional[int] = None

    @classmethod
    def parse(cls, text: str) -> 'CPUMax':
        parts = text.split()
        if not parts or len(parts) > 2:
            raise MalformedField(text, "expected '<max> [<period>]'")
        period = parse_uint(parts[1]) if len(parts) == 2 else None
        return cls(Max.parse(parts[0]), period)

    def format(self) -> str:
        if self.period is None:
            return self.max.format()
        return f"{self.max.format()} {self.period}"

    def __str__(self) -> str:
        return self.format()


STAT = FlatKeyed(Stat)
WEIGHT = Scalar(parse_uint)
WEIGHT_NICE = Scalar(parse_int)
CPU_MAX = Scalar(CPUMax.parse, CPUMax.format)
PRESSURE = Scalar(CPUPressure.parse)


class Cpu(CGroupView):
    """CPU controller interface files"""

    def stat(self) -> Stat:
        return self._read("cpu.stat", STAT)

    def weight(self) -> int:
        """Relative weight in [1, 10000], default 100"""
        return self._read("cpu.weight", WEIGHT)

    def set_weight(self, weight: int):
        self._write("cpu.weight", WEIGHT, weight)

    def weight_nice(self) -> int:
        """Weight expressed as a nice value in [-20, 19]"""
        return self._read("cpu.weight.nice", WEIGHT_NICE)

    def set_weight_nice(self, nice: int):
        self._write("cpu.weight.nice", WEIGHT_NICE, nice)

    def max(self) -> CPUMax:
        return self._read("cpu.max", CPU_MAX)

    def set_max(self, max: Union[Max, int, None], period: Optional[int] = None):
        """Set the bandwidth limit

        The period token is omitted when ``period`` is None and the kernel
        keeps its current period.
        """
        value = CPUMax(Max.coerce(max), period)
        logger.debug(f"Setting cpu.max of {self.path} to {value}")
        self._write("cpu.max", CPU_MAX, value)

    def pressure(self) -> CPUPressure:
        return self._read("cpu.pressure", PRESSURE)

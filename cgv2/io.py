"""
cgv2 IO Controller
Typed accessors for the io.* interface files and the root-only cost.qos
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .base import CGroupView
from .codecs import KeyedRecord, NestedKeyed, Scalar
from .common import parse_float, parse_uint
from .exceptions import MalformedField
from .psi import IOPressure


@dataclass(frozen=True)
class DeviceNumber:
    """Block device major:minor number"""
    maj: int
    min: int

    @classmethod
    def parse(cls, text: str) -> 'DeviceNumber':
        maj, sep, min = text.partition(':')
        if not sep:
            raise MalformedField(text, "expected '<maj>:<min>'")
        return cls(parse_uint(maj), parse_uint(min))

    def format(self) -> str:
        return f"{self.maj}:{self.min}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Stat(KeyedRecord):
    """Per-device line of io.stat"""
    rbytes: int = 0
    wbytes: int = 0
    rios: int = 0
    wios: int = 0
    dbytes: int = 0
    dios: int = 0

    FIELDS = {
        'rbytes': parse_uint,
        'wbytes': parse_uint,
        'rios': parse_uint,
        'wios': parse_uint,
        'dbytes': parse_uint,
        'dios': parse_uint,
    }


class Ctrl(Enum):
    """Who controls the QoS parameters

    "auto" lets the kernel tune them; setting "user" or any percentile or
    latency parameter switches to user mode.
    """
    AUTO = "auto"
    USER = "user"

    @classmethod
    def parse(cls, text: str) -> 'Ctrl':
        try:
            return cls(text)
        except ValueError:
            raise MalformedField(text, "expected 'auto' or 'user'") from None


@dataclass(frozen=True)
class CostQos(KeyedRecord):
    """Per-device line of io.cost.qos"""
    enable: int = 0  # Weight-based control enable
    ctrl: Ctrl = Ctrl.AUTO
    rpct: float = 0.0  # Read latency percentile [0, 100]
    rlat: int = 0  # Read latency threshold, usecs
    wpct: float = 0.0  # Write latency percentile [0, 100]
    wlat: int = 0  # Write latency threshold, usecs
    min: float = 0.0  # Minimum scaling percentage [1, 10000]
    max: float = 0.0  # Maximum scaling percentage [1, 10000]

    FIELDS = {
        'enable': parse_uint,
        'ctrl': Ctrl.parse,
        'rpct': parse_float,
        'rlat': parse_uint,
        'wpct': parse_float,
        'wlat': parse_uint,
        'min': parse_float,
        'max': parse_float,
    }


STAT = NestedKeyed(DeviceNumber.parse, Stat)
COST_QOS = NestedKeyed(DeviceNumber.parse, CostQos)
PRESSURE = Scalar(IOPressure.parse)


class IO(CGroupView):
    """IO controller interface files"""

    def stat(self) -> Dict[DeviceNumber, Stat]:
        return self._read("io.stat", STAT)

    def cost_qos(self) -> Dict[DeviceNumber, CostQos]:
        """Read io.cost.qos, which exists only on the root cgroup

        The kernel names this file io.cost.qos; older cgroup libraries
        looked for a bare cost.qos, which no kernel provides.
        """
        return self._read("io.cost.qos", COST_QOS)

    def pressure(self) -> IOPressure:
        return self._read("io.pressure", PRESSURE)

"""
cgv2 Pressure Stall Information
Parsing of cpu.pressure, memory.pressure and io.pressure
"""

from dataclasses import dataclass, field
from typing import Dict

from .codecs import KeyedRecord, decode_inline
from .common import parse_float, parse_uint
from .exceptions import MalformedField


@dataclass(frozen=True)
class PSIMetric(KeyedRecord):
    """One line of a pressure file ("some" or "full")"""
    key: str = ""
    avg10: float = 0.0  # 10 second average, percent
    avg60: float = 0.0  # 60 second average, percent
    avg300: float = 0.0  # 300 second average, percent
    total: int = 0  # Total stall time in microseconds

    FIELDS = {
        'avg10': parse_float,
        'avg60': parse_float,
        'avg300': parse_float,
        'total': parse_uint,
    }

    @classmethod
    def parse(cls, line: str) -> 'PSIMetric':
        parts = line.split()
        if not parts:
            raise MalformedField(line, "empty pressure line")
        return decode_inline(cls(key=parts[0]), parts[1:])


def parse_pressure_lines(text: str) -> Dict[str, PSIMetric]:
    """Parse every line of a pressure file, keyed by "some"/"full" """
    metrics = {}
    for line in text.split('\n'):
        if line.strip():
            metric = PSIMetric.parse(line)
            metrics[metric.key] = metric
    return metrics


def _require(metrics: Dict[str, PSIMetric], key: str, text: str) -> PSIMetric:
    try:
        return metrics[key]
    except KeyError:
        raise MalformedField(text, f"missing '{key}' line") from None


@dataclass(frozen=True)
class CPUPressure:
    some: PSIMetric = field(default_factory=PSIMetric)

    @classmethod
    def parse(cls, text: str) -> 'CPUPressure':
        # Newer kernels also report a "full" line for cpu, it is not modeled
        metrics = parse_pressure_lines(text)
        return cls(some=_require(metrics, 'some', text))


@dataclass(frozen=True)
class MemoryPressure:
    some: PSIMetric = field(default_factory=PSIMetric)
    full: PSIMetric = field(default_factory=PSIMetric)

    @classmethod
    def parse(cls, text: str) -> 'MemoryPressure':
        metrics = parse_pressure_lines(text)
        return cls(some=_require(metrics, 'some', text),
                   full=_require(metrics, 'full', text))


@dataclass(frozen=True)
class IOPressure(MemoryPressure):
    pass

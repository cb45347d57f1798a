"""
cgv2 PIDs Controller
Typed accessors for the pids.* interface files
"""

from dataclasses import dataclass
from typing import Union

from .base import CGroupView
from .codecs import FlatKeyed, KeyedRecord, Scalar
from .common import Max, parse_uint


@dataclass(frozen=True)
class PidsEvent(KeyedRecord):
    """pids.events: times a fork was refused by pids.max"""
    max: int = 0

    FIELDS = {'max': parse_uint}


CURRENT = Scalar(parse_uint)
LIMIT = Scalar(Max.parse, Max.format)
EVENTS = FlatKeyed(PidsEvent)


class Pids(CGroupView):
    """PIDs controller interface files"""

    def current(self) -> int:
        return self._read("pids.current", CURRENT)

    def max(self) -> Max:
        return self._read("pids.max", LIMIT)

    def set_max(self, max: Union[Max, int, None]):
        self._write("pids.max", LIMIT, Max.coerce(max))

    def events(self) -> PidsEvent:
        return self._read("pids.events", EVENTS)

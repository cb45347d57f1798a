"""
cgv2 Core Interface Files
Typed accessors for the cgroup.* files every cgroup v2 directory carries
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Union

from .base import CGroupView
from .codecs import FlatKeyed, KeyedRecord, NewlineList, Scalar, SpaceList
from .common import Max, format_flag, parse_flag, parse_uint
from .controller import ControllerType, subtree_control_command
from .cpu import Cpu
from .exceptions import MalformedField
from .io import IO
from .memory import Memory
from .pids import Pids

logger = logging.getLogger('cgv2.cgroup')


class CGroupType(Enum):
    """cgroup.type"""
    DOMAIN = "domain"  # A normal valid domain cgroup
    DOMAIN_THREADED = "domain threaded"  # Root of a threaded subtree
    DOMAIN_INVALID = "domain invalid"  # Can't be populated or have controllers enabled
    THREADED = "threaded"  # Member of a threaded subtree

    @classmethod
    def parse(cls, text: str) -> 'CGroupType':
        try:
            return cls(text.strip())
        except ValueError:
            raise MalformedField(text, "unknown cgroup type") from None

    def format(self) -> str:
        return self.value


@dataclass(frozen=True)
class CGroupEvent(KeyedRecord):
    """cgroup.events"""
    populated: bool = False
    frozen: bool = False

    FIELDS = {
        'populated': parse_flag,
        'frozen': parse_flag,
    }


@dataclass(frozen=True)
class CGroupStat(KeyedRecord):
    """cgroup.stat"""
    nr_descendants: int = 0
    nr_dying_descendants: int = 0

    FIELDS = {
        'nr_descendants': parse_uint,
        'nr_dying_descendants': parse_uint,
    }


@dataclass(frozen=True)
class Freeze:
    """cgroup.freeze"""
    frozen: bool = False

    def __bool__(self) -> bool:
        return self.frozen

    @classmethod
    def parse(cls, text: str) -> 'Freeze':
        return cls(parse_flag(text))

    def format(self) -> str:
        return format_flag(self.frozen)


CONTROLLERS = SpaceList(ControllerType.parse)
CG_TYPE = Scalar(CGroupType.parse, CGroupType.format)
MEMBERS = NewlineList(parse_uint)
MEMBER = Scalar(parse_uint)
EVENTS = FlatKeyed(CGroupEvent)
LIMIT = Scalar(Max.parse, Max.format)
STAT = FlatKeyed(CGroupStat)
FREEZE = Scalar(Freeze.parse, Freeze.format)
KILL = Scalar(parse_flag, format_flag)


class CGroup(CGroupView):
    """Core interface files of one cgroup directory"""

    def controllers(self) -> List[ControllerType]:
        """Controllers available to this cgroup, in kernel order"""
        return self._read("cgroup.controllers", CONTROLLERS)

    def subtree_control(self) -> List[ControllerType]:
        """Controllers enabled for the children of this cgroup"""
        return self._read("cgroup.subtree_control", CONTROLLERS)

    def set_subtree_control(self, enables: Iterable[ControllerType],
                            disables: Optional[Iterable[ControllerType]] = None):
        """Request controllers to be enabled/disabled for the children

        Only domain cgroups without processes of their own can enable domain
        controllers. Call subtree_control() to see what the kernel applied.
        An empty request leaves the file untouched.
        """
        command = subtree_control_command(enables, disables)
        if not command:
            logger.debug(f"No subtree control changes requested for {self.path}")
            return
        logger.debug(f"Writing subtree control {command!r} to {self.path}")
        self.accessor.write("cgroup.subtree_control", command)

    def cg_type(self) -> CGroupType:
        return self._read("cgroup.type", CG_TYPE)

    def set_cg_type(self, cg_type: CGroupType = CGroupType.THREADED):
        """Turn the cgroup threaded; the kernel accepts no other value"""
        self._write("cgroup.type", CG_TYPE, cg_type)

    def procs(self) -> List[int]:
        return self._read("cgroup.procs", MEMBERS)

    def add_proc(self, pid: int):
        """Migrate a process, with all its threads, into this cgroup"""
        self._append("cgroup.procs", MEMBER, pid)

    def threads(self) -> List[int]:
        return self._read("cgroup.threads", MEMBERS)

    def add_thread(self, tid: int):
        self._append("cgroup.threads", MEMBER, tid)

    def events(self) -> CGroupEvent:
        return self._read("cgroup.events", EVENTS)

    def max_descendants(self) -> Max:
        return self._read("cgroup.max.descendants", LIMIT)

    def set_max_descendants(self, max: Union[Max, int, None]):
        self._write("cgroup.max.descendants", LIMIT, Max.coerce(max))

    def max_depth(self) -> Max:
        return self._read("cgroup.max.depth", LIMIT)

    def set_max_depth(self, max: Union[Max, int, None]):
        self._write("cgroup.max.depth", LIMIT, Max.coerce(max))

    def stat(self) -> CGroupStat:
        return self._read("cgroup.stat", STAT)

    def freeze(self) -> Freeze:
        return self._read("cgroup.freeze", FREEZE)

    def set_freeze(self, frozen: Union[Freeze, bool] = True):
        """Freeze (or thaw with frozen=False) every process in the subtree

        Freezing completes asynchronously; cgroup.events reports "frozen 1"
        once it is done.
        """
        if not isinstance(frozen, Freeze):
            frozen = Freeze(bool(frozen))
        self._write("cgroup.freeze", FREEZE, frozen)

    def kill(self):
        """Kill every process in the subtree"""
        self._write("cgroup.kill", KILL, True)

    def cpu(self) -> Cpu:
        return Cpu(self.path)

    def memory(self) -> Memory:
        return Memory(self.path)

    def io(self) -> IO:
        return IO(self.path)

    def pids(self) -> Pids:
        return Pids(self.path)

    def child(self, name: str) -> 'CGroup':
        """View of a child cgroup; the directory is not created"""
        return CGroup(self.path / name.lstrip("/"))

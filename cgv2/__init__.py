"""
cgv2 - Typed access to Linux cgroup v2 interface files
"""

from .exceptions import (
    CGroupError, FileSystemFailure, MalformedField, EmptyFile, ZeroByteWrite
)
from .accessor import PathAccessor
from .codecs import (
    KeyedRecord, Scalar, SpaceList, NewlineList, FlatKeyed, FlatKeyedMap,
    NestedKeyed
)
from .common import Max
from .controller import ControllerType, subtree_control_command
from .psi import PSIMetric, CPUPressure, MemoryPressure, IOPressure
from .cgroup import CGroup, CGroupType, CGroupEvent, CGroupStat, Freeze
from .cpu import Cpu, CPUMax
from .memory import Memory, Event, SwapEvent
from .io import IO, DeviceNumber, Ctrl, CostQos
from .pids import Pids, PidsEvent
from .config import CGroupSettings, delegate_path, detect_mount_point
from .manager import Manager

__version__ = "0.1.0"

__all__ = [
    'CGroupError', 'FileSystemFailure', 'MalformedField', 'EmptyFile',
    'ZeroByteWrite',
    'PathAccessor',
    'KeyedRecord', 'Scalar', 'SpaceList', 'NewlineList', 'FlatKeyed',
    'FlatKeyedMap', 'NestedKeyed',
    'Max', 'ControllerType', 'subtree_control_command',
    'PSIMetric', 'CPUPressure', 'MemoryPressure', 'IOPressure',
    'CGroup', 'CGroupType', 'CGroupEvent', 'CGroupStat', 'Freeze',
    'Cpu', 'CPUMax',
    'Memory', 'Event', 'SwapEvent',
    'IO', 'DeviceNumber', 'Ctrl', 'CostQos',
    'Pids', 'PidsEvent',
    'CGroupSettings', 'delegate_path', 'detect_mount_point',
    'Manager',
]

"""
cgv2 Controllers
Controller names and the cgroup.subtree_control write command
"""

from enum import Enum
from typing import Iterable, List, Optional

from .exceptions import MalformedField


class ControllerType(Enum):
    """Cgroup v2 controllers"""
    CPUSET = "cpuset"
    CPU = "cpu"
    IO = "io"
    MEMORY = "memory"
    PIDS = "pids"

    @classmethod
    def all(cls) -> List['ControllerType']:
        return list(cls)

    @classmethod
    def parse(cls, text: str) -> 'ControllerType':
        try:
            return cls(text)
        except ValueError:
            raise MalformedField(text, "unknown controller") from None

    def format(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def subtree_control_command(enables: Iterable[ControllerType],
                            disables: Optional[Iterable[ControllerType]] = None) -> str:
    """Build the payload enabling and disabling controllers for child cgroups

    >>> subtree_control_command([ControllerType.MEMORY, ControllerType.PIDS], [ControllerType.IO])
    '+memory +pids -io'

    The kernel may refuse or partially apply the request (delegation,
    controller availability, processes in the cgroup); re-read
    cgroup.subtree_control to see the effective set.
    """
    tokens = [f"+{controller.format()}" for controller in enables]
    if disables:
        tokens.extend(f"-{controller.format()}" for controller in disables)
    return " ".join(tokens)

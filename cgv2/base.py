"""
cgv2 Base View
Binds interface filenames to codecs for one cgroup directory
"""

from pathlib import Path
from typing import Any, Union

from .accessor import PathAccessor


class CGroupView:
    """Base class for the per-subsystem views

    A view holds nothing but the directory it was created for. Each accessor
    is one read-and-decode or one format-and-write of a single file.
    """

    def __init__(self, cgroup_path: Union[str, Path]):
        self.accessor = PathAccessor(cgroup_path)

    @property
    def path(self) -> Path:
        return self.accessor.cgroup_path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.path)!r})"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.path == other.path

    def __hash__(self) -> int:
        return hash((type(self), self.path))

    def _read(self, filename: str, codec) -> Any:
        text = self.accessor.read(filename)
        return codec.decode(text, str(self.accessor.path_of(filename)))

    def _write(self, filename: str, codec, value) -> None:
        self.accessor.write(filename, codec.encode(value))

    def _append(self, filename: str, codec, value) -> None:
        self.accessor.append(filename, codec.encode(value))

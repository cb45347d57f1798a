"""
cgv2 Path Accessor
Raw reads and writes of interface files under one cgroup directory
"""

import os
import errno
import logging
from pathlib import Path
from typing import Union

from .exceptions import FileSystemFailure, MalformedField, ZeroByteWrite

logger = logging.getLogger('cgv2.accessor')


class PathAccessor:
    """Resolves interface filenames against a cgroup directory"""

    def __init__(self, cgroup_path: Union[str, Path]):
        self.cgroup_path = Path(cgroup_path)

    def __repr__(self) -> str:
        return f"PathAccessor({str(self.cgroup_path)!r})"

    def path_of(self, filename: str) -> Path:
        return self.cgroup_path / filename

    def exists(self, filename: str) -> bool:
        """Check whether the cgroup exposes an interface file"""
        return os.path.exists(self.path_of(filename))

    def read(self, filename: str) -> str:
        """Read the full content of an interface file"""
        filepath = self.path_of(filename)
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            logger.debug(f"Failed to read {filepath}: {e}")
            raise FileSystemFailure(str(filepath), e.errno, e.strerror) from e
        except UnicodeDecodeError as e:
            logger.debug(f"Undecodable content in {filepath}: {e}")
            text = e.object.decode(e.encoding, errors='replace')
            raise MalformedField(text, f"{filepath} is not valid {e.encoding}") from e

    def write(self, filename: str, value: str) -> int:
        """Write value to an interface file, replacing its content

        The kernel handles each write(2) as one command, so the text is
        passed through an unbuffered handle in a single call.
        """
        return self._write(filename, value, 'wb')

    def append(self, filename: str, value: str) -> int:
        """Append value to an interface file (cgroup.procs, cgroup.threads)"""
        return self._write(filename, value, 'ab')

    def _write(self, filename: str, value: str, mode: str) -> int:
        filepath = self.path_of(filename)
        data = value.encode()
        try:
            with open(filepath, mode, buffering=0) as f:
                written = f.write(data)
        except OSError as e:
            logger.debug(f"Failed to write {value!r} to {filepath}: {e}")
            raise FileSystemFailure(str(filepath), e.errno, e.strerror) from e

        if not written:
            logger.debug(f"Kernel accepted no bytes of {value!r} for {filepath}")
            raise ZeroByteWrite(str(filepath))
        if written < len(data):
            logger.debug(f"Kernel accepted {written} of {len(data)} bytes for {filepath}")
            raise FileSystemFailure(str(filepath), errno.EIO,
                                    f"short write ({written} of {len(data)} bytes)")

        logger.debug(f"Wrote {value!r} to {filepath}")
        return written

"""
cgv2 Exceptions
Error taxonomy for cgroup v2 interface file access
"""

from typing import Optional


class CGroupError(Exception):
    """Base exception for cgv2"""
    pass


class FileSystemFailure(CGroupError):
    """Raised when opening, reading or writing an interface file fails at the OS level"""

    def __init__(self, path: str, errno: Optional[int] = None, strerror: Optional[str] = None):
        self.path = path
        self.errno = errno
        self.strerror = strerror
        super().__init__(f"{path}: {strerror or 'filesystem failure'}")


class MalformedField(CGroupError):
    """Raised when file content is present but fails type-specific decoding"""

    def __init__(self, text: str, reason: Optional[str] = None):
        self.text = text
        self.reason = reason
        message = f"malformed field {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyFile(CGroupError):
    """Raised when an interface file is empty but a value was required"""

    def __init__(self, path: str = ""):
        self.path = path
        super().__init__(f"empty file: {path}" if path else "empty file")


class ZeroByteWrite(CGroupError):
    """Raised when the kernel accepted a write call but transferred nothing"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"write 0 bytes to {path}")

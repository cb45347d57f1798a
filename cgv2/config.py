"""
cgv2 Configuration
Where the cgroup v2 hierarchy lives and which subtree the caller may manage

Rootless use relies on systemd delegating a subtree to the user, e.g. with

    # /etc/systemd/system/user@.service.d/delegate.conf
    [Service]
    Delegate=cpu cpuset io memory pids

which on most distributions exposes
``/sys/fs/cgroup/user.slice/user-<uid>.slice/user@<uid>.service``.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import psutil
import yaml
from pydantic import BaseModel, field_validator

logger = logging.getLogger('cgv2.config')

DEFAULT_MOUNT_POINT = Path("/sys/fs/cgroup")
CGROUP2_FSTYPE = "cgroup2"


def delegate_path(mount_point: Union[str, Path], uid: int) -> Path:
    """Path of the subtree systemd delegates to the user ``uid``"""
    return Path(mount_point) / "user.slice" / f"user-{uid}.slice" / f"user@{uid}.service"


def detect_mount_point() -> Optional[Path]:
    """Find the first mounted cgroup2 filesystem"""
    for partition in psutil.disk_partitions(all=True):
        if partition.fstype == CGROUP2_FSTYPE:
            logger.debug(f"Found cgroup2 mount at {partition.mountpoint}")
            return Path(partition.mountpoint)
    logger.debug("No cgroup2 mount found")
    return None


class CGroupSettings(BaseModel):
    """Location of the hierarchy the views operate on"""
    mount_point: Path = DEFAULT_MOUNT_POINT
    delegate_path: Optional[Path] = None

    @field_validator('mount_point', 'delegate_path')
    @classmethod
    def validate_absolute(cls, v):
        if v is not None and not v.is_absolute():
            raise ValueError(f"cgroup paths must be absolute: {v}")
        return v

    @property
    def root(self) -> Path:
        """Directory operations start from: the delegated subtree if any"""
        return self.delegate_path or self.mount_point

    @classmethod
    def for_user(cls, uid: Optional[int] = None,
                 mount_point: Optional[Union[str, Path]] = None) -> 'CGroupSettings':
        """Settings for the subtree systemd delegates to a user

        Defaults to the calling user and the detected cgroup2 mount.
        """
        if uid is None:
            uid = os.getuid()
        if mount_point is None:
            mount_point = detect_mount_point() or DEFAULT_MOUNT_POINT
        return cls(mount_point=mount_point, delegate_path=delegate_path(mount_point, uid))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'CGroupSettings':
        return cls(**(data or {}))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'CGroupSettings':
        """Load settings from a YAML mapping, e.g.

            mount_point: /sys/fs/cgroup
            delegate_path: /sys/fs/cgroup/user.slice/user-1000.slice/user@1000.service
        """
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
        logger.debug(f"Loaded cgroup settings from {path}")
        return cls.from_dict(data)

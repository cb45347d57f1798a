"""
cgv2 Hierarchy Manager
Entry point binding configuration to cgroup views
"""

import logging
from pathlib import Path
from typing import Optional

from .cgroup import CGroup
from .config import CGroupSettings

logger = logging.getLogger('cgv2.manager')


class Manager:
    """Hands out views below the configured root

    Directories are neither created nor removed here; pair the views with
    os.mkdir/os.rmdir to manage cgroup lifetime.
    """

    def __init__(self, settings: Optional[CGroupSettings] = None):
        self.settings = settings or CGroupSettings()
        logger.debug(f"cgroup manager rooted at {self.root}")

    @classmethod
    def default(cls) -> 'Manager':
        """Manager for the subtree delegated to the current user"""
        return cls(CGroupSettings.for_user())

    @property
    def root(self) -> Path:
        return self.settings.root

    def cgroup(self, name: Optional[str] = None) -> CGroup:
        """View of the root cgroup or of a path relative to it"""
        if not name:
            return CGroup(self.root)
        return CGroup(self.root / name.lstrip('/'))

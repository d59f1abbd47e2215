"""
Registry of available target dialects.

Targets register themselves by name; callers look them up by name or detect
them from an output path that already ends in the target's config directory.
"""

from pathlib import Path
from typing import Dict, List, Optional

from core.errors import UnknownTargetError
from core.target_interface import TargetDialect


class TargetRegistry:
    """Keeps track of target dialects by name."""

    def __init__(self):
        self._targets: Dict[str, TargetDialect] = {}

    def register(self, target: TargetDialect):
        """
        Register a target dialect.

        Raises:
            ValueError: If a target with the same name is already registered
        """
        if target.target_name in self._targets:
            raise ValueError(f"Target '{target.target_name}' is already registered")
        self._targets[target.target_name] = target

    def unregister(self, target_name: str):
        """Remove a target. Unknown names are ignored."""
        self._targets.pop(target_name, None)

    def get_target(self, target_name: str) -> Optional[TargetDialect]:
        """Return the named target, or None if it is not registered."""
        return self._targets.get(target_name)

    def require_target(self, target_name: str) -> TargetDialect:
        """
        Return the named target.

        Raises:
            UnknownTargetError: If the target is not registered
        """
        target = self.get_target(target_name)
        if target is None:
            raise UnknownTargetError(target_name)
        return target

    def detect_target(self, output_root: Path) -> Optional[TargetDialect]:
        """Find the target whose config directory output_root points at."""
        for target in self._targets.values():
            if target.can_handle(Path(output_root)):
                return target
        return None

    def list_targets(self) -> List[str]:
        return list(self._targets.keys())

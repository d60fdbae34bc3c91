"""Conditioning settings applied when segment strings are built."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConditioningConfig:
    """Settings used when a segment string is created with ``orient=True``.

    Attributes:
        shell_clockwise: Orientation required for polygon shells. Holes are
            oriented the opposite way.
        remove_repeated_lines: Collapse consecutive repeated points on linear
            components.
    """

    shell_clockwise: bool = True
    remove_repeated_lines: bool = True

    def ring_clockwise(self, ring_id: int) -> bool:
        """Return the orientation required for ring ``ring_id`` (0 is the shell)."""
        if ring_id == 0:
            return self.shell_clockwise
        return not self.shell_clockwise


DEFAULT_CONFIG = ConditioningConfig()


__all__ = [
    "ConditioningConfig",
    "DEFAULT_CONFIG",
]

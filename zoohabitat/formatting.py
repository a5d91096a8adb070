"""Shared formatting utilities for evaluation reports and enclosure listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enclosure import Enclosure
    from .evaluator import ViableEnclosure


def enclosure_label(entry: ViableEnclosure) -> str:
    """
    Return the human-readable descriptor for a viable enclosure.

    Args:
        entry: The scan result to format

    Returns:
        A string like "Enclosure 4 (free space: 5 total: 8)"
    """
    return f"Enclosure {entry.enclosure_id} (free space: {entry.free_space} total: {entry.total_size})"


def occupant_list(enclosure: Enclosure) -> str:
    """
    Format the residents of an enclosure as a comma-separated list.

    Args:
        enclosure: The enclosure to describe

    Returns:
        A string like "MACACO x3, GAZELA x1", or "empty"
    """
    residents = enclosure.occupants
    if not residents:
        return "empty"
    return ", ".join(f"{species.name} x{count}" for species, count in residents.items())


__all__ = ["enclosure_label", "occupant_list"]

"""Habitat evaluation entry point."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .enclosure import Enclosure
from .exceptions import DuplicateEnclosureError, InvalidSpeciesError
from .formatting import enclosure_label
from .rules import Species, SpeciesRegistry

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Request-level failures, reported as data rather than raised."""

    INVALID_QUANTITY = "Invalid quantity"
    INVALID_SPECIES = "Invalid species"
    NO_VIABLE_ENCLOSURE = "No viable enclosure"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ViableEnclosure:
    """One enclosure that accepts the requested group."""

    enclosure_id: int
    free_space: int
    total_size: int


@dataclass(frozen=True)
class Report:
    """Outcome of one evaluation: viable enclosures or an error, never both."""

    viable: Tuple[ViableEnclosure, ...] = ()
    error: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.viable:
            raise ValueError("Report cannot carry both an error and viable enclosures")
        if self.error is None and not self.viable:
            raise ValueError("Report without an error must list at least one enclosure")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def viable_enclosures(self) -> Tuple[str, ...]:
        return tuple(enclosure_label(entry) for entry in self.viable)

    def to_dict(self) -> Dict[str, object]:
        if self.error is not None:
            return {"error": self.error.message}
        return {"viableEnclosures": list(self.viable_enclosures)}


class HabitatEvaluator:
    """Scans a fixed, ordered set of enclosures for room to house a group.

    The evaluator mutates enclosures while probing them and restores each one
    before moving on. It does no locking: run one evaluation at a time per
    enclosure set.
    """

    def __init__(self, registry: SpeciesRegistry, enclosures: Iterable[Tuple[int, Enclosure]]) -> None:
        ordered = sorted(enclosures, key=lambda item: item[0])
        seen = set()
        for identifier, _ in ordered:
            if identifier in seen:
                raise DuplicateEnclosureError(identifier)
            seen.add(identifier)
        self._registry = registry
        self._enclosures: Tuple[Tuple[int, Enclosure], ...] = tuple(ordered)

    @property
    def registry(self) -> SpeciesRegistry:
        return self._registry

    @property
    def enclosures(self) -> Tuple[Tuple[int, Enclosure], ...]:
        return self._enclosures

    def enclosure(self, identifier: int) -> Enclosure:
        for enclosure_id, enclosure in self._enclosures:
            if enclosure_id == identifier:
                return enclosure
        raise KeyError(identifier)

    def evaluate(self, species_name: str, count: int) -> Report:
        """Report every enclosure that could take ``count`` animals of ``species_name``."""

        if count < 1:
            logger.info("Rejected request for %s: quantity %s", species_name, count)
            return Report(error=ErrorKind.INVALID_QUANTITY)

        try:
            species = self._registry.lookup(species_name)
        except InvalidSpeciesError:
            logger.info("Rejected request: unknown species %r", species_name)
            return Report(error=ErrorKind.INVALID_SPECIES)

        viable = self._scan(species, count)
        if not viable:
            logger.info("No enclosure can take %d x %s", count, species.name)
            return Report(error=ErrorKind.NO_VIABLE_ENCLOSURE)

        logger.info(
            "%d x %s fits in enclosures %s",
            count,
            species.name,
            ", ".join(str(entry.enclosure_id) for entry in viable),
        )
        return Report(viable=tuple(viable))

    def _scan(self, species: Species, count: int) -> List[ViableEnclosure]:
        viable: List[ViableEnclosure] = []
        for identifier, enclosure in self._enclosures:
            if not enclosure.try_insert(species, count):
                logger.debug("Enclosure %d rejects %d x %s", identifier, count, species.name)
                continue
            entry = ViableEnclosure(identifier, enclosure.free_size(), enclosure.total_size)
            enclosure.remove(species, count)
            logger.debug("Enclosure %d accepts %d x %s (free after: %d)", identifier, count, species.name, entry.free_space)
            viable.append(entry)
        return viable


__all__ = [
    "ErrorKind",
    "HabitatEvaluator",
    "Report",
    "ViableEnclosure",
]

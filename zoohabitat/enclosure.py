"""Mutable enclosure model with a reversible insert/remove protocol."""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Tuple

from .rules import MIXED_SPECIES_OVERHEAD, Species


class Enclosure:
    """A capacity-bounded pen holding counts of animals per species.

    ``try_insert`` is the only way animals get in: it mutates, checks
    habitability and undoes its own change on failure, so callers never see a
    state that breaks the capacity or comfort rules.
    """

    def __init__(
        self,
        total_size: int,
        biomes: Iterable[str],
        occupants: Iterable[Tuple[Species, int]] = (),
    ) -> None:
        if total_size < 1:
            raise ValueError("Enclosure size must be positive")
        self.total_size = total_size
        self.biomes: FrozenSet[str] = frozenset(biomes)
        if not self.biomes:
            raise ValueError("Enclosure must have at least one biome")

        self._occupants: Dict[Species, int] = {}
        for species, count in occupants:
            if count < 1:
                raise ValueError(f"Initial count for {species.name} must be at least 1")
            self._occupants[species] = self._occupants.get(species, 0) + count

    # --- Queries ---
    @property
    def occupants(self) -> Dict[Species, int]:
        """Copy of the current species -> count mapping."""
        return dict(self._occupants)

    def count_of(self, species: Species) -> int:
        return self._occupants.get(species, 0)

    def distinct_species_count(self) -> int:
        return len(self._occupants)

    def total_individual_count(self) -> int:
        return sum(self._occupants.values())

    def occupied_size(self) -> int:
        overhead = MIXED_SPECIES_OVERHEAD if self.distinct_species_count() > 1 else 0
        return overhead + sum(species.size * count for species, count in self._occupants.items())

    def free_size(self) -> int:
        return self.total_size - self.occupied_size()

    def is_overcrowded(self) -> bool:
        return self.occupied_size() > self.total_size

    def is_habitable(self) -> bool:
        """True when nobody is squeezed and every resident is comfortable."""

        if self.is_overcrowded():
            return False
        return all(species.comfortable(self) for species in self._occupants)

    # --- Mutations ---
    def try_insert(self, species: Species, count: int) -> bool:
        """Add ``count`` animals if the result stays habitable.

        Returns:
            True if the animals were added, False if the enclosure is
            unchanged.
        """
        if count < 1:
            return False
        self._occupants[species] = self._occupants.get(species, 0) + count
        if not self.is_habitable():
            self.remove(species, count)
            return False
        self._check_invariants()
        return True

    def remove(self, species: Species, count: int) -> None:
        """Take ``count`` animals out; the entry disappears once it reaches zero."""
        if count < 1:
            return
        current = self._occupants.get(species)
        if current is None:
            return
        if current > count:
            self._occupants[species] = current - count
        else:
            del self._occupants[species]
        self._check_invariants()

    def can_fit(self, species: Species, count: int) -> bool:
        """Whether ``try_insert`` would succeed; leaves the enclosure untouched."""
        if self.try_insert(species, count):
            self.remove(species, count)
            return True
        return False

    def _check_invariants(self) -> None:
        assert all(count >= 1 for count in self._occupants.values()), "occupant counts must stay positive"

    def __repr__(self) -> str:
        residents = ", ".join(f"{species.name}x{count}" for species, count in self._occupants.items())
        return f"Enclosure(total_size={self.total_size}, biomes={sorted(self.biomes)}, occupants=[{residents}])"


__all__ = ["Enclosure"]

"""Biome tags, species metadata and the species registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

from .comfort import AlwaysComfortable, ComfortRule
from .exceptions import DuplicateSpeciesError, InvalidSpeciesError

if TYPE_CHECKING:
    from .enclosure import Enclosure

# Biome tags used by the default zoo.
BIOME_SAVANNA = "savana"
BIOME_FOREST = "floresta"
BIOME_RIVER = "rio"

# Space charged once to an enclosure that mixes more than one species.
MIXED_SPECIES_OVERHEAD = 1


@dataclass(frozen=True)
class Species:
    """Defines static properties for an animal species.

    Two species compare equal (and hash the same) when their names match, so
    occupant maps can be keyed by ``Species`` while the registry stays the
    single owner of the canonical instance.
    """

    name: str
    size: int = field(compare=False)
    biomes: FrozenSet[str] = field(compare=False)
    comfort: ComfortRule = field(default_factory=AlwaysComfortable, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Species name must not be empty")
        if self.size < 1:
            raise ValueError(f"Species {self.name} must have a positive size")
        if not self.biomes:
            raise ValueError(f"Species {self.name} must live in at least one biome")
        object.__setattr__(self, "biomes", frozenset(self.biomes))

    def lives_in(self, biomes: FrozenSet[str]) -> bool:
        return not self.biomes.isdisjoint(biomes)

    def comfortable(self, enclosure: Enclosure) -> bool:
        """Biome match plus the species' own comfort rule."""

        return self.lives_in(enclosure.biomes) and self.comfort.evaluate(enclosure)


class SpeciesRegistry:
    """Closed, read-only catalog of species keyed by exact name."""

    def __init__(self, species: Iterable[Species]) -> None:
        catalog: Dict[str, Species] = {}
        for entry in species:
            if entry.name in catalog:
                raise DuplicateSpeciesError(entry.name)
            catalog[entry.name] = entry
        self._species = catalog

    def lookup(self, name: str) -> Species:
        """Return the species called ``name`` (case-sensitive)."""

        try:
            return self._species[name]
        except KeyError as exc:
            raise InvalidSpeciesError(name) from exc

    def get(self, name: str) -> Optional[Species]:
        return self._species.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._species)

    def __contains__(self, name: object) -> bool:
        return name in self._species

    def __iter__(self) -> Iterator[Species]:
        return iter(self._species.values())

    def __len__(self) -> int:
        return len(self._species)

    def __repr__(self) -> str:
        return f"SpeciesRegistry({', '.join(self._species)})"


__all__ = [
    "BIOME_FOREST",
    "BIOME_RIVER",
    "BIOME_SAVANNA",
    "MIXED_SPECIES_OVERHEAD",
    "Species",
    "SpeciesRegistry",
]

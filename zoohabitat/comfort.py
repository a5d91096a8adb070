"""Per-species comfort rules.

A comfort rule answers whether a species is at ease with the social company
an enclosure currently offers. Biome suitability is checked separately by
``Species.comfortable``; rules only look at who else is in the enclosure.
Rules read enclosure state and never mutate it.
"""
from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict, FrozenSet

from .exceptions import ConfigError

if TYPE_CHECKING:
    from .enclosure import Enclosure


class ComfortRule(abc.ABC):
    """Base class for the social requirement attached to a species."""

    name: ClassVar[str] = "rule"

    @abc.abstractmethod
    def evaluate(self, enclosure: Enclosure) -> bool:
        """Return True if the owning species is comfortable in ``enclosure``."""


@dataclass(frozen=True)
class AlwaysComfortable(ComfortRule):
    """No social requirement."""

    name: ClassVar[str] = "default"

    def evaluate(self, enclosure: Enclosure) -> bool:
        return True


@dataclass(frozen=True)
class SolitaryCarnivore(ComfortRule):
    """Shares the enclosure with its own kind only, in any number."""

    name: ClassVar[str] = "carnivore"

    def evaluate(self, enclosure: Enclosure) -> bool:
        return enclosure.distinct_species_count() == 1


@dataclass(frozen=True)
class NeedsCompany(ComfortRule):
    """Unhappy alone: the enclosure must hold more than one animal in total."""

    name: ClassVar[str] = "social"

    def evaluate(self, enclosure: Enclosure) -> bool:
        return enclosure.total_individual_count() > 1


@dataclass(frozen=True)
class MixesOnlyInBiomes(ComfortRule):
    """Tolerates other species only when the enclosure has every ``required`` biome."""

    required: FrozenSet[str]
    name: ClassVar[str] = "mixes_only_in"

    def __post_init__(self) -> None:
        if not self.required:
            raise ValueError("MixesOnlyInBiomes needs at least one required biome")
        object.__setattr__(self, "required", frozenset(self.required))

    def evaluate(self, enclosure: Enclosure) -> bool:
        if enclosure.distinct_species_count() > 1:
            return self.required <= enclosure.biomes
        return True


_SIMPLE_RULES: Dict[str, Callable[[], ComfortRule]] = {
    AlwaysComfortable.name: AlwaysComfortable,
    SolitaryCarnivore.name: SolitaryCarnivore,
    NeedsCompany.name: NeedsCompany,
}


def rule_from_config(value: Any) -> ComfortRule:
    """Build a comfort rule from its configuration value.

    Accepted forms are ``None`` (default rule), one of the plain rule names
    (``"default"``, ``"carnivore"``, ``"social"``) or a single-key mapping
    ``{"mixes_only_in": ["savana", "rio"]}``.
    """

    if value is None:
        return AlwaysComfortable()
    if isinstance(value, str):
        try:
            factory = _SIMPLE_RULES[value]
        except KeyError as exc:
            raise ConfigError(f"Unknown comfort rule '{value}'") from exc
        return factory()
    if isinstance(value, dict) and len(value) == 1:
        key, arg = next(iter(value.items()))
        if key == MixesOnlyInBiomes.name:
            if not isinstance(arg, (list, tuple)) or not arg:
                raise ConfigError("mixes_only_in expects a non-empty list of biomes")
            return MixesOnlyInBiomes(frozenset(str(biome) for biome in arg))
        raise ConfigError(f"Unknown comfort rule '{key}'")
    raise ConfigError(f"Invalid comfort rule definition: {value!r}")


__all__ = [
    "AlwaysComfortable",
    "ComfortRule",
    "MixesOnlyInBiomes",
    "NeedsCompany",
    "SolitaryCarnivore",
    "rule_from_config",
]

"""Zoo seed data and builders that turn configuration into live objects.

The zoo layout (species catalog and enclosures with their starting residents)
is configuration. ``DEFAULT_CONFIG`` describes the stock zoo; the same shape
can be loaded from YAML, see ``configs/zoo.yaml``::

    species:
      - name: MACACO
        size: 1
        biomes: [savana, floresta]
        comfort: social
    enclosures:
      - id: 1
        size: 10
        biomes: [savana]
        occupants: {MACACO: 3}
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml

from .comfort import rule_from_config
from .enclosure import Enclosure
from .evaluator import HabitatEvaluator
from .exceptions import ConfigError
from .rules import BIOME_FOREST, BIOME_RIVER, BIOME_SAVANNA, Species, SpeciesRegistry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "species": [
        {"name": "LEAO", "size": 3, "biomes": [BIOME_SAVANNA], "comfort": "carnivore"},
        {"name": "LEOPARDO", "size": 2, "biomes": [BIOME_SAVANNA], "comfort": "carnivore"},
        {"name": "CROCODILO", "size": 3, "biomes": [BIOME_RIVER], "comfort": "carnivore"},
        {"name": "MACACO", "size": 1, "biomes": [BIOME_SAVANNA, BIOME_FOREST], "comfort": "social"},
        {"name": "GAZELA", "size": 2, "biomes": [BIOME_SAVANNA]},
        {
            "name": "HIPOPOTAMO",
            "size": 4,
            "biomes": [BIOME_SAVANNA, BIOME_RIVER],
            "comfort": {"mixes_only_in": [BIOME_SAVANNA, BIOME_RIVER]},
        },
    ],
    "enclosures": [
        {"id": 1, "size": 10, "biomes": [BIOME_SAVANNA], "occupants": {"MACACO": 3}},
        {"id": 2, "size": 5, "biomes": [BIOME_FOREST]},
        {"id": 3, "size": 7, "biomes": [BIOME_SAVANNA, BIOME_RIVER], "occupants": {"GAZELA": 1}},
        {"id": 4, "size": 8, "biomes": [BIOME_RIVER]},
        {"id": 5, "size": 9, "biomes": [BIOME_SAVANNA], "occupants": {"LEAO": 1}},
    ],
}


def load_config_from_yaml(path: str | Path) -> Dict[str, Any]:
    """Load a zoo layout from a YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Dictionary with ``species`` and ``enclosures`` lists.

    Raises:
        FileNotFoundError: If config file does not exist.
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Top level of {config_path} must be a mapping")
    return config


def build_registry(entries: Sequence[Mapping[str, Any]]) -> SpeciesRegistry:
    """Create the species registry from ``species`` config entries."""

    species: List[Species] = []
    for entry in _require_list(entries, "species"):
        name = _require(entry, "name", str, "species")
        species.append(
            Species(
                name=name,
                size=_require_positive_int(entry, "size", f"species {name}"),
                biomes=frozenset(_require_biomes(entry, f"species {name}")),
                comfort=rule_from_config(entry.get("comfort")),
            )
        )
    return SpeciesRegistry(species)


def build_enclosures(entries: Sequence[Mapping[str, Any]], registry: SpeciesRegistry) -> List[Tuple[int, Enclosure]]:
    """Create enclosures from ``enclosures`` config entries.

    Residents are resolved through ``registry`` so every enclosure shares the
    canonical species instances. Each enclosure must start out habitable.
    """

    enclosures: List[Tuple[int, Enclosure]] = []
    for entry in _require_list(entries, "enclosures"):
        identifier = _require_positive_int(entry, "id", "enclosure")
        label = f"enclosure {identifier}"
        occupants_raw = entry.get("occupants") or {}
        if not isinstance(occupants_raw, dict):
            raise ConfigError(f"{label}: occupants must map species names to counts")

        occupants: List[Tuple[Species, int]] = []
        for name, count in occupants_raw.items():
            species = registry.get(name)
            if species is None:
                raise ConfigError(f"{label}: unknown species '{name}'")
            if not isinstance(count, int) or isinstance(count, bool) or count < 1:
                raise ConfigError(f"{label}: count for {name} must be a positive integer")
            occupants.append((species, count))

        enclosure = Enclosure(
            total_size=_require_positive_int(entry, "size", label),
            biomes=_require_biomes(entry, label),
            occupants=occupants,
        )
        if not enclosure.is_habitable():
            raise ConfigError(f"{label} starts out overcrowded or uncomfortable")
        enclosures.append((identifier, enclosure))
    return enclosures


def build_evaluator(config: Optional[Mapping[str, Any]] = None) -> HabitatEvaluator:
    """Build an evaluator from a config mapping, defaulting to the stock zoo."""

    source = DEFAULT_CONFIG if config is None else config
    registry = build_registry(source.get("species", []))
    enclosures = build_enclosures(source.get("enclosures", []), registry)
    logger.debug("Built zoo with %d species and %d enclosures", len(registry), len(enclosures))
    return HabitatEvaluator(registry, enclosures)


def _require_list(value: Any, section: str) -> List[Mapping[str, Any]]:
    if not isinstance(value, list):
        raise ConfigError(f"'{section}' must be a list")
    for item in value:
        if not isinstance(item, dict):
            raise ConfigError(f"Every entry in '{section}' must be a mapping")
    return value


def _require(entry: Mapping[str, Any], key: str, kind: type, label: str) -> Any:
    if key not in entry:
        raise ConfigError(f"{label}: missing required field '{key}'")
    value = entry[key]
    if not isinstance(value, kind) or not value:
        raise ConfigError(f"{label}: field '{key}' must be a non-empty {kind.__name__}")
    return value


def _require_positive_int(entry: Mapping[str, Any], key: str, label: str) -> int:
    if key not in entry:
        raise ConfigError(f"{label}: missing required field '{key}'")
    value = entry[key]
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ConfigError(f"{label}: field '{key}' must be a positive integer")
    return value


def _require_biomes(entry: Mapping[str, Any], label: str) -> List[str]:
    biomes = _require(entry, "biomes", list, label)
    return [str(biome) for biome in biomes]


__all__ = [
    "DEFAULT_CONFIG",
    "build_enclosures",
    "build_evaluator",
    "build_registry",
    "load_config_from_yaml",
]

"""Custom exception classes for the zoo habitat evaluator."""

from __future__ import annotations


class ZooError(Exception):
    """Base exception for all zoo habitat errors."""


class InvalidSpeciesError(ZooError):
    """Raised when an unknown species is referenced."""

    def __init__(self, species: str) -> None:
        self.species = species
        super().__init__(f"Unknown species: {species}")


class DuplicateSpeciesError(ZooError):
    """Raised when a registry is built with the same species name twice."""

    def __init__(self, species: str) -> None:
        self.species = species
        super().__init__(f"Species {species} is registered more than once")


class DuplicateEnclosureError(ZooError):
    """Raised when two enclosures share an identifier."""

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(f"Enclosure identifier {identifier} is used more than once")


class ConfigError(ZooError):
    """Raised when zoo configuration data is malformed."""


__all__ = [
    "ConfigError",
    "DuplicateEnclosureError",
    "DuplicateSpeciesError",
    "InvalidSpeciesError",
    "ZooError",
]

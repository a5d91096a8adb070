"""Zoo habitat evaluator package."""

from . import comfort, config, enclosure, evaluator, rules
from .enclosure import Enclosure
from .evaluator import ErrorKind, HabitatEvaluator, Report, ViableEnclosure
from .rules import Species, SpeciesRegistry

__all__ = [
    "comfort",
    "config",
    "enclosure",
    "evaluator",
    "rules",
    "Enclosure",
    "ErrorKind",
    "HabitatEvaluator",
    "Report",
    "Species",
    "SpeciesRegistry",
    "ViableEnclosure",
]

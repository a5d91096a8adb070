"""FastAPI application exposing the habitat evaluator."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field

from ..config import build_evaluator
from ..enclosure import Enclosure
from ..evaluator import HabitatEvaluator


@dataclass
class EvaluatorStore:
    """Holds the zoo for the lifetime of the app and serializes access to it."""

    evaluator: HabitatEvaluator
    lock: threading.Lock = field(default_factory=threading.Lock)


class EvaluateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    species: str = Field(alias="animal")
    quantity: int


def create_app(evaluator: Optional[HabitatEvaluator] = None) -> FastAPI:
    store = EvaluatorStore(evaluator=evaluator or build_evaluator())
    app = FastAPI(title="Zoo Habitat Evaluator", version="0.1.0")

    @app.post("/api/evaluate")
    def api_evaluate(request: EvaluateRequest) -> dict:
        # Sync endpoints run in a thread pool; trial inserts must not interleave.
        with store.lock:
            report = store.evaluator.evaluate(request.species, request.quantity)
        return report.to_dict()

    @app.get("/api/enclosures")
    def api_enclosures() -> List[dict]:
        with store.lock:
            return [_serialize_enclosure(identifier, enclosure) for identifier, enclosure in store.evaluator.enclosures]

    @app.get("/api/species")
    def api_species() -> List[dict]:
        return [
            {
                "name": species.name,
                "size": species.size,
                "biomes": sorted(species.biomes),
                "comfort": species.comfort.name,
            }
            for species in store.evaluator.registry
        ]

    return app


def _serialize_enclosure(identifier: int, enclosure: Enclosure) -> dict:
    return {
        "id": identifier,
        "totalSize": enclosure.total_size,
        "freeSpace": enclosure.free_size(),
        "biomes": sorted(enclosure.biomes),
        "occupants": {species.name: count for species, count in enclosure.occupants.items()},
    }


__all__ = ["create_app"]

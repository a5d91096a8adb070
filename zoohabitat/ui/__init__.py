"""HTTP front-end for the zoo habitat evaluator."""

from .app import create_app

__all__ = ["create_app"]

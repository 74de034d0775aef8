"""Route group exports."""

from . import health, journeys

__all__ = ["health", "journeys"]

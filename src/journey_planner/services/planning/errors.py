"""Planning failures.

Every planning failure is a ``ValueError`` so the API layer can report it as a
bad request, the same way invalid routing input is reported.
"""

from __future__ import annotations


class PlanningError(ValueError):
    """Base class for deterministic planning failures."""


class EmptyJourneyError(PlanningError):
    def __init__(self) -> None:
        super().__init__("Journey has no legs.")


class EmptyFleetError(PlanningError):
    def __init__(self) -> None:
        super().__init__("No vehicles available.")


class NoVehicleFoundError(PlanningError):
    def __init__(self) -> None:
        super().__init__("No vehicle found for the journey start.")


class NoValidPricingPlanError(PlanningError):
    def __init__(self) -> None:
        super().__init__("No valid pricing plan found for the journey.")


class UpstreamUnavailableError(ConnectionError):
    """Raised when fleet or pricing data cannot be fetched."""

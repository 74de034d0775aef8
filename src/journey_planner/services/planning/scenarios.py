"""Reference journeys around Brussels used for demos and smoke checks."""

from __future__ import annotations

from dataclasses import dataclass

from ...models.domain import Journey, Location, TripLeg


@dataclass(slots=True, frozen=True)
class Scenario:
    name: str
    journey: Journey


def _leg(start: tuple[float, float], end: tuple[float, float], pause_minutes: int = 0) -> TripLeg:
    return TripLeg(
        start_location=Location(lat=start[0], lng=start[1]),
        end_location=Location(lat=end[0], lng=end[1]),
        pause_minutes=pause_minutes,
    )


def demo_scenarios() -> list[Scenario]:
    return [
        Scenario(
            name="Jane: Brussels South Station → Stephanie/Louise (2h pause) → Flagey",
            journey=Journey(
                legs=(
                    _leg((50.8355, 4.3573), (50.8245, 4.3635), pause_minutes=120),
                    _leg((50.8245, 4.3635), (50.8275, 4.3745)),
                )
            ),
        ),
        Scenario(
            name="John: Brussels Center → Dilbeek (1h pause) → Airport",
            journey=Journey(
                legs=(
                    _leg((50.8466, 4.3528), (50.7847, 4.2461), pause_minutes=60),
                    _leg((50.7847, 4.2461), (50.9011, 4.4844)),
                )
            ),
        ),
        Scenario(
            name="Vicky: Wezembeek → Avenue de l'Observatoire, Uccle",
            journey=Journey(legs=(_leg((50.8466, 4.3928), (50.8098, 4.3542)),)),
        ),
    ]

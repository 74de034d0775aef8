#!/usr/bin/env python3
"""Plan the bundled Brussels journeys against the live fleet and print the results."""

import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from journey_planner.config import settings
from journey_planner.services.outputs.formatter import format_journey_plan
from journey_planner.services.planning.errors import PlanningError, UpstreamUnavailableError
from journey_planner.services.planning.scenarios import demo_scenarios
from journey_planner.services.planning.service import plan_journey_live
from journey_planner.services.upstream.client import FleetApiClient


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("Journey Planner")
    print("=" * 60)
    print(f"Upstream: {settings.upstream_base_url}")

    client = FleetApiClient()
    failures = 0
    for index, scenario in enumerate(demo_scenarios(), start=1):
        print()
        print(f"SCENARIO {index}: {scenario.name}")
        print("=" * (len(scenario.name) + 20))
        try:
            plan = plan_journey_live(scenario.journey, client=client)
        except (PlanningError, UpstreamUnavailableError) as e:
            print(f"[ERROR] Error planning journey: {e}")
            failures += 1
            continue
        print(format_journey_plan(plan))

    print()
    total = len(demo_scenarios())
    print(f"[DONE] {total - failures} of {total} scenarios planned")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

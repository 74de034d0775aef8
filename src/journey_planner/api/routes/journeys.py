"""Journey planning endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from ...schemas.journeys import JourneyPlanResponse, JourneyRequest, ScenarioModel
from ...services.planning.errors import PlanningError, UpstreamUnavailableError
from ...services.planning.scenarios import demo_scenarios
from ...services.planning.service import journey_to_request, plan_journey_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/journeys", tags=["journeys"])


@router.post("/plan", response_model=JourneyPlanResponse, status_code=status.HTTP_200_OK)
def plan(payload: JourneyRequest) -> JourneyPlanResponse:
    try:
        return plan_journey_request(payload)
    except PlanningError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UpstreamUnavailableError as exc:
        logger.warning(f"Upstream data unavailable while planning journey: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error planning journey: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan journey: {str(exc)}",
        ) from exc


@router.get("/scenarios", response_model=List[ScenarioModel], status_code=status.HTTP_200_OK)
def scenarios() -> List[ScenarioModel]:
    """Reference journeys that can be posted to ``/journeys/plan`` as-is."""
    return [
        ScenarioModel(name=scenario.name, journey=journey_to_request(scenario.journey))
        for scenario in demo_scenarios()
    ]

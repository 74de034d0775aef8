"""HTTP client for the fleet, pricing and geozone provider."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ...config import settings
from ...models.domain import GeoZone, PricingOffers, Vehicle
from ..planning.errors import UpstreamUnavailableError
from .parsers import geozone_from_payload, pricing_offers_from_payload, vehicles_from_payload

logger = logging.getLogger(__name__)


class FleetApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        city_uuid: str | None = None,
        vehicle_type: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.upstream_base_url).rstrip("/")
        if not self.base_url:
            raise ValueError("Upstream base URL is not configured.")
        self.city_uuid = city_uuid or settings.city_uuid
        self.vehicle_type = vehicle_type or settings.vehicle_type
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.upstream_max_retries
        self.backoff_seconds = (
            backoff_seconds if backoff_seconds is not None else settings.upstream_backoff_seconds
        )
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        """Create a short-lived client; each call may run on its own thread."""
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0)),
            transport=self._transport,
        )

    def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        url = f"{self.base_url}/{path}"
        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=params)
                    response.raise_for_status()
                    return response.json()
                except httpx.HTTPStatusError as e:
                    if e.response.status_code < 500:
                        raise UpstreamUnavailableError(
                            f"Upstream rejected request to {url} with status {e.response.status_code}"
                        ) from e
                    attempt += 1
                    if attempt > self.max_retries:
                        raise UpstreamUnavailableError(
                            f"Upstream error {e.response.status_code} from {url} after {self.max_retries} retries"
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"Upstream server error, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries})")
                    time.sleep(wait_time)
                except httpx.TransportError as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise UpstreamUnavailableError(
                            f"Failed to reach upstream service at {url}: {e}"
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"Upstream network error, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries}): {e}")
                    time.sleep(wait_time)
                except httpx.HTTPError as e:
                    raise UpstreamUnavailableError(f"Request to {url} failed: {e}") from e
                except ValueError as e:
                    raise UpstreamUnavailableError(f"Invalid JSON received from {url}: {e}") from e
        finally:
            client.close()

    def fetch_vehicles(self) -> list[Vehicle]:
        """Return the eligible vehicles of the configured city."""
        rows = self._get_json(f"cities/{self.city_uuid}/vehicles")
        if not isinstance(rows, list):
            raise UpstreamUnavailableError("Vehicle payload is not a list.")
        vehicles = vehicles_from_payload(rows, self.vehicle_type)
        logger.info(f"Fetched {len(rows)} vehicles, {len(vehicles)} of type '{self.vehicle_type}'")
        return vehicles

    def fetch_pricing(self, model_type: str, tier: str) -> PricingOffers:
        payload = self._get_json("pricing/pay-per-use", params={"modelType": model_type, "tier": tier})
        try:
            return pricing_offers_from_payload(payload)
        except (KeyError, ValueError, TypeError) as e:
            raise UpstreamUnavailableError(f"Invalid pricing payload for {model_type}/{tier}: {e}") from e

    def fetch_geozone(self, vehicle_uuid: str) -> GeoZone:
        rows = self._get_json(f"geozones/{vehicle_uuid}")
        if not isinstance(rows, list):
            raise UpstreamUnavailableError("Geozone payload is not a list.")
        return geozone_from_payload(rows)


def check_health(
    base_url: str | None = None, city_uuid: str | None = None, timeout: float | None = None
) -> bool:
    """Check that the provider answers the fleet listing for the configured city."""
    base = (base_url or settings.upstream_base_url).rstrip("/")
    if not base:
        return False
    try:
        url = f"{base}/cities/{city_uuid or settings.city_uuid}/vehicles"
        response = httpx.get(
            url, timeout=timeout if timeout is not None else settings.request_timeout_seconds
        )
        response.raise_for_status()
        return isinstance(response.json(), list)
    except httpx.HTTPError:
        return False
    except ValueError:
        return False

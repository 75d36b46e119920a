"""
SpaceX REST API (v4) client with fixture data for offline runs.

API:   https://api.spacexdata.com/v4
Docs:  https://github.com/r-spacex/SpaceX-API/tree/master/docs

Endpoints used for recovery analytics::

    GET /cores              — every booster with RTLS/ASDS landing counters
    GET /landpads           — landing zones and drone ships
    GET /launches/past      — completed launches, chronological ascending

The API is public: no credentials. The base URL is injected at construction
(``AppConfig.api.base_url``) so tests and mirrors never touch a global.

Fixture mode (``api.use_fixture = true`` or ``--fixture``) returns the
class-level ``FIXTURE_*`` payloads instead of calling the network. The
fixtures are structurally identical to live responses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

import httpx

logger = logging.getLogger(__name__)


# ── Response container ────────────────────────────────────────────────────────

@dataclass
class FetchedCollections:
    """The three raw collections the analytics core consumes."""

    cores: list[dict[str, Any]]
    landpads: list[dict[str, Any]]
    launches: list[dict[str, Any]]
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_fixture: bool = False


# ── Client ─────────────────────────────────────────────────────────────────────

class SpaceXClient:
    """Thin synchronous wrapper over the SpaceX v4 REST API.

    Usage::

        with SpaceXClient(base_url=config.api.base_url) as client:
            cores = client.get_cores()

    Fixture mode (no network)::

        collections = SpaceXClient(base_url=config.api.base_url).fetch_all(use_fixture=True)

    Every ``get_*`` method raises ``httpx.HTTPStatusError`` on a non-2xx
    response and ``httpx.TransportError`` on connection problems. Nothing is
    retried.
    """

    FIXTURE_CORES: ClassVar[list[dict[str, Any]]] = [
        {
            "id": "5e9e289df35918033d3b2623", "serial": "B1049", "status": "active",
            "reuse_count": 9, "rtls_attempts": 0, "rtls_landings": 0,
            "asds_attempts": 10, "asds_landings": 10,
            "last_update": "Landed on OCISLY as of Feb 4, 2022",
        },
        {
            "id": "5e9e28a6f35918c0803b265c", "serial": "B1051", "status": "active",
            "reuse_count": 9, "rtls_attempts": 1, "rtls_landings": 1,
            "asds_attempts": 9, "asds_landings": 9,
            "last_update": "Landed on JRTI as of Mar 14, 2022",
        },
        {
            "id": "5e9e28a2f359187afd3b2662", "serial": "B1056", "status": "lost",
            "reuse_count": 3, "rtls_attempts": 1, "rtls_landings": 1,
            "asds_attempts": 3, "asds_landings": 2,
            "last_update": "Lost at sea after landing failure, Feb 2020",
        },
        {
            "id": "5e9e28a1f3591809c13b2641", "serial": "B1046", "status": "retired",
            "reuse_count": 3, "rtls_attempts": 0, "rtls_landings": 0,
            "asds_attempts": 3, "asds_landings": 3,
            "last_update": "Expended on final flight, Jan 2020",
        },
        {
            "id": "5e9e28a7f3591817f23b2663", "serial": "B1058", "status": "unknown",
            "reuse_count": 0, "rtls_attempts": None, "rtls_landings": None,
            "asds_attempts": 1, "asds_landings": 1,
            "last_update": None,
        },
    ]

    FIXTURE_LANDPADS: ClassVar[list[dict[str, Any]]] = [
        {
            "id": "5e9e3032383ecb267a34e7c7", "name": "LZ-1",
            "full_name": "Landing Zone 1", "type": "RTLS",
            "locality": "Cape Canaveral", "region": "Florida",
            "landing_attempts": 15, "landing_successes": 14, "status": "active",
        },
        {
            "id": "5e9e3032383ecb6bb234e7ca", "name": "OCISLY",
            "full_name": "Of Course I Still Love You", "type": "ASDS",
            "locality": "Port Canaveral", "region": "Florida",
            "landing_attempts": 36, "landing_successes": 33, "status": "active",
        },
        {
            "id": "5e9e3033383ecbb9e534e7cc", "name": "JRTI-1",
            "full_name": "Just Read The Instructions V1", "type": "ASDS",
            "locality": "Port of Los Angeles", "region": "California",
            "landing_attempts": 2, "landing_successes": 0, "status": "retired",
        },
        {
            "id": "5e9e3034383ecb8e4a34e7cd", "name": "LZ-4",
            "full_name": "Landing Zone 4", "type": "RTLS",
            "locality": "Vandenberg Space Force Base", "region": "California",
            "landing_attempts": 0, "landing_successes": 0, "status": "under construction",
        },
    ]

    FIXTURE_LAUNCHES: ClassVar[list[dict[str, Any]]] = [
        {
            "id": "5eb87cdcffd86e000604b32c", "name": "CRS-5",
            "date_utc": "2015-01-10T09:47:00.000Z",
            "cores": [{
                "core": "5e9e289ef3591814873b2625", "flight": 1, "gridfins": True,
                "legs": True, "reused": False, "landing_attempt": True,
                "landing_success": False, "landing_type": "ASDS",
                "landpad": "5e9e3032383ecb761634e7cb",
            }],
        },
        {
            "id": "5eb87cdeffd86e000604b330", "name": "OG-2 Mission 2",
            "date_utc": "2015-12-22T01:29:00.000Z",
            "cores": [{
                "core": "5e9e289ff359185a4a3b2627", "flight": 1, "gridfins": True,
                "legs": True, "reused": False, "landing_attempt": True,
                "landing_success": True, "landing_type": "RTLS",
                "landpad": "5e9e3032383ecb267a34e7c7",
            }],
        },
        {
            "id": "5eb87ce1ffd86e000604b333", "name": "SES-9",
            "date_utc": "2016-03-04T23:35:00.000Z",
            "cores": [{
                "core": "5e9e289ff35918416a3b2629", "flight": 1, "gridfins": True,
                "legs": True, "reused": False, "landing_attempt": True,
                "landing_success": False, "landing_type": "ASDS",
                "landpad": "5e9e3032383ecb6bb234e7ca",
            }],
        },
        {
            "id": "5eb87ce3ffd86e000604b336", "name": "Falcon Heavy Test Flight",
            "date_utc": "2018-02-06T20:45:00.000Z",
            "cores": [
                {
                    "core": "5e9e289ef35918ae803b2614", "flight": 1, "gridfins": True,
                    "legs": True, "reused": False, "landing_attempt": True,
                    "landing_success": False, "landing_type": "ASDS",
                    "landpad": "5e9e3032383ecb6bb234e7ca",
                },
                {
                    "core": "5e9e28a0f3591817f23b2652", "flight": 2, "gridfins": True,
                    "legs": True, "reused": True, "landing_attempt": True,
                    "landing_success": True, "landing_type": "RTLS",
                    "landpad": "5e9e3032383ecb267a34e7c7",
                },
                {
                    "core": "5e9e28a0f3591809c13b2640", "flight": 2, "gridfins": True,
                    "legs": True, "reused": True, "landing_attempt": True,
                    "landing_success": True, "landing_type": "RTLS",
                    "landpad": "5e9e3032383ecb90a834e7c8",
                },
            ],
        },
        {
            "id": "5eb87cf9ffd86e000604b34a", "name": "Telstar 19V",
            "date_utc": "2018-07-22T05:50:00.000Z",
            "cores": [{
                "core": "5e9e28a1f3591833703b2645", "flight": 1, "gridfins": True,
                "legs": True, "reused": False, "landing_attempt": True,
                "landing_success": True, "landing_type": "ASDS",
                "landpad": "5e9e3032383ecb6bb234e7ca",
            }],
        },
        {
            "id": "5eb87d13ffd86e000604b360", "name": "Starlink-1",
            "date_utc": "2019-11-11T14:56:00.000Z",
            "cores": [{
                "core": "5e9e28a2f359187afd3b2662", "flight": 4, "gridfins": True,
                "legs": True, "reused": True, "landing_attempt": True,
                "landing_success": True, "landing_type": "ASDS",
                "landpad": "5e9e3032383ecb6bb234e7ca",
            }],
        },
        {
            "id": "5eb87d42ffd86e000604b384", "name": "Crew Dragon In Flight Abort Test",
            "date_utc": "2020-01-19T15:30:00.000Z",
            "cores": [{
                "core": "5e9e28a1f3591809c13b2641", "flight": 4, "gridfins": False,
                "legs": False, "reused": True, "landing_attempt": False,
                "landing_success": None, "landing_type": None, "landpad": None,
            }],
        },
        {
            "id": "5eb87d43ffd86e000604b385", "name": "Starlink-5 (v1.0)",
            "date_utc": "2020-02-17T15:05:00.000Z",
            "cores": [{
                "core": "5e9e28a2f359187afd3b2662", "flight": 4, "gridfins": True,
                "legs": True, "reused": True, "landing_attempt": True,
                "landing_success": False, "landing_type": None, "landpad": None,
            }],
        },
        {
            "id": "5eb87d46ffd86e000604b389", "name": "Crew-1",
            "date_utc": "2020-11-16T00:27:00.000Z",
            "cores": [{
                "core": "5e9e28a7f3591817f23b2663", "flight": 1, "gridfins": True,
                "legs": True, "reused": False, "landing_attempt": True,
                "landing_success": True, "landing_type": "ASDS",
                "landpad": "5e9e3033383ecbb9e534e7cc",
            }],
        },
        {
            "id": "600f9b6d8f798e2a4d5f979f", "name": "Starlink-21 (v1.0)",
            "date_utc": "2021-03-14T10:01:00.000Z",
            "cores": [{
                "core": "5e9e289df35918033d3b2623", "flight": 9, "gridfins": True,
                "legs": True, "reused": True, "landing_attempt": True,
                "landing_success": True, "landing_type": "ASDS",
                "landpad": "5e9e3032383ecb6bb234e7ca",
            }],
        },
        {
            "id": "61eefaa89eb1064137a1bd73", "name": "Transporter-3",
            "date_utc": "2022-01-13T15:25:00.000Z",
            "cores": [{
                "core": "5e9e28a6f35918c0803b265c", "flight": 10, "gridfins": True,
                "legs": True, "reused": True, "landing_attempt": True,
                "landing_success": True, "landing_type": "RTLS",
                "landpad": "5e9e3032383ecb267a34e7c7",
            }],
        },
        {
            "id": "62dd70d5202306255024d139", "name": "Nusantara Satu",
            "date_utc": "2022-02-22T00:45:00.000Z",
            "cores": [],
        },
    ]

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: API root, e.g. ``https://api.spacexdata.com/v4``.
            timeout: Per-request timeout in seconds.
            transport: Optional httpx transport (``httpx.MockTransport`` in tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> "SpaceXClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # ── Real API methods ───────────────────────────────────────────────────────

    def _get(self, path: str) -> Any:
        resp = self._http.get(path)
        resp.raise_for_status()
        data = resp.json()
        logger.info(
            "GET %s%s -> %s",
            self.base_url, path,
            f"{len(data)} records" if isinstance(data, list) else "1 record",
        )
        return data

    def get_cores(self) -> list[dict[str, Any]]:
        """All cores (boosters); the primary recovery-tracking subject."""
        return self._get("/cores")

    def get_core(self, core_id: str) -> dict[str, Any]:
        return self._get(f"/cores/{core_id}")

    def get_landpads(self) -> list[dict[str, Any]]:
        """All landing sites: land zones (LZ) and drone ships (ASDS)."""
        return self._get("/landpads")

    def get_landpad(self, landpad_id: str) -> dict[str, Any]:
        return self._get(f"/landpads/{landpad_id}")

    def get_launches(self) -> list[dict[str, Any]]:
        return self._get("/launches")

    def get_past_launches(self) -> list[dict[str, Any]]:
        """Completed launches in chronological order."""
        return self._get("/launches/past")

    def get_upcoming_launches(self) -> list[dict[str, Any]]:
        return self._get("/launches/upcoming")

    def get_rockets(self) -> list[dict[str, Any]]:
        return self._get("/rockets")

    def fetch_all(self, use_fixture: bool = False) -> FetchedCollections:
        """Fetch cores, landpads and past launches in one call.

        Args:
            use_fixture: Return the class fixtures instead of calling the API.

        Returns:
            FetchedCollections with the three raw collections.
        """
        if use_fixture:
            return self.get_fixture_collections()
        return FetchedCollections(
            cores=self.get_cores(),
            landpads=self.get_landpads(),
            launches=self.get_past_launches(),
            is_fixture=False,
        )

    # ── Fixture / stub mode ────────────────────────────────────────────────────

    def get_fixture_collections(self) -> FetchedCollections:
        """Return fixture payloads for offline CLI/dashboard runs and tests.

        Copies are returned so callers can never mutate the class fixtures.
        """
        collections = FetchedCollections(
            cores=[dict(c) for c in self.FIXTURE_CORES],
            landpads=[dict(p) for p in self.FIXTURE_LANDPADS],
            launches=[
                {**launch, "cores": [dict(c) for c in launch["cores"]]}
                for launch in self.FIXTURE_LAUNCHES
            ],
            is_fixture=True,
        )
        logger.debug(
            "SpaceXClient: returning fixture data (%d cores, %d landpads, %d launches)",
            len(collections.cores), len(collections.landpads), len(collections.launches),
        )
        return collections

"""Service health checks.

Checks are named async callables returning a ServiceCheck. The checker runs
them concurrently, each under a timeout, and folds the results into one
HealthReport that the API's /health, /ready and /live routes serve.

Example:
    checker = HealthChecker(version="1.0.0")

    async def check_catalog() -> ServiceCheck:
        return ServiceCheck(name="catalog", status=ServiceStatus.HEALTHY)

    checker.add_check("catalog", check_catalog)
    report = await checker.check_all()
"""

import asyncio
import time
from collections.abc import Callable, Coroutine
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from src.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CHECK_TIMEOUT = 10.0


class ServiceStatus(Enum):
    """Status of an individual service."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"
    UNKNOWN = "unknown"


@dataclass
class ServiceCheck:
    """Result of a single health check."""

    name: str
    status: ServiceStatus
    latency_ms: float | None = None
    message: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class HealthReport:
    """Aggregated health report for all checks."""

    status: ServiceStatus
    timestamp: str
    checks: list[ServiceCheck]
    version: str | None = None

    @property
    def is_ready(self) -> bool:
        """Degraded services still accept traffic."""
        return self.status in (ServiceStatus.HEALTHY, ServiceStatus.DEGRADED)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "timestamp": self.timestamp,
            "version": self.version,
            "checks": [check.to_dict() for check in self.checks],
        }


HealthCheckFunc = Callable[[], Coroutine[Any, Any, ServiceCheck]]


def overall_status(checks: list[ServiceCheck]) -> ServiceStatus:
    """Fold individual results into one status; the worst one wins."""
    if all(c.status == ServiceStatus.HEALTHY for c in checks):
        return ServiceStatus.HEALTHY
    if any(c.status == ServiceStatus.UNHEALTHY for c in checks):
        return ServiceStatus.UNHEALTHY
    if any(c.status == ServiceStatus.DEGRADED for c in checks):
        return ServiceStatus.DEGRADED
    return ServiceStatus.UNKNOWN


class HealthChecker:
    """Runs named health checks."""

    def __init__(
        self,
        version: str | None = None,
        timeout: float = DEFAULT_CHECK_TIMEOUT,
    ) -> None:
        self._checks: dict[str, HealthCheckFunc] = {}
        self._version = version
        self._timeout = timeout

    @property
    def check_names(self) -> list[str]:
        return list(self._checks)

    def add_check(self, name: str, check_func: HealthCheckFunc) -> None:
        """Register (or replace) a check under ``name``."""
        self._checks[name] = check_func

    def remove_check(self, name: str) -> None:
        self._checks.pop(name, None)

    async def check_one(self, name: str) -> ServiceCheck:
        """Run a single check.

        A check that raises or times out is reported as UNHEALTHY rather than
        propagating.

        Raises:
            KeyError: If no check is registered with that name.
        """
        if name not in self._checks:
            raise KeyError(f"No health check registered for: {name}")

        start = time.perf_counter()
        try:
            result = await asyncio.wait_for(self._checks[name](), timeout=self._timeout)
        except TimeoutError:
            result = ServiceCheck(
                name=name,
                status=ServiceStatus.UNHEALTHY,
                message="Health check timed out",
            )
        except Exception as ex:
            logger.warning("health_check_failed", check=name, error=str(ex))
            result = ServiceCheck(
                name=name,
                status=ServiceStatus.UNHEALTHY,
                message=str(ex),
            )
        if result.latency_ms is None:
            result.latency_ms = round((time.perf_counter() - start) * 1000, 2)
        return result

    async def check_all(self) -> HealthReport:
        """Run every registered check concurrently."""
        checks = list(await asyncio.gather(*(self.check_one(n) for n in self._checks)))
        return HealthReport(
            status=overall_status(checks),
            timestamp=datetime.now(UTC).isoformat(),
            checks=checks,
            version=self._version,
        )

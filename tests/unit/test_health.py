"""Tests for health check functionality."""

import asyncio

import pytest

from src.core.health import (
    HealthChecker,
    HealthReport,
    ServiceCheck,
    ServiceStatus,
    overall_status,
)


def _check(name: str, status: ServiceStatus) -> ServiceCheck:
    return ServiceCheck(name=name, status=status)


def _returning(check: ServiceCheck):
    async def run() -> ServiceCheck:
        return check

    return run


class TestServiceCheck:
    """Tests for ServiceCheck dataclass."""

    def test_defaults(self) -> None:
        check = _check("catalog", ServiceStatus.HEALTHY)
        assert check.latency_ms is None
        assert check.message is None
        assert check.details == {}

    def test_to_dict_uses_status_value(self) -> None:
        check = ServiceCheck(
            name="catalog",
            status=ServiceStatus.DEGRADED,
            latency_ms=1.5,
            details={"routes": 37},
        )
        assert check.to_dict() == {
            "name": "catalog",
            "status": "degraded",
            "latency_ms": 1.5,
            "message": None,
            "details": {"routes": 37},
        }


class TestHealthReport:
    """Tests for HealthReport dataclass."""

    def test_to_dict(self) -> None:
        """Should convert to dictionary correctly."""
        report = HealthReport(
            status=ServiceStatus.HEALTHY,
            timestamp="2025-01-01T00:00:00Z",
            checks=[ServiceCheck("catalog", ServiceStatus.HEALTHY, latency_ms=0.2)],
            version="1.0.0",
        )

        result = report.to_dict()

        assert result["status"] == "healthy"
        assert result["timestamp"] == "2025-01-01T00:00:00Z"
        assert result["version"] == "1.0.0"
        assert result["checks"][0]["name"] == "catalog"
        assert result["checks"][0]["status"] == "healthy"

    @pytest.mark.parametrize(
        ("status", "ready"),
        [
            (ServiceStatus.HEALTHY, True),
            (ServiceStatus.DEGRADED, True),
            (ServiceStatus.UNHEALTHY, False),
            (ServiceStatus.UNKNOWN, False),
        ],
    )
    def test_is_ready(self, status, ready) -> None:
        report = HealthReport(status=status, timestamp="now", checks=[])
        assert report.is_ready is ready


class TestOverallStatus:
    """Tests for overall_status function."""

    def test_no_checks_is_healthy(self) -> None:
        assert overall_status([]) == ServiceStatus.HEALTHY

    def test_unhealthy_beats_degraded(self) -> None:
        checks = [
            _check("a", ServiceStatus.DEGRADED),
            _check("b", ServiceStatus.UNHEALTHY),
        ]
        assert overall_status(checks) == ServiceStatus.UNHEALTHY

    def test_degraded_beats_healthy(self) -> None:
        checks = [
            _check("a", ServiceStatus.HEALTHY),
            _check("b", ServiceStatus.DEGRADED),
        ]
        assert overall_status(checks) == ServiceStatus.DEGRADED

    def test_unknown_without_failures(self) -> None:
        checks = [
            _check("a", ServiceStatus.HEALTHY),
            _check("b", ServiceStatus.UNKNOWN),
        ]
        assert overall_status(checks) == ServiceStatus.UNKNOWN


class TestHealthChecker:
    """Tests for HealthChecker class."""

    async def test_add_and_remove_check(self) -> None:
        checker = HealthChecker()
        checker.add_check("catalog", _returning(_check("catalog", ServiceStatus.HEALTHY)))
        assert checker.check_names == ["catalog"]

        checker.remove_check("catalog")
        checker.remove_check("catalog")
        assert checker.check_names == []

    async def test_check_one_unknown_raises(self) -> None:
        checker = HealthChecker()

        with pytest.raises(KeyError, match="No health check registered for: catalog"):
            await checker.check_one("catalog")

    async def test_check_one_fills_in_latency(self) -> None:
        checker = HealthChecker()
        checker.add_check("catalog", _returning(_check("catalog", ServiceStatus.HEALTHY)))

        result = await checker.check_one("catalog")
        assert result.latency_ms is not None
        assert result.latency_ms >= 0

    async def test_check_one_keeps_reported_latency(self) -> None:
        checker = HealthChecker()
        check = ServiceCheck("catalog", ServiceStatus.HEALTHY, latency_ms=42.0)
        checker.add_check("catalog", _returning(check))

        result = await checker.check_one("catalog")
        assert result.latency_ms == 42.0

    async def test_check_one_times_out(self) -> None:
        checker = HealthChecker(timeout=0.01)

        async def check_hangs() -> ServiceCheck:
            await asyncio.sleep(1)
            return _check("slow", ServiceStatus.HEALTHY)

        checker.add_check("slow", check_hangs)
        result = await checker.check_one("slow")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "Health check timed out"

    async def test_check_one_handles_exception(self) -> None:
        checker = HealthChecker()

        async def check_error() -> ServiceCheck:
            raise RuntimeError("catalogue not loaded")

        checker.add_check("catalog", check_error)

        result = await checker.check_one("catalog")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "catalogue not loaded"
        assert result.latency_ms is not None

    async def test_check_all_empty(self) -> None:
        report = await HealthChecker(version="2.0.0").check_all()
        assert report.status == ServiceStatus.HEALTHY
        assert report.checks == []
        assert report.version == "2.0.0"

    async def test_check_all_folds_results(self) -> None:
        checker = HealthChecker()
        checker.add_check("a", _returning(_check("a", ServiceStatus.HEALTHY)))
        checker.add_check("b", _returning(_check("b", ServiceStatus.DEGRADED)))

        report = await checker.check_all()
        assert report.status == ServiceStatus.DEGRADED
        assert [c.name for c in report.checks] == ["a", "b"]

    async def test_check_all_runs_concurrently(self) -> None:
        checker = HealthChecker()

        def sleeping(name: str):
            async def run() -> ServiceCheck:
                await asyncio.sleep(0.05)
                return _check(name, ServiceStatus.HEALTHY)

            return run

        checker.add_check("a", sleeping("a"))
        checker.add_check("b", sleeping("b"))

        loop = asyncio.get_running_loop()
        start = loop.time()
        await checker.check_all()
        assert loop.time() - start < 0.1

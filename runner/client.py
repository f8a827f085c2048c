from __future__ import annotations

import asyncio
import time
from collections.abc import Iterable

import httpx

from demo_server.domain.status import is_healthy
from runner.logging_conf import get_logger
from runner.types import Check, CheckResult, FetchError, HealthTimeoutError

logger = get_logger("runner.client")


async def wait_for_health(
    base_url: str,
    timeout_s: float = 30.0,
    poll_interval_s: float = 0.25,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Ping /health until it returns ok or raise after a timeout.

    - Tries repeatedly for `timeout_s` seconds
    - Connection errors and non-ok bodies count as "not yet"
    - Logs a concise status when health is confirmed
    """
    deadline = time.monotonic() + timeout_s
    attempts = 0
    async with httpx.AsyncClient(base_url=base_url, timeout=5.0, transport=transport) as client:
        while time.monotonic() < deadline:
            attempts += 1
            try:
                r = await client.get("/health")
                if r.status_code == 200 and is_healthy(r.json()):
                    logger.info("health.ok", extra={"event": "health_ok", "attempts": attempts})
                    return
            except (httpx.HTTPError, ValueError) as e:
                logger.debug(
                    "health.retry",
                    extra={"event": "health_retry", "attempt": attempts, "error": str(e)},
                )
            await asyncio.sleep(poll_interval_s)
    raise HealthTimeoutError(f"/health did not report ok within {timeout_s}s")


async def fetch(client: httpx.AsyncClient, check: Check) -> CheckResult:
    """Issue one GET for `check` and record status, size and timing.

    Raises FetchError on transport failures; an unexpected status is not an
    error here, it is reported through `CheckResult.passed`.
    """
    start = time.perf_counter()
    try:
        r = await client.get(check.path)
    except httpx.HTTPError as e:
        raise FetchError(f"GET {check.path} failed: {e}") from e
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return CheckResult(
        name=check.name,
        path=check.path,
        expected_status=check.expected_status,
        status_code=r.status_code,
        size=len(r.content),
        elapsed_ms=round(elapsed_ms, 2),
    )


async def run_checks(
    base_url: str,
    checks: Iterable[Check],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[CheckResult]:
    """Run all checks concurrently and return one result per check.

    - Continues even if some requests fail at the transport level
    - Logs each failed check with what was expected
    """
    checks = list(checks)
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0, transport=transport) as client:
        outcomes = await asyncio.gather(
            *(fetch(client, c) for c in checks), return_exceptions=True
        )

    results: list[CheckResult] = []
    for check, res in zip(checks, outcomes):
        if isinstance(res, FetchError):
            res = CheckResult(
                name=check.name,
                path=check.path,
                expected_status=check.expected_status,
                status_code=None,
                size=0,
                elapsed_ms=0.0,
                error=str(res),
            )
        elif isinstance(res, BaseException):
            raise res
        if not res.passed:
            logger.warning(
                "check.failed",
                extra={
                    "event": "check_failed",
                    "check": res.name,
                    "path": res.path,
                    "expected_status": res.expected_status,
                    "status_code": res.status_code,
                    "error": res.error,
                },
            )
        results.append(res)
    return results

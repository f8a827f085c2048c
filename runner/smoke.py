#!/usr/bin/env python3
"""Smoke runner for a freshly deployed instance.

Steps:
- wait for server health
- GET / and any extra paths (expect 200)
- GET a missing file and a traversal probe (expect 404)
- emit a compact summary and exit code

Run with `python -m runner.smoke --base-url http://host:8080`.
"""
from __future__ import annotations

import asyncio
import sys
from collections.abc import Iterable

import httpx

from runner.cli import parse_args
from runner.client import run_checks, wait_for_health
from runner.logging_conf import get_logger, setup_logging
from runner.types import Check, HealthTimeoutError
from runner.utils import summarize

setup_logging()
logger = get_logger("runner")

EXIT_UNHEALTHY = 2

# Percent-encoded slashes so the client does not collapse the dot segments.
TRAVERSAL_PROBE = "/..%2F..%2F..%2Fetc%2Fpasswd"
MISSING_PROBE = "/__smoke_missing__.html"


def build_checks(extra_paths: Iterable[str] = ()) -> list[Check]:
    """Return the standard checks plus one 200-check per extra path."""
    checks = [
        Check(name="index", path="/", expected_status=200),
        Check(name="missing", path=MISSING_PROBE, expected_status=404),
        Check(name="traversal", path=TRAVERSAL_PROBE, expected_status=404),
    ]
    for p in extra_paths:
        path = p if p.startswith("/") else f"/{p}"
        checks.append(Check(name=f"static:{path}", path=path, expected_status=200))
    return checks


async def run_smoke(
    *,
    base_url: str,
    extra_paths: Iterable[str] = (),
    poll_interval_s: float = 0.25,
    timeout_s: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    try:
        await wait_for_health(
            base_url, timeout_s=timeout_s, poll_interval_s=poll_interval_s, transport=transport
        )
    except HealthTimeoutError as e:
        logger.error("runner.unhealthy", extra={"event": "unhealthy", "error": str(e)})
        return EXIT_UNHEALTHY

    results = await run_checks(base_url, build_checks(extra_paths), transport=transport)
    summary, exit_code = summarize(results)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            extra_paths=args.paths,
            poll_interval_s=args.poll_interval,
            timeout_s=args.timeout,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()

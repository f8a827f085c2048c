from __future__ import annotations

from runner.types import CheckResult


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation."""
    if not values:
        return 0.0
    s = sorted(values)
    k = (len(s) - 1) * p
    f = int(k)
    c = min(f + 1, len(s) - 1)
    if f == c:
        return s[f]
    d0 = s[f] * (c - k)
    d1 = s[c] * (k - f)
    return d0 + d1


def summarize(results: list[CheckResult]) -> tuple[dict, int]:
    """Compute summary dict and an exit code from check results."""
    durations_ms = [r.elapsed_ms for r in results if r.status_code is not None]
    passed = [r for r in results if r.passed]
    failures_detail = [
        {
            "check": r.name,
            "path": r.path,
            "expected_status": r.expected_status,
            "status_code": r.status_code,
            "error": r.error,
        }
        for r in results
        if not r.passed
    ]

    avg_ms = (sum(durations_ms) / len(durations_ms)) if durations_ms else 0.0
    summary = {
        "component": "runner",
        "event": "summary",
        "checks": len(results),
        "passed_count": len(passed),
        "failed_count": len(failures_detail),
        "timings": {
            "avg_ms": round(avg_ms, 2),
            "p95_ms": round(percentile(durations_ms, 0.95), 2),
            "max_ms": round(max(durations_ms), 2) if durations_ms else 0.0,
        },
        "failures": failures_detail,
    }
    exit_code = 0 if (results and not failures_detail) else 1
    return summary, exit_code

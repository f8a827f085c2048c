from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="Static demo server smoke runner")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8080"))
    parser.add_argument("--timeout", type=float, default=30.0, help="seconds to wait for /health")
    parser.add_argument("--poll", type=float, default=0.25, dest="poll_interval")
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        dest="paths",
        help="extra static path expected to return 200 (repeatable)",
    )
    return parser.parse_args(argv)

#!/usr/bin/env python3
"""Run the submissions HTTP service with uvicorn.

Providers are selected by environment variables (see `submissions.config`);
a `.env` file at the repository root is loaded first without overriding
variables that are already set.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def main() -> int:
    load_dotenv(REPO_ROOT / ".env")
    args = parse_args()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(
        "submissions.adapters.http_app:create_app_from_env",
        factory=True,
        host=args.host,
        port=args.port,
        log_config=None,
    )
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve the inquiry, booking and webhook-relay endpoints."
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Interface to bind (default: HOST or 0.0.0.0).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port to bind (default: PORT or 8000).",
    )
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())

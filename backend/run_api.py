#!/usr/bin/env python
"""
Run the user directory API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode
"""

import argparse
import os

import uvicorn

from shared.config import get_settings
from shared.logging import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Run the user directory API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument("--seed-file", type=str, help="JSON file of users to register at startup")
    args = parser.parse_args()

    if args.seed_file:
        os.environ["DIRECTORY_SEED_FILE"] = args.seed_file
    settings = get_settings()
    log_config = configure_logging(settings.log_level)

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_config=log_config,
    )


if __name__ == "__main__":
    main()

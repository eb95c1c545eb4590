#!/usr/bin/env python3
"""
API Server Launcher
===================

Starts the FastAPI backend server.

Usage:
    python run_api.py [--port PORT] [--host HOST]
"""

import argparse
import uvicorn
import logging

from config import API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Start the Nodule Follow-up API server")
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=API_PORT,
        help=f"Port to run the server on (default: {API_PORT})"
    )
    parser.add_argument(
        "--host", "-H",
        type=str,
        default=API_HOST,
        help=f"Host to bind the server to (default: {API_HOST})"
    )
    parser.add_argument(
        "--reload", "-r",
        action="store_true",
        help="Enable auto-reload for development"
    )

    args = parser.parse_args()

    logger.info(
        "Serving nodule follow-up API on http://%s:%d (docs at /docs, health at /health)",
        args.host,
        args.port
    )

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()

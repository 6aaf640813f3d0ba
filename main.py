from __future__ import annotations

import argparse
import sys

import uvicorn
from loguru import logger


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the checkers rules engine API.")
	parser.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default="info", help="Engine and uvicorn log level.")
	return parser.parse_args()


def configure_logging(level: str) -> None:
	logger.remove()
	logger.add(sys.stderr, level=level.upper())


def main() -> None:
	args = parse_args()
	configure_logging(args.log_level)
	uvicorn.run(
		"checkers_api.app:app",
		host=args.host,
		port=args.port,
		reload=args.reload,
		log_level=args.log_level,
	)


if __name__ == "__main__":
	main()

"""
Structured JSON logging configuration.
Outputs to stdout so log collectors can categorize levels from the payload.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict


class JSONFormatter(logging.Formatter):
	"""
	Formatter that renders each record as a single JSON line.
	"""

	def format(self, record: logging.LogRecord) -> str:
		"""Format log record as JSON."""
		log_data: Dict[str, Any] = {
			"timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z"),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
		}

		if record.exc_info:
			log_data["exception"] = self.formatException(record.exc_info)

		if record.module:
			log_data["module"] = record.module
		if record.funcName:
			log_data["function"] = record.funcName
		if record.lineno:
			log_data["line"] = record.lineno

		return json.dumps(log_data, ensure_ascii=False)


def setup_logging(level: str = "INFO") -> None:
	"""
	Configure application-wide logging to use structured JSON output to stdout.

	Args:
		level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

	Note:
		If PYTHONDEBUG is set, only the arkstorm logger level is adjusted so a
		locally configured (plain text) logging setup survives.
	"""
	resolved_level = getattr(logging, level.upper(), logging.INFO)

	is_debug_mode = os.getenv("PYTHONDEBUG", "").lower() in ("1", "true")
	if is_debug_mode:
		logging.getLogger("arkstorm").setLevel(resolved_level)
		return

	root_logger = logging.getLogger()
	root_logger.setLevel(resolved_level)
	root_logger.handlers.clear()

	stdout_handler = logging.StreamHandler(sys.stdout)
	stdout_handler.setLevel(resolved_level)
	stdout_handler.setFormatter(JSONFormatter())
	root_logger.addHandler(stdout_handler)

	# Noisy libraries
	logging.getLogger("httpx").setLevel(logging.WARNING)
	logging.getLogger("httpcore").setLevel(logging.WARNING)
	logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger instance with the given name.

	Args:
		name: Logger name (typically __name__)

	Returns:
		Logger instance
	"""
	return logging.getLogger(name)

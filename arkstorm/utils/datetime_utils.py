"""
Datetime utility functions.
"""
from typing import Optional, Tuple
from datetime import datetime, timezone, timedelta
import logging

logger = logging.getLogger(__name__)


def ensure_utc(dt: datetime) -> datetime:
	"""
	Return the datetime in UTC. Naive values are assumed to already be UTC.
	"""
	if dt.tzinfo is None:
		return dt.replace(tzinfo=timezone.utc)
	return dt.astimezone(timezone.utc)


def parse_datetime_to_utc(dt_string: Optional[str]) -> Optional[datetime]:
	"""
	Parse a datetime string to a datetime object in UTC.

	Handles formats like:
	- 2025-12-09T04:45:00-03:00 (with timezone offset)
	- 2025-12-09T04:45:00.000Z (Zulu/UTC, as produced by JavaScript's toISOString)
	- 2025-12-09T04:45:00 (no offset, assumed UTC)

	Args:
		dt_string: ISO format datetime string or None

	Returns:
		datetime object in UTC timezone or None
	"""
	if dt_string is None:
		return None
	try:
		if dt_string.endswith('Z'):
			dt_string = dt_string[:-1] + '+00:00'
		return ensure_utc(datetime.fromisoformat(dt_string))
	except (ValueError, AttributeError) as e:
		logger.warning(f"Failed to parse datetime string '{dt_string}': {str(e)}")
		return None


def days_before(now: datetime, days: int) -> datetime:
	"""The instant exactly `days` days before `now`, in UTC."""
	return ensure_utc(now) - timedelta(days=days)


def month_key(dt: datetime) -> Tuple[int, int]:
	"""
	(year, month) of the datetime in UTC, used to bucket events by calendar month.
	"""
	dt = ensure_utc(dt)
	return dt.year, dt.month

"""
Outage duration parsing and formatting.

Two parsers live here on purpose:

- parse_duration() is the strict write-path parser. It accepts the formats a
  user may type into the duration form and rejects everything else.
- extract_minutes() is the lenient read-path extractor used by the statistics.
  Stored durations are always canonical ("2h", "45m", "2h 30m"), so it only
  picks out the "<n>h" and "<n>m" parts and never raises.
"""
import re
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from arkstorm.exceptions.base import InvalidFormatError, NonPositiveDurationError, DurationTooLongError
from arkstorm.schemas.stats import DurationCheck

logger = logging.getLogger(__name__)

MAX_DURATION_MINUTES = 24 * 60

# Tried in order, first match wins.
_HOURS_AND_MINUTES = re.compile(r"^(\d+)h\s*(\d+)m?$", re.IGNORECASE)
_HOURS = re.compile(r"^(\d+)h$", re.IGNORECASE)
_MINUTES = re.compile(r"^(\d+)m(?:in)?$", re.IGNORECASE)
_MINUTES_WORD = re.compile(r"^(\d+)\s*min(?:utos?)?$", re.IGNORECASE)
_FRACTIONAL_HOURS = re.compile(r"^(\d+(?:\.\d+)?)h$", re.IGNORECASE)
_BARE_MINUTES = re.compile(r"^(\d+)$")

_HOURS_PART = re.compile(r"(\d+)h", re.IGNORECASE)
_MINUTES_PART = re.compile(r"(\d+)m", re.IGNORECASE)


def _match_minutes(text: str) -> Optional[int]:
	"""Total minutes for text in one of the accepted formats, None otherwise."""
	match = _HOURS_AND_MINUTES.match(text)
	if match:
		minutes = int(match.group(2))
		if minutes >= 60:
			return None
		return int(match.group(1)) * 60 + minutes

	match = _HOURS.match(text)
	if match:
		return int(match.group(1)) * 60

	match = _MINUTES.match(text) or _MINUTES_WORD.match(text)
	if match:
		return int(match.group(1))

	match = _FRACTIONAL_HOURS.match(text)
	if match:
		hours = Decimal(match.group(1))
		return int((hours * 60).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

	match = _BARE_MINUTES.match(text)
	if match:
		return int(match.group(1))

	return None


def parse_duration(text: str) -> int:
	"""
	Parse user-typed duration text into whole minutes.

	Accepted (case-insensitive, surrounding whitespace ignored):
	"2h30", "2h 30m", "2h", "30m", "30min", "90 minutos", "1.5h", "120".

	Raises:
		InvalidFormatError: text matches none of the formats, or the combined
			form carries 60 or more minutes ("2h75")
		NonPositiveDurationError: total is zero
		DurationTooLongError: total is above 24 hours
	"""
	cleaned = (text or "").strip()
	total = _match_minutes(cleaned)
	if total is None:
		raise InvalidFormatError(text)
	if total <= 0:
		raise NonPositiveDurationError(total)
	if total > MAX_DURATION_MINUTES:
		raise DurationTooLongError(total, MAX_DURATION_MINUTES)
	return total


def format_duration(minutes: int) -> str:
	"""
	Canonical stored form: "45m", "2h" or "2h 5m".
	"""
	hours, remainder = divmod(int(minutes), 60)
	if hours == 0:
		return f"{remainder}m"
	if remainder == 0:
		return f"{hours}h"
	return f"{hours}h {remainder}m"


def normalize_duration(text: str) -> str:
	"""Validate user text and return its canonical form."""
	return format_duration(parse_duration(text))


def extract_minutes(text: Optional[str]) -> int:
	"""
	Lenient read-path parse: hours part times 60 plus minutes part, missing parts count as zero.
	"""
	if not text:
		return 0
	hours = _HOURS_PART.search(text)
	minutes = _MINUTES_PART.search(text)
	return (int(hours.group(1)) * 60 if hours else 0) + (int(minutes.group(1)) if minutes else 0)


def format_duration_display(minutes: float) -> str:
	"""
	Human readable form for averages and totals, e.g. "45min", "2h", "2h 5min".
	"""
	total = int(Decimal(str(minutes)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
	if total < 60:
		return f"{total}min"
	hours, remainder = divmod(total, 60)
	return f"{hours}h {remainder}min" if remainder else f"{hours}h"


def estimate_impact(minutes: int) -> str:
	"""Impact hint shown while the user types a duration."""
	if minutes < 30:
		return "Interrupção breve - impacto mínimo"
	if minutes < 60:
		return "Interrupção curta - alguns inconvenientes"
	if minutes < 240:
		return "Interrupção média - impacto moderado"
	if minutes < 480:
		return "Interrupção longa - impacto significativo"
	return "Interrupção muito longa - impacto severo"


def check_duration(text: str) -> DurationCheck:
	"""
	Live validation for the duration form: minutes, canonical text and impact hint.
	Raises the same errors as parse_duration().
	"""
	minutes = parse_duration(text)
	return DurationCheck(
		input=text,
		minutes=minutes,
		canonical=format_duration(minutes),
		impact=estimate_impact(minutes),
	)

from typing import Iterable, List, Optional, Tuple
from arkstorm.schemas.event import Event


def split_location(location: Optional[str]) -> Tuple[str, str]:
	"""
	Split "street, area, city" into ("street", "area, city").
	Locations without a comma come back whole with an empty secondary part.
	"""
	if not location:
		return "", ""
	parts = location.split(",")
	if len(parts) >= 2:
		return parts[0].strip(), ",".join(parts[1:]).strip()
	return location, ""


def area_of(location: Optional[str]) -> Optional[str]:
	"""Second comma-delimited segment, trimmed. None when the location has no such segment."""
	if not location:
		return None
	parts = location.split(",")
	if len(parts) < 2:
		return None
	area = parts[1].strip()
	return area or None


def registered_locations(events: Iterable[Event], search: Optional[str] = None) -> List[str]:
	"""
	Distinct locations already recorded, in first-seen order.
	The optional search is a case-insensitive substring filter.
	"""
	seen = {}
	for event in events:
		if event.has_location and event.location not in seen:
			seen[event.location] = True
	locations = list(seen)
	if search:
		needle = search.lower()
		locations = [location for location in locations if needle in location.lower()]
	return locations


def latest_event_at(events: Iterable[Event], location: str) -> Optional[Event]:
	"""Most recent event recorded at exactly this location, or None."""
	latest = None
	for event in events:
		if event.location == location and (latest is None or event.date > latest.date):
			latest = event
	return latest

from typing import List, Optional
from datetime import datetime, timezone
from arkstorm.exceptions import NotFoundError
from arkstorm.schemas.event import Event
from arkstorm.schemas.stats import EventCard
from arkstorm.services.statistics_service import StatisticsService
from arkstorm.state import state
from arkstorm.utils.damage_classifier import classify_damage, describe_damage_impact, matches_category
from arkstorm.utils.duration import extract_minutes
from arkstorm.utils.location_utils import registered_locations, split_location
import logging

logger = logging.getLogger(__name__)

_KIND_PREDICATES = {
	"location": lambda event: event.has_location,
	"duration": lambda event: event.has_duration,
	"damage": lambda event: event.has_damage,
}


class EventCRUDService:
	"""Service for reading and deleting events."""

	@staticmethod
	def get_event(event_id: str) -> Event:
		"""
		Get an event by id.

		Raises:
			NotFoundError: If event is not found
		"""
		for event in state.load():
			if event.id == event_id:
				return event
		raise NotFoundError("Event", event_id)

	@staticmethod
	def get_events(
		kind: Optional[str] = None,
		severity: Optional[str] = None,
		window: str = "all",
		category: str = "all",
		now: Optional[datetime] = None
	) -> List[Event]:
		"""
		Get events newest first, optionally narrowed the way each screen narrows them.

		Args:
			kind: "location", "duration" or "damage" keeps records with that field populated
			severity: Keep only this severity
			window: "7d", "30d", "90d" or "all"
			category: Damage category filter, "all" keeps everything
			now: Reference instant for the window, defaults to the current time

		Returns:
			List of Event objects matching the filter criteria
		"""
		events = state.load()
		if kind is not None:
			events = [event for event in events if _KIND_PREDICATES[kind](event)]
		if severity is not None:
			events = [event for event in events if event.severity == severity]
		events = StatisticsService.filter_by_window(events, window, now or datetime.now(timezone.utc))
		if category != "all":
			events = [event for event in events if matches_category(event.damage, category)]
		return StatisticsService.recent_events(events, limit=None)

	@staticmethod
	def delete_event(event_id: str) -> None:
		"""
		Remove an event from the stored collection.

		Raises:
			NotFoundError: If event is not found
		"""
		events = state.load()
		remaining = [event for event in events if event.id != event_id]
		if len(remaining) == len(events):
			raise NotFoundError("Event", event_id)
		state.save(remaining)
		logger.info(f"Deleted event {event_id}")

	@staticmethod
	def get_registered_locations(search: Optional[str] = None) -> List[str]:
		"""Distinct locations the duration and damage forms may point at."""
		return registered_locations(state.load(), search)

	@staticmethod
	def build_event_card(event: Event) -> EventCard:
		main, secondary = split_location(event.location or "Local não informado")
		return EventCard(
			id=event.id,
			location_main=main,
			location_secondary=secondary,
			duration_minutes=extract_minutes(event.duration),
			damage_category=classify_damage(event.damage),
			damage_impact=describe_damage_impact(event.damage, event.severity),
			severity=event.severity,
		)

	@staticmethod
	def get_event_card(event_id: str) -> EventCard:
		return EventCRUDService.build_event_card(EventCRUDService.get_event(event_id))

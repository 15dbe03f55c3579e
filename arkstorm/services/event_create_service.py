import uuid
import logging
from datetime import datetime, timezone
from typing import List, Optional
from arkstorm.exceptions.base import ConflictError, MissingRequiredFieldError, NotFoundError, ValidationError
from arkstorm.schemas.event import Event
from arkstorm.schemas.event_form import EventForm
from arkstorm.state import state
from arkstorm.utils.datetime_utils import ensure_utc
from arkstorm.utils.duration import normalize_duration
from arkstorm.utils.location_utils import latest_event_at, registered_locations

logger = logging.getLogger(__name__)


class EventCreateService:
	"""Service for building, creating and replacing events from form submissions."""

	@staticmethod
	def build_event(
		form: EventForm,
		known_locations: List[str],
		now: datetime,
		initial: Optional[Event] = None,
		reference: Optional[Event] = None
	) -> Event:
		"""
		Validate a form submission and turn it into an Event.

		Rules:
		- every form needs a location
		- the duration form needs a duration, the damage form a damage description
		- duration and damage forms must point at an already registered location
		- latitude and longitude come together or not at all
		- the date may not be in the future
		- any duration is stored in canonical form
		- an omitted date or severity comes from the edited event, else from
		  `reference`, else defaults to now and "medium"

		Args:
			form: Submitted form
			known_locations: Locations already present in the collection
			now: Reference instant for the default date and the future check
			initial: Event being edited, if any; its id is kept
			reference: Event whose date and severity fill omitted fields of a new record

		Returns:
			New Event object (nothing is persisted here)

		Raises:
			MissingRequiredFieldError: A required field is blank
			ValidationError: Location not registered, half coordinates or future date
			InvalidFormatError, NonPositiveDurationError, DurationTooLongError: Bad duration
		"""
		location = (form.location or "").strip()
		if not location:
			raise MissingRequiredFieldError("location")

		raw_duration = (form.duration or "").strip()
		damage = (form.damage or "").strip()

		if form.kind == "duration" and not raw_duration:
			raise MissingRequiredFieldError("duration")
		if form.kind == "damage" and not damage:
			raise MissingRequiredFieldError("damage")

		if form.kind in ("duration", "damage") and location not in known_locations:
			raise ValidationError(
				f"Location '{location}' is not registered",
				detail="Localização inválida. Selecione uma localização da lista de locais já cadastrados."
			)

		latitude, longitude = form.latitude, form.longitude
		if latitude is None and longitude is None and initial is not None:
			latitude, longitude = initial.latitude, initial.longitude
		if (latitude is None) != (longitude is None):
			raise ValidationError(
				"Latitude and longitude must be provided together",
				detail="Informe latitude e longitude juntas."
			)

		source = initial if initial is not None else reference
		if form.date:
			date = ensure_utc(form.date)
		elif source is not None:
			date = source.date
		else:
			date = ensure_utc(now)
		if date > ensure_utc(now):
			raise ValidationError(
				f"Event date {date.isoformat()} is in the future",
				detail="A data do evento não pode estar no futuro."
			)

		return Event(
			id=initial.id if initial is not None else str(uuid.uuid4()),
			date=date,
			location=location,
			latitude=latitude,
			longitude=longitude,
			severity=form.severity or (source.severity if source is not None else None) or "medium",
			duration=normalize_duration(raw_duration) if raw_duration else None,
			damage=damage or None,
			description=(form.description or "").strip() or None,
		)

	@staticmethod
	def create_event(form: EventForm, now: Optional[datetime] = None) -> Event:
		"""
		Validate the form and append the new event to the stored collection.
		Duration and damage records take omitted date and severity from the
		most recent event at their location.

		Raises:
			ConflictError: If the generated id is already taken
		"""
		now = now or datetime.now(timezone.utc)
		events = state.load()
		reference = None
		if form.kind in ("duration", "damage"):
			# Follow-up records share the date and severity of the outage they describe
			reference = latest_event_at(events, (form.location or "").strip())
		event = EventCreateService.build_event(form, registered_locations(events), now, reference=reference)
		if any(existing.id == event.id for existing in events):
			raise ConflictError(f"Event with id `{event.id}` already exists")
		state.save(events + [event])
		logger.info(f"Created {form.kind} event {event.id}")
		return event

	@staticmethod
	def update_event(event_id: str, form: EventForm, now: Optional[datetime] = None) -> Event:
		"""
		Replace the event with the given id by the validated form, keeping the id.

		Raises:
			NotFoundError: If no event has that id
		"""
		now = now or datetime.now(timezone.utc)
		events = state.load()
		index = next((i for i, existing in enumerate(events) if existing.id == event_id), None)
		if index is None:
			raise NotFoundError("Event", event_id)
		updated = EventCreateService.build_event(form, registered_locations(events), now, initial=events[index])
		state.save(events[:index] + [updated] + events[index + 1:])
		logger.info(f"Updated {form.kind} event {event_id}")
		return updated

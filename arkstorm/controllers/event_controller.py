from fastapi import APIRouter, status, Query
from typing import List, Optional
from arkstorm.schemas.event import Event, Severity
from arkstorm.schemas.event_form import EventForm, EventKind
from arkstorm.schemas.stats import DamageCategoryFilter, EventCard, TimeWindow
from arkstorm.services.event_create_service import EventCreateService
from arkstorm.services.event_crud_service import EventCRUDService
from arkstorm.exceptions import handle_service_exceptions
import logging
router = APIRouter(prefix="/events", tags=["events"])
logger = logging.getLogger(__name__)

@router.get("/", response_model=List[Event])
@handle_service_exceptions
async def get_events(
	kind: Optional[EventKind] = Query(default=None, description="Keep records with this field populated"),
	severity: Optional[Severity] = Query(default=None, description="Keep records with this severity"),
	window: TimeWindow = Query(default="all", description="Trailing time window"),
	category: DamageCategoryFilter = Query(default="all", description="Damage category")
):
	"""
	Get events newest first, optionally filtered.
	"""
	return EventCRUDService.get_events(kind=kind, severity=severity, window=window, category=category)

@router.get("/locations", response_model=List[str])
@handle_service_exceptions
async def get_registered_locations(
	search: Optional[str] = Query(default=None, description="Case-insensitive substring filter")
):
	"""
	Distinct locations already registered, for the duration and damage forms.
	"""
	return EventCRUDService.get_registered_locations(search)

@router.post("/", response_model=Event, status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def create_event(form: EventForm):
	"""
	Create a new event from a form submission.
	"""
	return EventCreateService.create_event(form)

@router.get("/{event_id}", response_model=Event)
@handle_service_exceptions
async def get_event(event_id: str):
	"""
	Get an event by id.
	"""
	return EventCRUDService.get_event(event_id)

@router.get("/{event_id}/card", response_model=EventCard)
@handle_service_exceptions
async def get_event_card(event_id: str):
	"""
	Card data for an event: split location, damage category and impact wording.
	"""
	return EventCRUDService.get_event_card(event_id)

@router.put("/{event_id}", response_model=Event)
@handle_service_exceptions
async def update_event(event_id: str, form: EventForm):
	"""
	Replace an existing event, keeping its id.
	"""
	return EventCreateService.update_event(event_id, form)

@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_exceptions
async def delete_event(event_id: str):
	"""
	Delete an event by id.
	"""
	EventCRUDService.delete_event(event_id)

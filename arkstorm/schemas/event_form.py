from typing import Optional, Literal
from datetime import datetime
from arkstorm.schemas.base import BaseSchema
from arkstorm.schemas.event import Severity

EventKind = Literal["location", "duration", "damage"]

class EventForm(BaseSchema):
	"""
	Payload submitted by one of the three creation forms.
	`kind` names the form and decides which fields are required.
	"""
	kind: EventKind = "location"
	# Defaults to now when omitted.
	date: Optional[datetime] = None
	location: Optional[str] = None
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	# Omitted means: keep the reference record's severity, else "medium".
	severity: Optional[Severity] = None
	# Raw user text; normalized before it is stored.
	duration: Optional[str] = None
	damage: Optional[str] = None
	description: Optional[str] = None

from typing import Optional, Literal
from datetime import datetime
from pydantic import field_validator
from arkstorm.schemas.base import BaseSchema
from arkstorm.utils.datetime_utils import ensure_utc

Severity = Literal["low", "medium", "high"]

class Event(BaseSchema):
	# Opaque unique identifier, generated at creation and never reassigned.
	id: str
	# When the outage occurred.
	date: datetime
	# Free text, comma delimited. Segment 0 is the street/neighborhood, segment 1 the area.
	location: str = ""
	# Coordinates, set together or not at all.
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	# Coarse impact classification. Creation paths default it to "medium".
	severity: Optional[Severity] = None
	# Canonical duration text ("Xh", "Ym" or "Xh Ym").
	duration: Optional[str] = None
	# Free text damage description.
	damage: Optional[str] = None
	# Free text notes.
	description: Optional[str] = None

	@field_validator("date")
	@classmethod
	def _date_to_utc(cls, value: datetime) -> datetime:
		return ensure_utc(value)

	@property
	def has_location(self) -> bool:
		return bool(self.location)

	@property
	def has_duration(self) -> bool:
		return bool(self.duration)

	@property
	def has_damage(self) -> bool:
		return bool(self.damage)

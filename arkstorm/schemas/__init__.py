from arkstorm.schemas.event import Event
from arkstorm.schemas.event_form import EventForm

__all__ = ["Event", "EventForm"]

import logging
from typing import List, Optional
from pydantic import ValidationError as PydanticValidationError
from arkstorm.config import settings
from arkstorm.exceptions.base import StoreError
from arkstorm.schemas.event import Event
from arkstorm.redis_client import arkstorm_redis
logger = logging.getLogger(__name__)

class State:
	"""
	Store adapter for the event collection.
	This acts as a singleton state object.

	The whole collection is one JSON array under a single key. There is no
	partial update: callers load everything, change it in memory and save
	everything back, and the last write wins. Nothing is cached between calls,
	so the store stays the only source of truth.
	"""

	_instance: Optional['State'] = None

	def __new__(cls):
		if cls._instance is None:
			cls._instance = super(State, cls).__new__(cls)
			cls._instance._initialized = False
		return cls._instance

	def __init__(self):
		if self._initialized:
			return
		self._initialized = True

	@property
	def storage_key(self) -> str:
		return settings.events_storage_key

	def load(self) -> List[Event]:
		"""
		Load the full event collection.

		Returns:
			List of events; an absent key reads as an empty collection

		Raises:
			StoreError: If the store is unreachable or the stored content is malformed
		"""
		try:
			raw = arkstorm_redis.read(self.storage_key)
		except ValueError as e:
			raise StoreError(str(e))

		if raw is None:
			return []
		if not isinstance(raw, list):
			logger.warning(f"Stored events under {self.storage_key} are not a JSON array: {type(raw)}")
			raise StoreError(f"Malformed event collection under key {self.storage_key}")

		events = []
		for index, item in enumerate(raw):
			if not isinstance(item, dict):
				raise StoreError(f"Malformed event at position {index} under key {self.storage_key}")
			try:
				events.append(Event.from_dict(item))
			except PydanticValidationError as e:
				logger.warning(f"Invalid event at position {index} under {self.storage_key}: {str(e)}")
				raise StoreError(f"Malformed event at position {index} under key {self.storage_key}")
		return events

	def save(self, events: List[Event]) -> None:
		"""
		Replace the full event collection.

		Raises:
			StoreError: If the store rejects the write
		"""
		try:
			arkstorm_redis.create(self.storage_key, [event.to_dict() for event in events])
		except ValueError as e:
			raise StoreError(str(e))
		logger.info(f"Saved {len(events)} events under {self.storage_key}")

# Global state instance
state = State()

from typing import Any, Dict
import json
from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
	"""
	Base schema class with JSON-safe serialization/deserialization.
	Datetimes leave as ISO-8601 strings and come back as datetimes.
	"""

	model_config = ConfigDict(populate_by_name=True)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-compatible dictionary."""
		return json.loads(self.model_dump_json())

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "BaseSchema":
		"""
		Create model instance from dictionary.
		Pydantic parses ISO strings for datetime fields, so the input is not mutated.
		"""
		return cls.model_validate(data)

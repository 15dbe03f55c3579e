from fastapi import status
from typing import Optional

class ArkstormException(Exception):
	"""
	Base exception class for all Arkstorm custom exceptions.
	All service layer exceptions should inherit from this.
	"""
	def __init__(
		self,
		message: str,
		status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail: Optional[str] = None
	):
		self.message = message
		self.status_code = status_code
		self.detail = detail or message
		super().__init__(self.message)

class NotFoundError(ArkstormException):
	"""
	Exception raised when a resource is not found.
	Maps to HTTP 404.
	"""
	def __init__(self, resource_type: str, resource_id: str):
		message = f"{resource_type} '{resource_id}' not found"
		super().__init__(
			message=message,
			status_code=status.HTTP_404_NOT_FOUND,
			detail=message
		)

class ValidationError(ArkstormException):
	"""
	Exception raised when validation fails.
	Maps to HTTP 400.
	"""
	def __init__(self, message: str, detail: Optional[str] = None):
		super().__init__(
			message=message,
			status_code=status.HTTP_400_BAD_REQUEST,
			detail=detail or message
		)

class InvalidFormatError(ValidationError):
	"""Duration text matches none of the accepted formats."""
	ACCEPTED_FORMATS = ["2h30", "2h", "30m", "90min", "2.5h", "120"]

	def __init__(self, value: str):
		self.value = value
		examples = ", ".join(self.ACCEPTED_FORMATS[:-1]) + f" ou {self.ACCEPTED_FORMATS[-1]}"
		super().__init__(
			message=f"Invalid duration format: '{value}'",
			detail=f"Formato inválido. Use: {examples}"
		)

class NonPositiveDurationError(ValidationError):
	"""Parsed duration is zero minutes."""
	def __init__(self, minutes: int):
		self.minutes = minutes
		super().__init__(
			message=f"Duration must be greater than zero, got {minutes} minutes",
			detail="A duração deve ser maior que zero"
		)

class DurationTooLongError(ValidationError):
	"""Parsed duration exceeds the 24 hour cap."""
	def __init__(self, minutes: int, max_minutes: int):
		self.minutes = minutes
		self.max_minutes = max_minutes
		super().__init__(
			message=f"Duration of {minutes} minutes exceeds the {max_minutes} minute limit",
			detail=f"Duração máxima: {max_minutes // 60} horas"
		)

class MissingRequiredFieldError(ValidationError):
	"""A field required by the active form is absent or blank."""
	def __init__(self, field: str):
		self.field = field
		super().__init__(
			message=f"Missing required field: {field}",
			detail=f"Campo obrigatório: {field}"
		)

class ConflictError(ArkstormException):
	"""
	Exception raised when a resource already exists.
	Maps to HTTP 409.
	"""
	def __init__(self, message: str):
		super().__init__(
			message=message,
			status_code=status.HTTP_409_CONFLICT,
			detail=message
		)

class StoreError(ArkstormException):
	"""
	Exception raised when the event store cannot be read or written.
	Maps to HTTP 503 since the caller may retry.
	"""
	def __init__(self, message: str):
		super().__init__(
			message=message,
			status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
			detail="Não foi possível acessar os dados. Tente novamente."
		)

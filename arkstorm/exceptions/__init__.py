from arkstorm.exceptions.base import (
	ArkstormException,
	NotFoundError,
	ValidationError,
	InvalidFormatError,
	NonPositiveDurationError,
	DurationTooLongError,
	MissingRequiredFieldError,
	ConflictError,
	StoreError,
)
from arkstorm.exceptions.handler import handle_service_exceptions

__all__ = [
	"ArkstormException",
	"NotFoundError",
	"ValidationError",
	"InvalidFormatError",
	"NonPositiveDurationError",
	"DurationTooLongError",
	"MissingRequiredFieldError",
	"ConflictError",
	"StoreError",
	"handle_service_exceptions"
]

import logging
from functools import wraps
from fastapi import HTTPException, status
from arkstorm.exceptions.base import ArkstormException

logger = logging.getLogger(__name__)

def handle_service_exceptions(func):
    """
    Decorator to handle service layer exceptions uniformly.
    Converts ArkstormException to HTTPException with appropriate status codes.

    Usage:
        @handle_service_exceptions
        async def my_endpoint():
            # Service calls that may raise ArkstormException
            return EventCRUDService.get_events()
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except ArkstormException as e:
            if e.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
                logger.error(f"{func.__name__} failed: {e.message}")
            raise HTTPException(
                status_code=e.status_code,
                detail=e.detail
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error in {func.__name__}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Internal server error: {str(e)}"
            )
    return wrapper

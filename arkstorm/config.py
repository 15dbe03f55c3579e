import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings:
	# Redis configuration
	redis_host: str = os.getenv("REDIS_HOST", "localhost")
	redis_port: int = int(os.getenv("REDIS_PORT", "6379"))
	redis_db: int = int(os.getenv("REDIS_DB", "0"))
	redis_password: Optional[str] = os.getenv("REDIS_PASSWORD", None)

	# The whole event collection lives under this single key.
	events_storage_key: str = os.getenv("EVENTS_STORAGE_KEY", "@arkstorm:events")

	log_level: str = os.getenv("LOG_LEVEL", "INFO")

	# Overview screen configuration
	recent_events_limit: int = int(os.getenv("RECENT_EVENTS_LIMIT", "5"))
	daily_chart_days: int = int(os.getenv("DAILY_CHART_DAYS", "15"))


settings = Settings()

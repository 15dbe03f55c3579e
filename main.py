from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from arkstorm.config import settings
from arkstorm.controllers import event_controller, stats_controller
from arkstorm.logging_config import setup_logging, get_logger

# Structured JSON logging to stdout
setup_logging(level=settings.log_level)
logger = get_logger(__name__)

app = FastAPI(
	title="Arkstorm API",
	description="Power outage log: events, durations, damages and their statistics",
	version="1.0.0"
)

# The mobile client runs on arbitrary origins
app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=False,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(event_controller.router)
app.include_router(stats_controller.router)

@app.get("/")
async def root():
	return {
		"message": "Welcome to the Arkstorm API!",
		"endpoints": {
			"events": "/events",
			"stats": "/stats"
		}
	}

@app.get("/health")
async def health():
	"""Health check endpoint."""
	from arkstorm.redis_client import arkstorm_redis
	try:
		redis_healthy = arkstorm_redis.ping()
		return {
			"status": "healthy",
			"redis": "connected" if redis_healthy else "disconnected"
		}
	except Exception as e:
		logger.warning(f"Health check failed: {str(e)}")
		return {
			"status": "unhealthy",
			"redis": "error",
			"error": str(e)
		}

import json
import redis
import logging
from typing import Optional, Any
from arkstorm.config import settings

logger = logging.getLogger(__name__)

class ArkstormRedis:
	"""
	Thin Redis client wrapper for the key-value operations the store needs.
	Handles JSON serialization/deserialization automatically.
	"""

	def __init__(self):
		self.client = redis.Redis(
			host=settings.redis_host,
			port=settings.redis_port,
			db=settings.redis_db,
			password=settings.redis_password,
			decode_responses=True,
			socket_connect_timeout=5,
			socket_timeout=5
		)

	def create(self, key: str, value: Any) -> bool:
		"""
		Create or replace a key-value pair in Redis. Keys never expire.

		Args:
			key: Redis key
			value: Value to store (will be JSON serialized)

		Returns:
			True if successful
		"""
		try:
			serialized = json.dumps(value, default=str, ensure_ascii=False)
			return self.client.set(key, serialized)
		except Exception as e:
			raise ValueError(f"Failed to create key {key}: {str(e)}")

	def read(self, key: str) -> Optional[Any]:
		"""
		Read a value from Redis by key.

		Args:
			key: Redis key

		Returns:
			Deserialized value, the raw string if it is not JSON, or None if the key doesn't exist
		"""
		try:
			value = self.client.get(key)
			if value is None:
				return None
			return json.loads(value)
		except json.JSONDecodeError:
			# Not JSON, hand back the raw string and let the caller decide
			return value
		except Exception as e:
			raise ValueError(f"Failed to read key {key}: {str(e)}")

	def ping(self) -> bool:
		"""
		Test Redis connection.

		Returns:
			True if connection is alive
		"""
		try:
			return self.client.ping()
		except Exception as e:
			raise ConnectionError(f"Redis connection failed: {str(e)}")

# Global instance
arkstorm_redis = ArkstormRedis()

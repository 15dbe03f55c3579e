"""
Pytest configuration and fixtures.
"""
import json
import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import Mock
from arkstorm.redis_client import ArkstormRedis
from arkstorm.schemas.event import Event


@pytest.fixture
def now():
	"""Fixed reference instant used across statistics tests."""
	return datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_event(now):
	"""Factory for events dated a number of days before `now`."""
	counter = {"value": 0}

	def _make(days_ago: float = 0, **fields) -> Event:
		counter["value"] += 1
		fields.setdefault("id", f"evt-{counter['value']}")
		fields.setdefault("date", now - timedelta(days=days_ago))
		fields.setdefault("location", "Rua A, Centro, Recife")
		return Event(**fields)

	return _make


@pytest.fixture
def fake_redis():
	"""
	Mock of the Redis wrapper backed by a dict.
	Values go through JSON like the real client does.
	"""
	store = {}
	client = Mock(spec=ArkstormRedis)

	def _create(key, value):
		store[key] = json.dumps(value, default=str)
		return True

	def _read(key):
		if key not in store:
			return None
		try:
			return json.loads(store[key])
		except json.JSONDecodeError:
			return store[key]

	client.create.side_effect = _create
	client.read.side_effect = _read
	client.store = store
	return client

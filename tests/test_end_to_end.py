"""
Form submission through the store and back out as statistics.
"""
from datetime import timedelta
from unittest.mock import patch
from arkstorm.schemas.event_form import EventForm
from arkstorm.services.event_create_service import EventCreateService
from arkstorm.services.event_crud_service import EventCRUDService
from arkstorm.services.statistics_service import StatisticsService
from arkstorm.state import state


class TestEventLifecycle:
	"""Create, reload, aggregate and delete against a dict-backed store."""

	def test_created_event_shows_up_in_statistics(self, fake_redis, now):
		with patch('arkstorm.state.arkstorm_redis', fake_redis):
			created = EventCreateService.create_event(
				EventForm(location="Rua A, Bairro B", duration="2h30", severity="high"), now=now
			)
			assert created.duration == "2h 30m"

			events = state.load()
			assert events == [created]

			later = now + timedelta(days=1)
			durations = StatisticsService.duration_screen_stats(events, "7d", later)
			assert durations.avg_duration == 150
			assert durations.avg_duration_display == "2h 30min"
			assert durations.longest_outage == 150

			overview = StatisticsService.overview_stats(events, later)
			assert overview.most_affected_area == "Bairro B"
			assert overview.severity_distribution.high == 1
			assert overview.weekly_trend == "up"

	def test_follow_up_forms_use_registered_location(self, fake_redis, now):
		with patch('arkstorm.state.arkstorm_redis', fake_redis):
			EventCreateService.create_event(EventForm(location="Rua A, Bairro B"), now=now - timedelta(hours=3))
			EventCreateService.create_event(
				EventForm(kind="damage", location="Rua A, Bairro B", damage="Loja fechada, prejuízo", severity="low"),
				now=now
			)

			assert EventCRUDService.get_registered_locations() == ["Rua A, Bairro B"]
			damages = StatisticsService.damage_screen_stats(state.load(), "30d", "commercial", now)
			assert damages.total_events == 1
			assert damages.commercial_count == 1
			assert damages.avg_severity == "low"

	def test_delete_removes_from_store(self, fake_redis, now):
		with patch('arkstorm.state.arkstorm_redis', fake_redis):
			first = EventCreateService.create_event(EventForm(location="Rua A, Bairro B"), now=now)
			second = EventCreateService.create_event(EventForm(location="Rua C, Centro"), now=now)
			EventCRUDService.delete_event(first.id)
			assert [event.id for event in state.load()] == [second.id]

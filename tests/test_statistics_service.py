"""
Unit tests for StatisticsService.
"""
import pytest
from datetime import datetime, timezone, timedelta
from arkstorm.services.statistics_service import StatisticsService, NO_AREA
from arkstorm.schemas.stats import OverviewStats, SeverityDistribution


class TestFilterByWindow:
	"""Test cases for StatisticsService.filter_by_window."""

	def test_all_is_identity(self, make_event, now):
		events = [make_event(days_ago=400), make_event(days_ago=1)]
		assert StatisticsService.filter_by_window(events, "all", now) is events

	@pytest.mark.parametrize("window,expected_ids", [
		("7d", ["evt-1"]),
		("30d", ["evt-1", "evt-2"]),
		("90d", ["evt-1", "evt-2", "evt-3"]),
	])
	def test_windows(self, make_event, now, window, expected_ids):
		events = [make_event(days_ago=1), make_event(days_ago=20), make_event(days_ago=60), make_event(days_ago=200)]
		result = StatisticsService.filter_by_window(events, window, now)
		assert [event.id for event in result] == expected_ids

	def test_cutoff_is_exclusive(self, make_event, now):
		"""Test an event exactly at now - 7 days is outside the 7 day window."""
		events = [make_event(days_ago=7), make_event(days_ago=6.99)]
		result = StatisticsService.filter_by_window(events, "7d", now)
		assert [event.id for event in result] == ["evt-2"]


class TestCountAndDurationStats:
	"""Test cases for count_stats and duration_summary."""

	def test_records_count_toward_each_populated_field(self, make_event):
		events = [
			make_event(duration="2h", damage="Casa sem luz"),
			make_event(duration="45m"),
			make_event(location=""),
		]
		counts = StatisticsService.count_stats(events)
		assert counts.total_events == 3
		assert counts.locations_count == 2
		assert counts.durations_count == 2
		assert counts.damages_count == 1

	def test_duration_summary(self, make_event):
		events = [
			make_event(duration="2h 30m"),
			make_event(duration="30m"),
			make_event(duration="1h"),
			make_event(),
		]
		summary = StatisticsService.duration_summary(events)
		assert summary.count == 3
		assert summary.total == 240
		assert summary.average == 80
		assert summary.longest == 150
		assert summary.shortest == 30

	def test_no_duration_events_reports_zero(self, make_event):
		"""Test an empty duration set never divides by zero."""
		summary = StatisticsService.duration_summary([make_event(), make_event(duration="bogus")])
		assert summary.average == 0
		assert summary.longest == 0
		assert summary.shortest == 0
		assert summary.total == 0

	def test_unparseable_duration_only_leaves_duration_metrics(self, make_event, now):
		"""Test a bad duration still counts as an event but not toward the average."""
		events = [make_event(duration="2h"), make_event(duration="???")]
		overview = StatisticsService.overview_stats(events, now)
		assert overview.total_events == 2
		assert overview.durations_count == 2
		assert overview.avg_duration == 120


class TestSeverity:
	"""Test cases for severity aggregation."""

	def test_distribution(self, make_event):
		events = [make_event(severity="high"), make_event(severity="high"), make_event(severity="low"), make_event()]
		distribution = StatisticsService.severity_distribution(events)
		assert distribution == SeverityDistribution(low=1, medium=0, high=2)

	@pytest.mark.parametrize("severities,expected", [
		(["low", "low", "medium"], "low"),
		(["low", "medium"], "medium"),
		(["medium", "high"], "medium"),
		(["high", "high", "medium"], "high"),
		(["high", "high", "high", "medium"], "high"),
		([], "low"),
	])
	def test_average_severity(self, make_event, severities, expected):
		events = [make_event(severity=severity) for severity in severities]
		assert StatisticsService.average_severity(events) == expected

	def test_average_severity_ignores_missing(self, make_event):
		events = [make_event(severity="high"), make_event(), make_event()]
		assert StatisticsService.average_severity(events) == "high"


class TestTrend:
	"""Test cases for trend direction."""

	@pytest.mark.parametrize("recent,previous,expected", [
		(10, 5, "up"),
		(5, 10, "down"),
		(6, 5, "stable"),
		(4, 5, "stable"),
		(1, 0, "up"),
		(0, 0, "stable"),
		(0, 3, "down"),
	])
	def test_count_ratios(self, recent, previous, expected):
		assert StatisticsService.trend(recent, previous, 1.2, 0.8) == expected

	def test_duration_ratios_are_tighter(self):
		assert StatisticsService.trend(115, 100, 1.1, 0.9) == "up"
		assert StatisticsService.trend(115, 100, 1.2, 0.8) == "stable"
		assert StatisticsService.trend(85, 100, 1.1, 0.9) == "down"

	def test_split_trend_windows_boundaries(self, make_event, now):
		"""Test (now-7d, now] is recent and (now-14d, now-7d] is previous."""
		events = [
			make_event(days_ago=1),
			make_event(days_ago=7),
			make_event(days_ago=10),
			make_event(days_ago=14),
		]
		recent, previous = StatisticsService.split_trend_windows(events, now)
		assert [event.id for event in recent] == ["evt-1"]
		assert [event.id for event in previous] == ["evt-2", "evt-3"]

	def test_count_trend(self, make_event, now):
		events = [make_event(days_ago=1), make_event(days_ago=2), make_event(days_ago=10)]
		assert StatisticsService.count_trend(events, now) == "up"

	def test_duration_trend_uses_mean_minutes(self, make_event, now):
		events = [
			make_event(days_ago=1, duration="1h"),
			make_event(days_ago=9, duration="2h"),
			make_event(days_ago=10, duration="2h"),
		]
		assert StatisticsService.duration_trend(events, now) == "down"


class TestMostAffectedArea:
	"""Test cases for most_affected_area."""

	def test_highest_count_wins(self, make_event):
		events = [make_event(location="A, X"), make_event(location="B, X"), make_event(location="C, Y")]
		assert StatisticsService.most_affected_area(events) == "X"

	def test_tie_goes_to_first_seen(self, make_event):
		events = [make_event(location="A, Y"), make_event(location="B, X"), make_event(location="C, X"), make_event(location="D, Y")]
		assert StatisticsService.most_affected_area(events) == "Y"

	def test_locations_without_area_are_skipped(self, make_event):
		events = [make_event(location="Centro"), make_event(location="Rua A, Boa Vista")]
		assert StatisticsService.most_affected_area(events) == "Boa Vista"

	def test_no_area_sentinel(self, make_event):
		assert StatisticsService.most_affected_area([]) == NO_AREA
		assert StatisticsService.most_affected_area([make_event(location="Centro")]) == NO_AREA


class TestMonthlyGrowth:
	"""Test cases for monthly_growth."""

	def test_growth_percentage(self, make_event, now):
		# now is 2024-03-20; now - 30 days falls in February
		events = [
			make_event(date=datetime(2024, 3, 1, tzinfo=timezone.utc)),
			make_event(date=datetime(2024, 3, 10, tzinfo=timezone.utc)),
			make_event(date=datetime(2024, 3, 15, tzinfo=timezone.utc)),
			make_event(date=datetime(2024, 2, 5, tzinfo=timezone.utc)),
			make_event(date=datetime(2024, 2, 28, tzinfo=timezone.utc)),
			make_event(date=datetime(2024, 1, 28, tzinfo=timezone.utc)),
		]
		assert StatisticsService.monthly_growth(events, now) == 50

	def test_decline_is_negative(self, make_event, now):
		events = [
			make_event(date=datetime(2024, 3, 1, tzinfo=timezone.utc)),
			make_event(date=datetime(2024, 2, 5, tzinfo=timezone.utc)),
			make_event(date=datetime(2024, 2, 6, tzinfo=timezone.utc)),
		]
		assert StatisticsService.monthly_growth(events, now) == -50

	def test_zero_previous_month_reports_zero(self, make_event, now):
		events = [make_event(date=datetime(2024, 3, 1, tzinfo=timezone.utc))]
		assert StatisticsService.monthly_growth(events, now) == 0


class TestScreenStats:
	"""Test cases for the per-screen aggregations."""

	def test_overview_empty_collection(self, now):
		assert StatisticsService.overview_stats([], now) == OverviewStats()

	def test_overview(self, make_event, now):
		events = [
			make_event(days_ago=1, location="Rua A, Boa Vista", duration="2h", severity="high"),
			make_event(days_ago=2, location="Rua B, Boa Vista", damage="Loja sem energia", severity="medium"),
			make_event(days_ago=3, location="Rua C, Centro", duration="1h", severity="high"),
		]
		overview = StatisticsService.overview_stats(events, now)
		assert overview.total_events == 3
		assert overview.durations_count == 2
		assert overview.damages_count == 1
		assert overview.avg_duration == 90
		assert overview.total_downtime == 180
		assert overview.most_affected_area == "Boa Vista"
		assert overview.severity_distribution.high == 2
		assert overview.weekly_trend == "up"

	def test_duration_screen(self, make_event, now):
		events = [
			make_event(days_ago=1, duration="1h"),
			make_event(days_ago=2, duration="2h 30m"),
			make_event(days_ago=3),
			make_event(days_ago=45, duration="5h"),
		]
		stats = StatisticsService.duration_screen_stats(events, "30d", now)
		assert stats.total_events == 2
		assert stats.avg_duration == 105
		assert stats.avg_duration_display == "1h 45min"
		assert stats.total_downtime == 210
		assert stats.longest_outage == 150
		assert stats.shortest_outage == 60
		assert stats.trend == "up"

	def test_duration_screen_empty(self, make_event, now):
		stats = StatisticsService.duration_screen_stats([make_event(days_ago=1)], "30d", now)
		assert stats.total_events == 0
		assert stats.avg_duration == 0

	def test_damage_screen(self, make_event, now):
		events = [
			make_event(days_ago=1, damage="Casa sem luz", severity="high"),
			make_event(days_ago=2, damage="Loja fechada", severity="high"),
			make_event(days_ago=3, damage="Casa e loja", severity="medium"),
			make_event(days_ago=4),
		]
		stats = StatisticsService.damage_screen_stats(events, "30d", "all", now)
		assert stats.total_events == 3
		assert stats.residential_count == 2
		assert stats.commercial_count == 2
		assert stats.avg_severity == "high"
		assert stats.trend == "up"

	def test_damage_screen_category_filter(self, make_event, now):
		events = [
			make_event(days_ago=1, damage="Casa sem luz", severity="low"),
			make_event(days_ago=2, damage="Loja fechada", severity="high"),
		]
		stats = StatisticsService.damage_screen_stats(events, "30d", "commercial", now)
		assert stats.total_events == 1
		assert stats.commercial_count == 1
		assert stats.residential_count == 0

	def test_location_screen(self, make_event, now):
		events = [
			make_event(date=datetime(2024, 3, 2, tzinfo=timezone.utc), location="Rua A, Boa Vista"),
			make_event(date=datetime(2024, 2, 2, tzinfo=timezone.utc), location="Rua B, Boa Vista"),
			make_event(date=datetime(2024, 3, 3, tzinfo=timezone.utc), location=""),
		]
		stats = StatisticsService.location_screen_stats(events, now)
		assert stats.total == 2
		assert stats.this_month == 1
		assert stats.most_affected_area == "Boa Vista"


class TestChartSeries:
	"""Test cases for chart series and insights."""

	def test_daily_counts(self, make_event, now):
		events = [make_event(days_ago=0), make_event(days_ago=0), make_event(days_ago=2), make_event(days_ago=30)]
		buckets = StatisticsService.daily_event_counts(events, now, days=15)
		assert len(buckets) == 15
		assert buckets[0].day == "2024-03-06"
		assert buckets[-1].day == "2024-03-20"
		assert buckets[-1].label == "20"
		assert buckets[-1].count == 2
		assert buckets[-3].count == 1
		assert sum(bucket.count for bucket in buckets) == 3

	def test_weekly_average_durations(self, make_event):
		events = [
			make_event(date=datetime(2024, 1, 10, tzinfo=timezone.utc), duration="1h"),
			make_event(date=datetime(2024, 1, 2, tzinfo=timezone.utc), duration="2h"),
			make_event(date=datetime(2024, 1, 3, tzinfo=timezone.utc), duration="1h"),
		]
		weeks = StatisticsService.weekly_average_durations(events)
		assert [week.week for week in weeks] == ["2024-01", "2024-02"]
		assert [week.label for week in weeks] == ["S01", "S02"]
		assert weeks[0].average_minutes == 90
		assert weeks[1].average_minutes == 60

	def test_insights(self):
		stats = OverviewStats(
			total_events=10,
			avg_duration=150,
			most_affected_area="Boa Vista",
			severity_distribution=SeverityDistribution(high=4),
			weekly_trend="up",
		)
		insights = StatisticsService.build_insights(stats)
		assert [insight.title for insight in insights] == [
			"Aumento de Eventos",
			"Durações Longas",
			"Alta Severidade",
			"Área Crítica",
		]
		assert "150min" in insights[1].description
		assert insights[3].description.startswith("Boa Vista")

	def test_insights_quiet_collection(self):
		assert StatisticsService.build_insights(OverviewStats()) == []

	def test_recent_events_does_not_mutate_input(self, make_event):
		events = [make_event(days_ago=5), make_event(days_ago=1), make_event(days_ago=3)]
		recent = StatisticsService.recent_events(events, limit=2)
		assert [event.id for event in recent] == ["evt-2", "evt-3"]
		assert [event.id for event in events] == ["evt-1", "evt-2", "evt-3"]

	def test_statistics_are_deterministic(self, make_event, now):
		events = [make_event(days_ago=i, duration="1h", severity="low") for i in range(5)]
		assert StatisticsService.overview_stats(events, now) == StatisticsService.overview_stats(events, now)

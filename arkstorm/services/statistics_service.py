from collections import Counter
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple
from arkstorm.schemas.event import Event
from arkstorm.schemas.stats import (
	CountStats,
	DailyCount,
	DamageStats,
	DurationStats,
	DurationSummary,
	Insight,
	LocationStats,
	OverviewStats,
	SeverityDistribution,
	WeeklyDuration,
)
from arkstorm.utils.damage_classifier import matches_category
from arkstorm.utils.datetime_utils import days_before, ensure_utc, month_key
from arkstorm.utils.duration import extract_minutes, format_duration_display
from arkstorm.utils.location_utils import area_of
import logging

logger = logging.getLogger(__name__)

WINDOW_DAYS: Dict[str, int] = {"7d": 7, "30d": 30, "90d": 90}
SEVERITY_WEIGHTS: Dict[str, int] = {"low": 1, "medium": 2, "high": 3}
NO_AREA = "Nenhuma"

# (up, down) multipliers applied to the previous window's metric
COUNT_TREND_RATIOS: Tuple[float, float] = (1.2, 0.8)
DURATION_TREND_RATIOS: Tuple[float, float] = (1.1, 0.9)

LONG_AVERAGE_DURATION_MINUTES = 120
HIGH_SEVERITY_SHARE = 0.3


class StatisticsService:
	"""
	Aggregate statistics over an event collection.

	Every method is pure: it takes the full collection plus a reference `now`
	and returns a new value. Nothing here reads the store, mutates an event or
	raises for missing optional fields; such records are left out of the
	metric they would have corrupted.
	"""

	@staticmethod
	def filter_by_window(events: List[Event], window: str, now: datetime) -> List[Event]:
		"""
		Keep events dated strictly after `now - window`.

		Args:
			events: Event collection
			window: "7d", "30d", "90d" or "all"
			now: Reference instant

		Returns:
			The same list for "all", otherwise a new filtered list
		"""
		if window == "all":
			return events
		cutoff = days_before(now, WINDOW_DAYS[window])
		return [event for event in events if event.date > cutoff]

	@staticmethod
	def count_stats(events: Sequence[Event]) -> CountStats:
		"""Totals; a record counts toward every field it has populated."""
		return CountStats(
			total_events=len(events),
			locations_count=sum(1 for event in events if event.has_location),
			durations_count=sum(1 for event in events if event.has_duration),
			damages_count=sum(1 for event in events if event.has_damage),
		)

	@staticmethod
	def duration_summary(events: Sequence[Event]) -> DurationSummary:
		"""
		Mean, longest, shortest and total minutes over events whose duration
		extracts to a positive number of minutes. All zero when none do.
		"""
		durations = [extract_minutes(event.duration) for event in events]
		durations = [minutes for minutes in durations if minutes > 0]
		if not durations:
			return DurationSummary()
		total = sum(durations)
		return DurationSummary(
			count=len(durations),
			average=total / len(durations),
			longest=max(durations),
			shortest=min(durations),
			total=total,
		)

	@staticmethod
	def severity_distribution(events: Sequence[Event]) -> SeverityDistribution:
		tally = Counter(event.severity for event in events if event.severity in SEVERITY_WEIGHTS)
		return SeverityDistribution(low=tally["low"], medium=tally["medium"], high=tally["high"])

	@staticmethod
	def average_severity(events: Sequence[Event]) -> str:
		"""
		Weighted mean severity (low=1, medium=2, high=3) bucketed back to a level.
		Events without a severity are ignored; no severities at all gives "low".
		"""
		weights = [SEVERITY_WEIGHTS[event.severity] for event in events if event.severity in SEVERITY_WEIGHTS]
		if not weights:
			return "low"
		mean = sum(weights) / len(weights)
		if mean < 1.5:
			return "low"
		if mean > 2.5:
			return "high"
		return "medium"

	@staticmethod
	def split_trend_windows(events: Sequence[Event], now: datetime) -> Tuple[List[Event], List[Event]]:
		"""
		Split into the last 7 days, (now-7d, ...), and the 7 days before, (now-14d, now-7d].
		"""
		week_ago = days_before(now, 7)
		two_weeks_ago = days_before(now, 14)
		recent = [event for event in events if event.date > week_ago]
		previous = [event for event in events if two_weeks_ago < event.date <= week_ago]
		return recent, previous

	@staticmethod
	def trend(recent: float, previous: float, up_ratio: float, down_ratio: float) -> str:
		"""
		"up" when recent > previous * up_ratio, "down" when recent < previous * down_ratio,
		"stable" otherwise. Both comparisons are strict, so a zero previous window
		reads as "up" for any positive recent value and "stable" when both are zero.
		"""
		if recent > previous * up_ratio:
			return "up"
		if recent < previous * down_ratio:
			return "down"
		return "stable"

	@staticmethod
	def count_trend(events: Sequence[Event], now: datetime) -> str:
		recent, previous = StatisticsService.split_trend_windows(events, now)
		return StatisticsService.trend(len(recent), len(previous), *COUNT_TREND_RATIOS)

	@staticmethod
	def duration_trend(events: Sequence[Event], now: datetime) -> str:
		"""Trend of the mean extracted duration, recent week against the week before."""
		recent, previous = StatisticsService.split_trend_windows(events, now)
		return StatisticsService.trend(
			StatisticsService._mean_minutes(recent),
			StatisticsService._mean_minutes(previous),
			*DURATION_TREND_RATIOS
		)

	@staticmethod
	def _mean_minutes(events: Sequence[Event]) -> float:
		if not events:
			return 0
		return sum(extract_minutes(event.duration) for event in events) / len(events)

	@staticmethod
	def most_affected_area(events: Sequence[Event]) -> str:
		"""
		Most frequent area (second comma segment of the location).
		Ties go to the area seen first; locations without an area are skipped.
		"""
		counts: Dict[str, int] = {}
		for event in events:
			area = area_of(event.location)
			if area is None:
				continue
			counts[area] = counts.get(area, 0) + 1
		if not counts:
			return NO_AREA
		# max() keeps the first of equal counts, i.e. insertion order
		return max(counts, key=counts.get)

	@staticmethod
	def events_in_month(events: Sequence[Event], reference: datetime) -> int:
		key = month_key(reference)
		return sum(1 for event in events if month_key(event.date) == key)

	@staticmethod
	def monthly_growth(events: Sequence[Event], now: datetime) -> float:
		"""
		Signed percentage change between the current calendar month and the
		calendar month of `now - 30 days`. 0 when that month has no events.
		"""
		current = StatisticsService.events_in_month(events, now)
		previous = StatisticsService.events_in_month(events, days_before(now, 30))
		if previous == 0:
			return 0
		return (current - previous) / previous * 100

	@staticmethod
	def overview_stats(events: List[Event], now: datetime) -> OverviewStats:
		"""Everything the overview screen shows, over the whole collection."""
		if not events:
			return OverviewStats()
		counts = StatisticsService.count_stats(events)
		durations = StatisticsService.duration_summary(events)
		return OverviewStats(
			total_events=counts.total_events,
			locations_count=counts.locations_count,
			durations_count=counts.durations_count,
			damages_count=counts.damages_count,
			avg_duration=durations.average,
			total_downtime=durations.total,
			most_affected_area=StatisticsService.most_affected_area(events),
			severity_distribution=StatisticsService.severity_distribution(events),
			monthly_growth=StatisticsService.monthly_growth(events, now),
			weekly_trend=StatisticsService.count_trend(events, now),
		)

	@staticmethod
	def duration_screen_stats(events: List[Event], window: str, now: datetime) -> DurationStats:
		"""Duration screen: duration records inside the window."""
		filtered = StatisticsService.filter_by_window(
			[event for event in events if event.has_duration], window, now
		)
		if not filtered:
			return DurationStats()
		summary = StatisticsService.duration_summary(filtered)
		return DurationStats(
			total_events=len(filtered),
			avg_duration=summary.average,
			avg_duration_display=format_duration_display(summary.average),
			total_downtime=summary.total,
			longest_outage=summary.longest,
			shortest_outage=summary.shortest,
			trend=StatisticsService.duration_trend(filtered, now),
		)

	@staticmethod
	def damage_screen_stats(events: List[Event], window: str, category: str, now: datetime) -> DamageStats:
		"""Damage screen: damage records inside the window and category."""
		filtered = StatisticsService.filter_by_window(
			[event for event in events if event.has_damage], window, now
		)
		filtered = [event for event in filtered if matches_category(event.damage, category)]
		if not filtered:
			return DamageStats()
		return DamageStats(
			total_events=len(filtered),
			residential_count=sum(1 for event in filtered if matches_category(event.damage, "residential")),
			commercial_count=sum(1 for event in filtered if matches_category(event.damage, "commercial")),
			avg_severity=StatisticsService.average_severity(filtered),
			trend=StatisticsService.count_trend(filtered, now),
		)

	@staticmethod
	def location_screen_stats(events: List[Event], now: datetime) -> LocationStats:
		located = [event for event in events if event.has_location]
		return LocationStats(
			total=len(located),
			this_month=StatisticsService.events_in_month(located, now),
			most_affected_area=StatisticsService.most_affected_area(located),
		)

	@staticmethod
	def daily_event_counts(events: Sequence[Event], now: datetime, days: int = 15) -> List[DailyCount]:
		"""One bucket per UTC calendar day for the last `days` days, oldest first, today included."""
		per_day = Counter(event.date.date() for event in events)
		today = ensure_utc(now).date()
		buckets = []
		for offset in range(days - 1, -1, -1):
			day = today - timedelta(days=offset)
			buckets.append(DailyCount(day=day.isoformat(), label=f"{day.day:02d}", count=per_day[day]))
		return buckets

	@staticmethod
	def weekly_average_durations(events: Sequence[Event]) -> List[WeeklyDuration]:
		"""Mean extracted duration per ISO week, in chronological order."""
		weeks: Dict[str, List[int]] = {}
		for event in sorted(events, key=lambda event: event.date):
			year, week, _ = event.date.isocalendar()
			weeks.setdefault(f"{year}-{week:02d}", []).append(extract_minutes(event.duration))
		return [
			WeeklyDuration(label=f"S{key.split('-')[1]}", week=key, average_minutes=sum(values) / len(values))
			for key, values in weeks.items()
		]

	@staticmethod
	def build_insights(stats: OverviewStats) -> List[Insight]:
		insights = []
		if stats.weekly_trend == "up":
			insights.append(Insight(
				type="warning",
				title="Aumento de Eventos",
				description="Houve um aumento significativo de eventos na última semana."
			))
		elif stats.weekly_trend == "down":
			insights.append(Insight(
				type="success",
				title="Melhoria na Rede",
				description="Redução no número de eventos na última semana."
			))

		if stats.avg_duration > LONG_AVERAGE_DURATION_MINUTES:
			insights.append(Insight(
				type="warning",
				title="Durações Longas",
				description=f"Duração média alta: {round(stats.avg_duration)}min. Considere medidas preventivas."
			))

		if stats.severity_distribution.high > stats.total_events * HIGH_SEVERITY_SHARE:
			insights.append(Insight(
				type="alert",
				title="Alta Severidade",
				description="Muitos eventos de alta severidade registrados."
			))

		if stats.most_affected_area != NO_AREA:
			insights.append(Insight(
				type="info",
				title="Área Crítica",
				description=f"{stats.most_affected_area} é a área mais afetada por interrupções."
			))
		return insights

	@staticmethod
	def recent_events(events: Sequence[Event], limit: Optional[int] = 5) -> List[Event]:
		"""Newest first; the input order is left untouched."""
		ordered = sorted(events, key=lambda event: event.date, reverse=True)
		return ordered if limit is None else ordered[:limit]

from datetime import datetime, timezone
from fastapi import APIRouter, Query
from typing import List, Optional
from arkstorm.config import settings
from arkstorm.exceptions import handle_service_exceptions
from arkstorm.schemas.event import Event
from arkstorm.schemas.stats import (
	DailyCount,
	DamageCategoryFilter,
	DamageStats,
	DurationCheck,
	DurationStats,
	Insight,
	LocationStats,
	OverviewStats,
	TimeWindow,
	WeeklyDuration,
)
from arkstorm.services.statistics_service import StatisticsService
from arkstorm.state import state
from arkstorm.utils.datetime_utils import parse_datetime_to_utc
from arkstorm.utils.duration import check_duration
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/stats", tags=["stats"])

NOW_DESCRIPTION = "Reference instant (ISO-8601); defaults to the current time"


def _resolve_now(now: Optional[str]) -> datetime:
	"""The requested reference instant, or the current time when absent or unparseable."""
	return parse_datetime_to_utc(now) or datetime.now(timezone.utc)


@router.get("/overview", response_model=OverviewStats)
@handle_service_exceptions
async def get_overview_stats(now: Optional[str] = Query(default=None, description=NOW_DESCRIPTION)):
	"""
	Counts, average duration, most affected area, severity distribution,
	monthly growth and weekly trend over the whole collection.
	"""
	return StatisticsService.overview_stats(state.load(), _resolve_now(now))


@router.get("/overview/daily", response_model=List[DailyCount])
@handle_service_exceptions
async def get_daily_counts(now: Optional[str] = Query(default=None, description=NOW_DESCRIPTION)):
	"""
	Events per day over the last days, oldest first.
	"""
	return StatisticsService.daily_event_counts(state.load(), _resolve_now(now), settings.daily_chart_days)


@router.get("/overview/insights", response_model=List[Insight])
@handle_service_exceptions
async def get_insights(now: Optional[str] = Query(default=None, description=NOW_DESCRIPTION)):
	"""
	Insight cards derived from the overview statistics.
	"""
	overview = StatisticsService.overview_stats(state.load(), _resolve_now(now))
	return StatisticsService.build_insights(overview)


@router.get("/overview/recent", response_model=List[Event])
@handle_service_exceptions
async def get_recent_events():
	"""
	Most recent events, newest first.
	"""
	return StatisticsService.recent_events(state.load(), settings.recent_events_limit)


@router.get("/durations", response_model=DurationStats)
@handle_service_exceptions
async def get_duration_stats(
	window: TimeWindow = Query(default="30d", description="Trailing time window"),
	now: Optional[str] = Query(default=None, description=NOW_DESCRIPTION)
):
	"""
	Average, longest, shortest and total outage duration plus the duration trend.
	"""
	return StatisticsService.duration_screen_stats(state.load(), window, _resolve_now(now))


@router.get("/durations/weekly", response_model=List[WeeklyDuration])
@handle_service_exceptions
async def get_weekly_durations(
	window: TimeWindow = Query(default="30d", description="Trailing time window"),
	now: Optional[str] = Query(default=None, description=NOW_DESCRIPTION)
):
	"""
	Mean duration per week for the duration chart.
	"""
	events = [event for event in state.load() if event.has_duration]
	events = StatisticsService.filter_by_window(events, window, _resolve_now(now))
	return StatisticsService.weekly_average_durations(events)


@router.get("/durations/check", response_model=DurationCheck)
@handle_service_exceptions
async def check_duration_input(value: str = Query(..., description="Duration as typed by the user")):
	"""
	Validate duration text without storing anything.
	Invalid input answers 400 with the accepted formats.
	"""
	return check_duration(value)


@router.get("/damages", response_model=DamageStats)
@handle_service_exceptions
async def get_damage_stats(
	window: TimeWindow = Query(default="30d", description="Trailing time window"),
	category: DamageCategoryFilter = Query(default="all", description="Damage category"),
	now: Optional[str] = Query(default=None, description=NOW_DESCRIPTION)
):
	"""
	Damage counts per category, average severity and the event count trend.
	"""
	return StatisticsService.damage_screen_stats(state.load(), window, category, _resolve_now(now))


@router.get("/locations", response_model=LocationStats)
@handle_service_exceptions
async def get_location_stats(now: Optional[str] = Query(default=None, description=NOW_DESCRIPTION)):
	"""
	Registered locations, how many fall in the current month and the most affected area.
	"""
	return StatisticsService.location_screen_stats(state.load(), _resolve_now(now))

from typing import Literal, Optional
from pydantic import Field
from arkstorm.schemas.base import BaseSchema

Trend = Literal["up", "down", "stable"]
TimeWindow = Literal["7d", "30d", "90d", "all"]
DamageCategory = Literal["residential", "commercial", "infrastructure", "personal", "general"]
DamageCategoryFilter = Literal["all", "residential", "commercial", "infrastructure", "personal", "general"]
InsightType = Literal["warning", "success", "alert", "info"]

class SeverityDistribution(BaseSchema):
	low: int = 0
	medium: int = 0
	high: int = 0

class CountStats(BaseSchema):
	total_events: int = 0
	locations_count: int = 0
	durations_count: int = 0
	damages_count: int = 0

class DurationSummary(BaseSchema):
	"""Descriptive statistics over events with a positive extracted duration, in minutes."""
	count: int = 0
	average: float = 0
	longest: int = 0
	shortest: int = 0
	total: int = 0

class OverviewStats(BaseSchema):
	total_events: int = 0
	locations_count: int = 0
	durations_count: int = 0
	damages_count: int = 0
	avg_duration: float = 0
	total_downtime: int = 0
	most_affected_area: str = "Nenhuma"
	severity_distribution: SeverityDistribution = Field(default_factory=SeverityDistribution)
	monthly_growth: float = 0
	weekly_trend: Trend = "stable"

class DurationStats(BaseSchema):
	total_events: int = 0
	avg_duration: float = 0
	avg_duration_display: str = "0min"
	total_downtime: int = 0
	longest_outage: int = 0
	shortest_outage: int = 0
	trend: Trend = "stable"

class DamageStats(BaseSchema):
	total_events: int = 0
	residential_count: int = 0
	commercial_count: int = 0
	avg_severity: Literal["low", "medium", "high"] = "low"
	trend: Trend = "stable"

class LocationStats(BaseSchema):
	total: int = 0
	this_month: int = 0
	most_affected_area: str = "Nenhuma"

class Insight(BaseSchema):
	type: InsightType
	title: str
	description: str

class DailyCount(BaseSchema):
	# ISO date of the bucket (YYYY-MM-DD)
	day: str
	# Day of month, used as the chart label
	label: str
	count: int

class WeeklyDuration(BaseSchema):
	# "S{week}" label as shown on the chart
	label: str
	# ISO year-week key, e.g. "2024-03"
	week: str
	average_minutes: float

class DurationCheck(BaseSchema):
	input: str
	minutes: int
	canonical: str
	impact: str

class EventCard(BaseSchema):
	"""Per-event card data: split location, damage category and impact wording."""
	id: str
	location_main: str
	location_secondary: str
	duration_minutes: int = 0
	damage_category: DamageCategory = "general"
	damage_impact: str
	severity: Optional[str] = None

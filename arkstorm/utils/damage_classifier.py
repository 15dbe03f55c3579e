"""
Keyword based damage categorization.

A fixed, ordered decision table: the first category whose keyword appears in
the lower-cased damage text wins, nothing matching falls back to "general".
"""
from typing import List, Optional, Tuple

GENERAL = "general"

DAMAGE_CATEGORY_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
	("residential", ("residência", "casa", "apartamento", "domicílio")),
	("commercial", ("comércio", "empresa", "loja", "estabelecimento")),
	("infrastructure", ("poste", "fiação", "transformador", "rede elétrica")),
	("personal", ("eletrônico", "geladeira", "computador", "alimento")),
]

FINANCIAL_TERMS = ("prejuízo", "perda", "dano", "custo")


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
	return any(keyword in text for keyword in keywords)


def classify_damage(damage: Optional[str]) -> str:
	"""
	Map a damage description to residential, commercial, infrastructure,
	personal or general. Never raises.
	"""
	if not damage:
		return GENERAL
	text = damage.lower()
	for category, keywords in DAMAGE_CATEGORY_KEYWORDS:
		if _contains_any(text, keywords):
			return category
	return GENERAL


def matches_category(damage: Optional[str], category: str) -> bool:
	"""
	Category filter used by the damage screen.

	"all" keeps everything. Any other category only keeps records that carry
	damage text, so the screen never lists location-only records under a tab.
	A record counts toward every category it has a keyword for, not only the
	one classify_damage() picks.
	"""
	if category == "all":
		return True
	if not damage:
		return False
	if category == GENERAL:
		return classify_damage(damage) == GENERAL
	text = damage.lower()
	for name, keywords in DAMAGE_CATEGORY_KEYWORDS:
		if name == category:
			return _contains_any(text, keywords)
	return False


def has_financial_terms(damage: Optional[str]) -> bool:
	if not damage:
		return False
	return _contains_any(damage.lower(), FINANCIAL_TERMS)


def describe_damage_impact(damage: Optional[str], severity: Optional[str]) -> str:
	"""Impact wording for a damage card, from severity and financial vocabulary."""
	if not damage:
		return "Impacto não especificado"
	financial = has_financial_terms(damage)
	if severity == "high":
		return "Alto impacto financeiro" if financial else "Danos significativos"
	if severity == "medium":
		return "Impacto financeiro moderado" if financial else "Danos moderados"
	return "Baixo impacto financeiro" if financial else "Danos menores"

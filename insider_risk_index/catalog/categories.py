"""
Category catalog — The five weighted scoring pillars of the Index.

Weights reflect the relative economic impact of each pillar (Ponemon 2025,
Verizon DBIR 2024, Gartner G00805757) and must sum to exactly 1.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import WEIGHT_TOLERANCE
from ..errors import CatalogError


@dataclass(frozen=True)
class Category:
    """A scoring pillar."""
    id: str
    name: str
    description: str
    weight: float          # Share of the composite score (0-1)
    color: str = "#6B7280"
    icon: str = ""
    order: int = 0


CATEGORIES: tuple[Category, ...] = (
    Category(
        id="visibility",
        name="Visibility",
        description=(
            "Comprehensive monitoring and detection of insider activities across "
            "the organization. Visibility is the foundation for detecting careless "
            "users, malicious users and compromised credentials; 85% of effective "
            "programs use User Behavior Analytics to establish baselines "
            "(Gartner G00805757, 2024)."
        ),
        weight=0.25,
        color="#3B82F6",
        icon="Eye",
        order=1,
    ),
    Category(
        id="prevention-coaching",
        name="Prevention & Coaching",
        description=(
            "Proactive measures and training that deter insider threats before "
            "they occur. More than 50% of insider incidents lack malicious intent; "
            "comprehensive prevention programs cut incident costs by 31% "
            "(Ponemon Institute, 2025)."
        ),
        weight=0.25,
        color="#10B981",
        icon="Shield",
        order=2,
    ),
    Category(
        id="investigation-evidence",
        name="Investigation & Evidence",
        description=(
            "Capabilities for investigating incidents and preserving digital "
            "evidence. Mature investigation programs reduce average containment "
            "from 81 to 52 days (Ponemon Institute, 2025)."
        ),
        weight=0.20,
        color="#F59E0B",
        icon="Search",
        order=3,
    ),
    Category(
        id="identity-saas",
        name="Identity & SaaS/OAuth",
        description=(
            "Identity management and access controls for cloud applications. "
            "92% of insider incidents involve identity-related vulnerabilities "
            "(Gartner G00805757, 2024)."
        ),
        weight=0.15,
        color="#8B5CF6",
        icon="Key",
        order=4,
    ),
    Category(
        id="phishing-resilience",
        name="Phishing Resilience",
        description=(
            "Protection against phishing and social engineering, the enabler for "
            "68% of breaches with a human element (Verizon DBIR, 2024)."
        ),
        weight=0.15,
        color="#EF4444",
        icon="ShieldAlert",
        order=5,
    ),
)

_BY_ID = {c.id: c for c in CATEGORIES}


def get_category(category_id: str) -> Optional[Category]:
    return _BY_ID.get(category_id)


def get_category_weight(category_id: str) -> float:
    category = _BY_ID.get(category_id)
    return category.weight if category else 0.0


def get_category_color(category_id: str) -> str:
    category = _BY_ID.get(category_id)
    return category.color if category else "#6B7280"


def validate_catalog(categories: tuple[Category, ...] = CATEGORIES) -> None:
    """
    Check the category invariants.

    Raises:
        CatalogError: if ids repeat or weights do not sum to 1.0.
    """
    ids = [c.id for c in categories]
    if len(ids) != len(set(ids)):
        raise CatalogError(f"Duplicate category ids: {sorted(ids)}")

    total = sum(c.weight for c in categories)
    if abs(total - 1.0) > WEIGHT_TOLERANCE:
        raise CatalogError(f"Category weights sum to {total}, expected 1.0")

    for c in categories:
        if not 0.0 <= c.weight <= 1.0:
            raise CatalogError(f"Category '{c.id}' weight {c.weight} outside [0, 1]")

"""
Feed processing — Converts the raw matrix JSON into MatrixData.

The feed is a list of articles, each with a theme and free-form sections.
Sections titled prevention/mitigation become preventions, sections titled
detection/monitoring become detections, and each is assigned to the scoring
category its text is most clearly about.
"""

from __future__ import annotations

import html
import re
from typing import Any

from .models import MatrixData, MatrixGuidance, MatrixTechnique

_TAG_RE = re.compile(r"<[^>]*>")

# First match wins; text with no keyword falls back to visibility
CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("visibility",             ("monitor", "log", "detect")),
    ("prevention-coaching",    ("train", "aware", "education", "coach")),
    ("investigation-evidence", ("evidence", "record", "document", "forensic")),
    ("identity-saas",          ("access", "identity", "auth", "oauth")),
    ("phishing-resilience",    ("phish", "email", "social")),
]
DEFAULT_CATEGORY = "visibility"

PREVENTION_TITLES = ("prevention", "mitigation")
DETECTION_TITLES = ("detection", "monitoring")


def strip_html(text: Any) -> str:
    if not text or not isinstance(text, str):
        return ""
    return html.unescape(_TAG_RE.sub("", text)).replace("\xa0", " ").strip()


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def map_theme(theme: Any) -> str:
    lowered = _text(theme).lower()
    if "coercion" in lowered:
        return "Coercion"
    if "manipulation" in lowered:
        return "Manipulation"
    return "Motive"


def map_text_to_category(text: str) -> str:
    lowered = (text or "").lower()
    for category_id, keywords in CATEGORY_KEYWORDS:
        if any(k in lowered for k in keywords):
            return category_id
    return DEFAULT_CATEGORY


def _extract(sections: Any, article_id: str, kind: str, titles: tuple[str, ...]) -> list[MatrixGuidance]:
    if not isinstance(sections, list):
        return []
    items: list[MatrixGuidance] = []
    for section in sections:
        if not isinstance(section, dict):
            continue
        title = _text(section.get("title"))
        if not any(t in title.lower() for t in titles):
            continue
        content = _text(section.get("content"))
        items.append(MatrixGuidance(
            id=f"{article_id}-{kind}-{len(items)}",
            title=title,
            description=strip_html(content) or "No description available",
            category_id=map_text_to_category(content or title),
            kind=kind,
        ))
    return items


def process_matrix_payload(payload: Any, now_iso: str) -> MatrixData:
    """
    Build MatrixData from the raw feed.

    Raises:
        ValueError: if the payload is not a JSON object.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Matrix payload must be an object, got {type(payload).__name__}")

    articles = payload.get("articles")
    techniques: list[MatrixTechnique] = []
    for article in articles if isinstance(articles, list) else []:
        if not isinstance(article, dict) or not article.get("id"):
            continue
        article_id = str(article["id"])
        sections = article.get("sections") or []
        techniques.append(MatrixTechnique(
            id=article_id,
            title=_text(article.get("title")),
            description=strip_html(article.get("description")) or "No description available",
            theme=map_theme(article.get("theme")),
            preventions=_extract(sections, article_id, "prevention", PREVENTION_TITLES),
            detections=_extract(sections, article_id, "detection", DETECTION_TITLES),
            last_updated=_text(article.get("updated")) or now_iso,
        ))

    return MatrixData(version="1.0", last_updated=now_iso, techniques=techniques)


def unavailable_data(now_iso: str) -> MatrixData:
    """Empty dataset served when the feed is down and nothing is cached."""
    return MatrixData(version="1.0-unavailable", last_updated=now_iso, available=False)

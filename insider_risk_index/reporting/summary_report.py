"""
Assessment summary — One-page Markdown summary for leadership audiences.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..catalog import get_category, normalize_industry_key, normalize_size_key
from ..scoring.levels import get_risk_level


TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "summary.md.j2"

NEXT_STEPS = [
    "Review detailed findings in the comprehensive report",
    "Prioritize recommendations based on your organization's risk tolerance",
    "Develop an implementation roadmap with measurable milestones",
    "Schedule regular reassessments to track progress",
]


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def _category_name(category_id: str) -> str:
    category = get_category(category_id)
    return category.name if category else category_id


def render_summary(
    result: Any,
    industry: str = "",
    company_size: str = "",
    assessment_id: str = "",
) -> str:
    """Render the Markdown summary for a finished assessment."""
    risk_level = get_risk_level(result.level)
    strongest = result.strongest_category
    weakest = result.weakest_category

    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(
        assessment_id=assessment_id,
        generated_utc=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        industry=normalize_industry_key(industry) or "not specified",
        company_size=normalize_size_key(company_size) or "not specified",
        result=result,
        risk_level=risk_level,
        above_benchmark=result.total_score > result.benchmark.overall,
        strongest=_category_name(strongest.category_id) if strongest else "n/a",
        weakest=_category_name(weakest.category_id) if weakest else "n/a",
        categories=[
            {
                "name": _category_name(cs.category_id),
                "score": cs.score,
                "weight_pct": round(cs.weight * 100),
                "contribution": cs.contribution,
                "answered": cs.answered,
                "total": cs.total,
            }
            for cs in result.category_scores
        ],
        immediate_actions=result.recommendations[:3],
        next_steps=NEXT_STEPS,
    )


def export_summary(
    result: Any,
    output_dir: Path,
    assessment_id: str,
    industry: str = "",
    company_size: str = "",
) -> Path:
    """
    Write the Markdown summary to disk.

    Returns:
        Path to the created Markdown file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / f"insider_risk_summary_{assessment_id}.md"

    content = render_summary(result, industry, company_size, assessment_id)

    with open(filepath, "w", encoding="utf-8") as fh:
        fh.write(content)

    return filepath

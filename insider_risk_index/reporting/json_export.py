"""
JSON exporter — Produces the full machine-readable assessment output.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .. import __version__
from ..catalog import get_category, get_category_color


def export_json(
    result: Any,
    output_dir: Path,
    assessment_id: str,
) -> Path:
    """
    Write the assessment result to a JSON file.

    Returns:
        Path to the created JSON file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "metadata": {
            "engine": "Insider Risk Index",
            "version": __version__,
            "assessment_id": assessment_id,
            "generated_utc": datetime.now(timezone.utc).isoformat(),
        },
        "assessment": result.to_dict(),
        "categories": [_category_to_dict(cs) for cs in result.category_scores],
    }

    filepath = output_dir / f"insider_risk_assessment_{assessment_id}.json"

    with open(filepath, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, default=str, ensure_ascii=False)

    return filepath


def _category_to_dict(category_score) -> dict:
    category = get_category(category_score.category_id)
    return {
        "id": category_score.category_id,
        "name": category.name if category else category_score.category_id,
        "color": get_category_color(category_score.category_id),
        "score": category_score.score,
        "weight": category_score.weight,
        "contribution": category_score.contribution,
        "answered": category_score.answered,
        "total": category_score.total,
    }

"""
Threat matrix data models — Techniques and guidance from the community feed.
All models round-trip through plain dicts so they can live in any cache store.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional


@dataclass
class MatrixGuidance:
    """A prevention or detection section attached to a technique."""
    id: str
    title: str
    description: str
    category_id: str               # Scoring category the guidance supports
    kind: str = "prevention"       # "prevention" or "detection"


@dataclass
class MatrixTechnique:
    id: str
    title: str
    description: str
    theme: str = "Motive"          # Motive, Coercion or Manipulation
    preventions: list[MatrixGuidance] = field(default_factory=list)
    detections: list[MatrixGuidance] = field(default_factory=list)
    last_updated: str = ""

    def supports(self, category_id: str) -> bool:
        return any(g.category_id == category_id for g in self.preventions + self.detections)

    @classmethod
    def from_dict(cls, data: dict) -> "MatrixTechnique":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            theme=data.get("theme", "Motive"),
            preventions=[MatrixGuidance(**g) for g in data.get("preventions", [])],
            detections=[MatrixGuidance(**g) for g in data.get("detections", [])],
            last_updated=data.get("last_updated", ""),
        )


@dataclass
class MatrixData:
    version: str
    last_updated: str
    techniques: list[MatrixTechnique] = field(default_factory=list)
    source: str = "ForScie Insider Threat Matrix"
    source_url: str = "https://insiderthreatmatrix.org/"
    license: str = "Creative Commons Attribution 4.0 International"
    available: bool = True

    @property
    def theme_counts(self) -> dict[str, int]:
        counts = {"Motive": 0, "Coercion": 0, "Manipulation": 0}
        for t in self.techniques:
            counts[t.theme] = counts.get(t.theme, 0) + 1
        return counts

    def get_technique(self, technique_id: str) -> Optional[MatrixTechnique]:
        for t in self.techniques:
            if t.id == technique_id:
                return t
        return None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "MatrixData":
        return cls(
            version=data.get("version", ""),
            last_updated=data.get("last_updated", ""),
            techniques=[MatrixTechnique.from_dict(t) for t in data.get("techniques", [])],
            source=data.get("source", "ForScie Insider Threat Matrix"),
            source_url=data.get("source_url", "https://insiderthreatmatrix.org/"),
            license=data.get("license", "Creative Commons Attribution 4.0 International"),
            available=data.get("available", True),
        )

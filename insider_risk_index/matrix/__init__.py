"""Threat matrix package — optional enrichment from the community feed."""

from .client import CACHE_KEY, MatrixClient
from .models import MatrixData, MatrixGuidance, MatrixTechnique
from .processing import map_text_to_category, process_matrix_payload, strip_html

__all__ = [
    "CACHE_KEY",
    "MatrixClient",
    "MatrixData",
    "MatrixGuidance",
    "MatrixTechnique",
    "map_text_to_category",
    "process_matrix_payload",
    "strip_html",
]

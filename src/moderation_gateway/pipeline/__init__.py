"""
Analysis pipeline (validate -> infer -> derive verdict).

- analyzer.py: AnalysisPipeline orchestrator
- verdict.py: Top-label to Verdict mapping
"""

from .analyzer import AnalysisPipeline
from .verdict import EmptyResultsError, derive_verdict, verdict_for_label

__all__ = [
    "AnalysisPipeline",
    "derive_verdict",
    "verdict_for_label",
    "EmptyResultsError",
]

"""
Genomic Risk Classification Layer

Maps a patient's altered genes and structural markers to clinical risk
outcomes with therapy templates.

Usage:
    from allrisk.core.classification import (
        classify_pathway, classify_structural, StructuralMarkerRecord,
    )

    classify_pathway({"ABL1", "JAK2"}).subtype          # "ABL-class"
    classify_structural(StructuralMarkerRecord(ikzf1_del=True, pax5_del=True)).label
"""
from .base import MarkerStatus, Outcome, OutcomeStatus, RiskTier, Rule, Therapy
from .engine import ClassificationReport, Recommendation, RiskClassificationEngine
from .rules_pathway import classify_pathway
from .rules_structural import PAR1Panel, StructuralMarkerRecord, classify_structural

__all__ = [
    "classify_pathway",
    "classify_structural",
    "ClassificationReport",
    "MarkerStatus",
    "Outcome",
    "OutcomeStatus",
    "PAR1Panel",
    "Recommendation",
    "RiskClassificationEngine",
    "RiskTier",
    "Rule",
    "StructuralMarkerRecord",
    "Therapy",
]

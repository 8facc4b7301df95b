"""
Risk Classification Engine

Composes the two classifiers. Takes one patient's altered genes and
structural markers and returns both outcomes plus combined treatment
recommendations.

Usage:
    from allrisk.core.classification import RiskClassificationEngine

    engine = RiskClassificationEngine()
    report = engine.classify({"ABL1"}, StructuralMarkerRecord(ikzf1_del=True))
    for rec in report.recommendations:
        print(rec.category, rec.title)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .base import Outcome, OutcomeStatus, RiskTier
from .inputs import normalise_genes
from .rules_pathway import classify_pathway
from .rules_structural import (
    STRUCTURAL_RULES, StructuralMarkerRecord, classify_structural,
    structural_matches, structural_shadowed_rules,
)

logger = logging.getLogger(__name__)

# Structural tiers that push the patient onto the intensified path
_ESCALATING_TIERS = frozenset({RiskTier.HIGH, RiskTier.VERY_HIGH})


@dataclass(frozen=True)
class Recommendation:
    """One line of the combined treatment advice."""
    title: str
    detail: str
    category: str          # "targeted first-line" | "pathway adjustment" | "standard protocol"

    def to_dict(self) -> dict:
        return {"title": self.title, "detail": self.detail, "category": self.category}


@dataclass(frozen=True)
class ClassificationReport:
    """Both classifier outcomes for one patient, with combined advice."""
    pathway: Outcome
    structural: Outcome
    recommendations: List[Recommendation] = field(default_factory=list)
    # Every structural rule that held, in cascade order; the first one won
    structural_matches: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "pathway": self.pathway.to_dict(),
            "structural": self.structural.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "structural_matches": list(self.structural_matches),
        }

    @property
    def highest_risk(self) -> RiskTier:
        """The more severe of the two outcomes' risk tiers."""
        a, b = self.pathway.risk, self.structural.risk
        return a if _RISK_ORDER[a] >= _RISK_ORDER[b] else b


def build_recommendations(pathway: Outcome, structural: Outcome) -> List[Recommendation]:
    """
    Derive combined advice from the two outcomes.

    A patient can receive several lines, but the standard-protocol line is
    only given when nothing asked for escalation.
    """
    recs: List[Recommendation] = []
    escalated = False

    if pathway.has_therapy:
        t = pathway.therapy
        recs.append(Recommendation(
            title=t.name,
            detail=(
                f"{pathway.subtype} positive. Recommended dose {t.dose}; "
                f"timing: {t.timing}."
            ),
            category="targeted first-line",
        ))

    if structural.risk in _ESCALATING_TIERS or pathway.is_positive:
        escalated = True
        recs.append(Recommendation(
            title="Intensified chemotherapy / transplant",
            detail=(
                "High-risk genetic lesion: treat on the high-risk chemotherapy arm. "
                "If MRD remains positive at week 12, consider allogeneic HSCT."
            ),
            category="pathway adjustment",
        ))

    favorable = structural.status is OutcomeStatus.NEGATIVE or (
        pathway.status is OutcomeStatus.NEGATIVE and structural.status is OutcomeStatus.NEUTRAL
    )
    if favorable and not escalated:
        recs.append(Recommendation(
            title="Continue standard protocol",
            detail="Favorable molecular profile or no significant high-risk lesion; keep the standard protocol.",
            category="standard protocol",
        ))

    return recs


class RiskClassificationEngine:
    """
    Runs both classifiers on one patient snapshot.

    Stateless: safe to call from multiple threads / concurrent requests.
    """

    def classify(
        self,
        genes: Optional[Iterable[str]] = None,
        record: Optional[StructuralMarkerRecord] = None,
    ) -> ClassificationReport:
        """
        Classify one patient.

        Args:
            genes:  Altered gene symbols (None / empty means none altered).
                    Symbols are stripped and upper-cased; a bare string is
                    rejected rather than split into characters.
            record: Structural markers (None means all absent).

        Returns:
            ClassificationReport with both outcomes and combined advice.

        Raises:
            InputValidationError: if `genes` is a bare string or holds a
                                  blank or non-string symbol.
        """
        genes = normalise_genes(genes)
        record = record if record is not None else StructuralMarkerRecord()

        pathway = self.classify_pathway(genes)
        structural = self.classify_structural(record)
        recommendations = build_recommendations(pathway, structural)

        logger.info(
            f"RiskClassificationEngine: pathway={pathway.rule_id}, "
            f"structural={structural.rule_id}, "
            f"{len(recommendations)} recommendation(s)"
        )
        return ClassificationReport(
            pathway=pathway,
            structural=structural,
            recommendations=recommendations,
            structural_matches=structural_matches(record),
        )

    def classify_pathway(self, genes: Iterable[str]) -> Outcome:
        genes = normalise_genes(genes)
        outcome = classify_pathway(genes)
        logger.debug(f"RiskClassificationEngine [pathway]: {sorted(genes)} -> {outcome.rule_id}")
        return outcome

    def classify_structural(self, record: StructuralMarkerRecord) -> Outcome:
        outcome = classify_structural(record)
        logger.debug(f"RiskClassificationEngine [structural]: {outcome.rule_id}")
        return outcome

    @staticmethod
    def rule_order() -> List[Dict[str, str]]:
        """Structural rules in evaluation order."""
        return [{"rule_id": r.rule_id, "name": r.name} for r in STRUCTURAL_RULES]

    @staticmethod
    def shadowed_rules() -> List[str]:
        """Structural rules that are reachable in isolation but never selected."""
        return list(structural_shadowed_rules())

    @staticmethod
    def summarise(report: ClassificationReport) -> Dict:
        """
        Build a compact summary dict suitable for JSON API responses.

        Example output:
        {
            "ph_like": "positive",
            "ph_like_subtype": "ABL-class",
            "structural_label": "IKZF1 PLUS",
            "highest_risk": "high",
            "therapies": ["Dasatinib", "Intensified chemotherapy"],
            "report": {...}
        }
        """
        therapies = []
        for outcome in (report.pathway, report.structural):
            if outcome.therapy is not None and outcome.therapy.name not in therapies:
                therapies.append(outcome.therapy.name)

        return {
            "ph_like":          report.pathway.status.value,
            "ph_like_subtype":  report.pathway.subtype,
            "structural_label": report.structural.label,
            "highest_risk":     report.highest_risk.value,
            "therapies":        therapies,
            "report":           report.to_dict(),
        }


# Lower = less severe
_RISK_ORDER = {
    RiskTier.FAVORABLE:           0,
    RiskTier.STANDARD_LOW:        1,
    RiskTier.STANDARD:            2,
    RiskTier.STANDARD_EVALUATION: 2,
    RiskTier.INTERMEDIATE:        3,
    RiskTier.INTERMEDIATE_HIGH:   4,
    RiskTier.HIGH:                5,
    RiskTier.VERY_HIGH:           6,
}



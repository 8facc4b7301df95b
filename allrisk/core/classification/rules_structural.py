"""
Structural Marker Classification Rules (IKZF1 PLUS)

Evaluates copy-number / structural markers and produces one Outcome.

Rule definitions follow the published groupings:
  - NCCN (2024): iAMP21 by RUNX1 FISH
  - Leukemia (2014): ERG deletion protects even with IKZF1 loss
  - Blood (2015): IKZF1 PLUS, BTG1 + IKZF1 double deletion
  - Blood (2014): GEN-PR unfavorable group
  - BJLH (2011): ETV6 deletion in ETV6-RUNX1 ALL

Design principles:
  - The cascade is data: STRUCTURAL_RULES is an ordered tuple of Rule
    entries and `first_match` returns the first one that holds.
  - A "deleted" status covers heterozygous and homozygous loss alike.
  - Rules are kept in their clinical reporting order. Because GEN-PR (rule 4)
    already fires on any IKZF1 deletion, IKZF1-BTG1 (5) and IKZF1-SIMPLE (8)
    can never be selected. The order is intentional pending clinical review;
    `structural_shadowed_rules()` reports it.
"""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Iterator, List, Tuple

from .base import (
    MarkerStatus, Outcome, OutcomeStatus, RiskTier, Rule, Therapy,
    first_match, matching_rules, shadowed_rules,
)
from .gene_sets import PAR1_GENES


@dataclass(frozen=True)
class PAR1Panel:
    """Per-gene status of the five PAR1 region genes; unset genes are absent."""
    CRLF2:  MarkerStatus = MarkerStatus.ABSENT
    CSF2RA: MarkerStatus = MarkerStatus.ABSENT
    IL3RA:  MarkerStatus = MarkerStatus.ABSENT
    P2RY8:  MarkerStatus = MarkerStatus.ABSENT
    SHOX:   MarkerStatus = MarkerStatus.ABSENT

    def statuses(self) -> Tuple[MarkerStatus, ...]:
        return tuple(getattr(self, gene) for gene in PAR1_GENES)

    @property
    def any_deleted(self) -> bool:
        return MarkerStatus.DELETED in self.statuses()

    @property
    def any_duplicated(self) -> bool:
        return MarkerStatus.DUPLICATED in self.statuses()

    def to_dict(self) -> dict:
        return {gene: getattr(self, gene).value for gene in PAR1_GENES}


@dataclass(frozen=True)
class StructuralMarkerRecord:
    """
    Snapshot of one patient's structural markers.

    Every flag defaults to False so a partially filled record is still a
    complete, valid input.
    """
    ikzf1_del: bool = False
    cdkn2a_b_del: bool = False
    pax5_del: bool = False
    par1_genes: PAR1Panel = field(default_factory=PAR1Panel)
    ebf1_del: bool = False
    rb1_del: bool = False
    btg1_del: bool = False
    etv6_del: bool = False
    erg_del: bool = False
    dux4_rearrange: bool = False
    iamp21: bool = False

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["par1_genes"] = self.par1_genes.to_dict()
        return data


# Boolean flag names, in declaration order (par1_genes excluded)
MARKER_FLAGS: Tuple[str, ...] = tuple(
    f.name for f in fields(StructuralMarkerRecord) if f.name != "par1_genes"
)


# ── Rule 1: iAMP21 ───────────────────────────────────────────────────────────

def _iamp21(r: StructuralMarkerRecord) -> Outcome:
    return Outcome(
        status=OutcomeStatus.POSITIVE,
        label="iAMP21",
        risk=RiskTier.HIGH,
        detail=(
            "NCCN 2024: RUNX1 FISH with ≥5 signals, or a cluster of ≥3 "
            "amplified RUNX1 signals. Unfavorable prognosis."
        ),
        rule_id="IAMP21",
    )


# ── Rule 2: ERG deletion / DUX4 rearrangement (protective) ──────────────────

def _protective(r: StructuralMarkerRecord) -> Outcome:
    label = (
        "ERG deletion (protective)" if r.erg_del
        else "DUX4 rearrangement (favorable)"
    )
    return Outcome(
        status=OutcomeStatus.NEGATIVE,
        label=label,
        risk=RiskTier.STANDARD_LOW,
        detail=(
            "Patients with ERG deletion do well even when IKZF1 is also "
            "deleted; the protective effect overrides co-occurring high-risk "
            "markers (Leukemia 2014)."
        ),
        rule_id="ERG-DUX4-PROTECTIVE",
    )


# ── Rule 3: IKZF1 PLUS ───────────────────────────────────────────────────────

IKZF1_PLUS_THERAPY = Therapy(
    name="Intensified chemotherapy",
    dose="Treat on the high-risk (HR) arm",
    timing=(
        "Consider short intensified induction and consolidation blocks "
        "with close MRD monitoring."
    ),
)


def _is_ikzf1_plus(r: StructuralMarkerRecord) -> bool:
    return r.ikzf1_del and (r.cdkn2a_b_del or r.pax5_del or r.par1_genes.any_deleted)


def _ikzf1_plus(r: StructuralMarkerRecord) -> Outcome:
    return Outcome(
        status=OutcomeStatus.POSITIVE,
        label="IKZF1 PLUS",
        risk=RiskTier.HIGH,
        detail=(
            "IKZF1 deletion with co-deletion of CDKN2A/B, PAX5 or PAR1. "
            "Worse prognosis than isolated IKZF1 deletion."
        ),
        therapy=IKZF1_PLUS_THERAPY,
        rule_id="IKZF1-PLUS",
    )


# ── Rule 4: GEN-PR ───────────────────────────────────────────────────────────

def _is_gen_pr(r: StructuralMarkerRecord) -> bool:
    return r.ikzf1_del or r.par1_genes.any_deleted or r.ebf1_del or r.rb1_del


def _gen_pr(r: StructuralMarkerRecord) -> Outcome:
    return Outcome(
        status=OutcomeStatus.POSITIVE,
        label="GEN-PR unfavorable group",
        risk=RiskTier.INTERMEDIATE_HIGH,
        detail="Blood 2014: deletion of any of IKZF1, PAR1, EBF1 or RB1 predicts poorer outcome.",
        rule_id="GEN-PR",
    )


# ── Rule 5: IKZF1 + BTG1 ─────────────────────────────────────────────────────

def _ikzf1_btg1(r: StructuralMarkerRecord) -> Outcome:
    return Outcome(
        status=OutcomeStatus.POSITIVE,
        label="IKZF1+BTG1 double deletion",
        risk=RiskTier.VERY_HIGH,
        detail=(
            "BTG1 loss determines glucocorticoid response; the double deletion "
            "is markedly worse than isolated IKZF1 deletion."
        ),
        rule_id="IKZF1-BTG1",
    )


# ── Rule 6: PAR1 duplication only ────────────────────────────────────────────

def _is_par1_dup_only(r: StructuralMarkerRecord) -> bool:
    return r.par1_genes.any_duplicated and not r.par1_genes.any_deleted and not r.ikzf1_del


def _par1_dup(r: StructuralMarkerRecord) -> Outcome:
    return Outcome(
        status=OutcomeStatus.NEUTRAL,
        label="PAR1 duplication, no significance",
        risk=RiskTier.STANDARD_EVALUATION,
        detail="PAR1 duplications have no established link to ALL onset or prognosis.",
        rule_id="PAR1-DUP",
    )


# ── Rule 7: ETV6 ─────────────────────────────────────────────────────────────

def _etv6(r: StructuralMarkerRecord) -> Outcome:
    return Outcome(
        status=OutcomeStatus.NEGATIVE,
        label="ETV6 deletion",
        risk=RiskTier.FAVORABLE,
        detail="In ETV6-RUNX1 positive ALL, an additional ETV6 deletion usually indicates a better prognosis.",
        rule_id="ETV6",
    )


# ── Rule 8: isolated IKZF1 ───────────────────────────────────────────────────

def _ikzf1_simple(r: StructuralMarkerRecord) -> Outcome:
    return Outcome(
        status=OutcomeStatus.POSITIVE,
        label="Simple IKZF1 deletion",
        risk=RiskTier.INTERMEDIATE,
        detail=(
            "IKZF1 deletion is unfavorable in ALL (NEJM 2009), though the "
            "prognosis varies between deletion types."
        ),
        rule_id="IKZF1-SIMPLE",
    )


STRUCTURAL_RULES: Tuple[Rule[StructuralMarkerRecord], ...] = (
    Rule("IAMP21", "iAMP21", lambda r: r.iamp21, _iamp21),
    Rule("ERG-DUX4-PROTECTIVE", "ERG deletion or DUX4 rearrangement",
         lambda r: r.erg_del or r.dux4_rearrange, _protective),
    Rule("IKZF1-PLUS", "IKZF1 PLUS", _is_ikzf1_plus, _ikzf1_plus),
    Rule("GEN-PR", "GEN-PR unfavorable group", _is_gen_pr, _gen_pr),
    Rule("IKZF1-BTG1", "IKZF1+BTG1 double deletion",
         lambda r: r.ikzf1_del and r.btg1_del, _ikzf1_btg1),
    Rule("PAR1-DUP", "PAR1 duplication only", _is_par1_dup_only, _par1_dup),
    Rule("ETV6", "ETV6 deletion", lambda r: r.etv6_del, _etv6),
    Rule("IKZF1-SIMPLE", "Simple IKZF1 deletion", lambda r: r.ikzf1_del, _ikzf1_simple),
)

NO_MARKER_OUTCOME = Outcome(
    status=OutcomeStatus.NEUTRAL,
    label="No high-risk marker detected",
    risk=RiskTier.STANDARD_EVALUATION,
    rule_id="DEFAULT",
)


def classify_structural(record: StructuralMarkerRecord) -> Outcome:
    """Return the outcome of the first structural rule that holds for `record`."""
    return first_match(STRUCTURAL_RULES, record, NO_MARKER_OUTCOME)


def structural_matches(record: StructuralMarkerRecord) -> List[str]:
    """All structural rule ids whose predicate holds, in evaluation order."""
    return matching_rules(STRUCTURAL_RULES, record)


# ── Rule-order audit ─────────────────────────────────────────────────────────

# Every predicate sees the PAR1 panel only through any_deleted / any_duplicated,
# so these four panels cover the panel's whole behaviour.
_PAR1_REPRESENTATIVES = (
    PAR1Panel(),
    PAR1Panel(CRLF2=MarkerStatus.DELETED),
    PAR1Panel(CRLF2=MarkerStatus.DUPLICATED),
    PAR1Panel(CRLF2=MarkerStatus.DELETED, SHOX=MarkerStatus.DUPLICATED),
)


def representative_records() -> Iterator[StructuralMarkerRecord]:
    """Every flag combination crossed with each representative PAR1 panel."""
    for values in itertools.product((False, True), repeat=len(MARKER_FLAGS)):
        flags = dict(zip(MARKER_FLAGS, values))
        for panel in _PAR1_REPRESENTATIVES:
            yield StructuralMarkerRecord(par1_genes=panel, **flags)


@lru_cache(maxsize=1)
def structural_shadowed_rules() -> Tuple[str, ...]:
    """Ids of structural rules that can match but are never selected."""
    return tuple(shadowed_rules(STRUCTURAL_RULES, representative_records()))

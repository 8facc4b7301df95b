"""
Ph-like Pathway Classification Rules

Maps a set of altered gene symbols to a Ph-like ALL outcome.

Two disjoint kinase sets are consulted (see `gene_sets`). Any altered gene,
in either set or outside both, makes the outcome positive; the subtype is
then chosen by priority:

  1. ABL-class  – an approved TKI exists, so it is surfaced first
  2. JAK-STAT   – JAK inhibitor, trial-protocol dosing
  3. other      – no therapy template

Design principles:
  - classify_pathway is pure: (genes) → Outcome
  - Therapy templates are module-level constants so they can be reviewed
    without hunting through logic.
"""
from __future__ import annotations

from typing import Iterable

from .base import Outcome, OutcomeStatus, RiskTier, Therapy
from .gene_sets import ABL_CLASS_GENES, JAK_STAT_GENES

SUBTYPE_ABL_CLASS = "ABL-class"
SUBTYPE_JAK_STAT  = "JAK-STAT"
SUBTYPE_OTHER     = "other pathway"

# ── Therapy templates ────────────────────────────────────────────────────────
ABL_CLASS_THERAPY = Therapy(
    name="Dasatinib",
    dose="60-80 mg/m²/day",
    timing="Add as early as possible in induction, from day 3",
)

JAK_STAT_THERAPY = Therapy(
    name="Ruxolitinib",
    dose="40-50 mg/m²/day (per clinical-trial protocol)",
    timing="Add during induction or early consolidation",
)


def classify_pathway(genes: Iterable[str]) -> Outcome:
    """
    Classify altered genes into a Ph-like outcome.

    Args:
        genes: Altered gene symbols. Order and duplicates are irrelevant;
               an empty collection is valid. Symbols are compared as given,
               and a bare string is iterated per character, so callers
               with raw input go through `inputs.normalise_genes` first.

    Returns:
        A positive outcome with subtype (and therapy where one exists), or a
        negative standard-risk outcome when no gene is altered.
    """
    altered = frozenset(genes)

    has_abl_class = not altered.isdisjoint(ABL_CLASS_GENES)
    has_jak_stat  = not altered.isdisjoint(JAK_STAT_GENES)
    has_others    = bool(altered - ABL_CLASS_GENES - JAK_STAT_GENES)

    if not (has_abl_class or has_jak_stat or has_others):
        return Outcome(
            status=OutcomeStatus.NEGATIVE,
            label="Not Ph-like ALL",
            risk=RiskTier.STANDARD,
            rule_id="PH-NEGATIVE",
        )

    if has_abl_class:
        subtype, therapy, rule_id = SUBTYPE_ABL_CLASS, ABL_CLASS_THERAPY, "PH-ABL"
    elif has_jak_stat:
        subtype, therapy, rule_id = SUBTYPE_JAK_STAT, JAK_STAT_THERAPY, "PH-JAK-STAT"
    else:
        subtype, therapy, rule_id = SUBTYPE_OTHER, None, "PH-OTHER"

    return Outcome(
        status=OutcomeStatus.POSITIVE,
        label="Ph-like ALL positive",
        risk=RiskTier.INTERMEDIATE_HIGH,
        subtype=subtype,
        therapy=therapy,
        rule_id=rule_id,
    )

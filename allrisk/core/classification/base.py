"""
Risk Classification Layer: Base Types

Defines the result contract that both genomic classifiers produce, plus the
generic first-match evaluator that drives every rule cascade.
These are classifier-agnostic and consumed by the engine and the API layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar


class OutcomeStatus(str, Enum):
    """
    Direction of a classification outcome.

    POSITIVE – a risk-raising (or actionable) pattern was found
    NEGATIVE – pattern absent, or a protective / favorable marker dominates
    NEUTRAL  – nothing of prognostic significance
    """
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL  = "neutral"


class RiskTier(str, Enum):
    """Clinical risk tiers reported by the classifiers."""
    STANDARD            = "standard"
    STANDARD_LOW        = "standard/low"
    FAVORABLE           = "standard/low (favorable)"
    STANDARD_EVALUATION = "standard evaluation"
    INTERMEDIATE        = "intermediate"
    INTERMEDIATE_HIGH   = "intermediate/high"
    HIGH                = "high"
    VERY_HIGH           = "very high"


class MarkerStatus(str, Enum):
    """Copy-number status of a single PAR1 gene."""
    ABSENT     = "none"
    DELETED    = "del"
    DUPLICATED = "dup"


@dataclass(frozen=True)
class Therapy:
    """A therapy recommendation template attached to an outcome."""
    name: str       # agent or protocol
    dose: str
    timing: str     # when to start, relative to the treatment phase

    def to_dict(self) -> dict:
        return {"name": self.name, "dose": self.dose, "timing": self.timing}


@dataclass(frozen=True)
class Outcome:
    """
    The single result of one classifier call.

    `subtype`, `detail` and `therapy` are optional: a negative outcome carries
    none of them, a positive one may carry any combination.
    """
    # ── Core identity ─────────────────────────────────────────────────────
    status: OutcomeStatus
    label: str
    risk: RiskTier

    # ── Optional payload ──────────────────────────────────────────────────
    subtype: Optional[str] = None
    detail: Optional[str] = None
    therapy: Optional[Therapy] = None

    # Identifier of the rule that produced this outcome, for audit trails
    rule_id: str = ""

    @property
    def is_positive(self) -> bool:
        return self.status is OutcomeStatus.POSITIVE

    @property
    def has_therapy(self) -> bool:
        return self.therapy is not None

    # ── Serialisation ─────────────────────────────────────────────────────
    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "label": self.label,
            "risk": self.risk.value,
            "subtype": self.subtype,
            "detail": self.detail,
            "therapy": self.therapy.to_dict() if self.therapy else None,
            "rule_id": self.rule_id,
        }


T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """
    One entry of a priority cascade: a pure predicate over the input
    and the outcome returned when it is the first predicate to hold.

    `outcome` is a callable so that a rule can shape its label from
    the input (e.g. naming which protective marker fired).
    """
    rule_id: str
    name: str
    predicate: Callable[[T], bool]
    outcome: Callable[[T], Outcome]


def first_match(rules: Iterable[Rule[T]], subject: T, default: Outcome) -> Outcome:
    """
    Evaluate `rules` in order and return the outcome of the first rule
    whose predicate holds. Later rules are never consulted.
    """
    for rule in rules:
        if rule.predicate(subject):
            return rule.outcome(subject)
    return default


def matching_rules(rules: Iterable[Rule[T]], subject: T) -> List[str]:
    """Return the ids of every rule whose predicate holds, in cascade order."""
    return [rule.rule_id for rule in rules if rule.predicate(subject)]


def shadowed_rules(rules: Tuple[Rule[T], ...], subjects: Iterable[T]) -> List[str]:
    """
    Return ids of rules that match at least one subject but are never the
    first match for any of them.

    Rules that never match at all are not reported; they are untested rather
    than shadowed.
    """
    matched = set()
    selected = set()
    for subject in subjects:
        hits = matching_rules(rules, subject)
        if hits:
            matched.update(hits)
            selected.add(hits[0])
    return [r.rule_id for r in rules if r.rule_id in matched and r.rule_id not in selected]

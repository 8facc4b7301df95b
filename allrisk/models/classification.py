"""
Pydantic models for the classification API.

Request models only fix the JSON shape. Domain checks (blank symbols,
unknown PAR1 genes or statuses) run in `core.classification.inputs` so that
direct Python callers get the same validation.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from allrisk.core.classification import Outcome
from allrisk.core.classification.engine import ClassificationReport


class TherapyResponse(BaseModel):
    """Therapy recommendation template."""
    name: str
    dose: str
    timing: str


class OutcomeResponse(BaseModel):
    """One classifier outcome."""
    status: str = Field(..., description="positive | negative | neutral")
    label: str
    risk: str
    subtype: Optional[str] = None
    detail: Optional[str] = None
    therapy: Optional[TherapyResponse] = None
    rule_id: str

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "OutcomeResponse":
        return cls(**outcome.to_dict())


class PathwayRequest(BaseModel):
    """Altered genes for Ph-like classification."""
    model_config = ConfigDict(extra="forbid")

    genes: List[str] = Field(default_factory=list, description="Altered gene symbols")


class MarkerRecordInput(BaseModel):
    """Structural marker flags; every omitted or null field is absent."""
    model_config = ConfigDict(extra="forbid")

    ikzf1_del: Optional[StrictBool] = False
    cdkn2a_b_del: Optional[StrictBool] = False
    pax5_del: Optional[StrictBool] = False
    par1_genes: Optional[Dict[str, Optional[str]]] = Field(
        default_factory=dict,
        description="PAR1 gene -> none | del | dup",
    )
    ebf1_del: Optional[StrictBool] = False
    rb1_del: Optional[StrictBool] = False
    btg1_del: Optional[StrictBool] = False
    etv6_del: Optional[StrictBool] = False
    erg_del: Optional[StrictBool] = False
    dux4_rearrange: Optional[StrictBool] = False
    iamp21: Optional[StrictBool] = False


class ClassificationRequest(BaseModel):
    """Both classifier inputs for one patient."""
    model_config = ConfigDict(extra="forbid")

    genes: List[str] = Field(default_factory=list)
    markers: Optional[MarkerRecordInput] = Field(default_factory=MarkerRecordInput)


class RecommendationResponse(BaseModel):
    title: str
    detail: str
    category: str


class ClassificationResponse(BaseModel):
    """Combined classification result."""
    pathway: OutcomeResponse
    structural: OutcomeResponse
    recommendations: List[RecommendationResponse]
    structural_matches: List[str]
    highest_risk: str

    @classmethod
    def from_report(cls, report: ClassificationReport) -> "ClassificationResponse":
        data = report.to_dict()
        return cls(
            pathway=OutcomeResponse(**data["pathway"]),
            structural=OutcomeResponse(**data["structural"]),
            recommendations=[RecommendationResponse(**r) for r in data["recommendations"]],
            structural_matches=data["structural_matches"],
            highest_risk=report.highest_risk.value,
        )


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str

"""
Marker reference text.

Read-only clinical-significance notes keyed by marker id, shown next to each
marker toggle. The classifiers never read this module.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Tuple

from allrisk.utils.exceptions import UnknownMarkerError

MARKER_SIGNIFICANCE = MappingProxyType({
    "ikzf1_del": (
        "IKZF1 deletions usually involve exons 4-6. Heterozygous deletion (loss of one "
        "allele copy) is the most common form in ALL and causes Ikaros haploinsufficiency, "
        "an established high-risk marker. Homozygous loss tends to fare worse, but "
        "heterozygous loss already warrants clinical action (NEJM 2009, Leukemia 2015)."
    ),
    "cdkn2a_b_del": (
        "Both heterozygous and homozygous CDKN2A/B deletion matter in B-ALL. In "
        "BCR-ABL1 positive and Ph-like disease it is associated with chemoresistance "
        "and shorter survival (Blood 2015)."
    ),
    "par1_del": (
        "Deletion in the PAR1 region (CRLF2, CSF2RA, IL3RA, P2RY8, SHOX). A heterozygous "
        "deletion is enough to create the P2RY8-CRLF2 fusion and CRLF2 overexpression, "
        "which is unfavorable. Duplications are usually of no clinical significance."
    ),
    "pax5_del": (
        "Key transcription factor of B-lineage development. Heterozygous PAX5 loss is very "
        "common in B-ALL; for IKZF1 PLUS it carries the same weight as homozygous loss "
        "(Blood 2017)."
    ),
    "ebf1_del": (
        "Heterozygous EBF1 deletion leaves early B-cell differentiation short of a key "
        "transcription factor. An important predictor of relapse, often acting together "
        "with IKZF1 deletion."
    ),
    "rb1_del": (
        "Heterozygous RB1 deletion releases the G1/S cell-cycle checkpoint. Any RB1 "
        "deletion places the patient in the GEN-PR intermediate/high-risk group (Blood 2014)."
    ),
    "btg1_del": (
        "BTG1 regulates proliferation and glucocorticoid sensitivity; its heterozygous loss "
        "determines poor glucocorticoid response. BTG1+IKZF1 double deletion carries a very "
        "poor prognosis."
    ),
    "etv6_del": (
        "ETV6 deletion, usually heterozygous, is common in pediatric B-ALL. In the "
        "ETV6-RUNX1 subtype an additional ETV6 deletion does not worsen, and may improve, "
        "the prognosis (BJLH 2011)."
    ),
    "erg_del": (
        "Strong protective factor. Patients with ERG deletion, even heterozygous, do very "
        "well, and it neutralises the high-risk effect of IKZF1 deletion."
    ),
    "dux4_rearrange": (
        "DUX4 rearrangement defines a distinct subtype with a characteristic expression "
        "profile and an excellent clinical outcome."
    ),
    "iamp21": (
        "Intrachromosomal amplification of chromosome 21. Criterion: ≥5 RUNX1 signals or a "
        "cluster of ≥3 signals. Indicates a very high-risk prognosis (NCCN 2024)."
    ),
})

EVIDENCE_SOURCES: Tuple[Tuple[str, str], ...] = (
    ("NCCN-2024", "iAMP21 and Ph-like ALL are very high-risk subtypes; standardises RUNX1 FISH criteria."),
    ("Blood 2014-2017", "Defines the GEN-PR group and links PAX5 alterations to prognosis."),
    ("Leukemia 2014-2015", "Establishes the protective effect of ERG deletion and the variable prognosis of IKZF1 deletion."),
)


def get_marker_significance(marker_id: str) -> str:
    """Return the reference note for `marker_id` or raise UnknownMarkerError."""
    try:
        return MARKER_SIGNIFICANCE[marker_id]
    except KeyError:
        raise UnknownMarkerError(marker_id, known=sorted(MARKER_SIGNIFICANCE)) from None

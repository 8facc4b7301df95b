"""
Reference gene tables.

Immutable lookup data consulted by the pathway classifier and listed by the
API's gene catalog. Nothing here is mutated after import.
"""
from __future__ import annotations

from typing import Tuple

# ── Ph-like pathway sets (disjoint) ──────────────────────────────────────────
JAK_STAT_GENES = frozenset({
    "CRLF2", "EPOR", "JAK1", "JAK2", "JAK3", "TYK2", "SH2B3", "IL7R",
})

ABL_CLASS_GENES = frozenset({
    "ABL1", "ABL2", "CSF1R", "PDGFRA", "PDGFRB", "FGFR1",
})

# Offered for selection, but classified only as "outside both sets"
OTHER_TARGETABLE_GENES = ("NTRK", "FLT3", "KRAS", "NRAS", "PTPN11")

# ── PAR1 region, in chromosomal reporting order ──────────────────────────────
PAR1_GENES = ("CRLF2", "CSF2RA", "IL3RA", "P2RY8", "SHOX")

# (group_id, title, genes) in display order
GENE_GROUPS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    ("jak_stat", "JAK-STAT pathway",
     ("CRLF2", "EPOR", "JAK1", "JAK2", "JAK3", "TYK2", "SH2B3", "IL7R")),
    ("abl_class", "ABL-class pathway",
     ("ABL1", "ABL2", "CSF1R", "PDGFRA", "PDGFRB", "FGFR1")),
    ("other", "Other targetable lesions", OTHER_TARGETABLE_GENES),
)

"""
Input normalisation at the API boundary.

Converts loosely typed caller data (JSON bodies, dicts) into the immutable
snapshots the classifiers accept. Anything outside the allowed domain raises
InputValidationError here, so the classifiers never see it.
"""
from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Mapping, Optional

from allrisk.utils.exceptions import InputValidationError

from .base import MarkerStatus
from .gene_sets import PAR1_GENES
from .rules_structural import MARKER_FLAGS, PAR1Panel, StructuralMarkerRecord


def normalise_genes(genes: Optional[Iterable[Any]]) -> FrozenSet[str]:
    """Strip and upper-case gene symbols; None means no altered genes."""
    if genes is None:
        return frozenset()
    if isinstance(genes, (str, bytes)):
        raise InputValidationError(
            "genes must be a collection of symbols, not a single string",
            field="genes",
        )

    symbols = set()
    for gene in genes:
        if not isinstance(gene, str):
            raise InputValidationError(
                f"Gene symbol must be a string, got {type(gene).__name__}",
                field="genes",
                details={"value": repr(gene)},
            )
        symbol = gene.strip().upper()
        if not symbol:
            raise InputValidationError("Gene symbol must not be blank", field="genes")
        symbols.add(symbol)
    return frozenset(symbols)


def parse_marker_status(value: Any, gene: str = "unknown") -> MarkerStatus:
    """Parse a PAR1 status ("none" / "del" / "dup"); None means absent."""
    if value is None:
        return MarkerStatus.ABSENT
    if isinstance(value, MarkerStatus):
        return value
    try:
        return MarkerStatus(str(value).strip().lower())
    except ValueError:
        raise InputValidationError(
            f"Unknown PAR1 status for {gene}: {value!r}. "
            f"Valid: {[s.value for s in MarkerStatus]}",
            field=f"par1_genes.{gene}",
        ) from None


def par1_panel_from_mapping(data: Optional[Mapping[str, Any]]) -> PAR1Panel:
    """Build a PAR1Panel; genes missing from `data` are absent."""
    if not data:
        return PAR1Panel()

    unknown = set(data) - set(PAR1_GENES)
    if unknown:
        raise InputValidationError(
            f"Unknown PAR1 gene(s): {sorted(unknown)}. Valid: {list(PAR1_GENES)}",
            field="par1_genes",
        )
    return PAR1Panel(**{
        gene: parse_marker_status(data.get(gene), gene) for gene in PAR1_GENES
    })


def record_from_mapping(data: Optional[Mapping[str, Any]]) -> StructuralMarkerRecord:
    """
    Build a StructuralMarkerRecord from a plain mapping.

    Missing flags default to False; unknown keys and non-boolean flag values
    are rejected.
    """
    if not data:
        return StructuralMarkerRecord()

    allowed = set(MARKER_FLAGS) | {"par1_genes"}
    unknown = set(data) - allowed
    if unknown:
        raise InputValidationError(
            f"Unknown marker field(s): {sorted(unknown)}",
            field="markers",
            details={"valid_fields": sorted(allowed)},
        )

    flags = {}
    for name in MARKER_FLAGS:
        value = data.get(name, False)
        if value is None:
            value = False
        if not isinstance(value, bool):
            raise InputValidationError(
                f"Marker flag {name} must be a boolean, got {value!r}",
                field=name,
            )
        flags[name] = value

    return StructuralMarkerRecord(
        par1_genes=par1_panel_from_mapping(data.get("par1_genes")),
        **flags,
    )

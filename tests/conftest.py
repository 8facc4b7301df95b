"""
Pytest Configuration and Fixtures

Shared fixtures for the risk classifier tests.
"""
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from allrisk.core.classification import (
    MarkerStatus, PAR1Panel, RiskClassificationEngine, StructuralMarkerRecord,
)


@pytest.fixture
def empty_record() -> StructuralMarkerRecord:
    """Record with every marker absent."""
    return StructuralMarkerRecord()


@pytest.fixture
def ikzf1_plus_record() -> StructuralMarkerRecord:
    """Typical IKZF1 PLUS: IKZF1 + PAX5 deletion, no ERG deletion."""
    return StructuralMarkerRecord(ikzf1_del=True, pax5_del=True)


@pytest.fixture
def par1_deleted_panel() -> PAR1Panel:
    """PAR1 panel with a P2RY8 deletion (P2RY8-CRLF2)."""
    return PAR1Panel(P2RY8=MarkerStatus.DELETED)


@pytest.fixture
def engine() -> RiskClassificationEngine:
    return RiskClassificationEngine()

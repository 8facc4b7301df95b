"""
Unit Tests for the Risk Classification Engine

Tests for combined classification, recommendations and summaries.
"""
import pytest

from allrisk.core.classification import (
    ClassificationReport, OutcomeStatus, RiskTier, StructuralMarkerRecord,
    classify_pathway, classify_structural,
)
from allrisk.core.classification.engine import build_recommendations
from allrisk.utils import InputValidationError


def _categories(recs):
    return [r.category for r in recs]


class TestClassify:
    """Tests for RiskClassificationEngine.classify."""

    def test_defaults_when_nothing_supplied(self, engine):
        report = engine.classify()

        assert isinstance(report, ClassificationReport)
        assert report.pathway.status == OutcomeStatus.NEGATIVE
        assert report.structural.rule_id == "DEFAULT"
        assert report.structural_matches == []

    def test_outcomes_match_direct_calls(self, engine, ikzf1_plus_record):
        report = engine.classify({"JAK2"}, ikzf1_plus_record)

        assert report.pathway == classify_pathway({"JAK2"})
        assert report.structural == classify_structural(ikzf1_plus_record)

    def test_structural_matches_listed(self, engine, ikzf1_plus_record):
        report = engine.classify(set(), ikzf1_plus_record)
        assert report.structural_matches == ["IKZF1-PLUS", "GEN-PR", "IKZF1-SIMPLE"]

    def test_engine_holds_no_state(self, engine, ikzf1_plus_record):
        first = engine.classify({"ABL1"}, ikzf1_plus_record)
        engine.classify(set(), StructuralMarkerRecord(etv6_del=True))
        again = engine.classify({"ABL1"}, ikzf1_plus_record)

        assert first == again

    def test_gene_symbols_normalised(self, engine):
        report = engine.classify([" abl1", "Jak2"])
        assert report.pathway.subtype == "ABL-class"

    def test_bare_string_genes_rejected(self, engine):
        with pytest.raises(InputValidationError):
            engine.classify("ABL1")

    def test_bare_string_rejected_by_pathway_method(self, engine):
        with pytest.raises(InputValidationError):
            engine.classify_pathway("NTRK")


class TestHighestRisk:
    """Tests for ClassificationReport.highest_risk."""

    def test_structural_tier_wins_when_worse(self, engine, ikzf1_plus_record):
        report = engine.classify({"ABL1"}, ikzf1_plus_record)
        assert report.highest_risk is RiskTier.HIGH

    def test_pathway_tier_wins_when_worse(self, engine):
        report = engine.classify({"JAK1"}, StructuralMarkerRecord(etv6_del=True))
        assert report.highest_risk is RiskTier.INTERMEDIATE_HIGH

    def test_summary_uses_report_value(self, engine):
        report = engine.classify(set(), StructuralMarkerRecord(iamp21=True))
        assert engine.summarise(report)["highest_risk"] == report.highest_risk.value


class TestRecommendations:
    """Tests for build_recommendations."""

    def test_abl_class_and_high_risk(self, ikzf1_plus_record):
        recs = build_recommendations(
            classify_pathway({"ABL1"}), classify_structural(ikzf1_plus_record),
        )

        assert _categories(recs) == ["targeted first-line", "pathway adjustment"]
        assert recs[0].title == "Dasatinib"
        assert "ABL-class" in recs[0].detail

    def test_other_pathway_escalates_without_targeted_line(self, empty_record):
        recs = build_recommendations(
            classify_pathway({"NTRK"}), classify_structural(empty_record),
        )
        assert _categories(recs) == ["pathway adjustment"]

    def test_high_structural_risk_escalates_alone(self):
        recs = build_recommendations(
            classify_pathway(set()), classify_structural(StructuralMarkerRecord(iamp21=True)),
        )
        assert _categories(recs) == ["pathway adjustment"]

    def test_nothing_found_keeps_standard_protocol(self, empty_record):
        recs = build_recommendations(classify_pathway(set()), classify_structural(empty_record))
        assert _categories(recs) == ["standard protocol"]

    def test_favorable_marker_keeps_standard_protocol(self):
        recs = build_recommendations(
            classify_pathway(set()), classify_structural(StructuralMarkerRecord(erg_del=True)),
        )
        assert _categories(recs) == ["standard protocol"]

    def test_gen_pr_without_pathway_hit_gives_no_advice(self):
        recs = build_recommendations(
            classify_pathway(set()), classify_structural(StructuralMarkerRecord(rb1_del=True)),
        )
        assert recs == []

    @pytest.mark.parametrize("marker", ["etv6_del", "erg_del", "dux4_rearrange"])
    def test_ph_like_positive_with_protective_lesion_is_not_standard(self, marker):
        recs = build_recommendations(
            classify_pathway({"ABL1"}),
            classify_structural(StructuralMarkerRecord(**{marker: True})),
        )
        assert _categories(recs) == ["targeted first-line", "pathway adjustment"]

    def test_other_pathway_with_protective_lesion_escalates_only(self):
        recs = build_recommendations(
            classify_pathway({"NTRK"}), classify_structural(StructuralMarkerRecord(erg_del=True)),
        )
        assert _categories(recs) == ["pathway adjustment"]


class TestSummary:
    """Tests for RiskClassificationEngine.summarise and rule introspection."""

    def test_summary_fields(self, engine, ikzf1_plus_record):
        summary = engine.summarise(engine.classify({"ABL1"}, ikzf1_plus_record))

        assert summary["ph_like"] == "positive"
        assert summary["ph_like_subtype"] == "ABL-class"
        assert summary["structural_label"] == "IKZF1 PLUS"
        assert summary["highest_risk"] == "high"
        assert summary["therapies"] == ["Dasatinib", "Intensified chemotherapy"]
        assert summary["report"]["pathway"]["rule_id"] == "PH-ABL"

    def test_therapies_without_structural_therapy(self, engine):
        summary = engine.summarise(engine.classify({"JAK2"}, StructuralMarkerRecord(etv6_del=True)))
        assert summary["therapies"] == ["Ruxolitinib"]
        assert "targeted_agents" not in summary

    def test_highest_risk_prefers_pathway_when_worse(self, engine):
        summary = engine.summarise(
            engine.classify({"JAK1"}, StructuralMarkerRecord(etv6_del=True))
        )
        assert summary["highest_risk"] == "intermediate/high"

    def test_rule_order_and_shadowed(self, engine):
        order = engine.rule_order()

        assert order[0] == {"rule_id": "IAMP21", "name": "iAMP21"}
        assert len(order) == 8
        assert engine.shadowed_rules() == ["IKZF1-BTG1", "IKZF1-SIMPLE"]

import pytest

from conftest import make_item
from confidence import (
    ClaimEvaluator,
    ConfidenceScorer,
    ContentAnalyzer,
    QualityBonusScorer,
    SourceScorer,
)
from models.claims import Claim, ClaimStatus
from models.confidence import ContentType, SourceBreakdown
from models.evidence import SourceCategory


def sources_of(*categories):
    return [
        make_item(f"Source {i}", f"https://example.org/{i}", category)
        for i, category in enumerate(categories)
    ]


class TestContentAnalyzer:
    def setup_method(self):
        self.analyzer = ContentAnalyzer()

    def test_factual(self):
        analysis = self.analyzer.analyze("Marie Curie a découvert le radium en 1898.")
        assert analysis.content_type == ContentType.FACTUAL
        assert not any([analysis.is_opinion, analysis.is_subjective,
                        analysis.is_comparative, analysis.is_speculative])

    def test_opinion_takes_precedence(self):
        analysis = self.analyzer.analyze("À mon avis, Paris est la plus belle ville du monde.")
        assert analysis.is_opinion
        assert analysis.is_subjective
        assert analysis.content_type == ContentType.OPINION
        assert analysis.content_type.value == "OPINION"

    def test_subjective_only(self):
        analysis = self.analyzer.analyze("Le château de Versailles est superbe.")
        assert not analysis.is_opinion
        assert analysis.content_type == ContentType.SUBJECTIVE
        assert analysis.content_type.value == "SUBJECTIF"

    def test_comparative(self):
        assert self.analyzer.is_comparative("Lyon est plus petite que Paris.")

    def test_speculative(self):
        assert self.analyzer.is_speculative("Il est probablement né en 1802.")

    def test_case_insensitive(self):
        assert self.analyzer.is_opinion("JE PENSE que oui")


class TestSourceScorer:
    def test_empty(self):
        score, breakdown = SourceScorer().score([])
        assert score == 0
        assert breakdown.total == 0

    def test_weights_per_category(self):
        score, breakdown = SourceScorer().score(sources_of(
            SourceCategory.ENCYCLOPEDIA,
            SourceCategory.ENCYCLOPEDIA,
            SourceCategory.DATABASE,
            SourceCategory.SEARCH_ENGINE,
            SourceCategory.ARCHIVE,
            SourceCategory.ACADEMIC,
            SourceCategory.REFERENCE,
        ))
        assert score == 12 * 2 + 15 + 8 + 10 + 18 + 8
        assert breakdown.encyclopedia == 2
        assert breakdown.reference == 1
        assert breakdown.total == 7


class TestQualityBonusScorer:
    @pytest.mark.parametrize("total,expected", [(0, 0), (1, 5), (2, 10), (3, 15), (5, 20), (6, 25), (10, 25)])
    def test_quantity_tiers(self, total, expected):
        breakdown = SourceBreakdown(search_engine=total, total=total)
        assert QualityBonusScorer().score(breakdown) == expected

    def test_diversity_bonus(self):
        breakdown = SourceBreakdown(encyclopedia=1, database=1, archive=1, total=3)
        assert QualityBonusScorer().score(breakdown) == 15 + 10

    def test_search_and_reference_do_not_count_for_diversity(self):
        breakdown = SourceBreakdown(encyclopedia=1, search_engine=1, reference=1, total=3)
        assert QualityBonusScorer().score(breakdown) == 15


class TestConfidenceScorer:
    def test_opinion_without_sources_hits_floor(self):
        report = ConfidenceScorer().compute_confidence(
            [Claim(text="À mon avis, Paris est la plus belle ville du monde")],
            [],
            "À mon avis, Paris est la plus belle ville du monde.",
        )
        assert report.final_score == pytest.approx(0.20)
        assert report.details.penalties == 30 + 20 + 25
        assert report.details.raw_score == 30 - 75
        assert report.content_analysis.content_type == ContentType.OPINION

    def test_capped_at_ninety(self):
        sources = sources_of(
            SourceCategory.ACADEMIC,
            SourceCategory.DATABASE,
            SourceCategory.ENCYCLOPEDIA,
            SourceCategory.ARCHIVE,
            SourceCategory.ACADEMIC,
            SourceCategory.DATABASE,
        )
        report = ConfidenceScorer().compute_confidence([], sources, "Le radium fut isolé en 1910.")
        # 30 + (18 + 15 + 12 + 10 + 18 + 15) + 25 + 10
        assert report.details.raw_score == 153
        assert report.details.final_percentage == 90
        assert report.final_score == pytest.approx(0.90)

    def test_breakdown_reported(self):
        report = ConfidenceScorer().compute_confidence(
            [], sources_of(SourceCategory.ENCYCLOPEDIA), "Le radium fut isolé en 1910."
        )
        assert report.details.source_breakdown.encyclopedia == 1
        assert report.details.base_score == 30
        assert report.details.source_score == 12
        assert report.details.quality_bonus == 5
        assert report.final_score == pytest.approx(0.47)


class TestClaimEvaluator:
    CLAIM = "Marie Curie a découvert le radium en 1898"

    def relevant_sources(self, n):
        return [
            make_item(f"Marie Curie {i}", f"https://example.org/{i}",
                      snippet="Marie Curie découvert le radium en 1898")
            for i in range(n)
        ]

    @pytest.mark.parametrize("n,confidence,status", [
        (0, 0.30, ClaimStatus.DISPUTED),
        (1, 0.40, ClaimStatus.UNCERTAIN),
        (2, 0.50, ClaimStatus.UNCERTAIN),
        (3, 0.60, ClaimStatus.PARTIALLY_VERIFIED),
        (4, 0.70, ClaimStatus.PARTIALLY_VERIFIED),
        (8, 0.70, ClaimStatus.PARTIALLY_VERIFIED),
    ])
    def test_tiers(self, n, confidence, status):
        verdict = ClaimEvaluator().evaluate(self.CLAIM, self.relevant_sources(n))
        assert verdict.relevant_sources == n
        assert verdict.confidence == pytest.approx(confidence)
        assert verdict.status == status

    def test_irrelevant_sources_not_counted(self):
        sources = [make_item("Tour Eiffel", "https://example.org/eiffel", snippet="Monument parisien")]
        assert ClaimEvaluator().count_relevant_sources(self.CLAIM, sources) == 0

    def test_status_thresholds(self):
        evaluator = ClaimEvaluator()
        assert evaluator.get_status(75) == ClaimStatus.VERIFIED
        assert evaluator.get_status(55) == ClaimStatus.PARTIALLY_VERIFIED
        assert evaluator.get_status(40) == ClaimStatus.UNCERTAIN
        assert evaluator.get_status(39) == ClaimStatus.DISPUTED

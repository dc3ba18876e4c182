import pytest

from conftest import FailingProvider, FakeProvider, make_item
from exceptions import ValidationException
from models.claims import Claim, ClaimStatus
from models.confidence import ContentType
from models.evidence import SourceCategory
from services import VerificationService
from services.orchestration import gather_evidence

TWO_CLAIMS = "Paris est la capitale de la France. Marie Curie a découvert le radium en 1898."


class TestGatherEvidence:
    @pytest.mark.asyncio
    async def test_every_provider_queried_per_claim(self, curie_providers):
        claims = [Claim(text="Paris est la capitale de la France"),
                  Claim(text="Marie Curie a découvert le radium en 1898")]

        evidence = await gather_evidence(claims, curie_providers)

        for provider in curie_providers:
            assert provider.queries == [c.text for c in claims]
        # academic item first: results are merged in dispatch order
        assert [e.title for e in evidence] == [
            "PubMed: Recherches scientifiques sur Marie",
            "Wikipedia (FR): Marie Curie",
            "Wikipedia (EN): Radium",
        ]

    @pytest.mark.asyncio
    async def test_failing_provider_is_isolated(self, curie_providers):
        claims = [Claim(text="Marie Curie a découvert le radium en 1898")]
        evidence = await gather_evidence(claims, [FailingProvider()] + curie_providers)
        assert len(evidence) == 3

    @pytest.mark.asyncio
    async def test_no_claims(self, curie_providers):
        assert await gather_evidence([], curie_providers) == []


class TestFactCheck:
    @pytest.mark.asyncio
    async def test_two_claims_with_mocked_evidence(self, curie_providers):
        service = VerificationService(providers=curie_providers)

        result = await service.fact_check(TWO_CLAIMS)

        paris, curie = result.claims
        assert paris.text == "Paris est la capitale de la France"
        assert paris.relevant_sources == 0
        assert 0.20 <= paris.confidence <= 0.30
        assert paris.status == ClaimStatus.DISPUTED

        assert curie.relevant_sources >= 2
        assert curie.confidence >= 0.55
        assert curie.status in (ClaimStatus.PARTIALLY_VERIFIED, ClaimStatus.VERIFIED)

        assert len(result.sources) == 3
        assert result.sources[0].source_category == SourceCategory.ACADEMIC
        # 30 + (18 + 12 + 12) + 15
        assert result.scoring_details.raw_score == 87
        assert result.overall_confidence == pytest.approx(0.87)
        assert result.content_analysis.content_type == ContentType.FACTUAL

    @pytest.mark.asyncio
    async def test_opinion_without_sources(self):
        service = VerificationService(providers=[])

        result = await service.fact_check("À mon avis, Paris est la plus belle ville du monde.")

        assert result.overall_confidence == pytest.approx(0.20)
        assert result.content_analysis.content_type == ContentType.OPINION
        assert result.sources == []
        assert len(result.claims) == 1

    @pytest.mark.asyncio
    async def test_all_providers_failing(self):
        service = VerificationService(providers=[FailingProvider()])

        result = await service.fact_check(TWO_CLAIMS)

        assert result.sources == []
        assert result.scoring_details.source_breakdown.total == 0
        assert all(c.status == ClaimStatus.DISPUTED for c in result.claims)

    @pytest.mark.asyncio
    async def test_text_without_claims(self):
        result = await VerificationService(providers=[]).fact_check("Oui. Non.")
        assert result.claims == []
        assert result.sources == []
        assert result.overall_confidence == pytest.approx(0.20)

    @pytest.mark.asyncio
    async def test_same_input_same_result(self, curie_providers):
        service = VerificationService(providers=curie_providers)
        first = await service.fact_check(TWO_CLAIMS)
        second = await service.fact_check(TWO_CLAIMS)
        assert first == second

    @pytest.mark.asyncio
    async def test_non_string_input(self):
        with pytest.raises(TypeError):
            await VerificationService(providers=[]).fact_check(None)

    @pytest.mark.asyncio
    async def test_sources_capped_at_ten(self):
        items = [make_item(f"Article {i}", f"https://example.org/{i}", snippet="Marie Curie radium 1898")
                 for i in range(15)]
        service = VerificationService(providers=[
            FakeProvider("wikipedia", SourceCategory.ENCYCLOPEDIA, 0.82, items),
        ])

        result = await service.fact_check("Marie Curie a découvert le radium en 1898.")

        assert len(result.sources) == 10
        assert result.claims[0].relevant_sources == 10
        assert result.claims[0].status == ClaimStatus.PARTIALLY_VERIFIED


class TestSearchSource:
    @pytest.mark.asyncio
    async def test_known_source(self, curie_providers):
        service = VerificationService(providers=curie_providers)
        results = await service.search_source("pubmed", "Marie Curie")
        assert len(results) == 1

    @pytest.mark.asyncio
    async def test_unknown_source(self, curie_providers):
        service = VerificationService(providers=curie_providers)
        with pytest.raises(ValidationException):
            await service.search_source("google", "Marie Curie")

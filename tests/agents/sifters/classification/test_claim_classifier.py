"""Tests for ClaimClassifier.

Tests cover:
- Status vote (single status, mixed, ties, no votes)
- Confidence extraction (explicit numbers, ladder, default)
- Red flags (few sources, phrase groups, suspicious hosts)
- Supporting points (reliable sources, text signals, redirect links)
- Combined analyze()
"""

from urllib.parse import quote

import pytest

from factcheck_system.agents.sifters.classification.claim_classifier import ClaimClassifier
from factcheck_system.config.classification_patterns import (
    FEW_SOURCES_FLAG,
    STATUS_TIE_BREAK_ORDER,
)
from factcheck_system.data_management.schemas import (
    ClaimAnalysis,
    ClaimStatus,
    SearchProvider,
    SourceRecord,
)


def make_source(url: str) -> SourceRecord:
    return SourceRecord(title="Resultado", url=url, origin=SearchProvider.DUCKDUCKGO)


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture
def classifier() -> ClaimClassifier:
    return ClaimClassifier()


@pytest.fixture
def reliable_sources() -> list[SourceRecord]:
    return [
        make_source("https://g1.globo.com/a"),
        make_source("https://www.reuters.com/b"),
    ]


# ── Status Tests ─────────────────────────────────────────────────────────


class TestExtractStatus:
    def test_false_claim(self, classifier):
        """A plain "falso" verdict without hedging is FALSE."""
        text = "A afirmação é falso segundo os checadores."
        assert classifier.extract_status(text) == ClaimStatus.FALSE

    def test_partially_true_outweighs_true(self, classifier):
        text = "A afirmação é verdadeira, mas apenas parcialmente."
        assert classifier.extract_status(text) == ClaimStatus.PARTIALLY_TRUE

    def test_true_claim(self, classifier):
        text = "Sim, é verdade: o dado está correto e foi confirmado pelo IBGE."
        assert classifier.extract_status(text) == ClaimStatus.TRUE

    def test_no_votes_is_insufficient_data(self, classifier):
        assert classifier.extract_status("Não há dados sobre isso.") == ClaimStatus.INSUFFICIENT_DATA

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text_is_insufficient_data(self, classifier, text):
        assert classifier.extract_status(text) == ClaimStatus.INSUFFICIENT_DATA

    def test_case_insensitive(self, classifier):
        assert classifier.extract_status("FALSO!") == ClaimStatus.FALSE

    def test_tie_uses_default_order(self, classifier):
        text = "A primeira parte é correta, a segunda é incorreta."
        votes = classifier.count_status_votes(text)

        assert votes[ClaimStatus.TRUE] == votes[ClaimStatus.FALSE] == 1
        assert classifier.extract_status(text) == ClaimStatus.FALSE

    def test_tie_uses_custom_order(self):
        classifier = ClaimClassifier(
            tie_break_order=(ClaimStatus.TRUE, ClaimStatus.FALSE, ClaimStatus.PARTIALLY_TRUE)
        )
        text = "A primeira parte é correta, a segunda é incorreta."
        assert classifier.extract_status(text) == ClaimStatus.TRUE

    def test_default_tie_order_is_conservative(self):
        assert STATUS_TIE_BREAK_ORDER[0] == ClaimStatus.PARTIALLY_TRUE
        assert STATUS_TIE_BREAK_ORDER[-1] == ClaimStatus.TRUE

    def test_incomplete_tie_order_rejected(self):
        with pytest.raises(ValueError):
            ClaimClassifier(tie_break_order=(ClaimStatus.TRUE, ClaimStatus.FALSE))

    def test_every_match_counts(self, classifier):
        votes = classifier.count_status_votes("O boato é falso e enganoso.")
        # "falso" matches two patterns, "enganoso" one
        assert votes[ClaimStatus.FALSE] == 3
        assert votes[ClaimStatus.TRUE] == 0

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "falso verdadeiro parcial", "🚩🚩🚩", "x" * 10_000],
    )
    def test_status_is_always_a_member(self, classifier, text):
        assert classifier.extract_status(text) in set(ClaimStatus)


# ── Confidence Tests ─────────────────────────────────────────────────────


class TestExtractConfidence:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Confiança: 85%", 85),
            ("confidence: 42", 42),
            ("Certeza: 70%", 70),
            ("Tenho 90% de confiança nisso.", 90),
            ("Confiança: 0%", 0),
        ],
    )
    def test_explicit_numbers(self, classifier, text, expected):
        assert classifier.extract_confidence(text) == expected

    def test_explicit_number_clamped(self, classifier):
        assert classifier.extract_confidence("Confiança: 150%") == 100

    def test_first_explicit_match_wins(self, classifier):
        assert classifier.extract_confidence("Confiança: 20%. Confiança: 80%.") == 20

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("É muito provável que seja verdade.", 85),
            ("Há consenso científico sobre o tema.", 85),
            ("É provável que seja verdade.", 70),
            ("A fonte é confiável.", 70),
            ("Possivelmente correto.", 50),
            ("É improvável.", 30),
            ("Isso é altamente improvável.", 15),
            ("O boato foi desmentido.", 15),
        ],
    )
    def test_ladder(self, classifier, text, expected):
        assert classifier.extract_confidence(text) == expected

    def test_improvavel_is_not_provavel(self, classifier):
        assert classifier.extract_confidence("improvável") == 30

    def test_explicit_number_beats_ladder(self, classifier):
        assert classifier.extract_confidence("Muito provável. Confiança: 60%") == 60

    @pytest.mark.parametrize("text", ["", None, "Nada a declarar."])
    def test_default(self, classifier, text):
        assert classifier.extract_confidence(text) == 50


# ── Red Flag Tests ───────────────────────────────────────────────────────


class TestIdentifyRedFlags:
    def test_few_sources(self, classifier):
        assert classifier.identify_red_flags("", []) == [FEW_SOURCES_FLAG]

    def test_enough_clean_sources_no_flags(self, classifier, reliable_sources):
        assert classifier.identify_red_flags("Texto neutro.", reliable_sources) == []

    def test_phrase_groups(self, classifier, reliable_sources):
        text = "Uma fonte anônima disse. Compartilhe urgente!"
        assert classifier.identify_red_flags(text, reliable_sources) == [
            "🚩 Fontes não identificadas ou anônimas mencionadas",
            "🚩 Linguagem típica de desinformação viral",
        ]

    def test_phrases_are_case_insensitive(self, classifier, reliable_sources):
        flags = classifier.identify_red_flags("TEORIA DA CONSPIRAÇÃO", reliable_sources)
        assert flags == ["🚩 Possível teoria conspiratória"]

    def test_suspicious_sources(self, classifier):
        sources = [
            make_source("https://fake-news.tk/a"),
            make_source("https://g1.globo.com/b"),
            make_source("garbage"),
        ]
        flags = classifier.identify_red_flags("", sources)
        assert flags == ["🚩 2 fonte(s) de domínios questionáveis"]

    def test_flag_order(self, classifier):
        text = (
            "sem fonte; governo oculta; 100% eficaz; mídia esconde; cura definitiva"
        )
        flags = classifier.identify_red_flags(text, [make_source("https://hoax.ml/a")])

        assert flags[0] == FEW_SOURCES_FLAG
        assert flags[-1] == "🚩 1 fonte(s) de domínios questionáveis"
        assert len(flags) == 7


# ── Supporting Point Tests ───────────────────────────────────────────────


class TestIdentifySupportingPoints:
    def test_no_signals(self, classifier):
        assert classifier.identify_supporting_points("", []) == []

    def test_all_signals_in_order(self, classifier):
        text = (
            "Segundo especialistas, um estudo com 1200 participantes, revisado por pares, "
            "mostrou eficácia de 95%. Há consenso entre os órgãos."
        )
        points = classifier.identify_supporting_points(
            text, [make_source("https://who.int/a")]
        )

        assert points == [
            "✅ 1 fonte(s) de alta confiabilidade",
            "✅ Cita especialistas ou autoridades no assunto",
            "✅ Referencia estudos ou pesquisas",
            "✅ Indica consenso ou ampla aceitação",
            "✅ Menciona revisão por pares",
            "✅ Apresenta dados quantitativos específicos",
        ]

    def test_custom_reliable_domains(self):
        classifier = ClaimClassifier(reliable_domains=["example.com"])
        points = classifier.identify_supporting_points(
            "", [make_source("https://example.com/a"), make_source("https://g1.globo.com/b")]
        )
        assert points == ["✅ 1 fonte(s) de alta confiabilidade"]

    def test_duckduckgo_redirects_count_as_reliable(self, classifier):
        sources = [
            make_source(f"//duckduckgo.com/l/?uddg={quote(target, safe='')}&rut=abc")
            for target in (
                "https://g1.globo.com/a",
                "https://www.reuters.com/b",
                "https://www.who.int/c",
            )
        ]
        points = classifier.identify_supporting_points("", sources)
        assert points == ["✅ 3 fonte(s) de alta confiabilidade"]

    def test_duckduckgo_redirect_to_suspicious_host_is_flagged(self, classifier, reliable_sources):
        wrapped = make_source("//duckduckgo.com/l/?uddg=https%3A%2F%2Ffake-news.tk%2Fa&rut=abc")
        flags = classifier.identify_red_flags("", [*reliable_sources, wrapped])
        assert flags == ["🚩 1 fonte(s) de domínios questionáveis"]


# ── Combined Analysis Tests ──────────────────────────────────────────────


class TestAnalyze:
    def test_analyze_bundles_all_outputs(self, classifier, reliable_sources):
        text = "A afirmação é falsa. Confiança: 90%. Um estudo da Fiocruz desmente."
        result = classifier.analyze(text, reliable_sources)

        assert isinstance(result, ClaimAnalysis)
        assert result.status == ClaimStatus.FALSE
        assert result.confidence == 90
        assert result.red_flags == []
        assert "✅ 2 fonte(s) de alta confiabilidade" in result.supporting_points
        assert "✅ Referencia estudos ou pesquisas" in result.supporting_points

    def test_analyze_is_deterministic(self, classifier, reliable_sources):
        text = "Parcialmente verdadeiro, depende do contexto."
        assert classifier.analyze(text, reliable_sources) == classifier.analyze(
            text, reliable_sources
        )

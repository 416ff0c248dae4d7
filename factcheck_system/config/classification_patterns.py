"""Pattern tables for claim classification.

The classifier is rule-based. Everything it matches against lives here:

- STATUS_PATTERNS: ordered (status, regexes) table for the verdict vote
- STATUS_TIE_BREAK_ORDER: which status wins a tie at a non-zero maximum
- EXPLICIT_CONFIDENCE_PATTERNS: numeric confidence mentions
- CONFIDENCE_LADDER: qualitative fallback buckets, highest first
- RED_FLAG_PHRASES / SUPPORTING_PATTERNS: independent signal checks

Analysis texts are produced in Brazilian Portuguese by the prompts in
``factcheck_system.config.prompts``, so the vocabulary is Portuguese.
All regexes are compiled with re.IGNORECASE by the classifier.
"""

from typing import Tuple

from factcheck_system.data_management.schemas.verdict_schema import ClaimStatus

# Every match of every pattern counts one vote for its status.
# Overlap is intentional: "parcialmente" matches both PARTIALLY_TRUE
# patterns, which makes it outweigh a single unqualified "verdadeira".
STATUS_PATTERNS: Tuple[Tuple[ClaimStatus, Tuple[str, ...]], ...] = (
    (
        ClaimStatus.TRUE,
        (
            r"\b(verdadeiro|verdadeira|correto|correta|confirmado|confirmada)\b",
            r"\b(é verdade|está correto|comprovado)\b",
            r"\b(verdadeiro)",
        ),
    ),
    (
        ClaimStatus.FALSE,
        (
            r"\b(falso|falsa|incorreto|incorreta|mentira|fake|enganoso)\b",
            r"\b(não é verdade|está errado|desmentido)\b",
            r"\b(falso)",
        ),
    ),
    (
        ClaimStatus.PARTIALLY_TRUE,
        (
            r"\b(parcialmente|em parte|meio verdade|meia verdade)\b",
            r"\b(verdade em parte|contexto necessário|depende do contexto)\b",
            r"\b(parcial)",
        ),
    ),
)

# Hedged verdicts win ties: PARTIALLY_TRUE, then FALSE, then TRUE.
STATUS_TIE_BREAK_ORDER: Tuple[ClaimStatus, ...] = (
    ClaimStatus.PARTIALLY_TRUE,
    ClaimStatus.FALSE,
    ClaimStatus.TRUE,
)

# First pattern that matches wins; group 1 is the number.
EXPLICIT_CONFIDENCE_PATTERNS: Tuple[str, ...] = (
    r"confiança[:\s]+(\d+)%?",
    r"confidence[:\s]+(\d+)%?",
    r"certeza[:\s]+(\d+)%?",
    r"(\d+)%\s+de\s+(?:confiança|certeza)",
)

# (confidence, phrase regexes), checked top to bottom, first match wins.
# Phrases are word-bounded so "improvável" never counts as "provável".
CONFIDENCE_LADDER: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (
        85,
        (
            r"\bmuito provável\b",
            r"\baltamente confiável\b",
            r"\bconsenso científico\b",
            r"\bamplamente comprovado\b",
        ),
    ),
    (
        70,
        (
            r"\bprovável\b",
            r"\bconfiável\b",
            r"\bevidências suportam\b",
            r"\bbem documentado\b",
        ),
    ),
    (
        50,
        (
            r"\bpossivelmente\b",
            r"\bpode ser\b",
            r"\balguma evidência\b",
            r"\bindícios\b",
        ),
    ),
    (
        30,
        (
            r"(?<!altamente )\bimprovável\b",
            r"\bpouca evidência\b",
            r"\bnão confirmado\b",
            r"\bduvidoso\b",
        ),
    ),
    (
        15,
        (
            r"\baltamente improvável\b",
            r"\bsem evidências\b",
            r"\bdesmentido\b",
        ),
    ),
)

DEFAULT_CONFIDENCE: int = 50

MIN_SOURCES_FOR_CROSS_CHECK: int = 2

FEW_SOURCES_FLAG = "⚠️ Poucas fontes disponíveis para verificação cruzada"
SUSPICIOUS_SOURCES_FLAG = "🚩 {count} fonte(s) de domínios questionáveis"

# (flag, phrases): the flag fires when any phrase occurs in the lowercased text.
RED_FLAG_PHRASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "🚩 Fontes não identificadas ou anônimas mencionadas",
        ("sem fonte", "fonte desconhecida", "fonte anônima"),
    ),
    (
        "🚩 Possível teoria conspiratória",
        ("teoria da conspiração", "governo oculta", "eles não querem que você saiba"),
    ),
    (
        "🚩 Linguagem absoluta (raramente aplicável em fatos)",
        ("100% eficaz", "totalmente comprovado", "absolutamente certo"),
    ),
    (
        "🚩 Linguagem típica de desinformação viral",
        ("compartilhe urgente", "não deixe apagar", "mídia esconde", "a verdade que"),
    ),
    (
        "🚩 Promessas de curas milagrosas",
        ("remédio milagroso", "cura definitiva", "médicos odeiam"),
    ),
)

RELIABLE_SOURCES_POINT = "✅ {count} fonte(s) de alta confiabilidade"

# (point, regex): the point fires when the regex matches anywhere in the text.
SUPPORTING_PATTERNS: Tuple[Tuple[str, str], ...] = (
    (
        "✅ Cita especialistas ou autoridades no assunto",
        r"especialista|pesquisador|cientista|professor|doutor",
    ),
    (
        "✅ Referencia estudos ou pesquisas",
        r"estudo|pesquisa|análise|investigação|paper|artigo científico",
    ),
    (
        "✅ Indica consenso ou ampla aceitação",
        r"consenso|amplamente aceito|comprovado|bem estabelecido",
    ),
    (
        "✅ Menciona revisão por pares",
        r"peer.?review|revisado por pares|revisão por pares",
    ),
    (
        "✅ Apresenta dados quantitativos específicos",
        r"\d+%|\d+ participantes|amostra de \d+",
    ),
)


__all__ = [
    "STATUS_PATTERNS",
    "STATUS_TIE_BREAK_ORDER",
    "EXPLICIT_CONFIDENCE_PATTERNS",
    "CONFIDENCE_LADDER",
    "DEFAULT_CONFIDENCE",
    "MIN_SOURCES_FOR_CROSS_CHECK",
    "FEW_SOURCES_FLAG",
    "SUSPICIOUS_SOURCES_FLAG",
    "RED_FLAG_PHRASES",
    "RELIABLE_SOURCES_POINT",
    "SUPPORTING_PATTERNS",
]

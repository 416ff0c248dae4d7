"""Source reliability configuration for source scoring and red-flag detection.

Two fixed tables:
1. RELIABLE_DOMAINS: hosts treated as higher-trust evidence. A source is
   reliable when its hostname contains one of these entries (substring
   match, so "g1.globo.com" also covers "www.g1.globo.com").
2. SUSPICIOUS_HOST_PATTERNS: regexes over the hostname that mark a source
   as questionable.

Scoring weights for the source quality report live here too so the scorer
and its tests read the same numbers.
"""

from typing import Dict, Tuple

RELIABLE_DOMAINS: Tuple[str, ...] = (
    # Brazilian news outlets
    "g1.globo.com",
    "folha.uol.com.br",
    "estadao.com.br",
    "valor.globo.com",
    "exame.com",
    "bbc.com",
    "uol.com.br",
    "oglobo.globo.com",

    # Brazilian fact-checkers
    "aosfatos.org",
    "lupa.uol.com.br",
    "boatos.org",
    "e-farsas.com",
    "comprova.com.br",

    # Government and education
    "gov.br",
    "edu.br",
    "fiocruz.br",
    "anvisa.gov.br",
    "saude.gov.br",

    # International health bodies
    "who.int",
    "cdc.gov",
    "nih.gov",

    # International press
    "reuters.com",
    "apnews.com",
    "bbc.co.uk",
    "theguardian.com",
    "nytimes.com",

    # International fact-checkers
    "factcheck.org",
    "snopes.com",
    "politifact.com",
    "fullfact.org",

    # Scientific publishers and indexes
    "nature.com",
    "science.org",
    "sciencedirect.com",
    "pubmed.ncbi.nlm.nih.gov",
)

SUSPICIOUS_HOST_PATTERNS: Tuple[str, ...] = (
    r"\d{4,}",        # long digit runs
    r"-news\.",
    r"-noticias\.",
    r"\.tk$",         # free TLDs common in spam
    r"\.ml$",
    r"\.ga$",
    r"fake",
    r"hoax",
    r"clickbait",
)

# Count-based base score: (minimum source count, points), highest first
SOURCE_COUNT_SCORES: Tuple[Tuple[int, int], ...] = (
    (3, 30),
    (2, 20),
    (1, 10),
)

QUALITY_WEIGHTS: Dict[str, int] = {
    "reliable_source": 15,    # per reliable source
    "fully_diverse": 20,      # every source on its own host
    "partially_diverse": 10,  # more than one host, with repeats
}

MAX_QUALITY_SCORE: int = 100

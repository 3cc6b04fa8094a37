from decimal import Decimal, ROUND_HALF_UP
from functools import lru_cache
from typing import Callable, Dict, List, Optional

from nltk.stem import PorterStemmer

from resume_match.models.engine_settings import MatchSettings
from resume_match.models.models import KeywordSet, MatchOutcome

_stemmer = PorterStemmer()


@lru_cache(maxsize=4096)
def stem_key(term: str) -> str:
    """Stem every word of a term so "managing teams" and "manage team" compare equal."""
    return " ".join(_stemmer.stem(w) for w in term.split())


def exact_key(term: str) -> str:
    return term


def key_function(settings: MatchSettings = None) -> Callable[[str], str]:
    settings = settings or MatchSettings()
    return stem_key if settings.enable_stemming else exact_key


def weighted_skill_coverage(jd_terms: KeywordSet, resume_terms: KeywordSet,
                            key: Callable[[str], str] = exact_key) -> float:
    """Share of the job-description weight carried by terms the resume also has."""
    total = jd_terms.total_weight
    if total <= 0:
        return 0.0
    resume_keys = {key(t) for t in resume_terms.terms}
    covered = sum(w for t, w in jd_terms.weights.items() if key(t) in resume_keys)
    return covered / total


def to_score(coverage: float, missed: int) -> int:
    """Coverage 0..1 to an integer score.

    Rounds half-up, then keeps 100 for a complete match only.
    """
    score = int(Decimal(str(coverage * 100)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    score = max(0, min(100, score))
    if missed and score == 100:
        score = 99
    return score


def match(resume_terms: KeywordSet, jd_terms: KeywordSet,
          settings: Optional[MatchSettings] = None) -> MatchOutcome:
    """Split the job-description terms into matching and missing and score the overlap."""
    if not len(jd_terms):
        return MatchOutcome(matching=[], missing=[], score=0)

    key = key_function(settings)
    resume_keys = {key(t) for t in resume_terms.terms}

    matching: List[str] = []
    missing: List[str] = []
    for term, _ in jd_terms.ranked():
        (matching if key(term) in resume_keys else missing).append(term)

    coverage = weighted_skill_coverage(jd_terms, resume_terms, key)
    return MatchOutcome(
        matching=matching,
        missing=missing,
        score=to_score(coverage, len(missing)),
    )


def coverage_breakdown(jd_terms: KeywordSet, outcome: MatchOutcome) -> Dict[str, float]:
    """Weighted totals behind a score, for logging."""
    overlap = sum(jd_terms.weight(t) for t in outcome.matching)
    return {"weighted_overlap": overlap, "weighted_total": jd_terms.total_weight}

"""Deterministic keyword extraction.

No model or network involved: multi-word phrases from the configured
dictionary are matched first (longest first, then masked out), the rest of the
text is split into word tokens, stopwords and short tokens are dropped, and
every surviving term is weighted by how often it occurs. A phrase never
weighs less than any of its own words would have without the phrase
dictionary.
"""

import re
from collections import Counter
from functools import lru_cache
from typing import Optional, Tuple

from resume_match.models.engine_settings import KeywordSettings
from resume_match.models.models import ExtractedText, KeywordSet

# A term boundary is anything that cannot be part of a token
_BOUNDARY = r"[\w+#]"

# Tokens keep internal '+', '#', '.', '-' (c++, c#, node.js, scikit-learn); '/' splits
_TOKEN = re.compile(r"\w[\w+#.\-]*")


def _phrase_pattern(phrases: Tuple[str, ...]) -> Optional[re.Pattern]:
    if not phrases:
        return None
    # alternation order decides which phrase wins at a position, so longest first
    ordered = sorted(phrases, key=lambda p: (-len(p), p))
    body = "|".join(re.escape(p).replace(r"\ ", r"\s+") for p in ordered)
    return re.compile(rf"(?<!{_BOUNDARY})(?:{body})(?!{_BOUNDARY})")


class KeywordExtractor:
    """Compiled extractor for one KeywordSettings; safe to share between threads."""

    def __init__(self, settings: KeywordSettings = None):
        self.settings = settings or KeywordSettings()
        self._phrases = _phrase_pattern(self.settings.phrases)

    def _keep(self, token: str) -> bool:
        s = self.settings
        if len(token) < s.min_token_length:
            return False
        if token in s.stopwords:
            return False
        if s.drop_numeric_tokens and not any(ch.isalpha() for ch in token):
            return False
        return True

    def count_phrases(self, text: str) -> Tuple[Counter, str]:
        """Count phrase occurrences and return the text with them masked out."""
        counts: Counter = Counter()
        if self._phrases is None:
            return counts, text

        def _mask(m: re.Match) -> str:
            counts[" ".join(m.group(0).split())] += 1
            return " "

        return counts, self._phrases.sub(_mask, text)

    def tokenize(self, text: str) -> Counter:
        counts: Counter = Counter()
        for m in _TOKEN.finditer(text):
            token = m.group(0).rstrip(".-")
            if token and self._keep(token):
                counts[token] += 1
        return counts

    def extract(self, text: ExtractedText) -> KeywordSet:
        phrase_counts, remainder = self.count_phrases(text.text)
        weights = {term: float(n) for term, n in self.tokenize(remainder).items()}
        if phrase_counts:
            # what each word would have weighed with no phrase dictionary
            unmasked = self.tokenize(text.text)
            for phrase, n in phrase_counts.items():
                base = max([n] + [unmasked[w] for w in self.tokenize(phrase)])
                weights[phrase] = weights.get(phrase, 0.0) + base * self.settings.phrase_weight
        return KeywordSet(weights=weights)


@lru_cache(maxsize=8)
def get_extractor(settings: KeywordSettings = None) -> KeywordExtractor:
    return KeywordExtractor(settings)


def extract_keywords(text: ExtractedText, settings: KeywordSettings = None) -> KeywordSet:
    return get_extractor(settings).extract(text)

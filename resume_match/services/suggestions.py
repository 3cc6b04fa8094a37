from typing import Sequence

from resume_match.helpers.templates import (
    MISSING_HEADER,
    MISSING_ITEM,
    MODERATE_GAP_MESSAGE,
    MORE_MISSING,
    NO_GAPS_MESSAGE,
    SIGNIFICANT_GAP_MESSAGE,
    STRONG_MATCH_MESSAGE,
)
from resume_match.models.engine_settings import SuggestionSettings


def tone_message(score: int, settings: SuggestionSettings) -> str:
    if score >= settings.strong_match_min:
        return STRONG_MATCH_MESSAGE.format(score=score)
    if score >= settings.moderate_match_min:
        return MODERATE_GAP_MESSAGE.format(score=score)
    return SIGNIFICANT_GAP_MESSAGE.format(score=score)


def generate_suggestions(missing: Sequence[str], score: int,
                         settings: SuggestionSettings = None) -> str:
    """Template-driven improvement guidance.

    `missing` must already be in report order (descending weight, then term);
    the first `top_n` entries are itemized.
    """
    settings = settings or SuggestionSettings()
    if not missing:
        return NO_GAPS_MESSAGE

    lines = [tone_message(score, settings)]
    shown = list(missing[:settings.top_n])
    if shown:
        lines.append("")
        lines.append(MISSING_HEADER)
        lines.extend(MISSING_ITEM.format(rank=i, term=term) for i, term in enumerate(shown, start=1))

    remaining = len(missing) - len(shown)
    if remaining > 0:
        lines.append(MORE_MISSING.format(count=remaining, plural="" if remaining == 1 else "s"))
    return "\n".join(lines)

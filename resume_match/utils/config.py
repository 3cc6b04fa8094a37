import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv

from resume_match.models.engine_settings import (
    EngineSettings,
    KeywordSettings,
    MatchSettings,
    SuggestionSettings,
    UploadSettings,
)
from resume_match.utils.exceptions import ConfigurationError
from resume_match.utils.logging_config import get_logger

load_dotenv()
logger = get_logger(__name__)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

_TRUE = {"1", "true", "yes", "on"}


def read_word_list(path: str) -> List[str]:
    """One entry per line; blank lines and '#' comments are ignored."""
    p = Path(path)
    if not p.is_file():
        raise ConfigurationError(f"Word list not found: {path}", config_key=str(p))
    lines = p.read_text(encoding="utf-8").splitlines()
    return [ln.split("#", 1)[0].strip() for ln in lines if ln.split("#", 1)[0].strip()]


def _env(name: str):
    value = os.getenv(name)
    return value if value not in (None, "") else None


def settings_from_env() -> EngineSettings:
    """Build EngineSettings from environment variables, keeping defaults for unset ones."""
    keyword_opts: Dict[str, Any] = {}
    if _env("STOPWORDS_FILE"):
        keyword_opts["stopwords"] = read_word_list(_env("STOPWORDS_FILE"))
    if _env("PHRASES_FILE"):
        keyword_opts["phrases"] = read_word_list(_env("PHRASES_FILE"))
    if _env("MIN_TOKEN_LENGTH"):
        keyword_opts["min_token_length"] = _env("MIN_TOKEN_LENGTH")
    if _env("PHRASE_WEIGHT"):
        keyword_opts["phrase_weight"] = _env("PHRASE_WEIGHT")
    if _env("DROP_NUMERIC_TOKENS"):
        keyword_opts["drop_numeric_tokens"] = _env("DROP_NUMERIC_TOKENS").lower() in _TRUE

    match_opts: Dict[str, Any] = {}
    if _env("ENABLE_STEMMING"):
        match_opts["enable_stemming"] = _env("ENABLE_STEMMING").lower() in _TRUE

    suggestion_opts: Dict[str, Any] = {}
    if _env("SUGGESTION_TOP_N"):
        suggestion_opts["top_n"] = _env("SUGGESTION_TOP_N")
    if _env("STRONG_MATCH_MIN"):
        suggestion_opts["strong_match_min"] = _env("STRONG_MATCH_MIN")
    if _env("MODERATE_MATCH_MIN"):
        suggestion_opts["moderate_match_min"] = _env("MODERATE_MATCH_MIN")

    upload_opts: Dict[str, Any] = {}
    if _env("MAX_UPLOAD_SIZE_MB"):
        upload_opts["max_upload_size_mb"] = _env("MAX_UPLOAD_SIZE_MB")

    try:
        return EngineSettings(
            keywords=KeywordSettings(**keyword_opts),
            matching=MatchSettings(**match_opts),
            suggestions=SuggestionSettings(**suggestion_opts),
            upload=UploadSettings(**upload_opts),
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid engine configuration: {e}", cause=e) from e


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Process-wide settings, built once and never mutated afterwards."""
    settings = settings_from_env()
    logger.info(
        f"Engine settings loaded - stopwords: {len(settings.keywords.stopwords)}, "
        f"phrases: {len(settings.keywords.phrases)}, stemming: {settings.matching.enable_stemming}, "
        f"top_n: {settings.suggestions.top_n}"
    )
    return settings

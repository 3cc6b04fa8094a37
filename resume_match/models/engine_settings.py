"""
Engine Settings Models for Configuration Management
"""
from typing import FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from resume_match.helpers.vocabulary import (
    DEFAULT_PHRASES,
    DEFAULT_STOPWORDS,
    build_phrases,
    build_stopwords,
)


class KeywordSettings(BaseModel):
    """Keyword extraction configuration"""
    model_config = ConfigDict(frozen=True)

    stopwords: FrozenSet[str] = Field(default=DEFAULT_STOPWORDS, description="Tokens dropped during extraction")
    phrases: Tuple[str, ...] = Field(default=DEFAULT_PHRASES, description="Multi-word terms matched before tokenizing")
    min_token_length: int = Field(default=2, ge=1, le=20, description="Shortest single token kept")
    phrase_weight: float = Field(default=1.0, ge=1.0, description="Multiplier applied to each phrase occurrence")
    drop_numeric_tokens: bool = Field(default=True, description="Drop tokens that contain no letters")

    @field_validator("stopwords", mode="before")
    @classmethod
    def normalize_stopwords(cls, v):
        return build_stopwords(v)

    @field_validator("phrases", mode="before")
    @classmethod
    def normalize_phrases(cls, v):
        return build_phrases(v)


class MatchSettings(BaseModel):
    """Matcher configuration"""
    model_config = ConfigDict(frozen=True)

    enable_stemming: bool = Field(default=False, description="Compare terms by Porter stem instead of exact form")


class SuggestionSettings(BaseModel):
    """Suggestion generator configuration"""
    model_config = ConfigDict(frozen=True)

    top_n: int = Field(default=5, ge=0, le=50, description="Missing keywords itemized in the suggestions")
    strong_match_min: int = Field(default=75, ge=0, le=100, description="Lowest score for the reinforcing message")
    moderate_match_min: int = Field(default=50, ge=0, le=100, description="Lowest score for the moderate-gap message")

    @model_validator(mode="after")
    def validate_thresholds(self):
        if self.moderate_match_min > self.strong_match_min:
            raise ValueError("moderate_match_min must not exceed strong_match_min")
        return self


class UploadSettings(BaseModel):
    """Document upload limits"""
    model_config = ConfigDict(frozen=True)

    max_upload_size_mb: float = Field(default=10, gt=0, le=100, description="Largest accepted document")

    @property
    def max_upload_bytes(self) -> int:
        return int(self.max_upload_size_mb * 1024 * 1024)


class EngineSettings(BaseModel):
    """Complete engine configuration"""
    model_config = ConfigDict(frozen=True)

    keywords: KeywordSettings = Field(default_factory=KeywordSettings)
    matching: MatchSettings = Field(default_factory=MatchSettings)
    suggestions: SuggestionSettings = Field(default_factory=SuggestionSettings)
    upload: UploadSettings = Field(default_factory=UploadSettings)

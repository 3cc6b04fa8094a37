# models/response.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MatchReport(BaseModel):
    """Analysis result. Field aliases are the wire contract consumed by the UI."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    score: int = Field(ge=0, le=100, strict=True)
    matching_keywords: List[str] = Field(alias="matchingKeywords")
    missing_keywords: List[str] = Field(alias="missingKeywords")
    suggestions: str = Field(min_length=1)

    @field_validator("missing_keywords")
    @classmethod
    def validate_disjoint(cls, v, info):
        overlap = set(v) & set(info.data.get("matching_keywords", []))
        if overlap:
            raise ValueError(f"Keywords cannot be both matching and missing: {sorted(overlap)}")
        return v

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

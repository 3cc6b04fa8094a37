from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Document(BaseModel):
    """Uploaded resume: raw bytes plus the declared media type."""
    model_config = ConfigDict(frozen=True)

    content: bytes
    media_type: Optional[str] = None
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


class ExtractedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


class KeywordSet(BaseModel):
    """Normalized terms with a positive weight each."""
    model_config = ConfigDict(frozen=True)

    weights: Dict[str, float] = Field(default_factory=dict)

    @field_validator("weights")
    @classmethod
    def validate_terms(cls, v):
        out: Dict[str, float] = {}
        for term, weight in v.items():
            key = " ".join(term.split())
            if not key:
                raise ValueError("Keyword terms must not be empty or whitespace-only")
            if key in out:
                raise ValueError(f'Duplicate keyword term after normalization: "{key}"')
            if weight <= 0:
                raise ValueError(f'Weight for term "{key}" must be positive')
            out[key] = float(weight)
        return out

    def __contains__(self, term: str) -> bool:
        return term in self.weights

    def __len__(self) -> int:
        return len(self.weights)

    @property
    def terms(self) -> frozenset:
        return frozenset(self.weights)

    @property
    def total_weight(self) -> float:
        return sum(self.weights.values())

    def weight(self, term: str) -> float:
        return self.weights.get(term, 0.0)

    def ranked(self) -> List[Tuple[str, float]]:
        """Terms by descending weight, ties broken alphabetically."""
        return sorted(self.weights.items(), key=lambda kv: (-kv[1], kv[0]))


class MatchOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    matching: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0, le=100)

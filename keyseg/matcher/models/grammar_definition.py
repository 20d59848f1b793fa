# Path: keyseg/matcher/models/grammar_definition.py
"""
Grammar Definition Model

Pydantic models representing grammar definitions loaded from YAML files.
A grammar declares keywords once and composes them into terms.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ...constants import (
    DEFAULT_ANY_MUST_MATCH,
    DEFAULT_KEYWORD_WEIGHT,
    DEFAULT_TERM_WEIGHT,
)
from .keyword import Occurrence


# =============================================================================
# KEYWORDS
# =============================================================================

class KeywordDefinition(BaseModel):
    """A named, pattern-matched segment type."""
    model_config = ConfigDict(extra="forbid")

    pattern: str = Field(
        min_length=1,
        description="Regular expression a segment must match entirely"
    )
    verify: Optional[str] = Field(
        default=None,
        description="Name of a registered verifier for extra acceptance checks"
    )
    weight: float = Field(
        default=DEFAULT_KEYWORD_WEIGHT,
        description="Weight of a segment matched by this keyword"
    )


# =============================================================================
# TERMS
# =============================================================================

class SlotDefinition(BaseModel):
    """A keyword reference at its position within a term."""
    model_config = ConfigDict(extra="forbid")

    keyword: str = Field(
        description="Name of a keyword declared in the grammar"
    )
    occurrence: Occurrence = Field(
        default=Occurrence.FIXED,
        description="How the keyword may occur (fixed, optional, exclusive)"
    )


class TermDefinition(BaseModel):
    """A category backed by one ordered keyword sequence."""
    model_config = ConfigDict(extra="forbid")

    separator: Optional[str] = Field(
        default=None,
        min_length=1,
        description="Regular expression splitting an input into tokens; "
                    "the loader default when omitted"
    )
    any_must_match: bool = Field(
        default=DEFAULT_ANY_MUST_MATCH,
        description="Reject an assignment in which no keyword is active"
    )
    weight: float = Field(
        default=DEFAULT_TERM_WEIGHT,
        description="Weight used to rank this term against others"
    )
    keywords: list[SlotDefinition] = Field(
        min_length=1,
        description="Keyword slots in declaration order"
    )

    @field_validator('keywords', mode='before')
    @classmethod
    def _expand_shorthand(cls, value: Any) -> Any:
        """Allow a bare keyword name as shorthand for a fixed slot."""
        if not isinstance(value, list):
            return value
        return [{'keyword': item} if isinstance(item, str) else item for item in value]


# =============================================================================
# GRAMMAR
# =============================================================================

class GrammarDefinition(BaseModel):
    """Keywords and the terms composed from them."""
    model_config = ConfigDict(extra="forbid")

    keywords: dict[str, KeywordDefinition] = Field(
        default_factory=dict,
        description="Keyword definitions by name"
    )
    terms: dict[str, TermDefinition] = Field(
        default_factory=dict,
        description="Term definitions by name, in declaration order"
    )

    @model_validator(mode='after')
    def _check_references(self) -> 'GrammarDefinition':
        for term_id, term in self.terms.items():
            seen = set()
            for slot in term.keywords:
                if slot.keyword not in self.keywords:
                    raise ValueError(
                        f"Term '{term_id}' references undeclared keyword '{slot.keyword}'"
                    )
                if slot.keyword in seen:
                    raise ValueError(
                        f"Term '{term_id}' declares keyword '{slot.keyword}' twice"
                    )
                seen.add(slot.keyword)
        return self


__all__ = [
    'KeywordDefinition',
    'SlotDefinition',
    'TermDefinition',
    'GrammarDefinition',
]

from __future__ import annotations

from pydantic import BaseModel, Field

from hospital_directory.domain.enums import Vocabulary


def vocabulary_pattern(vocabulary: type[Vocabulary]) -> str:
    """Case-insensitive regex accepting exactly the vocabulary's values."""
    return "(?i)^(" + "|".join(vocabulary.values()) + ")$"


class PaginationDTO(BaseModel):
    currentPage: int = Field(examples=[1])
    totalPages: int = Field(examples=[5])
    totalCount: int = Field(examples=[42])
    hasNext: bool = Field(examples=[True])
    hasPrev: bool = Field(examples=[False])


class MessageResponseDTO(BaseModel):
    message: str

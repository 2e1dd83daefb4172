from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from hospital_directory.domain.errors import FilterValidationError, ValidationError

T = TypeVar("T")

SORT_ASC = "asc"
SORT_DESC = "desc"

MEDICAL_TEST_SORT_FIELDS = frozenset(
    {"name", "test_category", "turnaround_time", "gender_specific", "fasting_required"}
)


@dataclass(frozen=True, slots=True)
class TextSearch:
    """
    Case-insensitive keyword match over several fields.

    A record matches when the term is a substring of any substring field OR
    equals (ignoring case) any element of any element field. No relevance
    score is computed.
    """

    term: str

    @classmethod
    def from_raw(cls, raw: str | None) -> TextSearch:
        """
        Raises:
            ValidationError: If the term is missing or blank
        """
        if raw is None or not raw.strip():
            raise ValidationError("Search term is required", field="q")
        return cls(term=raw.strip())

    @property
    def needle(self) -> str:
        return self.term.casefold()

    def matches(
        self,
        substring_fields: Iterable[str | None],
        element_fields: Iterable[Iterable[str]] = (),
    ) -> bool:
        needle = self.needle
        for text in substring_fields:
            if text and needle in text.casefold():
                return True
        for elements in element_fields:
            if any(element.casefold() == needle for element in elements):
                return True
        return False


@dataclass(frozen=True, slots=True)
class SortSpec:
    """Explicit ordering; ``name`` ascending is always the tie-breaker."""

    field: str = "name"
    descending: bool = False

    @classmethod
    def from_raw(
        cls,
        sort: str | None,
        order: str | None,
        allowed: frozenset[str] = MEDICAL_TEST_SORT_FIELDS,
    ) -> SortSpec:
        """
        Raises:
            FilterValidationError: If the sort field is not sortable
        """
        if not sort:
            return cls()
        field_name = sort.strip()
        if field_name not in allowed:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "sort",
                        "message": f"Must be one of {sorted(allowed)}",
                        "code": "INVALID_CHOICE",
                    }
                ]
            )
        return cls(field=field_name, descending=(order or "").strip().lower() == SORT_DESC)

    def apply(self, records: Sequence[T], key: Callable[[T, str], Any]) -> list[T]:
        """Sort in memory with a stable ``name`` ascending secondary order."""
        ordered = sorted(records, key=lambda record: _sort_key(key(record, "name")))
        if self.field == "name":
            return list(reversed(ordered)) if self.descending else ordered
        return sorted(
            ordered,
            key=lambda record: _sort_key(key(record, self.field)),
            reverse=self.descending,
        )


def _sort_key(value: Any) -> Any:
    if isinstance(value, str):
        return value.casefold()
    return value

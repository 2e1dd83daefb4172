from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import Decimal

from hospital_directory.domain.enums import Vocabulary
from hospital_directory.domain.errors import ValidationError

BANGLADESHI_PHONE = re.compile(r"^(\+880|880|0)?1[3-9]\d{8}$")
EMAIL = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")
HTTP_URL = re.compile(r"^https?://.+")


class FieldErrors:
    """
    Collects field-level failures so one ValidationError reports all of them.

    Each entry has the shape ``{"field", "message", "code"}`` used by the
    HTTP error responses.
    """

    def __init__(self) -> None:
        self._errors: list[dict[str, str]] = []

    def __bool__(self) -> bool:
        return bool(self._errors)

    def add(self, field: str, message: str, code: str = "INVALID_VALUE") -> None:
        self._errors.append({"field": field, "message": message, "code": code})

    def required(self, field: str, value: str | None, message: str) -> bool:
        if value is None or not value.strip():
            self.add(field, message, "REQUIRED")
            return False
        return True

    def max_length(self, field: str, value: str | None, limit: int, message: str) -> None:
        if value is not None and len(value) > limit:
            self.add(field, message, "TOO_LONG")

    def each_max_length(self, field: str, values: Iterable[str], limit: int, message: str) -> None:
        for value in values:
            if len(value) > limit:
                self.add(field, message, "TOO_LONG")
                return

    def pattern(self, field: str, value: str | None, regex: re.Pattern[str], message: str) -> None:
        if value and not regex.match(value):
            self.add(field, message, "INVALID_FORMAT")

    def member_of(self, field: str, value: str | None, vocabulary: type[Vocabulary]) -> None:
        if value and vocabulary.parse(value) is None:
            self.add(field, f"{value} is not supported", "INVALID_CHOICE")

    def each_member_of(
        self, field: str, values: Iterable[str], vocabulary: type[Vocabulary]
    ) -> None:
        for value in values:
            if vocabulary.parse(value) is None:
                self.add(field, f"{value} is not supported", "INVALID_CHOICE")

    def in_range(
        self,
        field: str,
        value: int | float | Decimal | None,
        minimum: int | float | Decimal | None,
        maximum: int | float | Decimal | None,
        message: str,
    ) -> None:
        if value is None:
            return
        if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
            self.add(field, message, "OUT_OF_RANGE")

    def raise_if_any(self) -> None:
        if self._errors:
            raise ValidationError(errors=list(self._errors))


def clean_list(values: Iterable[str] | None, lowercase: bool = False) -> tuple[str, ...]:
    """Trim list elements, drop empties, optionally lowercase."""
    if not values:
        return ()
    cleaned = (value.strip() for value in values)
    if lowercase:
        return tuple(value.lower() for value in cleaned if value)
    return tuple(value for value in cleaned if value)


def canonical_list(values: Iterable[str], vocabulary: type[Vocabulary]) -> tuple[str, ...]:
    """Replace vocabulary members with their canonical spelling; keep unknowns as-is."""
    result = []
    for value in values:
        member = vocabulary.parse(value)
        result.append(member.value if member is not None else value)
    return tuple(result)

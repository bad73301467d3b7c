"""
Form validation helpers.

Predicates are pure functions of their input.  A Validator collects the
messages of failed checks keyed by field name, plus form-level messages that
belong to no single field.  Checks never short-circuit: every check of a form
runs, so the user sees all problems at once.

    v = Validator()
    v.check_field(not_blank(title), "title", "This field cannot be blank")
    v.check_field(max_chars(title, 100), "title", "...")
    if not v.valid():
        ...
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


@dataclass
class Validator:
    field_errors: dict[str, str] = field(default_factory=dict)
    non_field_errors: list[str] = field(default_factory=list)

    def valid(self) -> bool:
        return not self.field_errors and not self.non_field_errors

    def add_field_error(self, key: str, message: str) -> None:
        # First failure per field wins
        self.field_errors.setdefault(key, message)

    def add_non_field_error(self, message: str) -> None:
        self.non_field_errors.append(message)

    def check_field(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_field_error(key, message)


# ── Predicates ────────────────────────────────────────────────────────────────

def not_blank(value: str | None) -> bool:
    return bool(value and value.strip())


def max_chars(value: str | None, n: int) -> bool:
    """True if value has at most n characters (not bytes)."""
    return len(value or "") <= n


def min_chars(value: str | None, n: int) -> bool:
    return len(value or "") >= n


def permitted_int_range(value: int | None, low: int, high: int) -> bool:
    """Inclusive range check.  A missing value is never in range."""
    if value is None or isinstance(value, bool):
        return False
    return low <= value <= high


def matches(value: str | None, pattern: re.Pattern) -> bool:
    return bool(pattern.match(value or ""))

"""Post Write Enforcement: the normalize -> validate pipeline run on every post write.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Normalization always runs before validation; run_post_pipeline is the only entry point
    - Fields absent from the input are never introduced (partial updates stay partial)
    - A title that fails the check is reported on the "title" field, never persisted
    - A stored title never exceeds TITLE_MAX_LENGTH, the width of posts.title

Design Decisions:
    - Ordering is explicit in run_post_pipeline instead of ORM event hooks
      (ADR: write path must be readable top to bottom)
    - Validation stays even under EVERY_WORD, where it cannot fail for letter-initial
      words: it is the stored-data invariant, normalization is only a convenience
    - Under CONVENTIONAL, minor words are left lowercase and then rejected by
      validation; that policy is opt-in and documented as such
"""

from dataclasses import dataclass, field
from typing import Any

from app.core.domain_types import TitleCasePolicy
from app.core.title_case import title_case, is_title_case


TITLE_CASE_MESSAGE = "Title must be in title case"
TITLE_MAX_LENGTH = 255
TITLE_TOO_LONG_MESSAGE = f"Title is too long (maximum is {TITLE_MAX_LENGTH} characters)"


@dataclass
class ValidationOutcome:
    """Normalized fields plus any field-level errors."""
    fields: dict[str, Any]
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def normalize_post_fields(
    fields: dict[str, Any], policy: TitleCasePolicy,
) -> dict[str, Any]:
    """Step 1: rewrite the title (if supplied) into title case."""
    normalized = dict(fields)
    title = normalized.get("title")
    if isinstance(title, str):
        normalized["title"] = title_case(title, policy)
    return normalized


def validate_post_fields(fields: dict[str, Any]) -> dict[str, list[str]]:
    """Step 2: check the normalized fields. Empty dict means valid."""
    errors: dict[str, list[str]] = {}
    title = fields.get("title")
    if not isinstance(title, str):
        return errors
    if not is_title_case(title):
        errors.setdefault("title", []).append(TITLE_CASE_MESSAGE)
    # Checked after casing, which can change the length ("ß" -> "SS")
    if len(title) > TITLE_MAX_LENGTH:
        errors.setdefault("title", []).append(TITLE_TOO_LONG_MESSAGE)
    return errors


def run_post_pipeline(
    fields: dict[str, Any], policy: TitleCasePolicy,
) -> ValidationOutcome:
    normalized = normalize_post_fields(fields, policy)
    return ValidationOutcome(normalized, validate_post_fields(normalized))

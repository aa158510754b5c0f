"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps the integer primary key of every persisted entity
    - No persisted RecordId is outside 1..MAX_RECORD_ID
    - All valid policy states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: settings and JSON responses serialize them without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)

# Upper bound of the INTEGER primary key columns
MAX_RECORD_ID = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class TitleCasePolicy(str, Enum):
    """How post titles are rewritten before the title-case check runs."""
    EVERY_WORD = "every_word"
    CONVENTIONAL = "conventional"

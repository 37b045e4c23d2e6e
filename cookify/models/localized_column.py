"""
JSON column codec for LocalizedText fields.

Each LocalizedText is stored as one JSON text column and each list of them as
one JSON array column. Decoding never raises: a corrupt historical row decodes
to the zero value so that a single bad row cannot break a whole listing.
"""

import logging
from typing import Any, Optional, Sequence

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import Text
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.types import TypeDecorator

from cookify.models.localized_text import LocalizedText

logger = logging.getLogger(__name__)

_list_adapter = TypeAdapter(list[LocalizedText])


def encode(value: LocalizedText | Sequence[LocalizedText]) -> str:
    """Serialize a pair or an ordered list of pairs to canonical JSON."""
    if isinstance(value, LocalizedText):
        return value.model_dump_json()
    if isinstance(value, (list, tuple)):
        return _list_adapter.dump_json(list(value)).decode("utf-8")
    raise TypeError(f"Cannot encode {type(value).__name__} as localized text")


def decode_text(raw: Optional[str | bytes]) -> LocalizedText:
    """Parse a stored pair, falling back to an empty pair on any malformation."""
    if not raw:
        return LocalizedText()
    try:
        value = LocalizedText.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Malformed localized text column, using default: %s", e)
        return LocalizedText()
    return value


def decode_list(raw: Optional[str | bytes]) -> list[LocalizedText]:
    """Parse a stored array of pairs, falling back to an empty list."""
    if not raw:
        return []
    try:
        return _list_adapter.validate_json(raw)
    except ValidationError as e:
        logger.warning("Malformed localized list column, using default: %s", e)
        return []


def list_equals(
    first: Optional[Sequence[LocalizedText]], second: Optional[Sequence[LocalizedText]]
) -> bool:
    """Ordered, pairwise equality. None only equals None."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    if len(first) != len(second):
        return False
    return all(a == b for a, b in zip(first, second))


def list_hash(items: Optional[Sequence[LocalizedText]]) -> int:
    """Order-sensitive hash over every (english, vietnamese) pair."""
    if items is None:
        return 0
    return hash(tuple((item.english, item.vietnamese) for item in items))


class LocalizedTextType(TypeDecorator):
    """Text column holding one JSON-encoded LocalizedText."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[str]:
        if value is None:
            return None
        return encode(value)

    def process_result_value(self, value: Any, dialect) -> LocalizedText:
        return decode_text(value)

    def compare_values(self, x: Any, y: Any) -> bool:
        return x == y


class LocalizedTextListType(TypeDecorator):
    """Text column holding a JSON array of LocalizedText, compared element-wise."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[str]:
        if value is None:
            return None
        return encode(list(value))

    def process_result_value(self, value: Any, dialect) -> list[LocalizedText]:
        return decode_list(value)

    def compare_values(self, x: Any, y: Any) -> bool:
        return list_equals(x, y)


def localized_list_column_type():
    """List column type that also tracks in-place edits (append, slice assign, del)."""
    return MutableList.as_mutable(LocalizedTextListType())

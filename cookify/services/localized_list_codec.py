"""
Conversion between a list of LocalizedText and two flat newline-separated
text blobs, one per language, as edited in the portal's text areas.

Line alignment is English-anchored: both blobs are split on newlines, lines
are paired by position, and a row whose English line is blank is dropped
together with its Vietnamese partner. Vietnamese lines past the last English
line are discarded. English is authoritative for the list shape.
"""

from typing import MutableSequence, Optional, Sequence

from cookify.models.localized_text import LocalizedText


def _split_lines(blob: Optional[str]) -> list[str]:
    """Trimmed lines of a blob, positions preserved. Empty blob gives no lines."""
    if not blob:
        return []
    return [line.strip() for line in blob.split("\n")]


def to_flat_text(items: Sequence[LocalizedText]) -> tuple[str, str]:
    """Join each language column with newlines, in list order."""
    english = "\n".join(item.english for item in items)
    vietnamese = "\n".join(item.vietnamese for item in items)
    return english, vietnamese


def from_flat_text(
    english_blob: Optional[str], vietnamese_blob: Optional[str]
) -> list[LocalizedText]:
    """Expand two blobs back into a list, aligned by line index."""
    english_lines = _split_lines(english_blob)
    vietnamese_lines = _split_lines(vietnamese_blob)

    result = []
    for index, english in enumerate(english_lines):
        if not english:
            continue
        vietnamese = vietnamese_lines[index] if index < len(vietnamese_lines) else ""
        result.append(LocalizedText(english=english, vietnamese=vietnamese))
    return result


def update_english_column(
    items: MutableSequence[LocalizedText], english_blob: Optional[str]
) -> list[int]:
    """
    Resize ``items`` in place to the number of non-blank English lines, then
    overwrite each entry's English text by index.

    New entries start empty; surplus entries are removed from the end.
    Existing Vietnamese values keep their index.

    Returns:
        The raw line positions of the kept English lines, for pairing the
        Vietnamese blob with ``update_vietnamese_column``.
    """
    positions = []
    lines = []
    for position, line in enumerate(_split_lines(english_blob)):
        if line:
            positions.append(position)
            lines.append(line)

    if len(items) > len(lines):
        del items[len(lines):]
    while len(items) < len(lines):
        items.append(LocalizedText())

    for index, line in enumerate(lines):
        items[index] = items[index].model_copy(update={"english": line})
    return positions


def update_vietnamese_column(
    items: MutableSequence[LocalizedText],
    vietnamese_blob: Optional[str],
    positions: Optional[Sequence[int]] = None,
) -> None:
    """
    Overwrite Vietnamese text by index for ``min(line_count, len(items))``
    entries. Never changes the list length; a blank line clears that entry.

    ``positions`` maps entries to raw line numbers, as returned by
    ``update_english_column``. Lines whose English partner was blank are then
    skipped, matching ``from_flat_text``.
    """
    lines = _split_lines(vietnamese_blob)
    if positions is not None:
        lines = [lines[position] for position in positions if position < len(lines)]
    for index in range(min(len(lines), len(items))):
        items[index] = items[index].model_copy(update={"vietnamese": lines[index]})

"""Plan edit batches against a document snapshot.

Every range in a batch is computed from the same pre-batch snapshot and the
operations are ordered so that applying them in sequence never shifts an
index a later operation relies on. Nothing here re-reads the document
between operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from extratext.exceptions import EmptyStyleError, TextNotFoundError
from extratext.operations import (
    DeleteRange,
    EditOperation,
    InsertText,
    TextRange,
    UpdateTextStyle,
)
from extratext.ranges import find_range
from extratext.styles import build_text_style

if TYPE_CHECKING:
    from extratext.indexer import LinearText
    from extratext.styles import StyleRequest

# Index of the first content position in a document body
DOCUMENT_START = 1


def plan_replace_all(end_index: int, new_text: str) -> list[EditOperation]:
    """Replace the whole body text with ``new_text``.

    Deletes everything up to, but not including, the trailing newline (which
    can never be deleted), then inserts the new text at the document start.
    The delete is emitted first: the insert index is only valid once the old
    content is gone. When the snapshot holds nothing but the trailing newline
    (end index 2) the delete range would be [1, 1), which the API rejects as
    empty, so no delete is emitted and the batch is just the insert.

    Args:
        end_index: Native endIndex of the snapshot (see ``linearize``)
        new_text: Replacement text
    """
    ops: list[EditOperation] = []
    delete_end = end_index - 1
    # The API rejects empty ranges; an end index of 2 means only the
    # trailing newline is left, so there is nothing to delete.
    if delete_end > DOCUMENT_START:
        ops.append(DeleteRange(TextRange(DOCUMENT_START, delete_end)))
    ops.append(InsertText(index=DOCUMENT_START, text=new_text))
    return ops


def plan_append(end_index: int, text: str) -> list[EditOperation]:
    """Append ``text`` as a new line at the end of the document.

    The text is inserted just before the trailing newline and always gets a
    leading newline, whatever the current content is.
    """
    index = max(end_index - 1, DOCUMENT_START)
    return [InsertText(index=index, text="\n" + text)]


def plan_restyle(
    linear: LinearText, needle: str, request: StyleRequest
) -> list[EditOperation]:
    """Apply ``request`` to the first occurrence of ``needle``.

    Raises:
        TextNotFoundError: If ``needle`` does not occur in the document
        EmptyStyleError: If ``request`` leaves no field to change
    """
    text_range = find_range(linear, needle)
    if text_range is None:
        raise TextNotFoundError(needle)

    update = build_text_style(request)
    if update is None:
        raise EmptyStyleError()

    return [UpdateTextStyle(range=text_range, style=update.style, fields=update.fields)]

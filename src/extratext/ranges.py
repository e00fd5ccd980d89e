"""Locate text in a linearized document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from extratext.operations import TextRange

if TYPE_CHECKING:
    from extratext.indexer import LinearText


def find_range(linear: LinearText, needle: str) -> TextRange | None:
    """Find the first occurrence of ``needle`` and return its native range.

    The search is literal and case-sensitive. Only the first occurrence is
    addressable; later repeats of the same text cannot be targeted.

    Args:
        linear: Linearized document text
        needle: Text to look for

    Returns:
        The native half-open range covering the match, or None when the
        needle is empty or does not occur
    """
    if not needle or not linear.text:
        return None

    flat_start = linear.text.find(needle)
    if flat_start == -1:
        return None

    return TextRange(
        start_index=linear.native_index(flat_start),
        end_index=linear.native_index(flat_start + len(needle)),
    )

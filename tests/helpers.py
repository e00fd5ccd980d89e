"""Document builders shared by the tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from extratext.api_types import Document

GOLDEN_DIR = Path(__file__).parent / "golden"


def load_golden(name: str) -> dict[str, Any]:
    data: dict[str, Any] = json.loads(
        (GOLDEN_DIR / f"{name}.json").read_text(encoding="utf-8")
    )
    return data


def plain_document(*paragraphs: str) -> Document:
    """Build a Document whose body holds the given paragraphs.

    Each paragraph is a single text run and gets a trailing newline. The
    body starts with a section break, as real documents do.
    """
    content: list[dict[str, Any]] = [{"endIndex": 1, "sectionBreak": {}}]
    cursor = 1
    for text in paragraphs:
        run = text + "\n"
        end = cursor + len(run)
        content.append(
            {
                "startIndex": cursor,
                "endIndex": end,
                "paragraph": {
                    "elements": [
                        {
                            "startIndex": cursor,
                            "endIndex": end,
                            "textRun": {"content": run},
                        }
                    ]
                },
            }
        )
        cursor = end
    return Document.model_validate({"documentId": "doc", "body": {"content": content}})

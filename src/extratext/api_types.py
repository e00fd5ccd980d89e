"""Google Docs API types used by extratext.

A subset of the Docs API v1 discovery schema, covering what is needed to
linearize a document body. Unknown fields are kept (``extra="allow"``) so a
snapshot parsed from a full API response loses nothing.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RgbColor(BaseModel):
    """An RGB color."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    red: float | None = Field(None)
    green: float | None = Field(None)
    blue: float | None = Field(None)


class TextRun(BaseModel):
    """A ParagraphElement that represents a run of text that all has the same styling."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    content: str | None = Field(None)


class ParagraphElement(BaseModel):
    """A ParagraphElement describes content within a Paragraph."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    start_index: int | None = Field(None, alias="startIndex")
    end_index: int | None = Field(None, alias="endIndex")
    text_run: TextRun | None = Field(None, alias="textRun")


class Paragraph(BaseModel):
    """A StructuralElement representing a paragraph. A paragraph is a range of content that's terminated with a newline character."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    elements: list[ParagraphElement] | None = Field(None)


class StructuralElement(BaseModel):
    """A StructuralElement describes content that provides structure to the document.

    Only paragraphs are modelled; section breaks, tables and tables of
    contents are kept as opaque dicts.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    start_index: int | None = Field(None, alias="startIndex")
    end_index: int | None = Field(None, alias="endIndex")
    paragraph: Paragraph | None = Field(None)
    section_break: dict | None = Field(None, alias="sectionBreak")
    table: dict | None = Field(None)
    table_of_contents: dict | None = Field(None, alias="tableOfContents")


class Body(BaseModel):
    """The document body."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    content: list[StructuralElement] | None = Field(None)


class Document(BaseModel):
    """A Google Docs document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    document_id: str | None = Field(None, alias="documentId")
    title: str | None = Field(None)
    revision_id: str | None = Field(None, alias="revisionId")
    body: Body | None = Field(None)

# docx_trimmer/api/models.py

from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from docx_trimmer.config.settings import settings


TOC_WARNING = (
    "Removing the section that holds the table of contents does not work "
    "reliably: its entries repeat the heading texts, so cuts may start in the "
    "wrong place. Remove the table of contents manually before trimming."
)


class ExportOptions(BaseModel):
    """
    What to export: which sections to drop and at which font size.
    """
    font_size: Optional[int] = Field(
        None,
        ge=settings.MIN_FONT_SIZE,
        le=settings.MAX_FONT_SIZE,
        description="Font size in points. Defaults to settings.DEFAULT_FONT_SIZE.",
    )
    without_sections: Optional[List[str]] = Field(
        None,
        description=(
            "Headings whose sections are removed, in removal order. "
            "When omitted the full text is exported."
        ),
    )

    @property
    def effective_font_size(self) -> int:
        return self.font_size if self.font_size is not None else settings.DEFAULT_FONT_SIZE

    @property
    def half_points(self) -> int:
        """Run size as stored in DOCX (w:sz is in half-points)."""
        return self.effective_font_size * 2


class DocumentSummary(BaseModel):
    """
    The currently loaded document, as shown next to the removal form.
    """
    headings: List[str] = Field(
        default_factory=list,
        description="Heading texts in document order.",
    )
    char_count: int = Field(..., ge=0, description="Length of the plain text.")
    toc_warning: str = Field(TOC_WARNING, description="Known limitation notice.")


class TextExport(BaseModel):
    """
    Trimmed plain text, for copying to the clipboard.
    """
    text: str = Field(..., description="Body text with the selected sections removed.")

from __future__ import annotations

import io
import logging
from typing import Optional, Sequence

from docx import Document
from docx.shared import Pt

from docx_trimmer.api.models import ExportOptions
from docx_trimmer.config.settings import settings
from docx_trimmer.models.document import TrimDocument
from docx_trimmer.sections.slicer import slice_sections

logger = logging.getLogger(__name__)


def select_body(
    document: TrimDocument,
    without_sections: Optional[Sequence[str]] = None,
) -> str:
    """
    Pick the text to export.

    Any list (even an empty one) goes through the slicer; ``None`` means
    the full plain text.
    """
    if without_sections is not None:
        return slice_sections(document, without_sections)
    return document.plain_text


def build_docx(text: str, font_size: Optional[int] = None):
    """
    Build a one-section, one-paragraph, one-run document holding ``text``.

    Nothing from the source document's styling is carried over and no
    paragraph breaks are introduced. ``font_size`` is in points; DOCX stores
    it as half-points, so 14pt is written as w:sz="28".
    """
    if font_size is None:
        font_size = settings.DEFAULT_FONT_SIZE

    doc = Document()
    paragraph = doc.add_paragraph()
    run = paragraph.add_run(text)
    run.font.size = Pt(font_size)
    return doc


def render_docx(document: TrimDocument, options: ExportOptions) -> bytes:
    """Serialize the trimmed document to DOCX bytes."""
    body = select_body(document, options.without_sections)
    doc = build_docx(body, options.effective_font_size)

    buffer = io.BytesIO()
    doc.save(buffer)
    data = buffer.getvalue()

    logger.info(
        "Rendered DOCX: %d chars of body, size %d half-points, %d bytes",
        len(body),
        options.half_points,
        len(data),
    )
    return data


def export_text(
    document: TrimDocument,
    without_sections: Optional[Sequence[str]] = None,
) -> str:
    """Text-only export, for the clipboard."""
    return select_body(document, without_sections)

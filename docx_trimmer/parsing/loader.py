from __future__ import annotations

import html as html_lib
import io
import logging
import re
from typing import Iterator, List, Optional, Tuple

from docx import Document
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from docx_trimmer.models.document import TrimDocument

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """
    Raised when text or structure cannot be extracted from a DOCX payload.

    The underlying error (bad zip archive, not a Word package, broken XML...)
    is available as ``__cause__``.
    """
    pass


# UTF-8 em-dash decoded as cp1252.
MISENCODED_EM_DASH = "â€”"

_HEADING_STYLE_RE = re.compile(r"^heading\s*([1-6])$", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")

_P = qn("w:p")
_R = qn("w:r")
_TBL = qn("w:tbl")
_SDT = qn("w:sdt")
_SDT_CONTENT = qn("w:sdtContent")
_CUSTOM_XML = qn("w:customXml")

# Paragraph children whose runs are not part of the visible text.
_SKIPPED_IN_PARAGRAPH = frozenset({qn("w:pPr"), qn("w:del"), qn("w:moveFrom")})


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _open(raw: bytes):
    return Document(io.BytesIO(raw))


def _table_rows(table: Table) -> List[list]:
    """Cells per row, with horizontally or vertically merged cells kept once."""
    seen = set()
    rows = []
    for row in table.rows:
        cells = []
        for cell in row.cells:
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            cells.append(cell)
        rows.append(cells)
    return rows


def _iter_blocks(element, parent) -> Iterator[Tuple[str, object]]:
    """
    Walk the block-level children of a body or table-cell element in order.

    Yields ("p", Paragraph) and ("table", rows). Content controls (w:sdt)
    and custom XML wrappers are transparent: their content is walked as if
    it sat directly in ``element``.
    """
    for child in element.iterchildren():
        if child.tag == _P:
            yield "p", Paragraph(child, parent)
        elif child.tag == _TBL:
            yield "table", _table_rows(Table(child, parent))
        elif child.tag == _SDT:
            content = child.find(_SDT_CONTENT)
            if content is not None:
                yield from _iter_blocks(content, parent)
        elif child.tag == _CUSTOM_XML:
            yield from _iter_blocks(child, parent)


def _iter_run_texts(element) -> Iterator[str]:
    for child in element.iterchildren():
        if child.tag == _R:
            yield child.text
        elif child.tag not in _SKIPPED_IN_PARAGRAPH:
            # hyperlinks, fields, smart tags, tracked insertions, inline sdt
            yield from _iter_run_texts(child)


def paragraph_text(paragraph: Paragraph) -> str:
    """
    Text of every run in the paragraph, including runs nested in
    hyperlinks, simple fields, smart tags, content controls and tracked
    insertions. Tracked deletions and moved-away text are left out.
    """
    return "".join(_iter_run_texts(paragraph._p))


def _iter_paragraphs(element, parent) -> Iterator[Paragraph]:
    for kind, block in _iter_blocks(element, parent):
        if kind == "p":
            yield block
        else:
            for cells in block:
                for cell in cells:
                    yield from _iter_paragraphs(cell._tc, cell)


def heading_level(paragraph: Paragraph) -> Optional[int]:
    """
    Return 1..6 for paragraphs styled "Heading 1".."Heading 6", else None.
    """
    style = paragraph.style
    name = (style.name or "") if style is not None else ""
    m = _HEADING_STYLE_RE.match(name.strip())
    if not m:
        return None
    return int(m.group(1))


def _render_container(element, parent, out: List[str]) -> None:
    for kind, block in _iter_blocks(element, parent):
        if kind == "p":
            text = html_lib.escape(paragraph_text(block), quote=False)
            level = heading_level(block)
            tag = f"h{level}" if level else "p"
            out.append(f"<{tag}>{text}</{tag}>")
            continue

        out.append("<table>")
        for cells in block:
            out.append("<tr>")
            for cell in cells:
                out.append("<td>")
                _render_container(cell._tc, cell, out)
                out.append("</td>")
            out.append("</tr>")
        out.append("</table>")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_text(text: str) -> str:
    """
    Flatten raw document text onto a single line.

    Newlines become spaces, the mis-encoded em-dash becomes a hyphen,
    whitespace runs collapse to one space and the ends are trimmed.
    """
    text = text.replace("\n", " ")
    text = text.replace(MISENCODED_EM_DASH, "-")
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def extract_plain_text(raw: bytes) -> str:
    """Return the normalized plain text of a DOCX payload."""
    try:
        doc = _open(raw)
        paragraphs = _iter_paragraphs(doc.element.body, doc)
        raw_text = "\n".join(paragraph_text(p) for p in paragraphs)
    except Exception as exc:
        logger.exception("Error extracting text from docx")
        raise ExtractionError(f"Could not extract text: {exc}") from exc

    return normalize_text(raw_text)


def extract_html(raw: bytes) -> str:
    """
    Return an HTML rendering of a DOCX payload.

    Only structure that matters for trimming is kept: headings become
    <h1>..<h6>, other paragraphs <p>, tables <table>/<tr>/<td>.
    """
    try:
        doc = _open(raw)
        out: List[str] = []
        _render_container(doc.element.body, doc, out)
    except Exception as exc:
        logger.exception("Error extracting HTML from docx")
        raise ExtractionError(f"Could not extract document structure: {exc}") from exc

    return "".join(out)


def load_document(raw: bytes) -> TrimDocument:
    """
    Build a TrimDocument from raw DOCX bytes.

    Both extractions must succeed; otherwise ExtractionError propagates and
    nothing is returned.
    """
    plain_text = extract_plain_text(raw)
    html = extract_html(raw)
    document = TrimDocument(plain_text=plain_text, html=html)

    logger.info(
        "Loaded document: %d chars, %d headings", len(plain_text), len(document.headings)
    )
    return document

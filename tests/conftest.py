# tests/conftest.py

import io
from typing import List, Tuple

import pytest
from docx import Document

from docx_trimmer.models.document import TrimDocument


def build_docx(blocks: List[Tuple[str, str]]) -> bytes:
    """
    Build DOCX bytes from (kind, text) pairs; kind is "p" or "h1".."h6".
    """
    doc = Document()
    for kind, text in blocks:
        if kind.startswith("h"):
            doc.add_heading(text, level=int(kind[1:]))
        else:
            doc.add_paragraph(text)

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def make_document(plain_text: str, headings: List[str]) -> TrimDocument:
    html = "".join(f"<h1>{h}</h1><p>...</p>" for h in headings)
    return TrimDocument(plain_text=plain_text, html=html)


SAMPLE_BLOCKS = [
    ("h1", "Introduction"),
    ("p", "Intro body text."),
    ("h1", "Methods"),
    ("p", "We did things."),
    ("h2", "Data"),
    ("p", "Data came from somewhere."),
    ("h1", "Results"),
    ("p", "It worked."),
]

SAMPLE_TEXT = (
    "Introduction Intro body text. Methods We did things. "
    "Data Data came from somewhere. Results It worked."
)

SAMPLE_HEADINGS = ["Introduction", "Methods", "Data", "Results"]


@pytest.fixture
def sample_docx_bytes() -> bytes:
    return build_docx(SAMPLE_BLOCKS)


@pytest.fixture
def sample_docx_path(tmp_path, sample_docx_bytes):
    path = tmp_path / "sample.docx"
    path.write_bytes(sample_docx_bytes)
    return path

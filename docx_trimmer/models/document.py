# docx_trimmer/models/document.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from docx_trimmer.parsing.headings import get_headings


@dataclass
class TrimDocument:
    """
    A loaded DOCX file, reduced to what section trimming needs.

    Attributes:
        plain_text: Whitespace-normalized text of the whole body, on one line.
        html: Structural rendering of the body that keeps <h1>..<h6> markup.
            This is the source of truth for section boundaries.
        headings: Heading texts in document order, derived from ``html`` when
            the document is created. Duplicates and empty headings are kept.
    """
    plain_text: str
    html: str = ""
    headings: List[str] = field(init=False)

    def __post_init__(self) -> None:
        self.headings = get_headings(self.html)

    @property
    def char_count(self) -> int:
        return len(self.plain_text)

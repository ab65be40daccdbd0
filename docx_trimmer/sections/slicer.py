# docx_trimmer/sections/slicer.py

from __future__ import annotations

import logging
from typing import List, Sequence

from docx_trimmer.models.document import TrimDocument
from docx_trimmer.parsing.headings import get_headings

logger = logging.getLogger(__name__)


def _next_heading_index(headings: List[str], section: str) -> int:
    """
    Index of the heading that follows ``section`` in document order.

    A name that is not a heading behaves like position -1, so the "next"
    heading is the first one.
    """
    try:
        return headings.index(section) + 1
    except ValueError:
        return 0


def slice_sections(document: TrimDocument, sections: Sequence[str]) -> str:
    """
    Return the document text with the given sections cut out.

    Sections are removed one after another in the order given. For each name:

    - the section starts at the first occurrence of the name in the current
      working text; names that do not occur are skipped;
    - it ends at the first occurrence (anywhere in the working text) of the
      heading that follows it in the original heading order, or at the end
      of the text when it is the last heading;
    - when that end is missing or does not lie after the start, nothing is
      removed.

    Matching is plain substring search, so a heading whose words also appear
    earlier in the body (a table of contents, a summary sentence) starts the
    cut at that earlier spot.
    """
    result = document.plain_text
    all_headings = get_headings(document.html)

    for section in sections:
        start = result.find(section)
        if start == -1:
            logger.debug("Section %r not found; skipping", section)
            continue

        next_index = _next_heading_index(all_headings, section)
        if next_index < len(all_headings):
            end = result.find(all_headings[next_index])
        else:
            end = len(result)

        if end == -1 or end <= start:
            logger.debug(
                "Section %r has no usable end (start=%d, end=%d); skipping",
                section,
                start,
                end,
            )
            continue

        result = result[:start] + result[end:]

    return result

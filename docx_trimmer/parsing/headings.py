from __future__ import annotations

from html.parser import HTMLParser
from typing import List, Optional


HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})


class _HeadingCollector(HTMLParser):
    """
    Collect the text content of every <h1>..<h6> element, in document order.

    Text of nested inline markup (e.g. <h2><strong>A</strong>B</h2>) is
    concatenated, the same way a DOM ``textContent`` would be.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.headings: List[str] = []
        self._current: Optional[List[str]] = None
        self._open_tag: Optional[str] = None

    def handle_starttag(self, tag, attrs):
        if tag in HEADING_TAGS and self._current is None:
            self._current = []
            self._open_tag = tag

    def handle_endtag(self, tag):
        if self._current is not None and tag == self._open_tag:
            self.headings.append("".join(self._current))
            self._current = None
            self._open_tag = None

    def handle_data(self, data):
        if self._current is not None:
            self._current.append(data)

    def close(self) -> None:
        super().close()
        # Unterminated heading at end of input still counts.
        if self._current is not None:
            self.headings.append("".join(self._current))
            self._current = None
            self._open_tag = None


def get_headings(html: str) -> List[str]:
    """
    Return the text of all heading elements (levels 1-6) in ``html``.

    Levels are not distinguished. Empty headings are kept as ``""`` so the
    list stays aligned with the heading occurrences in the body text.
    """
    if not html:
        return []

    collector = _HeadingCollector()
    collector.feed(html)
    collector.close()
    return collector.headings

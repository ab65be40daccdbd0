# docx_trimmer/session.py

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from docx_trimmer.models.document import TrimDocument
from docx_trimmer.parsing.loader import ExtractionError, load_document

logger = logging.getLogger(__name__)


class StaleLoadError(Exception):
    """
    A load finished after a later-started load had already completed, so its
    result was discarded.
    """
    pass


@dataclass
class DocumentSession:
    """
    Holds the one document a user is working on.

    Loads are sequenced with increasing tokens. The most recently completed
    load wins, and a load that finishes after a later-started load has
    completed is discarded instead of overwriting the newer document.
    """
    document: Optional[TrimDocument] = None
    _tokens: Iterator[int] = field(default_factory=lambda: itertools.count(1), repr=False)
    _completed_token: int = field(default=0, repr=False)

    def begin_load(self) -> int:
        return next(self._tokens)

    def is_stale(self, token: int) -> bool:
        return token < self._completed_token

    def complete_load(self, token: int, document: TrimDocument) -> bool:
        """
        Store ``document`` unless the load is stale. Returns True if stored.
        """
        if self.is_stale(token):
            logger.info("Discarding stale load %d (newer load %d already completed)",
                        token, self._completed_token)
            return False
        self.document = document
        self._completed_token = token
        return True

    def fail_load(self, token: int) -> None:
        """An extraction failure leaves no document loaded."""
        if self.is_stale(token):
            return
        self.document = None
        self._completed_token = token

    def load(
        self,
        raw: bytes,
        loader: Callable[[bytes], TrimDocument] = load_document,
    ) -> TrimDocument:
        """
        Load ``raw`` and make it the current document.

        Raises ExtractionError when the file cannot be read, and
        StaleLoadError when a newer load completed first.
        """
        token = self.begin_load()
        try:
            document = loader(raw)
        except ExtractionError:
            self.fail_load(token)
            raise

        if not self.complete_load(token, document):
            raise StaleLoadError(f"Load {token} was superseded by a newer upload.")
        return document

    def clear(self) -> None:
        self.document = None

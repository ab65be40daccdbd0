# docx_trimmer/validation.py

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

INVALID_FILE_MESSAGE = "Please upload a valid DOCX file."

# Not every platform's mime.types knows about .docx.
mimetypes.add_type(DOCX_MIME_TYPE, ".docx")


class InvalidFileType(Exception):
    """
    The selected file is not a DOCX file. ``str(exc)`` is the user-facing message.
    """

    def __init__(self, content_type: Optional[str] = None) -> None:
        super().__init__(INVALID_FILE_MESSAGE)
        self.content_type = content_type


def ensure_docx(content_type: Optional[str]) -> None:
    """Raise InvalidFileType unless ``content_type`` is the DOCX MIME type."""
    if content_type != DOCX_MIME_TYPE:
        raise InvalidFileType(content_type)


def guess_content_type(path: Path | str) -> Optional[str]:
    """MIME type of a local file, from its extension."""
    content_type, _ = mimetypes.guess_type(str(path))
    return content_type

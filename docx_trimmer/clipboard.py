# docx_trimmer/clipboard.py

from __future__ import annotations

import logging
from dataclasses import dataclass

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardWriteError(Exception):
    """
    Writing to the system clipboard was refused or failed.
    """
    pass


@dataclass(frozen=True)
class Notification:
    """
    A short, transient message shown after a user action.

    variant is "default" for success and "destructive" for failures.
    """
    title: str
    description: str
    variant: str = "default"


COPIED = Notification(
    title="Copied!",
    description="The optimized content has been successfully copied to your clipboard",
)


def write_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardWriteError(str(exc)) from exc


def copy_to_clipboard(text: str) -> Notification:
    """
    Copy ``text`` and describe the outcome. Failures are reported in the
    returned Notification, not raised.
    """
    try:
        write_clipboard(text)
    except ClipboardWriteError as exc:
        logger.warning("Clipboard write failed: %s", exc)
        return Notification(
            title="Error!",
            description=f"Failed to copy text:\n{exc}",
            variant="destructive",
        )

    return COPIED

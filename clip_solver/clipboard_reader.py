from abc import ABC, abstractmethod

import pyperclip

from clip_solver.exceptions import ClipboardAccessError


class ClipboardReader(ABC):
    """Anything that can hand back the current clipboard text."""

    @abstractmethod
    def read(self) -> str:
        """Return the clipboard's text.

        Raises:
            ClipboardAccessError: If the clipboard cannot be read.
        """
        ...


class PyperclipReader(ClipboardReader):
    """Reads the OS clipboard through pyperclip."""

    def read(self) -> str:
        try:
            text = pyperclip.paste()
        except (pyperclip.PyperclipException, OSError, UnicodeDecodeError) as e:
            raise ClipboardAccessError("Failed to read clipboard", original_error=e) from e
        return text or ""

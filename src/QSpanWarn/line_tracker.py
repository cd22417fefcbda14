from __future__ import annotations
import logging
from typing import Generator, Optional, TYPE_CHECKING

from Qt.QtWidgets import QPlainTextDocumentLayout
from Qt.QtCore import Signal, Slot
from Qt.QtGui import (
    QTextBlock,
    QTextDocument,
)

if TYPE_CHECKING:
    from .warning_annotator import WarningAnnotator

logger = logging.getLogger(__name__)


class TrackedDocument(QTextDocument):
    """A subclass of QTextDocument that reports its edits as ranges
    Connect to the `rangeContentsChange` signal to get those updates

    The signal carries (beg, end, old_len): the edited range [beg, end) of the
    new text and the number of characters that used to be there. Positions
    are Qt character positions (UTF-16 code units) where each block
    separator counts as a single newline.

    If the running character count ever disagrees with a reported change,
    `fullUpdateRequest` is emitted instead, and listeners should rebuild
    from scratch.
    """

    rangeContentsChange = Signal(int, int, int)
    fullUpdateRequest = Signal()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lay = QPlainTextDocumentLayout(self)
        self.setDocumentLayout(self.lay)
        self._prev_char_count = self.characterCount()
        self.warning_annotator: Optional[WarningAnnotator] = None
        self.contentsChange.connect(self._on_contents_change)

    def text_length(self) -> int:
        """Get the length of the plain text, not counting the trailing
        paragraph separator that Qt always keeps"""
        return self.characterCount() - 1

    def clamp(self, pos: int) -> int:
        return max(0, min(pos, self.text_length()))

    def start_of_line(self, pos: int) -> int:
        """Get the position of the first character of the line containing `pos`"""
        return self.findBlock(self.clamp(pos)).position()

    def end_of_line(self, pos: int) -> int:
        """Get the position of the newline (or end of text) that ends the line
        containing `pos`"""
        block = self.findBlock(self.clamp(pos))
        return block.position() + block.length() - 1

    def iter_line_range(
        self, start: int = 0, count: int = -1
    ) -> Generator[str, None, None]:
        """Iterate over a range of lines in the document, including any
        newline characters. If no range is given, do the whole document"""
        block: QTextBlock = (
            self.begin() if start == 0 else self.findBlockByNumber(start)
        )
        outputted = 0
        while block.isValid():
            text = block.text()
            nextblock = block.next()
            if nextblock.isValid():
                text += "\n"
            yield text
            outputted += 1

            if outputted == count:
                break
            block = nextblock

    def line_window(self, start: int, end: int) -> tuple[int, str]:
        """Get the text of every whole line touched by [start, end]

        Returns:
            The position of the first character of the window, and the window
            text with each line's newline included
        """
        first_pos = self.start_of_line(start)
        last_end = self.end_of_line(end)
        first = self.findBlock(first_pos).blockNumber()
        last = self.findBlock(last_end).blockNumber()
        text = "".join(self.iter_line_range(first, last - first + 1))
        return first_pos, text

    @Slot(int, int, int)
    def _on_contents_change(self, position: int, chars_removed: int, chars_added: int):
        """Handle document content changes incrementally.

        Args:
            position: UTF-16 code unit position where change occurred
            chars_removed: Number of UTF-16 code units removed
            chars_added: Number of UTF-16 code units added
        """
        new_char_count = self.characterCount()
        if self._prev_char_count - chars_removed + chars_added != new_char_count:
            # oops there's a tracking issue
            logger.debug(
                "Character count drifted (%d - %d + %d != %d), requesting full update",
                self._prev_char_count,
                chars_removed,
                chars_added,
                new_char_count,
            )
            self._prev_char_count = new_char_count
            self.fullUpdateRequest.emit()
            return

        self._prev_char_count = new_char_count
        self.rangeContentsChange.emit(position, position + chars_added, chars_removed)

from __future__ import annotations
import logging

from Qt.QtCore import QObject, Signal, Slot

from .constants import LOOKAHEAD, LOOKBEHIND
from .line_tracker import TrackedDocument
from .scanner import scan
from .span_store import WARNING_TAG, HighlightSpan, SpanStore
from .utils import index16, len16

logger = logging.getLogger(__name__)


def expand_range(text: str, beg: int, end: int) -> tuple[int, int]:
    """Widen [beg, end) into the range that has to be rescanned after an edit

    `beg` moves back to the start of its line, but never more than
    LOOKBEHIND characters. `end` moves forward LOOKAHEAD characters, but never
    past the newline that ends its line, or the end of `text`.
    Offsets are indexes into `text`, which must contain every whole line the
    range touches.
    """
    line_start = text.rfind("\n", 0, beg) + 1
    line_end = text.find("\n", end)
    if line_end < 0:
        line_end = len(text)
    new_beg = max(line_start, beg - LOOKBEHIND)
    new_end = min(end + LOOKAHEAD, line_end + 1, len(text))
    return new_beg, max(new_beg, new_end)


class WarningAnnotator(QObject):
    """Keeps the warning spans of one TrackedDocument in sync with its text

    While enabled, every change the document reports is widened by a small
    margin, the stale spans in that margin are dropped, and the margin is
    scanned again. Spans outside the margin just move along with the text.
    """

    spansChanged = Signal()

    def __init__(self, document: TrackedDocument):
        super().__init__()
        self._doc: TrackedDocument = document
        self.store: SpanStore = SpanStore()
        self._connected: bool = False

    def is_enabled(self) -> bool:
        return self._connected

    def spans(self) -> list[HighlightSpan]:
        return self.store.spans(WARNING_TAG)

    def enable(self):
        """Start tracking changes, and scan the whole document

        Calling this while already enabled only rescans.
        """
        if not self._connected:
            self._doc.rangeContentsChange.connect(self.on_contents_change)
            self._doc.fullUpdateRequest.connect(self.rescan_all)
            self._connected = True
            logger.debug("Warning highlights enabled for %r", self._doc)
        self.rescan_all()

    def disable(self):
        """Drop every warning span and stop tracking changes"""
        if not self._connected:
            return
        self.store.clear_all(WARNING_TAG)
        self._doc.rangeContentsChange.disconnect(self.on_contents_change)
        self._doc.fullUpdateRequest.disconnect(self.rescan_all)
        self._connected = False
        logger.debug("Warning highlights disabled for %r", self._doc)
        self.spansChanged.emit()

    @Slot()
    def rescan_all(self):
        self.store.clear_all(WARNING_TAG)
        self.rescan(0, self._doc.text_length())

    @Slot(int, int, int)
    def on_contents_change(self, beg: int, end: int, old_len: int):
        """Update the spans for a change that replaced `old_len` characters at
        `beg` with the new text [beg, end)"""
        self.store.apply_edit(beg, old_len, end - beg)
        self.rescan(beg, end)

    def rescan(self, beg: int, end: int):
        """Rescan the range [beg, end), widened by the margin, and replace the
        warning spans there"""
        beg = self._doc.clamp(beg)
        end = self._doc.clamp(end)
        offset, window = self._doc.line_window(beg, end)

        # Qt counts positions in utf16 code units, python strings don't
        wide = len16(window) != len(window)
        if wide:
            lbeg = index16(window, beg - offset)
            lend = index16(window, end - offset)
        else:
            lbeg, lend = beg - offset, end - offset

        sbeg, send = expand_range(window, lbeg, lend)

        def to_pos(idx: int) -> int:
            if wide:
                return offset + len16(window[:idx])
            return offset + idx

        logger.debug("Rescanning [%d, %d)", to_pos(sbeg), to_pos(send))
        self.store.remove_spans(to_pos(sbeg), to_pos(send), WARNING_TAG)
        for mstart, mend in scan(window, sbeg, send):
            self.store.add_span(to_pos(mstart), to_pos(mend), WARNING_TAG)
        self.spansChanged.emit()


def annotator_for(document: TrackedDocument) -> WarningAnnotator:
    """Get the warning annotator of a document, creating it if needed"""
    if not isinstance(document, TrackedDocument):
        raise TypeError("Warning highlights only work with a TrackedDocument")
    if document.warning_annotator is None:
        document.warning_annotator = WarningAnnotator(document)
    return document.warning_annotator


def enable(document: TrackedDocument) -> WarningAnnotator:
    """Turn on warning highlights for a document, or rescan it if they're on"""
    annotator = annotator_for(document)
    annotator.enable()
    return annotator


def disable(document: TrackedDocument):
    """Turn off warning highlights for a document. Does nothing if they're off"""
    annotator = getattr(document, "warning_annotator", None)
    if annotator is None:
        return
    annotator.disable()


def is_enabled(document: TrackedDocument) -> bool:
    annotator = getattr(document, "warning_annotator", None)
    return annotator is not None and annotator.is_enabled()

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable
from Qt.QtGui import QTextCharFormat, QTextCursor
from Qt.QtWidgets import QTextEdit

if TYPE_CHECKING:
    from .line_editor import CodeEditor
    from .span_store import HighlightSpan


class SelectionManager:
    """Turns highlight spans from several behaviors into the editor's extra selections

    Each source hands over its spans, and every span is painted with the
    format registered for its tag. Spans whose tag has no format, and empty
    spans, aren't painted.
    """

    def __init__(self, editor: CodeEditor):
        self.editor = editor
        self._spans: dict[str, list[HighlightSpan]] = {}
        self._formats: dict[str, QTextCharFormat] = {}

    def set_format(self, tag: str, fmt: QTextCharFormat):
        """Set the format used to paint spans with the given tag"""
        self._formats[tag] = fmt
        self._update_editor()

    def set_spans(self, source: str, spans: Iterable[HighlightSpan]):
        """Replace the spans contributed by a source

        Args:
            source: Identifier for the source behavior (e.g., "warning_spans")
            spans: The spans to paint
        """
        self._spans[source] = list(spans)
        self._update_editor()

    def clear_spans(self, source: str):
        if source in self._spans:
            del self._spans[source]
            self._update_editor()

    def _selection(self, span: HighlightSpan, fmt: QTextCharFormat):
        doc = self.editor.document()
        cursor = QTextCursor(doc)
        cursor.setPosition(doc.clamp(span.start))
        cursor.setPosition(doc.clamp(span.end), QTextCursor.KeepAnchor)
        selection = QTextEdit.ExtraSelection()
        selection.cursor = cursor
        selection.format = fmt
        return selection

    def _update_editor(self):
        merged = []
        # Later sources paint on top
        for source in sorted(self._spans.keys()):
            for span in self._spans[source]:
                fmt = self._formats.get(span.tag)
                if fmt is None or span.start == span.end:
                    continue
                merged.append(self._selection(span, fmt))

        self.editor.setExtraSelections(merged)

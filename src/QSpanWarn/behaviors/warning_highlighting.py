from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional

from . import Behavior
from ..hl_groups import FORMAT_SPECS, compile_format
from ..span_store import WARNING_TAG
from ..warning_annotator import WarningAnnotator, enable, disable

if TYPE_CHECKING:
    from ..line_editor import CodeEditor


class WarningHighlighting(Behavior):
    """Paint tabs and line-ending `@:` / `})` with the warning format"""

    source = "warning_spans"

    def __init__(self, editor: CodeEditor):
        super().__init__(editor)
        self.setListen({"warning_format"})
        self._warning_format: dict[str, Any]
        self.warning_format = FORMAT_SPECS["warning"]

        self.annotator: Optional[WarningAnnotator] = enable(self.editor.document())
        self.annotator.spansChanged.connect(self.paint_spans)
        self.updateAll()
        self.paint_spans()

    @property
    def warning_format(self) -> dict[str, Any]:
        return self._warning_format

    @warning_format.setter
    def warning_format(self, value: Optional[dict[str, Any]]):
        self._warning_format = value or FORMAT_SPECS["warning"]
        self.editor.selection_manager.set_format(
            WARNING_TAG, compile_format(self._warning_format)
        )

    def paint_spans(self):
        """Hand the annotator's current spans to the selection manager"""
        if self.annotator is None:
            return
        self.editor.selection_manager.set_spans(self.source, self.annotator.spans())

    def remove(self):
        super().remove()
        if self.annotator is not None:
            self.annotator.spansChanged.disconnect(self.paint_spans)
            self.annotator = None
        disable(self.editor.document())
        self.editor.selection_manager.clear_spans(self.source)

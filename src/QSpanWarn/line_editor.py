from __future__ import annotations
import logging
from typing import Optional, Collection, Type, TypeVar

from Qt.QtWidgets import QPlainTextEdit
from Qt.QtGui import QColor, QPalette

from .line_tracker import TrackedDocument
from .behaviors import Behavior
from .editor_options import EditorOptions
from .selection_manager import SelectionManager

T_Behavior = TypeVar("T_Behavior", bound=Behavior)

logger = logging.getLogger(__name__)


class CodeEditor(QPlainTextEdit):
    def __init__(
        self,
        options: EditorOptions,
        parent=None,
    ):
        super().__init__(parent=parent)
        self._doc: TrackedDocument = TrackedDocument()
        self.setDocument(self._doc)

        self.options = options
        self.selection_manager: SelectionManager = SelectionManager(self)

        self._behaviors: list[Behavior] = []

        self.options.optionsUpdated.connect(self.updateOptions)
        self.updateOptions(list(self.options.keys()))

    def updateOptions(self, keylist: Collection[str]):
        keys = set(keylist)
        if "font" in keys:
            self.setFont(self.options["font"])
        if "colors" in keys:
            self.setColors(self.options["colors"])

    def setColors(self, colors: dict[str, str]):
        palette = self.palette()
        palette.setColor(QPalette.ColorRole.Base, QColor(colors["bg"]))  # Background
        palette.setColor(QPalette.Window, QColor(colors["bg"]))  # Window background
        palette.setColor(QPalette.Text, QColor(colors["fg"]))  # Text color
        self.setPalette(palette)
        self.setAutoFillBackground(True)

    def addBehavior(
        self, behaviorCls: Type[T_Behavior]
    ) -> tuple[Optional[T_Behavior], T_Behavior]:
        """Set the given behavior to the class. If a behavior of the given type already exists, remove it
        Return both the old and newly instantiated behaviors.
        """
        old_bh = self.removeBehavior(behaviorCls)
        behavior = behaviorCls(self)
        self._behaviors.append(behavior)
        return old_bh, behavior

    def removeBehavior(self, behaviorCls: Type[T_Behavior]) -> Optional[T_Behavior]:
        """Remove all existing behaviors of the given type"""
        ridxs = []
        torem = []
        for i, bh in enumerate(self._behaviors):
            if type(bh) is behaviorCls:
                ridxs.append(i)
                torem.append(bh)
        for i in reversed(ridxs):
            self._behaviors.pop(i)
        for rem in torem:
            rem.remove()
        if not torem:
            return None
        if len(torem) > 1:
            logger.warning(
                "Multiple behaviors of type %s found to remove", behaviorCls.__name__
            )
        return torem[0]

    def getBehavior(self, behaviorCls: Type[T_Behavior]) -> Optional[T_Behavior]:
        for bh in self._behaviors:
            if type(bh) is behaviorCls:
                return bh
        return None

    def document(self) -> TrackedDocument:
        doc = super().document()
        if not isinstance(doc, TrackedDocument):
            raise ValueError("This editor only works with TrackedDocument")
        return doc

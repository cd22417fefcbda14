import logging
import sys

# fmt: off
from QSpanWarn.line_editor import CodeEditor
from QSpanWarn.behaviors.warning_highlighting import WarningHighlighting
from QSpanWarn.editor_options import EditorOptions
from QSpanWarn.hl_groups import FORMAT_SPECS, COLORS
from Qt.QtWidgets import QMainWindow, QApplication
from Qt.QtGui import QFont
# fmt: on

SAMPLE = (
    "@node Top\n"
    "See the overview (@pxref{Overview})\n"
    "\tindented with a tab\n"
    "Ends in a colon @:\n"
    "@: but not here\n"
)

logging.basicConfig(level=logging.DEBUG)

app = QApplication(sys.argv)
win = QMainWindow()

options = EditorOptions(
    {
        "colors": COLORS,
        "font": QFont("Courier New", pointSize=11),
        "warning_format": FORMAT_SPECS["warning"],
    }
)

edit = CodeEditor(options, parent=win)
edit.setPlainText(SAMPLE)
edit.addBehavior(WarningHighlighting)

win.setCentralWidget(edit)
win.show()

app.exec_()

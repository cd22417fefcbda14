from typing import Any

from Qt.QtGui import QColor, QFont, QTextCharFormat

# fmt: off
FORMAT_SPECS = {
    "warning": {"background": "#FFB3B3"},
}

COLORS = {
    "bg": "#FFFFFF",
    "fg": "#000000",
}
# fmt: on


def compile_format(spec: dict[str, Any]) -> QTextCharFormat:
    """Convert a user style spec -> QTextCharFormat instance.

    Options: color (hex), background (hex), bold (bool), italic (bool),
    underline (bool)
    """
    fmt = QTextCharFormat()
    if "color" in spec:
        fmt.setForeground(QColor(spec["color"]))
    if "background" in spec:
        fmt.setBackground(QColor(spec["background"]))
    if spec.get("bold"):
        fmt.setFontWeight(QFont.Bold)
    if spec.get("italic"):
        fmt.setFontItalic(True)
    if spec.get("underline"):
        fmt.setFontUnderline(True)
    return fmt

from .line_editor import CodeEditor
from .line_tracker import TrackedDocument
from .editor_options import EditorOptions
from .hl_groups import FORMAT_SPECS, COLORS
from .scanner import scan
from .span_store import HighlightSpan, SpanStore, WARNING_TAG
from .warning_annotator import WarningAnnotator, enable, disable, is_enabled
from .behaviors.warning_highlighting import WarningHighlighting

__all__ = [
    "COLORS",
    "CodeEditor",
    "EditorOptions",
    "FORMAT_SPECS",
    "HighlightSpan",
    "SpanStore",
    "TrackedDocument",
    "WARNING_TAG",
    "WarningAnnotator",
    "WarningHighlighting",
    "disable",
    "enable",
    "is_enabled",
    "scan",
]

from Qt.QtCore import QObject, Signal
from typing import Optional, Any

from .hl_groups import COLORS, FORMAT_SPECS

DEFAULT_OPTIONS: dict[str, Any] = {
    "colors": COLORS,
    "warning_format": FORMAT_SPECS["warning"],
}


class EditorOptions(QObject):
    """Editor settings, with a signal listing the keys that changed

    Keys that were never set fall back to `defaults`. Setting a key to None
    drops the override and goes back to the default.
    """

    optionsUpdated = Signal(list)  # list of str

    def __init__(
        self,
        opts: Optional[dict[str, Any]] = None,
        defaults: Optional[dict[str, Any]] = None,
    ):
        super().__init__()
        self._defaults: dict[str, Any] = dict(
            DEFAULT_OPTIONS if defaults is None else defaults
        )
        self._options: dict[str, Any] = {}
        for key, value in (opts or {}).items():
            if value is not None:
                self._options[key] = value

    def __getitem__(self, key: str):
        if key in self._options:
            return self._options[key]
        return self._defaults[key]

    def __setitem__(self, key: str, value):
        self.update({key: value})

    def __contains__(self, key: str) -> bool:
        return key in self._options or key in self._defaults

    def update(self, opts: dict[str, Any]):
        for key, value in opts.items():
            if value is None:
                self._options.pop(key, None)
            else:
                self._options[key] = value
        self.optionsUpdated.emit(list(opts.keys()))

    def get(self, key, default=None) -> Any:
        return self[key] if key in self else default

    def is_default(self, key: str) -> bool:
        return key not in self._options

    def keys(self):
        return self._defaults.keys() | self._options.keys()

from __future__ import annotations
import bisect
from dataclasses import dataclass
from typing import Optional

WARNING_TAG = "warning"


@dataclass
class HighlightSpan:
    """A half-open [start, end) range of document offsets with a style tag"""

    start: int
    end: int
    tag: str = WARNING_TAG

    def __len__(self) -> int:
        return self.end - self.start

    def overlaps(self, start: int, end: int) -> bool:
        """Check if this span touches the range [start, end)

        Empty spans are matched by position, so a span whose text was
        deleted out from under it is still found at the spot it collapsed to.
        """
        if self.start == self.end:
            return start <= self.start <= end
        if start == end:
            return self.start <= start < self.end
        return self.start < end and self.end > start


def _shift(offset: int, position: int, removed: int, added: int) -> int:
    """Move an offset through an edit the way a text marker would"""
    if offset <= position:
        return offset
    if offset >= position + removed:
        return offset + added - removed
    return position


class SpanStore:
    """A collection of highlight spans kept sorted by start offset

    The spans move along with the text as edits are applied, so anything
    outside an edited region keeps pointing at the same characters.
    """

    def __init__(self):
        self._spans: list[HighlightSpan] = []
        self._starts: list[int] = []

    def __len__(self) -> int:
        return len(self._spans)

    def spans(self, tag: Optional[str] = None) -> list[HighlightSpan]:
        """Get all spans in document order, optionally only those with `tag`"""
        if tag is None:
            return list(self._spans)
        return [sp for sp in self._spans if sp.tag == tag]

    def spans_in(
        self, start: int, end: int, tag: Optional[str] = WARNING_TAG
    ) -> list[HighlightSpan]:
        """Get the spans overlapping [start, end)"""
        return [self._spans[i] for i in self._overlapping(start, end, tag)]

    def add_span(self, start: int, end: int, tag: str = WARNING_TAG) -> HighlightSpan:
        """Create and register a new span. Nothing is merged or deduplicated"""
        span = HighlightSpan(start, end, tag)
        idx = bisect.bisect_right(self._starts, start)
        self._spans.insert(idx, span)
        self._starts.insert(idx, start)
        return span

    def remove_spans(self, start: int, end: int, tag: Optional[str] = WARNING_TAG):
        """Delete every span overlapping [start, end)"""
        for i in reversed(self._overlapping(start, end, tag)):
            self._spans.pop(i)
            self._starts.pop(i)

    def clear_all(self, tag: Optional[str] = WARNING_TAG):
        """Remove every span with the given tag, or every span if tag is None"""
        if tag is None:
            self._spans = []
        else:
            self._spans = [sp for sp in self._spans if sp.tag != tag]
        self._starts = [sp.start for sp in self._spans]

    def apply_edit(self, position: int, removed: int, added: int):
        """Update the stored offsets for an edit at `position` that replaced
        `removed` characters with `added` characters

        Offsets at or before the edit stay put, offsets after the removed
        text move by the length difference, and offsets inside the removed
        text collapse onto `position`.
        """
        if removed == 0 and added == 0:
            return
        # The shift is monotonic, so the list stays sorted by start
        for span in self._spans:
            if span.end < position:
                continue
            span.start = _shift(span.start, position, removed, added)
            span.end = _shift(span.end, position, removed, added)
        self._starts = [sp.start for sp in self._spans]

    def _overlapping(self, start: int, end: int, tag: Optional[str]) -> list[int]:
        """Get the indexes of spans overlapping [start, end) in ascending order"""
        hi = bisect.bisect_right(self._starts, end)
        out = []
        for i in range(hi):
            span = self._spans[i]
            if tag is not None and span.tag != tag:
                continue
            if span.overlaps(start, end):
                out.append(i)
        return out

import re
from typing import Generator, Optional

# A lone tab, or one of the texinfo closers `@:` / `})` sitting at the end of
# a line. The newline is part of the match so the span abuts the next line.
# Tabs are matched one at a time so an edit inside a run of tabs only
# disturbs the neighboring spans.
WARNING_REGEX = re.compile(r"\t|(?:@:|\}\))(?:\n|\Z)")


def scan(
    text: str, start: int = 0, end: Optional[int] = None
) -> Generator[tuple[int, int], None, None]:
    """Yield the (start, end) offsets of every warning match in `text` that
    begins inside the range [start, end)

    The regex always runs against the whole string, so the line-end anchor
    sees the real end of each line rather than the range bound. A line-end
    match that begins in range may reach past `end` by its trailing newline.

    Args:
        text: The text to search
        start: The first offset a match may begin at
        end: One past the last offset a match may begin at. Defaults to the
            end of the text

    Yields:
        (match_start, match_end) pairs in document order
    """
    if end is None:
        end = len(text)
    start = max(0, start)
    end = min(len(text), end)
    for match in WARNING_REGEX.finditer(text, start):
        if match.start() >= end:
            return
        yield match.span()

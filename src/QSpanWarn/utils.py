from .constants import ENC


def len16(val: str) -> int:
    """Get the number of utf16 code points where surrogate pairs count as 2"""
    return len(val.encode(ENC)) // 2


def index16(val: str, units: int) -> int:
    """Get the string index that sits `units` utf16 code units into `val`

    A count that lands in the middle of a surrogate pair rounds up to the
    index after that character.
    """
    if units <= 0:
        return 0
    count = 0
    for i, ch in enumerate(val):
        if count >= units:
            return i
        count += 2 if ord(ch) > 0xFFFF else 1
    return len(val)

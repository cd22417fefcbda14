ENC = "utf-16-le"

# How far a change is widened before rescanning. Enough to catch a line-end
# match created or broken by a single character edit next to it.
LOOKBEHIND = 2
LOOKAHEAD = 3

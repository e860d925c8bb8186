"""Unicode characters produced or reserved by the punctuation rules."""

LEFT_DOUBLE_QUOTE = "\u201c"  # “
RIGHT_DOUBLE_QUOTE = "\u201d"  # ”
LEFT_SINGLE_QUOTE = "\u2018"  # ‘
RIGHT_SINGLE_QUOTE = "\u2019"  # ’, also the typographic apostrophe

PRIME = "\u2032"  # ′
DOUBLE_PRIME = "\u2033"  # ″

ELLIPSIS = "\u2026"
HYPHEN = "\u2010"  # true hyphen, also used inside ISO 8601 dates
FIGURE_DASH = "\u2012"
EN_DASH = "\u2013"

# Hebrew
GERESH = "\u05f3"
GERSHAYIM = "\u05f4"
MAQAF = "\u05be"

# private use characters delimiting protected spans, never touched by any rule
PLACEHOLDER_OPEN = "\ue000"
PLACEHOLDER_CLOSE = "\ue001"

# neither a letter nor a digit (``\W`` would also accept the underscore)
NON_ALNUM = r"[^\p{L}\d]"

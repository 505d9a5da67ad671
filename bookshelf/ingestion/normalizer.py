"""Case- and accent-insensitive text normalization."""

import re
import unicodedata

# Combining Diacritical Marks block, left behind by NFD decomposition
COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")


def normalize_text(value: object) -> str:
    """Normalize a value for comparison.

    Trims, lowercases, decomposes accented characters (NFD) and drops the
    combining marks, so "Czytám" and "CZYTAM" compare equal. Letters without
    a decomposition (e.g. "ł") are kept as they are.

    Args:
        value: Any value; None or empty gives an empty string.

    Returns:
        The normalized text.
    """
    if value is None or value == "":
        return ""
    text = str(value).strip().lower()
    return COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))

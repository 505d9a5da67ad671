"""Comma-separated text parser for published spreadsheet exports."""

QUOTE = '"'
DELIMITER = ","
LINE_BREAKS = ("\n", "\r")


def parse_csv(text: str) -> list[list[str]]:
    """Split CSV text into rows of cells.

    Single left-to-right scan with one character of lookahead. Quoted
    fields may contain commas and line breaks; a doubled quote inside a
    quoted field is a literal quote. ``\\r\\n`` counts as one row terminator.
    A trailing terminator does not produce an extra empty row.

    Args:
        text: Raw CSV text.

    Returns:
        List of rows, each a list of cell strings. Empty input gives no rows;
        a blank line gives ``[""]``.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    current: list[str] = []
    inside_quotes = False

    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        next_char = text[i + 1] if i + 1 < length else ""

        if char == QUOTE:
            if inside_quotes and next_char == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                inside_quotes = not inside_quotes
        elif char == DELIMITER and not inside_quotes:
            row.append("".join(current))
            current = []
        elif char in LINE_BREAKS and not inside_quotes:
            if char == "\r" and next_char == "\n":
                i += 1
            row.append("".join(current))
            rows.append(row)
            row = []
            current = []
        else:
            current.append(char)
        i += 1

    if current or row:
        row.append("".join(current))
        rows.append(row)

    return rows


def is_blank_row(row: list[str]) -> bool:
    """Return True if every cell in the row is empty or whitespace."""
    return not any(cell and cell.strip() for cell in row)

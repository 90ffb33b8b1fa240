"""
Quote-aware splitter for a single CSV line.

Never raises: an unbalanced quote simply keeps the rest of the line inside
the current field.
"""

SEPARATOR = ","
QUOTE = '"'


def _clean_field(raw: str) -> str:
    """Trim, drop one layer of surrounding quotes, trim again."""
    s = raw.strip()
    if len(s) >= 2 and s.startswith(QUOTE) and s.endswith(QUOTE):
        s = s[1:-1]
    return s.strip()


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into fields.

    - ``"`` toggles quoted mode; ``""`` inside quotes is a literal quote.
    - ``,`` separates fields unless quoted.
    - The last field is always emitted, so N separators give N+1 fields.

    Examples
    --------
    >>> split_csv_line('a,"b,c",d')
    ['a', 'b,c', 'd']
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == SEPARATOR and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current))
    return [_clean_field(f) for f in fields]

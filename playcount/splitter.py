from typing import List


def split_line(line: str) -> List[str]:
    """Split a raw input line into fields.

    Tab-delimited lines are split literally on tabs. Anything else is treated
    as comma-delimited, where a double quote toggles quoted mode (commas inside
    quotes are kept) and is itself dropped. Doubled quotes and multi-line
    fields are not supported.
    """
    if "\t" in line:
        return line.split("\t")

    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields

"""
Parse blame targets of the form "path", "path:line" or "path:start-end".

Only the last ':' introduces a range. When the part after it is not
a line number or range, the whole argument is taken as the path, so
"notes:todo" stays a path. A path that really ends in ":<digits>"
(a file named "report:10") is read as a line reference; there is no
way to tell the two apart from the string alone.

Inverted ranges ("f:20-10") are returned as given. Line numbers above
4294967295 don't count as numbers, so "f:4294967296" is a plain path.
"""

from typing import NamedTuple, Optional, Tuple


MAX_LINE_NUMBER = 0xFFFFFFFF


class BlameTarget(NamedTuple):
    path: str
    range: Optional[Tuple[int, int]] = None


def _parse_line_number(text: str) -> Optional[int]:
    """Unsigned 32-bit decimal integer, optional leading '+', else None."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    if value > MAX_LINE_NUMBER:
        return None
    return value


def parse_blame_target(arg: str) -> BlameTarget:
    """Split a file argument into path and optional (start, end) line range.

    Examples:
        "file.rs:10-20" -> ("file.rs", (10, 20))
        "file.rs:10"    -> ("file.rs", (10, 10))
        "a:b:10-20"     -> ("a:b", (10, 20))
        "file.rs:abc"   -> ("file.rs:abc", None)
    """
    path, sep, range_part = arg.rpartition(":")
    if not sep:
        return BlameTarget(arg)

    if "-" in range_part:
        start_text, _, end_text = range_part.partition("-")
        start = _parse_line_number(start_text)
        end = _parse_line_number(end_text)
        if start is not None and end is not None:
            return BlameTarget(path, (start, end))
    else:
        line = _parse_line_number(range_part)
        if line is not None:
            return BlameTarget(path, (line, line))

    return BlameTarget(arg)

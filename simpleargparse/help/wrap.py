# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Greedy line wrapping for help text.

A line longer than the maximum width is broken after the rightmost break
character that still fits. When no break character fits, the line is cut
hard at the maximum width. The search never looks past the maximum width,
so a break character just beyond it is not used.
"""


def wrap_line(line: str, width: int, break_chars: str) -> list[str]:
    """
    Break a single line into pieces no longer than `width`.

    Args:
        line (str): Text without newlines.
        width (int): Maximum length of an output line.
        break_chars (str): Characters that may end a line.

    Returns:
        list[str]: The wrapped lines. A line that already fits is returned
            unchanged as the only element, even when it is empty.
    """
    lines: list[str] = []
    remainder = line
    while len(remainder) > width:
        position = -1
        for index in range(width - 1, 0, -1):
            if remainder[index] in break_chars:
                position = index
                break
        if position > 0:
            piece = remainder[: position + 1].strip()
            remainder = remainder[position + 1 :].lstrip()
        else:
            piece = remainder[:width]
            remainder = remainder[width:].lstrip()
        if piece:
            lines.append(piece)
    if remainder or not lines:
        lines.append(remainder)
    return lines


def wrap_text(text: str, width: int, break_chars: str) -> list[str]:
    """Wrap every line of a multi-line text, keeping empty lines."""
    lines: list[str] = []
    for line in text.split("\n"):
        lines.extend(wrap_line(line, width, break_chars))
    return lines

"""Side-by-side rendering of ASCII art and stat lines."""

from itertools import zip_longest
from typing import Iterable, Union

from wcwidth import wcswidth, wcwidth

from repofetch.exceptions import AsciiOverflowError
from repofetch.models import AsciiArt, StatLine

GUTTER = 5


def display_width(text: str) -> int:
    """Terminal columns occupied by ``text``."""
    width = wcswidth(text)
    if width < 0:
        # Control characters; count what we can.
        return sum(max(0, wcwidth(ch)) for ch in text)
    return width


def fit_to_width(text: str, width: int) -> str:
    """Pad or truncate ``text`` to exactly ``width`` display columns."""
    columns = display_width(text)
    if columns <= width:
        return text + " " * (width - columns)
    columns = 0
    kept = []
    for ch in text:
        ch_width = max(0, wcwidth(ch))
        if columns + ch_width > width:
            break
        kept.append(ch)
        columns += ch_width
    return "".join(kept) + " " * (width - columns)


def render_panel(art: AsciiArt, stats: Iterable[Union[StatLine, str]]) -> str:
    """Merge ``art`` and ``stats`` into one block of text.

    Art lines that have a stat beside them are padded to the art's declared
    width plus a gutter; the rest are printed bare. More stats than art
    lines, or art taller than its declared height, is an asset problem and
    raises ``AsciiOverflowError``.
    """
    column = art.max_width + GUTTER
    art_lines = art.lines
    stat_lines = [s.text if isinstance(s, StatLine) else s for s in stats]

    if len(art_lines) > art.max_height:
        raise AsciiOverflowError(
            f"ASCII art is taller than declared: {len(art_lines)} > {art.max_height}"
        )
    if len(stat_lines) > len(art_lines):
        raise AsciiOverflowError(
            f"more stats than lines of ASCII: {len(stat_lines)} > {len(art_lines)}"
        )

    rows = []
    for art_line, stat in zip_longest(art_lines, stat_lines):
        if stat is None:
            rows.append(art_line)
        else:
            rows.append(fit_to_width(art_line, column) + stat)
    return "\n".join(rows)

"""Text scanning helpers for locating the cursor within source blocks.

Offsets are indices into the source string.
"""

from __future__ import annotations

__all__ = [
    "brace_depth_at",
    "find_enclosing_block_keyword",
    "line_text_to_cursor",
    "clip_has_use",
    "word_at_offset",
    "offset_to_line_col",
]

_BLOCK_KEYWORDS = frozenset(
    {"device", "instrument", "kit", "clip", "scene", "session"}
)


def brace_depth_at(source: str, offset: int) -> tuple[int, int | None]:
    """Return the brace depth before ``offset`` and the last ``{`` position.

    Line comments, nested block comments and string literals are skipped.
    """
    end = min(offset, len(source))
    depth = 0
    last_open: int | None = None
    i = 0
    while i < end:
        pair = source[i : i + 2] if i + 1 < end else ""
        if pair == "//":
            newline = source.find("\n", i, end)
            i = end if newline < 0 else newline
            continue
        if pair == "/*":
            i += 2
            nesting = 1
            while i + 1 < end and nesting > 0:
                token = source[i : i + 2]
                if token == "/*":
                    nesting += 1
                    i += 2
                elif token == "*/":
                    nesting -= 1
                    i += 2
                else:
                    i += 1
            continue
        char = source[i]
        if char == '"':
            i += 1
            while i < end and source[i] != '"':
                if source[i] == "\\":
                    i += 1
                i += 1
            if i < end:
                i += 1
            continue
        if char == "{":
            depth += 1
            last_open = i
        elif char == "}":
            depth -= 1
        i += 1
    return depth, last_open


def find_enclosing_block_keyword(source: str, brace_pos: int) -> str | None:
    """Return the block keyword that opens the brace at ``brace_pos``."""
    trimmed = source[:brace_pos].rstrip()
    if trimmed.endswith("]"):
        bracket_start = trimmed.rfind("[")
        if bracket_start < 0:
            return None
        trimmed = trimmed[:bracket_start].rstrip()
    if not trimmed:
        return None
    words = trimmed.split("\n")[-1].split()
    if not words:
        return None
    first_word = words[0]
    return first_word if first_word in _BLOCK_KEYWORDS else None


def line_text_to_cursor(source: str, offset: int) -> str:
    """Return the text from the start of the cursor's line up to ``offset``."""
    start = source.rfind("\n", 0, offset) + 1
    return source[start:offset]


def clip_has_use(source: str, brace_pos: int, cursor_offset: int) -> bool:
    """Return whether a clip body before the cursor has a ``use`` line."""
    content = source[brace_pos + 1 : cursor_offset]
    return any(line.strip().startswith("use ") for line in content.split("\n"))


def _is_ident(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char in "_-")


def word_at_offset(source: str, offset: int) -> str | None:
    """Return the identifier touching ``offset``, or ``None`` if there is none."""
    if offset > len(source):
        return None
    start = offset
    while start > 0 and _is_ident(source[start - 1]):
        start -= 1
    end = offset
    while end < len(source) and _is_ident(source[end]):
        end += 1
    return source[start:end] if start != end else None


def offset_to_line_col(source: str, offset: int) -> tuple[int, int]:
    """Return the zero-based line and column of ``offset``."""
    prefix = source[:offset]
    line = prefix.count("\n")
    col = len(prefix) - (prefix.rfind("\n") + 1)
    return line, col
"""Curly-brace pretty printer used for Yul output."""

from __future__ import annotations

DEFAULT_INDENT_WIDTH = 4


def pretty_curly_print(source: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """Reflow curly-brace source into one block per indentation level.

    Every ``{`` ends its line and opens a new level, every ``}`` sits on
    its own line at the enclosing level. Existing line breaks are kept,
    whitespace at line edges is normalized and blank lines are dropped.
    Double-quoted string literals are copied through untouched.

    Args:
        source: Source text, e.g. a Yul object.
        indent_width: Spaces per indentation level.

    Returns:
        The reformatted text, without a trailing newline.

    Example:
        >>> print(pretty_curly_print('object "A" { code { stop() } }'))
        object "A" {
            code {
                stop()
            }
        }
    """
    lines: list[str] = []
    depth = 0
    buffer: list[str] = []
    in_string = False
    escaped = False

    def flush() -> None:
        text = "".join(buffer).strip()
        buffer.clear()
        if text:
            lines.append(" " * (depth * indent_width) + text)

    for char in source:
        if in_string:
            # String literal contents are copied verbatim
            buffer.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
            buffer.append(char)
        elif char == "{":
            head = "".join(buffer).strip()
            buffer[:] = [f"{head} {{" if head else "{"]
            flush()
            depth += 1
        elif char == "}":
            flush()
            # Unbalanced input clamps at the outermost level
            depth = max(depth - 1, 0)
            buffer.append("}")
            flush()
        elif char == "\n":
            flush()
        else:
            buffer.append(char)
    flush()

    return "\n".join(lines)

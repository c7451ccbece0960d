"""Toggle the ``x `` completion marker of a single line."""

import re

import logfire

from ..lines import is_completed_line, leading_whitespace, require_text, splice_lines

_MARKER_RE = re.compile(r"^(\s*)x\s+", re.IGNORECASE)


def toggle_completion(content: str, raw_line: str) -> str:
    """Flip the completion marker on the first line equal to ``raw_line``.

    Works the same for top-level items and indented event subtasks; the
    original indentation is kept either way.
    """
    require_text("content", content)
    require_text("raw_line", raw_line)
    if not raw_line:
        return content

    lines = content.split("\n")
    try:
        index = lines.index(raw_line)
    except ValueError:
        logfire.debug("Toggle target not found", raw_line=raw_line)
        return content

    line = lines[index]
    if is_completed_line(line):
        updated = _MARKER_RE.sub(r"\1", line, count=1)
    else:
        updated = f"{leading_whitespace(line)}x {line.lstrip()}"

    return "\n".join(splice_lines(lines, index, 1, [updated]))

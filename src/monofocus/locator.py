"""Locate date blocks and sections inside the flat line array."""

from .lines import is_date_header, is_section_header, is_separator
from .schemas import DateBlock, SectionRange


def _block_end(lines: list[str], start: int) -> int:
    for i in range(start + 1, len(lines)):
        if is_date_header(lines[i]):
            return i
    return len(lines)


def find_date_block(lines: list[str], date: str) -> DateBlock | None:
    """Find the first date block whose header starts with ``date``.

    The block runs to the next date header of any date, or end of document.
    """
    for i, line in enumerate(lines):
        if line.strip().startswith(date):
            return DateBlock(start=i, end=_block_end(lines, i))
    return None


def find_all_date_blocks(lines: list[str], date: str) -> list[DateBlock]:
    """Find every block for ``date``, in document order.

    Dirty documents can carry the same date header more than once.
    """
    blocks: list[DateBlock] = []
    i = 0
    while i < len(lines):
        if lines[i].strip().startswith(date):
            block = DateBlock(start=i, end=_block_end(lines, i))
            blocks.append(block)
            i = block.end
        else:
            i += 1
    return blocks


def find_section_within_block(
    lines: list[str], start: int, end: int, header: str
) -> SectionRange | None:
    """Find a section header (e.g. ``[DOING]``) inside ``[start, end)``.

    Args:
        lines: Document lines
        start: First line of the date block
        end: Exclusive end of the date block
        header: Header text including brackets

    Returns:
        SectionRange whose end is the next section or date header, or None
    """
    header_index = None
    for i in range(start, end):
        if lines[i].strip() == header:
            header_index = i
            break
    if header_index is None:
        return None

    for i in range(header_index + 1, end):
        if is_section_header(lines[i]) or is_date_header(lines[i]):
            return SectionRange(header_index=header_index, end_index=i)
    return SectionRange(header_index=header_index, end_index=end)


def body_start(lines: list[str], start: int) -> int:
    """Index right after a date header and its optional ``====`` line."""
    index = start + 1
    if index < len(lines) and is_separator(lines[index]):
        index += 1
    return index


def get_section_lines(content: str, date: str, header: str) -> list[str]:
    """Trimmed non-blank, non-separator lines of one section of one date."""
    lines = content.split("\n")
    block = find_date_block(lines, date)
    if block is None:
        return []
    section = find_section_within_block(lines, block.start, block.end, header)
    if section is None:
        return []

    out = []
    for line in lines[section.header_index + 1 : section.end_index]:
        trimmed = line.strip()
        if not trimmed or is_separator(trimmed):
            continue
        out.append(trimmed)
    return out

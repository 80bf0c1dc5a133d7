"""
Label-driven snippet locators.

Review replies introduce their snippets with loose labels such as
"Recommended Fix:" or "Bad Code". These helpers find the fence that belongs
to a label. Labels match case-insensitively as literal substrings, so
"Fix" also matches inside "Suggested Fix".
"""

import re

from .fences import FENCE_MARKER, FENCE_PATTERN

# Max characters allowed between a label and the fence it introduces
LOOKAHEAD_CHARS = 200

# Max characters captured after a label by the inline locator
INLINE_CAPTURE_CHARS = 1000


def labeled_block_pattern(label: str) -> re.Pattern:
    """Compile the "label, up to 200 chars, then a fence" pattern for label."""
    return re.compile(
        re.escape(label) + r'.{0,%d}?```(?:[\w+-]*)\n(.*?)```' % LOOKAHEAD_CHARS,
        re.IGNORECASE | re.DOTALL,
    )


def _inline_pattern(label: str) -> re.Pattern:
    # Label, optional ":"/"-"/whitespace run, then text up to a blank line
    # or the end of the document.
    return re.compile(
        re.escape(label) + r'[:\s\-]*\n?\s*(.{1,%d}?)(?=\n\n|\Z)' % INLINE_CAPTURE_CHARS,
        re.IGNORECASE | re.DOTALL,
    )


def find_labeled_block(text: str, label: str) -> str:
    """
    Find the first fence that follows label within the lookahead window.

    Args:
        text: The raw review text
        label: Literal label, e.g. "Recommended Fix"

    Returns:
        The trimmed fence body, or "" if the label has no nearby fence
    """
    match = labeled_block_pattern(label).search(text)
    if match:
        return match.group(1).strip()
    return ""


def find_inline_code_after_label(text: str, label: str) -> str:
    """
    Find a fence written directly after label as inline text.

    The text following the label only counts when it opens with a fence
    marker; plain prose after a label is never returned as a snippet.
    """
    match = _inline_pattern(label).search(text)
    if not match:
        return ""

    captured = match.group(1).strip()
    if not captured.startswith(FENCE_MARKER):
        return ""

    fenced = FENCE_PATTERN.search(captured)
    if fenced:
        return fenced.group(2).strip()
    return ""

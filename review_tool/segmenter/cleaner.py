"""
Commentary cleaner.

Strips labeled snippets and every remaining code fence from a review so
the rest can be shown as plain commentary.
"""

import re
from typing import Sequence

from .fences import FENCE_PATTERN
from .locators import labeled_block_pattern

# Removed from commentary regardless of which labels extraction matched
CLEANING_LABELS = ("Recommended Fix", "Improved Code", "Bad Code", "Fix", "Suggested Fix")

# Unbalanced markers left over once every complete fence is gone
STRAY_MARKER_PATTERN = re.compile(r'`{3,}')


def clean_commentary(raw_text: str, labels: Sequence[str] = CLEANING_LABELS) -> str:
    """
    Remove labeled snippets and all code fences from raw_text.

    Every occurrence of each label followed by a fence is removed, then any
    fence that no label claimed, then stray fence markers.

    Args:
        raw_text: The raw review text
        labels: Labels whose following fence is removed along with them

    Returns:
        The trimmed commentary, possibly ""
    """
    out = raw_text
    for label in labels:
        out = labeled_block_pattern(label).sub("", out)

    out = FENCE_PATTERN.sub("", out)
    out = STRAY_MARKER_PATTERN.sub("", out)
    return out.strip()

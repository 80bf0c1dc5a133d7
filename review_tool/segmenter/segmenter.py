"""
Review segmentation.

Resolves the recommended fix and the bad code snippet of a review reply
using a fixed label priority, falling back to plain fence order.
"""

from dataclasses import dataclass
from typing import Optional

from .fences import extract_fenced_blocks
from .locators import find_inline_code_after_label, find_labeled_block

# First match wins; earlier labels take precedence for the fix
PRIORITY_LABELS = (
    "Recommended Fix",
    "Recommended Fix:",
    "Improved Code",
    "Suggested Fix",
    "Fix",
    "Bad Code",
)

BAD_CODE_LABEL = "Bad Code"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Snippets extracted from a review.

    An empty string means nothing was extracted for that field, not an
    empty code block.
    """
    improved: str = ""
    bad: str = ""


def _find_fix(raw_text: str, label: str) -> str:
    """Labeled fence for label, trying the inline form second."""
    return find_labeled_block(raw_text, label) or find_inline_code_after_label(raw_text, label)


def _is_bad_code_label(label: str) -> bool:
    return BAD_CODE_LABEL.lower() in label.lower()


def segment_review(raw_text: str, structured_fix: Optional[str] = None) -> ExtractionResult:
    """
    Extract the recommended fix and the bad code snippet from a review.

    Args:
        raw_text: The review text returned by the service
        structured_fix: Improved code supplied by the service outside the
            text; when non-empty it always wins for the fix

    Returns:
        ExtractionResult with "" for anything not found
    """
    improved = ""
    if isinstance(structured_fix, str) and structured_fix.strip():
        improved = structured_fix.strip()
    bad = ""

    for label in PRIORITY_LABELS:
        if improved and bad:
            break
        if not improved:
            improved = _find_fix(raw_text, label)
        if not bad and _is_bad_code_label(label):
            bad = find_labeled_block(raw_text, BAD_CODE_LABEL)

    # Unlabeled reply: first fence is the fix, second the bad code
    if not improved or not bad:
        blocks = extract_fenced_blocks(raw_text)
        if not improved and blocks:
            improved = blocks[0]
        if not bad and len(blocks) >= 2:
            bad = blocks[1]

    return ExtractionResult(improved=improved, bad=bad)

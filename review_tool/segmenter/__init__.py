"""Segmenter module - splits review text into commentary and code snippets."""

from .fences import CodeFence, iter_fences, extract_fenced_blocks
from .locators import find_labeled_block, find_inline_code_after_label
from .cleaner import CLEANING_LABELS, clean_commentary
from .segmenter import PRIORITY_LABELS, ExtractionResult, segment_review

__all__ = [
    "CodeFence",
    "iter_fences",
    "extract_fenced_blocks",
    "find_labeled_block",
    "find_inline_code_after_label",
    "CLEANING_LABELS",
    "clean_commentary",
    "PRIORITY_LABELS",
    "ExtractionResult",
    "segment_review",
]

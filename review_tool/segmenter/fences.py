"""
Fenced code block extraction.

Finds triple-backtick code fences in markdown-like text, in document order.
"""

import re
from dataclasses import dataclass
from typing import Iterator

# Opening fence with optional language tag (js, c++, objective-c, ...),
# a line break, then the body up to the first closing fence.
FENCE_MARKER = "```"
FENCE_PATTERN = re.compile(r'```([\w+-]*)\n(.*?)```', re.DOTALL)


@dataclass(frozen=True)
class CodeFence:
    """A single fenced code block."""
    language: str
    body: str


def iter_fences(text: str) -> Iterator[CodeFence]:
    """
    Yield every fenced block in text, first fence first.

    Fences do not nest: the first closing marker terminates a block.
    """
    for match in FENCE_PATTERN.finditer(text):
        yield CodeFence(language=match.group(1), body=match.group(2).strip())


def extract_fenced_blocks(text: str) -> list[str]:
    """Return the trimmed bodies of all fenced blocks in document order."""
    return [fence.body for fence in iter_fences(text)]

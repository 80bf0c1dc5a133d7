"""
Prompt builder for review requests.

Builds the prompt sent to the LLM, asking for commentary plus labeled
"Bad Code" and "Recommended Fix" snippets.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_LANGUAGE = "javascript"

DEFAULT_SAMPLE_CODE = """\
function sum() {
  return 1 + 1
}"""


@dataclass
class ReviewPromptContext:
    """Context for building a review prompt."""
    source_code: str
    source_filename: str = "snippet.js"
    language: str = DEFAULT_LANGUAGE


SYSTEM_PROMPT = """\
You are an expert code reviewer with deep knowledge of software design,
security and performance. Review the code you are given and explain the
problems you find in clear, concise prose.

FORMAT YOUR ANSWER AS FOLLOWS:
1. Start with your review commentary in markdown
2. Under a line reading "Bad Code:", quote the problematic snippet in a
   fenced code block
3. Under a line reading "Recommended Fix:", give the complete corrected code
   in a fenced code block
4. Use exactly one fenced block after each of these labels
5. If the code has no problems, say so and repeat it under "Recommended Fix:"
"""


def _numbered_source(code: str) -> str:
    """Add line numbers to source code."""
    lines = code.split('\n')
    width = len(str(len(lines)))
    return '\n'.join(f"{i+1:>{width}} | {line}" for i, line in enumerate(lines))


def build_review_prompt(context: ReviewPromptContext) -> str:
    """Build the user prompt for a review request."""
    parts = []

    parts.append(f"=== Source: {context.source_filename} ({context.language}) ===")
    parts.append(f"```{context.language}")
    parts.append(_numbered_source(context.source_code))
    parts.append("```")
    parts.append("")

    parts.append("Line numbers are for reference only; do not include them in your code blocks.")
    parts.append("Review the code above.")

    return '\n'.join(parts)


def load_review_context(
    source_path: Path,
    language: str = DEFAULT_LANGUAGE,
) -> ReviewPromptContext:
    """Load review context from a source file."""
    path = Path(source_path)
    return ReviewPromptContext(
        source_code=path.read_text(),
        source_filename=path.name,
        language=language,
    )

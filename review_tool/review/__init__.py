"""Review module - Claude API integration for code review."""

from .prompt_builder import build_review_prompt, ReviewPromptContext, load_review_context
from .response_parser import ReviewPayload, parse_review_payload, parse_review_body
from .claude_client import ReviewClient, ReviewResponse, build_review_response

__all__ = [
    "build_review_prompt",
    "ReviewPromptContext",
    "load_review_context",
    "ReviewPayload",
    "parse_review_payload",
    "parse_review_body",
    "ReviewClient",
    "ReviewResponse",
    "build_review_response",
]

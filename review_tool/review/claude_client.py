"""
Claude API client for code review.

Uses the Anthropic SDK to call the Claude API and splits the reply into
commentary, recommended fix and bad code.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import anthropic

from ..segmenter import clean_commentary, segment_review
from .prompt_builder import (
    DEFAULT_LANGUAGE,
    SYSTEM_PROMPT,
    ReviewPromptContext,
    build_review_prompt,
    load_review_context,
)
from .response_parser import ReviewPayload

DEFAULT_MODEL = "claude-sonnet-4-20250514"

# Seconds to wait for a review before giving up
DEFAULT_TIMEOUT = 120.0

ERROR_ADVISORY = (
    "There was an error getting the review. "
    "Check the log output and ensure the review service is reachable."
)


@dataclass
class ReviewResponse:
    """Response from a review request."""
    commentary: str
    improved_code: str
    bad_code: str
    raw_response: str
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0

    @classmethod
    def failed(cls, model: str = "") -> "ReviewResponse":
        """Response shown when the review could not be fetched."""
        return cls(
            commentary=ERROR_ADVISORY,
            improved_code="",
            bad_code="",
            raw_response="",
            model=model,
        )


def build_review_response(
    payload: ReviewPayload,
    model: str = "",
    input_tokens: int = 0,
    output_tokens: int = 0,
) -> ReviewResponse:
    """Segment a payload into a ReviewResponse."""
    result = segment_review(payload.raw_text, payload.structured_fix)
    return ReviewResponse(
        commentary=clean_commentary(payload.raw_text),
        improved_code=result.improved,
        bad_code=result.bad,
        raw_response=payload.raw_text,
        model=model,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
    )


class ReviewClient:
    """
    Client for calling Claude API to review code.

    Usage:
        client = ReviewClient()
        response = client.review(source_path="app.js")
        print(response.commentary)
        print(response.improved_code)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4096,
        temperature: float = 0.0,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.client = anthropic.Anthropic(api_key=api_key, timeout=timeout)
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    def review(
        self,
        source_path: Path,
        language: str = DEFAULT_LANGUAGE,
    ) -> ReviewResponse:
        """Request a review of the given source file."""
        context = load_review_context(source_path, language)
        return self.review_from_context(context)

    def review_from_context(self, context: ReviewPromptContext) -> ReviewResponse:
        """Request a review using a pre-built context."""
        user_prompt = build_review_prompt(context)

        message = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=SYSTEM_PROMPT,
            messages=[
                {"role": "user", "content": user_prompt}
            ],
        )

        raw_response = "".join(
            block.text for block in message.content if block.type == "text"
        )

        return build_review_response(
            ReviewPayload(raw_text=raw_response),
            model=self.model,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        )

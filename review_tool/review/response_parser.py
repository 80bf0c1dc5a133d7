"""
Response parser for review payloads.

The review service answers either with a JSON object carrying a "review"
text and an optional "improvedCode" field, or with a plain string. This
module normalizes both into the raw text and structured fix that the
segmenter consumes.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ReviewPayload:
    """Normalized review payload."""
    raw_text: str
    structured_fix: Optional[str] = None


def parse_review_payload(data: Any) -> ReviewPayload:
    """
    Normalize a service payload.

    Args:
        data: Decoded response body: a dict, a string or any JSON value

    Returns:
        ReviewPayload; any other JSON value becomes its pretty-printed text
    """
    if isinstance(data, dict) and data.get("review") is not None:
        review = data["review"]
        raw_text = review if isinstance(review, str) else json.dumps(review, indent=2)
    elif isinstance(data, str):
        raw_text = data
    else:
        raw_text = json.dumps(data, indent=2)

    structured_fix = None
    if isinstance(data, dict):
        improved = data.get("improvedCode")
        # Only a string counts as code; anything else is ignored
        if isinstance(improved, str) and improved:
            structured_fix = improved

    return ReviewPayload(raw_text=raw_text, structured_fix=structured_fix)


def parse_review_body(body: str) -> ReviewPayload:
    """
    Normalize an undecoded response body.

    Bodies that are not valid JSON are treated as the review text itself.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return ReviewPayload(raw_text=body)
    return parse_review_payload(data)

"""
Review Tool - Main CLI entry point.

Review flow:
1. Read the source code (file, stdin or the built-in sample)
2. Call Claude API for a review, or load a saved review payload
3. Split the reply into commentary, recommended fix and bad code
4. Print the three parts and optionally save them to --output dir
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .review.claude_client import (
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    ReviewClient,
    ReviewResponse,
    build_review_response,
)
from .review.prompt_builder import DEFAULT_LANGUAGE, DEFAULT_SAMPLE_CODE, ReviewPromptContext
from .review.response_parser import parse_review_body

# File extension used when saving the recommended fix
LANGUAGE_EXTENSIONS = {
    "javascript": "js",
    "typescript": "ts",
    "python": "py",
    "c": "c",
    "cpp": "cpp",
    "java": "java",
    "go": "go",
    "rust": "rs",
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Review Tool - AI code review with extracted fixes"
    )
    parser.add_argument("--source", help="Path to the code to review ('-' for stdin)")
    parser.add_argument("--language", default=DEFAULT_LANGUAGE, help="Language of the code")
    parser.add_argument("--response-file", help="Segment a saved review payload instead of calling the API")
    parser.add_argument("--output", help="Directory to save the review, fix and report to")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="Claude model to use")
    parser.add_argument("--max-tokens", type=int, default=4096, help="Max tokens in the review")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Request timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def log(msg, verbose=True):
    if verbose:
        print(f"[REVIEW] {msg}")


def read_source(source: Optional[str]) -> tuple[str, str]:
    """
    Resolve the code to review.

    Returns (source_code, filename). No --source means the sample snippet.
    """
    if source is None:
        return DEFAULT_SAMPLE_CODE, "sample.js"
    if source == "-":
        return sys.stdin.read(), "stdin"
    path = Path(source)
    return path.read_text(encoding="utf-8"), path.name


def format_code_block(title: str, code: str, language: str) -> str:
    return f"=== {title} ===\n```{language}\n{code}\n```"


def format_review(response: ReviewResponse, language: str = DEFAULT_LANGUAGE) -> str:
    """Render the labeled snippets that were found, then the commentary."""
    parts = []
    if response.improved_code:
        parts.append(format_code_block("Recommended Fix", response.improved_code, language))
    if response.bad_code:
        parts.append(format_code_block("Bad Code", response.bad_code, language))
    if not response.improved_code and not response.bad_code:
        parts.append("No code snippets extracted.")
    if response.commentary:
        parts.append(response.commentary)
    return "\n\n".join(parts)


def write_outputs(output_dir: Path, response: ReviewResponse, language: str) -> list[Path]:
    """Save the review parts to output_dir. Returns the files written."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    review_file = output_dir / "review.md"
    review_file.write_text(response.commentary + "\n")
    written.append(review_file)

    if response.improved_code:
        ext = LANGUAGE_EXTENSIONS.get(language.lower(), "txt")
        fix_file = output_dir / f"recommended_fix.{ext}"
        fix_file.write_text(response.improved_code + "\n")
        written.append(fix_file)

    report = {
        "model": response.model,
        "language": language,
        "tokens": {
            "input": response.input_tokens,
            "output": response.output_tokens,
        },
        "commentary": response.commentary,
        "improved_code": response.improved_code,
        "bad_code": response.bad_code,
    }
    report_file = output_dir / "review_report.json"
    report_file.write_text(json.dumps(report, indent=2))
    written.append(report_file)

    return written


def main(argv=None):
    args = parse_args(argv)

    if args.response_file:
        # --- Offline: segment a saved payload ---
        response_path = Path(args.response_file).resolve()
        if not response_path.exists():
            print(f"Error: --response-file path does not exist: {response_path}")
            return 1
        log(f"Loading review payload from {response_path}", args.verbose)
        try:
            body = response_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read --response-file: {e}")
            return 1
        payload = parse_review_body(body)
        response = build_review_response(payload)
        exit_code = 0
    else:
        # --- Online: ask Claude for a review ---
        if args.source not in (None, "-") and not Path(args.source).exists():
            print(f"Error: --source path does not exist: {args.source}")
            return 1

        try:
            source_code, filename = read_source(args.source)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read --source: {e}")
            return 1
        log(f"Reviewing {filename} ({len(source_code)} chars, {args.language})", args.verbose)

        context = ReviewPromptContext(
            source_code=source_code,
            source_filename=filename,
            language=args.language,
        )

        log("Calling Claude API...", args.verbose)
        try:
            client = ReviewClient(
                model=args.model,
                max_tokens=args.max_tokens,
                timeout=args.timeout,
            )
            response = client.review_from_context(context)
            exit_code = 0
        except Exception as e:
            log(f"API error: {e}", True)
            response = ReviewResponse.failed(model=args.model)
            exit_code = 1
        else:
            log(
                f"Received review ({response.input_tokens} in, {response.output_tokens} out)",
                args.verbose,
            )

    log(
        f"Extracted fix: {len(response.improved_code)} chars, "
        f"bad code: {len(response.bad_code)} chars",
        args.verbose,
    )
    print(format_review(response, args.language))

    if args.output and exit_code == 0:
        for path in write_outputs(Path(args.output).resolve(), response, args.language):
            print(f"Saved {path}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

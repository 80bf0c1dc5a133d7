#!/usr/bin/env python3
"""
Tests for review payload normalization.

Run with: python tests/test_response_parser.py
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from review_tool.review.response_parser import (
    ReviewPayload,
    parse_review_payload,
    parse_review_body,
)


class TestParseReviewPayload:
    """Tests for decoded payloads."""

    def test_review_and_improved_code(self):
        payload = parse_review_payload({"review": "Looks fine.", "improvedCode": "x = 1"})
        assert payload == ReviewPayload(raw_text="Looks fine.", structured_fix="x = 1")

    def test_review_only(self):
        payload = parse_review_payload({"review": "Looks fine."})
        assert payload.raw_text == "Looks fine."
        assert payload.structured_fix is None

    def test_empty_improved_code(self):
        payload = parse_review_payload({"review": "ok", "improvedCode": ""})
        assert payload.structured_fix is None

    def test_non_string_improved_code(self):
        payload = parse_review_payload({"review": "ok", "improvedCode": {"code": "x"}})
        assert payload.structured_fix is None

    def test_plain_string(self):
        payload = parse_review_payload("Recommended Fix:\n```\nx\n```")
        assert payload.raw_text == "Recommended Fix:\n```\nx\n```"
        assert payload.structured_fix is None

    def test_object_without_review(self):
        data = {"message": "done", "improvedCode": "y = 2"}
        payload = parse_review_payload(data)
        assert payload.raw_text == json.dumps(data, indent=2)
        assert payload.structured_fix == "y = 2"

    def test_null_review(self):
        data = {"review": None}
        assert parse_review_payload(data).raw_text == json.dumps(data, indent=2)

    def test_other_json_value(self):
        assert parse_review_payload([1, 2]).raw_text == json.dumps([1, 2], indent=2)
        assert parse_review_payload(None).raw_text == "null"


class TestParseReviewBody:
    """Tests for undecoded response bodies."""

    def test_json_object(self):
        body = json.dumps({"review": "Nice.", "improvedCode": "z()"})
        assert parse_review_body(body) == ReviewPayload("Nice.", "z()")

    def test_json_string(self):
        assert parse_review_body('"Nice."').raw_text == "Nice."

    def test_plain_text(self):
        body = "Looks okay.\n\nRecommended Fix:\n```js\nreturn 2\n```"
        assert parse_review_body(body) == ReviewPayload(raw_text=body)


def run_tests():
    """Run all tests and report results."""
    test_classes = [
        TestParseReviewPayload,
        TestParseReviewBody,
    ]

    total_tests = 0
    passed_tests = 0
    failed_tests = []

    for test_class in test_classes:
        print(f"\n{'='*60}")
        print(f"Running {test_class.__name__}")
        print('='*60)

        instance = test_class()
        test_methods = [m for m in dir(instance) if m.startswith('test_')]

        for method_name in test_methods:
            total_tests += 1
            method = getattr(instance, method_name)

            try:
                method()
                print(f"  ✓ {method_name}")
                passed_tests += 1
            except AssertionError as e:
                print(f"  ✗ {method_name}")
                print(f"    AssertionError: {e}")
                failed_tests.append((test_class.__name__, method_name, str(e)))
            except Exception as e:
                print(f"  ✗ {method_name}")
                print(f"    {type(e).__name__}: {e}")
                failed_tests.append((test_class.__name__, method_name, str(e)))

    print(f"\n{'='*60}")
    print(f"RESULTS: {passed_tests}/{total_tests} tests passed")
    print('='*60)

    if failed_tests:
        print("\nFailed tests:")
        for class_name, method_name, error in failed_tests:
            print(f"  - {class_name}.{method_name}: {error}")
        return 1
    else:
        print("\nAll tests passed!")
        return 0


if __name__ == "__main__":
    sys.exit(run_tests())

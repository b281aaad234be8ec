"""
Functional tests: convert JSON test cases and match patterns in the printed SDL.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_graphql.pipeline import ConverterConfig, convert, to_sdl

TEST_DATA_DIR = Path(__file__).parent / "test_data"


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    test_cases = []

    for json_file in sorted((TEST_DATA_DIR / "functional").glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _load_schemas(test_case):
    """Load schemas from test case (either inline or from files)."""
    if "schemas" in test_case:
        return test_case["schemas"]
    elif "schema_files" in test_case:
        schemas = []
        for schema_file in test_case["schema_files"]:
            with open(TEST_DATA_DIR / schema_file) as f:
                schemas.append(json.load(f))
        return schemas
    else:
        raise ValueError("Test case must have either 'schemas' or 'schema_files'")


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_conversion(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    config = ConverterConfig.from_dict(test_case.get("config", {}))
    sdl = to_sdl(convert(_load_schemas(test_case), config=config))

    for pattern in test_case.get("expected_contains", []):
        assert pattern in sdl, f"Expected pattern '{pattern}' not found in SDL:\n{sdl}"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in sdl, f"Unexpected pattern '{pattern}' found in SDL:\n{sdl}"


if __name__ == "__main__":
    pytest.main([__file__])

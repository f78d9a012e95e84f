"""
Pytest Configuration and Shared Fixtures

Provides reusable test fixtures for all test modules:
- Bug pattern data lines and parsed records
- Temporary output and example directories
- Generator configuration
"""

import pytest
import os
import sys
from typing import Callable, Dict

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from DocGen.Config.config_loader import GeneratorConfig
from DocGen.Parse.record_parser import parse_record, BugPattern


# ============================================================================
# Data Line Fixtures
# ============================================================================

DEFAULT_FIELDS: Dict[str, str] = {
    "checker_id": "com.example.bugpatterns.ArrayEquals",
    "name": "ArrayEquals",
    "alt_names": "",
    "category": "JDK",
    "severity": "ERROR",
    "maturity": "MATURE",
    "suppressibility": "SUPPRESS_WARNINGS",
    "custom_annotation": "",
    "summary": "Reference equality used to compare arrays",
    "explanation": "Arrays do not override equals.\\nUse Arrays.equals instead.",
}

FIELD_ORDER = [
    "checker_id", "name", "alt_names", "category", "severity",
    "maturity", "suppressibility", "custom_annotation", "summary", "explanation",
]


@pytest.fixture
def make_line() -> Callable[..., str]:
    """Factory fixture building a tab-delimited data line with field overrides."""
    def _make_line(**overrides: str) -> str:
        fields = dict(DEFAULT_FIELDS)
        fields.update(overrides)
        return "\t".join(fields[key] for key in FIELD_ORDER)
    return _make_line


@pytest.fixture
def sample_line(make_line) -> str:
    """Well-formed line for the ArrayEquals pattern."""
    return make_line()


@pytest.fixture
def sample_pattern(sample_line) -> BugPattern:
    """Parsed ArrayEquals pattern."""
    return parse_record(sample_line)


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def output_dir(tmp_path) -> str:
    """Temporary output directory for generated pages."""
    out = tmp_path / "out"
    out.mkdir()
    return str(out)


@pytest.fixture
def example_base(tmp_path) -> str:
    """Example tree with two ArrayEquals cases and an unrelated file."""
    base = tmp_path / "examples"
    pkg_dir = base / "com" / "example" / "bugpatterns"
    pkg_dir.mkdir(parents=True)
    (pkg_dir / "ArrayEqualsPositiveCase1.java").write_text(
        "class Positive {}", encoding="utf-8"
    )
    (pkg_dir / "ArrayEqualsNegativeCase1.java").write_text(
        "class Negative {}", encoding="utf-8"
    )
    (pkg_dir / "ArrayHashCodePositiveCase1.java").write_text(
        "class Other {}", encoding="utf-8"
    )
    return str(base)


@pytest.fixture
def create_data_file(tmp_path):
    """Factory fixture writing data lines to a temporary file."""
    def _create_file(lines, filename: str = "bugpatterns.txt") -> str:
        file_path = tmp_path / filename
        file_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return str(file_path)
    return _create_file


@pytest.fixture
def base_config(output_dir) -> GeneratorConfig:
    """Config writing into output_dir with no examples."""
    return GeneratorConfig(output_dir=output_dir)

"""Tests for JSON Schema validation of the validation report."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

import jsonschema
import pytest

from codecache.layout import HeaderLayout
from codecache.processor import validate

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
REPORT_SCHEMA_PATH: Path = SCHEMAS_DIR / "report.schema.json"

CacheBuilder: TypeAlias = Callable[..., bytes]


@pytest.fixture()
def report_schema() -> dict[str, Any]:
    """Load the report JSON Schema."""
    return json.loads(REPORT_SCHEMA_PATH.read_text(encoding="utf-8"))


def test_schema_is_valid(report_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(report_schema)


@pytest.mark.parametrize("pointer_width", [32, 64])
def test_report_conforms_to_schema(
    report_schema: dict[str, Any], cache_builder: CacheBuilder, pointer_width: int
) -> None:
    layout = HeaderLayout(pointer_width=pointer_width)  # type: ignore[arg-type]
    report = validate(cache_builder(b"payload", layout=layout, checksum=0xFFFFFFFF), layout)

    jsonschema.validate(instance=report.to_dict(path="code.jsc"), schema=report_schema)


def test_report_without_path_conforms(report_schema: dict[str, Any], cache_builder: CacheBuilder) -> None:
    report = validate(cache_builder(), HeaderLayout())

    jsonschema.validate(instance=report.to_dict(), schema=report_schema)


def test_schema_rejects_unknown_verdict(report_schema: dict[str, Any], cache_builder: CacheBuilder) -> None:
    payload = validate(cache_builder(), HeaderLayout()).to_dict()
    payload["verdict"] = "Maybe"

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=report_schema)

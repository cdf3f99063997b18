"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from typing import Any

import click
from pydantic import BaseModel


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def emit_model(model: BaseModel) -> None:
    """Output a validated response model, using its serialization aliases."""
    emit_json(model.model_dump(mode="json", by_alias=True))

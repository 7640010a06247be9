"""Generate JSON Schema and docs for the softverify YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from softverify.config import VerifyConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    schema = VerifyConfig.model_json_schema()
    schema["title"] = "softverify config"
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")


def generate_schema_doc() -> str:
    props = generate_json_schema().get("properties", {})

    lines: list[str] = []
    lines.append("# softverify YAML Schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("String values may reference environment variables as `${VAR}`")
    lines.append("or `${VAR:-default}`.")
    lines.append("")
    lines.append("## Keys")
    for name, prop in props.items():
        lines.append(
            f"- `{name}`: {prop.get('type', 'any')} (default: `{prop.get('default')}`)"
        )
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())

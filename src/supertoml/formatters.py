"""Output formatters for resolved values.

Every formatter takes the flat mapping returned by
:meth:`supertoml.Resolver.resolve` and returns text. Keys are written in
sorted order so that output is deterministic.

Formats:
    - toml: TOML document
    - json: pretty-printed JSON object
    - dotenv: ``KEY=value`` lines
    - exports: ``export "KEY=value"`` lines for POSIX shells
    - tfvars: Terraform variable definitions
"""

import json
import re
from datetime import date, datetime, time
from typing import Any, Callable, Dict, Mapping

import tomli_w

from .exceptions import NotFoundError

_HCL_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def _sorted(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _sorted(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_sorted(item) for item in value]
    return value


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _scalar_text(value: Any) -> str:
    """Plain-text rendering used by the dotenv and exports formats."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (list, dict)):
        return json.dumps(_sorted(value), separators=(",", ":"), default=_json_default)
    return str(value)


def format_as_toml(values: Mapping[str, Any]) -> str:
    """Format values as a TOML document."""
    return tomli_w.dumps(_sorted(dict(values)))


def format_as_json(values: Mapping[str, Any]) -> str:
    """Format values as a pretty-printed JSON object."""
    return json.dumps(dict(values), indent=2, sort_keys=True, default=_json_default)


def format_as_dotenv(values: Mapping[str, Any]) -> str:
    """Format values as ``KEY=value`` lines."""
    return "\n".join(f"{key}={_scalar_text(values[key])}" for key in sorted(values))


def format_as_exports(values: Mapping[str, Any]) -> str:
    """Format values as ``export "KEY=value"`` lines.

    Double quotes inside keys or values are escaped.
    """
    lines = []
    for key in sorted(values):
        assignment = f"{key}={_scalar_text(values[key])}".replace('"', '\\"')
        lines.append(f'export "{assignment}"')
    return "\n".join(lines)


def _hcl_key(key: str) -> str:
    if _HCL_IDENTIFIER.match(key):
        return key
    return json.dumps(key, ensure_ascii=False)


def _hcl_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (datetime, date, time)):
        return json.dumps(value.isoformat())
    if isinstance(value, list):
        return "[" + ", ".join(_hcl_value(item) for item in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        pairs = ", ".join(f"{_hcl_key(key)} = {_hcl_value(value[key])}" for key in sorted(value))
        return "{ " + pairs + " }"
    raise TypeError(f"Cannot format value of type {type(value).__name__} as tfvars")


def format_as_tfvars(values: Mapping[str, Any]) -> str:
    """Format values as Terraform ``key = value`` variable definitions."""
    return "\n".join(f"{_hcl_key(key)} = {_hcl_value(values[key])}" for key in sorted(values))


FORMATTERS: Dict[str, Callable[[Mapping[str, Any]], str]] = {
    "toml": format_as_toml,
    "json": format_as_json,
    "dotenv": format_as_dotenv,
    "exports": format_as_exports,
    "tfvars": format_as_tfvars,
}


def get_formatter(name: str) -> Callable[[Mapping[str, Any]], str]:
    """Look up a formatter by format name.

    Raises:
        NotFoundError: If the format is unknown
    """
    try:
        return FORMATTERS[name]
    except KeyError:
        raise NotFoundError(
            f"Unknown output format: {name}",
            context={"format": name, "available_formats": sorted(FORMATTERS)},
        ) from None

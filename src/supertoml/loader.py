"""Document loading.

Documents are TOML by default. YAML (``.yaml``/``.yml``) and JSON (``.json``)
documents are accepted as well and produce the same value tree.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import FileReadError, InvalidTableTypeError, ParseError, TableNotFoundError
from .values import clone, is_table

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a document file into its root table.

    Args:
        path: Path to a TOML, YAML or JSON document

    Returns:
        Root table of the document

    Raises:
        FileReadError: If the file cannot be read
        ParseError: If the content cannot be decoded or parsed, or holds a null value
        InvalidTableTypeError: If the document root is not a table
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(str(path), e) from e
    except OSError as e:
        raise FileReadError(str(path), e) from e

    suffix = path.suffix.lower()
    try:
        if suffix in YAML_SUFFIXES:
            data = yaml.safe_load(content)
            if data is None:
                data = {}
        elif suffix in JSON_SUFFIXES:
            data = json.loads(content)
        else:
            data = tomllib.loads(content)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ParseError(str(path), e) from e

    if not is_table(data):
        raise InvalidTableTypeError("root", source=str(path))

    null_key = _find_null(data)
    if null_key is not None:
        raise ParseError(str(path), f"null values are not supported (at '{null_key}')")

    logger.debug(f"Loaded document {path} with {len(data)} top-level entries")
    return data


def extract_table(
    document: Dict[str, Any],
    table_name: str,
    source: str | None = None,
) -> Dict[str, Any]:
    """Extract a copy of a named table from a document.

    Args:
        document: Root table of a loaded document
        table_name: Name of the table to extract
        source: Optional file path, used in error messages

    Returns:
        Deep copy of the table

    Raises:
        TableNotFoundError: If no entry has that name
        InvalidTableTypeError: If the entry is not a table
    """
    if table_name not in document:
        raise TableNotFoundError(table_name, source=source)

    table = document[table_name]
    if not is_table(table):
        raise InvalidTableTypeError(table_name, source=source)

    return clone(table)


def _find_null(value: Any, key_path: str = "") -> str | None:
    """Return the dotted key of the first null in a value tree, if any.

    YAML and JSON allow nulls; documents are limited to what TOML can hold.
    """
    if value is None:
        return key_path or "root"
    if isinstance(value, dict):
        items = ((f"{key_path}.{key}" if key_path else str(key), item) for key, item in value.items())
    elif isinstance(value, list):
        items = ((f"{key_path}[{index}]", item) for index, item in enumerate(value))
    else:
        return None

    for item_path, item in items:
        found = _find_null(item, item_path)
        if found is not None:
            return found
    return None

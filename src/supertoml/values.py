"""Value model helpers.

Documents are represented with plain Python values: ``str``, ``int``,
``float``, ``bool``, ``list``, ``dict`` and the ``datetime``/``date``/``time``
types produced by the TOML parser. This module holds the small amount of glue
the resolver and plugins share: copying, merging and exposing values to
templates.
"""

import copy
from datetime import date, datetime, time
from typing import Any, Dict, List, Mapping, Union

Value = Union[str, int, float, bool, date, time, datetime, List[Any], Dict[str, Any]]

# Reserved per-table key holding plugin configuration
RESERVED_KEY = "_"


def clone(value: Any) -> Any:
    """Return a deep copy of a value so no container is shared across tables."""
    return copy.deepcopy(value)


def split_table(table: Mapping[str, Any]) -> tuple[Dict[str, Any], Any]:
    """Split a table into its own values and its reserved plugin config.

    Args:
        table: Table as found in the document

    Returns:
        Tuple of (local_values, plugin_config). ``plugin_config`` is ``{}`` when
        the table has no reserved key.
    """
    local_values = {key: clone(value) for key, value in table.items() if key != RESERVED_KEY}
    plugin_config = clone(table.get(RESERVED_KEY, {}))
    return local_values, plugin_config


def merge_values(target: Dict[str, Any], source: Mapping[str, Any], prefix: str = "") -> None:
    """Copy every entry of ``source`` into ``target``; the last writer wins.

    Args:
        target: Mapping to update in place
        source: Values to copy
        prefix: Optional string prepended to each key
    """
    for key, value in source.items():
        target[f"{prefix}{key}"] = clone(value)


def to_template_value(value: Any) -> Any:
    """Convert a value into what templates should see.

    Date and time values are exposed as their ISO 8601 text, matching how they
    are written in the source document. Containers are converted recursively.
    """
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_template_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_template_value(item) for item in value]
    return value


def is_table(value: Any) -> bool:
    return isinstance(value, dict)

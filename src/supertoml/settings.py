"""Runtime settings and their environment variable overrides.

Environment variable format: ``SUPERTOML_<SETTING>``

Examples:
    - SUPERTOML_PLUGINS=before,import,templating -> plugin_order
    - SUPERTOML_MAX_DEPTH=32 -> max_depth (0 disables the limit)
    - SUPERTOML_OUTPUT=json -> output_format
    - SUPERTOML_LOG_LEVEL=DEBUG -> log_level
"""

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from .exceptions import SuperTomlError

ENV_PREFIX = "SUPERTOML_"

DEFAULT_PLUGIN_ORDER = ("before", "import", "reference", "templating", "after")
DEFAULT_MAX_DEPTH = 64
DEFAULT_OUTPUT_FORMAT = "toml"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Settings that shape a resolution session.

    Attributes:
        plugin_order: Names of the plugins to run for each table, in order
        max_depth: Maximum nesting of table resolutions, or None for no limit
        output_format: Default output format for the command line
        log_level: Logging level name for the command line
    """

    plugin_order: tuple[str, ...] = field(default=DEFAULT_PLUGIN_ORDER)
    max_depth: int | None = DEFAULT_MAX_DEPTH
    output_format: str = DEFAULT_OUTPUT_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX) -> "Settings":
        """Build settings from defaults overridden by environment variables.

        Args:
            environ: Environment mapping (default: ``os.environ``)
            prefix: Environment variable prefix

        Returns:
            Settings instance

        Raises:
            SuperTomlError: If an override has an invalid value
        """
        environ = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        plugins = environ.get(f"{prefix}PLUGINS")
        if plugins is not None:
            overrides["plugin_order"] = tuple(
                name.strip() for name in plugins.split(",") if name.strip()
            )

        max_depth = environ.get(f"{prefix}MAX_DEPTH")
        if max_depth is not None:
            try:
                depth = int(max_depth)
            except ValueError as e:
                raise SuperTomlError(
                    f"Invalid value for {prefix}MAX_DEPTH: {max_depth!r}",
                    context={"variable": f"{prefix}MAX_DEPTH"},
                ) from e
            overrides["max_depth"] = depth if depth > 0 else None

        output_format = environ.get(f"{prefix}OUTPUT")
        if output_format:
            overrides["output_format"] = output_format.lower()

        log_level = environ.get(f"{prefix}LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        return cls(**overrides)

"""Jinja2 template rendering for document values.

Strings are rendered with the standard double-delimiter syntax:

- ``{{ expression }}`` - substitute a value
- ``{% statement %}`` - control flow (``if``, ``for``, ...)
- ``{# comment #}`` - dropped from the output

Two environment lookups are available as globals:

- ``env('NAME')`` - value of ``NAME``; rendering fails if it is unset
- ``env_or('NAME', 'fallback')`` - value of ``NAME``, or ``fallback``

Example:
    ```python
    renderer = TemplateRenderer()
    renderer.render("{{ host }}:{{ port }}", {"host": "localhost", "port": 8080})
    # 'localhost:8080'
    ```
"""

import logging
import os
from typing import Any, Mapping

from jinja2 import Environment, TemplateError as Jinja2TemplateError, TemplateSyntaxError as Jinja2SyntaxError

from .exceptions import SuperTomlError

logger = logging.getLogger(__name__)

TEMPLATE_MARKERS = ("{{", "{%", "{#")


class TemplateError(SuperTomlError):
    """Raised when a template cannot be parsed or rendered."""

    pass


class MissingEnvironmentVariable(Exception):
    """Raised by ``env()`` inside a template when the variable is unset."""

    pass


def has_template_markers(text: str) -> bool:
    """Check whether a string contains any template delimiter."""
    return any(marker in text for marker in TEMPLATE_MARKERS)


def env(name: str) -> str:
    """Template global: read a required environment variable."""
    if name not in os.environ:
        raise MissingEnvironmentVariable(f"Environment variable '{name}' is not set")
    return os.environ[name]


def env_or(name: str, default: Any) -> Any:
    """Template global: read an environment variable with a fallback."""
    return os.environ.get(name, default)


class TemplateRenderer:
    """Renders template strings against a variable mapping."""

    def __init__(self) -> None:
        self._jinja_env = Environment(
            variable_start_string="{{",
            variable_end_string="}}",
            block_start_string="{%",
            block_end_string="%}",
            comment_start_string="{#",
            comment_end_string="#}",
            # Configuration values, not HTML
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._jinja_env.globals["env"] = env
        self._jinja_env.globals["env_or"] = env_or

    def render(self, template: str, variables: Mapping[str, Any]) -> str:
        """Render a template string.

        Args:
            template: Template text
            variables: Variables visible to the template

        Returns:
            Rendered text

        Raises:
            TemplateError: If the template fails to parse or render
        """
        try:
            compiled = self._jinja_env.from_string(template)
        except Jinja2SyntaxError as e:
            raise TemplateError(
                f"Template syntax error at line {e.lineno}: {e.message}",
                context={"template": template},
            ) from e

        try:
            return compiled.render(dict(variables))
        except (Jinja2TemplateError, MissingEnvironmentVariable) as e:
            raise TemplateError(
                f"Template rendering error: {e}",
                context={"template": template},
            ) from e

"""Render template strings found in a table's values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from ..exceptions import PluginError
from ..templating import TemplateError, TemplateRenderer, has_template_markers
from .base import Plugin

if TYPE_CHECKING:
    from ..resolver import Resolver


class TemplatingPlugin(Plugin):
    """Render every templated string in the table against the resolved values.

    Strings containing ``{{``, ``{%`` or ``{#`` are rendered; arrays and
    tables are walked recursively; other values are left unchanged. The
    template variables are the values resolved so far plus the meta context
    ``_``, so a table only sees values published before this plugin runs.
    """

    name = "templating"

    def __init__(self) -> None:
        self._renderer = TemplateRenderer()

    def process(self, resolver: Resolver, local_values: Dict[str, Any], config: Any) -> None:
        variables = resolver.template_variables()
        rendered = {key: self._render_value(value, variables) for key, value in local_values.items()}

        local_values.clear()
        local_values.update(rendered)
        resolver.merge(local_values)

    def _render_value(self, value: Any, variables: Dict[str, Any]) -> Any:
        if isinstance(value, str):
            if not has_template_markers(value):
                return value
            try:
                return self._renderer.render(value, variables)
            except TemplateError as e:
                raise PluginError(self.name, e) from e
        elif isinstance(value, list):
            return [self._render_value(item, variables) for item in value]
        elif isinstance(value, dict):
            return {key: self._render_value(item, variables) for key, item in value.items()}
        else:
            return value

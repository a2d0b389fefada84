"""Jinja2 template renderer for generated source files.

Templates are looked up in an optional override directory first and then in
the templates bundled with the package.
"""

from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)
from jinja2.sandbox import SandboxedEnvironment

from nosqlkit.core.logging import get_logger
from nosqlkit.domain.services.property_types import python_type_for

logger = get_logger(__name__)


def python_type_filter(prop: Any) -> str:
    """Jinja filter mapping a property definition to its Python annotation."""
    return python_type_for(getattr(prop, "type", None))


class TemplateRenderer:
    """Jinja2 template renderer.

    Uses a sandboxed environment so override templates cannot execute
    arbitrary code. Output is source code, so autoescaping is disabled.
    """

    def __init__(self, templates_dir: str | Path | None = None) -> None:
        """Initialize the renderer.

        Args:
            templates_dir: Optional directory whose templates take precedence
                over the bundled ones.
        """
        loaders = []
        if templates_dir is not None:
            loaders.append(FileSystemLoader(str(templates_dir)))
        loaders.append(PackageLoader("nosqlkit.infrastructure.generation", "templates"))

        self.env = SandboxedEnvironment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["python_type"] = python_type_filter

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a named template with a context.

        Args:
            template_name: Template file name, e.g. ``model.py.j2``.
            context: Variables available to the template.

        Returns:
            Rendered text.

        Raises:
            TemplateNotFound: If no loader knows the template.
            TemplateSyntaxError: If template syntax is invalid.
            UndefinedError: If a required variable is missing.
        """
        try:
            template = self.env.get_template(template_name)
            rendered = template.render(**context)
            logger.debug("Template rendered", template=template_name)
            return rendered
        except TemplateNotFound:
            logger.error("Template not found", template=template_name)
            raise
        except TemplateSyntaxError as e:
            logger.error("Template syntax error", template=template_name, error=str(e), line=e.lineno)
            raise
        except UndefinedError as e:
            logger.error("Undefined variable in template", template=template_name, error=str(e))
            raise

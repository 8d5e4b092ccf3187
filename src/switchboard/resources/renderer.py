"""View template rendering with Jinja2."""

from collections.abc import Mapping
from typing import Any

import jinja2

from switchboard.exceptions import TemplateRenderError


class JinjaTemplateRenderer:
    """Renders module view templates (`{{ value }}` style) with Jinja2."""

    def __init__(self, environment: jinja2.Environment | None = None):
        self.environment = environment or jinja2.Environment(autoescape=False)

    def render(self, template_text: str, context: Mapping[str, Any]) -> str:
        """
        Raises:
            TemplateRenderError: If the template cannot be compiled, or raises while rendering
        """
        try:
            return self.environment.from_string(template_text).render(**context)
        except jinja2.TemplateError as e:
            raise TemplateRenderError(None, str(e)) from e
        except Exception as e:
            raise TemplateRenderError(None, f"{type(e).__name__}: {e}") from e

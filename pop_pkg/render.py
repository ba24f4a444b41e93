"""
Rendering service for helper fragments, backed by Jinja2.
"""

import logging
from typing import Any, Dict, Optional

from jinja2 import Environment, StrictUndefined, Template

from .fragments import Fragment


class FragmentRenderer:
    """
    Render fragments with a Jinja2 environment.

    Output of plain interpolations is HTML-escaped; referencing a local that
    was not supplied raises ``jinja2.UndefinedError``.
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env = env or Environment(autoescape=True, undefined=StrictUndefined)
        self.logger = logging.getLogger('Pop')
        self._templates: Dict[str, Template] = {}

    def compile(self, fragment: Fragment) -> Template:
        """Compile a fragment, reusing the template for identical source."""
        source = fragment.source
        template = self._templates.get(source)
        if template is None:
            template = self.env.from_string(source)
            self._templates[source] = template
            self.logger.debug(f"Compiled fragment with {len(fragment.nodes)} nodes")
        return template

    def render(self, fragment: Fragment, context: Optional[Dict[str, Any]] = None) -> str:
        return self.compile(fragment).render(**(context or {}))

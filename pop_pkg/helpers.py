"""
The helper set exposed to fragments and templates.

Every helper is bound to a single site, so expressions can call them by name
without reaching for the host themselves.
"""

from functools import partial
from typing import Callable, Dict

from .dates import format_date, short_date, machine_date
from .feed import atom
from .hnews import hnews
from .pagination import paginate
from .tags import all_tags, tag_links
from .text import escape_html, truncate_paragraphs

HELPER_NAMES = (
    'paginate',
    'atom',
    'all_tags',
    'tags',
    'hnews',
    'df',
    'ds',
    'dx',
    'h',
    'truncate_paragraphs',
)


def bind_helpers(site) -> Dict[str, Callable]:
    """Return the helper mapping bound to ``site``, keyed by ``HELPER_NAMES``."""
    return {
        'paginate': partial(paginate, site),
        'atom': partial(atom, site),
        'all_tags': partial(all_tags, site),
        'tags': partial(tag_links, tags_page=site.tags_page),
        'hnews': partial(hnews, site),
        'df': format_date,
        'ds': short_date,
        'dx': machine_date,
        'h': escape_html,
        'truncate_paragraphs': truncate_paragraphs,
    }

"""
Pop - HTML helpers for blog templates.

Pop renders the reusable pieces of a blog: pagination links, an Atom feed,
hNews post markup and tag lists, plus small date and text helpers that
templates call by name.
"""

__version__ = "1.0.0"

from .context import Post, Paginator, Site
from .fragments import Fragment, FragmentBuilder, FragmentError
from .helpers import HELPER_NAMES, bind_helpers
from .render import FragmentRenderer

__all__ = [
    'Post',
    'Paginator',
    'Site',
    'Fragment',
    'FragmentBuilder',
    'FragmentError',
    'FragmentRenderer',
    'HELPER_NAMES',
    'bind_helpers',
]

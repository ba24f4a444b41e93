"""
Host-side data: posts, paginators and the site that owns them.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .helpers import bind_helpers
from .render import FragmentRenderer
from .tags import TAGS_PAGE


@dataclass(frozen=True)
class Post:
    title: str
    url: str
    date: datetime
    author: str
    content: str
    tags: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class Paginator:
    """The current page window of a paged listing."""

    page: int
    pages: int
    previous_page: Optional[int]
    next_page: int

    @classmethod
    def for_page(cls, page: int, total_items: int, per_page: int) -> 'Paginator':
        """
        Build the paginator for ``page`` of a listing.

        Args:
            page: Current page number, starting at 1
            total_items: Number of items in the whole listing
            per_page: Items shown per page, at least 1

        Returns:
            Paginator; ``next_page`` may exceed ``pages`` on the last page
        """
        per_page = max(1, per_page)
        pages = max(1, math.ceil(total_items / per_page))
        return cls(
            page=page,
            pages=pages,
            previous_page=page - 1 if page > 1 else None,
            next_page=page + 1,
        )


class Site:
    """
    Owns the post collection for one render pass.

    Posts must be ordered newest first.
    """

    def __init__(self, posts: Iterable[Post] = (), paginator: Optional[Paginator] = None,
                 renderer: Optional[FragmentRenderer] = None, tags_page: str = TAGS_PAGE):
        self.posts = tuple(posts)
        self.paginator = paginator
        self.renderer = renderer or FragmentRenderer()
        self.tags_page = tags_page
        self.logger = logging.getLogger('Pop')

    def helpers(self) -> Dict[str, Callable]:
        return bind_helpers(self)

    def apply_helpers(self, context: Optional[Dict[str, Any]] = None, **values) -> Dict[str, Any]:
        """
        Merge locals with the helper set.

        Explicit values take precedence over helpers of the same name.
        """
        merged = self.helpers()
        if context:
            merged.update(context)
        merged.update(values)
        return merged

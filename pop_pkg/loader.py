"""
Load posts from a YAML file for previewing helper output.
"""

import logging
from datetime import datetime, date, timezone

import mistune
import yaml

from .context import Post

logger = logging.getLogger('Pop')


def create_markdown_parser():
    """Create a Mistune markdown parser with a custom renderer."""
    class CustomRenderer(mistune.HTMLRenderer):
        def __init__(self):
            super().__init__(escape=False)

        def block_code(self, code, info=None):
            escaped_code = mistune.escape(code)
            return '<pre style="white-space: pre-wrap;"><code>{}</code></pre>'.format(escaped_code)

    return mistune.create_markdown(
        renderer=CustomRenderer(),
        plugins=['table', 'task_lists', 'strikethrough']
    )


def parse_date(date_str):
    """Parse a date string."""
    if isinstance(date_str, datetime):
        return date_str
    elif isinstance(date_str, date):
        return datetime(date_str.year, date_str.month, date_str.day)
    elif isinstance(date_str, str):
        for fmt in ['%Y-%m-%dT%H:%M:%S', '%Y-%m-%d', '%b %d, %Y']:
            try:
                return datetime.strptime(date_str, fmt)
            except ValueError:
                continue
    logger.warning(f"Unrecognized post date {date_str!r}; using datetime.min")
    return datetime.min


def post_from_mapping(data, markdown_parser=None):
    """
    Build a Post from one YAML mapping.

    ``content`` is treated as Markdown when a parser is given.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Post entry must be a mapping: {data!r}")
    for key in ('title', 'url'):
        if not data.get(key):
            raise ValueError(f"Post entry is missing '{key}': {data!r}")

    content = data.get('content') or ''
    if markdown_parser is not None:
        content = markdown_parser(content)

    tags = data.get('tags')
    return Post(
        title=str(data['title']),
        url=str(data['url']),
        date=parse_date(data.get('date')),
        author=str(data.get('author', '')),
        content=content,
        tags=tuple(str(tag) for tag in tags) if tags else None,
    )


def _sort_key(post):
    # Naive dates compare as UTC so they can sit beside aware ones.
    if post.date.tzinfo is None:
        return post.date.replace(tzinfo=timezone.utc)
    return post.date


def load_posts(path, markdown_parser=None):
    """
    Read posts from a YAML list and return them newest first.

    Args:
        path: YAML file holding a list of post mappings
        markdown_parser: Callable turning Markdown into HTML, or None for raw HTML

    Returns:
        List of Post
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            entries = yaml.safe_load(f) or []
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in posts file {path}: {e}")

    if not isinstance(entries, list):
        raise ValueError(f"Posts file {path} must contain a list of posts")

    posts = [post_from_mapping(entry, markdown_parser) for entry in entries]
    posts.sort(key=_sort_key, reverse=True)
    logger.debug(f"Loaded {len(posts)} posts from {path}")
    return posts

"""
Tag aggregation and tag list markup.
"""

from urllib.parse import quote

TAGS_PAGE = '/tags.html'

# Characters left unescaped in tag anchors, alongside letters and digits.
_ANCHOR_SAFE = '@*_+-./'


def _anchor(tag):
    # quote() never escapes '~'
    return quote(tag, safe=_ANCHOR_SAFE).replace('~', '%7E')


def all_tags(site):
    """
    Returns unique sorted tags for every post.

    Tags are deduplicated by exact string and sorted case-insensitively, so
    "Go" and "go" are both kept and end up next to each other.
    """
    collected = []
    for post in site.posts:
        if post.tags:
            for tag in post.tags:
                if tag not in collected:
                    collected.append(tag)
    return sorted(collected, key=str.lower)


def tag_links(tags, tags_page=TAGS_PAGE):
    """
    Display a list of tags.

    Args:
        tags: Tag names
        tags_page: Page holding one anchor per tag

    Returns:
        Comma-separated anchors; the tag is escaped only in the href
    """
    return ', '.join(
        f'<a href="{tags_page}#{_anchor(tag)}">{tag}</a>'
        for tag in tags
    )

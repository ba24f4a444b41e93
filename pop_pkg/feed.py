"""
Atom feed for the most recent posts.
"""

from .fragments import FragmentBuilder

ATOM_NAMESPACE = 'http://www.w3.org/2005/Atom'
DEFAULT_ENTRIES = 20


def build_atom_fragment():
    builder = FragmentBuilder()
    builder.text('<?xml version="1.0" encoding="utf-8" ?>')
    builder.text(f'<feed xmlns="{ATOM_NAMESPACE}">')
    builder.text('<title>').expr('title').text('</title>')
    builder.text('<link href="').expr('feed').text('" rel="self"/>')
    builder.text('<link href="').expr('url').text('"/>')
    builder.text('<updated>').expr('dx(posts[0].date)').text('</updated>')
    builder.text('<id>').expr('url').text('</id>')
    builder.text('<author><name>').expr('title').text('</name></author>')

    builder.for_('post', 'posts[:limit]')
    builder.text('<entry>')
    builder.text('<title>').expr('post.title').text('</title>')
    builder.text('<link href="').expr('url ~ post.url').text('"/>')
    builder.text('<updated>').expr('dx(post.date)').text('</updated>')
    builder.text('<id>').expr('base_url').expr('post.url').text('</id>')
    builder.text('<content type="html">').raw('h(post.content)').text('</content>')
    builder.text('</entry>')
    builder.end()

    builder.text('</feed>')
    return builder.build()


ATOM = build_atom_fragment()


def atom(site, url, title, feed, per_page=DEFAULT_ENTRIES):
    """
    Atom feed document.

    ``site.posts`` must be ordered newest first and hold at least one post;
    the feed's ``updated`` element comes from the first one.

    Args:
        site: Host site
        url: Site URL
        title: Feed title, also used as the author name
        feed: Feed URL
        per_page: Maximum number of entries

    Returns:
        Atom XML string
    """
    per_page = per_page or DEFAULT_ENTRIES
    base_url = url[:-1] if url.endswith('/') else url
    context = site.apply_helpers(
        paginator=site.paginator,
        title=title,
        url=url,
        feed=feed,
        posts=site.posts,
        limit=per_page,
        base_url=base_url,
    )
    site.logger.debug(f"Rendering Atom feed with up to {per_page} entries")
    return site.renderer.render(ATOM, context)

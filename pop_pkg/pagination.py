"""
Pagination links.
"""

from .fragments import FragmentBuilder


def build_pagination_fragment():
    builder = FragmentBuilder()
    builder.text('<div class="pages">')

    builder.if_('paginator.previous_page')
    builder.text('<span class="prev_next"><span>&larr;</span>')
    builder.if_('paginator.previous_page == 1')
    builder.text('<a class="previous" href="/">Previous</a>')
    builder.else_()
    builder.text('<a class="previous" href="/page/').expr('paginator.previous_page').text('/">Previous</a>')
    builder.end()
    builder.text('</span>')
    builder.end()

    builder.if_('paginator.pages > 1')
    builder.text('<span class="prev_next">')
    builder.for_('i', 'range(1, paginator.pages + 1)')
    builder.if_('i == paginator.page')
    builder.text('<strong class="page">').expr('i').text('</strong>')
    builder.elif_('i != 1')
    builder.text('<a class="page" href="/page/').expr('i').text('/">').expr('i').text('</a>')
    builder.else_()
    builder.text('<a class="page" href="/">1</a>')
    builder.end()
    builder.end()
    builder.text('</span>')
    builder.end()

    builder.if_('paginator.next_page <= paginator.pages')
    builder.text('<span class="prev_next"><a class="next" href="/page/').expr('paginator.next_page')
    builder.text('/">Next</a><span>&rarr;</span></span>')
    builder.end()

    builder.text('</div>')
    return builder.build()


PAGINATION = build_pagination_fragment()


def paginate(site, paginator=None):
    """
    Pagination links.

    Args:
        site: Host site providing the renderer and the active paginator
        paginator: Paginator to render; defaults to ``site.paginator``

    Returns:
        HTML string with previous, numbered and next links
    """
    if paginator is None:
        paginator = site.paginator
    return site.renderer.render(PAGINATION, {'paginator': paginator})

"""
Renders a post using the hNews microformat, based on:

http://www.readability.com/publishers/guidelines/#view-exampleGuidelines
"""

from .fragments import FragmentBuilder


def build_hnews_fragment(with_tags):
    builder = FragmentBuilder()
    builder.text('<article class="hentry"><header>')
    builder.text('<h1 class="entry-title"><a href="').expr('post.url').text('">')
    builder.raw('post.title').text('</a></h1>')
    builder.text('<time class="updated" datetime="').expr('dx(post.date)').text('" pubdate>')
    builder.expr('ds(post.date)').text('</time>')
    builder.text('<p class="byline author vcard">by <span class="fn">').expr('post.author')
    builder.text('</span></p>')
    if with_tags:
        builder.text('<div class="tags">').raw('tags(post.tags)').text('</div>')
    builder.text('</header>')
    builder.raw('post.content')
    builder.text('</article>')
    return builder.build()


HNEWS = build_hnews_fragment(with_tags=False)
HNEWS_WITH_TAGS = build_hnews_fragment(with_tags=True)


def hnews(site, post):
    """
    Args:
        site: Host site
        post: Post to render; its content is inserted without escaping

    Returns:
        Post in the hNews format
    """
    fragment = HNEWS_WITH_TAGS if post.tags else HNEWS
    return site.renderer.render(fragment, site.apply_helpers(post=post))

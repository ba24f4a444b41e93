#!/usr/bin/env python3
"""
Command-line interface for previewing Pop helper output.
"""

import os
import sys
import argparse
import logging
from datetime import datetime
from typing import List, Optional

from .context import Paginator, Site
from .loader import create_markdown_parser, load_posts
from .settings import PopSettings
from .text import truncate_paragraphs

HELPER_CHOICES = ['feed', 'tags', 'post', 'paginate', 'excerpt']


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger('Pop')
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Pop - render blog helper fragments')
    parser.add_argument('helper', nargs='?', choices=HELPER_CHOICES,
                        help='Helper output to print')
    parser.add_argument('--posts', type=str,
                        help='YAML file with the list of posts')
    parser.add_argument('--page', type=int, default=1,
                        help='Current page for pagination')
    parser.add_argument('--index', type=int, default=0,
                        help='Post index (newest first) for post and excerpt output')
    parser.add_argument('--site-url', type=str, help='Site URL for the feed')
    parser.add_argument('--site-title', type=str, help='Feed title')
    parser.add_argument('--feed-url', type=str, help='URL of the feed itself')
    parser.add_argument('--feed-entries', type=int,
                        help='Maximum number of feed entries')
    parser.add_argument('--posts-per-page', type=int,
                        help='Number of posts per page for pagination')
    parser.add_argument('--raw-html', action='store_true',
                        help='Post content is HTML rather than Markdown')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file')
    parser.add_argument('--log-file', type=str, help='Write debug logs to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug output')
    parser.add_argument('--version', action='version', version='%(prog)s 1.0.0')
    return parser


def render(helper: str, site: Site, settings: dict, index: int = 0) -> str:
    """Render one helper's output for the given site."""
    if helper == 'feed':
        return site.helpers()['atom'](
            settings['site_url'],
            settings['site_title'],
            settings['feed_url'],
            settings['feed_entries'],
        )
    if helper == 'tags':
        return site.helpers()['tags'](site.helpers()['all_tags']())
    if helper == 'paginate':
        return site.helpers()['paginate']()
    post = site.posts[index]
    if helper == 'post':
        return site.helpers()['hnews'](post)
    return truncate_paragraphs(post.content, settings['paragraphs'], settings['read_more'])


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose, args.log_file)

    settings_loader = PopSettings()

    if args.init:
        config_path = settings_loader.create_sample_config(args.init)
        print(f"Created sample configuration file: {config_path}")
        return

    if not args.helper:
        parser.error('a helper is required unless --init is given')

    try:
        settings_loader.load_settings()
        args_dict = {k: v for k, v in vars(args).items() if v is not None}
        settings = settings_loader.merge_with_args(args_dict)

        if args.helper == 'feed':
            for key in ('site_url', 'site_title', 'feed_url'):
                if not settings.get(key):
                    raise ValueError(f"'{key}' is required to render the feed")

        posts_path = os.path.expanduser(settings['posts'])
        markdown_parser = None if args.raw_html else create_markdown_parser()
        started = datetime.now()
        posts = load_posts(posts_path, markdown_parser)

        site = Site(
            posts,
            paginator=Paginator.for_page(args.page, len(posts), settings['posts_per_page']),
            tags_page=settings['tags_page'],
        )
        output = render(args.helper, site, settings, args.index)
        logger.debug(f"Rendered {args.helper} in {(datetime.now() - started).total_seconds():.6f} seconds")
        print(output)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

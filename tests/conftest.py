"""Test configuration and fixtures for Pop tests."""

import pytest
import tempfile
import shutil
import os
from pathlib import Path
from datetime import datetime
import yaml

import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pop_pkg import Post, Paginator, Site


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_posts():
    """Three posts, newest first."""
    return [
        Post(
            title='Third <em>post</em>',
            url='/2021/03/third/',
            date=datetime(2021, 3, 5, 14, 7, 9),
            author='Ann & Bob',
            content='<p>Newest & best</p>',
            tags=('go', 'Zig'),
        ),
        Post(
            title='Second post',
            url='/2021/02/second/',
            date=datetime(2021, 2, 1, 9, 30, 0),
            author='Ann',
            content='<p>Middle</p>',
            tags=('Go', 'zig'),
        ),
        Post(
            title='First post',
            url='/2021/01/first/',
            date=datetime(2021, 1, 1, 8, 0, 0),
            author='Bob',
            content='<p>Oldest</p>',
        ),
    ]


@pytest.fixture
def site(sample_posts):
    """A site holding the sample posts, on page 1 of 1."""
    return Site(sample_posts, paginator=Paginator(page=1, pages=1, previous_page=None, next_page=2))


@pytest.fixture
def posts_file(temp_dir):
    """A YAML posts file with Markdown bodies."""
    path = Path(temp_dir) / 'posts.yml'
    path.write_text(yaml.dump([
        {
            'title': 'Older',
            'url': '/older/',
            'date': '2023-01-01',
            'author': 'John Doe',
            'content': 'Hello **world**',
            'tags': ['python', 'Web'],
        },
        {
            'title': 'Newer',
            'url': '/newer/',
            'date': '2023-02-01T12:00:00',
            'author': 'Jane Smith',
            'content': '# Heading\n\nFirst paragraph.\n\nSecond paragraph.\n',
        },
    ]))
    return str(path)

"""Tests for the command-line interface."""

import os
import shutil
from pathlib import Path

import pytest

from pop_pkg.cli import main


@pytest.fixture
def workdir(temp_dir, posts_file, monkeypatch):
    """Run the CLI from a directory holding posts.yml."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


class TestCli:
    """Test cases for main."""

    def test_init_creates_config(self, workdir, capsys):
        main(['--init', 'yml'])
        assert os.path.exists(os.path.join(workdir, 'pop.yml'))
        assert 'Created sample configuration file' in capsys.readouterr().out

    def test_tags(self, workdir, capsys):
        main(['tags'])
        out = capsys.readouterr().out
        assert '<a href="/tags.html#python">python</a>, <a href="/tags.html#Web">Web</a>' in out

    def test_post(self, workdir, capsys):
        main(['post', '--index', '1'])
        out = capsys.readouterr().out
        assert '<article class="hentry">' in out
        assert '<p>Hello <strong>world</strong></p>' in out

    def test_raw_html_flag(self, workdir, capsys):
        main(['post', '--index', '1', '--raw-html'])
        assert 'Hello **world**' in capsys.readouterr().out

    def test_paginate(self, workdir, capsys):
        main(['paginate', '--page', '2', '--posts-per-page', '1'])
        out = capsys.readouterr().out
        assert '<strong class="page">2</strong>' in out
        assert '<a class="previous" href="/">Previous</a>' in out

    def test_excerpt(self, workdir, capsys):
        main(['excerpt'])
        out = capsys.readouterr().out
        assert 'Read more' in out

    def test_feed_uses_config(self, workdir, capsys):
        main(['--init', 'yml'])
        capsys.readouterr()
        main(['feed', '--feed-entries', '1'])
        out = capsys.readouterr().out
        assert '<title>My Blog</title>' in out
        assert out.count('<entry>') == 1
        assert '<id>https://example.com/newer/</id>' in out

    def test_feed_requires_site_url(self, workdir, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['feed'])
        assert excinfo.value.code == 1
        assert "'site_url' is required" in capsys.readouterr().err

    def test_missing_posts_file(self, temp_dir, monkeypatch, capsys):
        monkeypatch.chdir(temp_dir)
        with pytest.raises(SystemExit) as excinfo:
            main(['tags', '--posts', 'missing.yml'])
        assert excinfo.value.code == 1
        assert capsys.readouterr().err.startswith('Error:')

    def test_helper_required(self, workdir):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

#!/usr/bin/env python3
"""
Settings loader for the Pop helpers.
Supports configuration from pop.yml, pop.yaml, or pop.json files.
"""

import os
import json
import logging
import yaml
from typing import Dict, Any, Optional


class PopSettings:
    """Load and manage Pop configuration settings."""

    # Default configuration
    DEFAULT_SETTINGS = {
        'site_url': None,
        'site_title': None,
        'feed_url': None,
        'feed_entries': 20,
        'posts_per_page': 5,
        'tags_page': '/tags.html',
        'paragraphs': 2,
        'read_more': '<p class="more">Read more &rarr;</p>',
        'posts': 'posts.yml',
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['pop.yml', 'pop.yaml', 'pop.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None
        self.logger = logging.getLogger('Pop')

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            loaded_settings = self._load_config_file(config_file)
            if loaded_settings:
                self.settings.update(loaded_settings)
                self.logger.info(f"Loaded configuration from: {os.path.relpath(config_file)}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    loaded = yaml.safe_load(f) or {}
                elif file_ext == '.json':
                    loaded = json.load(f) or {}
                else:
                    raise ValueError(f"Unsupported config file format: {file_ext}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except (IOError, OSError) as e:
            raise IOError(f"Error reading configuration file {config_path}: {e}")

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping")
        return loaded

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        if file_format not in ('yml', 'yaml', 'json'):
            raise ValueError(f"Unsupported config file format: {file_format}")

        sample_config = {
            'site_url': 'https://example.com/',
            'site_title': 'My Blog',
            'feed_url': 'https://example.com/feed.xml',
            'feed_entries': 20,
            'posts_per_page': 5,
            'tags_page': '/tags.html',
            'paragraphs': 2,
            'posts': 'posts.yml',
        }

        filename = f'pop.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format == 'json':
                    json.dump(sample_config, f, indent=2)
                else:
                    f.write("# Pop helpers configuration\n\n")
                    f.write("# Site information\n")
                    f.write("site_url: https://example.com/\n")
                    f.write("site_title: My Blog\n")
                    f.write("feed_url: https://example.com/feed.xml\n\n")
                    f.write("# Listings\n")
                    f.write("feed_entries: 20\n")
                    f.write("posts_per_page: 5\n")
                    f.write("tags_page: /tags.html\n")
                    f.write("paragraphs: 2  # paragraphs kept in excerpts\n\n")
                    f.write("# Post data\n")
                    f.write("posts: posts.yml\n")
        except (IOError, OSError) as e:
            raise IOError(f"Error writing configuration file {config_path}: {e}")

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()
        for key, value in args_dict.items():
            if value is not None:
                merged[key] = value
        return merged

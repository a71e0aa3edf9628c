'''Global configuration system supporting JSON5 files and command-line overrides'''

import json5
import argparse
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class Config:
    '''Global configuration singleton'''

    _instance = None
    _initialized = False

    # Default configuration values
    _defaults = {
        'catalog'       : '',
        'log_level'     : 'WARNING',
        'vector_widths' : [2, 3, 4, 8, 16],
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._defaults.copy()
            self._cli_overrides = {}
            self._initialized = True

    def load_file(self, filepath: str | Path) -> bool:
        '''Load configuration from JSON5 file'''
        filepath = Path(filepath)
        if not filepath.exists():
            return False

        try:
            with open(filepath, 'r', encoding = 'utf-8') as f:
                data = json5.loads(f.read())

        except (OSError, ValueError) as e:
            logger.warning(f'Failed to load config from {filepath}: {e}')
            return False

        if not isinstance(data, dict):
            logger.warning(f'Ignoring config {filepath}: top level is not an object')
            return False

        # Relative catalog paths are resolved against the config file
        catalog = data.get('catalog')
        if catalog and not Path(catalog).is_absolute():
            data['catalog'] = str(filepath.parent / catalog)

        self._config.update(data)
        return True

    def load_defaults(self):
        '''Load the configuration file bundled with the package'''
        project_config = Path(__file__).parent.parent / 'config.json5'
        self.load_file(project_config)

    def parse_args(self, args: list[str] = None):
        '''Parse command-line arguments and override config'''
        parser = argparse.ArgumentParser(
            description = 'clbuiltins configuration',
            add_help = False
        )

        parser.add_argument(
            '--config',
            type = str,
            help = 'Path to config file'
        )

        parser.add_argument(
            '--catalog',
            type = str,
            help = 'Path to a builtin catalog YAML file'
        )

        parser.add_argument(
            '--log-level',
            type = str,
            choices = ['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            help = 'Logging level'
        )

        # Parse known args, ignore unknown
        parsed, _ = parser.parse_known_args(args)

        # Load config file if specified
        if parsed.config:
            self.load_file(parsed.config)

        # Apply command-line overrides
        if parsed.catalog:
            self._cli_overrides['catalog'] = parsed.catalog

        if parsed.log_level:
            self._cli_overrides['log_level'] = parsed.log_level

    def get(self, key: str, default: Any = None) -> Any:
        '''Get configuration value'''
        # CLI overrides have highest priority
        if key in self._cli_overrides:
            return self._cli_overrides[key]

        # Then config file values
        if key in self._config:
            return self._config[key]

        # Finally default value
        return default

    def set(self, key: str, value: Any):
        '''Set configuration value at runtime'''
        self._config[key] = value

    def reset(self):
        '''Drop file values and overrides, back to built-in defaults'''
        self._config = self._defaults.copy()
        self._cli_overrides = {}

    @property
    def catalog(self) -> str:
        '''Get catalog path, empty for the bundled catalog'''
        return self.get('catalog') or ''

    @property
    def log_level(self) -> str:
        '''Get logging level name'''
        return str(self.get('log_level')).upper()

    @property
    def vector_widths(self) -> tuple[int, ...]:
        '''Get accepted vector lane counts'''
        return tuple(int(w) for w in self.get('vector_widths'))


# Global config instance
_config = Config()


def get_config() -> Config:
    '''Get global config instance'''
    return _config


def default_catalog_path() -> Path:
    '''Get the catalog file to load'''
    if _config.catalog:
        return Path(_config.catalog)

    return Path(__file__).parent.parent / 'catalog' / 'builtins.yaml'


def default_log_level() -> int:
    '''Get logging level as a logging module constant'''
    return logging.getLevelName(_config.log_level)


def default_vector_widths() -> tuple[int, ...]:
    '''Get the lane counts accepted in vector type codes'''
    return _config.vector_widths


def init_config(args: list[str] = None):
    '''Initialize configuration system'''
    _config.load_defaults()
    if args is not None:
        _config.parse_args(args)


# Auto-load defaults on import
_config.load_defaults()

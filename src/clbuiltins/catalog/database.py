'''Builtin catalog - stem to category associations loaded from YAML'''

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml

from ..common import CatalogError, default_catalog_path
from ..param_types import PixelFormat, RoundingMode
from .builtin_type import BuiltinType

logger = logging.getLogger(__name__)


SUFFIX_WIDTH        = 'width'
SUFFIX_FORMAT       = 'format'
SUFFIX_SATURATION   = 'saturation'
SUFFIX_ROUNDING     = 'rounding'

SUFFIX_FAMILIES = (SUFFIX_WIDTH, SUFFIX_FORMAT, SUFFIX_SATURATION, SUFFIX_ROUNDING)


@dataclass(frozen = True)
class CatalogEntry:
    '''One builtin stem'''
    stem        : str
    category    : BuiltinType
    suffixes    : tuple[str, ...] = ()          # ordered optional suffix slots
    bare        : bool = True                   # stem alone is a builtin name
    sampled     : Optional[BuiltinType] = None  # category when called with a sampler

    def __str__(self) -> str:
        slots = ''.join(f'[{s}]' for s in self.suffixes)
        return f'{self.stem}{slots} -> {self.category}'

    __repr__ = __str__


class BuiltinCatalog:
    '''Read-only table of builtin stems and suffix token families'''

    def __init__(self):
        self.version: Optional[str] = None
        self.entries: Dict[str, CatalogEntry] = {}
        self.suffix_tokens: Dict[str, Dict[str, Any]] = {family: {} for family in SUFFIX_FAMILIES}

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, stem: str) -> bool:
        return stem in self.entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries.values())

    def get(self, stem: str) -> Optional[CatalogEntry]:
        '''Get entry by stem'''
        return self.entries.get(stem)

    def list_by_category(self, category: BuiltinType) -> List[str]:
        '''List all stems of a category'''
        return sorted(
            e.stem for e in self.entries.values()
            if e.category == category or e.sampled == category
        )

    def tokens(self, family: str) -> Dict[str, Any]:
        '''Token text -> decoded value for a suffix family'''
        return self.suffix_tokens[family]

    def load_yaml(self, path: Path):
        '''Load catalog from YAML file'''
        with open(path, 'r', encoding = 'utf-8') as f:
            data = yaml.safe_load(f)

        self.load_dict(data or {}, source = str(path))
        logger.info(f'loaded {len(self.entries)} builtin stems from {path} (version {self.version})')

    def load_dict(self, data: Dict, source: str = '<dict>'):
        '''Load catalog from already-parsed data'''
        if not isinstance(data, dict):
            raise CatalogError(f'{source}: catalog must be a mapping')

        version = data.get('version')
        self.version = None if version is None else str(version)

        self._load_suffixes(data.get('suffixes') or {}, source)
        self._load_builtins(data.get('builtins') or {}, source)

    def _load_suffixes(self, suffixes_data: Dict, source: str):
        '''Load suffix token families'''
        if not isinstance(suffixes_data, dict):
            raise CatalogError(f'{source}: suffixes must be a mapping')

        for family, tokens in suffixes_data.items():
            if family not in SUFFIX_FAMILIES:
                raise CatalogError(f'{source}: unknown suffix family {family!r}')

            self.suffix_tokens[family] = self._parse_tokens(family, tokens, source)

    @classmethod
    def _parse_tokens(cls, family: str, tokens: Any, source: str) -> Dict[str, Any]:
        '''Decode the value each token stands for'''
        if isinstance(tokens, list):
            tokens = {str(t): None for t in tokens}

        if not isinstance(tokens, dict):
            raise CatalogError(f'{source}: tokens of {family} must be a list or mapping')

        parsed = {}
        for token, value in tokens.items():
            token = str(token)
            if not token:
                raise CatalogError(f'{source}: empty {family} token')

            try:
                if family == SUFFIX_WIDTH:
                    parsed[token] = int(token if value is None else value)
                elif family == SUFFIX_FORMAT:
                    parsed[token] = PixelFormat.from_name(str(value))
                elif family == SUFFIX_SATURATION:
                    parsed[token] = True
                else:
                    parsed[token] = RoundingMode.from_name(str(value))

            except ValueError as e:
                raise CatalogError(f'{source}: bad {family} token {token!r}: {e}') from e

        return parsed

    def _load_builtins(self, builtins_data: Dict, source: str):
        '''Load builtin stems'''
        if not isinstance(builtins_data, dict):
            raise CatalogError(f'{source}: builtins must be a mapping')

        for stem, entry_data in builtins_data.items():
            for name, entry in self._parse_entry(str(stem), entry_data, source):
                if name in self.entries and self.entries[name] != entry:
                    raise CatalogError(f'{source}: conflicting definitions of {name!r}')

                self.entries[name] = entry

    @classmethod
    def _parse_category(cls, value: Any, context: str) -> BuiltinType:
        try:
            category = BuiltinType.from_name(str(value))
        except ValueError as e:
            raise CatalogError(f'{context}: {e}') from e

        if category == BuiltinType.NONE:
            raise CatalogError(f'{context}: NONE is not a builtin category')

        return category

    @classmethod
    def _parse_entry(cls, stem: str, data: Any, source: str) -> List[tuple[str, CatalogEntry]]:
        '''Parse one builtin record; a bare string is shorthand for its category'''
        context = f'{source}: {stem}'

        if isinstance(data, str):
            data = {'category': data}

        if not isinstance(data, dict) or 'category' not in data:
            raise CatalogError(f'{context}: missing category')

        suffixes = data.get('suffixes') or []
        if isinstance(suffixes, str):
            suffixes = [suffixes]

        for family in suffixes:
            if family not in SUFFIX_FAMILIES:
                raise CatalogError(f'{context}: unknown suffix family {family!r}')

        if len(set(suffixes)) != len(suffixes):
            raise CatalogError(f'{context}: repeated suffix family')

        sampled = data.get('sampled')

        entry_args = dict(
            category    = cls._parse_category(data['category'], context),
            suffixes    = tuple(suffixes),
            bare        = bool(data.get('bare', not suffixes)),
            sampled     = None if sampled is None else cls._parse_category(sampled, context),
        )

        names = [stem] + [str(alias) for alias in data.get('aliases') or []]
        return [(name, CatalogEntry(stem = name, **entry_args)) for name in names]


def load_catalog(path: Optional[Path] = None) -> BuiltinCatalog:
    '''Load a catalog file, the configured one by default'''
    catalog = BuiltinCatalog()
    catalog.load_yaml(Path(path) if path is not None else default_catalog_path())
    return catalog


_default_catalog: Optional[BuiltinCatalog] = None


def load_default_catalog() -> BuiltinCatalog:
    '''Configured catalog, loaded once per process'''
    global _default_catalog

    if _default_catalog is None:
        _default_catalog = load_catalog()

    return _default_catalog

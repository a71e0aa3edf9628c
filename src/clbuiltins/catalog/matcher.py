'''
Builtin name classification

Many builtins are a stem followed by systematic suffix tokens:

    read_imageui            read_image + format
    vstore_half4_rtz        vstore_half + width + rounding
    convert_uchar8_sat_rte  convert_uchar + width + saturation + rounding

Exact names win over decomposition. Among decompositions the longest stem
whose suffix slots consume the whole tail wins.
'''

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..common import ClassificationMiss
from .builtin_type import BuiltinType
from .database import BuiltinCatalog, CatalogEntry, load_default_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen = True)
class SuffixToken:
    family  : str
    text    : str
    value   : Any


@dataclass(frozen = True)
class CatalogMatch:
    '''Classification of one base identifier'''
    entry   : CatalogEntry
    stem    : str
    tokens  : tuple[SuffixToken, ...] = ()
    exact   : bool = True

    @property
    def category(self) -> BuiltinType:
        return self.entry.category

    def token(self, family: str) -> Optional[SuffixToken]:
        for token in self.tokens:
            if token.family == family:
                return token

        return None

    def value(self, family: str, default: Any = None) -> Any:
        token = self.token(family)
        return default if token is None else token.value

    def __str__(self) -> str:
        suffix = ''.join(f' +{t.family}({t.text})' for t in self.tokens)
        return f'{self.stem}{suffix} -> {self.category}'

    __repr__ = __str__


class CatalogMatcher:
    '''Maps base identifiers to catalog entries'''

    def __init__(self, catalog: Optional[BuiltinCatalog] = None):
        self.catalog = catalog if catalog is not None else load_default_catalog()

        # Longest token first so "16" is tried before any shorter token
        self._tokens: dict[str, list[tuple[str, Any]]] = {
            family: sorted(tokens.items(), key = lambda item: -len(item[0]))
            for family, tokens in self.catalog.suffix_tokens.items()
        }
        self._max_stem = max((len(stem) for stem in self.catalog.entries), default = 0)

    def parse_suffixes(self, entry: CatalogEntry, tail: str) -> Optional[tuple[SuffixToken, ...]]:
        '''Consume tail with the entry's ordered optional slots; None if it doesn't fit'''
        pos = 0
        tokens = []

        for family in entry.suffixes:
            for text, value in self._tokens[family]:
                if tail.startswith(text, pos):
                    tokens.append(SuffixToken(family, text, value))
                    pos += len(text)
                    break

        if not tokens or pos != len(tail):
            return None

        return tuple(tokens)

    def classify(self, name: str) -> CatalogMatch:
        '''
        Classify a base identifier.

        Raises:
            ClassificationMiss: no exact name or stem decomposition matches
        '''
        entry = self.catalog.get(name)
        if entry is not None and entry.bare:
            return CatalogMatch(entry, name)

        for split in range(min(len(name) - 1, self._max_stem), 0, -1):
            entry = self.catalog.get(name[:split])
            if entry is None or not entry.suffixes:
                continue

            tokens = self.parse_suffixes(entry, name[split:])
            if tokens is not None:
                return CatalogMatch(entry, entry.stem, tokens, exact = False)

        raise ClassificationMiss(name, 'no catalog entry')

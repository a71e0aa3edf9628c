'''
Lookup registry - memoizing entry point from symbol name to FunctionInfo

A registry lives for one compilation session. It owns every FunctionInfo it
hands out; entries are computed once per distinct symbol and never evicted
until close(). Concurrent first lookups of the same symbol run the pipeline
once: the first caller computes while the others wait on its event.
'''

import logging
import threading
from typing import Any, Dict, Optional, Union

from .common import BuiltinLookupError, default_vector_widths
from .catalog import BuiltinCatalog, CatalogMatcher, load_default_catalog
from .function_info import FunctionInfo, INVALID_FUNCTION_INFO, assemble
from .mangling import decode

logger = logging.getLogger(__name__)


SymbolLike = Union[str, Any]


def symbol_name(func: SymbolLike) -> str:
    '''Symbol string of a name or of a function object exposing .name'''
    if isinstance(func, str):
        return func

    name = getattr(func, 'name', None)
    if callable(name):
        name = name()

    if not isinstance(name, str):
        raise TypeError(f'cannot get a symbol name from {type(func).__name__}')

    return name


class BuiltinRegistry:
    '''Per-session cache of classified symbols'''

    def __init__(self, catalog: Optional[BuiltinCatalog] = None, vector_widths: Optional[tuple[int, ...]] = None):
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.matcher = CatalogMatcher(self.catalog)
        self.vector_widths = tuple(vector_widths) if vector_widths is not None else default_vector_widths()

        self._entries: Dict[str, FunctionInfo] = {}
        self._failures: Dict[str, BuiltinLookupError] = {}
        self._pending: Dict[str, threading.Event] = {}
        self._lock = threading.Lock()
        self._closed = False

        # Number of times the decode/classify/assemble pipeline ran
        self.build_count = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._entries

    def __enter__(self) -> 'BuiltinRegistry':
        return self

    def __exit__(self, *exc):
        self.close()

    def build(self, symbol: str) -> tuple[FunctionInfo, Optional[BuiltinLookupError]]:
        '''Run decoder, matcher and assembler for one symbol, uncached'''
        try:
            decoded = decode(symbol, self.vector_widths)
            match = self.matcher.classify(decoded.name)
            info = assemble(decoded, match, self.vector_widths)

        except BuiltinLookupError as e:
            logger.debug(f'{type(e).__name__}: {e}')
            return INVALID_FUNCTION_INFO, e

        logger.debug(f'{symbol} -> {info}')
        return info, None

    def lookup(self, func: SymbolLike) -> FunctionInfo:
        '''FunctionInfo of a symbol name or function object; computed at most once'''
        symbol = symbol_name(func)

        while True:
            info = self._entries.get(symbol)
            if info is not None:
                return info

            with self._lock:
                if self._closed:
                    raise RuntimeError('lookup on a closed builtin registry')

                info = self._entries.get(symbol)
                if info is not None:
                    return info

                pending = self._pending.get(symbol)
                owner = pending is None
                if owner:
                    pending = self._pending[symbol] = threading.Event()
                    self.build_count += 1

            if not owner:
                # Another thread is computing this symbol; retry once it is done
                pending.wait()
                continue

            try:
                info, failure = self.build(symbol)
                with self._lock:
                    # Results computed across close() are not kept
                    if not self._closed:
                        self._entries[symbol] = info
                        if failure is not None:
                            self._failures[symbol] = failure

            finally:
                with self._lock:
                    del self._pending[symbol]
                pending.set()

            return info

    def failure_of(self, func: SymbolLike) -> Optional[BuiltinLookupError]:
        '''Why a looked-up symbol is invalid; None if valid or never looked up'''
        return self._failures.get(symbol_name(func))

    def close(self):
        '''Tear down the session, dropping every cached descriptor'''
        with self._lock:
            self._closed = True
            self._entries.clear()
            self._failures.clear()


_default_registry: Optional[BuiltinRegistry] = None
_default_registry_lock = threading.Lock()


def get_registry() -> BuiltinRegistry:
    '''Process default registry, created on first use'''
    global _default_registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = BuiltinRegistry()

        return _default_registry


def reset_registry(registry: Optional[BuiltinRegistry] = None):
    '''Close the default registry and install a new one (or a fresh one lazily)'''
    global _default_registry

    with _default_registry_lock:
        if _default_registry is not None:
            _default_registry.close()

        _default_registry = registry


def lookup(func: SymbolLike) -> FunctionInfo:
    '''Look up a symbol in the default registry'''
    return get_registry().lookup(func)

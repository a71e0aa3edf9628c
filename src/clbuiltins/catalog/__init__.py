from .builtin_type import BuiltinType, IMAGE_TYPES, IMAGE_READ_TYPES, IMAGE_QUERY_TYPES
from .database import (
    BuiltinCatalog, CatalogEntry, load_catalog, load_default_catalog,
    SUFFIX_FAMILIES, SUFFIX_WIDTH, SUFFIX_FORMAT, SUFFIX_SATURATION, SUFFIX_ROUNDING,
)
from .matcher import CatalogMatcher, CatalogMatch, SuffixToken

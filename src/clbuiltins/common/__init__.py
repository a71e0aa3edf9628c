from .enum import IntEnum2
from .errors import (
    BuiltinLookupError, DecodeFailure, ClassificationMiss,
    ReturnTypeParseFailure, CatalogError,
)
from .config import (
    Config, get_config, init_config,
    default_catalog_path, default_log_level, default_vector_widths,
)

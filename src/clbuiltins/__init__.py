'''
OpenCL C builtin recognition: mangled-name decoding and builtin classification
'''

__version__ = "0.1.0"

from .common import (
    BuiltinLookupError, DecodeFailure, ClassificationMiss, ReturnTypeParseFailure, CatalogError,
)
from .param_types import ElementKind, ParamTypeInfo, PixelFormat, RoundingMode
from .catalog import BuiltinType, BuiltinCatalog, CatalogMatcher, load_catalog
from .mangling import DecodedName, decode
from .function_info import FunctionInfo, BuiltinVariant, INVALID_FUNCTION_INFO, assemble
from .registry import BuiltinRegistry, get_registry, reset_registry, lookup
from .predicates import *

__all__ = [
    "BuiltinLookupError", "DecodeFailure", "ClassificationMiss", "ReturnTypeParseFailure", "CatalogError",
    "ElementKind", "ParamTypeInfo", "PixelFormat", "RoundingMode",
    "BuiltinType", "BuiltinCatalog", "CatalogMatcher", "load_catalog",
    "DecodedName", "decode",
    "FunctionInfo", "BuiltinVariant", "INVALID_FUNCTION_INFO", "assemble",
    "BuiltinRegistry", "get_registry", "reset_registry", "lookup",
    "is_image_builtin", "is_sampled_image_read", "is_float_sampled_image_read",
    "is_uint_sampled_image_read", "is_int_sampled_image_read", "is_unsampled_image_read",
    "is_float_unsampled_image_read", "is_uint_unsampled_image_read", "is_int_unsampled_image_read",
    "is_image_write", "is_float_image_write", "is_uint_image_write", "is_int_image_write",
    "is_get_image_height", "is_get_image_width", "is_get_image_depth", "is_get_image_dim",
    "is_image_query",
]

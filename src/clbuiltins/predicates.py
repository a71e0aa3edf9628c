'''
Legacy boolean queries over builtin lookups

Each predicate is a projection of lookup(...).category and, for the pixel
format variants, of variant.pixel_format. Nothing here parses names.
'''

from typing import Optional

from .catalog import BuiltinType, IMAGE_TYPES, IMAGE_QUERY_TYPES
from .function_info import FunctionInfo
from .param_types import PixelFormat
from .registry import BuiltinRegistry, SymbolLike, get_registry


__all__ = [
    'is_image_builtin',
    'is_sampled_image_read', 'is_float_sampled_image_read',
    'is_uint_sampled_image_read', 'is_int_sampled_image_read',
    'is_unsampled_image_read', 'is_float_unsampled_image_read',
    'is_uint_unsampled_image_read', 'is_int_unsampled_image_read',
    'is_image_write', 'is_float_image_write', 'is_uint_image_write', 'is_int_image_write',
    'is_get_image_height', 'is_get_image_width', 'is_get_image_depth', 'is_get_image_dim',
    'is_image_query',
]


def _info(func: SymbolLike, registry: Optional[BuiltinRegistry]) -> FunctionInfo:
    return (registry if registry is not None else get_registry()).lookup(func)


def _is(func: SymbolLike, registry: Optional[BuiltinRegistry], category: BuiltinType,
        pixel_format: Optional[PixelFormat] = None) -> bool:
    info = _info(func, registry)
    if info.category != category:
        return False

    return pixel_format is None or info.variant.pixel_format == pixel_format


def is_image_builtin(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    '''Image read, write or query'''
    return _info(func, registry).category in IMAGE_TYPES


def is_sampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_SAMPLED)


def is_float_sampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_SAMPLED, PixelFormat.Float)


def is_uint_sampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_SAMPLED, PixelFormat.UInt)


def is_int_sampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_SAMPLED, PixelFormat.Int)


def is_unsampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_UNSAMPLED)


def is_float_unsampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_UNSAMPLED, PixelFormat.Float)


def is_uint_unsampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_UNSAMPLED, PixelFormat.UInt)


def is_int_unsampled_image_read(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.READ_IMAGE_UNSAMPLED, PixelFormat.Int)


def is_image_write(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.WRITE_IMAGE)


def is_float_image_write(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.WRITE_IMAGE, PixelFormat.Float)


def is_uint_image_write(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.WRITE_IMAGE, PixelFormat.UInt)


def is_int_image_write(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.WRITE_IMAGE, PixelFormat.Int)


def is_get_image_height(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.GET_IMAGE_HEIGHT)


def is_get_image_width(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.GET_IMAGE_WIDTH)


def is_get_image_depth(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.GET_IMAGE_DEPTH)


def is_get_image_dim(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    return _is(func, registry, BuiltinType.GET_IMAGE_DIM)


def is_image_query(func: SymbolLike, registry: Optional[BuiltinRegistry] = None) -> bool:
    '''Any image metadata query (size, dim, channel order/type, ...)'''
    return _info(func, registry).category in IMAGE_QUERY_TYPES

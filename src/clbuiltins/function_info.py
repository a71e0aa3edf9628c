'''
FunctionInfo - immutable description of a classified builtin call
'''

from dataclasses import dataclass, field
from typing import Optional

from .common import ReturnTypeParseFailure, default_vector_widths
from .catalog import (
    BuiltinType, CatalogMatch,
    SUFFIX_WIDTH, SUFFIX_FORMAT, SUFFIX_SATURATION, SUFFIX_ROUNDING,
)
from .mangling import DecodedName
from .param_types import ElementKind, ParamTypeInfo, PixelFormat, RoundingMode, parse_type_name


CONVERT_PREFIX = 'convert_'

SAMPLER_TYPE_NAMES = frozenset({'ocl_sampler', 'sampler_t'})


@dataclass(frozen = True)
class BuiltinVariant:
    '''Modifiers carried by the builtin's suffix tokens'''
    pixel_format    : Optional[PixelFormat] = None
    vector_width    : int = 0
    saturate        : bool = False
    rounding        : RoundingMode = RoundingMode.Default

    @classmethod
    def from_match(cls, match: CatalogMatch) -> 'BuiltinVariant':
        return cls(
            pixel_format    = match.value(SUFFIX_FORMAT),
            vector_width    = match.value(SUFFIX_WIDTH, 0),
            saturate        = match.value(SUFFIX_SATURATION, False),
            rounding        = match.value(SUFFIX_ROUNDING, RoundingMode.Default),
        )

    def __str__(self) -> str:
        parts = []
        if self.pixel_format is not None:
            parts.append(f'format = {self.pixel_format}')
        if self.vector_width:
            parts.append(f'width = {self.vector_width}')
        if self.saturate:
            parts.append('sat')
        if self.rounding != RoundingMode.Default:
            parts.append(f'rounding = {self.rounding}')

        return ', '.join(parts)


@dataclass(frozen = True)
class FunctionInfo:
    '''Classified builtin: category, base name, parameter types'''
    is_valid        : bool = False
    category        : BuiltinType = BuiltinType.NONE
    name            : str = ''
    return_type     : ParamTypeInfo = field(default_factory = ParamTypeInfo)    # CONVERT only
    params          : tuple[ParamTypeInfo, ...] = ()
    variant         : BuiltinVariant = field(default_factory = BuiltinVariant)

    def __post_init__(self):
        if self.is_valid and self.category == BuiltinType.NONE:
            raise ValueError(f'valid function info for {self.name!r} needs a category')

        if not self.is_valid and (self.category != BuiltinType.NONE or self.params):
            raise ValueError('invalid function info must have no category and no parameters')

        if self.category != BuiltinType.CONVERT and self.return_type != ParamTypeInfo():
            raise ValueError(f'{self.category} does not encode its return type in the name')

    def get_type(self) -> BuiltinType:
        return self.category

    def get_name(self) -> str:
        return self.name

    def get_return_type(self) -> ParamTypeInfo:
        return self.return_type

    @property
    def parameter_count(self) -> int:
        return len(self.params)

    def get_parameter(self, index: int) -> ParamTypeInfo:
        '''Parameter descriptor; index must be below parameter_count'''
        if not 0 <= index < len(self.params):
            raise IndexError(
                f'parameter {index} requested from {self.name or "<invalid>"} '
                f'which has {len(self.params)} parameters'
            )

        return self.params[index]

    def __str__(self) -> str:
        if not self.is_valid:
            return '<not a builtin>'

        params = ', '.join(str(p) for p in self.params)
        text = f'{self.name}({params}) -> {self.category}'

        if self.category == BuiltinType.CONVERT:
            text += f' returns {self.return_type}'

        variant = str(self.variant)
        if variant:
            text += f' [{variant}]'

        return text

    __repr__ = __str__


# Shared by every symbol that is malformed or not a builtin
INVALID_FUNCTION_INFO = FunctionInfo()


def has_sampler_argument(params: tuple[ParamTypeInfo, ...]) -> bool:
    '''Second argument is a sampler handle (image, sampler, coord, ...)'''
    return len(params) > 1 and params[1].is_opaque and params[1].struct_name in SAMPLER_TYPE_NAMES


def parse_conversion_type(name: str, match: CatalogMatch, vector_widths: Optional[tuple[int, ...]] = None) -> ParamTypeInfo:
    '''
    Destination type of convert_<type>[n][_sat][_<rounding>], from the name text.

    Raises:
        ReturnTypeParseFailure: name does not spell a numeric destination type
    '''
    text = name

    # Rounding is the last slot, saturation the one before it
    for family in (SUFFIX_ROUNDING, SUFFIX_SATURATION):
        token = match.token(family)
        if token is not None and text.endswith(token.text):
            text = text[:-len(token.text)]

    if not text.startswith(CONVERT_PREFIX):
        raise ReturnTypeParseFailure(name, f'conversion name lacks {CONVERT_PREFIX!r} prefix')

    widths = vector_widths if vector_widths is not None else default_vector_widths()
    dest = parse_type_name(text[len(CONVERT_PREFIX):], widths)

    if dest is None or dest.element_kind in (ElementKind.Void, ElementKind.Bool):
        raise ReturnTypeParseFailure(name, f'cannot parse destination type {text[len(CONVERT_PREFIX):]!r}')

    return dest


def assemble(decoded: DecodedName, match: CatalogMatch, vector_widths: Optional[tuple[int, ...]] = None) -> FunctionInfo:
    '''
    Combine decoder and matcher results into a FunctionInfo.

    Raises:
        ReturnTypeParseFailure: conversion destination type is unparseable
    '''
    category = match.category
    if match.entry.sampled is not None and has_sampler_argument(decoded.params):
        category = match.entry.sampled

    return_type = ParamTypeInfo()
    if category == BuiltinType.CONVERT:
        return_type = parse_conversion_type(decoded.name, match, vector_widths)

    return FunctionInfo(
        is_valid        = True,
        category        = category,
        name            = decoded.name,
        return_type     = return_type,
        params          = decoded.params,
        variant         = BuiltinVariant.from_match(match),
    )

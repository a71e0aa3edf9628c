'''
Type descriptors for builtin call sites

ParamTypeInfo describes the element shape of one value: scalar kind,
signedness, element byte length, lane count, and for opaque handles
(images, samplers, events, queues) the handle's type name.
'''

import re
from dataclasses import dataclass
from typing import Optional

from .common import IntEnum2


class ElementKind(IntEnum2):
    '''Scalar element kinds'''
    Void    = 0
    Bool    = 1
    Int8    = 2
    Int16   = 3
    Int32   = 4
    Int64   = 5
    Float16 = 6
    Float32 = 7
    Float64 = 8
    Opaque  = 9

    @property
    def byte_length(self) -> int:
        return _BYTE_LENGTHS[self]

    def is_integer(self) -> bool:
        return ElementKind.Int8 <= self <= ElementKind.Int64

    def is_float(self) -> bool:
        return ElementKind.Float16 <= self <= ElementKind.Float64


_BYTE_LENGTHS = {
    ElementKind.Void    : 0,
    ElementKind.Bool    : 1,
    ElementKind.Int8    : 1,
    ElementKind.Int16   : 2,
    ElementKind.Int32   : 4,
    ElementKind.Int64   : 8,
    ElementKind.Float16 : 2,
    ElementKind.Float32 : 4,
    ElementKind.Float64 : 8,
    ElementKind.Opaque  : 0,
}


class PixelFormat(IntEnum2):
    '''Pixel result/data type selected by the image builtin suffix'''
    Float   = 0
    Int     = 1
    UInt    = 2
    Half    = 3


class RoundingMode(IntEnum2):
    '''Rounding modifier of conversions and half stores'''
    Default = 0
    RTE     = 1
    RTZ     = 2
    RTP     = 3
    RTN     = 4


@dataclass(frozen = True)
class ParamTypeInfo:
    '''Element shape of a parameter or return value'''
    is_signed       : bool = False
    element_kind    : ElementKind = ElementKind.Void
    byte_length     : int = 0
    vector_width    : int = 0           # 0 == scalar
    struct_name     : str = ''          # only for ElementKind.Opaque

    def __post_init__(self):
        if self.element_kind == ElementKind.Opaque:
            if not self.struct_name:
                raise ValueError('opaque type requires a struct name')
            if self.vector_width:
                raise ValueError(f'opaque type {self.struct_name} cannot be a vector')

        else:
            if self.struct_name:
                raise ValueError(f'{self.element_kind} cannot carry struct name {self.struct_name!r}')
            if self.byte_length != self.element_kind.byte_length:
                raise ValueError(f'{self.element_kind} is {self.element_kind.byte_length} bytes, not {self.byte_length}')
            if self.is_signed and not self.element_kind.is_integer():
                raise ValueError(f'{self.element_kind} cannot be signed')

    @classmethod
    def scalar(cls, kind: ElementKind, is_signed: bool = False) -> 'ParamTypeInfo':
        return cls(is_signed = is_signed, element_kind = kind, byte_length = kind.byte_length)

    @classmethod
    def opaque(cls, name: str) -> 'ParamTypeInfo':
        return cls(element_kind = ElementKind.Opaque, struct_name = name)

    def with_width(self, width: int) -> 'ParamTypeInfo':
        '''Vector of this scalar type'''
        return ParamTypeInfo(
            is_signed       = self.is_signed,
            element_kind    = self.element_kind,
            byte_length     = self.byte_length,
            vector_width    = width,
        )

    @property
    def is_vector(self) -> bool:
        return self.vector_width > 0

    @property
    def is_opaque(self) -> bool:
        return self.element_kind == ElementKind.Opaque

    def __str__(self) -> str:
        if self.is_opaque:
            return self.struct_name

        name = _SCALAR_NAMES[(self.element_kind, self.is_signed)]
        return f'{name}{self.vector_width}' if self.vector_width else name


# OpenCL C spelling of each scalar type
OPENCL_TYPE_NAMES: dict[str, ParamTypeInfo] = {
    'void'      : ParamTypeInfo.scalar(ElementKind.Void),
    'bool'      : ParamTypeInfo.scalar(ElementKind.Bool),
    'char'      : ParamTypeInfo.scalar(ElementKind.Int8, True),
    'uchar'     : ParamTypeInfo.scalar(ElementKind.Int8),
    'short'     : ParamTypeInfo.scalar(ElementKind.Int16, True),
    'ushort'    : ParamTypeInfo.scalar(ElementKind.Int16),
    'int'       : ParamTypeInfo.scalar(ElementKind.Int32, True),
    'uint'      : ParamTypeInfo.scalar(ElementKind.Int32),
    'long'      : ParamTypeInfo.scalar(ElementKind.Int64, True),
    'ulong'     : ParamTypeInfo.scalar(ElementKind.Int64),
    'half'      : ParamTypeInfo.scalar(ElementKind.Float16),
    'float'     : ParamTypeInfo.scalar(ElementKind.Float32),
    'double'    : ParamTypeInfo.scalar(ElementKind.Float64),
}

_SCALAR_NAMES = {(t.element_kind, t.is_signed): name for name, t in OPENCL_TYPE_NAMES.items()}

_TYPE_NAME_RE = re.compile(r'(?P<scalar>[a-z]+?)(?P<width>[1-9][0-9]*)?')


def parse_type_name(text: str, vector_widths: tuple[int, ...] = (2, 3, 4, 8, 16)) -> Optional[ParamTypeInfo]:
    '''Parse an OpenCL type spelling such as "ushort8"; None if not a type

    void and bool have no vector forms.
    '''
    match = _TYPE_NAME_RE.fullmatch(text)
    if match is None:
        return None

    info = OPENCL_TYPE_NAMES.get(match.group('scalar'))
    if info is None:
        return None

    width = match.group('width')
    if width is None:
        return info

    if int(width) not in vector_widths or info.element_kind in (ElementKind.Void, ElementKind.Bool):
        return None

    return info.with_width(int(width))

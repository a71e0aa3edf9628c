'''
Decoder for the Itanium mangling subset emitted for OpenCL C builtins

Grammar handled here:

    <symbol>     ::= _Z <source-name> <type>*
                   | <identifier>                     unmangled C function
    <type>       ::= <builtin-type>
                   | P <type>                         pointer
                   | <qualifiers> <type>              U<source-name>* [r] [V] [K]
                   | Dv <number> _ <type>             vector
                   | <source-name>                    opaque / struct
                   | S_ | S <seq-id> _                back-reference

Pointers and qualifiers are consumed but only the pointee's element shape is
kept. Every non-builtin type is appended to the substitution table after it
has been fully parsed, innermost first; builtins and back-references are not.
'''

import re
from dataclasses import dataclass
from typing import Optional

from ..common import DecodeFailure, IntEnum2, default_vector_widths
from ..param_types import ElementKind, ParamTypeInfo, OPENCL_TYPE_NAMES


MANGLE_PREFIX = '_Z'

BUILTIN_TYPE_CODES: dict[str, ParamTypeInfo] = {
    'v' : OPENCL_TYPE_NAMES['void'],
    'b' : OPENCL_TYPE_NAMES['bool'],
    'c' : OPENCL_TYPE_NAMES['char'],
    'a' : OPENCL_TYPE_NAMES['char'],      # signed char
    'h' : OPENCL_TYPE_NAMES['uchar'],
    's' : OPENCL_TYPE_NAMES['short'],
    't' : OPENCL_TYPE_NAMES['ushort'],
    'i' : OPENCL_TYPE_NAMES['int'],
    'j' : OPENCL_TYPE_NAMES['uint'],
    'l' : OPENCL_TYPE_NAMES['long'],
    'm' : OPENCL_TYPE_NAMES['ulong'],
    'x' : OPENCL_TYPE_NAMES['long'],      # long long
    'y' : OPENCL_TYPE_NAMES['ulong'],     # unsigned long long
    'f' : OPENCL_TYPE_NAMES['float'],
    'd' : OPENCL_TYPE_NAMES['double'],
}

HALF_TYPE_CODE = 'Dh'

CV_QUALIFIERS = 'rVK'

_IDENTIFIER_RE = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
_SEQ_ID_RE = re.compile(r'[0-9A-Z]*')


def _is_digit(c: str) -> bool:
    return len(c) == 1 and '0' <= c <= '9'


class TypeConstructor(IntEnum2):
    '''Prefix constructors waiting for their inner type'''
    Pointer     = 0
    Qualified   = 1
    Vector      = 2


@dataclass(frozen = True)
class DecodedName:
    '''Result of decoding one symbol'''
    name    : str
    params  : tuple[ParamTypeInfo, ...]
    mangled : bool = True


class MangledNameDecoder:
    '''Single pass decoder for one symbol string'''

    def __init__(self, symbol: str, vector_widths: Optional[tuple[int, ...]] = None):
        self.symbol = symbol
        self.pos = 0
        self.vector_widths = tuple(vector_widths) if vector_widths is not None else default_vector_widths()

        # Substitution candidates in encounter order, resolved to descriptors
        self.substitutions: list[ParamTypeInfo] = []

    def fail(self, reason: str):
        raise DecodeFailure(self.symbol, reason, self.pos)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.symbol[index] if index < len(self.symbol) else ''

    def at_end(self) -> bool:
        return self.pos >= len(self.symbol)

    def decode(self) -> DecodedName:
        if not self.symbol.startswith(MANGLE_PREFIX):
            if _IDENTIFIER_RE.fullmatch(self.symbol) is None:
                self.fail('neither a mangled name nor a C identifier')

            return DecodedName(self.symbol, (), mangled = False)

        self.pos = len(MANGLE_PREFIX)

        if not _is_digit(self.peek()):
            # Nested (N...E) and special names
            self.fail('only plain function names are supported')

        name = self.parse_source_name()
        params: list[ParamTypeInfo] = []

        # A lone void parameter spells an empty parameter list
        if self.peek() == 'v' and self.pos + 1 == len(self.symbol):
            return DecodedName(name, ())

        while not self.at_end():
            if self.peek() == 'v':
                self.fail('void parameter in a non-empty parameter list')

            params.append(self.parse_type())

        return DecodedName(name, tuple(params))

    def parse_number(self) -> int:
        start = self.pos
        while _is_digit(self.peek()):
            self.pos += 1

        digits = self.symbol[start:self.pos]
        if not digits:
            self.fail('expected a number')

        if len(digits) > 1 and digits[0] == '0':
            self.pos = start
            self.fail('number with leading zero')

        return int(digits)

    def parse_source_name(self) -> str:
        length = self.parse_number()
        if length == 0 or self.pos + length > len(self.symbol):
            self.fail(f'source name length {length} runs past end of symbol')

        name = self.symbol[self.pos:self.pos + length]
        if _IDENTIFIER_RE.fullmatch(name) is None:
            self.fail(f'invalid identifier {name!r}')

        self.pos += length
        return name

    def parse_substitution(self) -> ParamTypeInfo:
        # Caller has checked the leading 'S'
        self.pos += 1
        seq_id = _SEQ_ID_RE.match(self.symbol, self.pos).group()
        self.pos += len(seq_id)

        if self.peek() != '_':
            self.fail('unsupported substitution')

        self.pos += 1
        index = int(seq_id, 36) + 1 if seq_id else 0

        if index >= len(self.substitutions):
            self.fail(f'back-reference S{seq_id}_ to entry {index} of {len(self.substitutions)}')

        return self.substitutions[index]

    def parse_qualifiers(self):
        '''Consume one qualifier group: vendor qualifiers then cv-qualifiers'''
        while self.peek() == 'U':
            self.pos += 1
            if not _is_digit(self.peek()):
                self.fail('expected vendor qualifier name')

            self.parse_source_name()

            if self.peek() == 'I':
                self.fail('templated vendor qualifiers are not supported')

        for qualifier in CV_QUALIFIERS:
            if self.peek() == qualifier:
                self.pos += 1

    def parse_vector_prefix(self) -> int:
        self.pos += 2
        if not _is_digit(self.peek()):
            self.fail('dependent vector sizes are not supported')

        width = self.parse_number()
        if width not in self.vector_widths:
            self.fail(f'unsupported vector width {width}')

        if self.peek() != '_':
            self.fail('expected _ after vector width')

        self.pos += 1
        return width

    def parse_terminal(self) -> tuple[ParamTypeInfo, bool]:
        '''Parse a type with no prefix constructor; returns (type, substitutable)'''
        code = self.peek()

        if self.symbol.startswith(HALF_TYPE_CODE, self.pos):
            self.pos += 2
            return OPENCL_TYPE_NAMES['half'], False

        if code in BUILTIN_TYPE_CODES:
            self.pos += 1
            return BUILTIN_TYPE_CODES[code], False

        if _is_digit(code):
            return ParamTypeInfo.opaque(self.parse_source_name()), True

        if code == 'S':
            return self.parse_substitution(), False

        if not code:
            self.fail('unexpected end of symbol')

        self.fail(f'unknown type code {code!r}')

    def apply(self, constructor: TypeConstructor, arg: int, inner: ParamTypeInfo) -> ParamTypeInfo:
        if constructor == TypeConstructor.Vector:
            if inner.is_vector:
                self.fail('vector of vector')

            if inner.element_kind in (ElementKind.Opaque, ElementKind.Void, ElementKind.Bool):
                self.fail(f'vector of {inner}')

            return inner.with_width(arg)

        # Pointers and qualifiers keep the pointee's shape
        return inner

    def parse_type(self) -> ParamTypeInfo:
        '''Parse one <type>, using an explicit stack for prefix constructors'''
        stack: list[tuple[TypeConstructor, int]] = []

        while True:
            code = self.peek()

            if code == 'P':
                self.pos += 1
                stack.append((TypeConstructor.Pointer, 0))

            elif code == 'U' or (code and code in CV_QUALIFIERS):
                self.parse_qualifiers()
                stack.append((TypeConstructor.Qualified, 0))

            elif code == 'D' and self.peek(1) == 'v':
                stack.append((TypeConstructor.Vector, self.parse_vector_prefix()))

            else:
                break

        info, substitutable = self.parse_terminal()
        if substitutable:
            self.substitutions.append(info)

        while stack:
            constructor, arg = stack.pop()
            info = self.apply(constructor, arg, info)
            self.substitutions.append(info)

        return info


def decode(symbol: str, vector_widths: Optional[tuple[int, ...]] = None) -> DecodedName:
    '''
    Decode a builtin symbol into its base name and parameter types.

    Raises:
        DecodeFailure: symbol is outside the supported grammar
    '''
    return MangledNameDecoder(symbol, vector_widths).decode()

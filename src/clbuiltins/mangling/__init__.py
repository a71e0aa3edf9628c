from .decoder import (
    DecodedName, MangledNameDecoder, TypeConstructor, decode,
    BUILTIN_TYPE_CODES, MANGLE_PREFIX,
)

'''
Failure taxonomy for builtin lookups

DecodeFailure, ClassificationMiss and ReturnTypeParseFailure are expected
outcomes: most symbols seen by a compiler pass are not builtins. The registry
catches them and records the canonical invalid FunctionInfo instead.
'''


class BuiltinLookupError(Exception):
    '''Base class of recoverable lookup failures'''

    def __init__(self, symbol: str, reason: str):
        super().__init__(f'{symbol!r}: {reason}')
        self.symbol = symbol
        self.reason = reason


class DecodeFailure(BuiltinLookupError):
    '''Symbol does not conform to the supported mangling grammar'''

    def __init__(self, symbol: str, reason: str, position: int = -1):
        if position >= 0:
            reason = f'{reason} at offset {position}'

        super().__init__(symbol, reason)
        self.position = position


class ClassificationMiss(BuiltinLookupError):
    '''Symbol decoded cleanly but names no catalog entry'''


class ReturnTypeParseFailure(BuiltinLookupError):
    '''Destination type embedded in a conversion name could not be parsed'''


class CatalogError(ValueError):
    '''Malformed builtin catalog data'''

'''Closed set of builtin categories'''

from ..common import IntEnum2


class BuiltinType(IntEnum2):
    '''Category tag of a recognized builtin'''
    NONE                            = 0

    # Conversions (destination type encoded in the name)
    CONVERT                         = 1

    # Images
    READ_IMAGE_SAMPLED              = 10
    READ_IMAGE_UNSAMPLED            = 11
    WRITE_IMAGE                     = 12
    GET_IMAGE_WIDTH                 = 13
    GET_IMAGE_HEIGHT                = 14
    GET_IMAGE_DEPTH                 = 15
    GET_IMAGE_DIM                   = 16
    GET_IMAGE_ARRAY_SIZE            = 17
    GET_IMAGE_CHANNEL_ORDER         = 18
    GET_IMAGE_CHANNEL_DATA_TYPE     = 19
    GET_IMAGE_NUM_SAMPLES           = 20

    # Work-item functions
    GET_WORK_DIM                    = 30
    GET_GLOBAL_SIZE                 = 31
    GET_GLOBAL_ID                   = 32
    GET_LOCAL_SIZE                  = 33
    GET_ENQUEUED_LOCAL_SIZE         = 34
    GET_LOCAL_ID                    = 35
    GET_NUM_GROUPS                  = 36
    GET_GROUP_ID                    = 37
    GET_GLOBAL_OFFSET               = 38
    GET_GLOBAL_LINEAR_ID            = 39
    GET_LOCAL_LINEAR_ID             = 40

    # Synchronization
    BARRIER                         = 50
    WORK_GROUP_BARRIER              = 51
    MEM_FENCE                       = 52
    READ_MEM_FENCE                  = 53
    WRITE_MEM_FENCE                 = 54

    # Async copies and prefetch
    ASYNC_WORK_GROUP_COPY           = 60
    ASYNC_WORK_GROUP_STRIDED_COPY   = 61
    WAIT_GROUP_EVENTS               = 62
    PREFETCH                        = 63

    # Legacy atomics (atomic_* and atom_*)
    ATOMIC_ADD                      = 70
    ATOMIC_SUB                      = 71
    ATOMIC_XCHG                     = 72
    ATOMIC_INC                      = 73
    ATOMIC_DEC                      = 74
    ATOMIC_CMPXCHG                  = 75
    ATOMIC_MIN                      = 76
    ATOMIC_MAX                      = 77
    ATOMIC_AND                      = 78
    ATOMIC_OR                       = 79
    ATOMIC_XOR                      = 80

    # C11-style atomics
    ATOMIC_INIT                     = 90
    ATOMIC_LOAD                     = 91
    ATOMIC_STORE                    = 92
    ATOMIC_EXCHANGE                 = 93
    ATOMIC_COMPARE_EXCHANGE         = 94
    ATOMIC_FETCH_ADD                = 95
    ATOMIC_FETCH_SUB                = 96
    ATOMIC_FETCH_AND                = 97
    ATOMIC_FETCH_OR                 = 98
    ATOMIC_FETCH_XOR                = 99
    ATOMIC_FETCH_MIN                = 100
    ATOMIC_FETCH_MAX                = 101
    ATOMIC_FLAG_TEST_AND_SET        = 102
    ATOMIC_FLAG_CLEAR               = 103
    ATOMIC_WORK_ITEM_FENCE          = 104

    # Vector data load/store
    VLOAD                           = 110
    VSTORE                          = 111
    VLOAD_HALF                      = 112
    VSTORE_HALF                     = 113
    VLOADA_HALF                     = 114
    VSTOREA_HALF                    = 115

    # Sub-groups
    GET_SUB_GROUP_SIZE              = 120
    GET_MAX_SUB_GROUP_SIZE          = 121
    GET_NUM_SUB_GROUPS              = 122
    GET_SUB_GROUP_ID                = 123
    GET_SUB_GROUP_LOCAL_ID          = 124
    SUB_GROUP_BARRIER               = 125
    SUB_GROUP_ALL                   = 126
    SUB_GROUP_ANY                   = 127
    SUB_GROUP_BROADCAST             = 128
    SUB_GROUP_REDUCE                = 129
    SUB_GROUP_SCAN_INCLUSIVE        = 130
    SUB_GROUP_SCAN_EXCLUSIVE        = 131
    SUB_GROUP_SHUFFLE               = 132
    SUB_GROUP_BLOCK_READ            = 133
    SUB_GROUP_BLOCK_WRITE           = 134

    # Miscellaneous
    SHUFFLE                         = 140
    SHUFFLE2                        = 141
    PRINTF                          = 142

    # Elementwise families
    MATH                            = 150
    NATIVE_MATH                     = 151
    HALF_MATH                       = 152
    INTEGER                         = 153
    COMMON                          = 154
    GEOMETRIC                       = 155
    RELATIONAL                      = 156


IMAGE_READ_TYPES = frozenset({
    BuiltinType.READ_IMAGE_SAMPLED,
    BuiltinType.READ_IMAGE_UNSAMPLED,
})

IMAGE_QUERY_TYPES = frozenset({
    BuiltinType.GET_IMAGE_WIDTH,
    BuiltinType.GET_IMAGE_HEIGHT,
    BuiltinType.GET_IMAGE_DEPTH,
    BuiltinType.GET_IMAGE_DIM,
    BuiltinType.GET_IMAGE_ARRAY_SIZE,
    BuiltinType.GET_IMAGE_CHANNEL_ORDER,
    BuiltinType.GET_IMAGE_CHANNEL_DATA_TYPE,
    BuiltinType.GET_IMAGE_NUM_SAMPLES,
})

IMAGE_TYPES = IMAGE_READ_TYPES | IMAGE_QUERY_TYPES | {BuiltinType.WRITE_IMAGE}

#!/usr/bin/env python3
'''
Symbol corpus covering every builtin category
'''

from pathlib import Path
import sys
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from clbuiltins import BuiltinRegistry, BuiltinType, ElementKind, ParamTypeInfo


def mangle(name: str, params: str) -> str:
    return f'_Z{len(name)}{name}{params}'


# (base name, parameter codes, expected category)
CORPUS = [
    ('convert_int4',                    'Dv4_f',                            BuiltinType.CONVERT),
    ('read_imagef',                     '14ocl_image2d_ro11ocl_samplerDv2_f', BuiltinType.READ_IMAGE_SAMPLED),
    ('read_imageui',                    '14ocl_image2d_roDv2_i',            BuiltinType.READ_IMAGE_UNSAMPLED),
    ('write_imagei',                    '14ocl_image2d_woDv2_iDv4_i',       BuiltinType.WRITE_IMAGE),
    ('get_image_width',                 '14ocl_image2d_ro',                 BuiltinType.GET_IMAGE_WIDTH),
    ('get_image_height',                '14ocl_image2d_ro',                 BuiltinType.GET_IMAGE_HEIGHT),
    ('get_image_depth',                 '14ocl_image3d_ro',                 BuiltinType.GET_IMAGE_DEPTH),
    ('get_image_dim',                   '14ocl_image2d_ro',                 BuiltinType.GET_IMAGE_DIM),
    ('get_image_array_size',            '20ocl_image2d_array_ro',           BuiltinType.GET_IMAGE_ARRAY_SIZE),
    ('get_image_channel_order',         '14ocl_image2d_ro',                 BuiltinType.GET_IMAGE_CHANNEL_ORDER),
    ('get_image_channel_data_type',     '14ocl_image2d_ro',                 BuiltinType.GET_IMAGE_CHANNEL_DATA_TYPE),
    ('get_image_num_samples',           '19ocl_image2d_msaa_ro',            BuiltinType.GET_IMAGE_NUM_SAMPLES),
    ('get_work_dim',                    'v',                                BuiltinType.GET_WORK_DIM),
    ('get_global_size',                 'j',                                BuiltinType.GET_GLOBAL_SIZE),
    ('get_global_id',                   'j',                                BuiltinType.GET_GLOBAL_ID),
    ('get_local_size',                  'j',                                BuiltinType.GET_LOCAL_SIZE),
    ('get_enqueued_local_size',         'j',                                BuiltinType.GET_ENQUEUED_LOCAL_SIZE),
    ('get_local_id',                    'j',                                BuiltinType.GET_LOCAL_ID),
    ('get_num_groups',                  'j',                                BuiltinType.GET_NUM_GROUPS),
    ('get_group_id',                    'j',                                BuiltinType.GET_GROUP_ID),
    ('get_global_offset',               'j',                                BuiltinType.GET_GLOBAL_OFFSET),
    ('get_global_linear_id',            'v',                                BuiltinType.GET_GLOBAL_LINEAR_ID),
    ('get_local_linear_id',             'v',                                BuiltinType.GET_LOCAL_LINEAR_ID),
    ('barrier',                         'j',                                BuiltinType.BARRIER),
    ('work_group_barrier',              'j12memory_scope',                  BuiltinType.WORK_GROUP_BARRIER),
    ('mem_fence',                       'j',                                BuiltinType.MEM_FENCE),
    ('read_mem_fence',                  'j',                                BuiltinType.READ_MEM_FENCE),
    ('write_mem_fence',                 'j',                                BuiltinType.WRITE_MEM_FENCE),
    ('async_work_group_copy',           'PU3AS3fPU3AS1Kfm9ocl_event',       BuiltinType.ASYNC_WORK_GROUP_COPY),
    ('async_work_group_strided_copy',   'PU3AS1fPU3AS3Kfmm9ocl_event',      BuiltinType.ASYNC_WORK_GROUP_STRIDED_COPY),
    ('wait_group_events',               'iP9ocl_event',                     BuiltinType.WAIT_GROUP_EVENTS),
    ('prefetch',                        'PU3AS1Kfm',                        BuiltinType.PREFETCH),
    ('atomic_add',                      'PU3AS1Vii',                        BuiltinType.ATOMIC_ADD),
    ('atomic_sub',                      'PU3AS1Vjj',                        BuiltinType.ATOMIC_SUB),
    ('atomic_xchg',                     'PU3AS1Vff',                        BuiltinType.ATOMIC_XCHG),
    ('atom_inc',                        'PU3AS1Vi',                         BuiltinType.ATOMIC_INC),
    ('atomic_dec',                      'PU3AS1Vi',                         BuiltinType.ATOMIC_DEC),
    ('atomic_cmpxchg',                  'PU3AS1Vjjj',                       BuiltinType.ATOMIC_CMPXCHG),
    ('atomic_min',                      'PU3AS3Vii',                        BuiltinType.ATOMIC_MIN),
    ('atomic_max',                      'PU3AS3Vjj',                        BuiltinType.ATOMIC_MAX),
    ('atomic_and',                      'PU3AS1Vii',                        BuiltinType.ATOMIC_AND),
    ('atomic_or',                       'PU3AS1Vii',                        BuiltinType.ATOMIC_OR),
    ('atom_xor',                        'PU3AS1Vll',                        BuiltinType.ATOMIC_XOR),
    ('atomic_init',                     'PU3AS4VU7_Atomicii',               BuiltinType.ATOMIC_INIT),
    ('atomic_load',                     'PU3AS4VU7_Atomici',                BuiltinType.ATOMIC_LOAD),
    ('atomic_store_explicit',           'PU3AS4VU7_Atomicii12memory_order', BuiltinType.ATOMIC_STORE),
    ('atomic_exchange',                 'PU3AS4VU7_Atomicjj',               BuiltinType.ATOMIC_EXCHANGE),
    ('atomic_compare_exchange_weak',    'PU3AS4VU7_AtomiciPU3AS4ii',        BuiltinType.ATOMIC_COMPARE_EXCHANGE),
    ('atomic_fetch_add',                'PU3AS4VU7_Atomicii',               BuiltinType.ATOMIC_FETCH_ADD),
    ('atomic_fetch_sub',                'PU3AS4VU7_Atomicii',               BuiltinType.ATOMIC_FETCH_SUB),
    ('atomic_fetch_and',                'PU3AS4VU7_Atomicjj',               BuiltinType.ATOMIC_FETCH_AND),
    ('atomic_fetch_or',                 'PU3AS4VU7_Atomicjj',               BuiltinType.ATOMIC_FETCH_OR),
    ('atomic_fetch_xor',                'PU3AS4VU7_Atomicjj',               BuiltinType.ATOMIC_FETCH_XOR),
    ('atomic_fetch_min_explicit',       'PU3AS4VU7_Atomicii12memory_order', BuiltinType.ATOMIC_FETCH_MIN),
    ('atomic_fetch_max',                'PU3AS4VU7_Atomicll',               BuiltinType.ATOMIC_FETCH_MAX),
    ('atomic_flag_test_and_set',        'PU3AS4VU7_Atomici',                BuiltinType.ATOMIC_FLAG_TEST_AND_SET),
    ('atomic_flag_clear',               'PU3AS4VU7_Atomici',                BuiltinType.ATOMIC_FLAG_CLEAR),
    ('atomic_work_item_fence',          'j12memory_order12memory_scope',    BuiltinType.ATOMIC_WORK_ITEM_FENCE),
    ('vload4',                          'mPU3AS1Kf',                        BuiltinType.VLOAD),
    ('vstore16',                        'Dv16_cmPU3AS1c',                   BuiltinType.VSTORE),
    ('vload_half',                      'mPU3AS1KDh',                       BuiltinType.VLOAD_HALF),
    ('vstore_half_rte',                 'fmPU3AS1Dh',                       BuiltinType.VSTORE_HALF),
    ('vloada_half4',                    'mPU3AS1KDh',                       BuiltinType.VLOADA_HALF),
    ('vstorea_half4_rtz',               'Dv4_fmPU3AS1Dh',                   BuiltinType.VSTOREA_HALF),
    ('get_sub_group_size',              'v',                                BuiltinType.GET_SUB_GROUP_SIZE),
    ('get_max_sub_group_size',          'v',                                BuiltinType.GET_MAX_SUB_GROUP_SIZE),
    ('get_num_sub_groups',              'v',                                BuiltinType.GET_NUM_SUB_GROUPS),
    ('get_sub_group_id',                'v',                                BuiltinType.GET_SUB_GROUP_ID),
    ('get_sub_group_local_id',          'v',                                BuiltinType.GET_SUB_GROUP_LOCAL_ID),
    ('sub_group_barrier',               'j',                                BuiltinType.SUB_GROUP_BARRIER),
    ('sub_group_all',                   'i',                                BuiltinType.SUB_GROUP_ALL),
    ('sub_group_any',                   'i',                                BuiltinType.SUB_GROUP_ANY),
    ('sub_group_broadcast',             'fj',                               BuiltinType.SUB_GROUP_BROADCAST),
    ('sub_group_reduce_max',            'i',                                BuiltinType.SUB_GROUP_REDUCE),
    ('sub_group_scan_inclusive_add',    'f',                                BuiltinType.SUB_GROUP_SCAN_INCLUSIVE),
    ('sub_group_scan_exclusive_min',    'j',                                BuiltinType.SUB_GROUP_SCAN_EXCLUSIVE),
    ('sub_group_shuffle_xor',           'fj',                               BuiltinType.SUB_GROUP_SHUFFLE),
    ('intel_sub_group_block_read4',     'PU3AS1Kj',                         BuiltinType.SUB_GROUP_BLOCK_READ),
    ('intel_sub_group_block_write_us2', 'PU3AS1tDv2_t',                     BuiltinType.SUB_GROUP_BLOCK_WRITE),
    ('shuffle',                         'Dv4_fDv4_j',                       BuiltinType.SHUFFLE),
    ('shuffle2',                        'Dv4_fS_Dv4_j',                     BuiltinType.SHUFFLE2),
    ('sin',                             'f',                                BuiltinType.MATH),
    ('native_sqrt',                     'Dv4_f',                            BuiltinType.NATIVE_MATH),
    ('half_exp',                        'd',                                BuiltinType.HALF_MATH),
    ('mul24',                           'ii',                               BuiltinType.INTEGER),
    ('clamp',                           'Dv2_fS_S_',                        BuiltinType.COMMON),
    ('dot',                             'Dv4_fS_',                          BuiltinType.GEOMETRIC),
    ('isequal',                         'ff',                               BuiltinType.RELATIONAL),
]


class TestCorpus(unittest.TestCase):
    '''One real symbol per category'''

    @classmethod
    def setUpClass(cls):
        cls.registry = BuiltinRegistry()

    @classmethod
    def tearDownClass(cls):
        cls.registry.close()

    def test_every_category_covered(self):
        covered = {category for _, _, category in CORPUS} | {BuiltinType.PRINTF}
        missing = set(BuiltinType) - covered - {BuiltinType.NONE}

        self.assertEqual(missing, set())

    def test_corpus(self):
        for name, params, category in CORPUS:
            symbol = mangle(name, params)
            with self.subTest(symbol = symbol):
                info = self.registry.lookup(symbol)
                self.assertTrue(info.is_valid, self.registry.failure_of(symbol))
                self.assertEqual(info.get_type(), category)
                self.assertEqual(info.get_name(), name)

    def test_printf(self):
        info = self.registry.lookup('printf')

        self.assertEqual(info.get_type(), BuiltinType.PRINTF)
        self.assertEqual(info.parameter_count, 0)

    def test_float4_descriptor(self):
        info = self.registry.lookup(mangle('native_sqrt', 'Dv4_f'))
        param = info.get_parameter(0)

        self.assertEqual(param.vector_width, 4)
        self.assertEqual(param.element_kind, ElementKind.Float32)
        self.assertEqual(param.byte_length, 4)
        self.assertFalse(param.is_signed)

    def test_atomic_descriptors(self):
        info = self.registry.lookup(mangle('atomic_compare_exchange_weak', 'PU3AS4VU7_AtomiciPU3AS4ii'))

        self.assertEqual(info.params, (ParamTypeInfo.scalar(ElementKind.Int32, True),) * 3)

    def test_back_referenced_vectors(self):
        info = self.registry.lookup(mangle('clamp', 'Dv2_fS_S_'))

        self.assertEqual(info.parameter_count, 3)
        self.assertTrue(all(p == info.params[0] for p in info.params))
        self.assertEqual(info.params[0], ParamTypeInfo.scalar(ElementKind.Float32).with_width(2))


if __name__ == '__main__':
    unittest.main()

import unittest

import numpy as np

from shapebridge.domain import ITensor
from shapebridge.infrastructure.tensor import Tensor


class TestTensorLayout(unittest.TestCase):
    def test_zeros_shape_dtype_and_values(self):
        x = Tensor.zeros((2, 3))
        self.assertEqual(x.shape, (2, 3))
        self.assertEqual(x.rank, 2)
        self.assertEqual(x.dtype, np.float32)
        np.testing.assert_allclose(x.to_numpy(), np.zeros((2, 3), dtype=np.float32))

    def test_size_per_axis(self):
        x = Tensor.zeros((10, 4, 2, 3, 3))
        self.assertEqual([x.size(i) for i in range(5)], [10, 4, 2, 3, 3])
        self.assertEqual(x.size(-1), 3)
        self.assertEqual(x.numel(), 720)

    def test_from_numpy_shares_storage(self):
        arr = np.arange(6, dtype=np.float32).reshape(2, 3)
        x = Tensor.from_numpy(arr)
        self.assertIs(x.to_numpy(), arr)

    def test_ordering(self):
        self.assertEqual(Tensor.zeros((2, 3)).ordering(), "c")
        f = Tensor((2, 3), order="f")
        self.assertEqual(f.ordering(), "f")
        self.assertFalse(f.is_c_contiguous())

    def test_transposed_view_is_not_c_contiguous(self):
        arr = np.zeros((2, 3, 4), dtype=np.float32).transpose(0, 2, 1)
        x = Tensor.from_numpy(arr)
        self.assertEqual(x.ordering(), "c")
        self.assertFalse(x.is_c_contiguous())

    def test_dup_copies_with_requested_order(self):
        x = Tensor.arange((2, 3))
        f = x.dup("f")
        self.assertEqual(f.ordering(), "f")
        self.assertFalse(np.shares_memory(f.to_numpy(), x.to_numpy()))
        np.testing.assert_array_equal(f.to_numpy(), x.to_numpy())

    def test_reshape_view_and_inference(self):
        x = Tensor.arange((2, 3, 4))
        y = x.reshape((2, -1))
        self.assertEqual(y.shape, (2, 12))
        self.assertTrue(np.shares_memory(x.to_numpy(), y.to_numpy()))

    def test_reshape_invalid_raises(self):
        with self.assertRaises(ValueError):
            Tensor.zeros((2, 3)).reshape((4, 2))

    def test_invalid_order_raises(self):
        with self.assertRaises(ValueError):
            Tensor.zeros((2, 3)).dup("k")

    def test_satisfies_tensor_protocol(self):
        self.assertIsInstance(Tensor.zeros((1,)), ITensor)


if __name__ == "__main__":
    unittest.main()

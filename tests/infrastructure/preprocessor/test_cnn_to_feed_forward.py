from __future__ import annotations

import unittest

import numpy as np

from shapebridge.domain import (
    InputType,
    InvalidInputTypeError,
    InvalidShapeError,
    MaskState,
)
from shapebridge.infrastructure.preprocessor import CnnToFeedForwardPreProcessor
from shapebridge.infrastructure.tensor import Tensor


class TestCnnToFeedForward(unittest.TestCase):
    def setUp(self) -> None:
        self.pp = CnnToFeedForwardPreProcessor(
            input_height=3, input_width=4, num_channels=2
        )

    def test_forward_flattens_nchw(self) -> None:
        x = Tensor.arange((5, 2, 3, 4))
        y = self.pp.pre_process(x, 5)
        self.assertEqual(y.shape, (5, 24))
        np.testing.assert_array_equal(y.to_numpy(), x.to_numpy().reshape(5, 24))

    def test_forward_rank2_is_passthrough(self) -> None:
        x = Tensor.zeros((5, 24))
        self.assertIs(self.pp.pre_process(x, 5), x)

    def test_forward_wrong_spatial_shape_raises(self) -> None:
        with self.assertRaises(InvalidShapeError) as cm:
            self.pp.pre_process(Tensor.zeros((5, 2, 4, 3)), 5)
        self.assertIn("[5, 2, 4, 3]", str(cm.exception))

    def test_backprop_round_trip(self) -> None:
        x = Tensor.arange((5, 2, 3, 4), order="f")
        back = self.pp.backprop(self.pp.pre_process(x, 5), 5)
        self.assertEqual(back.shape, (5, 2, 3, 4))
        np.testing.assert_array_equal(back.to_numpy(), x.to_numpy())

    def test_backprop_column_mismatch_raises(self) -> None:
        with self.assertRaises(InvalidShapeError):
            self.pp.backprop(Tensor.zeros((5, 23)), 5)

    def test_backprop_rank4_is_passthrough(self) -> None:
        eps = Tensor.zeros((5, 2, 3, 4))
        self.assertIs(self.pp.backprop(eps, 5), eps)

    def test_output_type(self) -> None:
        self.assertEqual(
            self.pp.get_output_type(InputType.convolutional(3, 4, 2)),
            InputType.feed_forward(24),
        )
        self.assertEqual(
            self.pp.get_output_type(InputType.convolutional_flat(3, 4, 2)),
            InputType.feed_forward(24),
        )

    def test_output_type_invalid_raises(self) -> None:
        for it in [None, InputType.feed_forward(24), InputType.convolutional_3d(1, 3, 4, 2)]:
            with self.subTest(input_type=it):
                with self.assertRaises(InvalidInputTypeError):
                    self.pp.get_output_type(it)

    def test_mask_rank2_is_passthrough(self) -> None:
        mask = Tensor.zeros((5, 1))
        out_mask, state = self.pp.feed_forward_mask_array(mask, MaskState.ACTIVE, 5)
        self.assertIs(out_mask, mask)
        self.assertIs(state, MaskState.ACTIVE)

    def test_mask_rank4_singleton_spatial_is_squeezed(self) -> None:
        mask = Tensor.arange((5, 2, 1, 1))
        out_mask, state = self.pp.feed_forward_mask_array(mask, MaskState.ACTIVE, 5)
        self.assertEqual(out_mask.shape, (5, 2))
        np.testing.assert_array_equal(
            out_mask.to_numpy(), mask.to_numpy().reshape(5, 2)
        )
        self.assertIs(state, MaskState.ACTIVE)

    def test_mask_rank4_with_spatial_extent_raises(self) -> None:
        with self.assertRaises(InvalidShapeError):
            self.pp.feed_forward_mask_array(
                Tensor.zeros((5, 2, 3, 1)), MaskState.ACTIVE, 5
            )


if __name__ == "__main__":
    unittest.main()

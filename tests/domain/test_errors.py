import unittest

from shapebridge.domain import InputType, InvalidInputTypeError, InvalidShapeError


class TestErrors(unittest.TestCase):
    def test_invalid_shape_error_attributes_and_message(self):
        err = InvalidShapeError("[minibatch, 72]", (10, 71), op="backprop")
        self.assertIsInstance(err, ValueError)
        self.assertEqual(err.expected, "[minibatch, 72]")
        self.assertEqual(err.actual, (10, 71))
        self.assertEqual(
            str(err),
            "backprop: invalid input array: expected shape [minibatch, 72], "
            "but got [10, 71]",
        )

    def test_invalid_input_type_error_attributes_and_message(self):
        it = InputType.feed_forward(3)
        err = InvalidInputTypeError("CNN3D", it)
        self.assertIsInstance(err, TypeError)
        self.assertIs(err.actual, it)
        self.assertIn("CNN3D", str(err))
        self.assertIn("InputTypeFeedForward(size=3)", str(err))

    def test_invalid_input_type_error_with_none(self):
        err = InvalidInputTypeError("CNN3D", None, reason="missing")
        self.assertTrue(str(err).endswith("got None (missing)"))


if __name__ == "__main__":
    unittest.main()

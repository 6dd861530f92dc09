import unittest

from src.backpropnet.domain._errors import (
    BackwardBeforeForwardError,
    ShapeMismatchError,
    TopologyNotImplementedError,
    UnsupportedModelKindError,
)


class TestErrors(unittest.TestCase):
    def test_shape_mismatch_is_value_error_with_attributes(self):
        e = ShapeMismatchError("Unit.forward", expected=(3,), actual=(2,))
        self.assertIsInstance(e, ValueError)
        self.assertEqual(e.op, "Unit.forward")
        self.assertEqual(e.expected, (3,))
        self.assertEqual(e.actual, (2,))
        self.assertIn("Unit.forward", str(e))

    def test_backward_before_forward_is_runtime_error(self):
        e = BackwardBeforeForwardError("MaxPool2D")
        self.assertIsInstance(e, RuntimeError)
        self.assertEqual(e.component, "MaxPool2D")
        self.assertIn("MaxPool2D.backward", str(e))

    def test_unsupported_model_kind_lists_available(self):
        e = UnsupportedModelKindError("gan", ("cnn", "mlp"))
        self.assertIsInstance(e, ValueError)
        self.assertEqual(e.kind, "gan")
        self.assertEqual(e.available, ("cnn", "mlp"))
        self.assertIn("Available: cnn, mlp", str(e))

    def test_unsupported_model_kind_without_available(self):
        e = UnsupportedModelKindError("gan", ())
        self.assertIn("<none>", str(e))

    def test_topology_not_implemented_is_not_implemented_error(self):
        e = TopologyNotImplementedError("rnn", "predict")
        self.assertIsInstance(e, NotImplementedError)
        self.assertEqual((e.kind, e.op), ("rnn", "predict"))


if __name__ == "__main__":
    unittest.main()

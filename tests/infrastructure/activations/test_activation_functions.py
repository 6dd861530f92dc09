import math
import unittest

import numpy as np

from src.backpropnet.domain._activation import IActivation
from src.backpropnet.infrastructure._activations import (
    ReLU,
    Sigmoid,
    activation_name,
    available_activations,
    get_activation,
)


class TestSigmoid(unittest.TestCase):
    def setUp(self) -> None:
        self.act = Sigmoid()

    def test_value_at_zero(self):
        self.assertEqual(self.act.value(0.0), 0.5)

    def test_derivative_at_zero(self):
        self.assertAlmostEqual(self.act.derivative(0.0), 0.25)

    def test_derivative_matches_s_times_one_minus_s(self):
        for z in (-3.0, -0.4, 0.7, 2.5):
            s = 1.0 / (1.0 + math.exp(-z))
            self.assertAlmostEqual(self.act.derivative(z), s * (1.0 - s), places=12)

    def test_scalar_returns_float(self):
        self.assertIsInstance(self.act.value(1.0), float)
        self.assertIsInstance(self.act.derivative(1.0), float)

    def test_array_elementwise(self):
        z = np.array([[-1.0, 0.0], [1.0, 2.0]])
        y = self.act.value(z)
        self.assertEqual(y.shape, z.shape)
        self.assertTrue(np.allclose(y, 1.0 / (1.0 + np.exp(-z))))

    def test_derivative_matches_finite_difference(self):
        eps = 1e-6
        for z in (-2.0, 0.3, 1.5):
            numeric = (self.act.value(z + eps) - self.act.value(z - eps)) / (2 * eps)
            self.assertAlmostEqual(self.act.derivative(z), numeric, places=8)


class TestReLU(unittest.TestCase):
    def setUp(self) -> None:
        self.act = ReLU()

    def test_value(self):
        self.assertEqual(self.act.value(-2.0), 0.0)
        self.assertEqual(self.act.value(0.0), 0.0)
        self.assertEqual(self.act.value(1.5), 1.5)

    def test_derivative_is_zero_at_zero(self):
        self.assertEqual(self.act.derivative(0.0), 0.0)
        self.assertEqual(self.act.derivative(-1e-9), 0.0)
        self.assertEqual(self.act.derivative(1e-12), 1.0)

    def test_array_elementwise(self):
        z = np.array([-1.0, 0.0, 2.0])
        self.assertTrue(np.array_equal(self.act.value(z), [0.0, 0.0, 2.0]))
        self.assertTrue(np.array_equal(self.act.derivative(z), [0.0, 0.0, 1.0]))


class TestActivationRegistry(unittest.TestCase):
    def test_available(self):
        self.assertEqual(available_activations(), ("relu", "sigmoid"))

    def test_get_by_name(self):
        self.assertIsInstance(get_activation("relu"), ReLU)
        self.assertIsInstance(get_activation("sigmoid"), Sigmoid)

    def test_instance_passes_through(self):
        act = Sigmoid()
        self.assertIs(get_activation(act), act)

    def test_unknown_name_raises_value_error(self):
        with self.assertRaises(ValueError) as ctx:
            get_activation("tanh")
        self.assertIn("Unsupported activation name", str(ctx.exception))
        self.assertIn("Available: relu, sigmoid", str(ctx.exception))

    def test_non_activation_raises_type_error(self):
        with self.assertRaises(TypeError):
            get_activation(42)

    def test_protocol_and_names(self):
        self.assertIsInstance(ReLU(), IActivation)
        self.assertEqual(activation_name(ReLU()), "relu")
        self.assertEqual(activation_name(Sigmoid()), "sigmoid")

    def test_stateless_config(self):
        self.assertEqual(Sigmoid().get_config(), {})
        self.assertIsInstance(ReLU.from_config({}), ReLU)


if __name__ == "__main__":
    unittest.main()

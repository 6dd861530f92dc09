import math
import unittest

import numpy as np

from src.backpropnet.domain._errors import (
    BackwardBeforeForwardError,
    ShapeMismatchError,
)
from src.backpropnet.infrastructure.mlp._unit import Unit


class _Identity:
    def value(self, z):
        return z

    def derivative(self, z):
        return 1.0


class TestUnitConstruction(unittest.TestCase):
    def test_empty_weights_rejected(self):
        with self.assertRaises(ValueError):
            Unit([])

    def test_non_vector_weights_rejected(self):
        with self.assertRaises(ValueError):
            Unit([[1.0, 2.0]])

    def test_properties(self):
        u = Unit([0.1, 0.2], bias=0.3)
        self.assertEqual(u.in_features, 2)
        self.assertEqual(u.bias, 0.3)
        self.assertTrue(np.allclose(u.weights, [0.1, 0.2]))
        self.assertEqual(u.get_config(), {"in_features": 2, "activation": "sigmoid"})

    def test_weights_property_is_a_copy(self):
        u = Unit([0.1, 0.2])
        w = u.weights
        w[0] = 99.0
        self.assertEqual(u.weights[0], 0.1)


class TestUnitForward(unittest.TestCase):
    def test_sigmoid_forward_hand_value(self):
        u = Unit([0.5, -0.25, 1.0], bias=0.1)
        y = u.forward([1.0, 2.0, 3.0])
        self.assertAlmostEqual(y, 1.0 / (1.0 + math.exp(-3.1)))
        self.assertIsInstance(y, float)

    def test_forward_is_deterministic(self):
        u = Unit([0.5, -0.25], bias=0.1)
        self.assertEqual(u.forward([0.3, 0.4]), u.forward([0.3, 0.4]))

    def test_dimension_mismatch(self):
        u = Unit([0.5, -0.25, 1.0])
        with self.assertRaises(ShapeMismatchError) as ctx:
            u.forward([1.0, 2.0])
        self.assertEqual(ctx.exception.expected, (3,))
        self.assertEqual(ctx.exception.actual, (2,))

    def test_activation_derivative_uses_cached_z(self):
        u = Unit([1.0], bias=0.0)
        u.forward([0.0])
        self.assertAlmostEqual(u.activation_derivative(), 0.25)

    def test_activation_derivative_before_forward(self):
        with self.assertRaises(BackwardBeforeForwardError):
            Unit([1.0]).activation_derivative()


class TestUnitBackward(unittest.TestCase):
    def test_returns_delta_times_old_weights_and_updates(self):
        u = Unit([0.5, -1.0], bias=0.2, activation=_Identity())
        u.forward([2.0, 3.0])
        out = u.backward(0.5, learning_rate=0.1)
        self.assertTrue(np.allclose(out, [0.25, -0.5]))
        self.assertTrue(np.allclose(u.weights, [0.5 - 0.1 * 0.5 * 2.0, -1.0 - 0.1 * 0.5 * 3.0]))
        self.assertAlmostEqual(u.bias, 0.2 - 0.1 * 0.5)

    def test_backward_before_forward(self):
        with self.assertRaises(BackwardBeforeForwardError):
            Unit([1.0]).backward(1.0, 0.1)

    def test_backward_twice_raises(self):
        u = Unit([1.0])
        u.forward([1.0])
        u.backward(0.1, 0.1)
        with self.assertRaises(BackwardBeforeForwardError):
            u.backward(0.1, 0.1)

    def test_zero_learning_rate_leaves_parameters(self):
        u = Unit([0.3, 0.4], bias=-0.1)
        u.forward([1.0, 1.0])
        u.backward(u.activation_derivative(), 0.0)
        self.assertTrue(np.allclose(u.weights, [0.3, 0.4]))
        self.assertEqual(u.bias, -0.1)

    def test_weight_update_matches_finite_difference(self):
        # L = 0.5 * (y - t)^2 with y = sigmoid(w . x + b)
        w0, b0 = np.array([0.4, -0.3]), 0.05
        x, t = np.array([1.5, 0.7]), 0.9
        lr, eps = 1.0, 1e-6

        def loss(w, b):
            return 0.5 * (Unit(w, b).forward(x) - t) ** 2

        u = Unit(w0, b0)
        y = u.forward(x)
        u.backward((y - t) * u.activation_derivative(), lr)
        analytic = (w0 - u.weights) / lr
        for i in range(2):
            wp, wm = w0.copy(), w0.copy()
            wp[i] += eps
            wm[i] -= eps
            numeric = (loss(wp, b0) - loss(wm, b0)) / (2 * eps)
            self.assertAlmostEqual(analytic[i], numeric, places=7)
        numeric_b = (loss(w0, b0 + eps) - loss(w0, b0 - eps)) / (2 * eps)
        self.assertAlmostEqual((b0 - u.bias) / lr, numeric_b, places=7)


if __name__ == "__main__":
    unittest.main()

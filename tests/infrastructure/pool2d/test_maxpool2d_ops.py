import unittest

import numpy as np

from src.backpropnet.infrastructure.ops.pool2d_cpu import (
    maxpool2d_backward_cpu,
    maxpool2d_forward_cpu,
    maxpool2d_out_hw,
)

_X = np.array(
    [
        [1.0, 3.0, 2.0, 0.0],
        [4.0, 2.0, 1.0, 5.0],
        [0.0, 1.0, 7.0, 6.0],
        [2.0, 3.0, 8.0, 1.0],
    ]
)


class TestMaxPool2dOps(unittest.TestCase):
    def test_out_hw_floors(self):
        self.assertEqual(maxpool2d_out_hw(6, 6), (3, 3))
        self.assertEqual(maxpool2d_out_hw(5, 7), (2, 3))
        self.assertEqual(maxpool2d_out_hw(1, 4), (0, 2))

    def test_forward_values_and_argmax(self):
        y, argmax = maxpool2d_forward_cpu(_X)
        self.assertTrue(np.array_equal(y, [[4.0, 5.0], [3.0, 8.0]]))
        self.assertEqual(argmax.shape, (2, 2, 2))
        self.assertEqual(argmax[0, 0].tolist(), [1, 0])
        self.assertEqual(argmax[0, 1].tolist(), [1, 3])
        self.assertEqual(argmax[1, 0].tolist(), [3, 1])
        self.assertEqual(argmax[1, 1].tolist(), [3, 2])

    def test_tie_breaking_first_in_row_major(self):
        _, argmax = maxpool2d_forward_cpu(np.ones((2, 2)))
        self.assertEqual(argmax[0, 0].tolist(), [0, 0])
        _, argmax = maxpool2d_forward_cpu(np.array([[0.0, 5.0], [5.0, 1.0]]))
        self.assertEqual(argmax[0, 0].tolist(), [0, 1])

    def test_all_negative_window(self):
        y, argmax = maxpool2d_forward_cpu(np.array([[-3.0, -1.0], [-2.0, -4.0]]))
        self.assertEqual(y[0, 0], -1.0)
        self.assertEqual(argmax[0, 0].tolist(), [0, 1])

    def test_backward_routes_to_argmax_only(self):
        _, argmax = maxpool2d_forward_cpu(_X)
        grad = np.array([[1.0, 2.0], [3.0, 4.0]])
        grad_x = maxpool2d_backward_cpu(grad, argmax, _X.shape)
        expected = np.zeros((4, 4))
        expected[1, 0], expected[1, 3], expected[3, 1], expected[3, 2] = 1.0, 2.0, 3.0, 4.0
        self.assertTrue(np.array_equal(grad_x, expected))
        self.assertEqual(np.sum(grad_x), np.sum(grad))

    def test_odd_trailing_cells_get_zero_gradient(self):
        x = np.arange(25, dtype=np.float64).reshape(5, 5)
        y, argmax = maxpool2d_forward_cpu(x)
        self.assertEqual(y.shape, (2, 2))
        grad_x = maxpool2d_backward_cpu(np.ones((2, 2)), argmax, x.shape)
        self.assertEqual(grad_x.shape, (5, 5))
        self.assertTrue(np.array_equal(grad_x[4, :], np.zeros(5)))
        self.assertTrue(np.array_equal(grad_x[:, 4], np.zeros(5)))
        self.assertEqual(np.count_nonzero(grad_x), 4)


if __name__ == "__main__":
    unittest.main()

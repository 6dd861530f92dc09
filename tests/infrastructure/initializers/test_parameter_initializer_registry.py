import unittest

from src.backpropnet.infrastructure.utils.initializer import (
    ParameterInitializer,
    resolve_initializer,
)


class TestParameterInitializerRegistry(unittest.TestCase):
    def test_available_contains_builtin_initializers(self):
        names = ParameterInitializer.available()
        self.assertIn("uniform", names)
        self.assertIn("constant", names)

    def test_get_returns_callable(self):
        self.assertTrue(callable(ParameterInitializer.get("uniform")))

    def test_unknown_initializer_raises_value_error(self):
        with self.assertRaises(ValueError) as ctx:
            ParameterInitializer("___does_not_exist___")
        msg = str(ctx.exception)
        self.assertIn("Unsupported initializer name", msg)
        self.assertIn("Available:", msg)

    def test_register_initializer_no_overwrite_by_default(self):
        name = "__unit_test_initializer__"

        @ParameterInitializer.register_initializer(name, overwrite=True)
        class InitA:
            def next_weight(self):
                return 1.0

            def next_bias(self):
                return 0.0

        try:
            with self.assertRaises(ValueError):

                @ParameterInitializer.register_initializer(name)
                class InitB(InitA):
                    pass

        finally:
            ParameterInitializer.INITIALIZERS.pop(name, None)

    def test_register_initializer_overwrite_true(self):
        name = "__unit_test_initializer_overwrite__"

        def make_a():
            return None

        def make_b():
            return None

        try:
            ParameterInitializer.register_initializer(name, overwrite=True)(make_a)
            ParameterInitializer.register_initializer(name, overwrite=True)(make_b)
            self.assertIs(ParameterInitializer.get(name), make_b)
        finally:
            ParameterInitializer.INITIALIZERS.pop(name, None)

    def test_empty_name_rejected(self):
        with self.assertRaises(ValueError):
            ParameterInitializer.register_initializer("")


class TestUniformInitializer(unittest.TestCase):
    def test_same_seed_same_sequence(self):
        a = ParameterInitializer("uniform", seed=3)
        b = ParameterInitializer("uniform", seed=3)
        self.assertEqual(
            [a.next_weight() for _ in range(10)], [b.next_weight() for _ in range(10)]
        )

    def test_different_seed_different_sequence(self):
        a = ParameterInitializer("uniform", seed=0)
        b = ParameterInitializer("uniform", seed=1)
        self.assertNotEqual(
            [a.next_weight() for _ in range(5)], [b.next_weight() for _ in range(5)]
        )

    def test_weights_in_half_open_range_and_zero_bias(self):
        init = ParameterInitializer("uniform", seed=0)
        for _ in range(200):
            w = init.next_weight()
            self.assertGreaterEqual(w, -0.5)
            self.assertLess(w, 0.5)
        self.assertEqual(init.next_bias(), 0.0)

    def test_invalid_range(self):
        with self.assertRaises(ValueError):
            ParameterInitializer("uniform", low=0.5, high=0.5)

    def test_get_config(self):
        init = ParameterInitializer("uniform", seed=4)
        self.assertEqual(init.get_config(), {"name": "uniform", "seed": 4})


class TestConstantInitializer(unittest.TestCase):
    def test_constant_values(self):
        init = ParameterInitializer("constant", weight=0.25, bias=-1.0)
        self.assertEqual([init.next_weight() for _ in range(3)], [0.25] * 3)
        self.assertEqual(init.next_bias(), -1.0)


class TestResolveInitializer(unittest.TestCase):
    def test_none_is_seeded_uniform(self):
        a = resolve_initializer(None, seed=5)
        b = ParameterInitializer("uniform", seed=5)
        self.assertEqual(a.next_weight(), b.next_weight())

    def test_name(self):
        init = resolve_initializer("constant")
        self.assertEqual(init.next_weight(), 0.0)

    def test_instance_passes_through(self):
        init = ParameterInitializer("constant", weight=1.0)
        self.assertIs(resolve_initializer(init), init)


if __name__ == "__main__":
    unittest.main()

import unittest

from src.backpropnet.domain._errors import BackwardBeforeForwardError
from src.backpropnet.domain.model._forward_cache_mixin import ForwardCacheMixin


class _Stage(ForwardCacheMixin):
    def forward(self, v):
        self._store_cache(v)
        return v

    def backward(self):
        return self._consume_cache()


class TestForwardCacheMixin(unittest.TestCase):
    def test_starts_uninitialized(self):
        s = _Stage()
        self.assertFalse(s.is_ready)
        with self.assertRaises(BackwardBeforeForwardError) as ctx:
            s.backward()
        self.assertEqual(ctx.exception.component, "_Stage")

    def test_forward_then_backward_consumes(self):
        s = _Stage()
        s.forward(3)
        self.assertTrue(s.is_ready)
        self.assertEqual(s.backward(), 3)
        self.assertFalse(s.is_ready)
        with self.assertRaises(BackwardBeforeForwardError):
            s.backward()

    def test_new_forward_replaces_cache(self):
        s = _Stage()
        s.forward(1)
        s.forward(2)
        self.assertEqual(s.backward(), 2)

    def test_require_does_not_consume(self):
        s = _Stage()
        s.forward("x")
        self.assertEqual(s._require_cache(), "x")
        self.assertTrue(s.is_ready)

    def test_instances_do_not_share_cache(self):
        a, b = _Stage(), _Stage()
        a.forward(1)
        self.assertFalse(b.is_ready)


if __name__ == "__main__":
    unittest.main()

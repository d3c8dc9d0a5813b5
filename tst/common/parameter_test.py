import unittest

from common.parameter import Parameter, Fixed, Exponential, Polynomial


class TestParameter(unittest.TestCase):

    def test_fixed_from_number(self):
        p = Parameter.from_config(0.3)
        self.assertIsInstance(p, Fixed)
        p.step()
        self.assertEqual(p.value, 0.3)

    def test_exponential_decays_to_floor(self):
        p = Parameter.from_config({'schedule': 'exponential', 'init': 1.0, 'floor': 0.2, 'decay': 0.5})
        self.assertIsInstance(p, Exponential)
        values = []
        for _ in range(4):
            values.append(p.value)
            p.step()
        self.assertEqual(values, [1.0, 0.5, 0.25, 0.2])
        p.back()
        self.assertEqual(p.value, 0.2)

    def test_polynomial_counts_from_one(self):
        p = Parameter.from_config({'schedule': 'polynomial', 'init': 1.0, 'floor': 0.0, 'exponent': 1.0})
        self.assertIsInstance(p, Polynomial)
        self.assertEqual(p.value, 1.0)
        p.step()
        self.assertEqual(p.value, 0.5)
        p.back()
        p.back()
        self.assertEqual(p.value, 1.0)

    def test_bounds(self):
        p = Exponential(0.9, 0.1, 0.5)
        self.assertEqual(p.bounds, (0.1, 0.9))

    def test_invalid_configs(self):
        with self.assertRaises(ValueError):
            Parameter.from_config({'schedule': 'cosine', 'init': 1.0})
        with self.assertRaises(ValueError):
            Parameter.from_config({'schedule': 'exponential', 'init': 1.0})
        with self.assertRaises(ValueError):
            Parameter.from_config('fast')
        with self.assertRaises(ValueError):
            Parameter.from_config(True)

    def test_growing_schedules_rejected(self):
        for decay in (0.0, 1.5, -0.5):
            with self.assertRaises(ValueError):
                Parameter.from_config({'schedule': 'exponential', 'init': 0.5, 'decay': decay})
        with self.assertRaises(ValueError):
            Parameter.from_config({'schedule': 'polynomial', 'init': 0.5, 'exponent': -0.5})
        # Constant schedules are allowed
        self.assertEqual(Exponential(0.5, 0.0, 1.0).bounds, (0.0, 0.5))
        self.assertEqual(Polynomial(0.5, 0.0, 0.0).bounds, (0.0, 0.5))


if __name__ == '__main__':
    unittest.main()

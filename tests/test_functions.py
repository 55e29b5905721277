import math
import unittest

from backprop_net.network import Activation, ErrorFunction, Regularization


class TestActivation(unittest.TestCase):

    def test_linear(self):
        self.assertEqual(Activation.LINEAR.output(-3.5), -3.5)
        self.assertEqual(Activation.LINEAR.der(-3.5), 1.0)

    def test_relu(self):
        self.assertEqual(Activation.RELU.output(-2.0), 0.0)
        self.assertEqual(Activation.RELU.output(2.0), 2.0)
        self.assertEqual(Activation.RELU.der(-2.0), 0.0)
        self.assertEqual(Activation.RELU.der(0.0), 0.0)
        self.assertEqual(Activation.RELU.der(0.5), 1.0)

    def test_sigmoid(self):
        self.assertAlmostEqual(Activation.SIGMOID.output(0.0), 0.5)
        self.assertAlmostEqual(Activation.SIGMOID.der(0.0), 0.25)
        self.assertAlmostEqual(Activation.SIGMOID.output(-1000.0), 0.0)
        self.assertAlmostEqual(Activation.SIGMOID.output(1000.0), 1.0)

    def test_tanh(self):
        self.assertEqual(Activation.TANH.output(math.inf), 1.0)
        self.assertEqual(Activation.TANH.output(-math.inf), -1.0)
        self.assertAlmostEqual(Activation.TANH.output(0.5), math.tanh(0.5))
        self.assertAlmostEqual(Activation.TANH.der(0.5), 1 - math.tanh(0.5) ** 2)
        self.assertAlmostEqual(Activation.TANH.output(1000.0), 1.0)

    def test_from_name(self):
        self.assertIs(Activation.from_name("relu"), Activation.RELU)
        self.assertIs(Activation.from_name(Activation.TANH), Activation.TANH)
        with self.assertRaises(ValueError):
            Activation.from_name("softmax")


class TestErrorFunction(unittest.TestCase):

    def test_square(self):
        self.assertAlmostEqual(ErrorFunction.SQUARE.error(3.0, 1.0), 2.0)
        self.assertAlmostEqual(ErrorFunction.SQUARE.der(3.0, 1.0), 2.0)
        self.assertAlmostEqual(ErrorFunction.SQUARE.der(-1.0, 1.0), -2.0)


class TestRegularization(unittest.TestCase):

    def test_l1(self):
        self.assertEqual(Regularization.L1.output(-0.3), 0.3)
        self.assertEqual(Regularization.L1.der(-0.3), -1.0)
        self.assertEqual(Regularization.L1.der(0.3), 1.0)
        self.assertEqual(Regularization.L1.der(0.0), 0.0)

    def test_l2(self):
        self.assertAlmostEqual(Regularization.L2.output(-0.4), 0.08)
        self.assertEqual(Regularization.L2.der(-0.4), -0.4)

    def test_from_name(self):
        self.assertIs(Regularization.from_name("L1"), Regularization.L1)
        self.assertIs(Regularization.from_name("l2"), Regularization.L2)


if __name__ == '__main__':
    unittest.main()

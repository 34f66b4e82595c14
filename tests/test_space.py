import unittest

from reptag.space import Layer, AlreadyExists

class LayerTests(unittest.TestCase):

	def test_refuses_duplicates(self):
		layer = Layer([("a", 1)])
		with self.assertRaises(AlreadyExists):
			layer.mount("a", 2)
		self.assertEqual(1, layer["a"])

	def test_tolerates_unhashable_queries(self):
		layer = Layer([("a", 1)])
		self.assertNotIn(["a"], layer)
		self.assertEqual("x", layer.get({}, "x"))

	def test_keeps_insertion_order(self):
		layer = Layer((k, i) for i, k in enumerate("zyx"))
		self.assertEqual(["z", "y", "x"], list(layer.keys()))


if __name__ == '__main__':
	unittest.main()

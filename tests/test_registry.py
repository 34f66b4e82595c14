import unittest

from reptag import registry, ontology
from reptag.registry import UnknownTagError

class RegistryTests(unittest.TestCase):

	def test_round_trip_by_name_and_code(self):
		for tag in registry.all_tags():
			with self.subTest(tag.name):
				self.assertEqual(tag.name, registry.lookup_by_id(registry.lookup_by_name(tag.name).code).name)
				self.assertIs(tag, registry.lookup_by_symbol(tag.symbol))

	def test_unknown_names(self):
		for bogon in ["numeric", "Integer", "", "INTSXP", "real", None, 13, ("integer",)]:
			with self.subTest(bogon):
				with self.assertRaises(UnknownTagError):
					registry.lookup_by_name(bogon)

	def test_unknown_codes(self):
		for bogon in [11, 12, 26, 100, -1, True, "13", 13.0, None]:
			with self.subTest(bogon):
				with self.assertRaises(UnknownTagError):
					registry.lookup_by_id(bogon)

	def test_unknown_error_is_a_key_error(self):
		with self.assertRaises(KeyError):
			registry.lookup_by_symbol("WHATSXP")

	def test_absence_of_value(self):
		zeros = [t for t in registry.all_tags() if t.code == 0]
		self.assertEqual(1, len(zeros))
		self.assertEqual("NULL", zeros[0].name)
		self.assertEqual(ontology.ABSENCE, zeros[0].group)

	def test_memory_manager_tags(self):
		gc_only = [t for t in registry.all_tags() if t.gc_only]
		self.assertEqual([30, 31], sorted(t.code for t in gc_only))
		self.assertEqual({"NEWSXP", "FREESXP"}, {t.symbol for t in gc_only})

	def test_listing_is_stable(self):
		self.assertEqual(registry.all_tags(), registry.all_tags())
		self.assertIs(registry.REGISTRY.all(), registry.all_tags())

	def test_listing_is_grouped_not_sorted(self):
		codes = [t.code for t in registry.all_tags()]
		self.assertNotEqual(sorted(codes), codes)
		self.assertEqual(len(set(codes)), len(codes))
		self.assertEqual(registry.NULL, registry.all_tags()[0])

	def test_keys_are_unique(self):
		tags = registry.all_tags()
		for field in ("code", "name", "symbol"):
			with self.subTest(field):
				self.assertEqual(len(tags), len({getattr(t, field) for t in tags}))

	def test_groups_partition_the_table(self):
		seen = []
		for group in ontology.GROUPS:
			members = registry.in_group(group)
			self.assertTrue(members, group)
			self.assertTrue(all(t.group == group for t in members))
			seen.extend(members)
		self.assertEqual(sorted(registry.all_tags()), sorted(seen))
		with self.assertRaises(UnknownTagError):
			registry.in_group("atomic")

	def test_lookup_any_which_way(self):
		for word in [14, "14", "double", "REALSXP"]:
			with self.subTest(word):
				self.assertIs(registry.DOUBLE, registry.lookup(word))
		self.assertIs(registry.DOTS, registry.lookup("..."))
		for bogon in ["12", "numeric", 12, False, [14], "²", "¹³"]:
			with self.subTest(bogon):
				with self.assertRaises(UnknownTagError):
					registry.lookup(bogon)

	def test_names(self):
		names = registry.REGISTRY.names()
		self.assertEqual(len(registry.all_tags()), len(names))
		for name in ["NULL", "logical", "integer", "double", "complex", "character", "list", "raw", "closure", "S4"]:
			self.assertIn(name, names)

	def test_no_way_to_add_tags(self):
		self.assertFalse(hasattr(registry, "_listing"))
		with self.assertRaises(NameError):
			registry._tag(77, "NEWFANGLEDSXP", "newfangled", ontology.INTERNAL, "nope")
		self.assertNotIn(77, [t.code for t in registry.all_tags()])
		with self.assertRaises(AttributeError):
			registry.NULL.code = 7

	def test_render(self):
		text = registry.INTEGER.render()
		for part in ["13", "INTSXP", "integer"]:
			self.assertIn(part, text)
		self.assertIn("memory manager", registry.FREE.render())
		self.assertEqual("integer", str(registry.INTEGER))


if __name__ == '__main__':
	unittest.main()

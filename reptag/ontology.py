"""
The most-fundamental record in the package lives here, apart from the
registry that fills it in, so that everything else may import it without
dragging the whole table along.
"""
from typing import NamedTuple

# The four groups. They are for people reading listings;
# nothing about equality or dispatch depends on them.
ABSENCE = "absence"
VECTOR = "vector"
LANGUAGE = "language"
INTERNAL = "internal"

GROUPS = (ABSENCE, VECTOR, LANGUAGE, INTERNAL)

class Tag(NamedTuple):
	""" How a value is stored, at the lowest level the host will admit to. """
	code: int
	symbol: str
	name: str
	group: str
	description: str
	gc_only: bool = False  # Bookkeeping for the allocator; no program ever holds one.

	def __repr__(self): return "<Tag %s=%d %r>" % (self.symbol, self.code, self.name)
	def __str__(self): return self.name

	def render(self) -> str:
		""" One line for a listing """
		text = "%4d  %-11s %-12s %s" % (self.code, self.symbol, self.name, self.description)
		if self.gc_only: text += " (memory manager only)"
		return text

"""
Name-spaces, such as they are. The registry indexes its table with these,
and so does the strict flavor of switch table.
"""

from typing import Any, Hashable, Iterable, Optional

class AlreadyExists(KeyError): pass

class Layer:
	""" Lightly enhanced dictionary: It does not like duplicate keys. """
	_items: dict

	def __init__(self, pairs: Iterable[tuple[Hashable, Any]] = ()):
		self._items = {}
		for key, item in pairs:
			self.mount(key, item)

	def __contains__(self, key) -> bool:
		try: return key in self._items
		except TypeError: return False  # Unhashable things are never in here.

	def __getitem__(self, key):
		return self._items[key]

	def get(self, key, default=None) -> Optional[Any]:
		return self._items[key] if key in self else default

	def mount(self, key: Hashable, item: Any) -> Any:
		if key in self._items:
			raise AlreadyExists(key)
		else:
			self._items[key] = item
			return item

	def keys(self): return self._items.keys()

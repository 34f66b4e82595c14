"""
Build the table of representation tags.

The table is closed: it is filled in once, right here, when this module is
first imported, and nothing offers a way to add to it afterward. New tags
arrive by editing this file, which is to say, by the platform's maintainers.

The listing order groups related tags together for the benefit of human
readers, so it is not sorted by code. Don't read meaning into it.
"""
from typing import Union

from .ontology import Tag, GROUPS, ABSENCE, VECTOR, LANGUAGE, INTERNAL
from .space import Layer

class UnknownTagError(KeyError):
	""" The first argument is whatever was looked up and not found. """
	pass

_listing: list[Tag] = []

def _tag(code:int, symbol:str, name:str, group:str, description:str, gc_only=False) -> Tag:
	tag = Tag(code, symbol, name, group, description, gc_only)
	_listing.append(tag)
	return tag

NULL = _tag(0, "NILSXP", "NULL", ABSENCE, "the absence of a value")

LOGICAL = _tag(10, "LGLSXP", "logical", VECTOR, "logical vectors")
INTEGER = _tag(13, "INTSXP", "integer", VECTOR, "integer vectors")
DOUBLE = _tag(14, "REALSXP", "double", VECTOR, "double-precision real vectors")
COMPLEX = _tag(15, "CPLXSXP", "complex", VECTOR, "complex vectors")
CHARACTER = _tag(16, "STRSXP", "character", VECTOR, "character (string) vectors")
LIST = _tag(19, "VECSXP", "list", VECTOR, "generic vectors, or lists")
RAW = _tag(24, "RAWSXP", "raw", VECTOR, "raw bytes")

SYMBOL = _tag(1, "SYMSXP", "symbol", LANGUAGE, "symbols, or names")
PAIRLIST = _tag(2, "LISTSXP", "pairlist", LANGUAGE, "lists of dotted pairs")
CLOSURE = _tag(3, "CLOSXP", "closure", LANGUAGE, "closures")
ENVIRONMENT = _tag(4, "ENVSXP", "environment", LANGUAGE, "environments")
PROMISE = _tag(5, "PROMSXP", "promise", LANGUAGE, "promises: unevaluated closure arguments")
CALL = _tag(6, "LANGSXP", "language", LANGUAGE, "language constructs, or calls")
SPECIAL = _tag(7, "SPECIALSXP", "special", LANGUAGE, "special forms")
BUILTIN = _tag(8, "BUILTINSXP", "builtin", LANGUAGE, "builtin non-special forms")
DOTS = _tag(17, "DOTSXP", "...", LANGUAGE, "the dot-dot-dot object")
EXPRESSION = _tag(20, "EXPRSXP", "expression", LANGUAGE, "expression vectors")
S4 = _tag(25, "S4SXP", "S4", LANGUAGE, "objects which are not otherwise vectors")

CHAR = _tag(9, "CHARSXP", "char", INTERNAL, "scalar strings, the elements of character vectors")
ANY = _tag(18, "ANYSXP", "any", INTERNAL, "matches any type in argument checks")
BYTECODE = _tag(21, "BCODESXP", "bytecode", INTERNAL, "compiled byte code")
EXTERNAL_POINTER = _tag(22, "EXTPTRSXP", "externalptr", INTERNAL, "external pointers")
WEAK_REFERENCE = _tag(23, "WEAKREFSXP", "weakref", INTERNAL, "weak references")
NEW = _tag(30, "NEWSXP", "new", INTERNAL, "fresh node in a new page", gc_only=True)
FREE = _tag(31, "FREESXP", "free", INTERNAL, "node released by the collector", gc_only=True)
FUNCTION = _tag(99, "FUNSXP", "function", INTERNAL, "closure, builtin, or special, in argument checks")


class Registry:
	""" Read-only indexes over the table. There is exactly one of these. """

	def __init__(self, listing:list[Tag]):
		self._listing = tuple(listing)
		self._by_code = Layer((t.code, t) for t in self._listing)
		self._by_name = Layer((t.name, t) for t in self._listing)
		self._by_symbol = Layer((t.symbol, t) for t in self._listing)

	def all(self) -> tuple[Tag, ...]:
		return self._listing

	def names(self) -> tuple[str, ...]:
		return tuple(t.name for t in self._listing)

	def lookup_by_name(self, name:str) -> Tag:
		if name in self._by_name: return self._by_name[name]
		raise UnknownTagError(name)

	def lookup_by_symbol(self, symbol:str) -> Tag:
		if symbol in self._by_symbol: return self._by_symbol[symbol]
		raise UnknownTagError(symbol)

	def lookup_by_id(self, code:int) -> Tag:
		# bool is an int, but True is not a tag.
		if isinstance(code, int) and not isinstance(code, bool) and code in self._by_code:
			return self._by_code[code]
		raise UnknownTagError(code)

	def lookup(self, word:Union[str, int]) -> Tag:
		"""
		For people at a prompt, who may type a code, a name, or a symbol.
		Codes win, but no name is all-digits anyway.
		"""
		if isinstance(word, str) and word.isdecimal():
			code = int(word)
			if code in self._by_code: return self._by_code[code]
		elif isinstance(word, int):
			return self.lookup_by_id(word)
		if word in self._by_name: return self._by_name[word]
		if word in self._by_symbol: return self._by_symbol[word]
		raise UnknownTagError(word)

	def in_group(self, group:str) -> tuple[Tag, ...]:
		if group not in GROUPS: raise UnknownTagError(group)
		return tuple(t for t in self._listing if t.group == group)

REGISTRY = Registry(_listing)
del _listing

lookup_by_name = REGISTRY.lookup_by_name
lookup_by_symbol = REGISTRY.lookup_by_symbol
lookup_by_id = REGISTRY.lookup_by_id
lookup = REGISTRY.lookup
in_group = REGISTRY.in_group
all_tags = REGISTRY.all

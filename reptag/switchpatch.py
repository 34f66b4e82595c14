"""
Switchpatch: branch on a tag's name, with a fallback arm for everything else.

The classic example wants the width in bytes of one element:

	dispatch(tag, {"integer": 4, "numeric": 8, "logical": 4}, None)

which looks right and yet answers None for a double, because no tag is
named "numeric". Names are matched exactly. `check_arms` will point that
sort of thing out, but `dispatch` never second-guesses its caller.

A string is always taken for a tag name. Any other value that is not a
Tag gets classified by the Python host first.
"""
from typing import Any, Iterable, Mapping, Optional, Union

from .ontology import Tag
from .space import Layer, AlreadyExists
from .diagnostics import Report
from . import registry, classifier

ARMS = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]

class DuplicateArm(AlreadyExists): pass

def _key(tag:Any) -> str:
	if isinstance(tag, Tag): return tag.name
	if isinstance(tag, str): return tag
	return classifier.PYTHON.type_of(tag)

def _pairs(arms:ARMS):
	return arms.items() if isinstance(arms, Mapping) else arms

def dispatch(tag:Any, arms:ARMS, default:Any) -> Any:
	"""
	Return the arm for this tag's name, or else the default. There is no
	error case. Given pairs, a repeated name means the last one wins.
	"""
	if not isinstance(arms, Mapping): arms = dict(arms)
	key = _key(tag)
	return arms[key] if key in arms else default

def switch_on(value:Any, arms:ARMS, default:Any, host:Optional[classifier.Host]=None) -> Any:
	""" Classify, then dispatch. Goes by whatever name the host reports, so it cannot fail either. """
	host = classifier.PYTHON if host is None else host
	return dispatch(host.type_of(value), arms, default)

def check_arms(names:Iterable[str], report:Report) -> bool:
	"""
	Complain about arms that can never match:
	names the registry lacks, and tags no program can hold.
	"""
	for name in names:
		try: tag = registry.lookup_by_name(name)
		except registry.UnknownTagError:
			report.unknown_arm(name)
		else:
			if tag.gc_only: report.unreachable_arm(tag)
	return report.ok()


class SwitchTable:
	"""
	A switchpatch fixed at construction time. Unlike plain `dispatch`,
	this refuses to guess which of two arms with the same name you meant.
	"""
	_arms: Layer

	def __init__(self, arms:ARMS, default:Any):
		self._arms = Layer()
		for name, result in _pairs(arms):
			try: self._arms.mount(name, result)
			except AlreadyExists: raise DuplicateArm(name) from None
		self.default = default

	def __call__(self, tag:Any) -> Any:
		return self._arms.get(_key(tag), self.default)

	def __contains__(self, name) -> bool:
		return name in self._arms

	def names(self) -> tuple[str, ...]:
		return tuple(self._arms.keys())

	def switch_on(self, value:Any, host:Optional[classifier.Host]=None) -> Any:
		host = classifier.PYTHON if host is None else host
		return self(host.type_of(value))

	def check(self, report:Report) -> bool:
		return check_arms(self.names(), report)

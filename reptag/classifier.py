"""
Which tag does a value carry? Only the host environment really knows,
so the classifier just asks the host for a name and looks it up.

The host most readily at hand is Python itself. The mapping in `PythonHost`
is a judgment call about what each kind of Python object would be, were it
stored as a tagged value. It never answers with one of the memory-manager's
bookkeeping tags, because no program can hold one of those.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional
from boozetools.support.foundation import Visitor

from .ontology import Tag
from . import registry

class Host(ABC):
	""" The interface agreement with whatever does the real introspection. """
	@abstractmethod
	def type_of(self, value:Any) -> str:
		""" Return the name of the value's representation tag. """
		pass

class HostFunction(Host):
	""" For when the host's introspection is just a function. """
	def __init__(self, fn: Callable[[Any], str]):
		self._fn = fn
	def type_of(self, value:Any) -> str:
		return self._fn(value)

class PythonHost(Host, Visitor):
	"""
	Treat the running Python as the host environment.
	The booze-tools visitor picks a method by the value's class name,
	falling back along the MRO, so subclasses classify like their bases
	and visit_object catches everything else.
	"""

	def type_of(self, value:Any) -> str:
		return self.visit(value)

	def visit_NoneType(self, value): return registry.NULL.name

	def visit_bool(self, value): return registry.LOGICAL.name
	def visit_int(self, value): return registry.INTEGER.name
	def visit_range(self, value): return registry.INTEGER.name
	def visit_float(self, value): return registry.DOUBLE.name
	def visit_complex(self, value): return registry.COMPLEX.name
	def visit_str(self, value): return registry.CHARACTER.name
	def visit_bytes(self, value): return registry.RAW.name
	def visit_bytearray(self, value): return registry.RAW.name
	def visit_list(self, value): return registry.LIST.name
	def visit_tuple(self, value): return registry.LIST.name

	def visit_dict(self, value): return registry.ENVIRONMENT.name
	def visit_module(self, value): return registry.ENVIRONMENT.name
	def visit_SimpleNamespace(self, value): return registry.ENVIRONMENT.name

	def visit_function(self, value): return registry.CLOSURE.name
	def visit_method(self, value): return registry.CLOSURE.name
	def visit_builtin_function_or_method(self, value): return registry.BUILTIN.name
	def visit_generator(self, value): return registry.PROMISE.name
	def visit_coroutine(self, value): return registry.PROMISE.name
	def visit_ellipsis(self, value): return registry.DOTS.name

	# Python's own syntax trees stand in for the language objects.
	def visit_Name(self, value): return registry.SYMBOL.name
	def visit_Expression(self, value): return registry.EXPRESSION.name
	def visit_AST(self, value): return registry.CALL.name

	def visit_code(self, value): return registry.BYTECODE.name
	def visit_ReferenceType(self, value): return registry.WEAK_REFERENCE.name
	def visit_memoryview(self, value): return registry.EXTERNAL_POINTER.name

	def visit_object(self, value): return registry.S4.name

PYTHON = PythonHost()

def classify(value:Any, host:Optional[Host]=None) -> Tag:
	"""
	Raises UnknownTagError if the host claims a name the registry never heard of.
	That would be the host's bug, not the value's.
	"""
	host = PYTHON if host is None else host
	return registry.lookup_by_name(host.type_of(value))

"""
This module defines the run-time values and their primitive operations.
Basic values play themselves: nil is None, booleans are bool, numbers are float, and strings are str.
Functions need more help, so they get classes of their own.
"""
import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence, Union
from . import syntax
from .diagnostics import TypeMismatch
from .environment import Env, GlobalScope, LocalChain
from .evaluator import run_block

class Function(ABC):
	""" A run-time object that can be applied to (already evaluated) arguments. """
	@abstractmethod
	def apply(self, args:Sequence["VALUE"], globals_:GlobalScope) -> "VALUE": pass

class Print(Function):
	""" The one built-in. It writes its arguments, tab-separated, as one line. """
	def __str__(self): return "builtin: print"
	
	def apply(self, args:Sequence["VALUE"], globals_:GlobalScope) -> None:
		print(*map(display, args), sep="\t")

PRINT = Print()

class Closure(Function):
	""" The run-time manifestation of a function literal: a callable value tied to its natal environment. """
	def __init__(self, params:Sequence[str], body:syntax.Block, captures:LocalChain):
		self._params = params
		self._body = body
		self._captures = captures
	
	def __str__(self): return "function: 0x%08x" % id(self)
	
	def apply(self, args:Sequence["VALUE"], globals_:GlobalScope) -> "VALUE":
		# Arguments bind atop the captured chain, not the caller's. That's lexical scope.
		inner = Env(self._captures.extend(self._params, args), globals_)
		return run_block(self._body, inner)

VALUE = Union[None, bool, float, str, Function]

###############################################################################

def type_name(v:VALUE) -> str:
	if v is None: return "nil"
	if isinstance(v, Function): return "function"
	return _TYPE_NAMES[type(v)]

_TYPE_NAMES = {bool:"boolean", float:"number", str:"string"}

def display(v:VALUE) -> str:
	if v is None: return "nil"
	if v is True: return "true"
	if v is False: return "false"
	if type(v) is float: return _number_text(v)
	return str(v)

def _number_text(n:float) -> str:
	if n != n: return "nan"
	if n in (_INF, -_INF): return "inf" if n > 0 else "-inf"
	if n == 0: return "-0" if math.copysign(1.0, n) < 0 else "0"
	if n.is_integer(): return "%d" % n
	# Shortest round-trip digits, but never in exponent form.
	return format(Decimal(repr(n)), "f")

_INF = float("inf")

def _is_number(v:VALUE) -> bool:
	return type(v) is float

def _numeric(operation:str, a:VALUE, b:VALUE):
	if not (_is_number(a) and _is_number(b)):
		raise TypeMismatch(operation, a, b)

def add(a:VALUE, b:VALUE) -> float:
	_numeric("+", a, b)
	return a + b

def sub(a:VALUE, b:VALUE) -> float:
	_numeric("-", a, b)
	return a - b

def mul(a:VALUE, b:VALUE) -> float:
	_numeric("*", a, b)
	return a * b

def neg(a:VALUE) -> float:
	if not _is_number(a): raise TypeMismatch("-", a)
	return -a

def eq(a:VALUE, b:VALUE) -> bool:
	""" Total: values of different kinds are never equal. Functions are equal only to themselves. """
	if type(a) is not type(b): return False
	if isinstance(a, Function): return a is b
	return a == b

def ne(a:VALUE, b:VALUE) -> bool:
	return not eq(a, b)

def lt(a:VALUE, b:VALUE) -> bool:
	_numeric("<", a, b)
	return a < b

def le(a:VALUE, b:VALUE) -> bool:
	_numeric("<=", a, b)
	return a <= b

def gt(a:VALUE, b:VALUE) -> bool:
	# The negation of le, so 1 > nan is true.
	_numeric(">", a, b)
	return not a <= b

def ge(a:VALUE, b:VALUE) -> bool:
	_numeric(">=", a, b)
	return not a < b

def as_bool(v:VALUE) -> bool:
	""" Strict: only a boolean is a boolean. """
	if type(v) is not bool: raise TypeMismatch("boolean test", v)
	return v

"""
Where names find their values.

Globals live in one flat table for the whole run. Locals live in a chain of frames:
extending the chain makes a new frame that links to the old one and leaves the old one alone,
so any number of closures may hold on to the same frame at once.
Each frame's slots stay mutable, and that is how a closure sees later assignments
to variables it captured.

This is the canonical list-structured search.
"""
from typing import Any, Iterable, Optional, Sequence
import abc
from .diagnostics import UndefinedVariable

class GlobalScope:
	""" The run's top-level bindings. Assignment always succeeds here. """
	def __init__(self):
		self._bindings = {}
	
	def __repr__(self): return "<GlobalScope %s>" % ', '.join(self._bindings)
	
	def get(self, name:str) -> Any:
		try: return self._bindings[name]
		except KeyError: raise UndefinedVariable(name) from None
	
	def set(self, name:str, value:Any):
		self._bindings[name] = value

class LocalChain(abc.ABC):
	@abc.abstractmethod
	def find(self, name:str) -> Optional["Frame"]:
		""" Return the innermost frame that binds `name`, or None. """
		pass
	
	def extend(self, names:Sequence[str], values:Iterable[Any]) -> "Frame":
		"""
		Make a new frame atop this chain. The values must already be computed;
		nothing in the new frame can see its siblings while they are being made.
		Missing values come out nil; extra values are ignored.
		"""
		values = list(values)
		values.extend([None] * (len(names) - len(values)))
		return Frame(dict(zip(names, values)), self)

class NullFrame(LocalChain):
	""" The empty chain, beneath everything. """
	def find(self, name:str) -> Optional["Frame"]: return None
	def __repr__(self): return "<NullFrame>"

null_frame = NullFrame()

class Frame(LocalChain):
	def __init__(self, slots:dict[str, Any], static_link:LocalChain):
		self._slots = slots
		self._static_link = static_link
	
	def __repr__(self): return "<Frame %s>" % ', '.join(self._slots)
	
	def find(self, name:str) -> Optional["Frame"]:
		frame = self
		while isinstance(frame, Frame):
			if name in frame._slots: return frame
			frame = frame._static_link
		return None
	
	def fetch(self, name:str) -> Any: return self._slots[name]
	def assign(self, name:str, value:Any):
		assert name in self._slots, name
		self._slots[name] = value

class Env:
	"""
	What the evaluator carries around: the local chain in effect,
	and a reference to the one global scope of the run.
	"""
	def __init__(self, locals_:LocalChain, globals_:GlobalScope):
		assert isinstance(locals_, LocalChain), type(locals_)
		assert isinstance(globals_, GlobalScope), type(globals_)
		self.locals = locals_
		self.globals = globals_
	
	def extend(self, names:Sequence[str], values:Iterable[Any]) -> "Env":
		return Env(self.locals.extend(names, values), self.globals)
	
	def lookup(self, name:str) -> Any:
		frame = self.locals.find(name)
		if frame is None: return self.globals.get(name)
		else: return frame.fetch(name)
	
	def set(self, name:str, value:Any):
		frame = self.locals.find(name)
		if frame is None: self.globals.set(name, value)
		else: frame.assign(name, value)

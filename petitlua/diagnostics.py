"""
Run-time errors, and the means to complain about them.

The language has no way for a program to recover from an error,
so every error here is an `Abort`: it unwinds the whole evaluation
and the driver reports it to the operator.
"""
import sys, random
from typing import Any, Optional, Sequence
from .syntax import Phrase

class TooManyIssues(Exception):
	pass

class Abort(Exception):
	"""
	Root of the run-time errors.
	The evaluator notes the innermost syntax where the error surfaced (the site)
	and every call it unwound through on the way out (the trace).
	"""
	site: Optional[Phrase] = None
	
	def __init__(self, *args):
		super().__init__(*args)
		self.trace = []
	
	def __str__(self): return self.describe()
	
	def describe(self) -> str:
		raise NotImplementedError(type(self))
	
	def at(self, site:Phrase) -> "Abort":
		if self.site is None:
			self.site = site
		return self
	
	def called_from(self, call_site:Phrase):
		self.trace.append(call_site)

class TypeMismatch(Abort):
	""" An operation met a value of the wrong kind. """
	def __init__(self, operation:str, *operands:Any):
		super().__init__(operation, *operands)
		self.operation = operation
		self.operands = operands
	
	def describe(self):
		from .values import type_name
		kinds = " and ".join(map(type_name, self.operands))
		return "Operation '%s' does not apply to %s." % (self.operation, kinds)

class NotCallable(TypeMismatch):
	def __init__(self, value:Any):
		super().__init__("call", value)
		self.value = value
	
	def describe(self):
		from .values import display
		return "Tried to call %s, which is not a function." % display(self.value)

class UndefinedVariable(Abort):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	
	def describe(self):
		return "I don't see what '%s' refers to." % self.name

class NonNilDiscarded(Abort):
	def __init__(self, value:Any):
		super().__init__(value)
		self.value = value
	
	def describe(self):
		from .values import display
		return "A call used as a statement returned %s. Only nil may be thrown away." % display(self.value)

class StackExhausted(Abort):
	""" The program nested calls deeper than the host allows. """
	def describe(self):
		return "The program nested its calls too deeply for the host to follow."

class Unsupported(Abort):
	def __init__(self, feature:str):
		super().__init__(feature)
		self.feature = feature
	
	def describe(self):
		return "%s is not implemented." % self.feature

###############################################################################

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', "Mercy", 'Nuts', 'Rats',
	]
	
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'The program stops here.',
		'There is no way forward from this.',
	]
	
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Pic:
	""" One issue, ready to print: an introduction, some illustrated lines, and an optional footer. """
	def __init__(self, intro:str, lines:Sequence[str], footer=()):
		self._intro, self._lines, self._footer = intro, list(lines), footer
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend("    | "+line for line in self._lines)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	""" Collects the issues of a run and, if asked, says so on the console. """
	_issues : list[Pic]
	
	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> list[Pic]: return list(self._issues)
	
	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	# The driver calls this one:
	def runtime_error(self, ex:Abort):
		from .unparse import unparse
		lines = []
		if ex.site is not None:
			lines.append("at:     "+unparse(ex.site))
		for call_site in ex.trace:
			lines.append("called: "+unparse(call_site))
		footer = ["(%s)" % type(ex).__name__]
		self.issue(Pic(ex.describe(), lines, footer))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()

"""
The set of parse-nodes in simple form.
A parser (not part of this package) builds these bottom-up; the evaluator only ever borrows them.
Class-level type annotations make peace with the IDE about what each field holds.
"""
from typing import Any, Optional, Sequence

class Phrase:
	""" Any node of the tree. """
	pass

class Statement(Phrase): pass
class Expression(Phrase): pass

#######################################################################

class Var(Phrase):
	""" Something that can be assigned to or read from. """
	pass

class Name(Var):
	def __init__(self, text:str):
		assert isinstance(text, str), type(text)
		self.text = text
	def __repr__(self): return "<Name %r>" % self.text

class Index(Var):
	""" Indexed access `table[key]`; tables are not implemented, but the shape is known. """
	def __init__(self, table:Expression, key:Expression):
		self.table, self.key = table, key

#######################################################################

class Block(Phrase):
	"""
	A scope: the locals it declares, a body, and the expression it yields.
	A missing `return` arrives as a literal nil.
	"""
	locals: Sequence[str]
	body: Statement
	ret: Expression
	def __init__(self, locals_:Sequence[str], body:Statement, ret:Expression):
		assert all(isinstance(n, str) for n in locals_), locals_
		assert isinstance(body, Statement), type(body)
		assert isinstance(ret, Expression), type(ret)
		self.locals = tuple(locals_)
		self.body = body
		self.ret = ret
	def __repr__(self): return "<Block %s>" % ', '.join(self.locals)

class Nop(Statement):
	pass

class Seq(Statement):
	def __init__(self, first:Statement, second:Statement):
		self.first, self.second = first, second

def sequence(steps:Sequence[Statement]) -> Statement:
	""" Fold a list of statements into right-leaning Seq nodes, as the parser would. """
	if not steps: return Nop()
	it = steps[-1]
	for step in reversed(steps[:-1]):
		it = Seq(step, it)
	return it

class Assign(Statement):
	def __init__(self, var:Var, expr:Expression):
		assert isinstance(var, Var), type(var)
		self.var, self.expr = var, expr

class FunctionCall(Expression):
	def __init__(self, fn_exp:Expression, args:Sequence[Expression]):
		self.fn_exp, self.args = fn_exp, tuple(args)

class CallStat(Statement):
	""" A call in statement position. Its result must be nil. """
	def __init__(self, call:FunctionCall):
		assert isinstance(call, FunctionCall), type(call)
		self.call = call

class While(Statement):
	def __init__(self, cond:Expression, body:Block):
		self.cond, self.body = cond, body

class If(Statement):
	# An absent else-part arrives as an empty block.
	def __init__(self, cond:Expression, then_part:Block, else_part:Block):
		self.cond, self.then_part, self.else_part = cond, then_part, else_part

#######################################################################

class Literal(Expression):
	def __init__(self, value:Any):
		assert value is None or isinstance(value, (bool, float, str)), type(value)
		self.value = value
	def __repr__(self): return "<Literal %r>" % (self.value,)

def nil(): return Literal(None)
def truth(): return Literal(True)
def falsehood(): return Literal(False)
def number(n) -> Literal: return Literal(float(n))
def string(s:str) -> Literal: return Literal(s)

class Lookup(Expression):
	def __init__(self, var:Var):
		assert isinstance(var, Var), type(var)
		self.var = var
	def __repr__(self): return "<Lookup %r>" % self.var

def name(text:str) -> Lookup: return Lookup(Name(text))

class FunctionDef(Expression):
	# The parser has already folded any named definition into an assignment.
	def __init__(self, params:Sequence[str], body:Block):
		self.params, self.body = tuple(params), body

class BinExp(Expression):
	def __init__(self, op:str, lhs:Expression, rhs:Expression):
		assert op in BINARY_GLYPHS, op
		self.op, self.lhs, self.rhs = op, lhs, rhs

class UnaryExp(Expression):
	def __init__(self, op:str, arg:Expression):
		assert op in UNARY_GLYPHS, op
		self.op, self.arg = op, arg

class Table(Expression):
	""" Table constructor. The evaluator refuses these. """
	def __init__(self, fields:Optional[Sequence[tuple[Optional[Expression], Expression]]] = ()):
		self.fields = tuple(fields or ())

BINARY_GLYPHS = ("+", "-", "*", "==", "~=", "<", "<=", ">", ">=", "and", "or")
UNARY_GLYPHS = ("-", "not")

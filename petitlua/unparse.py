"""
Render syntax back into something like source text, so that complaints can
show the operation that went wrong. Bodies of blocks get abbreviated; the point
is to recognize the spot, not to reproduce the program.
"""
from boozetools.support.foundation import Visitor
from . import syntax
from .values import display

def unparse(node:syntax.Phrase) -> str:
	return Unparser().visit(node)

class Unparser(Visitor):
	
	def visit_Name(self, var:syntax.Name):
		return var.text
	
	def visit_Index(self, var:syntax.Index):
		return "%s[%s]" % (self.visit(var.table), self.visit(var.key))
	
	def visit_Block(self, block:syntax.Block):
		return "..."
	
	def visit_Nop(self, stat:syntax.Nop):
		return ""
	
	def visit_Seq(self, stat:syntax.Seq):
		return "%s; %s" % (self.visit(stat.first), self.visit(stat.second))
	
	def visit_Assign(self, stat:syntax.Assign):
		return "%s = %s" % (self.visit(stat.var), self.visit(stat.expr))
	
	def visit_CallStat(self, stat:syntax.CallStat):
		return self.visit(stat.call)
	
	def visit_While(self, stat:syntax.While):
		return "while %s do %s end" % (self.visit(stat.cond), self.visit(stat.body))
	
	def visit_If(self, stat:syntax.If):
		return "if %s then %s else %s end" % (self.visit(stat.cond), self.visit(stat.then_part), self.visit(stat.else_part))
	
	def visit_Literal(self, expr:syntax.Literal):
		if isinstance(expr.value, str):
			return '"%s"' % expr.value.replace('\\', '\\\\').replace('"', '\\"')
		return display(expr.value)
	
	def visit_Lookup(self, expr:syntax.Lookup):
		return self.visit(expr.var)
	
	def visit_FunctionCall(self, expr:syntax.FunctionCall):
		return "%s(%s)" % (self._operand(expr.fn_exp), ', '.join(map(self.visit, expr.args)))
	
	def visit_FunctionDef(self, expr:syntax.FunctionDef):
		return "function(%s) %s end" % (', '.join(expr.params), self.visit(expr.body))
	
	def visit_BinExp(self, expr:syntax.BinExp):
		return "%s %s %s" % (self._operand(expr.lhs), expr.op, self._operand(expr.rhs))
	
	def visit_UnaryExp(self, expr:syntax.UnaryExp):
		space = " " if expr.op == "not" else ""
		return "%s%s%s" % (expr.op, space, self._operand(expr.arg))
	
	def visit_Table(self, expr:syntax.Table):
		return "{...}" if expr.fields else "{}"
	
	def _operand(self, expr:syntax.Expression):
		# Parenthesize anything compound, rather than track precedence.
		text = self.visit(expr)
		if isinstance(expr, (syntax.BinExp, syntax.UnaryExp, syntax.FunctionDef)):
			return "(%s)" % text
		return text

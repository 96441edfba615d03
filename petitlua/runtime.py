"""
The specific evaluation methods, one per kind of syntax.
Importing this module attaches them to the generic machinery in `evaluator`.
"""
from . import syntax, values
from .diagnostics import Abort, NonNilDiscarded, NotCallable, Unsupported
from .environment import Env
from .evaluator import evaluate, execute, run_block, attach_evaluation_methods

PRIMITIVE_BINARY = {
	"+"   : values.add,
	"-"   : values.sub,
	"*"   : values.mul,
	"=="  : values.eq,
	"~="  : values.ne,
	"<"   : values.lt,
	"<="  : values.le,
	">"   : values.gt,
	">="  : values.ge,
	"and" : lambda a, b: values.as_bool(a) and values.as_bool(b),
	"or"  : lambda a, b: values.as_bool(a) or values.as_bool(b),
}
PRIMITIVE_UNARY = {
	"-"   : values.neg,
	"not" : lambda a: not values.as_bool(a),
}

def _truth(expr:syntax.Expression, env:Env) -> bool:
	value = evaluate(expr, env)
	try: return values.as_bool(value)
	except Abort as ex: raise ex.at(expr)

###############################################################################

def _exec_nop(stat:syntax.Nop, env:Env):
	pass

def _exec_seq(stat:syntax.Seq, env:Env):
	# Walk the right spine in a loop, so long programs do not nest Python frames.
	while isinstance(stat, syntax.Seq):
		execute(stat.first, env)
		stat = stat.second
	execute(stat, env)

def _exec_assign(stat:syntax.Assign, env:Env):
	var = stat.var
	if isinstance(var, syntax.Name):
		env.set(var.text, evaluate(stat.expr, env))
	else:
		raise Unsupported("Assignment into a table")

def _exec_call_stat(stat:syntax.CallStat, env:Env):
	result = evaluate(stat.call, env)
	if result is not None:
		raise NonNilDiscarded(result)

def _exec_while(stat:syntax.While, env:Env):
	while _truth(stat.cond, env):
		run_block(stat.body, env)

def _exec_if(stat:syntax.If, env:Env):
	branch = stat.then_part if _truth(stat.cond, env) else stat.else_part
	run_block(branch, env)

###############################################################################

def _eval_literal(expr:syntax.Literal, env:Env):
	return expr.value

def _eval_lookup(expr:syntax.Lookup, env:Env):
	var = expr.var
	if isinstance(var, syntax.Name):
		return env.lookup(var.text)
	else:
		raise Unsupported("Reading from a table")

def _eval_function_call(expr:syntax.FunctionCall, env:Env):
	function = evaluate(expr.fn_exp, env)
	if not isinstance(function, values.Function):
		raise NotCallable(function)
	args = [evaluate(a, env) for a in expr.args]
	try: return function.apply(args, env.globals)
	except Abort as ex:
		ex.called_from(expr)
		raise

def _eval_function_def(expr:syntax.FunctionDef, env:Env):
	return values.Closure(expr.params, expr.body, env.locals)

def _eval_bin_exp(expr:syntax.BinExp, env:Env):
	# Both sides, always: and/or do not short-circuit.
	a = evaluate(expr.lhs, env)
	b = evaluate(expr.rhs, env)
	return PRIMITIVE_BINARY[expr.op](a, b)

def _eval_unary_exp(expr:syntax.UnaryExp, env:Env):
	return PRIMITIVE_UNARY[expr.op](evaluate(expr.arg, env))

def _eval_table(expr:syntax.Table, env:Env):
	raise Unsupported("Table construction")

attach_evaluation_methods(globals())

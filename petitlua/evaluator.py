"""
The generic machinery that everything needs,
without the specific methods corresponding to particular syntax.
Those live in `runtime`, which registers them here when imported.
"""

from typing import Any
from . import syntax
from .diagnostics import Abort
from .environment import Env

def evaluate(expr:syntax.Expression, env:Env) -> Any:
	assert isinstance(env, Env), env
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	try: return fn(expr, env)
	except Abort as ex: raise ex.at(expr)

def execute(stat:syntax.Statement, env:Env):
	assert isinstance(env, Env), env
	try: fn = EXECUTE[type(stat)]
	except KeyError: raise NotImplementedError(type(stat), stat)
	try: fn(stat, env)
	except Abort as ex: raise ex.at(stat)

def run_block(block:syntax.Block, env:Env) -> Any:
	"""
	Every local the block declares starts out nil, in one fresh frame.
	Then the body runs, and the trailing expression gives the block's value.
	"""
	inner = env.extend(block.locals, ())
	execute(block.body, inner)
	return evaluate(block.ret, inner)

EVALUATE = {}
EXECUTE = {}

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			_t = _v.__annotations__["expr"]
			assert isinstance(_t, type), (_k, _t)
			EVALUATE[_t] = _v
		elif _k.startswith("_exec_"):
			_t = _v.__annotations__["stat"]
			assert isinstance(_t, type), (_k, _t)
			EXECUTE[_t] = _v

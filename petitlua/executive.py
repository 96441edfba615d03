"""
The overall control for a run: set up the environments, register the built-in,
and evaluate the program's top-level block.
"""
from typing import Optional
from . import syntax
from .diagnostics import Abort, Report, StackExhausted
from .environment import Env, GlobalScope, null_frame
from .evaluator import run_block
from .values import PRINT, VALUE, display
from . import runtime  # NOQA -- attaches the evaluation methods

def prepare_globals() -> GlobalScope:
	globals_ = GlobalScope()
	globals_.set("print", PRINT)
	return globals_

def run_program(program:syntax.Block, globals_:Optional[GlobalScope] = None) -> VALUE:
	"""
	Evaluate the program and return what its top-level block yields.
	Any run-time error propagates as an `Abort`.
	"""
	assert isinstance(program, syntax.Block), type(program)
	if globals_ is None: globals_ = prepare_globals()
	return run_block(program, Env(null_frame, globals_))

def run(program:syntax.Block, report:Report) -> int:
	"""
	The operator's view: run the program, and if it breaks, say why.
	Returns a process exit status, so a host can `exit(run(program, report))`.
	"""
	report.info("Running program.")
	try:
		result = run_program(program)
	except Abort as ex:
		return _complain(ex, report)
	except RecursionError:
		return _complain(StackExhausted(), report)
	report.info("Program finished with", display(result))
	return 0

def _complain(ex:Abort, report:Report) -> int:
	report.runtime_error(ex)
	report.complain_to_console()
	return 1

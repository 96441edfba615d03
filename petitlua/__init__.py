"""
petitlua: the evaluation core of a tree-walking interpreter for a small Lua-like language.

Hand `run_program` a `syntax.Block` and it runs it.
"""
from .executive import run_program, run

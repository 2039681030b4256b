# Core type aliases for the mal data model.
# Runtime values are a closed set: int, str (quoted source text), bool, Nil,
# Symbol, Keyword, List/Array/Map (over PersistentList), Closure, ReaderMacro
# and native functions (plain Python callables taking (env, args)).
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (reader output is ordinary runtime data)
SExpression = LispValue

# Evaluator function type: passed into special forms as `evaluate_fn(env, expr)`
EvaluatorFn = Callable[..., LispValue]

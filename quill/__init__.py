# Core type aliases for Quill's data model.
# We use plain Python types (int, float, bool, str, list, etc.) to represent
# both code (forms) and runtime values. Proper lists are Python lists; there
# is no explicit Pair/Cons type.
#
# Naming guidance:
# - SExpression: Use in reader/expander code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type: (expr, env) -> value
EvaluatorFn = Callable[..., LispValue]

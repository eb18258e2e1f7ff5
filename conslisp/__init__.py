# Core type aliases for the conslisp data model.
# Runtime values are plain Python objects (str, int, float, bool) plus a few
# small classes: Symbol, PersistentList and the three operator-tag enums.
#
# Naming guidance:
# - SExpression: use in reader/parser code for forms (code-as-data).
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both aliases resolve to `Any`; they are interchangeable because a
# parsed form is itself a value.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Evaluator function type passed into special-form handlers
EvaluatorFn = Callable[[LispValue], LispValue]

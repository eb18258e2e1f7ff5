from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.debug_utils.pprint import show
from conslisp.types.errors import InvalidArguments
from conslisp.types.environment import Environment
from conslisp.types.persistent_list import PersistentList


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (cond (test expr) ...)
    Returns the value of the first clause whose test is not false; false
    when no clause matches.
    """
    for clause in tail:
        if not isinstance(clause, PersistentList) or len(clause) != 2:
            raise InvalidArguments(f"cond clause must be (test expr), got {show(clause)}")
        test, expr = clause
        # Only the boolean false rejects a clause
        if evaluate_fn(test) is not False:
            return evaluate_fn(expr)
    return False

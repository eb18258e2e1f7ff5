"""Special-form dispatch for the conslisp evaluator.

Each SpecialForm tag has exactly one match arm below; the handlers receive
their operands unevaluated and decide what to evaluate themselves.
"""

from typing import TextIO

from conslisp import EvaluatorFn, LispValue, SExpression
from conslisp.types.environment import Environment
from conslisp.types.operators import SpecialForm
from conslisp.evaluation.special_forms.define_form import define_form
from conslisp.evaluation.special_forms.set_form import set_form, get_form
from conslisp.evaluation.special_forms.quote_forms import quote_form
from conslisp.evaluation.special_forms.eval_form import eval_form
from conslisp.evaluation.special_forms.print_form import print_form
from conslisp.evaluation.special_forms.list_forms import car_form, cdr_form, cons_form
from conslisp.evaluation.special_forms.do_form import do_form
from conslisp.evaluation.special_forms.cond_form import cond_form
from conslisp.evaluation.special_forms.typeof_form import typeof_form


def dispatch_special_form(
    form: SpecialForm,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    out: TextIO,
) -> LispValue:
    match form:
        case SpecialForm.DEF:
            return define_form(tail, env, evaluate_fn)
        case SpecialForm.SET:
            return set_form(tail, env, evaluate_fn)
        case SpecialForm.GET:
            return get_form(tail, env, evaluate_fn)
        case SpecialForm.QUOTE:
            return quote_form(tail, env, evaluate_fn)
        case SpecialForm.EVAL:
            return eval_form(tail, env, evaluate_fn)
        case SpecialForm.PRINT:
            return print_form(tail, env, evaluate_fn, out)
        case SpecialForm.CAR:
            return car_form(tail, env, evaluate_fn)
        case SpecialForm.CDR:
            return cdr_form(tail, env, evaluate_fn)
        case SpecialForm.CONS:
            return cons_form(tail, env, evaluate_fn)
        case SpecialForm.DO:
            return do_form(tail, env, evaluate_fn)
        case SpecialForm.TYPEOF:
            return typeof_form(tail, env, evaluate_fn)
        case SpecialForm.COND:
            return cond_form(tail, env, evaluate_fn)
    raise ValueError(f"Unhandled special form {form!r}")

from pairlisp import EvaluatorFn
from pairlisp import SExpression, LispValue
from pairlisp.printer import to_string
from pairlisp.types.environment import Environment
from pairlisp.types.errors import LispMalformedForm, LispTypeMismatch


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test consequent alternative)
    The alternative is required. Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise LispMalformedForm(
            f"if requires a test, a consequent and an alternative, got {len(tail)} operands"
        )

    test, consequent, alternative = tail
    cond = evaluate_fn(test, env)
    # No truthiness: the test has to be a real boolean
    if not isinstance(cond, bool):
        raise LispTypeMismatch(f"if test must evaluate to a boolean, got {to_string(cond)}")

    if cond:
        return evaluate_fn(consequent, env)
    return evaluate_fn(alternative, env)

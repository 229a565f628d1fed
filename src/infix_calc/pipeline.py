"""
Evaluation pipeline: text -> tokens -> postfix -> value.

Every function here is stateless; evaluating the same string twice gives the
same result and concurrent calls need no synchronization.
"""

from typing import Iterable

import structlog

from infix_calc.config import ensure_logging
from infix_calc.errors import CalculatorError
from infix_calc.evaluator import evaluate
from infix_calc.lexer import tokenize
from infix_calc.models import Associativity, EvaluationOutcome, EvaluationResult
from infix_calc.reorder import to_postfix

logger = structlog.get_logger()


def analyze(
    expression: str,
    *,
    strict: bool | None = None,
    power_associativity: Associativity | str | None = None,
) -> EvaluationResult:
    """
    Evaluate ``expression`` and keep the output of every stage.

    Raises the CalculatorError of whichever stage failed.
    """
    ensure_logging()
    log = logger.bind(expression=expression)
    try:
        tokens = tokenize(expression)
        postfix = to_postfix(
            tokens, strict=strict, power_associativity=power_associativity
        )
        value = evaluate(postfix, strict=strict)
    except CalculatorError as e:
        log.info("Evaluation failed", error_type=type(e).__name__, error=str(e))
        raise

    log.debug("Evaluation complete", value=value)
    return EvaluationResult(
        expression=expression,
        tokens=tokens,
        postfix=postfix,
        value=value,
    )


def evaluate_expression(
    expression: str,
    *,
    strict: bool | None = None,
    power_associativity: Associativity | str | None = None,
) -> float:
    """Evaluate an infix expression and return its value."""
    return analyze(
        expression, strict=strict, power_associativity=power_associativity
    ).value


def evaluate_batch(
    expressions: Iterable[str],
    *,
    strict: bool | None = None,
    power_associativity: Associativity | str | None = None,
) -> list[EvaluationOutcome]:
    """
    Evaluate each expression independently.

    A CalculatorError is recorded on that expression's outcome and the batch
    carries on; any other exception propagates.
    """
    ensure_logging()
    outcomes: list[EvaluationOutcome] = []
    for expression in expressions:
        try:
            value = evaluate_expression(
                expression, strict=strict, power_associativity=power_associativity
            )
        except CalculatorError as e:
            outcomes.append(EvaluationOutcome(
                expression=expression,
                error=str(e),
                error_type=type(e).__name__,
            ))
        else:
            outcomes.append(EvaluationOutcome(expression=expression, value=value))

    failed = sum(1 for o in outcomes if not o.ok)
    logger.info("Batch evaluated", total=len(outcomes), failed=failed)
    return outcomes

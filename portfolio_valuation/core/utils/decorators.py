"""
Utility decorators for valuation logging.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

F = TypeVar("F", bound=Callable[..., Any])


def _extract_valuation_context(bound_args: inspect.BoundArguments) -> dict[str, Any]:
    """Extract valuation context from function arguments."""
    context = {}
    for param_name, value in bound_args.arguments.items():
        if param_name in ["investor_id", "value_date"]:
            context[param_name] = str(value)
    return context


def _setup_logging_context(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, Any]:
    """Setup logging context for a valuation call."""
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()

    return {
        "correlation_id": str(uuid.uuid4())[:8],
        **_extract_valuation_context(bound_args),
    }


def _execute_with_logging(
    func: Callable[..., Any],
    context: dict[str, Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    """Execute function with start/finish logging bound to the context."""
    func_name = func.__name__
    bound_logger = logger.bind(**context)

    bound_logger.debug(f"Valuation started: {func_name}")
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        bound_logger.error(
            f"Valuation failed: {func_name} after {execution_time_ms:.2f}ms "
            f"({type(e).__name__}: {e})"
        )
        raise

    execution_time_ms = (time.perf_counter() - start_time) * 1000
    bound_logger.debug(f"Valuation completed: {func_name} = {result} in {execution_time_ms:.2f}ms")
    return result


def log_valuation(func: F) -> F:
    """Decorator to log valuation operations with correlation IDs."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        context = _setup_logging_context(func, args, kwargs)
        return _execute_with_logging(func, context, args, kwargs)

    return wrapper  # type: ignore

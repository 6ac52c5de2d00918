"""
Utility decorators for logging conversion calls.

The conversion core itself never logs; callers such as the quoter service
wrap their entry points with these decorators.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

F = TypeVar("F", bound=Callable[..., Any])

_CONTEXT_PARAMS = ("amount", "input_amount", "output_amount", "token_pair", "rate", "decimals")


def _extract_conversion_context(bound_args: inspect.BoundArguments) -> dict[str, Any]:
    """Extract conversion context from function arguments."""
    context: dict[str, Any] = {}
    self_obj = bound_args.arguments.get("self")
    descriptor = getattr(self_obj, "descriptor", None)
    if descriptor is not None:
        context["token_pair"] = "/".join(descriptor.token_pair)

    for param_name, value in bound_args.arguments.items():
        if param_name in _CONTEXT_PARAMS:
            context[param_name] = _serialize_parameter_value(value)
    return context


def _serialize_parameter_value(value: Any) -> Any:
    """Serialize parameter value for logging."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)  # 128-bit amounts overflow most JSON sinks
    if isinstance(value, tuple | list):
        return [_serialize_parameter_value(item) for item in value]
    return value


def _create_success_context(
    base_context: dict[str, Any], execution_time_ms: float, result: Any
) -> dict[str, Any]:
    """Create success logging context."""
    return {
        **base_context,
        "success": True,
        "execution_time_ms": round(execution_time_ms, 2),
        "result_type": type(result).__name__,
        "result": _serialize_parameter_value(result),
    }


def _create_error_context(
    base_context: dict[str, Any], execution_time_ms: float, error: Exception
) -> dict[str, Any]:
    """Create error logging context."""
    return {
        **base_context,
        "success": False,
        "execution_time_ms": round(execution_time_ms, 2),
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


def _setup_logging_context(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, Any]:
    """Setup logging context for a conversion call."""
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()

    return {
        "correlation_id": str(uuid.uuid4())[:8],
        "timestamp": str(time.time()),
        **_extract_conversion_context(bound_args),
    }


def log_conversions(func: F) -> F:
    """Decorator to log conversion calls with correlation IDs.

    Logs start at DEBUG, completion at SUCCESS and failures at ERROR, then
    re-raises the original exception.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        context = _setup_logging_context(func, args, kwargs)
        func_name = func.__name__
        bound = logger.bind(**context)

        bound.debug(f"Conversion started: {func_name}")
        start_time = time.time()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time_ms = (time.time() - start_time) * 1000
            error_context = _create_error_context(context, execution_time_ms, e)
            logger.bind(**error_context).error(f"Conversion failed: {func_name}: {e}")
            raise

        execution_time_ms = (time.time() - start_time) * 1000
        success_context = _create_success_context(context, execution_time_ms, result)
        logger.bind(**success_context).success(f"Conversion completed: {func_name}")
        return result

    return wrapper  # type: ignore

"""
Validation decorators for chromalut operations.

Provides reusable validation logic for parameter checking across converters,
the mixer, the harmony generator and the cache.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import wraps
from typing import Any

from chromalut.errors import OutOfRangeValue

F = Callable[..., Any]


def _suggestion_for(param_name: str) -> str:
    if "ratio" in param_name:
        return " Use 0.0 for the first color only, 1.0 for the second color only."
    if "alpha" in param_name:
        return " Use 0.0 for fully transparent, 1.0 for fully opaque."
    if "hue" in param_name:
        return " Hue is measured in degrees on the color wheel."
    if param_name in {"r", "g", "b", "red", "green", "blue", "channel"}:
        return " RGB channels are integers from 0 to 255."
    if "contrast" in param_name:
        return " WCAG AA requires 4.5 for normal text, AAA requires 7.0."
    if "count" in param_name:
        return " Use 3 (default) for a classic analogous scheme."
    return ""


def check_range(value: Any, min_val: float, max_val: float, param_name: str = "value") -> Any:
    """
    Check that a numeric value lies in ``[min_val, max_val]``.

    Args:
        value: Value to check
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive)
        param_name: Name of parameter for error messages

    Returns:
        The value, unchanged

    Raises:
        TypeError: If value is not a real number
        OutOfRangeValue: If value is outside the range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"{param_name} must be a number, got {type(value).__name__}. "
            f"Provide a numeric value (int or float)."
        )
    if value != value or not min_val <= value <= max_val:
        raise OutOfRangeValue(param_name, value, min_val, max_val, _suggestion_for(param_name))
    return value


def _extract(args: tuple, kwargs: dict, param_name: str, param_index: int) -> tuple[bool, Any]:
    if len(args) > param_index:
        return True, args[param_index]
    if param_name in kwargs:
        return True, kwargs[param_name]
    return False, None


def validate_range(
    min_val: float,
    max_val: float,
    param_name: str = "value",
    param_index: int = 1,
) -> Callable[[F], F]:
    """
    Decorator for validating numeric parameter ranges.

    Args:
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive)
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with range validation

    Example:
        >>> @validate_range(0.0, 1.0, "ratio", param_index=2)
        ... def mix_colors(color_a, color_b, ratio=0.5, mode="normal"):
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _extract(args, kwargs, param_name, param_index)
            if found:
                check_range(value, min_val, max_val, param_name)
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_positive(param_name: str = "value", param_index: int = 1) -> Callable[[F], F]:
    """
    Decorator for validating positive numeric parameters.

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with positive validation

    Example:
        >>> @validate_positive("max_size")
        ... def __init__(self, max_size: int = 100):
        ...     self.max_size = max_size
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _extract(args, kwargs, param_name, param_index)
            if not found or value is None:
                return func(*args, **kwargs)

            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    f"{param_name} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )

            if value <= 0:
                suggestion = ""
                if "size" in param_name:
                    suggestion = " Use 100 (default) for typical palette workloads."
                elif "ttl" in param_name:
                    suggestion = " Pass None to keep entries until evicted."
                raise ValueError(f"{param_name}={value} must be positive (> 0).{suggestion}")

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_type(
    expected_type: type | tuple[type, ...],
    param_name: str = "value",
    param_index: int = 1,
) -> Callable[[F], F]:
    """
    Decorator for validating parameter types.

    Args:
        expected_type: Expected type or tuple of types
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with type validation

    Example:
        >>> @validate_type(str, "value", param_index=0)
        ... def parse(value: str) -> RGBA:
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _extract(args, kwargs, param_name, param_index)
            if found and not isinstance(value, expected_type):
                if isinstance(expected_type, tuple):
                    type_names = ", ".join(t.__name__ for t in expected_type)
                    raise TypeError(
                        f"{param_name} must be one of ({type_names}), got {type(value).__name__}"
                    )
                raise TypeError(
                    f"{param_name} must be {expected_type.__name__}, got {type(value).__name__}"
                )
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_choices(
    valid_choices: Iterable[str],
    param_name: str = "value",
    param_index: int = 1,
    error: Callable[[Any, tuple[str, ...]], Exception] | None = None,
) -> Callable[[F], F]:
    """
    Decorator for validating parameter choices.

    Args:
        valid_choices: Valid string choices
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature
        error: Optional factory ``(value, choices) -> Exception`` for a typed
            error; a plain ``ValueError`` is raised otherwise

    Returns:
        Decorated function with choice validation

    Example:
        >>> @validate_choices(BLEND_MODES, "mode", 3, error=UnknownBlendMode)
        ... def mix_colors(color_a, color_b, ratio=0.5, mode="normal"):
        ...     ...
    """
    choices = tuple(valid_choices)

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _extract(args, kwargs, param_name, param_index)
            if found and value not in choices:
                if error is not None:
                    raise error(value, choices)
                choices_str = ", ".join(sorted(choices))
                raise ValueError(
                    f"{param_name}='{value}' is not valid. Valid options are: {choices_str}"
                )
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator

"""
Typed errors for chromalut operations.

Every failure surfaced by the library is a :class:`ColorError`, which is a
``ValueError`` so that callers validating parameters the usual way keep
working. Each error carries a machine-readable :class:`ErrorCode` and a
context dictionary describing the offending input.
"""

from __future__ import annotations

import json
import time
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error categories."""

    INVALID_COLOR_FORMAT = "INVALID_COLOR_FORMAT"
    INVALID_COLOR_VALUE = "INVALID_COLOR_VALUE"
    MISSING_REQUIRED_PARAMETER = "MISSING_REQUIRED_PARAMETER"
    CONVERSION_FAILED = "CONVERSION_FAILED"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    OUT_OF_RANGE_VALUE = "OUT_OF_RANGE_VALUE"
    UNKNOWN_BLEND_MODE = "UNKNOWN_BLEND_MODE"
    UNKNOWN_HARMONY_TYPE = "UNKNOWN_HARMONY_TYPE"
    CACHE_ERROR = "CACHE_ERROR"


class ColorError(ValueError):
    """
    Base class for all chromalut errors.

    Attributes:
        code: Error category
        context: Details about the failure (operation, input, format,
            expected_range, suggestions)
        recoverable: Whether the caller can retry with corrected input
        timestamp: Creation time (seconds since the epoch)
    """

    default_code = ErrorCode.CONVERSION_FAILED

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        context: dict[str, Any] | None = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.context = {k: v for k, v in (context or {}).items() if v is not None}
        self.recoverable = recoverable
        self.timestamp = time.time()

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation."""
        return {
            "name": type(self).__name__,
            "code": self.code.value,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp,
            "recoverable": self.recoverable,
        }

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} (context: {json.dumps(self.context, default=str)})"


class InvalidFormat(ColorError):
    """Input string matches none of the recognized color grammars."""

    default_code = ErrorCode.INVALID_COLOR_FORMAT

    def __init__(self, value: Any, message: str | None = None, **context: Any):
        if message is None:
            message = f"Invalid color format: {value!r}"
        context.setdefault("input", str(value))
        context.setdefault(
            "suggestions",
            [
                "Use hex (#ff0000), rgb(255, 0, 0), hsl(0, 100%, 50%), "
                "hsb(0, 100%, 100%), cmyk(0%, 100%, 100%, 0%), lab(53%, 80, 67), "
                "xyz(41, 21, 2) or a CSS color name",
            ],
        )
        super().__init__(message, context=context)
        self.value = value


class OutOfRangeValue(ColorError):
    """A numeric component violates its declared bound."""

    default_code = ErrorCode.OUT_OF_RANGE_VALUE

    def __init__(
        self,
        name: str,
        value: Any,
        min_val: float,
        max_val: float,
        suggestion: str = "",
        **context: Any,
    ):
        message = f"{name}={value} is outside valid range [{min_val}, {max_val}].{suggestion}"
        context["expected_range"] = {"min": min_val, "max": max_val}
        context.setdefault("input", str(value))
        super().__init__(message, context=context)
        self.name = name
        self.value = value
        self.min_val = min_val
        self.max_val = max_val


class UnknownBlendMode(ColorError):
    """Blend mode name is not recognized."""

    default_code = ErrorCode.UNKNOWN_BLEND_MODE

    def __init__(self, mode: Any, valid: tuple[str, ...] = ()):
        message = f"Unknown blend mode: {mode}"
        if valid:
            message += f". Valid options are: {', '.join(valid)}"
        super().__init__(message, context={"operation": "mix", "input": str(mode)})
        self.mode = mode


class UnknownHarmonyType(ColorError):
    """Harmony scheme name is not recognized."""

    default_code = ErrorCode.UNKNOWN_HARMONY_TYPE

    def __init__(self, harmony_type: Any, valid: tuple[str, ...] = ()):
        message = f"Unknown harmony type: {harmony_type}"
        if valid:
            message += f". Valid options are: {', '.join(valid)}"
        super().__init__(message, context={"operation": "harmony", "input": str(harmony_type)})
        self.harmony_type = harmony_type


class UnsupportedFormat(ColorError):
    """Requested output format is not one the operation can produce."""

    default_code = ErrorCode.UNSUPPORTED_FORMAT

    def __init__(self, fmt: Any, valid: tuple[str, ...] = (), operation: str | None = None):
        message = f"Unsupported color format: {fmt}"
        if valid:
            message += f". Valid options are: {', '.join(valid)}"
        super().__init__(message, context={"operation": operation, "format": str(fmt)})
        self.format = fmt

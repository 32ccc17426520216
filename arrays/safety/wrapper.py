"""
Exception Capture

Run a function and report a raised exception as data in a CallResult.
"""

from typing import Callable, Any, Optional
from dataclasses import dataclass


@dataclass
class CallResult:
    """Outcome of a call: the value, or the error it raised."""

    success: bool
    value: Any = None
    error: Optional[str] = None
    error_type: Optional[str] = None


def safe_execute(func: Callable, *args, **kwargs) -> CallResult:
    """
    Execute a function and describe the outcome instead of raising.

    Returns:
        CallResult with value or error info
    """
    try:
        return CallResult(success=True, value=func(*args, **kwargs))
    except Exception as e:
        return CallResult(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )

# fast_view_cut/revit/safe_api.py

from typing import Any, Callable, Dict, Optional, TypeVar

T = TypeVar("T")


def safe_call(
    diag: Any,
    *,
    phase: str,
    callsite: str,
    fn: Callable[[], T],
    default: T,
    context: Optional[Dict[str, Any]] = None,
    policy: str = "default",  # "default" | "raise"
) -> T:
    """
    Call a host API through fn() and record failures in diagnostics.

    policy:
      - "default": record error, return default
      - "raise":   record error, then re-raise
    """
    try:
        return fn()
    except Exception as e:
        ctx = context or {}

        if diag is not None:
            try:
                diag.error(
                    phase=phase,
                    callsite=callsite,
                    message="Host API call failed",
                    exc=e,
                    view_id=ctx.get("view_id"),
                    extra=ctx,
                )
            except Exception:
                # Diagnostics must never mask the host failure
                pass

        if policy == "raise":
            raise

        return default

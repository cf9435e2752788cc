# tests/test_safe_call.py

import pytest

from fast_view_cut.core.diagnostics import Diagnostics
from fast_view_cut.revit.safe_api import safe_call


def test_safe_call_default_records_and_returns_default():
    diag = Diagnostics(max_events=10)

    def boom():
        raise ValueError("x")

    result = safe_call(
        diag,
        phase="unit",
        callsite="safe_call_default",
        fn=boom,
        default=[],
        context={"view_id": 9},
    )

    assert result == []
    d = diag.to_dict()
    assert d["num_events"] == 1
    assert d["events"][0]["exc_type"] == "ValueError"
    assert d["events"][0]["view_id"] == 9


def test_safe_call_raise_records_and_raises():
    diag = Diagnostics(max_events=10)

    def boom():
        raise RuntimeError("y")

    with pytest.raises(RuntimeError):
        safe_call(
            diag,
            phase="unit",
            callsite="safe_call_raise",
            fn=boom,
            default=None,
            policy="raise",
        )

    assert diag.to_dict()["events"][0]["exc_type"] == "RuntimeError"


def test_safe_call_passes_through_result():
    assert safe_call(None, phase="unit", callsite="ok", fn=lambda: 5, default=0) == 5

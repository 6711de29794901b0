import pytest

from accent_bridge.core.result import Success, error, first_success, safe_call, success


def test_success_and_error_accessors():
    ok = success(5)
    failed = error(ValueError("bad"))

    assert ok.is_success() and not ok.is_error()
    assert failed.is_error() and not failed.is_success()
    assert ok.unwrap() == 5

    with pytest.raises(ValueError):
        failed.unwrap()


def test_safe_call():
    assert safe_call(int, "12") == Success(12)
    assert isinstance(safe_call(int, "twelve").error, ValueError)


def test_first_success_stops_early():
    calls = []

    def attempt(name, result):
        def _run():
            calls.append(name)
            return result
        return _run

    result = first_success([
        attempt("a", error(LookupError("a"))),
        attempt("b", success(2)),
        attempt("c", success(3)),
    ])

    assert result == Success(2)
    assert calls == ["a", "b"]


def test_first_success_collects_errors():
    first = LookupError("a")
    second = OSError("b")

    result = first_success([lambda: error(first), lambda: error(second)])

    assert result.is_error()
    assert result.error == [first, second]

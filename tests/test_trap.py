"""
Tests for trap: converting faults from a sub-computation into a channel exit.
"""

import json

import pytest

from gbye import run


class Abort(BaseException):
    """A BaseException that is not an Exception."""


def test_trap_returns_value_when_sub_succeeds():
    result = run(
        lambda ctl: ctl.trap("fail", lambda: True),
        {"fail": lambda error: False},
    )
    assert result is True


def test_trap_value_flows_back_to_the_operation():
    def operation(ctl):
        data = ctl.trap("malformed", lambda: json.loads('{"age": 10}'))
        return data["age"] + 1

    assert run(operation, {"malformed": lambda error: -1}) == 11


def test_trap_value_does_not_invoke_handler():
    calls = []

    def operation(ctl):
        ctl.trap("fail", lambda: "fine")
        return "done"

    assert run(operation, {"fail": lambda error: calls.append(error)}) == "done"
    assert calls == []


def test_trapped_fault_goes_to_handler():
    error = ValueError("bad input")

    def sub():
        raise error

    result = run(
        lambda ctl: ctl.trap("fail", sub),
        {"fail": lambda err: "caught:" + str(err)},
    )
    assert result == "caught:bad input"


def test_trapped_fault_identity_is_preserved():
    error = ValueError()

    def sub():
        raise error

    result = run(lambda ctl: ctl.trap("fail", sub), {"fail": lambda err: err})
    assert result is error


def test_leading_arguments_precede_fault():
    error = Exception()

    def sub():
        raise error

    def operation(ctl):
        ctl.trap("fail", "foo", "bar", sub)
        return True

    result = run(operation, {"fail": lambda foo, bar, err: [foo, bar, err]})
    assert result == ["foo", "bar", error]


def test_trap_abandons_rest_of_operation():
    reached = []

    def operation(ctl):
        ctl.trap("malformed", lambda: json.loads(""))
        reached.append(True)
        return "parsed"

    result = run(operation, {"malformed": lambda err: type(err).__name__})

    assert result == "JSONDecodeError"
    assert reached == []


def test_fault_in_leading_arguments_is_not_converted():
    def operation(ctl):
        return ctl.trap("fail", int("not a number"), lambda: 1)

    with pytest.raises(ValueError):
        run(operation, {"fail": lambda lead, err: "converted"})


def test_fault_outside_sub_is_not_converted():
    error = RuntimeError("after trap")

    def operation(ctl):
        ctl.trap("fail", lambda: 1)
        raise error

    with pytest.raises(RuntimeError) as exc_info:
        run(operation, {"fail": lambda err: "converted"})

    assert exc_info.value is error


def test_exit_inside_trapped_sub_reaches_its_own_channel():
    def operation(ctl):
        return ctl.trap("crash", lambda: ctl.exit("fail", "early"))

    result = run(
        operation,
        {
            "crash": lambda err: ("crash", err),
            "fail": lambda reason: ("fail", reason),
        },
    )
    assert result == ("fail", "early")


def test_base_exception_is_not_converted():
    def sub():
        raise Abort()

    with pytest.raises(Abort):
        run(lambda ctl: ctl.trap("fail", sub), {"fail": lambda err: "converted"})


def test_trap_requires_callable_sub():
    with pytest.raises(TypeError, match="sub-computation"):
        run(lambda ctl: ctl.trap("fail", "not callable"), {"fail": lambda err: None})


def test_trap_requires_a_sub():
    with pytest.raises(TypeError, match="sub-computation"):
        run(lambda ctl: ctl.trap("fail"), {"fail": lambda err: None})


def test_trap_to_channel_with_wrong_arity_fails_in_handler_call():
    def sub():
        raise ValueError()

    with pytest.raises(TypeError):
        run(lambda ctl: ctl.trap("fail", sub), {"fail": lambda: "no slot"})

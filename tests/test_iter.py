"""Tests for the FallibleIter wrapper and its operation registry."""

import pytest

import resflow.kernel.iter as iter_module
from resflow import Err, FallibleIter, Ok, UnknownOperationError
from fakes import CountingSource


def test_wraps_any_iterable() -> None:
    wrapped = FallibleIter([Ok(1), Err("e")])
    assert iter(wrapped) is wrapped
    assert list(wrapped) == [Ok(1), Err("e")]


def test_single_pass() -> None:
    wrapped = FallibleIter([Ok(1)])
    assert list(wrapped) == [Ok(1)]
    assert list(wrapped) == []


def test_wrapping_does_not_pull() -> None:
    source = CountingSource([Ok(1)])
    FallibleIter(source).transform_success(str).on_failure(print)
    assert source.pulled == 0


def test_builtin_ops_are_registered() -> None:
    ops = FallibleIter.registered_ops()
    for name in (
        "transform_success",
        "expand_failure",
        "try_filter_map_success",
        "require_present_or_else",
        "on_failure",
        "take_while_success",
    ):
        assert name in ops


@pytest.fixture
def isolated_registry(monkeypatch):
    """Register operations into a copy of the registry, discarded after the test."""
    monkeypatch.setattr(iter_module, "_extensions_registry", dict(iter_module._extensions_registry))


def test_register_custom_op(isolated_registry) -> None:
    def double_success(source):
        return FallibleIter(source).transform_success(lambda v: v * 2)

    FallibleIter.register_op("double_success", double_success)
    assert list(FallibleIter([Ok(2), Err("e")]).double_success()) == [Ok(4), Err("e")]


def test_custom_op_does_not_outlive_its_test() -> None:
    assert "double_success" not in FallibleIter.registered_ops()


def test_register_op_rejects_shadowing() -> None:
    with pytest.raises(ValueError, match="already defines"):
        FallibleIter.register_op("register_op", lambda source: source)


def test_register_op_rejects_duplicate_operation(isolated_registry) -> None:
    """A built-in operation cannot be silently replaced."""
    with pytest.raises(ValueError, match="already registered"):
        FallibleIter.register_op("transform_success", lambda source, f: source)
    assert list(FallibleIter([Ok(1)]).transform_success(str)) == [Ok("1")]


def test_unknown_operation() -> None:
    with pytest.raises(UnknownOperationError) as info:
        FallibleIter([]).no_such_op()
    assert isinstance(info.value, AttributeError)
    assert info.value.name == "no_such_op"


def test_wrapper_is_frozen() -> None:
    wrapped = FallibleIter([])
    with pytest.raises(AttributeError):
        wrapped._it = iter([Ok(1)])

"""Tests for the expansion combinators."""

from resflow import (
    Err,
    FallibleIter,
    Ok,
    expand_failure,
    expand_success,
    flat_map_failure,
    flat_map_success,
    flatten_failure_iter,
    flatten_success_iter,
    transform_failure,
    transform_success,
)
from fakes import CountingSource


def test_expand_success_drains_each_expansion_in_order() -> None:
    items = [Ok(1), Err("e")]
    out = list(expand_success(items, lambda v: [Ok(10), Ok(11)]))
    assert out == [Ok(10), Ok(11), Err("e")]


def test_expand_success_empty_expansion_pulls_next() -> None:
    items = [Ok(0), Ok(2), Err("e")]
    out = list(expand_success(items, lambda n: [Ok(i) for i in range(n)]))
    assert out == [Ok(0), Ok(1), Err("e")]


def test_expand_success_can_emit_failures() -> None:
    out = list(expand_success([Ok("a,b,!")], lambda s: [Ok(p) if p.isalpha() else Err(p) for p in s.split(",")]))
    assert out == [Ok("a"), Ok("b"), Err("!")]


def test_expand_success_is_lazy() -> None:
    """Upstream is consulted only once the current expansion is exhausted."""
    source = CountingSource([Ok(2), Ok(1)])
    expanded = expand_success(source, lambda n: (Ok(i) for i in range(n)))
    assert next(expanded) == Ok(0)
    assert source.pulled == 1
    assert next(expanded) == Ok(1)
    assert source.pulled == 1
    assert next(expanded) == Ok(0)
    assert source.pulled == 2


def test_expand_failure() -> None:
    items = [Ok(1), Err(2), Err(0), Ok(2)]
    out = list(expand_failure(items, lambda n: [Err(i) for i in range(n * 2)]))
    assert out == [Ok(1), Err(0), Err(1), Err(2), Err(3), Ok(2)]


def test_flat_map_success_wraps_plain_values() -> None:
    items = [Ok(1), Ok(2), Err(2), Err(0), Ok(2)]
    out = list(flat_map_success(items, range))
    assert out == [Ok(0), Ok(0), Ok(1), Err(2), Err(0), Ok(0), Ok(1)]


def test_flat_map_failure_wraps_plain_values() -> None:
    items = [Ok(1), Ok(2), Err(2), Err(0), Ok(2)]
    out = list(flat_map_failure(items, lambda i: range(i * 2)))
    assert out == [Ok(1), Ok(2), Err(0), Err(1), Err(2), Err(3), Ok(2)]


def test_expand_as_method() -> None:
    out = list(FallibleIter([Ok("ab")]).expand_success(lambda s: map(Ok, s)))
    assert out == [Ok("a"), Ok("b")]


def test_flatten_iterable_payloads() -> None:
    """Mapping to ranges then flattening both channels matches flat_map."""
    items = [Ok(1), Ok(2), Err(2), Err(0), Ok(2)]
    ranged = transform_failure(transform_success(items, range), lambda i: range(i * 2))
    out = list(flatten_failure_iter(flatten_success_iter(ranged)))
    assert out == [Ok(0), Ok(0), Ok(1), Err(0), Err(1), Err(2), Err(3), Ok(0), Ok(1)]


def test_flatten_success_iter_list_payload() -> None:
    out = list(FallibleIter([Ok([1, 2]), Ok([]), Err("e")]).flatten_success_iter())
    assert out == [Ok(1), Ok(2), Err("e")]


def test_flatten_failure_iter_passes_successes() -> None:
    out = list(FallibleIter([Err(("a", "b")), Ok(3)]).flatten_failure_iter())
    assert out == [Err("a"), Err("b"), Ok(3)]

"""
Tests for MonotonicEnvelope, including the optional order checks.
"""

import pytest
from hypothesis import given, settings

import config
from envelopes.monotonic_envelope import MonotonicEnvelope
from models.errors import EmptyContainerError, OrderViolationError
from envelope_strategies import (
    int_lines,
    int_queries,
    crowded_lines,
    frac_lines,
    frac_queries,
    monotonic_ops,
    brute_force,
    assert_upper_envelope_shape,
)


def test_sorted_scenario():
    env = MonotonicEnvelope([(-1, 10), (0, 5), (2, 0)])

    assert env.lines() == [(-1, 10), (2, 0)]
    assert env.maximum(0) == 10
    assert env.maximum(3) == 7
    assert env.maximum(10) == 20


def test_queries_drop_lines_behind_the_cursor():
    env = MonotonicEnvelope([(-1, 10), (2, 0)])
    assert env.maximum(0) == 10
    assert len(env) == 2

    assert env.maximum(4) == 8
    assert env.lines() == [(2, 0)]


def test_equal_slopes_keep_the_larger_intercept():
    env = MonotonicEnvelope()
    env.insert_line(1, 0)
    env.insert_line(1, 5)
    env.insert_line(1, 2)

    assert env.lines() == [(1, 5)]
    assert env.maximum(0) == 5


def test_empty_container_raises():
    env = MonotonicEnvelope()
    with pytest.raises(EmptyContainerError):
        env.maximum(0)


def test_decreasing_slope_raises_and_keeps_state():
    env = MonotonicEnvelope([(0, 0), (2, 1)])
    before = env.lines()

    with pytest.raises(OrderViolationError) as excinfo:
        env.insert_line(1, 100)

    assert excinfo.value.kind == "slope"
    assert excinfo.value.value == 1
    assert excinfo.value.previous == 2
    assert env.lines() == before


def test_decreasing_query_raises_and_keeps_state():
    env = MonotonicEnvelope([(-1, 10), (2, 0)])
    env.maximum(5)

    with pytest.raises(OrderViolationError) as excinfo:
        env.maximum(4)

    assert excinfo.value.kind == "query"
    assert isinstance(excinfo.value, ValueError)
    assert env.maximum(5) == 10


def test_unchecked_mode_does_not_raise():
    env = MonotonicEnvelope([(0, 0), (2, 1)], check_order=False)
    env.maximum(5)
    env.maximum(1)
    env.insert_line(1, -100)


def test_check_order_default_comes_from_config(monkeypatch):
    assert MonotonicEnvelope().check_order is True

    monkeypatch.setattr(config, "CHECK_MONOTONIC_ORDER", False)
    assert MonotonicEnvelope().check_order is False


def test_repr():
    env = MonotonicEnvelope([(1, 2)])
    assert repr(env) == "MonotonicEnvelope(lines=[(1, 2)], check_order=True)"


# ----------------------------------------------------------------------
#  Properties
# ----------------------------------------------------------------------

@given(int_lines, int_queries)
@settings(max_examples=300, deadline=None)
def test_matches_brute_force_integers(lines, queries):
    env = MonotonicEnvelope(sorted(lines))
    for x in sorted(queries):
        assert env.maximum(x) == brute_force(lines, x)


@given(crowded_lines, int_queries)
def test_matches_brute_force_with_many_equal_slopes(lines, queries):
    env = MonotonicEnvelope(sorted(lines, key=lambda line: line[0]))
    for x in sorted(queries):
        assert env.maximum(x) == brute_force(lines, x)


@given(frac_lines, frac_queries)
def test_matches_brute_force_fractions(lines, queries):
    env = MonotonicEnvelope(sorted(lines))
    for x in sorted(queries):
        assert env.maximum(x) == brute_force(lines, x)


@given(monotonic_ops())
@settings(deadline=None)
def test_interleaved_inserts_and_queries(ops):
    env = MonotonicEnvelope()
    inserted = []
    for kind, value in ops:
        if kind == "insert":
            env.insert_line(*value)
            inserted.append(value)
        else:
            assert env.maximum(value) == brute_force(inserted, value)


@given(crowded_lines)
def test_retained_lines_form_an_upper_envelope(lines):
    env = MonotonicEnvelope(sorted(lines))
    assert_upper_envelope_shape(env)


@given(int_lines, int_queries)
def test_repeated_queries_are_stable(lines, queries):
    env = MonotonicEnvelope(sorted(lines))
    for x in sorted(queries):
        assert env.maximum(x) == env.maximum(x)

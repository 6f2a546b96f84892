"""
Testing keyboard letter state aggregation.
"""

import pytest

from wordgame.models import (
    InvalidTransition,
    LetterState,
    LetterStateTracker,
    UnknownLetterKey,
    classify_default,
    to_letter_state,
)


@pytest.mark.parametrize("key, state", [
    ("A", LetterState.UNKNOWN),
    ("Z", LetterState.UNKNOWN),
    ("5", LetterState.INVISIBLE),
    ("20", LetterState.INVISIBLE),
    ("ENTER", LetterState.SPECIAL),
    ("<-", LetterState.SPECIAL),
])
def test_classify_default(key, state):
    assert classify_default(key) == state


@pytest.mark.parametrize("key", ["", None])
def test_classify_default_rejects_keys_without_default(key):
    with pytest.raises(UnknownLetterKey):
        classify_default(key)


def test_to_letter_state():
    assert to_letter_state("*") == LetterState.RIGHT
    assert to_letter_state("+") == LetterState.MISPOSITIONED
    assert to_letter_state(".") == LetterState.UNUSED

    with pytest.raises(ValueError):
        to_letter_state("?")


def test_upgrade_from_unused_ends_at_right():
    tracker = LetterStateTracker()

    assert tracker.observe("A", LetterState.UNUSED) is True
    assert tracker.observe("A", LetterState.MISPOSITIONED) is False
    assert tracker.state("A") == LetterState.UNUSED
    assert tracker.observe("A", LetterState.RIGHT) is True
    assert tracker.state("A") == LetterState.RIGHT


def test_right_never_regresses():
    tracker = LetterStateTracker()
    tracker.observe("A", LetterState.RIGHT)

    assert tracker.observe("A", LetterState.UNUSED) is False
    assert tracker.observe("A", LetterState.MISPOSITIONED) is False
    assert tracker.state("A") == LetterState.RIGHT


def test_mispositioned_is_not_clobbered_by_unused():
    tracker = LetterStateTracker()
    tracker.observe("E", LetterState.MISPOSITIONED)

    assert tracker.observe("E", LetterState.UNUSED) is False
    assert tracker.state("E") == LetterState.MISPOSITIONED


def test_same_state_reports_no_change():
    tracker = LetterStateTracker()
    tracker.observe("Q", LetterState.UNUSED)

    assert tracker.observe("Q", LetterState.UNUSED) is False
    assert tracker.state("Q") == LetterState.UNUSED


@pytest.mark.parametrize("state", [LetterState.UNKNOWN, LetterState.SPECIAL, LetterState.INVISIBLE])
def test_fixed_and_initial_states_cannot_be_observed(state):
    tracker = LetterStateTracker()

    with pytest.raises(InvalidTransition):
        tracker.observe("A", state)
    assert len(tracker) == 0


@pytest.mark.parametrize("key", ["ENTER", "<-", "5"])
def test_fixed_keys_are_never_upgraded(key):
    tracker = LetterStateTracker()

    with pytest.raises(InvalidTransition):
        tracker.observe(key, LetterState.RIGHT)
    assert tracker.state(key) == classify_default(key)


def test_reading_a_state_does_not_create_an_entry():
    tracker = LetterStateTracker()

    assert tracker.state("M") == LetterState.UNKNOWN
    assert tracker.state("ENTER") == LetterState.SPECIAL
    assert len(tracker) == 0
    assert tracker.snapshot() == {}


def test_observe_feedback_reports_changed_keys():
    tracker = LetterStateTracker()

    changed = tracker.observe_feedback("ERASE", "+..++")

    assert changed == {
        "E": LetterState.MISPOSITIONED,
        "R": LetterState.UNUSED,
        "A": LetterState.UNUSED,
        "S": LetterState.MISPOSITIONED,
    }
    assert tracker.snapshot() == {
        "A": "UNUSED",
        "E": "MISPOSITIONED",
        "R": "UNUSED",
        "S": "MISPOSITIONED",
    }


def test_absent_then_right_in_the_same_guess():
    # CRANE scored against EERIE gives "..+.*"
    tracker = LetterStateTracker()

    tracker.observe_feedback("EERIE", "..+.*")

    assert tracker.state("E") == LetterState.RIGHT
    assert tracker.state("R") == LetterState.MISPOSITIONED
    assert tracker.state("I") == LetterState.UNUSED


def test_reset_forgets_everything():
    tracker = LetterStateTracker()
    tracker.observe_feedback("ERASE", "+..++")

    tracker.reset()

    assert len(tracker) == 0
    assert tracker.state("E") == LetterState.UNKNOWN


def test_right_does_not_overwrite_fixed_key_classification():
    tracker = LetterStateTracker()

    with pytest.raises(InvalidTransition):
        tracker.observe("ENTER", LetterState.RIGHT)
    assert tracker.state("ENTER") == LetterState.SPECIAL
    assert len(tracker) == 0

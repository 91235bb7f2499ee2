"""Unit tests for the in-memory API key rotator.

Covers the per-key budget, auto-rotation on reaching the limit, the full
reset when every key is spent, wholesale credential replacement and the
empty-set failure mode.
"""

from __future__ import annotations

import json
import threading

import pytest

from rotating_providers.base.errors import ErrorCode, ProviderError
from rotating_providers.base.rotation import KeyRotator, mask_key
from rotating_providers.config.defaults import MAX_REQUESTS_PER_KEY


def _increment(rotator: KeyRotator, times: int) -> None:
    for _ in range(times):
        rotator.increment_request_count()


def test_default_limit_is_ten():
    rotator = KeyRotator("A", ["B"])
    assert MAX_REQUESTS_PER_KEY == 10
    assert rotator.max_requests_per_key == 10  # nosec B101 - pytest assertion


def test_primary_first_then_additional_in_order():
    rotator = KeyRotator("A", ["B", "C"])
    assert rotator.keys == ("A", "B", "C")
    assert rotator.current_key() == "A"
    assert rotator.current_index == 0
    assert rotator.request_counts == {"A": 0, "B": 0, "C": 0}


def test_falsy_and_duplicate_keys_are_dropped():
    rotator = KeyRotator("A", ["", None, "B", "A", "B", "C"])
    assert rotator.keys == ("A", "B", "C")
    assert len(rotator) == 3


def test_nine_increments_keep_key_tenth_rotates():
    rotator = KeyRotator("A", ["B"])
    _increment(rotator, 9)
    assert rotator.current_key() == "A"
    assert rotator.request_counts["A"] == 9

    rotator.increment_request_count()
    assert rotator.current_key() == "B"  # nosec B101 - pytest assertion
    # The spent key's counter is zeroed on its way out.
    assert rotator.request_counts == {"A": 0, "B": 0}


def test_single_key_full_cycle_stays_on_key_with_zero_count():
    rotator = KeyRotator("A")
    _increment(rotator, 10)
    assert rotator.current_key() == "A"
    assert rotator.current_index == 0
    assert rotator.request_counts == {"A": 0}


def test_auto_rotation_respects_custom_limit():
    rotator = KeyRotator("A", ["B", "C"], max_requests_per_key=2)
    _increment(rotator, 2)
    assert rotator.current_key() == "B"
    _increment(rotator, 2)
    assert rotator.current_key() == "C"
    _increment(rotator, 2)
    assert rotator.current_key() == "A"


def test_rotate_keeps_partial_counts_of_keys_left_behind():
    rotator = KeyRotator("A", ["B", "C"], max_requests_per_key=3)
    rotator.rotate_key()
    _increment(rotator, 2)
    assert rotator.rotate_key() == "C"
    assert rotator.request_counts == {"A": 0, "B": 2, "C": 0}
    # B still has budget and stays in the cycle.
    assert rotator.rotate_key() == "A"
    assert rotator.rotate_key() == "B"


def test_round_robin_visits_every_other_key_before_returning():
    rotator = KeyRotator("A", ["B", "C", "D"])
    rotator.rotate_key()  # start from index 1
    start = rotator.current_key()
    seen = [rotator.rotate_key() for _ in range(len(rotator) - 1)]
    assert start not in seen  # nosec B101 - pytest assertion
    assert sorted(seen) == sorted(k for k in rotator.keys if k != start)
    assert rotator.rotate_key() == start


def test_rotate_never_fails_for_non_empty_set():
    rotator = KeyRotator("A", ["B"], max_requests_per_key=1)
    for _ in range(25):
        key = rotator.rotate_key()
        assert key in ("A", "B")
        rotator.increment_request_count()
    assert rotator.current_key() in ("A", "B")


@pytest.mark.parametrize("start", [0, 1, 2])
def test_rotate_with_every_counter_at_limit(start):
    rotator = KeyRotator("A", ["B", "C"])
    rotator._counts = {"A": 10, "B": 10, "C": 10}
    rotator._index = start
    departing = rotator.keys[start]

    assert rotator.rotate_key() == departing  # nosec B101 - pytest assertion
    assert rotator.current_index == start
    # Only the departing key is zeroed; the others stay spent.
    assert rotator.request_counts == {k: 0 if k == departing else 10 for k in rotator.keys}
    rotator.increment_request_count()
    assert rotator.request_counts[departing] == 1


def test_rotate_single_key_at_limit_starts_over():
    rotator = KeyRotator("A")
    rotator._counts = {"A": 10}
    assert rotator.rotate_key() == "A"
    assert rotator.current_index == 0
    assert rotator.request_counts == {"A": 0}


def test_rotate_returns_new_current_key():
    rotator = KeyRotator("A", ["B"])
    assert rotator.rotate_key() == "B"
    assert rotator.current_key() == "B"
    assert rotator.rotate_key() == "A"


def test_update_keys_resets_cursor_and_counters():
    rotator = KeyRotator("A", ["B"])
    _increment(rotator, 12)
    assert rotator.current_key() == "B"

    rotator.update_keys("X", ["Y", "Z"])
    assert rotator.current_key() == "X"  # nosec B101 - pytest assertion
    assert rotator.current_index == 0
    assert rotator.request_counts == {"X": 0, "Y": 0, "Z": 0}
    assert rotator.keys == ("X", "Y", "Z")


def test_request_counts_is_a_snapshot():
    rotator = KeyRotator("A")
    counts = rotator.request_counts
    counts["A"] = 99
    assert rotator.request_counts["A"] == 0


@pytest.mark.parametrize("op", ["current_key", "rotate_key", "increment_request_count"])
def test_empty_credential_set_raises_no_credentials(op):
    rotator = KeyRotator(None, [])
    with pytest.raises(ProviderError) as ei:
        getattr(rotator, op)()
    assert ei.value.code is ErrorCode.NO_CREDENTIALS
    assert ei.value.provider == "gemini"


def test_update_to_empty_set_then_current_key_fails():
    rotator = KeyRotator("A")
    rotator.update_keys("", [])
    with pytest.raises(ProviderError) as ei:
        rotator.current_key()
    assert ei.value.code is ErrorCode.NO_CREDENTIALS


def test_invalid_limit_rejected():
    with pytest.raises(ValueError):
        KeyRotator("A", max_requests_per_key=0)


def test_concurrent_increments_are_all_counted():
    rotator = KeyRotator("A", ["B", "C"], max_requests_per_key=1000)

    def worker():
        _increment(rotator, 100)

    threads = [threading.Thread(target=worker) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert rotator.request_counts["A"] == 500
    assert rotator.current_key() == "A"


def test_mask_key_hides_all_but_last_four():
    assert mask_key("AIzaSyExample1234") == "...1234"
    assert mask_key("abcd") == "****"
    assert mask_key("") == "<none>"
    assert mask_key(None) == "<none>"


def test_rotation_log_events_mask_keys(capsys):
    rotator = KeyRotator("primary-key-0001", ["second-key-0002"])
    rotator.rotate_key()
    rotator.update_keys("primary-key-0001")
    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
    events = {rec["event"]: rec for rec in lines}
    assert events["keys.rotate"]["previous"] == "...0001"
    assert events["keys.rotate"]["current"] == "...0002"
    assert events["keys.update"]["keys"] == 1
    assert all("primary-key-0001" not in json.dumps(rec) for rec in lines)

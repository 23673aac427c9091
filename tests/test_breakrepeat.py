import random

from zbplugin.breakrepeat import THROTTLE, RepeatBreaker


def test_fifth_repeat_is_broken_with_shuffle():
    breaker = RepeatBreaker(random.Random(0))
    raw = "hello world"
    for _ in range(THROTTLE + 1):
        assert breaker.feed(1, raw) is None
    out = breaker.feed(1, raw)
    assert sorted(out) == sorted(raw)


def test_run_resets_after_break():
    breaker = RepeatBreaker(random.Random(1))
    raw = "again and again"
    results = [breaker.feed(1, raw) for _ in range(THROTTLE + 2)]
    assert results[-1] is not None and sorted(results[-1]) == sorted(raw)
    assert breaker.feed(1, raw) is None


def test_different_message_resets_count():
    breaker = RepeatBreaker(random.Random(2))
    for _ in range(THROTTLE + 1):
        breaker.feed(1, "abc")
    assert breaker.feed(1, "xyz") is None
    assert breaker.feed(1, "abc") is None


def test_groups_are_independent():
    breaker = RepeatBreaker(random.Random(3))
    for _ in range(THROTTLE + 1):
        breaker.feed(1, "abcd")
    assert breaker.feed(2, "abcd") is None
    assert sorted(breaker.feed(1, "abcd")) == sorted("abcd")


def test_short_message_keeps_prefix():
    breaker = RepeatBreaker(random.Random(4))
    for _ in range(THROTTLE + 1):
        breaker.feed(1, "ab")
    assert breaker.feed(1, "ab") == "3: ab"


def test_empty_message_never_triggers():
    breaker = RepeatBreaker(random.Random(5))
    assert all(breaker.feed(1, "") is None for _ in range(10))
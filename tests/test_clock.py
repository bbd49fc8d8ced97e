import time

from philosophers.clock import now_ms, sleep_ms


def test_now_ms_matches_wall_clock():
    before = time.time_ns() // 1_000_000
    value = now_ms()
    after = time.time_ns() // 1_000_000
    assert before <= value <= after


def test_now_ms_never_goes_backwards_in_sequence():
    readings = [now_ms() for _ in range(200)]
    assert readings == sorted(readings)


def test_sleep_ms_waits_at_least_requested_time():
    start = now_ms()
    sleep_ms(30)
    elapsed = now_ms() - start
    assert elapsed >= 30


def test_sleep_ms_zero_and_negative_return_quickly():
    start = now_ms()
    sleep_ms(0)
    sleep_ms(-50)
    elapsed = now_ms() - start
    assert 0 <= elapsed < 50
from datetime import datetime

from core.domain.dates import today


def test_today_zero_is_current_date(fixed_clock):
    assert today(0, clock=fixed_clock) == 20240227
    assert today(clock=fixed_clock) == 20240227


def test_today_adds_days_across_month_end(fixed_clock):
    assert today(5, clock=fixed_clock) == 20240303


def test_today_negative_days(fixed_clock):
    assert today(-5, clock=fixed_clock) == 20240222


def test_today_none_means_zero(fixed_clock):
    assert today(None, clock=fixed_clock) == 20240227


def test_today_fractional_days_use_calendar_arithmetic():
    late = lambda: datetime(2024, 12, 31, 18, 0)  # noqa: E731
    # 18:00 + 0.5 days crosses midnight into the new year.
    assert today(0.5, clock=late) == 20250101
    assert today(0.2, clock=late) == 20241231


def test_today_is_deterministic(fixed_clock):
    assert today(2, clock=fixed_clock) == today(2, clock=fixed_clock) == 20240229


def test_today_defaults_to_wall_clock():
    before = int(datetime.now().strftime("%Y%m%d"))
    value = today()
    after = int(datetime.now().strftime("%Y%m%d"))
    assert before <= value <= after

from datetime import date, datetime, timezone

from core import clock
from core.availability import (
    count_available,
    filter_available,
    filter_unavailable,
    is_claimable_today,
    is_currently_available,
    is_redeemable_now,
    is_scheduled_for_day,
    is_sold_out,
    next_claim_date,
    remaining_claims,
    time_until_end,
    time_until_start,
)

from conftest import MONDAY, TUESDAY, at, make_deal


def test_lunch_window_before_opening():
    deal = make_deal(start_time="10:00", end_time="14:00")
    assert is_claimable_today(deal, at(9)) is True
    assert is_redeemable_now(deal, at(9)) is False


def test_lunch_window_inside():
    deal = make_deal(start_time="10:00", end_time="14:00")
    assert is_claimable_today(deal, at(12)) is True
    assert is_redeemable_now(deal, at(12)) is True


def test_lunch_window_after_closing():
    deal = make_deal(start_time="10:00", end_time="14:00")
    assert is_claimable_today(deal, at(15)) is False
    assert is_redeemable_now(deal, at(15)) is False


def test_window_boundaries_are_inclusive():
    deal = make_deal(start_time="10:00:00", end_time="14:00:00")
    assert is_redeemable_now(deal, at(10, 0)) is True
    assert is_redeemable_now(deal, at(14, 0)) is True
    assert is_redeemable_now(deal, at(14, 1)) is False


def test_empty_days_means_every_day():
    deal = make_deal(available_days=[])
    assert is_scheduled_for_day(deal, at(12, day=MONDAY))
    assert is_scheduled_for_day(deal, at(12, day=TUESDAY))


def test_wrong_weekday_is_never_scheduled():
    deal = make_deal(available_days=["monday"])
    for hour in (0, 9, 12, 23):
        moment = at(hour, day=TUESDAY)
        assert is_scheduled_for_day(deal, moment) is False
        assert is_claimable_today(deal, moment) is False


def test_weekday_match_ignores_case():
    deal = make_deal(available_days=["MONDAY"])
    assert is_scheduled_for_day(deal, at(12, day=MONDAY))
    assert is_currently_available(deal, at(12, day=MONDAY))


def test_inactive_deal_is_never_available():
    deal = make_deal(is_active=False)
    assert is_claimable_today(deal, at(9)) is False
    assert is_currently_available(deal, at(12)) is False


def test_omitted_moment_uses_time_provider(freeze_clock):
    deal = make_deal()
    freeze_clock(at(12))
    assert is_currently_available(deal) is True
    freeze_clock(at(15))
    assert is_currently_available(deal) is False


def test_time_until_start():
    deal = make_deal(start_time="10:00:00", end_time="14:00")
    assert time_until_start(deal, at(9)) == "Starter 10:00"
    assert time_until_start(deal, at(12)) is None
    assert time_until_start(deal, at(15)) is None


def test_time_until_end():
    deal = make_deal(start_time="10:00", end_time="14:00:00")
    assert time_until_end(deal, at(12)) == "Slutter 14:00"
    assert time_until_end(deal, at(14)) is None
    assert time_until_end(deal, at(9)) is None


def test_time_until_start_uses_time_provider(freeze_clock):
    freeze_clock(at(8, 30))
    assert time_until_start(make_deal()) == "Starter 10:00"


def _mixed_deals():
    return [
        make_deal(title="lunch", start_time="10:00", end_time="14:00"),
        make_deal(title="dinner", start_time="17:00", end_time="21:00"),
        make_deal(title="all day", start_time="00:00", end_time="23:59"),
        make_deal(title="tuesdays", available_days=["tuesday"]),
        make_deal(title="paused", is_active=False),
    ]


def test_filter_available_and_unavailable_partition():
    deals = _mixed_deals()
    moment = at(12)

    available = filter_available(deals, moment)
    unavailable = filter_unavailable(deals, moment)

    assert [d.title for d in available] == ["lunch", "all day"]
    assert [d.title for d in unavailable] == ["dinner", "tuesdays", "paused"]
    assert count_available(deals, moment) == 2
    assert count_available(deals, moment) + len(unavailable) == len(deals)


def test_count_available_on_empty_list():
    assert count_available([], at(12)) == 0
    assert filter_available([], at(12)) == []


def test_remaining_claims():
    assert remaining_claims(make_deal(total_limit=8, claimed_count=3)) == 5
    assert remaining_claims(make_deal(total_limit=8, claimed_count=10)) == 0
    assert remaining_claims(make_deal(total_limit=None, claimed_count=3)) is None


def test_is_sold_out():
    assert is_sold_out(make_deal(total_limit=5, claimed_count=5)) is True
    assert is_sold_out(make_deal(total_limit=5, claimed_count=4)) is False
    assert is_sold_out(make_deal(total_limit=None, claimed_count=500)) is False


def test_next_claim_date_is_today_before_closing():
    deal = make_deal()
    assert next_claim_date(deal, at(9)) == date(2024, 1, 1)
    assert next_claim_date(deal, at(14)) == date(2024, 1, 1)


def test_next_claim_date_moves_to_tomorrow_after_closing():
    assert next_claim_date(make_deal(), at(15)) == date(2024, 1, 2)


def test_next_claim_date_skips_unscheduled_days():
    deal = make_deal(available_days=["friday"])
    assert next_claim_date(deal, at(12)) == date(2024, 1, 5)


def test_next_claim_date_respects_validity_period():
    deal = make_deal(start_date=date(2024, 1, 10), end_date=date(2024, 1, 20))
    assert next_claim_date(deal, at(12)) == date(2024, 1, 10)


def test_next_claim_date_falls_back_to_today():
    deal = make_deal(end_date=date(2023, 12, 31))
    assert next_claim_date(deal, at(12)) == date(2024, 1, 1)


def test_zero_total_limit_is_a_real_limit():
    deal = make_deal(total_limit=0, claimed_count=0)
    assert remaining_claims(deal) == 0
    assert is_sold_out(deal) is True


def test_utc_moment_evaluated_in_configured_zone(monkeypatch):
    monkeypatch.setattr(clock, "TIMEZONE", "Europe/Oslo")
    deal = make_deal(available_days=["monday"], start_time="00:00", end_time="01:00")
    # Sunday 23:30 UTC = Monday 00:30 in Oslo
    moment = datetime(2024, 1, 7, 23, 30, tzinfo=timezone.utc)

    assert is_currently_available(deal, moment) is True
    assert time_until_end(deal, moment) == "Slutter 01:00"
    assert next_claim_date(deal, moment) == date(2024, 1, 8)

from tzpicker.constants import SUPPORTED_TIMEZONES
from tzpicker.timezones import check_timezones, get_timezones, is_well_formed

EXPECTED = [
    "America/Los_Angeles",
    "America/New_York",
    "Asia/Tokyo",
    "Australia/Sydney",
    "Europe/Berlin",
    "Europe/London",
    "Europe/Stockholm",
]


def test_exact_list_in_order():
    assert list(get_timezones()) == EXPECTED


def test_has_seven_entries():
    assert len(get_timezones()) == 7


def test_sorted_ascending():
    zones = get_timezones()
    for a, b in zip(zones, zones[1:]):
        assert a <= b


def test_entries_unique():
    zones = get_timezones()
    assert len(set(zones)) == len(zones)


def test_repeated_calls_identical():
    first = get_timezones()
    second = get_timezones()
    assert first == second
    assert first is second


def test_list_is_immutable_constant():
    assert isinstance(SUPPORTED_TIMEZONES, tuple)
    assert get_timezones() is SUPPORTED_TIMEZONES


def test_all_entries_well_formed():
    assert all(is_well_formed(tz) for tz in get_timezones())
    assert check_timezones(get_timezones()) == []


def test_is_well_formed():
    assert is_well_formed("Europe/Stockholm")
    assert is_well_formed("America/Argentina/Buenos_Aires")
    assert is_well_formed("Etc/GMT+5")
    assert not is_well_formed("UTC")
    assert not is_well_formed("Europe/")
    assert not is_well_formed("/London")
    assert not is_well_formed("Europe London")
    assert not is_well_formed("")
    assert not is_well_formed(None)


def test_check_timezones_reports_problems():
    problems = check_timezones(["Asia/Tokyo", "bogus", "Asia/Tokyo"])
    assert problems == [
        "malformed timezone identifier: 'bogus'",
        "duplicate timezone identifier: 'Asia/Tokyo'",
    ]

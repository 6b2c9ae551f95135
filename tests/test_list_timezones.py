import json

from tzpicker.bin import list_timezones

EXPECTED = [
    "America/Los_Angeles",
    "America/New_York",
    "Asia/Tokyo",
    "Australia/Sydney",
    "Europe/Berlin",
    "Europe/London",
    "Europe/Stockholm",
]


def test_prints_one_per_line(capsys):
    assert list_timezones.main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == EXPECTED


def test_prints_json(capsys):
    assert list_timezones.main(["--json"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == EXPECTED
    assert "\\/" not in out

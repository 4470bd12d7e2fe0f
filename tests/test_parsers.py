"""Tests for the calendar and posts feed parsers."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from mobilizon_newsletter.errors import FeedParseError, MissingFieldError
from mobilizon_newsletter.input.feed_parser import parse_feed
from mobilizon_newsletter.input.ics_parser import parse_calendar

AMSTERDAM = ZoneInfo("Europe/Amsterdam")


def test_parse_calendar_reads_event_fields(ics_document):
    events = parse_calendar(ics_document, AMSTERDAM)

    assert [event.title for event in events] == ["July meetup", "Late June action", "Early June demo"]
    demo = events[2]
    assert demo.start == datetime(2024, 6, 3, 17, 30, tzinfo=timezone.utc)
    assert demo.url == "https://mobilizon.example/events/early-june"
    assert demo.organizer == "Animal Rebellion NL"
    assert demo.description == "<p>Come <b>along</b></p>"
    assert demo.location == "Dam, Amsterdam"


def test_parse_calendar_organizer_without_common_name(ics_document):
    events = parse_calendar(ics_document, AMSTERDAM)

    assert events[1].organizer == "group@example.org"
    assert events[1].location is None


def test_parse_calendar_localizes_dates_and_floating_times():
    document = "\n".join(
        [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//Test//EN",
            "BEGIN:VEVENT",
            "UID:all-day",
            "DTSTART;VALUE=DATE:20240620",
            "SUMMARY:All day",
            "END:VEVENT",
            "BEGIN:VEVENT",
            "UID:floating",
            "DTSTART:20240621T190000",
            "SUMMARY:Floating",
            "END:VEVENT",
            "END:VCALENDAR",
            "",
        ]
    )

    all_day, floating = parse_calendar(document, AMSTERDAM)

    assert all_day.start == datetime(2024, 6, 20, tzinfo=AMSTERDAM)
    assert floating.start == datetime(2024, 6, 21, 19, 0, tzinfo=AMSTERDAM)
    assert all_day.organizer == ""
    assert all_day.url == ""


def test_parse_calendar_requires_dtstart():
    document = "\n".join(
        [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//Test//EN",
            "BEGIN:VEVENT",
            "UID:no-start",
            "SUMMARY:Undated",
            "END:VEVENT",
            "END:VCALENDAR",
            "",
        ]
    )

    with pytest.raises(MissingFieldError) as excinfo:
        parse_calendar(document, AMSTERDAM)

    assert excinfo.value.field == "DTSTART"
    assert excinfo.value.entry == "Undated"


def test_parse_calendar_rejects_non_calendar_document():
    with pytest.raises(FeedParseError):
        parse_calendar("<html>not a calendar</html>", AMSTERDAM)


def test_parse_feed_reads_entries(atom_document):
    items = parse_feed(atom_document)

    assert [item.title for item in items] == ["Second post", "Past event", "First post", "Old post"]
    second = items[0]
    assert second.published == datetime(2024, 5, 20, 9, 0, tzinfo=timezone.utc)
    assert second.link == "https://mobilizon.example/p/second"
    assert "Second summary" in second.description


def test_parse_feed_falls_back_to_updated_date():
    document = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>t</title>
  <id>urn:feed</id>
  <updated>2024-05-05T10:00:00Z</updated>
  <entry>
    <title>Updated only</title>
    <id>urn:entry</id>
    <link href="https://mobilizon.example/p/updated"/>
    <updated>2024-05-05T10:00:00Z</updated>
  </entry>
</feed>
"""

    (item,) = parse_feed(document)

    assert item.published == datetime(2024, 5, 5, 10, 0, tzinfo=timezone.utc)
    assert item.description == ""


def test_parse_feed_requires_a_date():
    document = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0">
  <channel>
    <title>t</title>
    <item>
      <title>Undated</title>
      <link>https://mobilizon.example/p/undated</link>
    </item>
  </channel>
</rss>
"""

    with pytest.raises(MissingFieldError) as excinfo:
        parse_feed(document)

    assert excinfo.value.field == "published"


def test_parse_feed_rejects_garbage():
    with pytest.raises(FeedParseError):
        parse_feed("this is <not a feed")


def test_parse_feed_accepts_empty_feed():
    document = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"><title>t</title><id>urn:x</id></feed>
"""

    assert parse_feed(document) == []

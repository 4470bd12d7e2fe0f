"""Shared feed documents for the newsletter tests."""

from __future__ import annotations

import pytest


ICS_DOCUMENT = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Mobilizon//Test//EN
BEGIN:VEVENT
UID:event-july
DTSTART:20240702T170000Z
SUMMARY:July meetup
URL:https://mobilizon.example/events/july
ORGANIZER;CN=Animal Rebellion NL:mailto:ar@example.org
DESCRIPTION:Too late for June
END:VEVENT
BEGIN:VEVENT
UID:event-late-june
DTSTART:20240620T170000Z
SUMMARY:Late June action
URL:https://mobilizon.example/events/late-june
ORGANIZER:mailto:group@example.org
DESCRIPTION:<p>Second event</p>
END:VEVENT
BEGIN:VEVENT
UID:event-early-june
DTSTART:20240603T173000Z
SUMMARY:Early June demo
URL:https://mobilizon.example/events/early-june
ORGANIZER;CN=Animal Rebellion NL:mailto:ar@example.org
DESCRIPTION:<p>Come <b>along</b></p>
LOCATION:Dam\\, Amsterdam
END:VEVENT
END:VCALENDAR
"""

ATOM_DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Mobilizon example</title>
  <id>https://mobilizon.example/feed/instance/atom</id>
  <updated>2024-06-01T00:00:00Z</updated>
  <entry>
    <title>Second post</title>
    <id>https://mobilizon.example/p/second</id>
    <link rel="alternate" href="https://mobilizon.example/p/second"/>
    <published>2024-05-20T09:00:00Z</published>
    <updated>2024-05-20T09:00:00Z</updated>
    <summary type="html">&lt;p&gt;Second summary&lt;/p&gt;</summary>
  </entry>
  <entry>
    <title>Past event</title>
    <id>https://mobilizon.example/e/123</id>
    <link rel="alternate" href="https://mobilizon.example/e/123"/>
    <published>2024-05-15T09:00:00Z</published>
    <updated>2024-05-15T09:00:00Z</updated>
    <summary type="html">An event</summary>
  </entry>
  <entry>
    <title>First post</title>
    <id>https://mobilizon.example/p/first</id>
    <link rel="alternate" href="https://mobilizon.example/p/first"/>
    <published>2024-05-02T09:00:00Z</published>
    <updated>2024-05-02T09:00:00Z</updated>
    <summary type="html">&lt;p&gt;First summary&lt;/p&gt;</summary>
  </entry>
  <entry>
    <title>Old post</title>
    <id>https://mobilizon.example/p/old</id>
    <link rel="alternate" href="https://mobilizon.example/p/old"/>
    <published>2024-04-10T09:00:00Z</published>
    <updated>2024-04-10T09:00:00Z</updated>
    <summary type="html">Too old</summary>
  </entry>
</feed>
"""


@pytest.fixture
def ics_document() -> str:
    return ICS_DOCUMENT


@pytest.fixture
def atom_document() -> str:
    return ATOM_DOCUMENT

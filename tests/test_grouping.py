"""Tests for grouping and stacking activity into summary lines."""

import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from useractivity.application.use_cases.activity import (
    RECENT_WINDOW_SECONDS,
    STACK_LIMIT,
    GroupSummarizer,
)
from useractivity.application.use_cases.activity.grouping import GROUPED_CATEGORIES
from useractivity.domain.entities import ActivityGroups, ActivityItem, ActivityType
from useractivity.infrastructure.links import HtmlLinkBuilder
from useractivity.infrastructure.localization import LocalizationContext, NarrativeRenderer
from useractivity.infrastructure.text import TextShaper

from activity_stubs import DAY, HOUR, NOW


@pytest.fixture()
def summarizer() -> GroupSummarizer:
    context = LocalizationContext()
    return GroupSummarizer(NarrativeRenderer(context), TextShaper(context))


def _edit(actor: str, page: str, timestamp: int, item_id: int = 0) -> ActivityItem:
    return ActivityItem(
        id=item_id, type=ActivityType.EDIT, timestamp=timestamp, actor_name=actor, target_title=page
    )


def _groups(*items: ActivityItem) -> ActivityGroups:
    groups = ActivityGroups()
    for item in items:
        groups.add(item)
    return groups


def test_group_is_summarized_when_recent(summarizer):
    groups = _groups(_edit("Bob", "PageA", NOW - HOUR))

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert [line.text for line in lines] == ["Bob edited the page PageA"]
    assert lines[0].timestamp == NOW - HOUR
    assert lines[0].type is ActivityType.EDIT


def test_group_older_than_three_days_is_not_summarized(summarizer):
    groups = _groups(_edit("Bob", "PageA", NOW - 4 * DAY))

    assert summarizer.summarize(groups, [ActivityType.EDIT], now=NOW) == []


def test_window_boundary_is_inclusive(summarizer):
    groups = _groups(_edit("Bob", "PageA", NOW - RECENT_WINDOW_SECONDS))

    assert len(summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)) == 1


def test_pages_edited_by_the_same_actor_are_stacked(summarizer):
    groups = _groups(_edit("Bob", "X", NOW - 2 * HOUR), _edit("Bob", "Y", NOW - HOUR))

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert [line.text for line in lines] == ["Bob edited the following pages: X, Y"]


def test_stacking_stops_at_the_limit(summarizer):
    pages = [f"P{index}" for index in range(1, 9)]
    groups = _groups(*(_edit("Bob", page, NOW - HOUR) for page in pages))

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert [line.text for line in lines] == [
        "Bob edited the following pages: P1, P2, P3, P4, P5",
        "Bob edited the following pages: P6, P7, P8",
    ]
    assert STACK_LIMIT == 5


def test_every_target_is_described_once(summarizer):
    groups = _groups(
        _edit("Bob", "X", NOW - 3 * HOUR),
        _edit("Ann", "Y", NOW - 2 * HOUR),
        _edit("Cid", "Y", NOW - 2 * HOUR),
        _edit("Bob", "Z", NOW - HOUR),
    )

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)
    texts = [line.text for line in lines]

    assert "Bob edited the following pages: X, Z" in texts
    assert "Ann and Cid edited the page Y" in texts
    assert len(texts) == 2


def test_repeated_actions_show_a_count(summarizer):
    groups = _groups(_edit("Bob", "PageA", NOW - HOUR), _edit("Bob", "PageA", NOW - 2 * HOUR))

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert [line.text for line in lines] == ["Bob edited the page PageA (2 edits)"]
    assert lines[0].timestamp == NOW - HOUR


def test_three_actors_are_listed_with_serial_comma(summarizer):
    groups = _groups(
        _edit("Ann", "PageA", NOW - HOUR),
        _edit("Bob", "PageA", NOW - HOUR),
        _edit("Cid", "PageA", NOW - HOUR),
    )

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert [line.text for line in lines] == ["Ann, Bob, and Cid edited the page PageA"]


def test_long_actor_names_are_truncated(summarizer):
    groups = _groups(_edit("Maximilianus Augustus", "PageA", NOW - HOUR))

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert lines[0].text == "Maximilianus... edited the page PageA"


def test_expired_groups_are_not_stacked(summarizer):
    groups = _groups(_edit("Bob", "X", NOW - HOUR), _edit("Bob", "Old", NOW - 5 * DAY))

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert [line.text for line in lines] == ["Bob edited the page X"]


def test_summarizing_twice_gives_the_same_lines(summarizer):
    groups = _groups(
        _edit("Bob", "X", NOW - HOUR),
        _edit("Bob", "Y", NOW - HOUR),
        _edit("Ann", "Y", NOW - HOUR),
    )

    first = summarizer.summarize(groups, GROUPED_CATEGORIES, now=NOW)
    second = summarizer.summarize(groups, GROUPED_CATEGORIES, now=NOW)

    assert first == second


def test_categories_are_summarized_independently(summarizer):
    groups = _groups(
        _edit("Bob", "PageA", NOW - 2 * HOUR),
        ActivityItem(
            id=1,
            type=ActivityType.COMMENT,
            timestamp=NOW - HOUR,
            actor_name="Bob",
            target_title="PageA",
        ),
    )

    lines = summarizer.summarize(groups, GROUPED_CATEGORIES, now=NOW)

    assert [line.text for line in lines] == [
        "Bob commented on the page PageA",
        "Bob edited the page PageA",
    ]


def test_relationships_mention_the_related_user(summarizer):
    groups = _groups(
        ActivityItem(
            id=1,
            type=ActivityType.FRIEND,
            timestamp=NOW - HOUR,
            actor_name="Ann",
            recipient_name="Bob",
        ),
        ActivityItem(
            id=2,
            type=ActivityType.FOE,
            timestamp=NOW - 2 * HOUR,
            actor_name="Cid",
            recipient_name="Dee",
        ),
    )

    lines = summarizer.summarize(groups, GROUPED_CATEGORIES, now=NOW)

    assert [line.text for line in lines] == [
        "Ann is now friends with Bob",
        "Cid is now foes with Dee",
    ]


def test_lines_without_page_are_still_emitted(summarizer):
    groups = _groups(_edit("Bob", "X", NOW - HOUR), _edit("Bob", "Y", NOW - HOUR))

    lines = summarizer.summarize_category(
        groups,
        ActivityType.EDIT,
        displayed=set(),
        cutoff=NOW - RECENT_WINDOW_SECONDS,
        has_page=False,
    )

    assert [line.text for line in lines] == [
        "Bob edited the following pages: X, Y",
        "Bob edited the following pages:",
    ]


def test_html_links_wrap_actors_and_pages():
    context = LocalizationContext()
    summarizer = GroupSummarizer(
        NarrativeRenderer(context),
        TextShaper(context),
        HtmlLinkBuilder("https://wiki.example.org/", "/wiki/{title}"),
    )
    groups = _groups(_edit("Bob", "Main Page", NOW - HOUR))

    lines = summarizer.summarize(groups, [ActivityType.EDIT], now=NOW)

    assert lines[0].text == (
        '<b><a href="https://wiki.example.org/wiki/User:Bob" title="Bob">Bob</a></b>'
        ' edited the page <a href="https://wiki.example.org/wiki/Main_Page">Main Page</a>'
    )

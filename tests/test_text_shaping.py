"""Tests for truncation and escaping of activity text."""

import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from useractivity.application.use_cases.activity.normalizer import (
    fix_item_comment,
    normalize_system_message,
)
from useractivity.domain.entities import SYSTEM_MESSAGE_LEVELUP, SystemMessageRow
from useractivity.infrastructure.localization import LocalizationContext
from useractivity.infrastructure.text import TextShaper, visual_length

shaper = TextShaper(LocalizationContext())


def test_short_text_is_left_untouched():
    assert shaper.truncate_visual("Fixed a typo", 75) == "Fixed a typo"


def test_long_text_is_cut_to_the_budget_including_ellipsis():
    truncated = shaper.truncate_visual("a" * 200, 75)

    assert len(truncated) == 75
    assert truncated.endswith("...")
    assert truncated.startswith("a" * 72)


def test_combining_marks_do_not_count_as_visible_characters():
    text = "e\u0301" * 10

    assert visual_length(text) == 10
    assert shaper.truncate_visual(text, 10) == text
    truncated = shaper.truncate_visual(text, 6)
    assert visual_length(truncated) == 6
    assert truncated == "e\u0301" * 3 + "..."


def test_comment_is_truncated_before_it_is_escaped():
    comment = "&" * 200

    fixed = fix_item_comment(comment, shaper)

    assert fixed == "&amp;" * 72 + "..."
    assert shaper.truncate_visual(comment, 75) == "&" * 72 + "..."


def test_markup_in_comments_is_escaped():
    assert fix_item_comment('<b>"bold"</b>', shaper) == "&lt;b&gt;&quot;bold&quot;&lt;/b&gt;"


def test_empty_comment_stays_empty():
    assert fix_item_comment("", shaper) == ""


def test_levelup_message_keeps_markup_but_is_bounded():
    markup = '<span class="profile-on">advanced to level <b>Knight</b></span>'
    row = SystemMessageRow(
        id=4,
        timestamp=100,
        actor_id=1,
        message_type=SYSTEM_MESSAGE_LEVELUP,
        message=markup + " " + "x" * 200,
    )

    item = normalize_system_message(row, "Alice", shaper)

    assert item.summary_text.startswith(markup)
    assert len(item.summary_text) == 75
    assert "&lt;" not in item.summary_text


def test_other_system_messages_are_escaped():
    row = SystemMessageRow(id=5, timestamp=100, actor_id=1, message_type=1, message="<i>hi</i>")

    item = normalize_system_message(row, "Alice", shaper)

    assert item.summary_text == "&lt;i&gt;hi&lt;/i&gt;"

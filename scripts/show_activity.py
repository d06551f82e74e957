"""Utility script to print the activity feed of a user from the database."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from useractivity.application.use_cases.activity import build_user_activity
from useractivity.config import get_settings
from useractivity.domain.entities import ActivityFilter
from useractivity.infrastructure.database import SessionLocal, initialize_database
from useractivity.utils import from_unix_timestamp


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the activity report."""

    parser = argparse.ArgumentParser(
        description="Print the recent activity of a user, or of everyone.",
    )
    parser.add_argument(
        "--user",
        default=None,
        help="Name of the user whose feed is shown (default: everyone)",
    )
    parser.add_argument(
        "--filter",
        default="user",
        help="Whose activity to include: user, friends, foes or all (default: user)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of rows read from each source",
    )
    parser.add_argument(
        "--grouped",
        action="store_true",
        help="Print summary lines instead of individual items.",
    )
    return parser.parse_args()


def main() -> None:
    """Print the requested feed using the provided command line arguments."""

    args = parse_args()
    settings = get_settings()
    activity_filter = ActivityFilter.from_name(args.filter, args.limit or settings.activity_item_max)

    initialize_database()

    session = SessionLocal()
    try:
        activity = build_user_activity(
            session,
            activity_filter=activity_filter,
            subject_name=args.user,
            settings=settings,
        )
        if args.grouped:
            for line in activity.get_activity_list_grouped():
                print(f"{from_unix_timestamp(line.timestamp):%Y-%m-%d %H:%M}  {line.text}")
        else:
            for item in activity.get_activity_list():
                target = item.target or "-"
                print(
                    f"{from_unix_timestamp(item.timestamp):%Y-%m-%d %H:%M}  "
                    f"{item.type.value:<14} {item.actor_name} -> {target}  {item.summary_text}"
                )
    except ValueError as exc:
        raise SystemExit(f"Could not build the activity feed: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Error while reading the activity tables: {exc}") from exc
    finally:
        session.close()


if __name__ == "__main__":
    main()

import argparse
import json
import logging
import sys
from datetime import datetime

import pytz

from kai_reminders.config import settings
from kai_reminders.schemas import DeliveryMethod, NotificationFrequency
from kai_reminders.sentry import flush as sentry_flush
from kai_reminders.sentry import init_sentry


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def resolve_now(now: str | None, timezone: str | None, option: str = "--now") -> datetime:
    """Reference time for parsing: ``--now`` if given, else the clock in the user's zone.

    ``option`` names the flag the value came from, for error messages.
    """
    tz_name = timezone or settings.user_timezone
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        print(f"Error: unknown timezone '{tz_name}'")
        sys.exit(2)

    if now is None:
        return datetime.now(tz)

    try:
        value = datetime.fromisoformat(now)
    except ValueError:
        print(f"Error: {option} must be an ISO-8601 timestamp, got '{now}'")
        sys.exit(2)
    return tz.localize(value) if value.tzinfo is None else value


def parse_command(args: argparse.Namespace) -> None:
    from kai_reminders.services.parser import parse

    result = parse(args.text, resolve_now(args.now, args.timezone))
    if result is None:
        print("Not a reminder request")
        return
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


def remind_command(args: argparse.Namespace) -> None:
    from kai_reminders.services.reminder_tool import ReminderTool

    tool = ReminderTool()
    output = tool.create_from_message(
        user_id=args.user,
        message=args.text,
        now=resolve_now(args.now, args.timezone),
    )
    print(output.confirmation_message)
    if output.reminder_id:
        print(f"\nReminder ID: {output.reminder_id}")
    if not output.success:
        sys.exit(1)


def list_command(args: argparse.Namespace) -> None:
    from kai_reminders.services.store import ReminderStore

    reminders = ReminderStore().list_for_user(args.user)
    if not reminders:
        print("No reminders found")
        return

    print(f"{len(reminders)} reminder(s):\n")
    for reminder in reminders:
        print(f"  [{reminder.status.value}] {reminder.title}")
        print(f"    id: {reminder.id}")
        print(f"    when: {reminder.scheduled_for.isoformat()} ({reminder.frequency.value})")
        print(f"    category: {reminder.category.value}")
        print()


def cancel_command(args: argparse.Namespace) -> None:
    from kai_reminders.services.reminder_tool import ReminderTool

    if ReminderTool().cancel_reminder(args.user, args.reminder_id):
        print(f"Cancelled reminder {args.reminder_id}")
    else:
        print(f"Reminder {args.reminder_id} not found")
        sys.exit(1)


def update_command(args: argparse.Namespace) -> None:
    from kai_reminders.services.reminder_tool import ReminderTool

    updates = {}
    if args.title:
        updates["title"] = args.title
    if args.at:
        updates["scheduled_for"] = resolve_now(args.at, args.timezone, option="--at")
    if args.frequency:
        updates["frequency"] = args.frequency

    if not updates:
        print("Nothing to update: pass --title, --at or --frequency")
        sys.exit(2)

    try:
        updated = ReminderTool().update_reminder(args.user, args.reminder_id, **updates)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(2)

    if updated:
        print(f"Updated reminder {args.reminder_id}")
    else:
        print(f"Reminder {args.reminder_id} not found")
        sys.exit(1)


def schema_command(args: argparse.Namespace) -> None:
    from kai_reminders.services.reminder_tool import REMINDER_TOOL_DEFINITION

    print(json.dumps(REMINDER_TOOL_DEFINITION, indent=2))


def check_config(args: argparse.Namespace) -> None:
    print("Kai Reminders Configuration Check\n")

    timezone_ok = settings.user_timezone in pytz.all_timezones_set
    checks = [
        ("User timezone", timezone_ok, settings.user_timezone),
        ("Confidence threshold", 0.0 <= settings.confidence_threshold <= 1.0,
         str(settings.confidence_threshold)),
        ("Delivery method", settings.delivery_method in {m.value for m in DeliveryMethod},
         settings.delivery_method),
        ("Sentry DSN", settings.has_sentry, "configured" if settings.has_sentry else "not set"),
    ]

    for name, ok, value in checks:
        symbol = "+" if ok else "-"
        print(f"  [{symbol}] {name}: {value}")

    print(f"\n  Reminder store: {settings.store_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Natural language reminders for Coach Kai")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    def add_time_options(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--now", help="Reference time (ISO-8601), defaults to the current time")
        sub.add_argument("--timezone", help="IANA timezone, defaults to KAI_USER_TIMEZONE")

    parse_parser = subparsers.add_parser("parse", help="Parse a message and print the result")
    parse_parser.add_argument("text")
    add_time_options(parse_parser)
    parse_parser.set_defaults(handler=parse_command)

    remind_parser = subparsers.add_parser("remind", help="Create a reminder from a message")
    remind_parser.add_argument("text")
    remind_parser.add_argument("--user", required=True)
    add_time_options(remind_parser)
    remind_parser.set_defaults(handler=remind_command)

    list_parser = subparsers.add_parser("list", help="List a user's reminders")
    list_parser.add_argument("--user", required=True)
    list_parser.set_defaults(handler=list_command)

    cancel_parser = subparsers.add_parser("cancel", help="Cancel a reminder")
    cancel_parser.add_argument("reminder_id")
    cancel_parser.add_argument("--user", required=True)
    cancel_parser.set_defaults(handler=cancel_command)

    update_parser = subparsers.add_parser("update", help="Update a reminder")
    update_parser.add_argument("reminder_id")
    update_parser.add_argument("--user", required=True)
    update_parser.add_argument("--title")
    update_parser.add_argument("--at", help="New time (ISO-8601)")
    update_parser.add_argument("--frequency", choices=[f.value for f in NotificationFrequency])
    update_parser.add_argument("--timezone", help="IANA timezone for --at")
    update_parser.set_defaults(handler=update_command)

    schema_parser = subparsers.add_parser("schema", help="Print the LLM tool definition")
    schema_parser.set_defaults(handler=schema_command)

    check_parser = subparsers.add_parser("check", help="Check configuration")
    check_parser.set_defaults(handler=check_config)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging()

    # Disabled unless a DSN is configured
    init_sentry(
        dsn=settings.sentry_dsn if settings.has_sentry else None,
        environment=settings.sentry_environment,
    )

    try:
        handler = getattr(args, "handler", None)
        if handler is None:
            parser.print_help()
        else:
            handler(args)
    finally:
        sentry_flush(timeout=2.0)


if __name__ == "__main__":
    main()

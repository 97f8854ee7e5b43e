"""Management command to generate the day's pickup logs."""

from datetime import date, timedelta

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from django_pickups.services import generate_log_entries


class Command(BaseCommand):
    help = "Generate pickup logs from the current schedule chains"

    def add_arguments(self, parser):
        parser.add_argument(
            "--date",
            type=str,
            help="First date to generate, YYYY-MM-DD (default: today)",
        )
        parser.add_argument(
            "--days",
            type=int,
            default=1,
            help="Number of consecutive days to generate",
        )

    def handle(self, *args, **options):
        if options.get("date"):
            try:
                start = date.fromisoformat(options["date"])
            except ValueError:
                raise CommandError(f"Invalid date: {options['date']}")
        else:
            start = timezone.localdate()

        days = options["days"]
        if days < 1:
            raise CommandError("--days must be at least 1")

        total_created = 0
        total_skipped = 0
        for offset in range(days):
            when = start + timedelta(days=offset)
            created, skipped = generate_log_entries(when)
            total_created += created
            total_skipped += skipped
            self.stdout.write(f"{when}: {created} created, {skipped} skipped")

        self.stdout.write(
            self.style.SUCCESS(
                f"Generated {total_created} logs ({total_skipped} already existed)"
            )
        )

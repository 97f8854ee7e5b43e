"""Management command to send the weekly region summaries."""

from django.core.management.base import BaseCommand

from django_pickups import conf
from django_pickups.services import send_weekly_summary


class Command(BaseCommand):
    help = "Email each region's admins a summary of the past week's pickups"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Log the messages instead of sending them",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"] or conf.is_dry_run()
        sent = send_weekly_summary(dry_run=dry_run)

        suffix = " (dry run)" if dry_run else ""
        self.stdout.write(self.style.SUCCESS(f"Sent {sent} region summaries{suffix}"))

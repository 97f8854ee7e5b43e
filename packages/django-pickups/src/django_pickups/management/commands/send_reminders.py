"""Management command to send data-entry and pickup reminders."""

from django.core.management.base import BaseCommand

from django_pickups import conf
from django_pickups.services import send_reminders


class Command(BaseCommand):
    help = "Email volunteers about overdue and upcoming pickups, and admins about gaps"

    def add_arguments(self, parser):
        parser.add_argument(
            "--days",
            type=int,
            default=None,
            help="Remind about logs at least this many days old (default: PICKUPS_REMINDER_DAYS)",
        )
        parser.add_argument(
            "--escalate-after",
            type=int,
            default=None,
            help="Tell admins about logs with this many reminders (default: PICKUPS_ESCALATION_REMINDERS)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Log the messages instead of sending them",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"] or conf.is_dry_run()
        sent = send_reminders(
            n=options["days"],
            r=options["escalate_after"],
            dry_run=dry_run,
        )

        suffix = " (dry run)" if dry_run else ""
        self.stdout.write(self.style.SUCCESS(f"Sent {sent} volunteer reminders{suffix}"))

"""Message kinds sent by the pickup batch jobs.

Each Notifier method renders one kind of message from the templates in
``templates/django_pickups/email/`` and returns a PreparedMessage; nothing is
sent until the caller delivers or dispatches it.
"""

from django.template.loader import render_to_string

from .. import conf
from ..exceptions import MissingRecipientError
from .message import PreparedMessage

TEMPLATE_DIR = "django_pickups/email"


class Notifier:
    """Builds the volunteer and admin messages."""

    def __init__(self, from_address: str = None):
        self.from_address = from_address or conf.get_from_email()

    # === Volunteer messages ===

    def volunteer_log_reminder(self, volunteer, logs) -> PreparedMessage:
        """Ask a volunteer to enter data for past pickups."""
        return self._render(
            "volunteer_log_reminder",
            [volunteer.email],
            {"volunteer": volunteer, "logs": logs},
        )

    def volunteer_log_sms_reminder(self, volunteer, logs) -> PreparedMessage:
        return self._render(
            "volunteer_log_sms_reminder",
            self._sms_recipients("volunteer_log_sms_reminder", volunteer),
            {"volunteer": volunteer, "logs": logs},
        )

    def volunteer_log_pre_reminder(self, volunteer, logs) -> PreparedMessage:
        """Remind a volunteer of tomorrow's pickups."""
        return self._render(
            "volunteer_log_pre_reminder",
            [volunteer.email],
            {"volunteer": volunteer, "logs": logs},
        )

    def volunteer_log_sms_pre_reminder(self, volunteer, logs) -> PreparedMessage:
        return self._render(
            "volunteer_log_sms_pre_reminder",
            self._sms_recipients("volunteer_log_sms_pre_reminder", volunteer),
            {"volunteer": volunteer, "logs": logs},
        )

    # === Admin messages ===

    def admin_short_term_cover_summary(self, region, logs) -> PreparedMessage:
        """Tell region admins about pickups in the next two days with nobody on them."""
        return self._render(
            "admin_short_term_cover_summary",
            self._admin_recipients("admin_short_term_cover_summary", region),
            {"region": region, "logs": logs},
        )

    def admin_reminder_summary(self, region, logs) -> PreparedMessage:
        """Tell region admins about logs still empty after repeated reminders."""
        return self._render(
            "admin_reminder_summary",
            self._admin_recipients("admin_reminder_summary", region),
            {"region": region, "logs": logs},
        )

    def admin_weekly_summary(
        self, region, lbs, flagged_logs, biggest, num_logs, num_entered, zero_logs
    ) -> PreparedMessage:
        return self._render(
            "admin_weekly_summary",
            self._admin_recipients("admin_weekly_summary", region),
            {
                "region": region,
                "lbs": lbs,
                "flagged_logs": flagged_logs,
                "biggest": biggest,
                "num_logs": num_logs,
                "num_entered": num_entered,
                "zero_logs": zero_logs,
            },
        )

    # === Helpers ===

    def _render(self, kind: str, to: list[str], context: dict) -> PreparedMessage:
        subject = render_to_string(f"{TEMPLATE_DIR}/{kind}_subject.txt", context)
        body = render_to_string(f"{TEMPLATE_DIR}/{kind}.txt", context)
        return PreparedMessage(
            kind=kind,
            to=to,
            subject=" ".join(subject.split()),
            body=body.strip() + "\n",
            from_address=self.from_address,
        )

    def _sms_recipients(self, kind: str, volunteer) -> list[str]:
        if not volunteer.sms_email:
            raise MissingRecipientError(kind, f"volunteer {volunteer.pk} has no SMS address")
        return [volunteer.sms_email]

    def _admin_recipients(self, kind: str, region) -> list[str]:
        if region.admin_email:
            return [region.admin_email]
        recipients = conf.get_admin_emails()
        if not recipients:
            raise MissingRecipientError(
                kind, f"region '{region}' has no admin_email and PICKUPS_ADMIN_EMAILS is empty"
            )
        return recipients

"""Volunteer and absence models."""

from datetime import timedelta

from django.db import models

from .base import PickupsBaseModel


class Volunteer(PickupsBaseModel):
    """A person who runs pickups and enters their data afterwards."""

    name = models.CharField(max_length=200)
    email = models.EmailField()
    pre_reminders_too = models.BooleanField(
        default=False,
        help_text="Also remind the day before a pickup",
    )
    sms_too = models.BooleanField(
        default=False,
        help_text="Also send reminders as text messages",
    )
    sms_email = models.EmailField(
        null=True,
        blank=True,
        help_text="Email-to-SMS gateway address (e.g. 5551234567@txt.example.com)",
    )
    schedule_chains = models.ManyToManyField(
        "django_pickups.ScheduleChain",
        blank=True,
        related_name="volunteers",
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    @property
    def wants_sms(self) -> bool:
        """Opted into SMS and has a gateway address on file."""
        return bool(self.sms_too and self.sms_email)


class Absence(PickupsBaseModel):
    """A stretch of days a volunteer cannot cover their shifts."""

    volunteer = models.ForeignKey(
        Volunteer,
        on_delete=models.CASCADE,
        related_name="absences",
    )
    start_date = models.DateField()
    stop_date = models.DateField()
    comment = models.TextField(blank=True)

    class Meta:
        ordering = ["start_date"]

    def __str__(self):
        return f"Absence({self.volunteer}, {self.start_date} - {self.stop_date})"

    @property
    def dates(self):
        """Every date of the absence, inclusive."""
        current = self.start_date
        while current <= self.stop_date:
            yield current
            current += timedelta(days=1)

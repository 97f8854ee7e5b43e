"""Log models: one pickup on one date, plus its weighed line items."""

from decimal import Decimal

from django.db import models

from .base import PickupsBaseModel


class Log(PickupsBaseModel):
    """
    The record of one pickup stop on one calendar date.

    Logs are generated from schedule chains, filled in by volunteers
    afterwards (parts + complete) and nagged about until then.

    Key invariants:
    - At most one log per (schedule_chain, donor) for a date
    - volunteers only shrink through absences
    - absences are append-only
    - num_reminders never decreases
    """

    schedule_chain = models.ForeignKey(
        "django_pickups.ScheduleChain",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="logs",
    )
    donor = models.ForeignKey(
        "django_pickups.Location",
        on_delete=models.PROTECT,
        related_name="donor_logs",
    )
    region = models.ForeignKey(
        "django_pickups.Region",
        on_delete=models.CASCADE,
        related_name="logs",
    )
    when = models.DateField(db_index=True)
    complete = models.BooleanField(default=False)
    num_reminders = models.PositiveIntegerField(default=0)
    flag_for_admin = models.BooleanField(default=False)
    notes = models.TextField(blank=True)

    volunteers = models.ManyToManyField(
        "django_pickups.Volunteer",
        blank=True,
        related_name="logs",
    )
    absences = models.ManyToManyField(
        "django_pickups.Absence",
        blank=True,
        related_name="logs",
    )
    recipients = models.ManyToManyField(
        "django_pickups.Location",
        blank=True,
        related_name="recipient_logs",
    )

    class Meta:
        ordering = ["when", "id"]
        indexes = [
            models.Index(fields=["region", "when"], name="pickups_log_region_when_idx"),
            models.Index(fields=["complete", "when"], name="pickups_log_complete_when_idx"),
        ]

    def __str__(self):
        return f"Log({self.donor} on {self.when})"

    @classmethod
    def from_schedule_stop(cls, stop, when, absence=None) -> "Log":
        """
        Create and persist the log for a pickup stop on a date.

        Args:
            stop: The pickup ScheduleStop (its location becomes the donor)
            when: The pickup date
            absence: Optional Absence; its volunteer is left off the log

        Returns:
            The saved Log
        """
        chain = stop.schedule_chain
        log = cls.objects.create(
            schedule_chain=chain,
            donor=stop.location,
            region=chain.region,
            when=when,
        )

        volunteers = chain.volunteers.all()
        if absence is not None:
            volunteers = volunteers.exclude(pk=absence.volunteer_id)
        log.volunteers.set(volunteers)
        log.recipients.set(chain.recipients_after(stop))

        if absence is not None:
            log.record_absence(absence)
        return log

    def remove_volunteer(self, volunteer) -> None:
        """Take a volunteer off this log (no-op if not assigned)."""
        self.volunteers.remove(volunteer)

    def record_absence(self, absence) -> None:
        self.absences.add(absence)

    def record_reminder(self) -> int:
        """Count one more reminder and persist it."""
        self.num_reminders = (self.num_reminders or 0) + 1
        self.save(update_fields=["num_reminders", "updated_at"])
        return self.num_reminders


class LogPart(PickupsBaseModel):
    """A weighed/counted line item of a log."""

    log = models.ForeignKey(
        Log,
        on_delete=models.CASCADE,
        related_name="parts",
    )
    food_type = models.CharField(max_length=100, blank=True)
    weight = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0"),
        help_text="Pounds",
    )
    count = models.PositiveIntegerField(default=0)

    def __str__(self):
        return f"{self.food_type or 'Food'}: {self.weight} lbs"

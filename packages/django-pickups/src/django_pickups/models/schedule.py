"""Schedule chain models.

A ScheduleChain is an ordered route of stops, e.g. D1 -> D2 -> R1 -> D3 -> R2,
where each D is a pickup at a donor and each R a drop-off at a recipient.
Hubs behave like donors mid-chain and like recipients at the end of a chain.
"""

from django.db import models

from .base import PickupsBaseModel
from .region import Region


class Frequency(models.TextChoices):
    """How often a chain runs."""

    WEEKLY = "weekly", "Weekly"
    ONE_TIME = "one_time", "One Time"
    DAILY = "daily", "Daily"


class ScheduleChain(PickupsBaseModel):
    """A recurring (or one-off) pickup route."""

    region = models.ForeignKey(
        Region,
        on_delete=models.CASCADE,
        related_name="schedule_chains",
    )
    irregular = models.BooleanField(
        default=False,
        help_text="Irregular chains are never generated automatically",
    )
    frequency = models.CharField(
        max_length=20,
        choices=Frequency.choices,
        default=Frequency.WEEKLY,
    )
    day_of_week = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text="0=Monday ... 6=Sunday, for weekly chains",
    )
    detailed_date = models.DateField(
        null=True,
        blank=True,
        help_text="The date of a one-time chain",
    )
    admin_notes = models.TextField(blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"ScheduleChain({self.pk}: {self.describe()})"

    @property
    def one_time(self) -> bool:
        return self.frequency == Frequency.ONE_TIME

    @property
    def weekly(self) -> bool:
        return self.frequency == Frequency.WEEKLY

    @property
    def functional(self) -> bool:
        """
        Check if the chain can be turned into logs.

        A chain needs at least two stops, must start with a pickup at a
        known location and must end at a known drop-off or hub.
        """
        stops = list(self.stops.all())
        if len(stops) < 2:
            return False

        first, last = stops[0], stops[-1]
        if not first.is_pickup_stop or first.location_id is None:
            return False
        if last.location_id is None:
            return False
        return not last.is_pickup_stop or last.location.is_hub

    def describe(self) -> str:
        """Render the chain as 'D1 -> R2 -> ...', skipping unassigned stops."""
        return " -> ".join(
            stop.label for stop in self.stops.all() if stop.location_id is not None
        )

    def recipients_after(self, stop):
        """
        Locations the food picked up at ``stop`` can be dropped at.

        That is every later drop-off stop, plus a hub closing the chain.
        """
        stops = list(self.stops.all())
        last = stops[-1] if stops else None
        recipients = []
        for later in stops:
            if later.position <= stop.position or later.location_id is None:
                continue
            if not later.is_pickup_stop:
                recipients.append(later.location)
            elif later is last and later.location.is_hub:
                recipients.append(later.location)
        return recipients


class ScheduleStop(PickupsBaseModel):
    """One hop of a schedule chain."""

    schedule_chain = models.ForeignKey(
        ScheduleChain,
        on_delete=models.CASCADE,
        related_name="stops",
    )
    location = models.ForeignKey(
        "django_pickups.Location",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="schedule_stops",
    )
    is_pickup_stop = models.BooleanField(
        default=True,
        help_text="True for a donor-side pickup, False for a drop-off",
    )
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position", "id"]

    def __str__(self):
        return f"{self.label or '-'} (#{self.position})"

    @property
    def label(self) -> str:
        if self.location_id is None:
            return ""
        return f"{'D' if self.is_pickup_stop else 'R'}{self.location_id}"

"""Region and location models."""

from django.db import models

from .base import PickupsBaseModel


class LocationType(models.TextChoices):
    """Role a location plays in schedule chains."""

    DONOR = "donor", "Donor"
    RECIPIENT = "recipient", "Recipient"
    HUB = "hub", "Hub"


class Region(PickupsBaseModel):
    """A service area grouping locations and logs for reporting."""

    name = models.CharField(max_length=100, unique=True)
    admin_email = models.EmailField(
        blank=True,
        help_text="Where admin summaries go (falls back to PICKUPS_ADMIN_EMAILS)",
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Location(PickupsBaseModel):
    """A donor, recipient or hub address."""

    name = models.CharField(max_length=200)
    address = models.CharField(max_length=255, blank=True)
    location_type = models.CharField(
        max_length=20,
        choices=LocationType.choices,
        default=LocationType.DONOR,
        help_text="Hubs act as donors mid-chain and recipients at the end of one",
    )
    region = models.ForeignKey(
        Region,
        on_delete=models.CASCADE,
        related_name="locations",
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    @property
    def is_hub(self) -> bool:
        return self.location_type == LocationType.HUB

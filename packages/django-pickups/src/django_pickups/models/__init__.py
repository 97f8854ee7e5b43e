"""django-pickups models.

Re-exports all models for convenient importing:
    from django_pickups.models import Log, ScheduleChain, Volunteer
"""

from .log import Log, LogPart
from .region import Location, LocationType, Region
from .schedule import Frequency, ScheduleChain, ScheduleStop
from .volunteer import Absence, Volunteer

__all__ = [
    "Absence",
    "Frequency",
    "Location",
    "LocationType",
    "Log",
    "LogPart",
    "Region",
    "ScheduleChain",
    "ScheduleStop",
    "Volunteer",
]

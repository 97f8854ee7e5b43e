"""Log generation from schedule chains.

Provides:
- generate_log_entries: Materialize the logs for one date
- generate_absence_logs: Re-route coverage for every date of an absence
"""

import logging
from datetime import date
from typing import NamedTuple, Optional

from django.utils import timezone

from ..models import Absence, Log, ScheduleChain

logger = logging.getLogger(__name__)


class LogKey(NamedTuple):
    """Identity of a log within one date."""

    chain_id: int
    location_id: int


def _existing_logs(when: date) -> dict[LogKey, int]:
    """Map the logs already recorded for ``when`` to their ids."""
    rows = Log.objects.filter(when=when).values_list("id", "schedule_chain_id", "donor_id")
    return {LogKey(chain_id, donor_id): log_id for log_id, chain_id, donor_id in rows}


def _candidate_chains(absence: Optional[Absence]):
    if absence is None:
        chains = ScheduleChain.objects.filter(irregular=False)
    else:
        chains = absence.volunteer.schedule_chains.all()
    return chains.select_related("region").prefetch_related("stops__location")


def _runs_on(chain: ScheduleChain, when: date) -> bool:
    if chain.one_time and chain.detailed_date != when:
        return False
    if chain.weekly and chain.day_of_week != when.weekday():
        return False
    return True


def generate_log_entries(
    when: Optional[date] = None,
    absence: Optional[Absence] = None,
) -> tuple[int, int]:
    """
    Generate the log entries for a date from the current schedule.

    Every pickup stop of every chain running that day gets one log. A
    chain like D1 -> D2 -> R1 -> D3 -> R2 yields three logs (D1, D2, D3);
    a hub acts as a donor mid-chain but is not logged as the last stop.

    With an absence, only the absent volunteer's chains are walked: missing
    logs are created without that volunteer, and existing logs lose the
    volunteer and gain the absence so they show up as needing cover.

    Args:
        when: The date to generate (defaults to today in TIME_ZONE)
        absence: Optional Absence to re-route coverage for

    Returns:
        (created, skipped) counts; absence updates count as created
    """
    if when is None:
        when = timezone.localdate()

    created = 0
    skipped = 0
    done = _existing_logs(when)

    for chain in _candidate_chains(absence):
        if not chain.functional:
            logger.debug(f"Skipping non-functional chain {chain.pk}")
            continue
        if not _runs_on(chain, when):
            continue

        logger.info(f"Schedule Chain: {chain.describe()}")

        stops = list(chain.stops.all())
        last_index = len(stops) - 1

        for index, stop in enumerate(stops):
            if not stop.is_pickup_stop or stop.location_id is None:
                continue
            if index == last_index and stop.location.is_hub:
                continue

            key = LogKey(chain.pk, stop.location_id)
            existing_id = done.get(key)

            if existing_id is None:
                log = Log.from_schedule_stop(stop, when, absence)
                done[key] = log.pk
                created += 1
            elif absence is None:
                skipped += 1
            else:
                log = Log.objects.get(pk=existing_id)
                log.remove_volunteer(absence.volunteer)
                log.record_absence(absence)
                log.save()
                created += 1

    logger.info(f"Generated logs for {when}: {created} created, {skipped} skipped")
    return created, skipped


def generate_absence_logs(
    absence: Absence,
    today: Optional[date] = None,
) -> tuple[int, int]:
    """
    Re-route coverage for every remaining date of an absence.

    Dates before ``today`` are left alone.

    Returns:
        (created, skipped) summed over the dates
    """
    if today is None:
        today = timezone.localdate()

    created = 0
    skipped = 0
    for when in absence.dates:
        if when < today:
            continue
        day_created, day_skipped = generate_log_entries(when, absence)
        created += day_created
        skipped += day_skipped
    return created, skipped

"""Reminder emails for volunteers and region admins."""

import logging
from datetime import date
from typing import Optional

from django.utils import timezone

from .. import conf
from ..models import Log
from ..notifications import Notifier, dispatch

logger = logging.getLogger(__name__)


def _queue(groups: dict, key, log: Log) -> None:
    groups.setdefault(key, []).append(log)


def send_reminders(
    n: Optional[int] = None,
    r: Optional[int] = None,
    today: Optional[date] = None,
    dry_run: Optional[bool] = None,
    notifier: Optional[Notifier] = None,
) -> int:
    """
    Send reminders for every incomplete log.

    - Volunteers with a log from ``n`` or more days ago are asked to enter
      its data; each such log's reminder count goes up by one.
    - Volunteers who opted in are reminded of tomorrow's pickups.
    - Region admins hear about logs in the next two days with no
      volunteer, and about logs reminded ``r`` or more times.

    Not idempotent: every run counts and sends reminders again.

    Args:
        n: Days past a pickup before reminding (PICKUPS_REMINDER_DAYS)
        r: Reminder count that escalates to admins (PICKUPS_ESCALATION_REMINDERS)
        today: Reference date (defaults to today in TIME_ZONE)
        dry_run: Log messages instead of delivering them (PICKUPS_DRY_RUN)
        notifier: Notifier to build messages with

    Returns:
        Number of volunteer reminders and pre-reminders sent (SMS copies
        and admin summaries are not counted)
    """
    if n is None:
        n = conf.get_setting("REMINDER_DAYS")
    if r is None:
        r = conf.get_setting("ESCALATION_REMINDERS")
    if today is None:
        today = timezone.localdate()
    if dry_run is None:
        dry_run = conf.is_dry_run()
    notifier = notifier or Notifier()

    reminder_list = {}
    pre_reminder_list = {}
    short_term_cover_list = {}
    escalation_list = {}

    logs = (
        Log.objects.filter(complete=False)
        .select_related("region", "donor")
        .prefetch_related("volunteers")
    )

    for log in logs:
        volunteers = list(log.volunteers.all())

        # Upcoming pickups
        days_future = (log.when - today).days
        if days_future == 1 and volunteers:
            for volunteer in volunteers:
                if volunteer.pre_reminders_too:
                    _queue(pre_reminder_list, volunteer, log)
            continue
        elif days_future in (1, 2) and not volunteers:
            _queue(short_term_cover_list, log.region, log)

        # Past pickups
        if not volunteers:
            continue
        days_past = (today - log.when).days
        if days_past < n:
            continue

        log.record_reminder()

        for volunteer in volunteers:
            _queue(reminder_list, volunteer, log)
        if log.num_reminders >= r:
            _queue(escalation_list, log.region, log)

    sent = 0

    for volunteer, volunteer_logs in reminder_list.items():
        dispatch(notifier.volunteer_log_reminder(volunteer, volunteer_logs), dry_run)
        sent += 1
        if volunteer.wants_sms:
            dispatch(notifier.volunteer_log_sms_reminder(volunteer, volunteer_logs), dry_run)

    for volunteer, volunteer_logs in pre_reminder_list.items():
        dispatch(notifier.volunteer_log_pre_reminder(volunteer, volunteer_logs), dry_run)
        sent += 1
        if volunteer.wants_sms:
            dispatch(notifier.volunteer_log_sms_pre_reminder(volunteer, volunteer_logs), dry_run)

    for region, region_logs in short_term_cover_list.items():
        dispatch(notifier.admin_short_term_cover_summary(region, region_logs), dry_run)

    for region, region_logs in escalation_list.items():
        dispatch(notifier.admin_reminder_summary(region, region_logs), dry_run)

    logger.info(
        f"Reminders: {len(reminder_list)} past-due, {len(pre_reminder_list)} upcoming, "
        f"{len(short_term_cover_list)} uncovered regions, {len(escalation_list)} escalated regions"
    )
    return sent

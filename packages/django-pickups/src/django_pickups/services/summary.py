"""Weekly per-region pickup summaries for admins."""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from django.db.models import Count, DecimalField, IntegerField, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from .. import conf
from ..models import Log, Region
from ..notifications import Notifier, dispatch

logger = logging.getLogger(__name__)


def weekly_logs(region: Region, today: date):
    """Completed logs of a region strictly inside the trailing window.

    Each log is annotated with weight_sum, count_sum and num_parts.
    """
    window_start = today - timedelta(days=conf.get_setting("SUMMARY_WINDOW_DAYS"))
    return (
        Log.objects.filter(
            region=region,
            complete=True,
            when__gt=window_start,
            when__lt=today,
        )
        .select_related("donor")
        .annotate(
            weight_sum=Coalesce(
                Sum("parts__weight"),
                Value(0),
                output_field=DecimalField(max_digits=12, decimal_places=2),
            ),
            count_sum=Coalesce(Sum("parts__count"), Value(0), output_field=IntegerField()),
            num_parts=Count("parts"),
        )
        .order_by("when", "id")
    )


def summarize_region(region: Region, today: date) -> Optional[dict]:
    """
    Aggregate a region's week.

    Returns:
        Context for admin_weekly_summary, or None when the region has no
        completed logs in the window
    """
    logs = list(weekly_logs(region, today))
    if not logs:
        return None

    lbs = Decimal("0")
    flagged_logs = []
    zero_logs = []
    biggest = None
    num_entered = 0

    for log in logs:
        lbs += log.weight_sum
        if log.weight_sum == 0 and log.count_sum == 0:
            zero_logs.append(log)
        if log.flag_for_admin:
            flagged_logs.append(log)
        # Ties keep the first log seen
        if biggest is None or log.weight_sum > biggest.weight_sum:
            biggest = log
        if log.num_parts:
            num_entered += 1

    return {
        "lbs": lbs,
        "flagged_logs": flagged_logs,
        "biggest": biggest,
        "num_logs": len(logs),
        "num_entered": num_entered,
        "zero_logs": zero_logs,
    }


def send_weekly_summary(
    today: Optional[date] = None,
    dry_run: Optional[bool] = None,
    notifier: Optional[Notifier] = None,
) -> int:
    """
    Send each region's admins a summary of the past week's pickups.

    Regions without completed logs in the window are skipped.

    Returns:
        Number of region summaries sent
    """
    if today is None:
        today = timezone.localdate()
    if dry_run is None:
        dry_run = conf.is_dry_run()
    notifier = notifier or Notifier()

    sent = 0
    for region in Region.objects.all():
        summary = summarize_region(region, today)
        if summary is None:
            logger.debug(f"No completed logs for {region} this week")
            continue

        logger.info(f"{region}: {summary['num_logs']} logs, {summary['lbs']} lbs")
        dispatch(notifier.admin_weekly_summary(region, **summary), dry_run)
        sent += 1

    return sent

"""Tests for the cron management commands."""

from datetime import date, timedelta
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import CommandError, call_command
from freezegun import freeze_time

from django_pickups.models import Log, LogPart


@pytest.fixture
def chain(make_chain, make_location, volunteer):
    return make_chain(
        [("D", make_location("Bakery")), ("R", make_location("Pantry"))],
        volunteers=[volunteer],
    )


@pytest.mark.django_db
class TestGenerateLogsCommand:
    """Tests for generate_logs."""

    def test_generates_for_given_days(self, chain):
        out = StringIO()

        call_command("generate_logs", "--date", "2024-03-13", "--days", "3", stdout=out)

        assert sorted(Log.objects.values_list("when", flat=True)) == [
            date(2024, 3, 13),
            date(2024, 3, 14),
            date(2024, 3, 15),
        ]
        assert "Generated 3 logs (0 already existed)" in out.getvalue()

    @freeze_time("2024-03-13 18:00:00")
    def test_defaults_to_today(self, chain):
        out = StringIO()

        call_command("generate_logs", stdout=out)
        call_command("generate_logs", stdout=out)

        assert list(Log.objects.values_list("when", flat=True)) == [date(2024, 3, 13)]
        assert "Generated 0 logs (1 already existed)" in out.getvalue()

    def test_invalid_date(self, chain):
        with pytest.raises(CommandError, match="Invalid date"):
            call_command("generate_logs", "--date", "13/03/2024", stdout=StringIO())

    def test_invalid_days(self, chain):
        with pytest.raises(CommandError):
            call_command("generate_logs", "--days", "0", stdout=StringIO())


@pytest.mark.django_db
class TestSendRemindersCommand:
    """Tests for send_reminders."""

    @freeze_time("2024-03-13 18:00:00")
    def test_sends_reminders(self, make_log, volunteer, today, mailoutbox):
        make_log(today - timedelta(days=2), volunteers=[volunteer])
        out = StringIO()

        call_command("send_reminders", stdout=out)

        assert len(mailoutbox) == 1
        assert "Sent 1 volunteer reminders" in out.getvalue()

    @freeze_time("2024-03-13 18:00:00")
    def test_dry_run_and_thresholds(self, make_log, volunteer, today, mailoutbox):
        make_log(today - timedelta(days=1), volunteers=[volunteer])
        out = StringIO()

        call_command("send_reminders", "--days", "1", "--escalate-after", "5", "--dry-run", stdout=out)

        assert mailoutbox == []
        assert "Sent 1 volunteer reminders (dry run)" in out.getvalue()


@pytest.mark.django_db
class TestSendWeeklySummaryCommand:
    """Tests for send_weekly_summary."""

    @freeze_time("2024-03-13 18:00:00")
    def test_sends_summary(self, make_log, today, mailoutbox):
        log = make_log(today - timedelta(days=2), complete=True)
        LogPart.objects.create(log=log, weight=Decimal("12"), count=1)
        out = StringIO()

        call_command("send_weekly_summary", stdout=out)

        assert len(mailoutbox) == 1
        assert "Sent 1 region summaries" in out.getvalue()

    @freeze_time("2024-03-13 18:00:00")
    def test_dry_run(self, make_log, today, mailoutbox):
        make_log(today - timedelta(days=2), complete=True)
        out = StringIO()

        call_command("send_weekly_summary", "--dry-run", stdout=out)

        assert mailoutbox == []
        assert "(dry run)" in out.getvalue()

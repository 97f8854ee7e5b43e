"""Tests for log generation."""

from datetime import date, timedelta

import pytest
from freezegun import freeze_time

from django_pickups.models import Absence, Frequency, Log, LocationType
from django_pickups.services import LogKey, generate_absence_logs, generate_log_entries


@pytest.fixture
def d_and_r(make_location):
    """Three donors and two recipients."""
    donors = [make_location(f"Donor {i}") for i in (1, 2, 3)]
    recipients = [make_location(f"Pantry {i}", LocationType.RECIPIENT) for i in (1, 2)]
    return donors, recipients


@pytest.fixture
def mixed_chain(make_chain, d_and_r, volunteer):
    """D1 -> D2 -> R1 -> D3 -> R2."""
    (d1, d2, d3), (r1, r2) = d_and_r
    return make_chain(
        [("D", d1), ("D", d2), ("R", r1), ("D", d3), ("R", r2)],
        volunteers=[volunteer],
    )


class TestLogKey:
    """Tests for the dedup key type."""

    def test_keys_compare_by_value(self):
        assert LogKey(1, 2) == LogKey(1, 2)
        assert LogKey(1, 2) != LogKey(2, 1)
        assert {LogKey(1, 2): "a"}[LogKey(1, 2)] == "a"


@pytest.mark.django_db
class TestGenerateLogEntries:
    """Tests for generate_log_entries in normal mode."""

    def test_one_log_per_pickup_stop(self, mixed_chain, d_and_r, today):
        (d1, d2, d3), _ = d_and_r

        created, skipped = generate_log_entries(today)

        assert (created, skipped) == (3, 0)
        logs = Log.objects.filter(when=today)
        assert {log.donor_id for log in logs} == {d1.pk, d2.pk, d3.pk}
        assert all(log.schedule_chain_id == mixed_chain.pk for log in logs)

    def test_logs_copy_chain_volunteers_and_recipients(self, mixed_chain, d_and_r, volunteer, today):
        (d1, d2, d3), (r1, r2) = d_and_r

        generate_log_entries(today)

        d1_log = Log.objects.get(when=today, donor=d1)
        d3_log = Log.objects.get(when=today, donor=d3)
        assert list(d1_log.volunteers.all()) == [volunteer]
        assert set(d1_log.recipients.all()) == {r1, r2}
        assert list(d3_log.recipients.all()) == [r2]

    def test_rerun_is_idempotent(self, mixed_chain, today):
        generate_log_entries(today)
        before = {
            log.pk: (log.donor_id, log.updated_at) for log in Log.objects.filter(when=today)
        }

        created, skipped = generate_log_entries(today)

        assert (created, skipped) == (0, 3)
        after = {
            log.pk: (log.donor_id, log.updated_at) for log in Log.objects.filter(when=today)
        }
        assert after == before

    def test_repeated_location_in_chain_logged_once(self, make_chain, make_location, today):
        bakery = make_location("Bakery")
        make_chain(
            [
                ("D", bakery),
                ("R", make_location("Pantry 1", LocationType.RECIPIENT)),
                ("D", bakery),
                ("R", make_location("Pantry 2", LocationType.RECIPIENT)),
            ]
        )

        created, skipped = generate_log_entries(today)

        assert (created, skipped) == (1, 1)
        assert Log.objects.filter(when=today, donor=bakery).count() == 1

    def test_same_location_on_two_chains_gets_two_logs(self, make_chain, make_location, today):
        bakery = make_location("Bakery")
        pantry = make_location("Pantry", LocationType.RECIPIENT)
        make_chain([("D", bakery), ("R", pantry)])
        make_chain([("D", bakery), ("R", pantry)])

        created, skipped = generate_log_entries(today)

        assert (created, skipped) == (2, 0)

    def test_terminal_hub_is_not_logged(self, make_chain, make_location, today):
        bakery = make_location("Bakery")
        hub = make_location("Hub", LocationType.HUB)
        make_chain([("D", bakery), ("D", hub)])

        created, _ = generate_log_entries(today)

        assert created == 1
        assert not Log.objects.filter(donor=hub).exists()

    def test_hub_mid_chain_is_logged(self, make_chain, make_location, today):
        hub = make_location("Hub", LocationType.HUB)
        make_chain(
            [
                ("D", make_location("Bakery")),
                ("D", hub),
                ("R", make_location("Pantry", LocationType.RECIPIENT)),
            ]
        )

        created, _ = generate_log_entries(today)

        assert created == 2
        assert Log.objects.filter(donor=hub, when=today).exists()

    def test_unassigned_stop_is_skipped(self, make_chain, make_location, today):
        make_chain(
            [
                ("D", make_location("Bakery")),
                ("D", None),
                ("R", make_location("Pantry", LocationType.RECIPIENT)),
            ]
        )

        assert generate_log_entries(today) == (1, 0)

    def test_non_functional_chain_is_skipped(self, make_chain, make_location, today):
        make_chain([("D", make_location("Bakery")), ("R", None)])
        make_chain([("D", make_location("Lonely"))])

        assert generate_log_entries(today) == (0, 0)
        assert Log.objects.count() == 0

    def test_irregular_chain_is_skipped(self, make_chain, make_location, today):
        make_chain(
            [("D", make_location("Bakery")), ("R", make_location("Pantry"))],
            irregular=True,
        )

        assert generate_log_entries(today) == (0, 0)

    def test_weekly_chain_only_on_its_weekday(self, make_chain, make_location, today):
        make_chain(
            [("D", make_location("Bakery")), ("R", make_location("Pantry"))],
            frequency=Frequency.WEEKLY,
            day_of_week=today.weekday(),
        )

        assert generate_log_entries(today) == (1, 0)
        assert generate_log_entries(today + timedelta(days=1)) == (0, 0)
        assert generate_log_entries(today + timedelta(days=7)) == (1, 0)

    def test_one_time_chain_only_on_its_date(self, make_chain, make_location, today):
        make_chain(
            [("D", make_location("Bakery")), ("R", make_location("Pantry"))],
            frequency=Frequency.ONE_TIME,
            detailed_date=today,
        )

        assert generate_log_entries(today - timedelta(days=1)) == (0, 0)
        assert generate_log_entries(today) == (1, 0)
        assert generate_log_entries(today + timedelta(days=7)) == (0, 0)

    @freeze_time("2024-03-13 18:00:00")
    def test_defaults_to_today(self, mixed_chain):
        generate_log_entries()

        assert Log.objects.filter(when=date(2024, 3, 13)).count() == 3

    @freeze_time("2024-03-14 03:00:00")
    def test_today_is_local_date(self, mixed_chain):
        # 03:00 UTC is still the 13th in America/Denver
        generate_log_entries()

        assert set(Log.objects.values_list("when", flat=True)) == {date(2024, 3, 13)}


@pytest.mark.django_db
class TestGenerateWithAbsence:
    """Tests for generate_log_entries in absence mode."""

    @pytest.fixture
    def absence(self, volunteer, today):
        return Absence.objects.create(volunteer=volunteer, start_date=today, stop_date=today)

    def test_existing_log_is_rerouted(self, mixed_chain, d_and_r, volunteer, other_volunteer, absence, today):
        (d1, _, _), _ = d_and_r
        other_volunteer.schedule_chains.add(mixed_chain)
        generate_log_entries(today)
        original = Log.objects.get(when=today, donor=d1)

        created, skipped = generate_log_entries(today, absence)

        assert (created, skipped) == (3, 0)
        log = Log.objects.get(when=today, donor=d1)
        assert log.pk == original.pk
        assert list(log.volunteers.all()) == [other_volunteer]
        assert list(log.absences.all()) == [absence]
        assert Log.objects.filter(when=today).count() == 3

    def test_missing_logs_are_created_without_volunteer(self, mixed_chain, absence, today):
        created, skipped = generate_log_entries(today, absence)

        assert (created, skipped) == (3, 0)
        for log in Log.objects.filter(when=today):
            assert log.volunteers.count() == 0
            assert list(log.absences.all()) == [absence]

    def test_only_absent_volunteers_chains(
        self, mixed_chain, make_chain, make_location, other_volunteer, absence, today
    ):
        make_chain(
            [("D", make_location("Elsewhere")), ("R", make_location("Pantry"))],
            volunteers=[other_volunteer],
        )

        created, _ = generate_log_entries(today, absence)

        assert created == 3
        assert not Log.objects.filter(donor__name="Elsewhere").exists()

    def test_absence_mode_includes_irregular_chains(self, make_chain, make_location, volunteer, absence, today):
        make_chain(
            [("D", make_location("Bakery")), ("R", make_location("Pantry"))],
            irregular=True,
            volunteers=[volunteer],
        )

        assert generate_log_entries(today, absence) == (1, 0)

    def test_absences_accumulate(self, mixed_chain, volunteer, absence, today):
        generate_log_entries(today, absence)
        second = Absence.objects.create(volunteer=volunteer, start_date=today, stop_date=today)

        generate_log_entries(today, second)

        for log in Log.objects.filter(when=today):
            assert set(log.absences.all()) == {absence, second}


@pytest.mark.django_db
class TestGenerateAbsenceLogs:
    """Tests for generate_absence_logs."""

    def test_covers_each_remaining_date(self, mixed_chain, volunteer, today):
        absence = Absence.objects.create(
            volunteer=volunteer,
            start_date=today - timedelta(days=2),
            stop_date=today + timedelta(days=1),
        )

        created, skipped = generate_absence_logs(absence, today=today)

        assert (created, skipped) == (6, 0)
        assert set(Log.objects.values_list("when", flat=True)) == {
            today,
            today + timedelta(days=1),
        }

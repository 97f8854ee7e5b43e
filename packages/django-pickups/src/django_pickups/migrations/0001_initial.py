# Generated manually for standalone django-pickups package

import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Region",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100, unique=True)),
                (
                    "admin_email",
                    models.EmailField(
                        blank=True,
                        help_text="Where admin summaries go (falls back to PICKUPS_ADMIN_EMAILS)",
                        max_length=254,
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Location",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200)),
                ("address", models.CharField(blank=True, max_length=255)),
                (
                    "location_type",
                    models.CharField(
                        choices=[
                            ("donor", "Donor"),
                            ("recipient", "Recipient"),
                            ("hub", "Hub"),
                        ],
                        default="donor",
                        help_text="Hubs act as donors mid-chain and recipients at the end of one",
                        max_length=20,
                    ),
                ),
                (
                    "region",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="locations",
                        to="django_pickups.region",
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ScheduleChain",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "irregular",
                    models.BooleanField(
                        default=False,
                        help_text="Irregular chains are never generated automatically",
                    ),
                ),
                (
                    "frequency",
                    models.CharField(
                        choices=[
                            ("weekly", "Weekly"),
                            ("one_time", "One Time"),
                            ("daily", "Daily"),
                        ],
                        default="weekly",
                        max_length=20,
                    ),
                ),
                (
                    "day_of_week",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        help_text="0=Monday ... 6=Sunday, for weekly chains",
                        null=True,
                    ),
                ),
                (
                    "detailed_date",
                    models.DateField(
                        blank=True, help_text="The date of a one-time chain", null=True
                    ),
                ),
                ("admin_notes", models.TextField(blank=True)),
                (
                    "region",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="schedule_chains",
                        to="django_pickups.region",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="ScheduleStop",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "is_pickup_stop",
                    models.BooleanField(
                        default=True,
                        help_text="True for a donor-side pickup, False for a drop-off",
                    ),
                ),
                ("position", models.PositiveIntegerField(default=0)),
                (
                    "location",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="schedule_stops",
                        to="django_pickups.location",
                    ),
                ),
                (
                    "schedule_chain",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="stops",
                        to="django_pickups.schedulechain",
                    ),
                ),
            ],
            options={
                "ordering": ["position", "id"],
            },
        ),
        migrations.CreateModel(
            name="Volunteer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=254)),
                (
                    "pre_reminders_too",
                    models.BooleanField(
                        default=False, help_text="Also remind the day before a pickup"
                    ),
                ),
                (
                    "sms_too",
                    models.BooleanField(
                        default=False, help_text="Also send reminders as text messages"
                    ),
                ),
                (
                    "sms_email",
                    models.EmailField(
                        blank=True,
                        help_text="Email-to-SMS gateway address (e.g. 5551234567@txt.example.com)",
                        max_length=254,
                        null=True,
                    ),
                ),
                (
                    "schedule_chains",
                    models.ManyToManyField(
                        blank=True,
                        related_name="volunteers",
                        to="django_pickups.schedulechain",
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Absence",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("start_date", models.DateField()),
                ("stop_date", models.DateField()),
                ("comment", models.TextField(blank=True)),
                (
                    "volunteer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="absences",
                        to="django_pickups.volunteer",
                    ),
                ),
            ],
            options={
                "ordering": ["start_date"],
            },
        ),
        migrations.CreateModel(
            name="Log",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("when", models.DateField(db_index=True)),
                ("complete", models.BooleanField(default=False)),
                ("num_reminders", models.PositiveIntegerField(default=0)),
                ("flag_for_admin", models.BooleanField(default=False)),
                ("notes", models.TextField(blank=True)),
                (
                    "schedule_chain",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="logs",
                        to="django_pickups.schedulechain",
                    ),
                ),
                (
                    "donor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="donor_logs",
                        to="django_pickups.location",
                    ),
                ),
                (
                    "region",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="logs",
                        to="django_pickups.region",
                    ),
                ),
                (
                    "volunteers",
                    models.ManyToManyField(
                        blank=True,
                        related_name="logs",
                        to="django_pickups.volunteer",
                    ),
                ),
                (
                    "absences",
                    models.ManyToManyField(
                        blank=True,
                        related_name="logs",
                        to="django_pickups.absence",
                    ),
                ),
                (
                    "recipients",
                    models.ManyToManyField(
                        blank=True,
                        related_name="recipient_logs",
                        to="django_pickups.location",
                    ),
                ),
            ],
            options={
                "ordering": ["when", "id"],
                "indexes": [
                    models.Index(
                        fields=["region", "when"], name="pickups_log_region_when_idx"
                    ),
                    models.Index(
                        fields=["complete", "when"], name="pickups_log_complete_when_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="LogPart",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("food_type", models.CharField(blank=True, max_length=100)),
                (
                    "weight",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0"),
                        help_text="Pounds",
                        max_digits=10,
                    ),
                ),
                ("count", models.PositiveIntegerField(default=0)),
                (
                    "log",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="parts",
                        to="django_pickups.log",
                    ),
                ),
            ],
        ),
    ]

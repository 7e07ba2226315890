import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        error_messages={"unique": "A user with that username already exists."},
                        help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
                        max_length=150,
                        unique=True,
                        validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                        verbose_name="username",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.",
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("name", models.CharField(max_length=255)),
                (
                    "role",
                    models.CharField(
                        choices=[("admin", "Administrator"), ("resident", "Resident")],
                        default="resident",
                        max_length=20,
                    ),
                ),
                (
                    "resident_id",
                    models.CharField(
                        blank=True,
                        help_text="Resident record this account belongs to (resident role only)",
                        max_length=20,
                        null=True,
                        unique=True,
                    ),
                ),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "db_table": "users",
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="FamilyHead",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                (
                    "gender",
                    models.CharField(
                        choices=[("Male", "Male"), ("Female", "Female"), ("Other", "Other")],
                        max_length=10,
                    ),
                ),
                ("birth_date", models.DateField()),
                ("address", models.CharField(max_length=500)),
                ("registration_date", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "verification_code",
                    models.TextField(
                        blank=True, help_text="QR code data URL, generated on first request", null=True
                    ),
                ),
                ("head_id", models.CharField(db_index=True, max_length=20, unique=True)),
                ("contact_number", models.CharField(max_length=30)),
            ],
            options={
                "db_table": "family_heads",
                "ordering": ["head_id"],
            },
        ),
        migrations.CreateModel(
            name="Resident",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                (
                    "gender",
                    models.CharField(
                        choices=[("Male", "Male"), ("Female", "Female"), ("Other", "Other")],
                        max_length=10,
                    ),
                ),
                ("birth_date", models.DateField()),
                ("address", models.CharField(max_length=500)),
                ("registration_date", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "verification_code",
                    models.TextField(
                        blank=True, help_text="QR code data URL, generated on first request", null=True
                    ),
                ),
                ("resident_id", models.CharField(db_index=True, max_length=20, unique=True)),
                ("contact_number", models.CharField(blank=True, default="", max_length=30)),
                (
                    "family_head",
                    models.ForeignKey(
                        blank=True,
                        db_column="family_head_id",
                        help_text="Household this resident belongs to",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="members",
                        to="barangay.familyhead",
                        to_field="head_id",
                    ),
                ),
            ],
            options={
                "db_table": "residents",
                "ordering": ["resident_id"],
                "indexes": [models.Index(fields=["last_name", "first_name"], name="residents_name_idx")],
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("category", models.CharField(max_length=100)),
                ("event_date", models.DateTimeField()),
                ("time", models.CharField(max_length=50)),
                ("location", models.CharField(max_length=255)),
                ("created_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("verification_code", models.TextField(blank=True, null=True)),
            ],
            options={
                "db_table": "events",
                "ordering": ["event_date"],
            },
        ),
        migrations.CreateModel(
            name="EventAttendee",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("attendee_id", models.CharField(max_length=50)),
                ("name", models.CharField(max_length=255)),
                ("contact_number", models.CharField(blank=True, default="", max_length=30)),
                ("registered_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attendees",
                        to="barangay.event",
                    ),
                ),
            ],
            options={
                "db_table": "event_attendees",
                "ordering": ["id"],
            },
        ),
        migrations.AddConstraint(
            model_name="eventattendee",
            constraint=models.UniqueConstraint(fields=("event", "attendee_id"), name="unique_event_attendee"),
        ),
        migrations.CreateModel(
            name="DocumentRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("request_id", models.CharField(db_index=True, max_length=20, unique=True)),
                ("resident_id", models.CharField(db_index=True, max_length=20)),
                ("resident_name", models.CharField(max_length=255)),
                (
                    "document_type",
                    models.CharField(
                        choices=[
                            ("barangay-clearance", "Barangay Clearance"),
                            ("residency", "Certificate of Residency"),
                            ("indigency", "Certificate of Indigency"),
                            ("good-conduct", "Certificate of Good Conduct"),
                            ("business-permit", "Business Permit"),
                        ],
                        max_length=30,
                    ),
                ),
                ("purpose", models.CharField(max_length=500)),
                ("additional_details", models.TextField(blank=True, default="")),
                (
                    "delivery_option",
                    models.CharField(
                        choices=[("pickup", "Pickup"), ("email", "Email"), ("delivery", "Delivery")],
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("approved", "Approved"),
                            ("rejected", "Rejected"),
                            ("completed", "Completed"),
                        ],
                        db_index=True,
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("request_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("processing_date", models.DateTimeField(blank=True, null=True)),
                ("processing_notes", models.TextField(blank=True, default="")),
                ("processed_by", models.CharField(blank=True, max_length=150, null=True)),
                ("verification_code", models.TextField(blank=True, null=True)),
            ],
            options={
                "db_table": "document_requests",
                "ordering": ["-request_date"],
            },
        ),
        migrations.CreateModel(
            name="Announcement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("category", models.CharField(max_length=100)),
                (
                    "announcement_type",
                    models.CharField(
                        choices=[("important", "Important"), ("warning", "Warning"), ("info", "Info")],
                        db_column="type",
                        max_length=20,
                    ),
                ),
                ("content", models.TextField()),
                ("date", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "announcements",
                "ordering": ["-date"],
            },
        ),
        migrations.CreateModel(
            name="IdentifierSequence",
            fields=[
                ("kind", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("last_value", models.PositiveIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "identifier_sequences",
            },
        ),
    ]

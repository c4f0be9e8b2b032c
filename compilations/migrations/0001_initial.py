from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Compilation",
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
                ("title", models.CharField(max_length=50)),
                ("pinned", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["pinned", "id"], name="compilation_pinned_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="CompilationEvent",
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
                ("event_id", models.PositiveBigIntegerField()),
                (
                    "compilation",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="memberships",
                        to="compilations.compilation",
                    ),
                ),
            ],
            options={
                "ordering": ["event_id"],
                "indexes": [
                    models.Index(fields=["event_id"], name="membership_event_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("compilation", "event_id"),
                        name="unique_compilation_event",
                    ),
                ],
            },
        ),
    ]

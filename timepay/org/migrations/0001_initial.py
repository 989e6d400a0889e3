from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="OrganizationPolicy",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("org_id", models.PositiveIntegerField(default=1, unique=True)),
                ("document", models.JSONField(blank=True, default=dict, help_text="Partial policy document deep-merged over the defaults")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Organization Policy",
                "verbose_name_plural": "Organization Policies",
                "ordering": ["org_id"],
            },
        ),
    ]

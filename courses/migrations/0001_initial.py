from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Department",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=64, unique=True)),
                ("slug", models.SlugField(max_length=64, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("created", models.DateTimeField(auto_now_add=True)),
                ("updated", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["title"],
            },
        ),
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("course_id", models.CharField(max_length=16, unique=True)),
                ("title", models.CharField(max_length=64, unique=True)),
                ("units", models.FloatField(blank=True, null=True)),
                (
                    "semester",
                    models.CharField(
                        choices=[("Vor", "Vor"), ("Sumar", "Sumar"), ("Haust", "Haust"), ("Heilsárs", "Heilsárs")],
                        max_length=16,
                    ),
                ),
                ("level", models.CharField(blank=True, max_length=128, null=True)),
                ("url", models.CharField(blank=True, max_length=256, null=True)),
                ("created", models.DateTimeField(auto_now_add=True)),
                ("updated", models.DateTimeField(auto_now=True)),
                ("department", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="courses", to="courses.department")),
            ],
            options={
                "ordering": ["course_id"],
            },
        ),
    ]

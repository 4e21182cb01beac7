from django.db import migrations

ROLE_NAMES = (
    "super_admin",
    "hr",
    "finance",
    "accounting",
    "director",
    "project_manager",
    "sales",
    "marketing",
    "socmed_admin",
    "graphic_designer",
    "copywriter",
    "video_editor",
    "photographer",
)


def create_role_groups(apps, schema_editor):
    Group = apps.get_model("auth", "Group")
    for name in ROLE_NAMES:
        Group.objects.get_or_create(name=name)


def remove_role_groups(apps, schema_editor):
    Group = apps.get_model("auth", "Group")
    Group.objects.filter(name__in=ROLE_NAMES, user__isnull=True).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("users", "0001_initial"),
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.RunPython(create_role_groups, remove_role_groups),
    ]

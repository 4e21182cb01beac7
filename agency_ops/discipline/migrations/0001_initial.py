import agency_ops.discipline.models
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('employees', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DisciplinaryCase',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('case_date', models.DateField()),
                ('violation_type', models.CharField(choices=[('lateness', 'Repeated lateness'), ('unexcused_absence', 'Unexcused absence'), ('sop_breach', 'SOP breach'), ('insubordination', 'Insubordination'), ('coworker_conflict', 'Conflict with co-workers'), ('ethics_breach', 'Ethics breach'), ('poor_performance', 'Poor performance'), ('asset_misuse', 'Misuse of company assets'), ('other', 'Other')], max_length=32)),
                ('description', models.TextField()),
                ('severity', models.CharField(choices=[('minor', 'Minor'), ('moderate', 'Moderate'), ('major', 'Major'), ('critical', 'Critical')], default='minor', max_length=16)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('investigating', 'Investigating'), ('warning_issued', 'Warning issued'), ('resolved', 'Resolved'), ('dismissed', 'Dismissed')], default='pending', max_length=16)),
                ('action_taken', models.TextField(blank=True)),
                ('action_date', models.DateField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('evidence', models.FileField(blank=True, null=True, upload_to=agency_ops.discipline.models.evidence_upload_to)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='disciplinary_cases', to='employees.employee')),
                ('reported_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={'ordering': ['-case_date', '-created_at']},
        ),
    ]

from decimal import Decimal
from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('clients', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PlatformAccount',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('platform', models.CharField(choices=[('instagram', 'Instagram'), ('facebook', 'Facebook'), ('linkedin', 'LinkedIn'), ('youtube', 'YouTube'), ('tiktok', 'TikTok'), ('google_business', 'Google Business')], max_length=32)),
                ('account_name', models.CharField(max_length=255)),
                ('username_url', models.CharField(blank=True, max_length=255)),
                ('status', models.CharField(choices=[('active', 'Active'), ('inactive', 'Inactive')], default='active', max_length=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('client', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='platform_accounts', to='clients.client')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={'ordering': ['client_id', 'platform', 'account_name']},
        ),
        migrations.CreateModel(
            name='MonthlyOrganicReport',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('report_month', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('report_year', models.PositiveSmallIntegerField()),
                ('is_locked', models.BooleanField(default=False)),
                ('locked_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('metrics', models.JSONField(blank=True, default=dict)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('locked_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('platform_account', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='organic_reports', to='reports.platformaccount')),
            ],
            options={
                'ordering': ['-report_year', '-report_month'],
                'unique_together': {('platform_account', 'report_month', 'report_year')},
            },
        ),
        migrations.CreateModel(
            name='MonthlyAdsReport',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('report_month', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('report_year', models.PositiveSmallIntegerField()),
                ('is_locked', models.BooleanField(default=False)),
                ('locked_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('platform', models.CharField(choices=[('meta', 'Meta Ads'), ('instagram', 'Instagram Ads'), ('facebook', 'Facebook Ads'), ('linkedin', 'LinkedIn Ads'), ('youtube', 'YouTube Ads'), ('tiktok', 'TikTok Ads'), ('google_ads', 'Google Ads')], max_length=32)),
                ('total_spend', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=15)),
                ('impressions', models.PositiveBigIntegerField(default=0)),
                ('reach', models.PositiveBigIntegerField(default=0)),
                ('clicks', models.PositiveBigIntegerField(default=0)),
                ('results', models.PositiveBigIntegerField(default=0)),
                ('objective', models.CharField(choices=[('awareness', 'Awareness'), ('traffic', 'Traffic'), ('engagement', 'Engagement'), ('leads', 'Leads'), ('conversions', 'Conversions'), ('video_views', 'Video Views')], default='awareness', max_length=32)),
                ('lead_category', models.CharField(blank=True, choices=[('form_submission', 'Form Submission'), ('whatsapp', 'WhatsApp'), ('phone_call', 'Phone Call'), ('email', 'Email'), ('dm', 'Direct Message'), ('website_click', 'Website Click'), ('other', 'Other')], max_length=32)),
                ('cpm', models.DecimalField(blank=True, decimal_places=2, max_digits=15, null=True)),
                ('cpc', models.DecimalField(blank=True, decimal_places=2, max_digits=15, null=True)),
                ('cost_per_result', models.DecimalField(blank=True, decimal_places=2, max_digits=15, null=True)),
                ('client', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ads_reports', to='clients.client')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('locked_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('platform_account', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ads_reports', to='reports.platformaccount')),
            ],
            options={
                'ordering': ['-report_year', '-report_month'],
                'unique_together': {('client', 'platform', 'report_month', 'report_year')},
            },
        ),
    ]

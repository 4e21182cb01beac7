from django.contrib import admin

from agency_ops.reports import models


@admin.register(models.PlatformAccount)
class PlatformAccountAdmin(admin.ModelAdmin):
    list_display = ["id", "client", "platform", "account_name", "status"]
    list_filter = ["platform", "status"]


@admin.register(models.MonthlyOrganicReport)
class MonthlyOrganicReportAdmin(admin.ModelAdmin):
    list_display = ["id", "platform_account", "report_year", "report_month", "is_locked"]
    list_filter = ["report_year", "is_locked"]


@admin.register(models.MonthlyAdsReport)
class MonthlyAdsReportAdmin(admin.ModelAdmin):
    list_display = ["id", "client", "platform", "report_year", "report_month", "total_spend"]
    list_filter = ["platform", "report_year", "is_locked"]

from django.contrib import admin

from agency_ops.finance import models


@admin.register(models.Income)
class IncomeAdmin(admin.ModelAdmin):
    list_display = ["id", "source", "amount", "type", "date", "status"]
    list_filter = ["type", "status"]
    search_fields = ["source"]


@admin.register(models.Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ["id", "description", "amount", "category", "sub_category", "status"]
    list_filter = ["category", "status", "is_recurring"]
    search_fields = ["description"]


@admin.register(models.PayrollEntry)
class PayrollEntryAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "month", "amount", "status"]
    list_filter = ["status", "month"]


@admin.register(models.RecurringBudget)
class RecurringBudgetAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "type", "amount", "period", "due_day", "status"]
    list_filter = ["type", "period", "status"]


@admin.register(models.Reimbursement)
class ReimbursementAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "request_type", "category", "amount", "status"]
    list_filter = ["request_type", "category", "status"]
    search_fields = ["title", "notes", "user__name"]

from rest_framework import serializers

from agency_ops.reports import services
from agency_ops.reports.models import MonthlyAdsReport
from agency_ops.reports.models import MonthlyOrganicReport
from agency_ops.reports.models import PlatformAccount

LOCK_FIELDS = ["is_locked", "locked_at", "locked_by", "created_by", "created_at", "updated_at"]


class PlatformAccountSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source="client.name", read_only=True)

    class Meta:
        model = PlatformAccount
        fields = [
            "id",
            "client",
            "client_name",
            "platform",
            "account_name",
            "username_url",
            "status",
            "created_at",
        ]
        read_only_fields = ["created_at"]


class MonthlyOrganicReportSerializer(serializers.ModelSerializer):
    platform = serializers.CharField(source="platform_account.platform", read_only=True)
    account_name = serializers.CharField(
        source="platform_account.account_name", read_only=True
    )

    class Meta:
        model = MonthlyOrganicReport
        fields = [
            "id",
            "platform_account",
            "platform",
            "account_name",
            "report_month",
            "report_year",
            "metrics",
            *LOCK_FIELDS,
        ]
        read_only_fields = LOCK_FIELDS

    def validate(self, attrs):
        account = attrs.get("platform_account") or getattr(
            self.instance, "platform_account", None
        )
        metrics = attrs.get("metrics")
        if account is not None and metrics is not None:
            if not isinstance(metrics, dict):
                raise serializers.ValidationError({"metrics": "Expected an object."})
            try:
                attrs["metrics"] = services.validate_metrics(account.platform, metrics)
            except ValueError as exc:
                raise serializers.ValidationError({"metrics": str(exc)}) from exc
        return attrs


class MonthlyAdsReportSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source="client.name", read_only=True)

    class Meta:
        model = MonthlyAdsReport
        fields = [
            "id",
            "client",
            "client_name",
            "platform",
            "platform_account",
            "report_month",
            "report_year",
            "total_spend",
            "impressions",
            "reach",
            "clicks",
            "results",
            "objective",
            "lead_category",
            "cpm",
            "cpc",
            "cost_per_result",
            *LOCK_FIELDS,
        ]
        read_only_fields = LOCK_FIELDS

    def validate(self, attrs):
        def pick(name, default=0):
            if name in attrs:
                return attrs[name]
            return getattr(self.instance, name, default) if self.instance else default

        derived = services.ads_metrics(
            pick("total_spend"),
            pick("impressions"),
            pick("clicks"),
            pick("results"),
            cpm=attrs.get("cpm"),
            cpc=attrs.get("cpc"),
            cost_per_result=attrs.get("cost_per_result"),
        )
        attrs.update(derived)
        return attrs

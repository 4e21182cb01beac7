"""Expense categories, their chart-of-accounts codes and statement groups."""

from __future__ import annotations

FINANCE_CATEGORIES: dict[str, tuple[str, dict[str, str]]] = {
    "operasional": (
        "Operasional",
        {
            "transport": "Transport",
            "konsumsi_meeting": "Konsumsi / Meeting",
            "atk": "ATK",
            "maintenance": "Maintenance",
            "logistik": "Logistik",
            "internet_komunikasi": "Internet & Komunikasi",
            "office_supplies": "Office Supplies",
        },
    ),
    "project": (
        "Project",
        {
            "honor_talent": "Honor Talent / Freelancer",
            "produksi_konten": "Produksi Konten",
            "sewa_lokasi": "Sewa Lokasi",
            "equipment": "Equipment",
            "vendor_project": "Vendor Project",
            "transport_project": "Transport Project",
            "konsumsi_project": "Konsumsi Project",
        },
    ),
    "sdm_hr": (
        "SDM / HR",
        {
            "gaji_upah": "Gaji & Upah",
            "freelance_parttimer": "Freelance / Part Timer",
            "bpjs": "BPJS",
            "thr_bonus": "THR & Bonus",
            "rekrutmen": "Rekrutmen",
            "training_sertifikasi": "Training & Sertifikasi",
            "kesehatan_karyawan": "Kesehatan Karyawan",
            "reimburse_karyawan": "Reimburse Karyawan",
        },
    ),
    "marketing_growth": (
        "Marketing & Growth",
        {
            "ads": "Ads (Meta / Google / TikTok)",
            "kol_influencer": "KOL / Influencer",
            "event_aktivasi": "Event & Aktivasi",
            "produksi_marketing": "Produksi Konten Marketing",
            "tools_marketing": "Tools Marketing",
            "sponsorship": "Sponsorship",
        },
    ),
    "it_tools": (
        "IT & Tools",
        {
            "saas_subscription": "SaaS Subscription",
            "domain_hosting": "Domain & Hosting",
            "software_license": "Software License",
            "hardware": "Hardware",
            "maintenance_it": "Maintenance IT",
            "cloud_service": "Cloud Service",
        },
    ),
    "administrasi_legal": (
        "Administrasi & Legal",
        {
            "legalitas": "Legalitas",
            "perizinan": "Perizinan",
            "pajak": "Pajak",
            "notaris": "Notaris",
            "konsultan": "Konsultan",
            "administrasi_bank": "Administrasi Bank",
        },
    ),
    "finance": (
        "Finance",
        {
            "biaya_transfer": "Biaya Transfer",
            "biaya_admin_bank": "Biaya Admin Bank",
            "bunga_denda": "Bunga / Denda",
            "pajak_dibayar": "Pajak Dibayar",
            "audit": "Audit",
        },
    ),
    "reimburse": (
        "Reimburse & Request",
        {
            "reimburse_event": "Reimburse - Event",
            "reimburse_meeting": "Reimburse - Meeting",
            "reimburse_production": "Reimburse - Production",
            "reimburse_operational": "Reimburse - Operational",
            "reimburse_other": "Reimburse - Lainnya",
            "request_training": "Request - Training",
            "request_equipment": "Request - Equipment",
            "request_software": "Request - Software",
            "request_transport": "Request - Transport",
            "request_event": "Request - Event",
            "request_other": "Request - Lainnya",
        },
    ),
    "lainnya": (
        "Lain-lain",
        {
            "donasi": "Donasi",
            "csr": "CSR",
            "pengeluaran_insidental": "Pengeluaran Insidental",
            "tidak_terklasifikasi": "Tidak Terklasifikasi",
        },
    ),
}

CATEGORY_CHOICES = [(key, label) for key, (label, _subs) in FINANCE_CATEGORIES.items()]

CATEGORY_TO_ACCOUNT = {
    "payroll": "6110",
    # Cost of goods sold
    "honor_talent": "5100",
    "produksi_konten": "5200",
    "vendor_project": "5300",
    "transport_project": "5400",
    "konsumsi_project": "5500",
    # HR
    "gaji_upah": "6110",
    "freelance_parttimer": "6110",
    "bpjs": "6130",
    "thr_bonus": "6140",
    "rekrutmen": "6100",
    "training_sertifikasi": "6100",
    "kesehatan_karyawan": "6100",
    "reimburse_karyawan": "6100",
    # Marketing
    "ads": "6210",
    "kol_influencer": "6220",
    "event_aktivasi": "6200",
    "produksi_marketing": "6200",
    "tools_marketing": "6200",
    "sponsorship": "6200",
    # IT
    "saas_subscription": "6310",
    "domain_hosting": "6320",
    "software_license": "6300",
    "hardware": "6300",
    "maintenance_it": "6300",
    "cloud_service": "6300",
    # Administration
    "atk": "6410",
    "internet_komunikasi": "6430",
    "office_supplies": "6410",
    "konsumsi_meeting": "6400",
    "maintenance": "6400",
    "logistik": "6400",
    "transport": "6500",
    # Legal
    "legalitas": "6600",
    "perizinan": "6600",
    "pajak": "6600",
    "notaris": "6600",
    "konsultan": "6600",
    # Finance
    "biaya_transfer": "6720",
    "biaya_admin_bank": "6710",
    "administrasi_bank": "6710",
    "bunga_denda": "6700",
    "pajak_dibayar": "6700",
    "audit": "6700",
}
DEFAULT_EXPENSE_ACCOUNT = "6000"

INCOME_TYPE_TO_ACCOUNT = {
    "retainer": "4110",
    "project": "4120",
    "event": "4130",
    "other": "4200",
    "refund": "4200",
    "interest": "4200",
}
DEFAULT_INCOME_ACCOUNT = "4200"

COGS_SUB_CATEGORIES = frozenset(
    {
        "honor_talent",
        "produksi_konten",
        "vendor_project",
        "transport_project",
        "konsumsi_project",
        "sewa_lokasi",
        "equipment",
    }
)

GROUP_COGS = "cogs"
GROUP_HR = "hr"
GROUP_MARKETING = "marketing"
GROUP_IT = "it"
GROUP_ADMIN = "admin"
GROUP_OTHER = "other"

CATEGORY_GROUPS = {
    "sdm_hr": GROUP_HR,
    "payroll": GROUP_HR,
    "marketing_growth": GROUP_MARKETING,
    "it_tools": GROUP_IT,
    "administrasi_legal": GROUP_ADMIN,
    "operasional": GROUP_ADMIN,
    "finance": GROUP_ADMIN,
    "reimburse": GROUP_OTHER,
    "lainnya": GROUP_OTHER,
}


def sub_categories(category: str) -> dict[str, str]:
    return FINANCE_CATEGORIES.get(category, ("", {}))[1]


def is_valid_sub_category(category: str, sub_category: str | None) -> bool:
    return not sub_category or sub_category in sub_categories(category)


def expense_account(category: str, sub_category: str | None = None) -> str:
    if sub_category and sub_category in CATEGORY_TO_ACCOUNT:
        return CATEGORY_TO_ACCOUNT[sub_category]
    return CATEGORY_TO_ACCOUNT.get(category, DEFAULT_EXPENSE_ACCOUNT)


def income_account(income_type: str) -> str:
    return INCOME_TYPE_TO_ACCOUNT.get(income_type, DEFAULT_INCOME_ACCOUNT)


def is_cogs(category: str, sub_category: str | None = None) -> bool:
    if category == "project":
        return True
    return bool(sub_category) and sub_category in COGS_SUB_CATEGORIES


def expense_group(category: str, sub_category: str | None = None) -> str:
    if is_cogs(category, sub_category):
        return GROUP_COGS
    return CATEGORY_GROUPS.get(category, GROUP_OTHER)

PLATFORM_METRICS: dict[str, tuple[str, ...]] = {
    "instagram": (
        "ig_reach",
        "ig_impressions",
        "ig_profile_visits",
        "ig_website_clicks",
        "ig_content_interactions",
        "ig_followers",
    ),
    "facebook": (
        "fb_reach",
        "fb_impressions",
        "fb_content_interactions",
        "fb_page_views",
        "fb_followers",
    ),
    "linkedin": (
        "li_impressions",
        "li_engagement_rate",
        "li_followers",
        "li_page_views",
        "li_unique_visitors",
    ),
    "youtube": ("yt_views", "yt_watch_time", "yt_impressions", "yt_subscribers"),
    "tiktok": (
        "tt_video_views",
        "tt_profile_views",
        "tt_likes",
        "tt_comments",
        "tt_shares",
        "tt_followers",
    ),
    "google_business": (
        "gb_profile_views",
        "gb_profile_interactions",
        "gb_direction_requests",
        "gb_phone_calls",
        "gb_positive_reviews",
        "gb_negative_reviews",
    ),
}

# Metric holding the audience size of an account; Google Business has none.
FOLLOWER_METRIC = {
    "instagram": "ig_followers",
    "facebook": "fb_followers",
    "linkedin": "li_followers",
    "youtube": "yt_subscribers",
    "tiktok": "tt_followers",
}

PLATFORM_CHOICES = [
    ("instagram", "Instagram"),
    ("facebook", "Facebook"),
    ("linkedin", "LinkedIn"),
    ("youtube", "YouTube"),
    ("tiktok", "TikTok"),
    ("google_business", "Google Business"),
]

ADS_PLATFORM_CHOICES = [
    ("meta", "Meta Ads"),
    ("instagram", "Instagram Ads"),
    ("facebook", "Facebook Ads"),
    ("linkedin", "LinkedIn Ads"),
    ("youtube", "YouTube Ads"),
    ("tiktok", "TikTok Ads"),
    ("google_ads", "Google Ads"),
]

ADS_OBJECTIVE_CHOICES = [
    ("awareness", "Awareness"),
    ("traffic", "Traffic"),
    ("engagement", "Engagement"),
    ("leads", "Leads"),
    ("conversions", "Conversions"),
    ("video_views", "Video Views"),
]

LEAD_CATEGORY_CHOICES = [
    ("form_submission", "Form Submission"),
    ("whatsapp", "WhatsApp"),
    ("phone_call", "Phone Call"),
    ("email", "Email"),
    ("dm", "Direct Message"),
    ("website_click", "Website Click"),
    ("other", "Other"),
]

TOP_CLIENTS = 10

# Database Pool Constants
POOL_SIZE = 5
MAX_OVERFLOW = 10
POOL_TIMEOUT = 30
POOL_RECYCLE = 1800

# Identifier prefix -> region. Checked in order, first match wins.
TIMEZONE_REGION_PREFIXES = (
    ("America/", "Americas"),
    ("Europe/", "Europe"),
    ("Asia/", "Asia"),
    ("Africa/", "Africa"),
    ("Australia/", "Australia & Oceania"),
    ("Pacific/", "Pacific"),
    ("Atlantic/", "Atlantic"),
)
UNIVERSAL_TIMEZONE = "UTC"
UNIVERSAL_REGION = "Universal"
UNKNOWN_REGION = "Other"

# Static timezone manifest seeded into the store on first boot.
# Offsets are fixed hours from UTC; no daylight-saving rules apply.
TIMEZONE_MANIFEST = [
    # UTC-12 to UTC-11
    {"identifier": "Pacific/Kwajalein", "label": "Kwajalein (UTC-12)", "offset": -12, "region": "Pacific", "abbreviation": "UTC-12"},
    {"identifier": "Pacific/Midway", "label": "Midway (UTC-11)", "offset": -11, "region": "Pacific", "abbreviation": "UTC-11"},
    # UTC-10 to UTC-9
    {"identifier": "Pacific/Honolulu", "label": "Hawaii (UTC-10)", "offset": -10, "region": "Pacific", "abbreviation": "HST"},
    {"identifier": "America/Anchorage", "label": "Alaska (UTC-9)", "offset": -9, "region": "Americas", "abbreviation": "AKST"},
    # UTC-8 to UTC-7
    {"identifier": "America/Los_Angeles", "label": "Pacific Time (UTC-8)", "offset": -8, "region": "Americas", "abbreviation": "PST"},
    {"identifier": "America/Denver", "label": "Mountain Time (UTC-7)", "offset": -7, "region": "Americas", "abbreviation": "MST"},
    # UTC-6 to UTC-5
    {"identifier": "America/Chicago", "label": "Central Time (UTC-6)", "offset": -6, "region": "Americas", "abbreviation": "CST"},
    {"identifier": "America/New_York", "label": "Eastern Time (UTC-5)", "offset": -5, "region": "Americas", "abbreviation": "EST"},
    # UTC-4 to UTC-3
    {"identifier": "America/Halifax", "label": "Atlantic Time (UTC-4)", "offset": -4, "region": "Americas", "abbreviation": "AST"},
    {"identifier": "America/Sao_Paulo", "label": "Brazil (UTC-3)", "offset": -3, "region": "Americas", "abbreviation": "BRT"},
    # UTC-2 to UTC-1
    {"identifier": "America/Noronha", "label": "Fernando de Noronha (UTC-2)", "offset": -2, "region": "Americas", "abbreviation": "FNT"},
    {"identifier": "Atlantic/Cape_Verde", "label": "Cape Verde (UTC-1)", "offset": -1, "region": "Atlantic", "abbreviation": "CVT"},
    # UTC+0
    {"identifier": "UTC", "label": "Universal Time (UTC+0)", "offset": 0, "region": "Universal", "abbreviation": "UTC"},
    {"identifier": "Europe/London", "label": "London (UTC+0)", "offset": 0, "region": "Europe", "abbreviation": "GMT"},
    {"identifier": "Africa/Casablanca", "label": "Morocco (UTC+0)", "offset": 0, "region": "Africa", "abbreviation": "WET"},
    # UTC+1 to UTC+2
    {"identifier": "Europe/Paris", "label": "Central European Time (UTC+1)", "offset": 1, "region": "Europe", "abbreviation": "CET"},
    {"identifier": "Europe/Berlin", "label": "Berlin (UTC+1)", "offset": 1, "region": "Europe", "abbreviation": "CET"},
    {"identifier": "Africa/Lagos", "label": "West Africa (UTC+1)", "offset": 1, "region": "Africa", "abbreviation": "WAT"},
    {"identifier": "Europe/Athens", "label": "Athens (UTC+2)", "offset": 2, "region": "Europe", "abbreviation": "EET"},
    {"identifier": "Africa/Cairo", "label": "Egypt (UTC+2)", "offset": 2, "region": "Africa", "abbreviation": "EET"},
    # UTC+3 to UTC+4
    {"identifier": "Europe/Moscow", "label": "Moscow (UTC+3)", "offset": 3, "region": "Europe", "abbreviation": "MSK"},
    {"identifier": "Asia/Istanbul", "label": "Turkey (UTC+3)", "offset": 3, "region": "Asia", "abbreviation": "TRT"},
    {"identifier": "Asia/Dubai", "label": "UAE (UTC+4)", "offset": 4, "region": "Asia", "abbreviation": "GST"},
    # UTC+4:30 to UTC+5:30
    {"identifier": "Asia/Kabul", "label": "Afghanistan (UTC+4:30)", "offset": 4.5, "region": "Asia", "abbreviation": "AFT"},
    {"identifier": "Asia/Karachi", "label": "Pakistan (UTC+5)", "offset": 5, "region": "Asia", "abbreviation": "PKT"},
    {"identifier": "Asia/Tashkent", "label": "Uzbekistan (UTC+5)", "offset": 5, "region": "Asia", "abbreviation": "UZT"},
    {"identifier": "Asia/Kolkata", "label": "India (UTC+5:30)", "offset": 5.5, "region": "Asia", "abbreviation": "IST"},
    # UTC+5:45 to UTC+6:30
    {"identifier": "Asia/Kathmandu", "label": "Nepal (UTC+5:45)", "offset": 5.75, "region": "Asia", "abbreviation": "NPT"},
    {"identifier": "Asia/Dhaka", "label": "Bangladesh (UTC+6)", "offset": 6, "region": "Asia", "abbreviation": "BST"},
    {"identifier": "Asia/Yangon", "label": "Myanmar (UTC+6:30)", "offset": 6.5, "region": "Asia", "abbreviation": "MMT"},
    # UTC+7 to UTC+8
    {"identifier": "Asia/Bangkok", "label": "Thailand (UTC+7)", "offset": 7, "region": "Asia", "abbreviation": "ICT"},
    {"identifier": "Asia/Shanghai", "label": "China (UTC+8)", "offset": 8, "region": "Asia", "abbreviation": "CST"},
    {"identifier": "Asia/Singapore", "label": "Singapore (UTC+8)", "offset": 8, "region": "Asia", "abbreviation": "SGT"},
    # UTC+9 to UTC+10
    {"identifier": "Asia/Tokyo", "label": "Japan (UTC+9)", "offset": 9, "region": "Asia", "abbreviation": "JST"},
    {"identifier": "Asia/Seoul", "label": "South Korea (UTC+9)", "offset": 9, "region": "Asia", "abbreviation": "KST"},
    {"identifier": "Australia/Sydney", "label": "Sydney (UTC+10)", "offset": 10, "region": "Australia & Oceania", "abbreviation": "AEST"},
    # UTC+12 and beyond
    {"identifier": "Pacific/Auckland", "label": "New Zealand (UTC+12)", "offset": 12, "region": "Pacific", "abbreviation": "NZST"},
]

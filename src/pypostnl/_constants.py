"""Internal constants shared across the library."""

DEFAULT_NAME = "PostNL"
DEFAULT_ICON = "mdi:mailbox"
DEFAULT_DATE_FORMAT = "DD MMM YYYY"
DEFAULT_TIME_FORMAT = "HH:mm"
DEFAULT_PAST_DAYS = 1
DEFAULT_LANGUAGE = "en"
DEFAULT_TIME_ZONE = "Europe/Amsterdam"

# ------------------------------------------------------------------
# Source groups (card configuration keys)
# ------------------------------------------------------------------

DELIVERY = "delivery"
DISTRIBUTION = "distribution"
LETTERS = "letters"
SOURCE_GROUPS: tuple[str, ...] = (DELIVERY, DISTRIBUTION, LETTERS)

# ------------------------------------------------------------------
# Presentation
# ------------------------------------------------------------------

ICON_ENROUTE = "mdi:truck"
ICON_DELIVERED = "mdi:check-circle"
ICON_LETTER = "mdi:email"
ICON_SUMMARY_LETTERS = "mdi:email"
ICON_SUMMARY_ENROUTE = "mdi:truck-delivery"
ICON_SUMMARY_DELIVERED = "mdi:package-variant"

# Appended to the letter scan URL for the preview thumbnail.
LETTER_PREVIEW_SUFFIX = "&width=400&height=300"

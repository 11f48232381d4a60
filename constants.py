from typing import Tuple

# Central location for constants used across the Streamlit app
# ----------------------------------------------------------

DEFAULT_EXTRACTION_SERVICE_URL = "https://mkim-decoded-intern-2025.onrender.com/extract"
DEFAULT_EXTRACTION_TIMEOUT_SECONDS = 25.0
# Matches the validity window of common challenge widgets (e.g. Turnstile)
DEFAULT_VERIFICATION_TTL_SECONDS = 300.0
DEFAULT_LOG_LEVEL = "INFO"

# Scroll offset (px) after which the "back to top" control is shown
BACK_TO_TOP_THRESHOLD_PX = 300

# ---------------------------------------------------------------------------
# Wire format of the extraction service
# ---------------------------------------------------------------------------

# Request body keys
REQUEST_DESCRIPTION_KEY = "description"
REQUEST_VERIFICATION_KEY = "verification"

# Response keys. The first entry is the canonical key written back by
# blueprint_to_dict(); the others are accepted aliases.
APP_NAME_KEYS: Tuple[str, ...] = ("App Name", "appName", "app_name")
ROLES_KEYS: Tuple[str, ...] = ("Roles", "roles")
ROLE_NAME_KEYS: Tuple[str, ...] = ("Role", "name", "role")
FEATURES_KEYS: Tuple[str, ...] = ("Features", "features")
ENTITY_KEYS: Tuple[str, ...] = ("Entity", "entity")
FEATURE_NAME_KEYS: Tuple[str, ...] = ("Feature", "name", "feature")
INPUT_FIELDS_KEYS: Tuple[str, ...] = ("Input Fields", "inputFields", "input_fields")
BUTTONS_KEYS: Tuple[str, ...] = ("Buttons", "buttons")

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------

MISSING_DESCRIPTION_MESSAGE = "Please describe your app before generating a mock UI."
MISSING_VERIFICATION_MESSAGE = "Please complete the verification check before submitting."
SERVICE_TIMEOUT_MESSAGE = (
    "The service timed out. Try a shorter or clearer description and submit again."
)
SERVICE_UNAVAILABLE_MESSAGE = (
    "The service is temporarily unavailable. Please try again in a moment."
)

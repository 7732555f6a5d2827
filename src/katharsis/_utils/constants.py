# Headers
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
APPLICATION_JSON = "application/json"
APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"

# Environment variables
ENV_BASE_URL = "KATHARSIS_BASE_URL"
ENV_CAPTURE_STATUS_ERRORS = "KATHARSIS_CAPTURE_STATUS_ERRORS"
ENV_DEBUG = "KATHARSIS_DEBUG"

LOGGER_NAME = "katharsis"

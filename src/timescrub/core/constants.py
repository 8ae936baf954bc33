"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 191
MAX_PHONE_LENGTH = 50
MAX_ADDRESS_LENGTH = 191
MAX_NOTE_LENGTH = 191
MAX_COUNTRY_LENGTH = 2
MAX_ACTION_LENGTH = 50
MAX_ENTITY_TYPE_LENGTH = 50

DEFAULT_COUNTRY = "US"

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Pagination defaults
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200

# Token settings
DEFAULT_TOKEN_LIFETIME_MINUTES = 24 * 60
ACCESS_TOKEN_JTI_LENGTH = 32

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Integer column ranges
MAX_INT_ID = 2_147_483_647
MAX_BIGINT = 9_223_372_036_854_775_807

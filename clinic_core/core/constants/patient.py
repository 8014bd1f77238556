"""Patient constants."""

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 255

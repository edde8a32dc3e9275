"""
Application-wide constants.
Centralizes magic numbers that are not meant to be configured.
"""

# Phone validation
MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15

# Text limits
MAX_NOTES_LENGTH = 1000

# Booking id: base-36 timestamp followed by a random suffix
BOOKING_ID_RANDOM_LENGTH = 6

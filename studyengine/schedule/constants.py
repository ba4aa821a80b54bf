"""Schedule constants - single source of truth.

Day-of-week conventions, default load and wire encodings.
All schedule/recurrence logic must import from here.
"""

# Origin-zero, Sunday-first (remote/wire): 0=Sunday ... 6=Saturday
REMOTE_DAY_MIN = 0
REMOTE_DAY_MAX = 6
REMOTE_SUNDAY = 0

# Origin-one, Monday-first (ISO, internal): 1=Monday ... 7=Sunday
ISO_DAY_MIN = 1
ISO_DAY_MAX = 7
ISO_SUNDAY = 7

DEFAULT_LOAD_MULTIPLIER = 1.0

WIRE_DATE_FORMAT = "%Y-%m-%d"
WIRE_TIME_FORMAT = "%H:%M:%S"

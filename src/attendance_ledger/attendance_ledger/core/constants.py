"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Column widths, mirrored in database/schema.sql.
MAX_NAME_LENGTH = 100
MAX_CONTACT_LENGTH = 255
MAX_EXTERNAL_ID_LENGTH = 50
MAX_NOTES_LENGTH = 1000

PERCENTAGE_PLACES = 2

# MySQL server error numbers the storage layer translates.
ER_DUP_ENTRY = 1062
ER_LOCK_WAIT_TIMEOUT = 1205
ER_LOCK_DEADLOCK = 1213
ER_NO_REFERENCED_ROW = 1452

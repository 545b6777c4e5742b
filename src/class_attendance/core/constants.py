"""Constants and defaults."""

ROSTER_NAME_COLUMN = "Name"
ALLOWED_ROSTER_EXTENSIONS = {"xlsx"}

# MySQL error number for a duplicate key on a UNIQUE index.
MYSQL_DUPLICATE_ENTRY = 1062

MUTABLE_PROFILE_FIELDS = (
    "name",
    "phone",
    "school",
    "class",
    "section",
    "college",
    "year",
    "branch",
    "role",
)

PROFILE_FIELDS = ("institutionType",) + MUTABLE_PROFILE_FIELDS

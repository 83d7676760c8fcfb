"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (patterns, messages, sort fields, UI sizing).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

# NANP-style XXX-XXX-XXXX, ASCII digits only; matched with re.fullmatch
PHONE_PATTERN = r"[0-9]{3}-[0-9]{3}-[0-9]{4}"

INVALID_PHONE_MESSAGE = "Invalid phone number format! Please use XXX-XXX-XXXX."

# Label shown in the sort selector -> Entry attribute (order is the selector order)
SORT_FIELDS = {
    "First Name": "first_name",
    "Last Name": "last_name",
    "Phone Number": "phone_number",
}

WINDOW_TITLE = "Phone Book"

# maximum number of log lines kept in the Logs panel (oldest trimmed)
LOG_MAX_LINES = 1000

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Desktop notification display time (seconds)
NOTIFY_TIMEOUT_SEC = 5

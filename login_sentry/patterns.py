"""Login Sentry - Constants and patterns"""

VERSION = "1.0.0"

# The log format carries no year, so every timestamp is read in this one
DEFAULT_YEAR = 2021

# Frequency rule: more than 3 logins by one unauthorized user within 20s
FREQUENCY_MAX_EVENTS = 3
FREQUENCY_WINDOW_SECONDS = 20

# Positional auth log layout (0-based token indexes)
#   Jun 10 03:32:36 host sshd[4412]: Accepted password for bob from 10.0.0.7 port 22 ssh2
FIELD_POSITIONS = {
    'month': 0,
    'day': 1,
    'time': 2,
    'user': 8,
    'address': 10,
}
MIN_TOKENS = max(FIELD_POSITIONS.values()) + 1

# Abbreviated month first, full month name second
TIMESTAMP_FORMATS = [
    '%Y %b %d %H:%M:%S',
    '%Y %B %d %H:%M:%S',
]

# Default lookup files, read from the working directory
BANNED_IPS_FILE = 'banned_ips.txt'
AUTHORIZED_USERS_FILE = 'authorized_users.txt'

URL_SCHEMES = ('http', 'https')
DEFAULT_PORTS = {
    'http': '80',
    'https': '443',
}
FETCH_TIMEOUT_SECONDS = 30

# Report messages
MESSAGES = {
    'banned_address': "Hacking due to banned IP. Line: {line}",
    'frequency': "Hacking due to frequency. Line: {line}",
    'summary': "Processed {lines} lines. Found {attempts} possible hacking attempts.",
}

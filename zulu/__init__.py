__version__ = '0.1.0'

# Time token components
TIME_SEPARATOR = ':'
TIME_FIELDS = ('hours', 'minutes')
FIELD_MAX = 255                         # fields parse as unsigned 8-bit values

# Accepted meridian literals, exact case
MERIDIAN_TOKENS = {
    'AM': 'AM', 'am': 'AM',
    'PM': 'PM', 'pm': 'PM',
}

# 24-hour HH:MM, same as strftime's %R
DEFAULT_TIME_FORMAT = '%H:%M'

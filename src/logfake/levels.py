"""
Log severity levels understood by the fake.

The eight fixed levels are listed most severe first. The fake never
filters on severity; any other string is accepted through log()/write()
and stored verbatim.
"""

EMERGENCY = 'emergency'    # System is unusable
ALERT = 'alert'            # Action must be taken immediately
CRITICAL = 'critical'      # Critical conditions
ERROR = 'error'            # Runtime errors
WARNING = 'warning'        # Exceptional occurrences that are not errors
NOTICE = 'notice'          # Normal but significant events
INFO = 'info'              # Interesting events
DEBUG = 'debug'            # Detailed debug information

LEVELS = (EMERGENCY, ALERT, CRITICAL, ERROR, WARNING, NOTICE, INFO, DEBUG)

import datetime

Seconds = float | int

Timeout = Seconds | datetime.timedelta

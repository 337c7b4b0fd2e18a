"""
Settings for the exchange app.
Values come from the environment, falling back to the reference deployment.
"""

import os


CBR_DAILY_URL = os.getenv("CBR_DAILY_URL", "https://www.cbr-xml-daily.ru/daily_json.js")

# Local snapshot of the last successful response
RATES_CACHE_PATH = os.getenv("RATES_CACHE_PATH", "/tmp/daily_json.js")
RATES_CACHE_TTL = int(os.getenv("RATES_CACHE_TTL", str(60 * 60)))

RATES_REQUEST_TIMEOUT = float(os.getenv("RATES_REQUEST_TIMEOUT", "10"))

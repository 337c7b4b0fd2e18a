import logging
from typing import Optional

import requests

from apps.exchange.domain.errors import ExternalSourceError
from apps.exchange.domain.interfaces import BaseRateSource, BaseSnapshotStore

logger = logging.getLogger(__name__)


class CbrDailyProvider(BaseRateSource):
    """
    Central Bank of Russia daily rates feed (daily_json.js).
    Every rate is quoted against RUB.
    """

    def __init__(self, url: str, timeout: float = 10, store: Optional[BaseSnapshotStore] = None):
        self.url = url
        self.timeout = timeout
        self.store = store

    def fetch(self) -> bytes:
        """
        Download the current rates document.

        The raw body is saved to the snapshot store before it is returned.
        A failed save is logged by the store and otherwise ignored.

        Returns:
            Raw response body

        Raises:
            ExternalSourceError: timeout, connection error, non-2xx status,
                or a body that is not JSON
        """
        logger.info(f"Fetching exchange rates from {self.url}")

        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            # Only the shape check happens later; reject non-JSON bodies here
            response.json()
        except requests.exceptions.Timeout as e:
            raise ExternalSourceError(f"Timeout calling {self.url}") from e
        except requests.exceptions.HTTPError as e:
            raise ExternalSourceError(f"HTTP error from {self.url}: {e}") from e
        except ValueError as e:
            raise ExternalSourceError(f"Invalid response from {self.url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise ExternalSourceError(f"Could not reach {self.url}: {e}") from e

        body = response.content
        if self.store is not None:
            self.store.write(body)

        return body

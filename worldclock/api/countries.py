"""HTTP client for the countries+states+cities dataset."""

import httpx
from worldclock.config import settings
from worldclock.errors import FetchFailed
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)


class CountriesClient:
    """Client downloading the compressed geography dataset."""

    def __init__(self, url: str = None):
        """
        Initialize dataset client.

        Args:
            url: Dataset URL (default: settings.dataset_url)
        """
        self.url = url or settings.dataset_url

        # No explicit timeout: httpx defaults apply
        self.client = httpx.Client(
            headers={"Accept": "application/octet-stream"},
            follow_redirects=True,
        )

    def fetch_dataset(self) -> bytes:
        """
        Download the raw dataset.

        Returns:
            Response body, still gzip-compressed

        Raises:
            FetchFailed: On transport errors or a non-success status
        """
        try:
            logger.info(f"Fetching dataset from {self.url}")
            response = self.client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error fetching dataset: {e.response.status_code}")
            raise FetchFailed(
                f"Dataset request returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Error fetching dataset: {e}")
            raise FetchFailed(f"Dataset request failed: {e}") from e

        logger.info(f"Fetched {len(response.content)} bytes")
        return response.content

    def close(self):
        """Close HTTP client."""
        self.client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

"""Catalog building: decompress, parse and flatten the geography dataset."""

import gzip
import json
import zlib
from typing import Callable, List, Optional

from pydantic import TypeAdapter, ValidationError

from worldclock.api.countries import CountriesClient
from worldclock.config import settings
from worldclock.data.flags import flag_for
from worldclock.data.models import Catalog, CityEntry, CountryRecord
from worldclock.errors import DecompressFailed, ParseFailed
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)

_countries_adapter = TypeAdapter(List[CountryRecord])


def decompress_dataset(payload: bytes) -> bytes:
    """
    Decompress a gzip payload.

    Raises:
        DecompressFailed: If the payload is corrupt or not gzip at all
    """
    try:
        return gzip.decompress(payload)
    except (OSError, EOFError, zlib.error) as e:
        logger.error(f"Could not decompress dataset: {e}")
        raise DecompressFailed(f"Dataset is not valid gzip: {e}") from e


def parse_dataset(raw: bytes) -> List[CountryRecord]:
    """
    Decode UTF-8 JSON and validate it as a list of countries.

    Raises:
        ParseFailed: On bad encoding, bad JSON or an unexpected shape
    """
    try:
        document = json.loads(raw.decode("utf-8"))
        return _countries_adapter.validate_python(document)
    except UnicodeDecodeError as e:
        logger.error(f"Dataset is not UTF-8: {e}")
        raise ParseFailed(f"Dataset is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Dataset is not JSON: {e}")
        raise ParseFailed(f"Dataset is not valid JSON: {e}") from e
    except RecursionError as e:
        logger.error("Dataset is nested too deeply")
        raise ParseFailed("Dataset is nested too deeply to parse") from e
    except ValidationError as e:
        logger.error(f"Dataset has unexpected shape: {e.error_count()} errors")
        raise ParseFailed(f"Dataset has unexpected shape: {e}") from e


def compose_label(flag: str, entry: CityEntry) -> str:
    """Selection label, e.g. ``"🇯🇵 Japan - Shibuya, Tokyo"``."""
    return f"{flag} {entry.country} - {entry.city}, {entry.state}"


def flatten_countries(
    countries: List[CountryRecord], fallback_flag: Optional[str] = None
) -> Catalog:
    """
    Flatten country -> state -> city records into a label lookup.

    Records are walked in document order; a later duplicate label replaces
    the earlier entry.

    Args:
        countries: Parsed dataset
        fallback_flag: Glyph for countries without a known flag

    Returns:
        Catalog keyed by composed label
    """
    fallback_flag = fallback_flag or settings.fallback_flag
    catalog: Catalog = {}

    for country in countries:
        flag = flag_for(country.name, fallback_flag)
        for state in country.states:
            for city in state.cities:
                entry = CityEntry(
                    country=country.name,
                    state=state.name,
                    city=city.name,
                    timezone=city.timezone,
                    latitude=city.latitude,
                    longitude=city.longitude,
                )
                catalog[compose_label(flag, entry)] = entry

    return catalog


class CatalogBuilder:
    """Builds a fresh catalog from the remote dataset."""

    def __init__(
        self,
        client_factory: Callable[[], CountriesClient] = CountriesClient,
        fallback_flag: Optional[str] = None,
    ):
        self.client_factory = client_factory
        self.fallback_flag = fallback_flag or settings.fallback_flag

    def build(self) -> Catalog:
        """
        Fetch, decompress, parse and flatten the dataset.

        Raises:
            CatalogError: FetchFailed, DecompressFailed or ParseFailed
        """
        with self.client_factory() as client:
            payload = client.fetch_dataset()

        countries = parse_dataset(decompress_dataset(payload))
        catalog = flatten_countries(countries, self.fallback_flag)
        logger.info(
            f"Built catalog with {len(catalog)} entries from {len(countries)} countries"
        )
        return catalog

"""CSV export of flattened records."""

import csv
import logging
from pathlib import Path
from typing import Iterable, Union

from pydantic import BaseModel

from vivatech_scraper.errors import ExportError

logger = logging.getLogger(__name__)


def _cell(value):
    """Booleans are written lowercase, everything else as is."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def write_csv(
    records: Iterable[BaseModel],
    filepath: Union[str, Path],
    columns: list[str],
) -> int:
    """Write records to a CSV file, header first, overwriting any existing file.

    Records are dumped by alias, so their aliases must match `columns`.

    Returns:
        Number of data rows written.

    Raises:
        ExportError: the file cannot be created or written.
    """
    filepath = Path(filepath)
    count = 0

    try:
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=columns)
            writer.writeheader()
            for record in records:
                row = record.model_dump(by_alias=True)
                writer.writerow({key: _cell(value) for key, value in row.items()})
                count += 1
    except (OSError, UnicodeError) as e:
        raise ExportError(f"Failed to write CSV file at {filepath}: {e}") from e

    logger.info("Successfully wrote %d records to CSV file: %s", count, filepath)
    return count

"""Load and save the persisted {start, prices} price series."""

import json
import logging
from pathlib import Path
from typing import Union

from holding_metrics.core.exceptions import SeriesLoadError
from holding_metrics.domain.models import PriceSeries
from holding_metrics.services.series_store import parse_series

logger = logging.getLogger(__name__)


def load_series(path: Union[str, Path]) -> PriceSeries:
    """
    Read a price series JSON file and parse it.

    I/O and JSON errors surface as SeriesLoadError; malformed content
    surfaces as ValidationError from parse_series.
    """
    path = Path(path)
    logger.info("Loading price series from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise SeriesLoadError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise SeriesLoadError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e

    series = parse_series(raw)
    logger.info(
        "Loaded %d days of prices (%s to %s)",
        series.total_days,
        series.start_date.isoformat(),
        series.end_date.isoformat(),
    )
    return series


def dump_series(series: PriceSeries, path: Union[str, Path]) -> None:
    """Write a price series in the persisted JSON format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(series.to_raw(), f, separators=(",", ":"))

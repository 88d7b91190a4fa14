"""Elevation provider backed by a local DEM GeoTIFF.

Offline alternative to the Google Elevation API:
- Raster band 1 is read into a NumPy array once, on first lookup
- WGS84 coordinates are transformed to the raster's native CRS in one batch
- Lookup is nearest-cell via the inverse affine transform
- Thread-safe lazy loading (lookups run in worker threads)

A point outside the raster, or on a nodata/NaN cell, fails the whole batch:
the enricher never receives partial results.
"""

import asyncio
import logging
import os
import threading
import time
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import rasterio
from rasterio.warp import transform

from route_planner.constants import ProviderConfig
from route_planner.exceptions import ProviderError
from route_planner.model.coordinate import Coordinate

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"


class RasterElevationProvider:
    """ElevationProvider reading a single-band DEM raster.

    Example:
        provider = RasterElevationProvider(Path("data/dem.tif"))
        elevations = await provider.get_elevations(points)
    """

    def __init__(self, dem_path: Path = ProviderConfig.DEFAULT_DEM_PATH) -> None:
        self._dem_path = Path(dem_path)
        self._load_lock = threading.Lock()
        self._dem_crs: Optional[str] = None
        self._dem_array: Optional[np.ndarray] = None
        self._dem_nodata: Optional[float] = None
        self._dem_transform = None

    @classmethod
    def from_env(cls) -> "RasterElevationProvider":
        """Create a provider from ROUTE_PLANNER_DEM_PATH, falling back to data/dem.tif."""
        dem_path = os.environ.get(ProviderConfig.DEM_PATH_ENV)
        return cls(Path(dem_path) if dem_path else ProviderConfig.DEFAULT_DEM_PATH)

    @property
    def dem_path(self) -> Path:
        return self._dem_path

    @property
    def is_loaded(self) -> bool:
        """Check if DEM data has been fully loaded into memory."""
        return self._dem_transform is not None

    def _ensure_loaded(self) -> None:
        """Load DEM into memory on first access (thread-safe)."""
        if self.is_loaded:
            return

        with self._load_lock:
            if self.is_loaded:
                return

            if not self._dem_path.exists():
                raise ProviderError(f"DEM file not found at {self._dem_path}", provider="elevation", status="NOT_FOUND")

            logger.info(f"Loading DEM from {self._dem_path}...")
            start_time = time.time()

            with rasterio.open(self._dem_path) as dem:
                self._dem_crs = dem.crs.to_string() if dem.crs else WGS84
                self._dem_array = dem.read(1)
                self._dem_nodata = dem.nodata
                # Set last: is_loaded checks it
                self._dem_transform = dem.transform

            elapsed = time.time() - start_time
            logger.info(f"DEM loaded in {elapsed:.2f}s (shape: {self._dem_array.shape}, CRS: {self._dem_crs})")

    def elevations(self, points: Sequence[Coordinate]) -> list[float]:
        """Sample the raster at every point.

        Raises:
            ProviderError: If the raster is missing, or any point falls
                outside it or on a nodata/NaN cell.
        """
        if not points:
            return []
        self._ensure_loaded()

        lngs, lats = (list(axis) for axis in zip(*(p.lng_lat for p in points)))
        if self._dem_crs != WGS84:
            xs, ys = transform(WGS84, self._dem_crs, lngs, lats)
        else:
            xs, ys = lngs, lats

        rows_count, cols_count = self._dem_array.shape
        elevations: list[float] = []
        for point, x, y in zip(points, xs, ys):
            col, row = ~self._dem_transform * (x, y)
            col, row = int(np.floor(col)), int(np.floor(row))

            if row < 0 or row >= rows_count or col < 0 or col >= cols_count:
                raise ProviderError(
                    f"coordinates outside DEM bounds: lat={point.lat}, lng={point.lng}",
                    provider="elevation",
                    status="OUT_OF_BOUNDS",
                )

            elev = self._dem_array[row, col]
            if (self._dem_nodata is not None and elev == self._dem_nodata) or np.isnan(elev):
                raise ProviderError(
                    f"no elevation data at lat={point.lat}, lng={point.lng}",
                    provider="elevation",
                    status="NO_DATA",
                )
            elevations.append(float(elev))

        return elevations

    async def get_elevations(self, points: Sequence[Coordinate]) -> list[float]:
        return await asyncio.to_thread(self.elevations, points)

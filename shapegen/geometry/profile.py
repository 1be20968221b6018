"""2D cross-section profiles for bodies of revolution."""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np
from shapely.geometry import LineString

from shapegen.exceptions import InvalidParameterError
from shapegen.geometry import vector
from shapegen.validation import validate_segments, validate_size

logger = logging.getLogger(__name__)


class Profile:
    """Open polyline in the (distance from axis, height along axis) plane.

    Points are ordered from the bottom of the solid to the top. That order
    fixes which side of the curve is "outside": the outward normal is the
    tangent rotated clockwise by 90 degrees.

    Args:
        coords: Sequence of (r, y) points, at least two.

    Raises:
        InvalidParameterError: If the coordinates are not a finite (n, 2)
            array with n >= 2.
    """

    def __init__(self, coords: Sequence[tuple[float, float]] | np.ndarray):
        arr = np.array(coords, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise InvalidParameterError(
                "profile", f"expected (n, 2) coordinates, got shape {arr.shape}"
            )
        if len(arr) < 2:
            raise InvalidParameterError(
                "profile", f"need at least 2 points, got {len(arr)}"
            )
        if not np.all(np.isfinite(arr)):
            raise InvalidParameterError(
                "profile", "coordinates contain NaN or infinite values"
            )
        arr.setflags(write=False)
        self._coords = arr

    @property
    def coords(self) -> np.ndarray:
        """Return profile points as read-only array of shape (n, 2)."""
        return self._coords

    @property
    def n_points(self) -> int:
        """Return number of profile points."""
        return len(self._coords)

    @property
    def shapely(self) -> LineString:
        """Return the profile as a shapely LineString."""
        return LineString(self._coords)

    @property
    def length(self) -> float:
        """Return total polyline length."""
        return float(self.shapely.length)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return bounding box as (rmin, ymin, rmax, ymax)."""
        return tuple(float(b) for b in self.shapely.bounds)

    @property
    def is_simple(self) -> bool:
        """Return True if the polyline does not cross itself."""
        return bool(self.shapely.is_simple)

    def tangents(self) -> np.ndarray:
        """Estimate the (unnormalized) tangent at every point.

        Forward difference at the first point, backward difference at the
        last point and central difference everywhere else.

        Returns:
            Array of shape (n, 2) with (dr, dy) per point.
        """
        c = self._coords
        d = np.empty_like(c)
        d[0] = c[1] - c[0]
        d[-1] = c[-1] - c[-2]
        d[1:-1] = c[2:] - c[:-2]
        return d

    def normals(self) -> np.ndarray:
        """Return unit outward normals of shape (n, 2).

        The normal is the tangent ``(dr, dy)`` rotated to ``(dy, -dr)``.
        Where the tangent has zero length the normal falls back to the
        revolution axis: ``(0, -1)`` on the first half of the profile and
        ``(0, 1)`` on the second half.
        """
        d = self.tangents()
        tangents = np.column_stack([d, np.zeros(self.n_points)])
        # Rotating (dr, dy) clockwise in the profile plane is t x +z.
        n = vector.cross(tangents, (0.0, 0.0, 1.0))

        degenerate = vector.length(n) == 0.0
        if np.any(degenerate):
            logger.debug(
                "Zero-length tangent at %d profile point(s), using axis normals",
                int(degenerate.sum()),
            )
        upper = np.arange(self.n_points) >= self.n_points / 2
        fallback = np.zeros_like(n)
        fallback[:, 1] = np.where(upper, 1.0, -1.0)

        return vector.normalize(n, fallback=fallback)[:, :2]

    def __len__(self) -> int:
        return self.n_points

    def __repr__(self) -> str:
        return f"Profile(n_points={self.n_points}, bounds={self.bounds})"


def capsule_profile(radius: float, length: float, cap_segments: int) -> Profile:
    """Build the cross-section of a capsule.

    Traces the bottom hemisphere (centre ``(0, -length/2)``) from the south
    pole to the equator, then the top hemisphere (centre ``(0, +length/2)``)
    from the equator to the north pole. Each arc has ``cap_segments + 1``
    points; no extra point joins them, the cylindrical span is the straight
    segment between the two equator points.

    The bottom arc is parametrized over [-pi/2, 0], the same points as the
    [3pi/2, 2pi] range, so both equator points evaluate ``cos(0)`` and
    ``sin(0)`` exactly and sit at radius ``radius`` with no rounding drift.

    Args:
        radius: Hemisphere radius.
        length: Distance between the hemisphere centres.
        cap_segments: Arc resolution per hemisphere (>= 1).

    Returns:
        Profile with ``2 * (cap_segments + 1)`` points, using the truncated
        ``cap_segments``.

    Raises:
        InvalidParameterError: If a size is negative or not finite, or
            cap_segments is below 1 after truncation.
    """
    radius = validate_size("radius", radius)
    length = validate_size("length", length)
    cap_segments = validate_segments("cap_segments", cap_segments, 1)

    half_length = length / 2.0
    t = np.arange(cap_segments + 1) / cap_segments * (math.pi / 2.0)

    bottom_angles = t - math.pi / 2.0
    bottom = np.column_stack([
        np.cos(bottom_angles) * radius,
        np.sin(bottom_angles) * radius - half_length,
    ])
    top = np.column_stack([
        np.cos(t) * radius,
        np.sin(t) * radius + half_length,
    ])

    return Profile(np.vstack([bottom, top]))

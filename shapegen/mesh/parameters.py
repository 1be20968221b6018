"""Shape parameter configuration for the mesh builders."""

from __future__ import annotations

from typing import Any

from shapegen.exceptions import InvalidParameterError
from shapegen.validation import plain_number, validate_segments, validate_size


class _Parameters:
    """Immutable, validated parameter set with dict round-tripping."""

    _fields: tuple[str, ...] = ()

    def __init__(self, **raw):
        # stored as built-in int/float so to_dict() is always JSON-safe
        self._raw = {name: plain_number(value) for name, value in raw.items()}

    def to_dict(self) -> dict[str, Any]:
        """Return the parameters as they were given, before truncation.

        Numbers are returned as built-in ``int`` or ``float``.
        """
        return dict(self._raw)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Create parameters from a dictionary.

        Raises:
            InvalidParameterError: On unknown keys or invalid values.
        """
        unknown = set(data) - set(cls._fields)
        if unknown:
            raise InvalidParameterError(
                ", ".join(sorted(unknown)), f"unknown {cls.__name__} field"
            )
        return cls(**data)

    def _key(self) -> tuple:
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({args})"


class BoxParameters(_Parameters):
    """Configuration for an axis-aligned box centred on the origin.

    Segment counts are truncated toward zero, so ``2.9`` becomes ``2``.

    Args:
        width: Extent along x. Default: 1.
        height: Extent along y. Default: 1.
        depth: Extent along z. Default: 1.
        width_segments: Subdivisions along x (>= 1). Default: 1.
        height_segments: Subdivisions along y (>= 1). Default: 1.
        depth_segments: Subdivisions along z (>= 1). Default: 1.

    Raises:
        InvalidParameterError: If any value is out of range.

    Example:
        >>> params = BoxParameters(width=2, width_segments=3.7)
        >>> params.width_segments
        3
    """

    _fields = (
        "width",
        "height",
        "depth",
        "width_segments",
        "height_segments",
        "depth_segments",
    )

    def __init__(
        self,
        width: float = 1.0,
        height: float = 1.0,
        depth: float = 1.0,
        width_segments: int = 1,
        height_segments: int = 1,
        depth_segments: int = 1,
    ):
        self._width = validate_size("width", width)
        self._height = validate_size("height", height)
        self._depth = validate_size("depth", depth)
        self._width_segments = validate_segments("width_segments", width_segments, 1)
        self._height_segments = validate_segments(
            "height_segments", height_segments, 1
        )
        self._depth_segments = validate_segments("depth_segments", depth_segments, 1)
        super().__init__(
            width=width,
            height=height,
            depth=depth,
            width_segments=width_segments,
            height_segments=height_segments,
            depth_segments=depth_segments,
        )

    @classmethod
    def cube(cls, size: float = 1.0, segments: int = 1) -> BoxParameters:
        """Create parameters for a cube with equal subdivisions on every axis.

        Args:
            size: Edge length.
            segments: Subdivisions along each edge.

        Returns:
            BoxParameters for the cube.
        """
        return cls(size, size, size, segments, segments, segments)

    @property
    def width(self) -> float:
        """Extent along x."""
        return self._width

    @property
    def height(self) -> float:
        """Extent along y."""
        return self._height

    @property
    def depth(self) -> float:
        """Extent along z."""
        return self._depth

    @property
    def width_segments(self) -> int:
        """Truncated subdivisions along x."""
        return self._width_segments

    @property
    def height_segments(self) -> int:
        """Truncated subdivisions along y."""
        return self._height_segments

    @property
    def depth_segments(self) -> int:
        """Truncated subdivisions along z."""
        return self._depth_segments

    @property
    def n_vertices(self) -> int:
        """Number of vertices the box mesh will have."""
        w, h, d = self._width_segments, self._height_segments, self._depth_segments
        return 2 * ((w + 1) * (h + 1) + (h + 1) * (d + 1) + (d + 1) * (w + 1))

    @property
    def n_indices(self) -> int:
        """Number of triangle indices the box mesh will have."""
        w, h, d = self._width_segments, self._height_segments, self._depth_segments
        return 12 * (w * h + h * d + d * w)

    @property
    def is_degenerate(self) -> bool:
        """Return True if any extent is zero (zero-volume box)."""
        return 0.0 in (self._width, self._height, self._depth)


class CapsuleParameters(_Parameters):
    """Configuration for a capsule aligned with the y axis.

    Args:
        radius: Hemisphere and cylinder radius. Default: 1.
        length: Straight span between the hemisphere centres. Default: 1.
        cap_segments: Arc resolution per hemisphere (>= 1). Default: 4.
        radial_segments: Sides of the revolution (>= 3). Default: 8.

    Raises:
        InvalidParameterError: If any value is out of range.
    """

    _fields = ("radius", "length", "cap_segments", "radial_segments")

    def __init__(
        self,
        radius: float = 1.0,
        length: float = 1.0,
        cap_segments: int = 4,
        radial_segments: int = 8,
    ):
        self._radius = validate_size("radius", radius)
        self._length = validate_size("length", length)
        self._cap_segments = validate_segments("cap_segments", cap_segments, 1)
        self._radial_segments = validate_segments(
            "radial_segments", radial_segments, 3
        )
        super().__init__(
            radius=radius,
            length=length,
            cap_segments=cap_segments,
            radial_segments=radial_segments,
        )

    @classmethod
    def sphere(
        cls, radius: float = 1.0, cap_segments: int = 4, radial_segments: int = 8
    ) -> CapsuleParameters:
        """Create parameters for a zero-length capsule, i.e. a UV sphere."""
        return cls(radius, 0.0, cap_segments, radial_segments)

    @property
    def radius(self) -> float:
        """Hemisphere and cylinder radius."""
        return self._radius

    @property
    def length(self) -> float:
        """Straight span between the hemisphere centres."""
        return self._length

    @property
    def cap_segments(self) -> int:
        """Truncated arc resolution per hemisphere."""
        return self._cap_segments

    @property
    def radial_segments(self) -> int:
        """Truncated number of sides of the revolution."""
        return self._radial_segments

    @property
    def n_profile_points(self) -> int:
        """Number of points in the capsule cross-section."""
        return 2 * (self._cap_segments + 1)

    @property
    def n_vertices(self) -> int:
        """Number of vertices the capsule mesh will have."""
        return (self._radial_segments + 1) * self.n_profile_points

    @property
    def n_indices(self) -> int:
        """Number of triangle indices the capsule mesh will have."""
        return 6 * self._radial_segments * (self.n_profile_points - 1)

    @property
    def total_height(self) -> float:
        """Extent along y, pole to pole."""
        return self._length + 2.0 * self._radius

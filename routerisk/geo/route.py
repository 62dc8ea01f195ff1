"""Routes as ordered waypoint sequences."""

from typing import Iterable

from routerisk.geo.coordinate import Coordinate

MIN_WAYPOINTS = 2


class Route:
    """An append-only sequence of waypoints in travel order.

    Routes are built incrementally while collecting input and treated as
    read-only once handed to the analyzer.
    """

    def __init__(self, name: str = "Route"):
        self.name = name
        self._waypoints: list[Coordinate] = []

    @classmethod
    def from_points(
        cls,
        name: str,
        points: Iterable[Coordinate | tuple[float, float]],
    ) -> "Route":
        """Build a route from coordinates or (latitude, longitude) pairs."""
        route = cls(name)
        for point in points:
            if isinstance(point, Coordinate):
                route.add_waypoint(point)
            else:
                route.add_waypoint(*point)
        return route

    def add_waypoint(self, point: Coordinate | float, longitude: float | None = None) -> None:
        """Append a waypoint to the end of the route.

        Accepts either a Coordinate, or a latitude and longitude pair which is
        validated as a Coordinate first.

        Raises:
            InvalidCoordinate: If latitude/longitude are out of range.
            TypeError: If the arguments mix the two forms.
        """
        if isinstance(point, Coordinate):
            if longitude is not None:
                raise TypeError("longitude must not be given with a Coordinate")
            self._waypoints.append(point)
            return

        if longitude is None:
            raise TypeError("add_waypoint() needs a Coordinate or latitude and longitude")
        self._waypoints.append(Coordinate(float(point), float(longitude)))

    @property
    def waypoints(self) -> tuple[Coordinate, ...]:
        return tuple(self._waypoints)

    @property
    def waypoint_count(self) -> int:
        return len(self._waypoints)

    def is_valid(self) -> bool:
        """A route needs at least two waypoints to have a segment."""
        return len(self._waypoints) >= MIN_WAYPOINTS

    def __str__(self) -> str:
        lines = [f"Route: {self.name} ({len(self._waypoints)} waypoints)"]
        for index, waypoint in enumerate(self._waypoints, start=1):
            lines.append(f"  Point {index}: {waypoint}")
        return "\n".join(lines)

"""Exceptions raised by the route risk engine."""


class RouteRiskError(ValueError):
    """Base exception for invalid route risk inputs."""


class InvalidCoordinate(RouteRiskError):
    """Raised when a latitude or longitude is outside its valid range."""

    def __init__(self, field: str, value: float, minimum: float, maximum: float):
        self.field = field
        self.value = value
        super().__init__(
            f"{field.capitalize()} must be between {minimum:g} and {maximum:g} degrees (got {value})"
        )


class InvalidHazardZone(RouteRiskError):
    """Raised when a hazard zone is constructed with a non-positive radius."""


class InvalidRoute(RouteRiskError):
    """Raised when a route cannot be analyzed."""


class InputParseError(RouteRiskError):
    """Raised when route or hazard zone text cannot be parsed."""

    def __init__(self, line_number: int, line: str, message: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Line {line_number}: {message} ({line!r})")

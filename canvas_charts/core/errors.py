"""Exception hierarchy for chart construction and rendering."""


class ChartError(Exception):
    """Base exception for canvas_charts errors."""
    pass


class DatasetError(ChartError, ValueError):
    """A data point or chart configuration failed validation."""
    pass


class SurfaceError(ChartError):
    """The drawing backend behind a surface failed."""
    pass


class ChartFileError(ChartError):
    """A chart definition file is missing or malformed."""
    pass

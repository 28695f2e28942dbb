"""Exception types raised by jobfit."""


class JobFitError(Exception):
    """Base class for jobfit errors."""


class ExportError(JobFitError):
    """Rendering or compiling the portable document failed."""

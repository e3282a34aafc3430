class HealthAnalysisError(Exception):
    """Base class for failures while interpreting an analysis response."""


class ParseFailure(HealthAnalysisError):
    """Neither the full parse nor the partial extraction recovered the ingredients."""


class UnprocessableResponse(HealthAnalysisError):
    """The response carried no ingredients through any path."""


class InvalidScanResponse(HealthAnalysisError):
    """The detection response does not have the expected shape."""

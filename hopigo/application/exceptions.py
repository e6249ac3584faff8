class AvailabilityUpstreamError(RuntimeError):
    """Raised when the availability source fails (timeouts, network errors, service unavailable)."""
    pass


class AvailabilityContractError(RuntimeError):
    """Raised when the availability source returns data in an unexpected shape."""
    pass

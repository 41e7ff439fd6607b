class InvalidConfiguration(ValueError):
    """Bad page/frame counts, an out-of-range page, or a malformed scenario."""


class PolicyStructuralViolation(RuntimeError):
    """An internal invariant of the replacement bookkeeping was broken."""


class UnsupportedPolicy(ValueError):
    """The requested replacement algorithm is not one the engine knows."""

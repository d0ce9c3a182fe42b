# file: src/module2_error_injection/errors.py

"""
Error injection exceptions.
"""


class InvalidProbabilityError(ValueError):
    """Raised when an error probability is not a number in [0, 1]."""
    pass

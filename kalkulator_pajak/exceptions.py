class ValidationError(ValueError):
    """Raised when console input cannot be used for a tax calculation."""

"""Compare configuration error."""


class CompareConfigError(Exception):
    """Raised when compare configuration is invalid."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Compare configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)

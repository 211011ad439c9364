"""Error types surfaced to the user."""


class NamingError(Exception):
    """Base class for invalid user options."""


class ConflictingOptionsError(NamingError):
    """Raised when a filter asks for both hungarian notation and camel case."""

    def __init__(self) -> None:
        """Build the user-facing message."""
        super().__init__(
            'In option "--filter", at most one of the two, '
            "hungarian notation (h) and camel case (c) can appear."
        )


class UnsupportedOutputOptionError(NamingError):
    """Raised when an output option has no renderer."""

    def __init__(self, option: str) -> None:
        """Build the message naming the rejected option."""
        super().__init__(f'In option "--output", "{option}" is not a target format.')
        self.option = option


class InvalidLocatorError(NamingError):
    """Raised when a locator cannot be split or compiled."""

    def __init__(self, locator: str, reason: str) -> None:
        """Build the message naming the rejected locator."""
        super().__init__(f'Invalid locator "{locator}": {reason}')
        self.locator = locator


class NoInputError(NamingError):
    """Raised when there are no files and stdin is a terminal."""

    def __init__(self) -> None:
        """Build the user-facing message."""
        super().__init__(
            "naming: no input was found. Enter -h or --help for help information."
        )


class InvalidConfigError(NamingError):
    """Raised when a configuration file does not hold a mapping."""

    def __init__(self, path: str) -> None:
        """Build the message naming the rejected file."""
        super().__init__(f'Invalid configuration "{path}": expected a mapping')
        self.path = path

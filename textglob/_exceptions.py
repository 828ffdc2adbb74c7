class PathError(OSError):
    """Base class for pattern resolution failures. Subclass of OSError."""


class NonUtf8PathError(PathError):
    """Raised when a pattern or name cannot be decoded as UTF-8 text."""
    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Path is not valid UTF-8 text: {path!r}")


class WildcardInParentError(PathError):
    """Raised when a wildcard appears anywhere but the final path component."""
    def __init__(self, pattern: str, component: str) -> None:
        self.pattern = pattern
        self.component = component
        super().__init__(
            f"Wildcard in parent component {component!r} of pattern {pattern!r}; "
            "wildcards are only allowed in the last component."
        )


class NonexistentParentError(PathError):
    """Raised when the directory that should contain the matches does not exist."""
    def __init__(self, pattern: str, parent: str) -> None:
        self.pattern = pattern
        self.parent = parent
        super().__init__(
            f"Parent directory {parent!r} of pattern {pattern!r} does not exist."
        )


class PatternCompileError(PathError):
    """Raised when a wildcard pattern cannot be compiled into a matcher."""
    def __init__(self, pattern: str, message: str) -> None:
        self.pattern = pattern
        self.message = message
        super().__init__(f"Cannot compile pattern {pattern!r}: {message}")

class ModuleResolutionError(Exception):
    """Base class for failures while building a module graph."""

    def __init__(self, specifier: str, reason: str) -> None:
        super().__init__(f"{specifier}: {reason}")
        self.specifier = specifier
        self.reason = reason


class ModuleLoadError(ModuleResolutionError):
    """A module's source could not be read."""


class ModuleParseError(ModuleResolutionError):
    """A module's source has syntax errors."""


class SpecifierError(ModuleResolutionError):
    """An import specifier cannot be mapped to a module under the static root."""

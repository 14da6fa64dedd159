class ThemeError(Exception):
    """Base class for every failure raised while building a theme."""


class MalformedColor(ThemeError, ValueError):
    """A hex color or opacity byte could not be parsed."""

    def __init__(self, value, reason="unsupported hex color"):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class UnknownColorRole(ThemeError, LookupError):
    """A role template references a color that is not bound."""

    def __init__(self, key, role):
        self.key = key
        self.role = role
        super().__init__(f"unknown color role {role!r} for key {key!r}")


class ThemeConfigError(ThemeError, ValueError):
    """Palette configuration or role template data is missing or invalid."""

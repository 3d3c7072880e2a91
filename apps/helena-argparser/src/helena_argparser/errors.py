"""Custom exception hierarchy for helena-argparser."""


class HelenaError(Exception):
    """Base exception for app-specific failures."""


class DescriptionError(ValueError, HelenaError):
    """A program description could not be built from the given fields."""


class ResourceExhaustedError(HelenaError):
    """An owned sequence could not grow. Fatal; there is no recovery path."""


class ConfigError(ValueError, HelenaError):
    """Environment configuration errors."""


class BuildError(HelenaError):
    """CMake is missing or one of the build steps failed."""

"""Literal constants used by helena-argparser."""

APP_NAME = "helena"
APP_OVERVIEW = (
    "Builds the Helena language from its source or executes one of the phases "
    "of the compilation process."
)
LOGGER_NAME = "helena_argparser"

HELP_TEMPLATE = "OVERVIEW: {overview}\nUSAGE: {name}"
HELP_DOCUMENTATION = "Provide assistance on how to use the program."

# Owned sequences start empty and jump straight to this many slots.
MIN_SEQUENCE_CAPACITY = 4

DEFAULT_BUILD_DIR_NAME = "build"
CMAKE_EXECUTABLE = "cmake"

SOURCE_DIR_ENV_VAR = "HELENA_SOURCE_DIR"
BUILD_DIR_ENV_VAR = "HELENA_BUILD_DIR"
CMAKE_ENV_VAR = "HELENA_CMAKE"
LOG_FILE_ENV_VAR = "HELENA_LOG_FILE"

ERROR_PREFIX = "Error:"

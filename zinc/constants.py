"""Shared constants for the ZINC translator."""

VERSION = "0.0.1-dev"
NAME = "zinc"

IMPORT_MARKER = "using zincstd;"

# Characters that may precede a keyword for it to count as a construct.
BOUNDARY_CHARS = frozenset(" ;}{")

DEFAULT_TRANSLATION_FILE = "zinc_to.cpp"
DEFAULT_BINARY_FILE = "zinc_output"
DEFAULT_COMPILER = "g++"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_SOURCE = 2

# Scripts are read and translations written with the same codec so that
# bytes which are not valid UTF-8 pass through unchanged.
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"

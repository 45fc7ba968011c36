"""Tag and attribute names recognized in documentation comments."""

EXAMPLE = "example"
SUMMARY = "summary"
URL = "url"
VALUE = "value"
SEE = "see"
HEADER = "header"
DESCRIPTION = "description"

NAME = "name"
CREF = "cref"

# Auto-generated example keys are EXAMPLE_KEY_PREFIX + 1-based index.
EXAMPLE_KEY_PREFIX = "example"

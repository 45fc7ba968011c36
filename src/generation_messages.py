"""Message templates for documentation errors."""

PROVIDE_EITHER_VALUE_OR_URL_TAG = (
    "Provide either value or url tag for example, not both."
)
PROVIDE_VALUE_FOR_EXAMPLE = (
    "Provide value for the example. An example must provide either a value or url."
)
INVALID_EXAMPLE_FRAGMENT = 'Value of field "{0}" is not a valid example fragment: {1}'
DUPLICATE_KEY = 'Duplicate {0} key "{1}".'
MISSING_NAME_ATTRIBUTE = "Missing name attribute for {0} tag."
MISSING_CREF = "Missing cref for {0} tag."
INVALID_CREF = 'Cref "{0}" is not a valid {1} reference.'
TYPE_NOT_FOUND = (
    'Type "{0}" could not be found. '
    "Ensure that it exists in one of the following assemblies: {1}"
)
FIELD_NOT_FOUND = 'Field "{0}" could not be found for type: "{1}".'
ASSEMBLY_LOAD_FAILED = 'Assembly "{0}" could not be loaded: {1}'
UNDOCUMENTED_GENERIC_TYPE = (
    'Generic type "{0}" needs {1} type argument cref(s) listed after it.'
)
NOT_A_GENERIC_TYPE = 'Type "{0}" cannot take generic type arguments: {1}'

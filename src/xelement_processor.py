"""Convert ``<example>`` and ``<header>`` documentation tags to OpenAPI objects.

Both conversions are all-or-nothing: the first invalid tag raises and no
partial mapping is returned.
"""

import logging
from typing import Any

import yaml
from lxml import etree

from src import known_xml_strings as tags
from src.documentation_errors import InvalidExampleError, InvalidHeaderError
from src.element_value import element_value, remove_blank_lines
from src.generation_messages import (
    DUPLICATE_KEY,
    INVALID_CREF,
    INVALID_EXAMPLE_FRAGMENT,
    MISSING_CREF,
    MISSING_NAME_ATTRIBUTE,
    PROVIDE_EITHER_VALUE_OR_URL_TAG,
    PROVIDE_VALUE_FOR_EXAMPLE,
)
from src.openapi_models import OpenApiExample, OpenApiHeader
from src.parse_example_value import parse_example_value
from src.schema_reference_registry import SchemaReferenceRegistry
from src.type_fetcher import TypeFetcher

logger = logging.getLogger(__name__)


def get_openapi_examples(
    element: etree._Element, type_fetcher: TypeFetcher
) -> dict[str, OpenApiExample]:
    """Build examples keyed by name (or ``example1``, ``example2``, ...)."""
    examples: dict[str, OpenApiExample] = {}
    counter = 1
    for example_element in element.iterdescendants(tags.EXAMPLE):
        example = _to_openapi_example(example_element, type_fetcher)
        if example is None:
            logger.debug("Skipping empty example on line %s", example_element.sourceline)
            continue

        name = (example_element.get(tags.NAME) or "").strip()
        if not name:
            name = f"{tags.EXAMPLE_KEY_PREFIX}{counter}"
            counter += 1
        if name in examples:
            raise InvalidExampleError(DUPLICATE_KEY.format(tags.EXAMPLE, name))
        examples[name] = example
    return examples


def get_openapi_headers(
    element: etree._Element,
    type_fetcher: TypeFetcher,
    schema_reference_registry: SchemaReferenceRegistry,
) -> dict[str, OpenApiHeader]:
    """Build response headers keyed by their ``name`` attribute."""
    headers: dict[str, OpenApiHeader] = {}
    for header_element in element.iterchildren(tags.HEADER):
        name = (header_element.get(tags.NAME) or "").strip()
        if not name:
            raise InvalidHeaderError(MISSING_NAME_ATTRIBUTE.format(tags.HEADER))
        if name in headers:
            raise InvalidHeaderError(DUPLICATE_KEY.format(tags.HEADER, name))

        crefs = _listed_crefs(header_element)
        if not crefs:
            raise InvalidHeaderError(MISSING_CREF.format(tags.HEADER))
        header_type = type_fetcher.load_type_from_cref_values(crefs)

        description = None
        description_element = header_element.find(tags.DESCRIPTION)
        if description_element is not None:
            description = remove_blank_lines(element_value(description_element))

        headers[name] = OpenApiHeader(
            description=description,
            schema=schema_reference_registry.find_or_add_reference(header_type),
        )
    return headers


def _to_openapi_example(
    example_element: etree._Element, type_fetcher: TypeFetcher
) -> OpenApiExample | None:
    """Convert one ``<example>``; returns None for an empty tag."""
    if len(example_element) == 0 and not element_value(example_element):
        return None

    summary_element = example_element.find(tags.SUMMARY)
    value_element = example_element.find(tags.VALUE)
    url_element = example_element.find(tags.URL)

    if value_element is not None and url_element is not None:
        raise InvalidExampleError(PROVIDE_EITHER_VALUE_OR_URL_TAG)

    example = OpenApiExample()
    if summary_element is not None:
        example.summary = element_value(summary_element)

    if url_element is not None:
        example.external_value = element_value(url_element)
        return example

    if value_element is None:
        raise InvalidExampleError(PROVIDE_VALUE_FOR_EXAMPLE)
    example.value = _example_value(value_element, type_fetcher)
    return example


def _example_value(value_element: etree._Element, type_fetcher: TypeFetcher) -> Any:
    """Resolve the inline text or the cref'd field inside ``<value>``."""
    inline = element_value(value_element)
    if inline:
        return inline

    crefs = [_cref_of(see) for see in value_element.iterdescendants(tags.SEE)]
    cref = next((c for c in crefs if c), None)
    if cref is None:
        raise InvalidExampleError(PROVIDE_VALUE_FOR_EXAMPLE)

    try:
        field = type_fetcher.resolve_field(cref)
    except ValueError as exc:
        raise InvalidExampleError(INVALID_CREF.format(cref, "field")) from exc

    if not isinstance(field.value, str):
        return field.value
    try:
        return parse_example_value(field.value)
    except yaml.YAMLError as exc:
        raise InvalidExampleError(
            INVALID_EXAMPLE_FRAGMENT.format(field.name, exc)
        ) from exc


def _listed_crefs(header_element: etree._Element) -> list[str]:
    """Return the header's own cref followed by any ``<see cref>`` crefs."""
    crefs = [_cref_of(header_element)]
    crefs.extend(_cref_of(see) for see in header_element.iterchildren(tags.SEE))
    return [c for c in crefs if c]


def _cref_of(element: etree._Element) -> str:
    return (element.get(tags.CREF) or "").strip()

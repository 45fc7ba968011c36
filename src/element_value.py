"""Logic for reading the text content of documentation elements."""

from lxml import etree


def element_value(element: etree._Element | None) -> str:
    """Return all text inside an element (descendants included), trimmed."""
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def remove_blank_lines(text: str) -> str:
    """Drop lines that contain only whitespace."""
    return "\n".join(line for line in text.splitlines() if line.strip())

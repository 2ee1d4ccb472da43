import xml.etree.ElementTree as ET

import pytest
import yaml

from wfsapi.errors import UnsupportedFormatError
from wfsapi.formats import F_GEOJSON, F_HTML, F_JSON, F_XML, F_YAML
from wfsapi.rendering import ATOM_NS, render, to_xml

PAYLOAD = {
    "title": "Demo",
    "enabled": True,
    "missing": None,
    "conformsTo": ["a", "b"],
    "extent": {"spatial": {"bbox": [[1.0, 2.0, 3.0, 4.0]]}},
    "links": [{"href": "http://host/?f=json", "rel": "self", "type": F_JSON, "title": "This document"}],
}


def test_to_xml_structure() -> None:
    root = ET.fromstring(to_xml("Demo", PAYLOAD).encode("utf-8"))

    assert root.tag == "Demo"
    assert root.findtext("title") == "Demo"
    assert root.findtext("enabled") == "true"
    assert root.find("missing") is None
    assert [element.text for element in root.findall("conformsTo")] == ["a", "b"]
    assert root.findtext("extent/spatial/bbox") == "1.0 2.0 3.0 4.0"
    link = root.find(f"{{{ATOM_NS}}}link")
    assert link.get("rel") == "self"
    assert link.get("href") == "http://host/?f=json"


@pytest.mark.parametrize("output_format", [F_JSON, F_GEOJSON])
def test_render_json(output_format: str) -> None:
    response = render(PAYLOAD, output_format, "Demo")

    assert response.media_type == output_format
    assert b'"conformsTo":["a","b"]' in response.body


def test_render_yaml_keeps_key_order() -> None:
    response = render(PAYLOAD, F_YAML, "Demo")

    assert response.media_type == F_YAML
    assert list(yaml.safe_load(response.body)) == list(PAYLOAD)


def test_render_xml() -> None:
    response = render(PAYLOAD, F_XML, "Demo")

    assert response.media_type == F_XML
    assert response.body.startswith(b'<?xml version="1.0" encoding="UTF-8"?>')


def test_render_html_without_template_uses_generic_page() -> None:
    response = render(PAYLOAD, F_HTML, "Demo")

    assert response.media_type == F_HTML
    body = response.body.decode("utf-8")
    assert "<h2>conformsTo</h2>" in body
    assert 'href="http://host/?f=json" rel="self"' in body


def test_render_unknown_format() -> None:
    with pytest.raises(UnsupportedFormatError):
        render(PAYLOAD, "application/pdf", "Demo")

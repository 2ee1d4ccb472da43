"""Encode format-agnostic documents into the negotiated output format."""

import xml.etree.ElementTree as ET

import yaml
from jinja2 import Environment, PackageLoader, select_autoescape
from starlette.responses import HTMLResponse, JSONResponse, Response

from wfsapi.errors import UnsupportedFormatError
from wfsapi.formats import F_GEOJSON, F_HTML, F_JSON, F_XML, F_YAML

ATOM_NS = "http://www.w3.org/2005/Atom"
RENDERED_FORMATS = (F_JSON, F_GEOJSON, F_XML, F_YAML, F_HTML)
DEFAULT_HTML_TEMPLATE = "document.html"

ET.register_namespace("atom", ATOM_NS)

_templates = Environment(
    loader=PackageLoader("wfsapi", "templates"),
    autoescape=select_autoescape(["html"]),
)


def _append(parent: ET.Element, key: str, value) -> None:
    if value is None:
        return

    if key == "links" and isinstance(value, list):
        for link in value:
            ET.SubElement(parent, f"{{{ATOM_NS}}}link", {name: str(item) for name, item in link.items()})
        return

    if isinstance(value, list):
        for item in value:
            if isinstance(item, list):
                ET.SubElement(parent, key).text = " ".join(str(part) for part in item)
            else:
                _append(parent, key, item)
        return

    element = ET.SubElement(parent, key)
    if isinstance(value, dict):
        for name, item in value.items():
            _append(element, name, item)
    elif isinstance(value, bool):
        element.text = str(value).lower()
    else:
        element.text = str(value)


def to_xml(root: str, payload: dict) -> str:
    element = ET.Element(root)
    for key, value in payload.items():
        _append(element, key, value)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(element, encoding="unicode")


def to_yaml(payload: dict) -> str:
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)


def render_html(template: str, **context) -> str:
    return _templates.get_template(template).render(**context)


def render(payload: dict, output_format: str, root: str, template: str | None = None, **context) -> Response:
    if output_format in (F_JSON, F_GEOJSON):
        return JSONResponse(payload, media_type=output_format)
    if output_format == F_YAML:
        return Response(to_yaml(payload), media_type=F_YAML)
    if output_format == F_XML:
        return Response(to_xml(root, payload), media_type=F_XML)
    if output_format == F_HTML:
        return HTMLResponse(render_html(template or DEFAULT_HTML_TEMPLATE, root=root, payload=payload, **context))
    raise UnsupportedFormatError(output_format, RENDERED_FORMATS)

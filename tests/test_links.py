import pytest
from pydantic import ValidationError

from wfsapi.formats import DEFAULT_REGISTRY, F_HTML, F_JSON, F_XML, F_YAML, DocumentKind
from wfsapi.links import (
    SELF_TITLE,
    Classification,
    Link,
    LinkBuilder,
    MarkSelfIfFormatMatches,
    NoTransform,
    Relation,
    build_links,
    build_url,
)


def test_build_url_appends_encoded_format() -> None:
    assert build_url("http://host/wfs3", "api", F_JSON) == "http://host/wfs3/api?f=application%2Fjson"
    assert build_url("http://host/wfs3/", "/", F_HTML) == "http://host/wfs3/?f=text%2Fhtml"


def test_build_links_one_per_format() -> None:
    links = build_links("http://host", "conformance", "Conformance as ", Classification.CONFORMANCE, [F_JSON, F_XML])

    assert [link.type for link in links] == [F_JSON, F_XML]
    assert all(link.rel == Relation.SERVICE for link in links)
    assert all(link.classification == Classification.CONFORMANCE for link in links)
    assert links[1].title == "Conformance as text/xml"
    assert links[1].href == "http://host/conformance?f=text%2Fxml"


def test_mark_self_promotes_only_the_matching_format() -> None:
    links = build_links(
        "http://host",
        "/",
        "This document as ",
        Classification.LANDING_PAGE,
        [F_JSON, F_XML, F_YAML],
        transform=MarkSelfIfFormatMatches(F_YAML),
    )

    selfs = [link for link in links if link.rel == Relation.SELF]
    assert len(selfs) == 1
    assert selfs[0].type == F_YAML
    assert selfs[0].title == SELF_TITLE
    assert [link.rel for link in links if link.type != F_YAML] == [Relation.SERVICE, Relation.SERVICE]


def test_no_transform_is_identity() -> None:
    link = Link(href="http://host", rel=Relation.SERVICE, type=F_JSON, title="t", classification=Classification.API)

    assert NoTransform().apply(F_JSON, link) is link


def test_links_are_immutable() -> None:
    link = Link(href="http://host", rel=Relation.SERVICE, type=F_JSON, title="t", classification=Classification.API)

    with pytest.raises(ValidationError):
        link.rel = Relation.SELF


def test_classification_is_not_serialized() -> None:
    link = Link(href="http://host", rel=Relation.SELF, type=F_JSON, title="t", classification=Classification.API)

    assert link.model_dump(mode="json") == {"href": "http://host", "rel": "self", "type": F_JSON, "title": "t"}


def test_link_builder_uses_registry_formats() -> None:
    builder = LinkBuilder("http://host/", DEFAULT_REGISTRY)

    links = builder.links_for("api", DocumentKind.API, "API as ", Classification.API)

    assert [link.type for link in links] == DEFAULT_REGISTRY.supported_formats(DocumentKind.API)
    assert links[0].href == "http://host/api?f=application%2Fjson"

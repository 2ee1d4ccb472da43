import re
import xml.etree.ElementTree as ET

import yaml
from fastapi.testclient import TestClient

ATOM_LINK = "{http://www.w3.org/2005/Atom}link"


def _check_json_landing_page(payload: dict) -> None:
    links = payload["links"]
    assert len(links) == 13

    landing = [link for link in links if re.match(r".*testserver/\?.*", link["href"])]
    assert [link["rel"] for link in landing if link["type"] == "application/json"] == ["self"]
    assert sorted(link["rel"] for link in landing if link["type"] != "application/json") == ["service"] * 3

    for path in ("api", "conformance", "collections"):
        rels = [link["rel"] for link in links if f"testserver/{path}?" in link["href"]]
        assert rels == ["service"] * 3


def test_landing_page(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    payload = response.json()
    assert payload["title"] == "Test WFS"
    _check_json_landing_page(payload)


def test_landing_page_alias_and_explicit_json(client: TestClient) -> None:
    _check_json_landing_page(client.get("/landing").json())
    _check_json_landing_page(client.get("/?f=json").json())
    _check_json_landing_page(client.get("/?f=application/json").json())


def test_landing_page_yaml(client: TestClient) -> None:
    response = client.get("/?f=application/x-yaml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/x-yaml")
    payload = yaml.safe_load(response.text)
    selfs = [link for link in payload["links"] if link["rel"] == "self"]
    assert len(selfs) == 1
    assert selfs[0]["type"] == "application/x-yaml"


def test_landing_page_xml(client: TestClient) -> None:
    response = client.get("/?f=text/xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/xml")
    root = ET.fromstring(response.content)
    assert root.tag == "LandingPage"
    assert root.findtext("title") == "Test WFS"
    links = root.findall(ATOM_LINK)
    assert len(links) == 13
    assert [link.get("type") for link in links if link.get("rel") == "self"] == ["text/xml"]


def test_landing_page_html(client: TestClient) -> None:
    response = client.get("/?f=html")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert re.search(r'id="collectionsHtmlLink" href=""', html)
    assert 'id="jsonApiLink" href="http://testserver/api?f=application%2Fjson"' in html


def test_landing_page_accept_header(client: TestClient) -> None:
    response = client.get("/", headers={"Accept": "foo/bar, text/html"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")


def test_landing_page_unacceptable_accept_header_falls_back_to_json(client: TestClient) -> None:
    response = client.get("/", headers={"Accept": "foo/bar"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")


def test_landing_page_unsupported_format(client: TestClient) -> None:
    response = client.get("/?f=application/pdf")

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "InvalidParameterValue"

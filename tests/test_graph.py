from datetime import datetime, timezone

import pytest
from rdflib import Literal, URIRef
from rdflib.namespace import DCTERMS, XSD

from static_ldp import graph as rdf
from static_ldp.constants import LDP_CONTAINS

SUBJECT = "http://localhost/collection/"
MODIFIED = datetime(2020, 5, 17, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def container_graph():
    return rdf.build_container_graph(SUBJECT, MODIFIED, ["a.ttl", "sub"])


def test_container_graph(container_graph):
    subject = URIRef(SUBJECT)
    children = set(container_graph.objects(subject, URIRef(LDP_CONTAINS)))
    assert children == {
        URIRef("http://localhost/collection/a.ttl"),
        URIRef("http://localhost/collection/sub"),
    }
    modified = container_graph.value(subject, DCTERMS.modified)
    assert modified.datatype == XSD.dateTime
    assert modified.toPython() == MODIFIED
    assert len(container_graph) == 3


def test_empty_container_graph():
    graph = rdf.build_container_graph(SUBJECT, MODIFIED, [])
    assert len(graph) == 1
    assert (URIRef(SUBJECT), DCTERMS.modified, Literal(MODIFIED)) in graph


@pytest.mark.parametrize('format_id', ['turtle', 'xml', 'nt', 'json-ld'])
def test_container_graph_survives_serialization(container_graph, format_id):
    data = rdf.serialize(container_graph, format_id)
    assert isinstance(data, bytes)
    parsed = rdf.parse(data, format_id, SUBJECT)
    assert set(parsed) == set(container_graph)


def test_parse_resolves_relative_iris():
    graph = rdf.parse(b'<> <http://purl.org/dc/terms/title> "x" .',
                      'turtle', 'http://localhost/note.ttl')
    assert graph.value(URIRef('http://localhost/note.ttl'),
                       DCTERMS.title) == Literal("x")


def test_parse_error():
    with pytest.raises(rdf.ParseError):
        rdf.parse(b"this is @not turtle <<<", "turtle", SUBJECT)


def test_parse_unknown_format():
    with pytest.raises(rdf.ParseError):
        rdf.parse(b"", "no-such-format", SUBJECT)


def test_serialize_error(container_graph):
    with pytest.raises(rdf.SerializeError):
        rdf.serialize(container_graph, "no-such-format")


def test_errors_share_a_base_class():
    assert issubclass(rdf.ParseError, rdf.GraphError)
    assert issubclass(rdf.SerializeError, rdf.GraphError)

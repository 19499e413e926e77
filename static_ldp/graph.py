"""Thin layer over rdflib used to read, build and write graphs.

Failures inside rdflib surface as ParseError or SerializeError so that
the HTTP layer can treat them uniformly."""
from rdflib import Graph, Literal, URIRef

from .constants import LDP_NS, DCTERMS_NS, LDP_CONTAINS, DCTERMS_MODIFIED
from .utils import child_uri


class GraphError(Exception):
    """Base class for errors from the RDF graph layer."""


class ParseError(GraphError):
    """The source document could not be parsed in the given format."""


class SerializeError(GraphError):
    """The graph could not be written in the requested format."""


def build_graph():
    graph = Graph()
    graph.bind("ldp", LDP_NS)
    graph.bind("dcterms", DCTERMS_NS)
    return graph


def parse(data, format_id, subject_uri):
    """Parse RDF data into a new graph, resolving relative IRIs against
    subject_uri."""
    graph = build_graph()
    try:
        graph.parse(data=data, format=format_id, publicID=subject_uri)
    except Exception as e:
        raise ParseError(
            "Cannot parse {0} as {1}: {2}".format(subject_uri, format_id, e)
            ) from e
    return graph


def serialize(graph, format_id):
    try:
        return graph.serialize(format=format_id, encoding="utf-8")
    except Exception as e:
        raise SerializeError(
            "Cannot serialize graph as {0}: {1}".format(format_id, e)
            ) from e


def add_literal(graph, subject, predicate, value):
    graph.add((URIRef(subject), URIRef(predicate), Literal(value)))


def add_resource(graph, subject, predicate, obj):
    graph.add((URIRef(subject), URIRef(predicate), URIRef(obj)))


def build_container_graph(subject, modified, children):
    """Listing graph for a container: its modification time and one
    ldp:contains triple per child name."""
    graph = build_graph()
    add_literal(graph, subject, DCTERMS_MODIFIED, modified)
    for name in children:
        add_resource(graph, subject, LDP_CONTAINS, child_uri(subject, name))
    return graph

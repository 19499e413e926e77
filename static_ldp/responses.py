from datetime import datetime
import logging

from werkzeug.datastructures import Headers

from . import graph as rdf
from .constants import LDP_RESOURCE, LDP_RDF_SOURCE, LDP_NON_RDF_SOURCE, \
    LDP_BASIC_CONTAINER
from .resources import ContainerResource, MissingResource, \
    NonRDFSourceResource, RDFSourceResource
from .utils import get_directory_contents, guess_mimetype, read_chunks

logger = logging.getLogger(__name__)


def type_link(uri):
    return "<{0}>; rel=\"type\"".format(uri)


class LdpResponse():
    """Status, headers and body of a response, independent of the web
    framework that sends it. body is bytes, or an iterator of bytes for
    streamed files."""
    def __init__(self, status, headers=None, body=b""):
        self.status = status
        self.headers = headers if headers is not None else Headers()
        self.body = body

    def __repr__(self):
        return "<LdpResponse {0} {1}>".format(
            self.status, self.headers.get("Content-Type")
            )


class ResponseAssembler():
    """Builds the response for a classified resource."""
    def __init__(self, registry, default_format):
        self.registry = registry
        self.default_format = default_format

    def assemble(self, resource, requested_format, is_get, subject_uri):
        if requested_format is None:
            requested_format = self.default_format

        if isinstance(resource, MissingResource):
            return LdpResponse(404, body=b"Not Found")
        elif isinstance(resource, RDFSourceResource):
            return self.rdf_source(
                resource, requested_format, is_get, subject_uri
                )
        elif isinstance(resource, NonRDFSourceResource):
            return self.non_rdf_source(resource, is_get)
        elif isinstance(resource, ContainerResource):
            return self.container(
                resource, requested_format, is_get, subject_uri
                )
        raise TypeError("Unknown resource type: {0!r}".format(resource))

    def rdf_source(self, resource, requested_format, is_get, subject_uri):
        with open(resource.path, "rb") as f:
            data = f.read()
        graph = rdf.parse(data, resource.format_id, subject_uri)
        logger.debug("Converting {0} from {1} to {2}".format(
            resource.path, resource.format_id, requested_format))
        return self._graph_response(
            graph, LDP_RDF_SOURCE, requested_format, is_get
            )

    def non_rdf_source(self, resource, is_get):
        headers = Headers()
        headers.add("Link", type_link(LDP_RESOURCE))
        headers.add("Link", type_link(LDP_NON_RDF_SOURCE))
        headers.add("Content-Type", guess_mimetype(resource.path))
        headers.add("Content-Length", str(resource.size()))
        body = read_chunks(resource.path) if is_get else b""
        return LdpResponse(200, headers, body)

    def container(self, resource, requested_format, is_get, subject_uri):
        modified = datetime.fromtimestamp(resource.modified()) \
            .replace(microsecond=0).astimezone()
        graph = rdf.build_container_graph(
            subject_uri, modified, get_directory_contents(resource.path)
            )
        return self._graph_response(
            graph, LDP_BASIC_CONTAINER, requested_format, is_get
            )

    def _graph_response(self, graph, ldp_type, requested_format, is_get):
        content = rdf.serialize(graph, requested_format)
        headers = Headers()
        headers.add("Link", type_link(LDP_RESOURCE))
        headers.add("Link", type_link(ldp_type))
        headers.add("Vary", "Accept")
        descriptor = self.registry.lookup_by_format_id(requested_format)
        if descriptor is not None:
            headers.add("Content-Type", descriptor.mime_type)
        headers.add("Content-Length", str(len(content)))
        return LdpResponse(200, headers, content if is_get else b"")

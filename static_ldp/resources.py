import logging
import os

from .utils import PathTraversalError, get_extension, resolve_path

logger = logging.getLogger(__name__)


class Resource(object):
    """Common properties of any resource in the served tree."""
    kind = None

    def __init__(self, path):
        self.path = path

    def __repr__(self):
        return "<{0} {1}>".format(self.__class__.__name__, self.path)


class MissingResource(Resource):
    """Nothing served at this path."""
    kind = "missing"


class ContainerResource(Resource):
    """A directory, served as an LDP BasicContainer."""
    kind = "container"

    def modified(self):
        return os.stat(self.path).st_mtime


class RDFSourceResource(Resource):
    """A file whose extension is registered as an RDF format."""
    kind = "rdf"

    def __init__(self, path, format_id):
        Resource.__init__(self, path)
        self.format_id = format_id

    def __repr__(self):
        return "<{0} {1} ({2})>".format(
            self.__class__.__name__, self.path, self.format_id
            )


class NonRDFSourceResource(Resource):
    """Any other file, served as its raw bytes."""
    kind = "binary"

    def size(self):
        return os.path.getsize(self.path)


def classify(root, request_path, registry):
    """Decide what kind of resource request_path names under root.

    Uses filesystem metadata only; files are never opened here."""
    try:
        path = resolve_path(root, request_path)
    except PathTraversalError:
        logger.warning(
            "Rejected path outside of {0}: \"{1}\"".format(root, request_path)
            )
        return MissingResource(None)

    if not os.path.exists(path):
        return MissingResource(path)
    elif os.path.isdir(path):
        return ContainerResource(path)

    extension = get_extension(path)
    if extension is not None:
        descriptor = registry.lookup_by_extension(extension)
        if descriptor is not None:
            return RDFSourceResource(path, descriptor.format_id)
    return NonRDFSourceResource(path)

from mimetypes import guess_type
import os
from werkzeug.security import safe_join

from .constants import CHUNK_SIZE, OCTET_STREAM


class PathTraversalError(Exception):
    """Raised when a request path resolves outside the served root."""


def resolve_path(root, request_path):
    """Returns the filesystem path for request_path under root.

    Nothing is touched on disk; a path that would escape the root raises
    PathTraversalError."""
    root = os.path.abspath(root)
    if not request_path:
        return root
    path = safe_join(root, request_path)
    if path is None:
        raise PathTraversalError(request_path)
    path = os.path.normpath(path)
    if os.path.commonpath([root, path]) != root:
        raise PathTraversalError(request_path)
    return path


def get_extension(path):
    """Extension after the last dot of the file name, or None."""
    name = os.path.basename(path)
    if "." not in name:
        return None
    return name.rpartition(".")[2]


def get_directory_contents(localpath):
    """Get the names of the children of a directory; scandir never yields
    . or .."""
    with os.scandir(localpath) as entries:
        return sorted(e.name for e in entries)


def child_uri(subject, name):
    """Append a child name to a container URI with exactly one slash."""
    return subject.rstrip("/") + "/" + name.lstrip("/")


def guess_mimetype(path):
    mimetype, _ = guess_type(path)
    return mimetype or OCTET_STREAM


def read_chunks(path, chunk_size=CHUNK_SIZE):
    """Yield the contents of a file in chunks."""
    with open(path, "rb") as f:
        while True:
            data = f.read(chunk_size)
            if not data:
                break
            yield data

LDP_NS = "http://www.w3.org/ns/ldp#"
LDP_RESOURCE = LDP_NS + "Resource"
LDP_RDF_SOURCE = LDP_NS + "RDFSource"
LDP_NON_RDF_SOURCE = LDP_NS + "NonRDFSource"
LDP_BASIC_CONTAINER = LDP_NS + "BasicContainer"
LDP_CONTAINS = LDP_NS + "contains"

DCTERMS_NS = "http://purl.org/dc/terms/"
DCTERMS_MODIFIED = DCTERMS_NS + "modified"

# format ids are rdflib plugin names
DEFAULT_RDF_FORMAT = "turtle"
DEFAULT_RDF_FORMATS = [
    {"extension": "ttl", "mimeType": "text/turtle", "format": "turtle"},
    {"extension": "jsonld", "mimeType": "application/ld+json",
     "format": "json-ld"},
    {"extension": "nt", "mimeType": "application/n-triples", "format": "nt"},
    {"extension": "rdf", "mimeType": "application/rdf+xml", "format": "xml"},
    {"extension": "owl", "mimeType": "application/rdf+xml", "format": "xml"},
    {"extension": "n3", "mimeType": "text/n3", "format": "n3"},
]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

ALLOWED_METHODS = "OPTIONS, GET, HEAD"
OCTET_STREAM = "application/octet-stream"
CHUNK_SIZE = 8192

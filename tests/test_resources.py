import os

from static_ldp.resources import ContainerResource, MissingResource, \
    NonRDFSourceResource, RDFSourceResource, classify


def test_classify_root(source_dir, registry):
    resource = classify(str(source_dir), "", registry)
    assert isinstance(resource, ContainerResource)
    assert resource.path == str(source_dir)


def test_classify_directory(source_dir, registry):
    resource = classify(str(source_dir), "sub", registry)
    assert isinstance(resource, ContainerResource)
    assert resource.kind == "container"


def test_classify_rdf_file(source_dir, registry):
    resource = classify(str(source_dir), "note.ttl", registry)
    assert isinstance(resource, RDFSourceResource)
    assert resource.format_id == "turtle"


def test_extensions_sharing_a_format(source_dir, registry):
    rdf = classify(str(source_dir), "vocab.rdf", registry)
    owl = classify(str(source_dir), "vocab.owl", registry)
    assert isinstance(rdf, RDFSourceResource)
    assert isinstance(owl, RDFSourceResource)
    assert rdf.format_id == owl.format_id == "xml"


def test_classify_non_rdf_file(source_dir, registry):
    resource = classify(str(source_dir), "photo.jpg", registry)
    assert isinstance(resource, NonRDFSourceResource)
    assert resource.size() == os.path.getsize(source_dir / "photo.jpg")


def test_file_without_extension_is_not_rdf(source_dir, registry):
    resource = classify(str(source_dir), "README", registry)
    assert isinstance(resource, NonRDFSourceResource)


def test_classify_missing(source_dir, registry):
    resource = classify(str(source_dir), "missing.ttl", registry)
    assert isinstance(resource, MissingResource)


def test_classify_traversal_is_missing(source_dir, registry):
    outside = source_dir.parent / "outside.ttl"
    outside.write_text("")
    resource = classify(str(source_dir), "../outside.ttl", registry)
    assert isinstance(resource, MissingResource)
    assert resource.path is None

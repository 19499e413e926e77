import pytest

from static_ldp.model import Config
from static_ldp.server import create_app

NOTE_TTL = """\
@prefix dcterms: <http://purl.org/dc/terms/> .
@prefix foaf: <http://xmlns.com/foaf/0.1/> .

<> dcterms:title "A note" ;
   dcterms:creator <#author> .

<#author> a foaf:Person ;
   foaf:name "Ada" .
"""

VOCAB_RDF = """\
<?xml version="1.0" encoding="utf-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:rdfs="http://www.w3.org/2000/01/rdf-schema#">
  <rdf:Description rdf:about="http://example.org/vocab#Thing">
    <rdfs:label>Thing</rdfs:label>
  </rdf:Description>
</rdf:RDF>
"""

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01" + bytes(range(256)) * 64


@pytest.fixture
def source_dir(tmp_path):
    """A small served tree:

        note.ttl  vocab.rdf  vocab.owl  photo.jpg  README  broken.ttl
        .hidden   sub/child.ttl  empty/
    """
    (tmp_path / "note.ttl").write_text(NOTE_TTL)
    (tmp_path / "vocab.rdf").write_text(VOCAB_RDF)
    (tmp_path / "vocab.owl").write_text(VOCAB_RDF)
    (tmp_path / "photo.jpg").write_bytes(JPEG_BYTES)
    (tmp_path / "README").write_text("Not RDF, no extension.\n")
    (tmp_path / "broken.ttl").write_text("this is @not turtle <<<")
    (tmp_path / ".hidden").write_text("secret")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "child.ttl").write_text(NOTE_TTL)
    (tmp_path / "empty").mkdir()
    return tmp_path


@pytest.fixture
def config(source_dir):
    return Config({"sourceDirectory": str(source_dir)})


@pytest.fixture
def registry(config):
    return config.registry


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def app_client(app):
    return app.test_client()

"""Tests for skos2html.vocabs module."""

import pytest
from rdflib import DCTERMS, RDFS, SKOS, Literal

from skos2html.utils import InitializationError
from skos2html.vocabs import REFERENCE_DIR, ReferenceVocabulary


def test_labels_for(vocabs):
    assert vocabs.labels_for(DCTERMS.title) == [Literal("Title", lang="en")]
    assert vocabs.labels_for(SKOS.prefLabel) == [
        Literal("preferred label", lang="en")
    ]
    assert vocabs.labels_for("http://ex.org/unknown") == []


def test_label_for(vocabs):
    assert vocabs.label_for(SKOS.editorialNote, "en") == "editorial note"
    assert vocabs.label_for(DCTERMS.creator, "en") == "Creator"
    # no german labels are bundled
    assert vocabs.label_for(SKOS.editorialNote, "de") is None
    # rdfs labels carry no language tag
    assert vocabs.label_for(RDFS.label, "en") is None
    assert vocabs.labels_for(RDFS.label) == [Literal("label")]


def test_missing_reference_file(tmp_path):
    missing = tmp_path / "skos.rdf"
    with pytest.raises(InitializationError, match="Reference vocabulary not found"):
        ReferenceVocabulary.from_files([missing])


def test_invalid_reference_file(tmp_path):
    broken = tmp_path / "skos.rdf"
    broken.write_text("<rdf:RDF this is not xml", encoding="utf-8")
    with pytest.raises(InitializationError, match="is not valid RDF/XML"):
        ReferenceVocabulary.from_files([REFERENCE_DIR / "dcterms.rdf", broken])

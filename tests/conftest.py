# Common pytest fixtures for all test modules
from pathlib import Path

import pytest
from rdflib import DCTERMS, RDF, RDFS, SKOS, Graph, Literal, URIRef

from skos2html import config
from skos2html.vocabs import load_reference_vocabulary

SIMPLE_TURTLE = "simple-vocab.ttl"
SIMPLE_RDFXML = "simple-vocab.rdf"
MULTILANG_TURTLE = "multilang.ttl"
NO_SCHEME_TURTLE = "no-scheme.ttl"
TWO_SCHEMES_TURTLE = "two-schemes.ttl"
MISSING_PREFLABEL_TURTLE = "missing-preflabel.ttl"
RELATIVE_TURTLE = "relative-refs.ttl"
RELATIVE_RDFXML = "relative-refs.rdf"
INVALID_TURTLE = "invalid.ttl"
CONFIG_TOML = "skos2html.toml"


@pytest.fixture(scope="session")
def datadir():
    """DATADIR as a LocalPath"""
    return Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def vocabs():
    """The bundled reference vocabularies (loaded once per test session)."""
    return load_reference_vocabulary()


@pytest.fixture
def temp_config():
    """
    Provides a temporary config that can be safely changed in test functions.

    After the test the config will be reset to default.
    """
    yield config

    # Reset the globally changed config to default.
    config.load_config()


@pytest.fixture
def scheme_graph():
    """A small in-memory graph with one concept scheme and two concepts."""
    graph = Graph()
    scheme = URIRef("http://ex.org/vocab#")
    graph.add((scheme, RDF.type, SKOS.ConceptScheme))
    graph.add((scheme, RDFS.label, Literal("Test Vocab")))
    graph.add((scheme, DCTERMS.description, Literal("About tests", lang="en")))
    graph.add((scheme, DCTERMS.creator, Literal("Alice")))
    graph.add((scheme, DCTERMS.contributor, Literal("Bob")))
    graph.add((scheme, DCTERMS.contributor, Literal("Carol", lang="fr")))

    c123 = URIRef("http://ex.org/vocab#123")
    graph.add((c123, RDF.type, SKOS.Concept))
    graph.add((c123, SKOS.prefLabel, Literal("One-two-three", lang="en")))
    graph.add((c123, SKOS.prefLabel, Literal("Eins-zwei-drei", lang="de")))
    graph.add((c123, SKOS.broader, URIRef("#45")))

    c45 = URIRef("http://ex.org/vocab#45")
    graph.add((c45, RDF.type, SKOS.Concept))
    graph.add((c45, SKOS.prefLabel, Literal("Forty-five", lang="en")))
    graph.add((c45, SKOS.narrower, URIRef("http://ex.org/vocab#123")))
    return graph

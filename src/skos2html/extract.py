"""Read concept scheme and concept data from a SKOS graph.

For single-valued fields (title, description, definition, editorial note,
broader, narrower) the last matching triple in store order wins when a
resource carries several values.
"""

import logging
from dataclasses import dataclass, field
from urllib.parse import urldefrag, urlsplit

from rdflib import DCTERMS, RDF, RDFS, SKOS, BNode, Graph, Literal, URIRef

from skos2html.literals import same_language, string_for

logger = logging.getLogger(__name__)

TITLE_PROPERTIES = (DCTERMS.title, RDFS.label, SKOS.prefLabel)
# https is taken as absolute too, not only http.
ABSOLUTE_IRI_PREFIXES = ("http://", "https://")


@dataclass
class SchemeInfo:
    identifier: str
    title: str = ""
    description: str = ""
    creators: list[str] = field(default_factory=list)
    contributors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Label:
    lang: str | None
    text: str


@dataclass
class ConceptDetail:
    uri: str
    preflabels: list[Label] = field(default_factory=list)
    altlabels: list[Label] = field(default_factory=list)
    definition: str = ""
    editorial_note: str | None = None
    has_broader: str | None = None
    has_narrower: str | None = None

    def preflabel(self, lang: str) -> str | None:
        for label in self.preflabels:
            if same_language(label.lang, lang):
                return label.text
        return None


def find_concept_schemes(graph: Graph) -> list[URIRef]:
    return list(graph.subjects(RDF.type, SKOS.ConceptScheme))


def _single_concept_scheme(graph: Graph):
    schemes = find_concept_schemes(graph)
    if len(schemes) != 1:
        return None
    return schemes[0]


def extract_scheme(graph: Graph, default_lang: str) -> SchemeInfo | None:
    """Return the metadata of the only concept scheme of graph.

    None is returned (and a warning logged) if the graph does not contain
    exactly one skos:ConceptScheme.
    """
    schemes = find_concept_schemes(graph)
    logger.info("Concept scheme count %i", len(schemes))
    if len(schemes) != 1:
        logger.warning("Concept scheme count wrong. Expected 1 was %i", len(schemes))
        return None

    scheme = schemes[0]
    logger.info("Concept scheme %s", scheme)
    info = SchemeInfo(identifier=str(scheme))
    for predicate, obj in graph.predicate_objects(scheme):
        if predicate in (DCTERMS.title, RDFS.label):
            info.title = _or_keep(string_for(obj, default_lang), info.title)
        elif predicate == DCTERMS.description:
            info.description = _or_keep(
                string_for(obj, default_lang), info.description
            )
        elif predicate == DCTERMS.contributor:
            _append_text(info.contributors, string_for(obj, None))
        elif predicate == DCTERMS.creator:
            _append_text(info.creators, string_for(obj, None))
    return info


def concept_scheme_title(graph: Graph) -> str:
    """Title of the concept scheme for the html title element.

    The raw value of the last dct:title, rdfs:label or skos:prefLabel is used
    without any language selection.
    """
    scheme = _single_concept_scheme(graph)
    if scheme is None:
        return ""
    logger.debug("Looking for title for %s", scheme)
    title = ""
    for predicate, obj in graph.predicate_objects(scheme):
        if predicate in TITLE_PROPERTIES:
            title = str(obj)
    return title


def extract_concepts(graph: Graph, sort: bool = False) -> list[URIRef]:
    """IRIs of all skos:Concept in graph.

    Without sort the order is the iteration order of the rdflib store, which
    follows the order in which triples were parsed.
    """
    concepts = list(graph.subjects(RDF.type, SKOS.Concept))
    logger.info("Concept count: %i", len(concepts))
    return sorted(concepts) if sort else concepts


def _label(obj) -> Label:
    if isinstance(obj, Literal) and obj.language:
        return Label(lang=obj.language, text=str(obj))
    return Label(lang=None, text=str(obj))


def extract_concept_detail(
    graph: Graph, concept_uri, default_lang: str
) -> ConceptDetail:
    concept = URIRef(str(concept_uri))
    logger.debug("Generate concept %s", concept)
    detail = ConceptDetail(uri=str(concept))
    for predicate, obj in graph.predicate_objects(concept):
        if predicate == SKOS.prefLabel:
            detail.preflabels.append(_label(obj))
        elif predicate == SKOS.altLabel:
            detail.altlabels.append(_label(obj))
        elif predicate == SKOS.definition:
            detail.definition = _or_keep(
                string_for(obj, default_lang), detail.definition
            )
        elif predicate == SKOS.editorialNote:
            detail.editorial_note = _or_keep(
                string_for(obj, default_lang), detail.editorial_note
            )
        elif predicate == SKOS.broader and not isinstance(obj, BNode):
            detail.has_broader = str(obj)
        elif predicate == SKOS.narrower and not isinstance(obj, BNode):
            detail.has_narrower = str(obj)
    return detail


def resolve_reference(
    concept_uri: str, reference: str, document_uri: str | None = None
) -> str:
    """Resolve a broader/narrower value against the IRI of the concept.

    Absolute http(s) IRIs are returned unchanged. Anything else is taken as a
    fragment of the concept's own document; one leading "#" or "/" is dropped.

    rdflib has already resolved relative references in a file against the
    file's own URI. Passing that URI as document_uri undoes this, so that
    ``<#A>`` in a file without base refers to the "A" next to the concept.
    """
    if reference.startswith(ABSOLUTE_IRI_PREFIXES):
        return reference
    if document_uri is not None:
        reference = _relative_to_document(reference, document_uri)
    fragment = reference[1:] if reference[:1] in ("#", "/") else reference
    base, _ = urldefrag(str(concept_uri))
    return f"{base}#{fragment}"


def _relative_to_document(reference: str, document_uri: str) -> str:
    if reference.startswith(document_uri):
        return reference[len(document_uri) :]
    directory = document_uri.rsplit("/", 1)[0] + "/"
    if reference.startswith(directory):
        return reference[len(directory) :]
    return reference


def concept_preflabel(graph: Graph, concept_uri: str, lang: str) -> str:
    """prefLabel in lang of the concept referenced by a broader/narrower link."""
    for obj in graph.objects(URIRef(str(concept_uri)), SKOS.prefLabel):
        if isinstance(obj, Literal) and same_language(obj.language, lang):
            return str(obj)
    logger.error("Preflabel missing for %s", concept_uri)
    return ""


def html_id(concept_uri: str) -> str | None:
    """Fragment of the IRI or, for slash IRIs, its last path segment."""
    parts = urlsplit(str(concept_uri))
    if parts.fragment:
        return parts.fragment
    return parts.path.rstrip("/").rsplit("/", 1)[-1] or None


def _or_keep(new, old):
    return old if new is None else new


def _append_text(items: list[str], text: str | None):
    if text is not None:
        items.append(text)

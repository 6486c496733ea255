"""Bundled reference vocabularies used to look up labels of well-known terms."""

import logging
from functools import lru_cache
from pathlib import Path

from rdflib import RDFS, Graph, Literal, URIRef

from skos2html.literals import same_language
from skos2html.utils import InitializationError

logger = logging.getLogger(__name__)

REFERENCE_DIR = Path(__file__).parent / "reference"
REFERENCE_FILES = ("skos.rdf", "dcterms.rdf", "rdf-schema.rdf")


class ReferenceVocabulary:
    """Read-only graph of SKOS, DC terms and RDFS term definitions.

    One instance can be shared by any number of conversions.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    @classmethod
    def from_files(cls, files=None):
        if files is None:
            files = [REFERENCE_DIR / name for name in REFERENCE_FILES]
        graph = Graph()
        for fpath in files:
            fpath = Path(fpath)
            if not fpath.is_file():
                msg = f"Reference vocabulary not found: {fpath}"
                logger.error(msg)
                raise InitializationError(msg)
            try:
                graph.parse(fpath.resolve().as_uri(), format="xml")
            except Exception as exc:
                msg = f'Reference vocabulary "{fpath}" is not valid RDF/XML: {exc}'
                logger.error(msg)  # noqa: TRY400
                raise InitializationError(msg) from exc
            logger.debug("Loaded reference vocabulary %s", fpath.name)
        return cls(graph)

    def labels_for(self, uri) -> list[Literal]:
        """All rdfs:label values of uri in store order (may be empty)."""
        return list(self.graph.objects(URIRef(str(uri)), RDFS.label))

    def label_for(self, uri, lang: str) -> str | None:
        """The first label of uri in language lang or None."""
        labels = self.labels_for(uri)
        logger.debug("Labels for %s: %s", uri, labels)
        for label in labels:
            if isinstance(label, Literal) and same_language(label.language, lang):
                return str(label)
        return None


@lru_cache(maxsize=1)
def load_reference_vocabulary() -> ReferenceVocabulary:
    """Load the bundled reference vocabularies once per process."""
    return ReferenceVocabulary.from_files()

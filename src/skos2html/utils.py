import logging
from pathlib import Path

from rdflib import Graph

logger = logging.getLogger(__name__)

RDF_FILE_ENDINGS = {
    ".ttl": "ttl",
    ".turtle": "ttl",
    ".rdf": "xml",
    ".owl": "xml",
    ".xml": "xml",
    ".json-ld": "json-ld",
    ".jsonld": "json-ld",
    ".json": "json-ld",
    ".nt": "nt",
    ".n3": "n3",
}


class Skos2HtmlError(Exception):
    pass


class LoadError(Skos2HtmlError):
    """The input vocabulary could not be read or parsed."""


class InitializationError(Skos2HtmlError):
    """A bundled reference vocabulary could not be loaded."""


class MissingPrefLabelError(Skos2HtmlError):
    """A concept has no preferred label in the default language."""


class RenderStateError(Skos2HtmlError):
    """Document parts were requested in an order the renderer does not allow."""


def is_rdf_file(fpath: Path) -> bool:
    return fpath.suffix.lower() in RDF_FILE_ENDINGS


def document_uri(fpath: Path | str) -> str:
    """The base against which rdflib resolves relative IRIs of a file."""
    return Path(fpath).resolve().as_uri()


def load_graph(fpath: Path | str) -> Graph:
    """Parse an RDF file into a new graph.

    The serialization is selected by file suffix; unknown suffixes are left
    to rdflib to guess.

    Raises:
        LoadError: If the file does not exist or is not valid RDF.
    """
    fpath = Path(fpath)
    if not fpath.is_file():
        msg = f"File not found: {fpath}"
        logger.error(msg)
        raise LoadError(msg)

    rdf_format = RDF_FILE_ENDINGS.get(fpath.suffix.lower())
    graph = Graph()
    try:
        # Parse via URI so that relative IRIs in the file get a stable base.
        graph.parse(document_uri(fpath), format=rdf_format)
    except Exception as exc:
        msg = f'Could not parse "{fpath}" as RDF: {exc}'
        logger.error(msg)  # noqa: TRY400
        raise LoadError(msg) from exc
    logger.debug("Loaded %i triples from %s", len(graph), fpath)
    return graph

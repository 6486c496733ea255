"""Convert a SKOS vocabulary to a bare-bones html page readable for humans.

Rendering a html file takes four steps:

1. Create a ``Converter`` for an input and an output file.
2. Call ``load``.
3. Call ``generate_document``.
4. Call ``write``.

``convert_file`` and ``convert_path`` run all steps.
"""

import logging
from pathlib import Path

from rdflib import SKOS, Graph

from skos2html import config
from skos2html.config import RenderConfig
from skos2html.extract import (
    concept_preflabel,
    concept_scheme_title,
    extract_concept_detail,
    extract_concepts,
    extract_scheme,
    resolve_reference,
)
from skos2html.render import HtmlRenderer, Link
from skos2html.utils import (
    MissingPrefLabelError,
    RenderStateError,
    Skos2HtmlError,
    document_uri,
    is_rdf_file,
    load_graph,
)
from skos2html.vocabs import ReferenceVocabulary, load_reference_vocabulary

logger = logging.getLogger(__name__)


class Converter:
    def __init__(
        self,
        infile: Path | str | None = None,
        outfile: Path | str = "vocab.html",
        config: RenderConfig | None = None,
        vocabs: ReferenceVocabulary | None = None,
    ):
        self.infile = None if infile is None else Path(infile)
        self.outfile = Path(outfile)
        self.config = _current_config() if config is None else config
        self.vocabs = load_reference_vocabulary() if vocabs is None else vocabs
        self.graph: Graph | None = None
        # Base URI rdflib used for relative IRIs while parsing infile.
        self.document_uri: str | None = None
        # The output buffer to which all html is written.
        self.buffer = ""
        logger.debug("Converter set up for %s -> %s", self.infile, self.outfile)

    @property
    def default_lang(self) -> str:
        return self.config.default_lang

    def load(self):
        """Load the SKOS file into a graph (an empty one if no infile is set)."""
        if self.infile is None:
            self.graph = Graph()
        else:
            self.graph = load_graph(self.infile)
            self.document_uri = document_uri(self.infile)
        return self.graph

    def generate_document(self) -> str:
        if self.graph is None:
            msg = "No vocabulary loaded. Call load() before generate_document()."
            raise RenderStateError(msg)

        renderer = HtmlRenderer(lang=self.default_lang, generator=self.config.generator)
        renderer.add_head(concept_scheme_title(self.graph))
        renderer.open_body()

        scheme = extract_scheme(self.graph, self.default_lang)
        if scheme is not None:
            renderer.add_concept_scheme(scheme)

        editorial_note_term = (
            self.vocabs.label_for(SKOS.editorialNote, self.default_lang) or ""
        )
        for concept_uri in extract_concepts(
            self.graph, sort=self.config.sort_concepts
        ):
            self._add_concept(renderer, concept_uri, editorial_note_term)

        renderer.close_body()
        renderer.end_document()
        self.buffer = renderer.getvalue()
        return self.buffer

    def _add_concept(self, renderer, concept_uri, editorial_note_term):
        detail = extract_concept_detail(self.graph, concept_uri, self.default_lang)
        heading = detail.preflabel(self.default_lang)
        if heading is None:
            msg = f'Concept "{concept_uri}" has no prefLabel in "{self.default_lang}".'
            if self.config.on_missing_preflabel == "fail":
                logger.error(msg)
                raise MissingPrefLabelError(msg)
            logger.error("%s Skipping concept.", msg)
            return

        renderer.add_concept(
            detail,
            heading,
            broader=self._link(detail.uri, detail.has_broader),
            narrower=self._link(detail.uri, detail.has_narrower),
            editorial_note_term=editorial_note_term,
        )

    def _link(self, concept_uri, reference) -> Link | None:
        if reference is None:
            return None
        target = resolve_reference(concept_uri, reference, self.document_uri)
        return Link(
            href=target,
            label=concept_preflabel(self.graph, target, self.default_lang),
        )

    def write(self):
        """Write the buffer to disk as an UTF-8 encoded file."""
        with open(self.outfile, "w", encoding="utf-8") as f:
            f.write(self.buffer)
        logger.info("-> Saved html to %s", self.outfile)
        return self.outfile


def _current_config() -> RenderConfig:
    # Looked up at call time because load_config replaces the object.
    return config.RENDER


def convert_file(
    infile: Path | str,
    outfile: Path | str | None = None,
    config: RenderConfig | None = None,
    vocabs: ReferenceVocabulary | None = None,
) -> Path:
    conf = _current_config() if config is None else config
    outfile = conf.output if outfile is None else outfile
    converter = Converter(infile, outfile, config=conf, vocabs=vocabs)
    converter.load()
    converter.generate_document()
    return converter.write()


def convert_path(
    path: Path, outdir: Path | None = None, config: RenderConfig | None = None
) -> list[Path]:
    """Convert a single RDF file or all RDF files in a directory.

    Each file is written as <stem>.html to outdir or next to the input file.
    """
    path = Path(path)
    if path.is_dir():
        files = sorted(f for f in path.iterdir() if f.is_file() and is_rdf_file(f))
    elif path.exists():
        files = [path]
    else:
        msg = f"File/dir not found: {path}"
        logger.error(msg)
        raise Skos2HtmlError(msg)

    if not files:
        logger.info("-> Nothing to do. No RDF file(s) found.")
        return []

    # The reference vocabulary is read-only and shared by all conversions.
    vocabs = load_reference_vocabulary()
    written = []
    for fpath in files:
        logger.debug('Processing "%s"', fpath)
        target_dir = fpath.parent if outdir is None else Path(outdir)
        written.append(
            convert_file(
                fpath,
                target_dir / f"{fpath.stem}.html",
                config=config,
                vocabs=vocabs,
            )
        )
    return written

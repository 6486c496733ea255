import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from skos2html.extract import ConceptDetail, SchemeInfo, html_id
from skos2html.literals import same_language
from skos2html.utils import RenderStateError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
STYLE_DIR = TEMPLATES_DIR


class RenderState(Enum):
    INIT = "init"
    HEAD_EMITTED = "head emitted"
    BODY_OPEN = "body open"
    SCHEME_EMITTED = "scheme emitted"
    CONCEPTS_EMITTED = "concepts emitted"
    BODY_CLOSED = "body closed"
    DONE = "done"


@dataclass(frozen=True)
class Link:
    href: str
    label: str


class HtmlRenderer:
    """Single-pass builder for the html document.

    The parts must be added in document order: head, body opening, an
    optional concept scheme, any number of concepts, body closing and the
    end of the document. Everything is collected in an in-memory buffer.
    """

    def __init__(self, lang: str = "en", generator: str = "skos2html"):
        self.lang = lang
        self.generator = generator
        self.state = RenderState.INIT
        self._parts: list[str] = []
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def _load_template(self, template_file):
        return self._env.get_template(template_file)

    def _advance(self, allowed: tuple[RenderState, ...], new_state: RenderState):
        if self.state not in allowed:
            msg = f'Cannot go to state "{new_state.value}" from "{self.state.value}".'
            raise RenderStateError(msg)
        self.state = new_state

    def add_head(self, title: str):
        self._advance((RenderState.INIT,), RenderState.HEAD_EMITTED)
        with open(STYLE_DIR / "skos2html.css", encoding="utf-8") as f:
            css = f.read()
        self._parts.append(
            self._load_template("head.html").render(
                lang=self.lang,
                title=title,
                generator=self.generator,
                css=css,
            )
        )

    def open_body(self):
        self._advance((RenderState.HEAD_EMITTED,), RenderState.BODY_OPEN)
        self._parts.append("  <body>\n")

    def add_concept_scheme(self, scheme: SchemeInfo):
        self._advance((RenderState.BODY_OPEN,), RenderState.SCHEME_EMITTED)
        self._parts.append(
            self._load_template("conceptscheme.html").render(scheme=scheme)
        )

    def add_concept(  # noqa: PLR0913
        self,
        concept: ConceptDetail,
        heading: str,
        broader: Link | None = None,
        narrower: Link | None = None,
        editorial_note_term: str = "",
    ):
        self._advance(
            (
                RenderState.BODY_OPEN,
                RenderState.SCHEME_EMITTED,
                RenderState.CONCEPTS_EMITTED,
            ),
            RenderState.CONCEPTS_EMITTED,
        )
        # Only labels in a language other than the document language get
        # a lang attribute and suffix.
        altlabels = [
            {
                "text": label.text,
                "lang": None
                if label.lang is None or same_language(label.lang, self.lang)
                else label.lang,
            }
            for label in concept.altlabels
        ]
        self._parts.append(
            self._load_template("concept.html").render(
                concept=concept,
                html_id=html_id(concept.uri),
                heading=heading,
                altlabels=altlabels,
                broader=broader,
                narrower=narrower,
                editorial_note_term=editorial_note_term,
            )
        )

    def close_body(self):
        self._advance(
            (
                RenderState.BODY_OPEN,
                RenderState.SCHEME_EMITTED,
                RenderState.CONCEPTS_EMITTED,
            ),
            RenderState.BODY_CLOSED,
        )
        self._parts.append("  </body>\n")

    def end_document(self):
        self._advance((RenderState.BODY_CLOSED,), RenderState.DONE)
        self._parts.append("</html>\n")

    def getvalue(self) -> str:
        return "".join(self._parts)

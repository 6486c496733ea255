"""Config module to share a configuration across all modules in skos2html."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, StringConstraints

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)


class RenderConfig(BaseModel):
    # Language used for headings, definitions and the html lang attribute.
    default_lang: Annotated[
        str,
        StringConstraints(
            strip_whitespace=True,
            to_lower=True,
            pattern=r"^[a-zA-Z]{1,8}(-[a-zA-Z0-9]{1,8})*$",
        ),
    ] = "en"
    # What to do with a concept lacking a prefLabel in default_lang.
    on_missing_preflabel: Literal["fail", "skip"] = "fail"
    # Sort concepts by IRI instead of using the order of the graph store.
    sort_concepts: bool = False
    generator: str = "skos2html"
    output: str = "vocab.html"


# This parameter will be updated/set by load_config.
RENDER = RenderConfig()


def load_config(config_file: Path | None = None, config: RenderConfig | None = None):
    """Replace the global RENDER config.

    With neither argument (or a config file that does not exist) the defaults
    are restored.
    """
    global RENDER  # noqa: PLW0603

    if config_file is not None and not config_file.exists():
        logger.warning('Configuration file "%s" not found.', config_file)
    if (True if config_file is None else not config_file.exists()) and config is None:
        RENDER = RenderConfig()
        logger.debug("Initializing default config.")
    elif config_file and config is None:
        with config_file.open(mode="rb") as fp:
            conf = tomllib.load(fp)
        logger.debug("Config loaded from: %s", config_file)
        # A [skos2html] table is accepted as well as top-level keys.
        RENDER = RenderConfig(**conf.get("skos2html", conf))
    else:
        RENDER = RenderConfig.model_validate(config.model_dump())
        logger.debug("Refreshing global state of config.")
    return RENDER

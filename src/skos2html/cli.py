"""Command line interface for skos2html."""

import argparse
import logging
import os.path
import sys
from pathlib import Path

from pydantic import ValidationError

from skos2html import __version__, config, setup_logging
from skos2html.convert import convert_file, convert_path
from skos2html.utils import Skos2HtmlError

logger = logging.getLogger(__name__)


def process_common_options(args, raw_args):
    # set up output directory
    outdir = args.outdir
    if outdir is not None and os.path.isfile(outdir):
        msg = "Outdir must be a directory but it is a file."
        logger.error(msg)
        raise Skos2HtmlError(msg)
    if outdir is not None and not os.path.isdir(outdir):
        outdir.mkdir(exist_ok=True, parents=True)

    # set up logging
    loglevel = logging.INFO + (args.quieter - args.verboser) * 10
    logfile = args.logfile
    if logfile is None:
        setup_logging(loglevel)
    else:
        logfile.parents[0].mkdir(exist_ok=True, parents=True)
        setup_logging(loglevel, logfile)

    logger.info("Executing cmd: skos2html %s", " ".join(raw_args))
    logger.debug("Processing common options.")

    # load config
    if args.config is not None:
        if args.config.exists():
            config.load_config(config_file=Path(args.config))
        else:
            msg = "Config file not found at: %s"
            logger.error(msg, args.config)
            raise Skos2HtmlError(msg % args.config)

    # check VOCAB
    if not args.VOCAB.exists():
        msg = "File/dir not found: %s"
        logger.error(msg, args.VOCAB)
        raise Skos2HtmlError(msg % args.VOCAB)
    if args.output is not None and args.VOCAB.is_dir():
        msg = "Option -o/--output requires a single file. Use -O/--outdir instead."
        logger.error(msg)
        raise Skos2HtmlError(msg)


def render_config_from_args(args) -> config.RenderConfig:
    """The loaded config updated with the options given on the command line."""
    overrides = {}
    if args.lang is not None:
        overrides["default_lang"] = args.lang
    if args.on_missing_preflabel is not None:
        overrides["on_missing_preflabel"] = args.on_missing_preflabel
    if args.sort:
        overrides["sort_concepts"] = True
    try:
        return config.RenderConfig.model_validate(
            {**config.RENDER.model_dump(), **overrides}
        )
    except ValidationError as exc:
        msg = f"Invalid option value: {exc}"
        raise Skos2HtmlError(msg) from exc


def create_parser():
    parser = argparse.ArgumentParser(
        prog="skos2html",
        description=(
            "Convert a SKOS vocabulary (turtle, rdf/xml, json-ld, ...) to a "
            "static html page readable for humans."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        help="The version of skos2html.",
        action="version",
        version=f"skos2html {__version__}",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest="verboser",
        default=0,
        help="More verbose output. Repeat to increase verbosity (-vv or -vvv).",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        dest="quieter",
        help="Less verbose output. Repeat to reduce verbosity (-qq or -qqq).",
    )
    parser.add_argument(
        "--config",
        help='Path to config file (typically "skos2html.toml").',
        type=Path,
        required=False,
    )
    parser.add_argument(
        "-l",
        "--logfile",
        help=(
            "Activate logging to a file at given path. "
            "The path will be created if it is not existing."
        ),
        type=Path,
    )
    htmlopt = parser.add_argument_group("HTML options")
    htmlopt.add_argument(
        "--lang",
        help='Language tag used for labels and definitions. (default: "en")',
        type=str,
    )
    htmlopt.add_argument(
        "--on-missing-preflabel",
        help=(
            "What to do if a concept has no preferred label in the language: "
            "fail the conversion or skip the concept. (default: fail)"
        ),
        choices=("fail", "skip"),
    )
    htmlopt.add_argument(
        "--sort",
        help="Sort concepts by IRI instead of keeping the order of the RDF store.",
        action="store_true",
    )
    outopt = parser.add_mutually_exclusive_group()
    outopt.add_argument(
        "-o",
        "--output",
        help=(
            "The html file to write for a single input file. Existing files "
            'are overwritten. (default: "vocab.html")'
        ),
        metavar=("FILE"),
        type=Path,
    )
    outopt.add_argument(
        "-O",
        "--outdir",
        help=(
            "Specify directory where files should be written to. "
            "The directory is created if required."
        ),
        metavar=("DIRECTORY"),
        type=Path,
    )
    parser.add_argument(
        "VOCAB",
        type=Path,
        help="Either the file to process or a directory with files to process.",
    )
    return parser


def main_cli(raw_args=None):
    """Setup CLI app and run the conversion based on args."""
    parser = create_parser()

    if not raw_args:
        parser.print_help()
        return []

    # parse_args will call sys.exit(2) if invalid options are given.
    args = parser.parse_args(raw_args)
    process_common_options(args, raw_args)
    render_config = render_config_from_args(args)

    if args.VOCAB.is_file() and args.outdir is None:
        output = render_config.output if args.output is None else args.output
        return [convert_file(args.VOCAB, output, config=render_config)]
    return convert_path(args.VOCAB, args.outdir, config=render_config)


def run_cli_app(raw_args=None):
    """Entry point for running the cli app."""
    if raw_args is None:
        raw_args = sys.argv[1:]
    try:
        main_cli(raw_args)
    except Skos2HtmlError as e:
        logger.error("Terminating with error: %s", e)  # noqa: TRY400
        sys.exit(1)
    except Exception:  # pragma: no cover
        logger.exception("Unexpected error.")
        sys.exit(3)  # value 2 is used by argparse for invalid args.


if __name__ == "__main__":
    run_cli_app(sys.argv[1:])

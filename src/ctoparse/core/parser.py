import logging
from pathlib import Path

from . import ir
from .cto_parser_impl import parse_model

logger = logging.getLogger(__name__)


def parse_file(path: Path) -> ir.Model:
    """
    Read a .cto file as UTF-8 and parse it into a Model.

    Args:
        path: Path to the model file

    Returns:
        Parsed Model

    Raises:
        ParseError: If the file contents do not conform to the grammar
    """
    text = path.read_text(encoding="utf-8")
    logger.debug("Read %s (%d characters)", path, len(text))
    return parse_model(text, path)


def parse_files(files: list[Path]) -> list[ir.Model]:
    """
    Parse model files into Model structures.

    Each file is one document with its own namespace. Parsing stops at the
    first file that fails.

    Args:
        files: List of .cto file paths to parse

    Returns:
        List of Model objects, in the order of ``files``
    """
    models: list[ir.Model] = []

    for f in files:
        model = parse_file(f)
        logger.info(
            "Parsed %s: namespace %s, %d declarations",
            f,
            model.namespace,
            len(model.declarations),
        )
        models.append(model)

    return models

"""Serialization of EB-eye documents to disk."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

logger = logging.getLogger(__name__)

FILE_PREFIX = "PRIDE_EBEYE_"


def ebeye_file_name(accession: str) -> str:
    return f"{FILE_PREFIX}{accession}.xml"


def write_ebeye_document(tree: ET.ElementTree, output_dir: Path, accession: str, pretty_print: bool = True) -> Path:
    """Write ``tree`` as PRIDE_EBEYE_<accession>.xml under ``output_dir``."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    if pretty_print:
        ET.indent(tree, space="  ")

    output_path = output_dir / ebeye_file_name(accession)
    tree.write(output_path, encoding="utf-8", xml_declaration=False)
    logger.info("Finished generating EB-eye XML file for: %s", output_path)
    return output_path

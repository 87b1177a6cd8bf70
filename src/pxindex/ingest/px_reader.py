"""Reader for ProteomeXchange (PX) XML dataset descriptors."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime, time
from typing import Iterable, List, Optional

from dateutil.parser import isoparse, isoparser

from .models import (
    ContactEntry,
    CvTerm,
    DatasetFileEntry,
    DatasetLinkEntry,
    InstrumentEntry,
    ProjectRecord,
    PublicationEntry,
    PxDocument,
    SpeciesEntry,
)
from .projector import project_descriptor

logger = logging.getLogger(__name__)

ISO_PARSER = isoparser()
XS_DATE_LENGTH = len("YYYY-MM-DD")


class PxParseError(ValueError):
    """Raised when a PX descriptor cannot be parsed."""


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: Optional[ET.Element], name: str) -> List[ET.Element]:
    if element is None:
        return []
    return [child for child in element if _local(child.tag) == name]


def _child(element: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    children = _children(element, name)
    return children[0] if children else None


def _terms(element: Optional[ET.Element]) -> List[CvTerm]:
    return [
        CvTerm(
            accession=param.get("accession", ""),
            name=param.get("name", ""),
            unit_name=param.get("unitName"),
            value=param.get("value"),
            cv_ref=param.get("cvRef"),
        )
        for param in _children(element, "cvParam")
    ]


def _list_items(root: ET.Element, list_name: str, item_name: str) -> Iterable[ET.Element]:
    return _children(_child(root, list_name), item_name)


def parse_announce_date(raw: Optional[str]) -> datetime:
    """Parse an xs:date or xs:dateTime value, keeping its timezone when present."""
    text = (raw or "").strip()
    try:
        if len(text) > XS_DATE_LENGTH and text[XS_DATE_LENGTH] not in "T ":
            # xs:date with a zone suffix: 2012-03-07Z, 2012-03-07+01:00
            day = ISO_PARSER.parse_isodate(text[:XS_DATE_LENGTH])
            return datetime.combine(day, time(), tzinfo=ISO_PARSER.parse_tzstr(text[XS_DATE_LENGTH:]))
        return isoparse(text)
    except ValueError as exc:
        raise PxParseError(f"Invalid announce date: {raw!r}") from exc


def _accession(root: ET.Element) -> str:
    accession = root.get("id")
    if accession:
        return accession
    for identifier in _list_items(root, "DatasetIdentifierList", "DatasetIdentifier"):
        for term in _terms(identifier):
            if term.value:
                return term.value
    raise PxParseError("PX document has no dataset accession")


def _review_level(summary: Optional[ET.Element]) -> Optional[str]:
    terms = _terms(_child(summary, "ReviewLevel"))
    return terms[0].name if terms else None


def parse_px_xml(text: str) -> PxDocument:
    """Parse PX XML text into the field lists consumed by the projector."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise PxParseError(f"Malformed PX XML: {exc}") from exc

    if _local(root.tag) != "ProteomeXchangeDataset":
        raise PxParseError(f"Unexpected root element <{_local(root.tag)}>")

    summary = _child(root, "DatasetSummary")
    if summary is None:
        raise PxParseError("PX document has no DatasetSummary")

    description = _child(summary, "Description")
    links = []
    for link in _list_items(root, "FullDatasetLinkList", "FullDatasetLink"):
        terms = _terms(link)
        if terms:
            links.append(DatasetLinkEntry(term=terms[0]))

    return PxDocument(
        accession=_accession(root),
        repository_name=summary.get("hostingRepository", ""),
        title=summary.get("title", ""),
        description=(description.text or "").strip() if description is not None else "",
        instruments=[InstrumentEntry(terms=_terms(item)) for item in _list_items(root, "InstrumentList", "Instrument")],
        ptms=_terms(_child(root, "ModificationList")),
        species=[SpeciesEntry(terms=_terms(item)) for item in _list_items(root, "SpeciesList", "Species")],
        contacts=[ContactEntry(terms=_terms(item)) for item in _list_items(root, "ContactList", "Contact")],
        announce_date=parse_announce_date(summary.get("announceDate")),
        data_files=[
            DatasetFileEntry(name=item.get("name"), terms=_terms(item))
            for item in _list_items(root, "DatasetFileList", "DatasetFile")
        ],
        keywords=_terms(_child(root, "KeywordList")),
        review_level=_review_level(summary),
        full_dataset_links=links,
        publications=[
            PublicationEntry(terms=_terms(item)) for item in _list_items(root, "PublicationList", "Publication")
        ],
    )


def read_project(text: Optional[str]) -> Optional[ProjectRecord]:
    """Parse and project a PX document; returns None when it cannot be parsed."""
    if not text:
        logger.error("Empty PX document; nothing to read")
        return None
    try:
        document = parse_px_xml(text)
    except PxParseError as exc:
        logger.error("Error parsing PX document: %s", exc)
        return None
    return project_descriptor(document)

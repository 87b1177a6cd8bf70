"""EB-eye search index document construction."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pxindex.config import Settings, get_settings
from pxindex.export.writer import write_ebeye_document
from pxindex.ingest.models import CvFact, Person, ProjectRecord, SubmissionFacts

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "Not available"
OMICS_TYPE = "Proteomics"
DATE_FORMAT = "%Y-%m-%d"
TAXONOMY_DB = "TAXONOMY"
PUBMED_DB = "pubmed"

FactSource = Callable[[ProjectRecord, SubmissionFacts], Sequence[CvFact]]

# Repeatable fact groups in output order: field name, where to read the facts.
FACT_GROUPS: Dict[str, FactSource] = {
    "instrument": lambda record, facts: facts.instruments,
    "species": lambda record, facts: facts.species,
    "cell_type": lambda record, facts: facts.cell_types,
    "disease": lambda record, facts: facts.diseases,
    "tissue": lambda record, facts: facts.tissues,
    "modification": lambda record, facts: record.ptms,
    "experiment_type": lambda record, facts: record.experiment_types,
}


class ExportPreconditionError(RuntimeError):
    """Raised when an EB-eye document cannot be produced from the given inputs."""


class ProjectNotPublicError(ExportPreconditionError):
    """Raised for projects that are still private."""


def format_date(value: datetime | date) -> str:
    return value.strftime(DATE_FORMAT)


def add_text(parent: ET.Element, tag: str, text: Optional[str], **attrib: str) -> ET.Element:
    element = ET.SubElement(parent, tag, attrib)
    element.text = text or ""
    return element


def add_field(parent: ET.Element, name: str, text: Optional[str]) -> ET.Element:
    return add_text(parent, "field", text, name=name)


def emit_facts_or_sentinel(parent: ET.Element, facts: Optional[Iterable[CvFact]], category: str) -> int:
    """One field per fact, or a single "Not available" field when there are none."""
    emitted = 0
    for fact in facts or []:
        add_field(parent, category, fact.display_name)
        emitted += 1
    if not emitted:
        add_field(parent, category, NOT_AVAILABLE)
    return emitted


class EBeyeDocumentBuilder:
    """Builds the EB-eye XML document describing one public PX project."""

    def __init__(self, settings: Settings | None = None, release_date: date | None = None) -> None:
        self.settings = settings or get_settings()
        self.release_date = release_date

    def build(
        self,
        record: Optional[ProjectRecord],
        facts: Optional[SubmissionFacts],
        proteins: Optional[Mapping[str, str]] = None,
    ) -> ET.ElementTree:
        if record is None or facts is None:
            logger.error("The project and submission both need to be set before generating EB-eye XML")
            raise ExportPreconditionError("Project record and submission facts are required")
        if not facts.is_public:
            logger.error("Project %s is still private, not generating EB-eye XML", record.accession)
            raise ProjectNotPublicError(f"Project {record.accession} is not public")

        database = ET.Element("database")
        add_text(database, "name", self.settings.database_name)
        add_text(database, "description", "")
        add_text(database, "release", self.settings.database_release)
        add_text(database, "release_date", format_date(self.release_date or date.today()))
        add_text(database, "entry_count", "1")

        entries = ET.SubElement(database, "entries")
        entry = ET.SubElement(entries, "entry", id=record.accession)
        add_text(entry, "name", record.title)
        add_text(entry, "description", record.description or record.title)

        self._add_cross_references(entry, record, facts, proteins or {})
        self._add_dates(entry, record, facts)
        self._add_additional_fields(entry, record, facts)
        return ET.ElementTree(database)

    def generate(
        self,
        record: Optional[ProjectRecord],
        facts: Optional[SubmissionFacts],
        output_dir: Optional[Path],
        proteins: Optional[Mapping[str, str]] = None,
    ) -> Path:
        """Build the document and write it to ``output_dir``."""
        if output_dir is None:
            raise ExportPreconditionError("An output directory is required to generate EB-eye XML")
        tree = self.build(record, facts, proteins)
        return write_ebeye_document(tree, output_dir, record.accession, pretty_print=self.settings.pretty_print)

    def _add_cross_references(
        self,
        entry: ET.Element,
        record: ProjectRecord,
        facts: SubmissionFacts,
        proteins: Mapping[str, str],
    ) -> None:
        cross_references = ET.SubElement(entry, "cross_references")
        for species in facts.species:
            ET.SubElement(cross_references, "ref", dbkey=species.accession, dbname=TAXONOMY_DB)
        for reference in record.references:
            if reference.pubmed_id is not None:
                ET.SubElement(cross_references, "ref", dbkey=str(reference.pubmed_id), dbname=PUBMED_DB)
        for protein, database in proteins.items():
            ET.SubElement(cross_references, "ref", dbkey=protein, dbname=database)

    def _add_dates(self, entry: ET.Element, record: ProjectRecord, facts: SubmissionFacts) -> None:
        dates = ET.SubElement(entry, "dates")
        ET.SubElement(dates, "date", type="submission", value=format_date(facts.submission_date))
        ET.SubElement(dates, "date", type="publication", value=format_date(record.publication_date))

    def _add_additional_fields(self, entry: ET.Element, record: ProjectRecord, facts: SubmissionFacts) -> None:
        fields = ET.SubElement(entry, "additional_fields")
        add_field(fields, "omics_type", OMICS_TYPE)
        if facts.sample_protocol:
            add_field(fields, "sample_protocol", facts.sample_protocol)
        if facts.data_protocol:
            add_field(fields, "data_protocol", facts.data_protocol)

        for category, source in FACT_GROUPS.items():
            emit_facts_or_sentinel(fields, source(record, facts), category)

        for tag in record.curator_tags:
            add_field(fields, "curator_keywords", tag)
        if record.submitter_keywords:
            add_field(fields, "submitter_keywords", ", ".join(record.submitter_keywords))

        emit_facts_or_sentinel(fields, facts.quantification_methods, "quantification_method")
        if facts.submission_type:
            add_field(fields, "submission_type", facts.submission_type)
        emit_facts_or_sentinel(fields, facts.software, "software")

        if facts.doi:
            add_field(fields, "doi", facts.doi)
        for reference in record.references:
            # References without citation text only contribute a cross-reference.
            if reference.citation_text:
                add_field(fields, "publication", reference.citation_text)
        add_field(fields, "full_dataset_link", record.dataset_link)

        for person in [record.submitter, *record.lab_heads]:
            for name, value in person_fields(person):
                add_field(fields, name, value)

        for url in facts.data_file_urls:
            add_field(fields, "dataset_file", url)


def person_fields(person: Person) -> List[Tuple[str, str]]:
    """Display-name, email and affiliation fields; missing values become empty text."""
    return [
        ("submitter", person.first_name or ""),
        ("submitter_mail", person.email or ""),
        ("submitter_affiliation", person.affiliation or ""),
    ]

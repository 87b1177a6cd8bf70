"""Projection of a parsed PX descriptor into a normalized project record."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .accessions import (
    EXTERNAL_LINK_PROVIDERS,
    SRM_ABBREVIATION,
    SRM_EXPERIMENT_ACCESSION,
    SRM_EXPERIMENT_LABEL,
    SRM_KEYWORD,
    CvAccession,
    dataset_url,
)
from .models import (
    ContactEntry,
    CvFact,
    CvTerm,
    DatasetFileEntry,
    DatasetLinkEntry,
    InstrumentEntry,
    Person,
    ProjectRecord,
    PublicationEntry,
    PxDocument,
    Reference,
    SpeciesEntry,
)

logger = logging.getLogger(__name__)

# Contact term accession -> Person field it populates.
PERSON_FIELDS: Dict[str, str] = {
    CvAccession.CONTACT_NAME.value.lower(): "first_name",
    CvAccession.CONTACT_EMAIL.value.lower(): "email",
    CvAccession.CONTACT_ORG.value.lower(): "affiliation",
}


def project_descriptor(document: PxDocument) -> ProjectRecord:
    """Build the normalized project record for a parsed PX document."""
    dataset_link = resolve_dataset_link(document.full_dataset_links)
    if dataset_link is None:
        dataset_link = dataset_url(document.accession)
        logger.debug("No external dataset link for %s; using %s", document.accession, dataset_link)

    curator_tags = select_keywords(document.keywords, CvAccession.CURATOR_KEYWORD)
    if document.review_level:
        curator_tags.append(document.review_level)

    return ProjectRecord(
        accession=document.accession,
        repository_name=document.repository_name,
        title=document.title,
        description=document.description,
        instruments=transform_instruments(document.instruments),
        ptms=to_facts(document.ptms),
        species=transform_species(document.species),
        taxonomy_ids=transform_taxonomies(document.species),
        submitter=select_submitter(document.contacts),
        lab_heads=select_lab_heads(document.contacts),
        publication_date=document.announce_date,
        data_file_names=transform_data_files(document.data_files),
        submitter_keywords=select_keywords(document.keywords, CvAccession.SUBMITTER_KEYWORD),
        curator_tags=curator_tags,
        review_level_tag=document.review_level,
        dataset_link=dataset_link,
        experiment_types=synthesize_experiment_types(document.keywords),
        references=transform_references(document.publications),
    )


def to_facts(terms: Iterable[CvTerm]) -> List[CvFact]:
    return [CvFact.from_term(term) for term in terms]


def transform_instruments(instruments: Iterable[InstrumentEntry]) -> List[CvFact]:
    facts: List[CvFact] = []
    for instrument in instruments:
        facts.extend(to_facts(instrument.terms))
    return facts


def transform_species(species: Iterable[SpeciesEntry]) -> List[CvFact]:
    """Species facts of every block, with taxonomy terms left out."""
    facts: List[CvFact] = []
    for block in species:
        facts.extend(
            CvFact.from_term(term) for term in block.terms if not CvAccession.TAXONOMY.matches(term.accession)
        )
    return facts


def transform_taxonomies(species: Iterable[SpeciesEntry]) -> List[str]:
    taxonomy_ids: List[str] = []
    for block in species:
        for term in block.terms:
            if CvAccession.TAXONOMY.matches(term.accession) and term.value is not None:
                taxonomy_ids.append(term.value)
    return taxonomy_ids


def has_role(contact: ContactEntry, role: CvAccession) -> bool:
    return any(role.matches(term.accession) for term in contact.terms)


def terms_to_person(terms: Iterable[CvTerm]) -> Person:
    """Map contact terms onto a Person; unrecognised terms are ignored."""
    values: Dict[str, Optional[str]] = {}
    for term in terms:
        field_name = PERSON_FIELDS.get(term.accession.lower())
        if field_name is not None:
            values[field_name] = term.value
    return Person(**values)


def select_submitter(contacts: Iterable[ContactEntry]) -> Person:
    """First contact carrying the submitter role, or an empty Person."""
    for contact in contacts:
        if has_role(contact, CvAccession.SUBMITTER):
            return terms_to_person(contact.terms)
    logger.debug("No contact tagged as dataset submitter")
    return Person()


def select_lab_heads(contacts: Iterable[ContactEntry]) -> List[Person]:
    """One Person per lab-head term, so a contact tagged twice appears twice."""
    lab_heads: List[Person] = []
    for contact in contacts:
        for term in contact.terms:
            if CvAccession.LAB_HEAD.matches(term.accession):
                lab_heads.append(terms_to_person(contact.terms))
    return lab_heads


def transform_data_files(data_files: Iterable[DatasetFileEntry]) -> List[str]:
    names: List[str] = []
    for data_file in data_files:
        names.extend(term.value for term in data_file.terms if term.value is not None)
    return names


def select_keywords(keywords: Iterable[CvTerm], code: CvAccession) -> List[str]:
    return [term.value for term in keywords if code.matches(term.accession) and term.value is not None]


def resolve_dataset_link(links: Iterable[DatasetLinkEntry]) -> Optional[str]:
    """Value of the first MassIVE or PASSEL link, if any."""
    for link in links:
        if any(provider.matches(link.term.accession) for provider in EXTERNAL_LINK_PROVIDERS) and link.term.value:
            return link.term.value
    return None


def _is_srm_keyword(term: CvTerm) -> bool:
    return SRM_KEYWORD in (term.value or "") or SRM_ABBREVIATION in term.name


def synthesize_experiment_types(keywords: Iterable[CvTerm]) -> List[CvFact]:
    """One SRM/MRM experiment type per keyword that mentions it.

    Repeated matches yield repeated facts.
    """
    return [
        CvFact(
            accession=SRM_EXPERIMENT_ACCESSION,
            name=SRM_KEYWORD,
            value=SRM_KEYWORD,
            cv_label=SRM_EXPERIMENT_LABEL,
        )
        for term in keywords
        if _is_srm_keyword(term)
    ]


def _pubmed_id(value: Optional[str]) -> Optional[int]:
    if value and value.isdecimal():
        return int(value)
    return None


def transform_references(publications: Iterable[PublicationEntry]) -> List[Reference]:
    """PubMed ids and citation lines; entries with neither are dropped.

    The last non-PubMed term of an entry supplies its citation text.
    """
    references: List[Reference] = []
    for publication in publications:
        pubmed_id: Optional[int] = None
        citation_text: Optional[str] = None
        for term in publication.terms:
            if CvAccession.PUBMED.matches(term.accession):
                parsed = _pubmed_id(term.value)
                if parsed is not None:
                    pubmed_id = parsed
                else:
                    logger.debug("Discarding non-numeric PubMed id %r", term.value)
            else:
                citation_text = term.value
        if pubmed_id is not None or citation_text is not None:
            references.append(Reference(pubmed_id=pubmed_id, citation_text=citation_text))
    return references


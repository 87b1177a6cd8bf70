"""Data models for the PX ingestion and EB-eye export layers."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CvTerm(BaseModel):
    """A single controlled vocabulary term as it appears in the source document."""

    model_config = ConfigDict(frozen=True)

    accession: str
    name: str = ""
    unit_name: Optional[str] = None
    value: Optional[str] = None
    cv_ref: Optional[str] = None


class TermBlock(BaseModel):
    """A source element that only groups a list of terms."""

    model_config = ConfigDict(frozen=True)

    terms: List[CvTerm] = Field(default_factory=list)


class ContactEntry(TermBlock):
    """Person or organization block; its role is carried by one of the terms."""


class SpeciesEntry(TermBlock):
    """Species block mixing scientific-name and taxonomy terms."""


class InstrumentEntry(TermBlock):
    pass


class PublicationEntry(TermBlock):
    pass


class DatasetFileEntry(TermBlock):
    name: Optional[str] = None


class DatasetLinkEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: CvTerm


class PxDocument(BaseModel):
    """Field set exposed by a parsed ProteomeXchange descriptor."""

    model_config = ConfigDict(frozen=True)

    accession: str
    repository_name: str = ""
    title: str = ""
    description: str = ""
    instruments: List[InstrumentEntry] = Field(default_factory=list)
    ptms: List[CvTerm] = Field(default_factory=list)
    species: List[SpeciesEntry] = Field(default_factory=list)
    contacts: List[ContactEntry] = Field(default_factory=list)
    announce_date: datetime
    data_files: List[DatasetFileEntry] = Field(default_factory=list)
    keywords: List[CvTerm] = Field(default_factory=list)
    review_level: Optional[str] = None
    full_dataset_links: List[DatasetLinkEntry] = Field(default_factory=list)
    publications: List[PublicationEntry] = Field(default_factory=list)


class CvFact(BaseModel):
    """Normalized controlled vocabulary fact exchanged with the index builder."""

    model_config = ConfigDict(frozen=True)

    accession: str
    name: str = ""
    unit: Optional[str] = None
    value: Optional[str] = None
    cv_label: Optional[str] = None

    @classmethod
    def from_term(cls, term: CvTerm) -> "CvFact":
        return cls(
            accession=term.accession,
            name=term.name,
            unit=term.unit_name,
            value=term.value,
            cv_label=term.cv_ref,
        )

    @property
    def display_name(self) -> str:
        return self.name or self.value or ""


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: Optional[str] = None
    email: Optional[str] = None
    affiliation: Optional[str] = None


class Reference(BaseModel):
    """Publication reference; at least one of the two fields is set."""

    model_config = ConfigDict(frozen=True)

    pubmed_id: Optional[int] = None
    citation_text: Optional[str] = None


class ProjectRecord(BaseModel):
    """Normalized metadata for a single PX dataset."""

    model_config = ConfigDict(frozen=True)

    accession: str
    repository_name: str = ""
    title: str = ""
    description: str = ""
    instruments: List[CvFact] = Field(default_factory=list)
    ptms: List[CvFact] = Field(default_factory=list)
    species: List[CvFact] = Field(default_factory=list)
    taxonomy_ids: List[str] = Field(default_factory=list)
    submitter: Person = Field(default_factory=Person)
    lab_heads: List[Person] = Field(default_factory=list)
    publication_date: datetime
    data_file_names: List[str] = Field(default_factory=list)
    submitter_keywords: List[str] = Field(default_factory=list)
    curator_tags: List[str] = Field(default_factory=list)
    review_level_tag: Optional[str] = None
    dataset_link: str
    experiment_types: List[CvFact] = Field(default_factory=list)
    references: List[Reference] = Field(default_factory=list)


class SubmissionFacts(BaseModel):
    """Submission-level facts supplied by the archive alongside a project."""

    species: List[CvFact] = Field(default_factory=list)
    instruments: List[CvFact] = Field(default_factory=list)
    cell_types: List[CvFact] = Field(default_factory=list)
    diseases: List[CvFact] = Field(default_factory=list)
    tissues: List[CvFact] = Field(default_factory=list)
    quantification_methods: List[CvFact] = Field(default_factory=list)
    software: List[CvFact] = Field(default_factory=list)
    data_file_urls: List[str] = Field(default_factory=list)
    is_public: bool = False
    submission_date: datetime
    submission_type: Optional[str] = None
    sample_protocol: Optional[str] = None
    data_protocol: Optional[str] = None
    doi: Optional[str] = None

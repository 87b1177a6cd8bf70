"""Well-known controlled vocabulary accessions used to classify PX terms."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class CvAccession(str, Enum):
    """PSI-MS accessions that drive classification of source terms."""

    CONTACT_NAME = "MS:1000586"
    CONTACT_EMAIL = "MS:1000589"
    CONTACT_ORG = "MS:1000590"
    SUBMITTER = "MS:1002037"
    LAB_HEAD = "MS:1002332"
    TAXONOMY = "MS:1001467"
    PUBMED = "MS:1000879"
    SUBMITTER_KEYWORD = "MS:1001925"
    CURATOR_KEYWORD = "MS:1001926"
    MASSIVE_URL = "MS:1002487"
    PASSEL_URL = "MS:1002031"

    def matches(self, accession: Optional[str]) -> bool:
        """Case-insensitive comparison against a raw accession string."""
        return accession is not None and accession.lower() == self.value.lower()


EXTERNAL_LINK_PROVIDERS = (CvAccession.MASSIVE_URL, CvAccession.PASSEL_URL)

PX_DATASET_BASE_URL = "http://proteomecentral.proteomexchange.org/dataset"

# Keyword marker that flags a targeted (SRM/MRM) experiment.
SRM_KEYWORD = "SRM/MRM"
SRM_ABBREVIATION = "SRM"
SRM_EXPERIMENT_ACCESSION = "PRIDE:0000311"
SRM_EXPERIMENT_LABEL = "PRIDE"


def dataset_url(accession: str) -> str:
    return f"{PX_DATASET_BASE_URL}/{accession}"

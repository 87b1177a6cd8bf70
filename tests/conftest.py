from datetime import datetime

import pytest

from pxindex.config import Settings
from pxindex.ingest.models import CvFact, SubmissionFacts

PX_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ProteomeXchangeDataset xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" id="PXD000001" formatVersion="1.3.0">
  <CvList>
    <Cv id="MS" fullName="PSI-MS" uri="https://raw.githubusercontent.com/HUPO-PSI/psi-ms-CV/master/psi-ms.obo"/>
  </CvList>
  <DatasetSummary announceDate="2012-03-07" title="TMT spikes - Using R and Bioconductor for proteomics data analysis" hostingRepository="PRIDE">
    <Description>Expected reporter ion ratios: Erwinia peptides 1:1:1:1</Description>
    <ReviewLevel>
      <cvParam cvRef="MS" accession="MS:1002854" name="Peer-reviewed dataset"/>
    </ReviewLevel>
  </DatasetSummary>
  <DatasetIdentifierList>
    <DatasetIdentifier>
      <cvParam cvRef="MS" accession="MS:1001919" name="ProteomeXchange accession number" value="PXD000001"/>
    </DatasetIdentifier>
  </DatasetIdentifierList>
  <SpeciesList>
    <Species>
      <cvParam cvRef="MS" accession="MS:1001469" name="taxonomy: scientific name" value="Erwinia carotovora"/>
      <cvParam cvRef="MS" accession="MS:1001467" name="taxonomy: NCBI TaxID" value="554"/>
    </Species>
  </SpeciesList>
  <InstrumentList>
    <Instrument id="Instrument_1">
      <cvParam cvRef="MS" accession="MS:1001742" name="LTQ Orbitrap Velos"/>
    </Instrument>
  </InstrumentList>
  <ModificationList>
    <cvParam cvRef="MOD" accession="MOD:00394" name="acetylated residue"/>
  </ModificationList>
  <ContactList>
    <Contact id="project_submitter">
      <cvParam cvRef="MS" accession="MS:1000586" name="contact name" value="Laurent Gatto"/>
      <cvParam cvRef="MS" accession="MS:1000589" name="contact email" value="lg390@cam.ac.uk"/>
      <cvParam cvRef="MS" accession="MS:1000590" name="contact affiliation" value="University of Cambridge"/>
      <cvParam cvRef="MS" accession="MS:1002037" name="dataset submitter"/>
    </Contact>
    <Contact id="project_lab_head">
      <cvParam cvRef="MS" accession="MS:1002332" name="lab head"/>
      <cvParam cvRef="MS" accession="MS:1000586" name="contact name" value="Kathryn S. Lilley"/>
      <cvParam cvRef="MS" accession="MS:1000590" name="contact affiliation" value="Cambridge Centre for Proteomics"/>
    </Contact>
  </ContactList>
  <PublicationList>
    <Publication id="PMID23692960">
      <cvParam cvRef="MS" accession="MS:1000879" name="PubMed identifier" value="23692960"/>
      <cvParam cvRef="MS" accession="MS:1002866" name="Reference" value="Gatto L, Christoforou A. Using R and Bioconductor for proteomics data analysis."/>
    </Publication>
    <Publication id="pending">
      <cvParam cvRef="MS" accession="MS:1000879" name="PubMed identifier" value="pending"/>
    </Publication>
  </PublicationList>
  <KeywordList>
    <cvParam cvRef="MS" accession="MS:1001926" name="curator keyword" value="Verified"/>
    <cvParam cvRef="MS" accession="MS:1001925" name="submitter keyword" value="Expression study"/>
  </KeywordList>
  <FullDatasetLinkList>
    <FullDatasetLink>
      <cvParam cvRef="MS" accession="MS:1001930" name="PRIDE project URI" value="http://www.ebi.ac.uk/pride/archive/projects/PXD000001"/>
    </FullDatasetLink>
  </FullDatasetLinkList>
  <DatasetFileList>
    <DatasetFile id="FILE_0" name="F063721.dat">
      <cvParam cvRef="PRIDE" accession="PRIDE:0000404" name="Associated file URI" value="ftp://ftp.pride.ebi.ac.uk/pride/data/archive/2012/03/PXD000001/F063721.dat"/>
    </DatasetFile>
  </DatasetFileList>
</ProteomeXchangeDataset>
"""


@pytest.fixture
def px_xml() -> str:
    return PX_XML


@pytest.fixture
def settings() -> Settings:
    return Settings(database_name="PRIDE Archive", database_release="3", pretty_print=True)


@pytest.fixture
def submission_facts() -> SubmissionFacts:
    return SubmissionFacts(
        species=[CvFact(accession="554", name="Erwinia carotovora")],
        instruments=[CvFact(accession="MS:1001742", name="LTQ Orbitrap Velos")],
        quantification_methods=[CvFact(accession="PRIDE:0000314", name="TMT")],
        data_file_urls=["ftp://ftp.pride.ebi.ac.uk/pride/data/archive/2012/03/PXD000001/F063721.dat"],
        is_public=True,
        submission_date=datetime(2012, 3, 1),
        submission_type="COMPLETE",
        sample_protocol="Not available",
        doi="10.6019/PXD000001",
    )

import pytest

from inscripta.featuresplice.sequence import Alphabet, SequenceRecord

# 60 bases, in blocks of 10:
# ATGCGTACCT GAAGTCCATG GATCCTTAGC AACGTTGCAG GCTAGCTTAA CCGGTATCGA
HOST_60 = "ATGCGTACCTGAAGTCCATGGATCCTTAGCAACGTTGCAGGCTAGCTTAACCGGTATCGA"
HOST_30 = HOST_60[:30]


@pytest.fixture
def host_30() -> SequenceRecord:
    return SequenceRecord(HOST_30, Alphabet.NT_STRICT, id="chr1")


@pytest.fixture
def host_60() -> SequenceRecord:
    return SequenceRecord(HOST_60, Alphabet.NT_STRICT, id="chr1")


@pytest.fixture
def remote_records() -> dict:
    return {
        "X77802.1": SequenceRecord("CCCCCAAAAATTTTT", Alphabet.NT_STRICT, id="X77802.1"),
        "AB000123": SequenceRecord("GGGGGTTTTT", Alphabet.NT_STRICT, id="AB000123"),
    }

import pytest
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from inscripta.featuresplice.exc import NotFoundError, TransientError
from inscripta.featuresplice.lookup import RemoteLookup, SeqRecordLookup, CachingLookup, strip_version
from inscripta.featuresplice.sequence import Alphabet, SequenceRecord


class CountingLookup(RemoteLookup):
    """Records every accession requested and fails for accessions it does not have."""

    def __init__(self, records):
        self.records = records
        self.requests = []

    def fetch_by_accession(self, accession):
        self.requests.append(accession)
        if accession not in self.records:
            raise TransientError(f"Timed out fetching {accession}")
        return self.records[accession]


@pytest.mark.parametrize(
    "accession,expected",
    [
        ("X77802.1", "X77802"),
        ("NM_006732.12", "NM_006732"),
        ("X77802", "X77802"),
        ("chr1.fa", "chr1.fa"),
        ("1.2.3", "1.2"),
    ],
)
def test_strip_version(accession, expected):
    assert strip_version(accession) == expected


class TestSeqRecordLookup:
    def test_exact_match(self, remote_records):
        lookup = SeqRecordLookup(remote_records)
        assert lookup.fetch_by_accession("X77802.1") is remote_records["X77802.1"]
        assert lookup.fetch_by_accession("AB000123") is remote_records["AB000123"]

    def test_unversioned_match(self, remote_records):
        lookup = SeqRecordLookup(remote_records)
        assert lookup.fetch_by_accession("X77802") is remote_records["X77802.1"]
        assert lookup.fetch_by_version("AB000123.2") is remote_records["AB000123"]

    def test_not_found(self, remote_records):
        with pytest.raises(NotFoundError):
            SeqRecordLookup(remote_records).fetch_by_accession("J00231")

    def test_biopython_records(self):
        records = {"X77802.1": SeqRecord(Seq("ACGTNNACGT"), id="X77802.1")}
        record = SeqRecordLookup(records, alphabet=Alphabet.NT_EXTENDED).fetch_by_accession("X77802")
        assert isinstance(record, SequenceRecord)
        assert record.display_id == "X77802.1"
        assert record.alphabet == Alphabet.NT_EXTENDED
        assert record.subsequence(5, 6) == "NN"


class TestCachingLookup:
    def test_fetches_once(self, remote_records):
        inner = CountingLookup(remote_records)
        lookup = CachingLookup(inner)
        first = lookup.fetch_by_accession("AB000123")
        second = lookup.fetch_by_accession("AB000123")
        assert first is second
        assert inner.requests == ["AB000123"]

    def test_keyed_by_accession(self, remote_records):
        inner = CountingLookup(remote_records)
        lookup = CachingLookup(inner)
        lookup.fetch_by_accession("AB000123")
        lookup.fetch_by_accession("X77802.1")
        lookup.fetch_by_accession("AB000123")
        assert inner.requests == ["AB000123", "X77802.1"]

    def test_failures_are_not_cached(self, remote_records):
        inner = CountingLookup(remote_records)
        lookup = CachingLookup(inner)
        for _ in range(2):
            with pytest.raises(TransientError):
                lookup.fetch_by_accession("J00231")
        assert inner.requests == ["J00231", "J00231"]

    def test_caches_are_per_instance(self, remote_records):
        inner = CountingLookup(remote_records)
        CachingLookup(inner).fetch_by_accession("AB000123")
        CachingLookup(inner).fetch_by_accession("AB000123")
        assert inner.requests == ["AB000123", "AB000123"]

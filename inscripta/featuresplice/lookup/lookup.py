"""
Remote lookups provide sequence records that a feature references but is not attached to, such as the
``AB000123.1`` record in ``join(AB000123.1:5567..5589,80..1144)``.

The :class:`RemoteLookup` interface is deliberately narrow: a lookup is a blocking function from an accession
to a :class:`~inscripta.featuresplice.sequence.SequenceRecord`. Lookups signal failure with
:class:`~inscripta.featuresplice.exc.NotFoundError` or :class:`~inscripta.featuresplice.exc.TransientError`.
"""
import re
from abc import ABC, abstractmethod
from typing import Mapping, Union

from Bio.SeqRecord import SeqRecord
from methodtools import lru_cache

from inscripta.featuresplice.exc import NotFoundError
from inscripta.featuresplice.sequence import Alphabet, SequenceRecord

VERSION_SUFFIX = re.compile(r"\.\d+$")


def strip_version(accession: str) -> str:
    """Remove a trailing version from an accession, so ``X77802.1`` becomes ``X77802``"""
    return VERSION_SUFFIX.sub("", accession)


class RemoteLookup(ABC):
    """Retrieve sequence records by accession."""

    @abstractmethod
    def fetch_by_accession(self, accession: str) -> SequenceRecord:
        """Return the record for ``accession``.

        Raises:
            NotFoundError: if the accession does not exist.
            TransientError: if the accession could not be retrieved right now.
        """

    def fetch_by_version(self, accession_version: str) -> SequenceRecord:
        """Return the record for a versioned accession such as ``NM_006732.1``"""
        return self.fetch_by_accession(accession_version)


class SeqRecordLookup(RemoteLookup):
    """Lookup backed by an in-memory mapping, for example the output of ``Bio.SeqIO.to_dict()`` or
    ``Bio.SeqIO.index()``.

    Keys are matched exactly first, then with their versions removed, so a mapping keyed by ``X77802.1``
    resolves both ``X77802.1`` and ``X77802``.
    """

    def __init__(
        self,
        records: Mapping[str, Union[SeqRecord, SequenceRecord]],
        alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED,
    ):
        self.records = records
        self.alphabet = alphabet
        self._unversioned = {strip_version(key): key for key in records.keys()}

    def fetch_by_accession(self, accession: str) -> SequenceRecord:
        if accession in self.records:
            key = accession
        elif strip_version(accession) in self._unversioned:
            key = self._unversioned[strip_version(accession)]
        else:
            raise NotFoundError(f"Accession {accession} does not exist")
        record = self.records[key]
        if isinstance(record, SequenceRecord):
            return record
        return SequenceRecord.from_seqrecord(record, alphabet=self.alphabet)


class CachingLookup(RemoteLookup):
    """Memoize successful fetches from another lookup, keyed by accession.

    Failures are not cached; a failed accession is requested again the next time it is seen.
    """

    def __init__(self, lookup: RemoteLookup):
        self.lookup = lookup

    @lru_cache(maxsize=256)
    def fetch_by_accession(self, accession: str) -> SequenceRecord:
        return self.lookup.fetch_by_accession(accession)

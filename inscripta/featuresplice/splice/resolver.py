"""
Resolve the residues of each atomic interval of a spliced feature.

Intervals on the host record are read from the sequence attached to the feature. Intervals that name another
record are fetched through a :class:`~inscripta.featuresplice.lookup.RemoteLookup`. When that is not possible,
the interval is padded with placeholder residues of the same length so that the spliced product keeps its length.
"""
import warnings
from dataclasses import dataclass
from typing import Iterable, Optional

from inscripta.featuresplice.exc import (
    StructureError,
    RemoteUnavailableWarning,
    RemoteLookupFailedWarning,
    InvalidLookupWarning,
)
from inscripta.featuresplice.location import AtomicLocation
from inscripta.featuresplice.lookup import RemoteLookup, CachingLookup, strip_version
from inscripta.featuresplice.sequence import SequenceRecord


@dataclass(frozen=True)
class SubintervalResolution:
    """Raw residues of one atomic interval, on the plus strand of the record they were read from."""

    location: AtomicLocation
    residues: str
    remote: bool = False
    placeholder: bool = False

    def __len__(self):
        return len(self.residues)


class SequenceResolver:
    """Resolves intervals against a host record, falling back to a remote lookup for intervals on other records.

    A resolver wraps its lookup in a :class:`~inscripta.featuresplice.lookup.CachingLookup`, so a record that is
    referenced several times is fetched once. A resolver should be used for a single splice.
    """

    def __init__(
        self,
        host_record: SequenceRecord,
        host_ids: Iterable[Optional[str]] = (),
        remote_lookup: Optional[RemoteLookup] = None,
    ):
        """
        Args:
            host_record: The entire sequence record the feature is attached to.
            host_ids: Identifiers that refer to the host record, in addition to its display id.
            remote_lookup: Lookup for intervals on other records.
        """
        self.host_record = host_record
        self.host_ids = {host_record.display_id, *host_ids} - {None}
        self.remote_lookup = self._wrap_lookup(remote_lookup)

    @staticmethod
    def _wrap_lookup(remote_lookup) -> Optional[CachingLookup]:
        if remote_lookup is None:
            return None
        if not isinstance(remote_lookup, RemoteLookup):
            warnings.warn(
                InvalidLookupWarning(
                    f"Must provide a RemoteLookup to access remote locations, not {type(remote_lookup).__name__}"
                )
            )
            return None
        if isinstance(remote_lookup, CachingLookup):
            return remote_lookup
        return CachingLookup(remote_lookup)

    def placeholder(self, location: AtomicLocation) -> SubintervalResolution:
        """Placeholder residues for an interval that could not be retrieved"""
        residues = self.host_record.alphabet.placeholder * location.length
        return SubintervalResolution(location, residues, remote=True, placeholder=True)

    def resolve(self, location: AtomicLocation) -> SubintervalResolution:
        """Resolve the residues of one atomic interval.

        Any error raised by the remote lookup is reported as a :class:`RemoteLookupFailedWarning` and the interval is
        padded with placeholder residues.

        Raises:
            StructureError: if ``location`` is not atomic.
            OutOfRangeError: if the interval does not fit on the record it is on.
        """
        if not isinstance(location, AtomicLocation):
            raise StructureError(f"Cannot resolve sequence for location {location} of type {type(location).__name__}")

        if not location.is_remote(*self.host_ids):
            return SubintervalResolution(location, self.host_record.subsequence(location.start, location.end))

        if self.remote_lookup is None:
            warnings.warn(
                RemoteUnavailableWarning(
                    f"Cannot get remote location {location} without a remote lookup. Will provide padding "
                    f"{self.host_record.alphabet.placeholder}'s."
                )
            )
            return self.placeholder(location)

        accession = strip_version(location.seq_id)
        try:
            record = self.remote_lookup.fetch_by_accession(accession)
        except Exception as e:
            warnings.warn(
                RemoteLookupFailedWarning(
                    f"In attempting to join remote location {location}, sequence {accession} could not be "
                    f"retrieved. Will provide padding {self.host_record.alphabet.placeholder}'s. Cause: {e}",
                    cause=e,
                )
            )
            return self.placeholder(location)
        return SubintervalResolution(location, record.subsequence(location.start, location.end), remote=True)

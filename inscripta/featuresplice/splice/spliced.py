"""
Splice the sequence of a feature. This is the default algorithm behind
:meth:`~inscripta.featuresplice.feature.SequenceFeature.spliced_seq()`, and is deliberately best effort: it tries
to guess what a user wants as *the* sequence of a feature.

For a feature with an atomic location, this is the sequence of the feature. For a compound location such as
``join(AB000123.1:5567..5589,80..1144)``, each interval is resolved, intervals on other records are fetched through
a remote lookup if one is provided, and the pieces are concatenated 5' to 3'.

Structural problems with the location, and reverse complementing a non-nucleotide sequence, raise. Everything
else is reported with :func:`warnings.warn` and produces a sequence with placeholder runs, so callers can decide
if the result is acceptable.
"""
import warnings
from dataclasses import dataclass
from typing import List, Optional, Dict, Any

from inscripta.featuresplice.exc import (
    NullSequenceException,
    RecordInconsistencyWarning,
    StrandInconsistencyWarning,
    RelativeCoordinatesWarning,
)
from inscripta.featuresplice.feature.interfaces import SequenceFeature, CoordinateSegment
from inscripta.featuresplice.location import Strand
from inscripta.featuresplice.lookup import RemoteLookup
from inscripta.featuresplice.sequence import SequenceRecord
from inscripta.featuresplice.splice.assembler import assemble
from inscripta.featuresplice.splice.constants import SPLICED_ID_SUFFIX
from inscripta.featuresplice.splice.normalizer import normalize_location
from inscripta.featuresplice.splice.resolver import SequenceResolver, SubintervalResolution


@dataclass(frozen=True)
class SpliceResult:
    """A spliced sequence, along with how each of its intervals was resolved.

    ``sorted_order`` is True if the intervals were sorted 5' to 3', and ``preserve_input_order`` is True if the caller
    asked for input order, in which case minus strand intervals were prepended. A mixed strand location has neither.
    """

    record: SequenceRecord
    resolutions: List[SubintervalResolution]
    nominal_strand: Strand
    mixed_strand: bool = False
    sorted_order: bool = True
    preserve_input_order: bool = False

    @property
    def has_placeholders(self) -> bool:
        return any(resolution.placeholder for resolution in self.resolutions)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict usable by :class:`~inscripta.featuresplice.models.SpliceReportModel`."""
        return dict(
            sequence_id=self.record.id,
            sequence=str(self.record),
            nominal_strand=self.nominal_strand.name,
            mixed_strand=self.mixed_strand,
            sorted_order=self.sorted_order,
            preserve_input_order=self.preserve_input_order,
            segments=[
                dict(
                    start=resolution.location.start,
                    end=resolution.location.end,
                    strand=resolution.location.strand.name,
                    seq_id=resolution.location.seq_id,
                    remote=resolution.remote,
                    placeholder=resolution.placeholder,
                )
                for resolution in self.resolutions
            ],
        )


def _splice_atomic(feature: SequenceFeature) -> SpliceResult:
    location = normalize_location(feature.location).intervals[0]
    record = feature.seq()
    if record is None:
        raise NullSequenceException(f"Feature {feature} has no attached sequence")
    residues = feature.entire_seq.subsequence(location.start, location.end)
    return SpliceResult(record, [SubintervalResolution(location, residues)], location.strand)


def splice_feature(
    feature: SequenceFeature,
    remote_lookup: Optional[RemoteLookup] = None,
    preserve_input_order: bool = False,
) -> SpliceResult:
    """Splice the sequence of a feature, keeping the details of how each interval was resolved.

    Args:
        feature: A feature with an attached sequence.
        remote_lookup: Lookup used to fetch intervals that are on other sequence records. Without one, those
            intervals are filled with placeholder residues.
        preserve_input_order: Splice intervals in the order of the location instead of sorting them 5' to 3'.

    Returns:
        A :class:`SpliceResult`.

    Raises:
        StructureError: if the location is nested more than one level deep.
        NullSequenceException: if the feature has no attached sequence.
    """
    if not feature.location.is_compound:
        return _splice_atomic(feature)

    host_record = feature.entire_seq
    if host_record is None:
        raise NullSequenceException(f"Cannot splice feature {feature} with no attached sequence")
    display_id = host_record.display_id

    if isinstance(feature, CoordinateSegment) and not feature.absolute:
        warnings.warn(
            RelativeCoordinatesWarning(
                f"Splicing {feature}, which is not in absolute coordinates. The result may not be on the correct "
                f"strand."
            )
        )

    normalized = normalize_location(feature.location, preserve_input_order=preserve_input_order)

    host_ids = [display_id, feature.seq_id]
    foreign_ids = [seq_id for seq_id in normalized.seq_ids if seq_id not in host_ids]
    if foreign_ids:
        warnings.warn(
            RecordInconsistencyWarning(
                f"Feature {feature} on {display_id} has intervals on other records: {', '.join(foreign_ids)}"
            )
        )

    resolver = SequenceResolver(host_record, host_ids=host_ids, remote_lookup=remote_lookup)
    resolutions = []
    for interval in normalized.intervals:
        if interval.strand != normalized.nominal_strand:
            warnings.warn(
                StrandInconsistencyWarning(
                    f"Interval {interval} strand ({interval.strand}) differs from the feature strand "
                    f"({normalized.nominal_strand})"
                )
            )
        resolutions.append(resolver.resolve(interval))

    residues = assemble(resolutions, sorted_order=not preserve_input_order, alphabet=host_record.alphabet)
    record = SequenceRecord(
        residues,
        host_record.alphabet,
        id=f"{display_id}{SPLICED_ID_SUFFIX}",
        validate_alphabet=False,
    )
    return SpliceResult(
        record,
        resolutions,
        normalized.nominal_strand,
        mixed_strand=normalized.mixed_strand,
        sorted_order=normalized.is_sorted,
        preserve_input_order=preserve_input_order,
    )


def spliced_sequence(
    feature: SequenceFeature,
    remote_lookup: Optional[RemoteLookup] = None,
    preserve_input_order: bool = False,
) -> SequenceRecord:
    """The spliced sequence of a feature. See :func:`splice_feature()`.

    The returned record is named for the host record with the suffix ``_spliced_feat``. For atomic locations,
    this is :meth:`~inscripta.featuresplice.feature.SequenceFeature.seq()`.
    """
    return splice_feature(feature, remote_lookup=remote_lookup, preserve_input_order=preserve_input_order).record

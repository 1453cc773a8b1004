"""
Flatten a location into an ordered list of atomic intervals.

Sub-intervals are ordered 5' to 3' on their strand, so intervals on the minus strand are sorted from largest to
smallest. This is how reverse strand CDS joins are annotated in GenBank.

Locations whose children are on more than one strand cannot be meaningfully sorted this way. These are left in
input order, which is a compatibility behavior rather than an inference of the correct order.
"""
import warnings
from dataclasses import dataclass, field
from typing import List

from inscripta.featuresplice.exc import StructureError, MixedStrandWarning
from inscripta.featuresplice.location import Location, AtomicLocation, Strand


@dataclass(frozen=True)
class NormalizedLocation:
    """Ordered atomic intervals of a location, along with the strand observations made while ordering them."""

    intervals: List[AtomicLocation]
    nominal_strand: Strand
    mixed_strand: bool = False
    is_sorted: bool = False
    seq_ids: List[str] = field(default_factory=list)


def _require_atomic(location: Location) -> AtomicLocation:
    if isinstance(location, AtomicLocation):
        return location
    if location.is_compound:
        raise StructureError(f"Can only splice locations nested one level deep, found {location}")
    raise StructureError(f"Unrecognized location type {type(location).__name__}")


def normalize_location(location: Location, preserve_input_order: bool = False) -> NormalizedLocation:
    """Produce the atomic intervals of a location in the order they should be spliced.

    Args:
        location: An atomic location, or a compound location whose children are all atomic.
        preserve_input_order: Use the order of the children instead of sorting them.

    Returns:
        A :class:`NormalizedLocation`. Its nominal strand is the strand of the first child.

    Raises:
        StructureError: if a child is itself compound.
    """
    if not location.is_compound:
        atomic = _require_atomic(location)
        seq_ids = [atomic.seq_id] if atomic.seq_id else []
        return NormalizedLocation([atomic], atomic.strand, is_sorted=True, seq_ids=seq_ids)

    children = [_require_atomic(child) for child in location]
    nominal_strand = children[0].strand
    seq_ids = location.seq_ids

    if preserve_input_order:
        return NormalizedLocation(children, nominal_strand, seq_ids=seq_ids)

    if any(child.strand != nominal_strand for child in children):
        warnings.warn(
            MixedStrandWarning(
                f"Mixed strand locations in {location}; splicing in the input order rather than trying to sort"
            )
        )
        return NormalizedLocation(children, nominal_strand, mixed_strand=True, seq_ids=seq_ids)

    intervals = sorted(children, key=lambda child: child.start * child.strand.sort_sign)
    return NormalizedLocation(intervals, nominal_strand, is_sorted=True, seq_ids=seq_ids)

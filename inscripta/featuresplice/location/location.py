from abc import ABC, abstractmethod
from typing import Optional, List, Iterator, Iterable, Union

from Bio.SeqFeature import FeatureLocation, CompoundLocation as BioCompoundLocation

from inscripta.featuresplice.exc import InvalidPositionException, LocationException
from inscripta.featuresplice.location.strand import Strand


class Location(ABC):
    """Shared Location base class. Coordinates are 1-based and inclusive, as is convention for biological
    coordinates and INSDC feature tables."""

    # The 1-based start position of this Location on its sequence record
    start: int

    # The 1-based inclusive end position of this Location on its sequence record
    end: int

    # The strand of this Location with respect to its sequence record
    strand: Strand

    # The length (number of positions) of this Location. For compound locations, regions between children
    # are not considered
    length: int

    def __len__(self):
        return self.length

    @abstractmethod
    def __str__(self):
        """Returns the INSDC feature table representation of this Location"""

    @abstractmethod
    def __eq__(self, other):
        """Returns True iff this Location is equal to other object"""

    @abstractmethod
    def __hash__(self):
        """Returns a hash code satisfying location1 == location2 => hash(location1) == hash(location2)"""

    def __repr__(self):
        return f"<{type(self).__name__} {str(self)}>"

    @property
    @abstractmethod
    def is_compound(self) -> bool:
        """Returns True iff this Location is made up of more than one interval"""

    @abstractmethod
    def __iter__(self) -> Iterator["Location"]:
        """Iterate over the direct children of this Location. An atomic location yields only itself."""

    @abstractmethod
    def to_biopython(self) -> Union[FeatureLocation, BioCompoundLocation]:
        """Convert to the equivalent BioPython location"""

    @property
    def span(self) -> int:
        """Number of positions from the first to the last position of this Location, including gaps"""
        return self.end - self.start + 1

    def overlaps(self, other: "Location") -> bool:
        """Returns True if the extents of the two locations share any position. Strand is not considered."""
        return self.start <= other.end and other.start <= self.end

    def contains(self, other: "Location") -> bool:
        """Returns True if the extent of other is entirely within the extent of this location."""
        return self.start <= other.start and other.end <= self.end


class AtomicLocation(Location):
    """A single contiguous interval on a sequence record, optionally on a different (remote) record"""

    def __init__(self, start: int, end: int, strand: Strand = Strand.PLUS, seq_id: Optional[str] = None):
        """
        Parameters
        ----------
        start
            1-based start position
        end
            1-based inclusive end position
        strand
            Strand of this Location on its sequence record
        seq_id
            Identifier of the sequence record this interval is on. If not provided, the interval is on the
            record that its feature is attached to.
        """
        if not 1 <= start <= end:
            raise InvalidPositionException(f"Positions must satisfy 1 <= start <= end. Start: {start}, end: {end}")
        if not isinstance(strand, Strand):
            raise LocationException(f"Strand must be a Strand, not {type(strand).__name__}")

        self.start = start
        self.end = end
        self.strand = strand
        self.seq_id = seq_id
        self.length = end - start + 1

    def __str__(self):
        interval = f"{self.start}..{self.end}" if self.start != self.end else str(self.start)
        if self.seq_id:
            interval = f"{self.seq_id}:{interval}"
        if self.strand == Strand.MINUS:
            return f"complement({interval})"
        return interval

    def __eq__(self, other):
        if type(other) is not AtomicLocation:
            return False
        return (
            self.start == other.start
            and self.end == other.end
            and self.strand is other.strand
            and self.seq_id == other.seq_id
        )

    def __hash__(self):
        return hash((self.start, self.end, self.strand, self.seq_id))

    @property
    def is_compound(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Location]:
        yield self

    def is_remote(self, *host_ids: Optional[str]) -> bool:
        """Returns True if this interval names a sequence record that is not one of the host ids"""
        return self.seq_id is not None and self.seq_id not in host_ids

    def to_biopython(self) -> FeatureLocation:
        return FeatureLocation(self.start - 1, self.end, strand=self.strand.value, ref=self.seq_id)


class CompoundLocation(Location):
    """An ordered set of locations representing a join or an order of intervals.

    Children may themselves be compound so that such structures can be represented, but they cannot be spliced.
    """

    def __init__(self, children: Iterable[Location], operator: str = "join"):
        children = list(children)
        if not children:
            raise LocationException("CompoundLocation must have at least one child")
        for child in children:
            if not isinstance(child, Location):
                raise LocationException(f"Child {child} is not a Location")

        self.children = children
        self.operator = operator
        self.start = min(child.start for child in children)
        self.end = max(child.end for child in children)
        self.length = sum(child.length for child in children)
        strands = {child.strand for child in children}
        self.strand = strands.pop() if len(strands) == 1 else Strand.UNSTRANDED

    def __str__(self):
        return "{}({})".format(self.operator, ",".join(str(child) for child in self.children))

    def __eq__(self, other):
        if type(other) is not CompoundLocation:
            return False
        return self.operator == other.operator and self.children == other.children

    def __hash__(self):
        return hash((self.operator, tuple(self.children)))

    @property
    def is_compound(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Location]:
        yield from self.children

    @property
    def num_children(self) -> int:
        return len(self.children)

    @property
    def seq_ids(self) -> List[str]:
        """Foreign sequence record identifiers referenced by any child, in order of first appearance"""
        seen = []
        for child in self.children:
            for leaf in child:
                seq_id = getattr(leaf, "seq_id", None)
                if seq_id and seq_id not in seen:
                    seen.append(seq_id)
        return seen

    def to_biopython(self) -> BioCompoundLocation:
        """Convert to a BioPython CompoundLocation, or FeatureLocation if this has only one child.
        BioPython flattens nested compound locations."""
        parts = [child.to_biopython() for child in self.children]
        if len(parts) == 1:
            return parts[0]
        return BioCompoundLocation(parts, operator=self.operator)


def location_from_biopython(location: Union[FeatureLocation, BioCompoundLocation]) -> Location:
    """Convert a BioPython location to a Location. BioPython uses 0-based half-open coordinates and stores the
    identifier of a remote record in ``ref``.
    """
    if isinstance(location, BioCompoundLocation):
        return CompoundLocation(
            [location_from_biopython(part) for part in location.parts], operator=location.operator
        )
    return AtomicLocation(
        int(location.start) + 1,
        int(location.end),
        Strand.from_int(location.strand),
        seq_id=location.ref,
    )

"""
Data models. These models allow spliced sequences and the locations they were built from to be validated and
exported to JSON-compatible dictionaries.
"""
from typing import List, Optional, ClassVar, Type

from marshmallow import Schema
from marshmallow_dataclass import dataclass

from inscripta.featuresplice.location import AtomicLocation, Strand
from inscripta.featuresplice.sequence import Alphabet, SequenceRecord
from inscripta.featuresplice.splice.spliced import SpliceResult


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class SplicedSegmentModel(BaseModel):
    """Data model for one interval of a spliced sequence, and how its residues were obtained."""

    start: int
    end: int
    strand: Strand
    seq_id: Optional[str] = None
    remote: bool = False
    placeholder: bool = False

    def to_location(self) -> AtomicLocation:
        """Construct the :class:`~inscripta.featuresplice.location.AtomicLocation` of this segment."""
        return AtomicLocation(self.start, self.end, self.strand, seq_id=self.seq_id)

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass
class SpliceReportModel(BaseModel):
    """Data model of a :class:`~inscripta.featuresplice.splice.SpliceResult`."""

    sequence_id: Optional[str]
    sequence: str
    nominal_strand: Strand
    segments: List[SplicedSegmentModel]
    mixed_strand: bool = False
    sorted_order: bool = True
    preserve_input_order: bool = False

    def to_sequence_record(self, alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED) -> SequenceRecord:
        """Construct the spliced :class:`~inscripta.featuresplice.sequence.SequenceRecord`."""
        return SequenceRecord(self.sequence, alphabet, id=self.sequence_id, validate_alphabet=False)

    @property
    def placeholder_segments(self) -> List[SplicedSegmentModel]:
        return [segment for segment in self.segments if segment.placeholder]

    @staticmethod
    def from_splice_result(result: SpliceResult) -> "SpliceReportModel":
        """Convert a :class:`~inscripta.featuresplice.splice.SpliceResult`"""

        return SpliceReportModel.Schema().load(result.to_dict())

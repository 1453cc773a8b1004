from typing import Any, Dict, List, Optional, Union, Iterable

from Bio.SeqFeature import SeqFeature
from Bio.SeqRecord import SeqRecord

from inscripta.featuresplice.exc import InvalidFormatterError
from inscripta.featuresplice.feature.interfaces import (
    SequenceFeature,
    Tagged,
    Annotatable,
    FeatureFormatter,
)
from inscripta.featuresplice.location import Location, Strand, location_from_biopython
from inscripta.featuresplice.sequence import Alphabet, SequenceRecord

# qualifiers that are used, in order, to find a display name for a BioPython feature
_NAME_QUALIFIERS = ("gene", "locus_tag", "label", "product")


class Feature(SequenceFeature, Tagged, Annotatable):
    """Generic implementation of a sequence feature with tags and annotations.

    Tag values are always stored as lists, in the same way that BioPython stores qualifiers.
    """

    def __init__(
        self,
        location: Location,
        primary_tag: Optional[str] = None,
        source_tag: Optional[str] = None,
        display_name: Optional[str] = None,
        seq_id: Optional[str] = None,
        entire_seq: Optional[SequenceRecord] = None,
        tags: Optional[Dict[str, Iterable[str]]] = None,
        annotations: Optional[Dict[str, Any]] = None,
    ):
        self._location = location
        self.primary_tag = primary_tag
        self.source_tag = source_tag
        self.display_name = display_name
        self._seq_id = seq_id
        self._entire_seq = entire_seq
        self._tags = {key: list(vals) for key, vals in tags.items()} if tags else {}
        self._annotations = dict(annotations) if annotations else {}

    def __repr__(self):
        name = self.display_name or self.primary_id or self.primary_tag or "Feature"
        return f"<Feature {name} {str(self.location)}>"

    @property
    def location(self) -> Location:
        return self._location

    @property
    def entire_seq(self) -> Optional[SequenceRecord]:
        return self._entire_seq

    @property
    def seq_id(self) -> Optional[str]:
        if self._seq_id is None and self._entire_seq is not None:
            return self._entire_seq.display_id
        return self._seq_id

    @property
    def annotations(self) -> Dict[str, Any]:
        return self._annotations

    def attach_seq(self, sequence: SequenceRecord):
        self._entire_seq = sequence

    def seq(self) -> Optional[SequenceRecord]:
        """Sequence of the full span of this feature on the attached record, reverse complemented if this feature
        is on the minus strand. Returns None if there is no attached sequence."""
        if self._entire_seq is None:
            return None
        display_id = self._entire_seq.display_id
        truncated = SequenceRecord(
            self._entire_seq.subsequence(self.start, self.end),
            self._entire_seq.alphabet,
            id=display_id,
            validate_alphabet=False,
        )
        if self.strand == Strand.MINUS:
            return truncated.reverse_complement(new_id=display_id)
        return truncated

    def has_tag(self, tag: str) -> bool:
        return tag in self._tags

    def get_tag_values(self, tag: str) -> List[str]:
        return list(self._tags.get(tag, []))

    def add_tag_value(self, tag: str, *values: str):
        self._tags.setdefault(tag, []).extend(values)

    def remove_tag(self, tag: str) -> List[str]:
        """Remove a tag, returning the values it had. Removing a missing tag raises KeyError."""
        return self._tags.pop(tag)

    def get_all_tags(self) -> List[str]:
        return list(self._tags.keys())

    @property
    def primary_id(self) -> Optional[str]:
        """Primary ID is a synonym for the first value of the tag ``ID``"""
        values = self.get_tag_values("ID")
        return values[0] if values else None

    @primary_id.setter
    def primary_id(self, value: str):
        if self.has_tag("ID"):
            self.remove_tag("ID")
        self.add_tag_value("ID", value)

    def gff_string(self, formatter: FeatureFormatter) -> str:
        """Format this feature with a caller-owned formatter, such as a GFF writer."""
        if formatter is None:
            raise InvalidFormatterError("A formatter must be provided to format a feature")
        return formatter.format_feature(self)

    @staticmethod
    def from_biopython(
        feature: SeqFeature,
        record: Optional[Union[SeqRecord, SequenceRecord]] = None,
        alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED,
    ) -> "Feature":
        """Build a Feature from a BioPython SeqFeature. If the SeqRecord it was parsed from is provided, it is
        attached as the entire sequence of the feature.
        """
        if isinstance(record, SeqRecord):
            record = SequenceRecord.from_seqrecord(record, alphabet=alphabet)
        qualifiers = {key: vals if isinstance(vals, list) else [vals] for key, vals in feature.qualifiers.items()}
        display_name = next((qualifiers[key][0] for key in _NAME_QUALIFIERS if qualifiers.get(key)), None)
        return Feature(
            location_from_biopython(feature.location),
            primary_tag=feature.type,
            display_name=display_name,
            seq_id=record.display_id if record else None,
            entire_seq=record,
            tags=qualifiers,
        )

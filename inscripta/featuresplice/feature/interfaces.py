"""
Narrow capability interfaces for sequence features. Implementations compose only the capabilities they need:
:class:`Located` for anything with a location, :class:`Tagged` for key/value tags, :class:`Annotatable` for
free-form annotations and :class:`SequenceFeature` for features that are attached to a sequence record.

None of these interfaces provide behavior except :meth:`SequenceFeature.spliced_seq()`, which delegates to the
reusable splicing algorithm in :mod:`inscripta.featuresplice.splice`.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from inscripta.featuresplice.location import Location, Strand
from inscripta.featuresplice.lookup import RemoteLookup
from inscripta.featuresplice.sequence import SequenceRecord


class Located(ABC):
    """Something with a location on a sequence record."""

    @property
    @abstractmethod
    def location(self) -> Location:
        """Location of this object"""

    @property
    def start(self) -> int:
        return self.location.start

    @property
    def end(self) -> int:
        return self.location.end

    @property
    def strand(self) -> Strand:
        return self.location.strand

    @property
    def length(self) -> int:
        """Number of positions spanned by this object, including gaps between intervals"""
        return self.location.span

    def overlaps(self, other: "Located") -> bool:
        return self.location.overlaps(other.location)

    def contains(self, other: "Located") -> bool:
        return self.location.contains(other.location)


class Tagged(ABC):
    """Something with tags. Each tag has a list of values."""

    @abstractmethod
    def has_tag(self, tag: str) -> bool:
        pass

    @abstractmethod
    def get_tag_values(self, tag: str) -> List[str]:
        pass

    @abstractmethod
    def add_tag_value(self, tag: str, *values: str):
        pass

    @abstractmethod
    def remove_tag(self, tag: str) -> List[str]:
        pass

    @abstractmethod
    def get_all_tags(self) -> List[str]:
        pass


class Annotatable(ABC):
    """Something with free-form annotations."""

    @property
    @abstractmethod
    def annotations(self) -> Dict[str, Any]:
        pass


class SequenceFeature(Located):
    """A located feature that can be attached to the entire sequence record it was annotated on."""

    @property
    @abstractmethod
    def entire_seq(self) -> Optional[SequenceRecord]:
        """The entire sequence record this feature is attached to, if any"""

    @property
    @abstractmethod
    def seq_id(self) -> Optional[str]:
        """Identifier of the sequence record this feature is on. This is known even when no sequence is attached."""

    @abstractmethod
    def attach_seq(self, sequence: SequenceRecord):
        """Attach the entire sequence record this feature is on"""

    @abstractmethod
    def seq(self) -> Optional[SequenceRecord]:
        """Sequence of the span of this feature, or None if no sequence is attached"""

    def spliced_seq(
        self,
        remote_lookup: Optional[RemoteLookup] = None,
        preserve_input_order: bool = False,
    ) -> SequenceRecord:
        """The most relevant sequence of this feature. For compound locations this is the concatenation of the
        sequences of each interval. See :func:`~inscripta.featuresplice.splice.spliced_sequence()`.

        Implementations that know better what their users want are free to override this.
        """
        from inscripta.featuresplice.splice import spliced_sequence

        return spliced_sequence(self, remote_lookup=remote_lookup, preserve_input_order=preserve_input_order)


class CoordinateSegment(ABC):
    """A feature that may be expressed in coordinates relative to some other feature."""

    @property
    @abstractmethod
    def absolute(self) -> bool:
        """True if coordinates are absolute positions on the sequence record"""


class FeatureFormatter(ABC):
    """Formats a feature as a string, for example a GFF line. Formatters are owned and configured by the caller."""

    @abstractmethod
    def format_feature(self, feature: SequenceFeature) -> str:
        pass

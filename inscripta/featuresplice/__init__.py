"""
FeatureSplice resolves the sequence of annotation features with split locations, such as spliced transcripts
whose exons are joined across strands or even across sequence records.
"""
__version__ = "0.1.0"

from inscripta.featuresplice.location import Strand, AtomicLocation, CompoundLocation  # noqa: F401
from inscripta.featuresplice.sequence import Alphabet, SequenceRecord  # noqa: F401
from inscripta.featuresplice.feature import Feature  # noqa: F401
from inscripta.featuresplice.lookup import RemoteLookup, SeqRecordLookup  # noqa: F401
from inscripta.featuresplice.splice import spliced_sequence, splice_feature  # noqa: F401

"""
Splicing of features with compound locations. :func:`normalize_location()` orders the intervals of a location,
:class:`SequenceResolver` retrieves the residues of each interval and :func:`assemble()` joins them together.
:func:`spliced_sequence()` runs all three.
"""

from inscripta.featuresplice.splice.normalizer import normalize_location, NormalizedLocation  # noqa: F401
from inscripta.featuresplice.splice.resolver import SequenceResolver, SubintervalResolution  # noqa: F401
from inscripta.featuresplice.splice.assembler import assemble, reverse_complement  # noqa: F401
from inscripta.featuresplice.splice.spliced import spliced_sequence, splice_feature, SpliceResult  # noqa: F401

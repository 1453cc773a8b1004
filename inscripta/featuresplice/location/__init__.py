"""
:class:`Location` objects describe the extent of a feature on a sequence record. An :class:`AtomicLocation` is a
single interval, possibly on a remote record; a :class:`CompoundLocation` joins several intervals, as for a
spliced transcript.
"""

from inscripta.featuresplice.location.strand import Strand  # noqa: F401
from inscripta.featuresplice.location.location import (  # noqa: F401
    Location,
    AtomicLocation,
    CompoundLocation,
    location_from_biopython,
)

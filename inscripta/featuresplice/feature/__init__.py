"""
Sequence features. :mod:`~inscripta.featuresplice.feature.interfaces` defines narrow capability interfaces, and
:class:`Feature` is a generic implementation of all of them.
"""

from inscripta.featuresplice.feature.interfaces import (  # noqa: F401
    Located,
    Tagged,
    Annotatable,
    SequenceFeature,
    CoordinateSegment,
    FeatureFormatter,
)
from inscripta.featuresplice.feature.feature import Feature  # noqa: F401

"""
The :class:`SequenceRecord` class defines a sequence with an :class:`Alphabet` and a display identifier. It is the
store that features are attached to, and the type of record returned by remote lookups.
"""

from inscripta.featuresplice.sequence.alphabet import Alphabet  # noqa: F401
from inscripta.featuresplice.sequence.sequence import SequenceRecord  # noqa: F401

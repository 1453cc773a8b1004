class FeatureSpliceException(Exception):
    """
    Base exception class for FeatureSplice.
    """

    pass


class InvalidPositionException(FeatureSpliceException):
    """
    Raised when a position is outside of a valid range for the operation being performed.
    """

    pass


class OutOfRangeError(InvalidPositionException):
    """
    Raised when a subsequence is requested with bounds that fall outside of the sequence record.
    """

    pass


class LocationException(FeatureSpliceException):
    """
    Raised when a Location constructor is given invalid inputs, such as a compound location with no children.
    """

    pass


class StructureError(LocationException):
    """
    Raised when a location cannot be spliced because of its shape: compound locations nested more than one level
    deep, or sub-intervals of an unrecognized type.
    """

    pass


class AlphabetError(FeatureSpliceException):
    """
    Raised when an operation on an Alphabet is unsupported for the provided Alphabet.
    """

    pass


class NullSequenceException(FeatureSpliceException):
    """
    Raised when an operation requires an attached sequence and the feature does not have one.
    """

    pass


class InvalidFormatterError(FeatureSpliceException):
    """
    Raised when a feature is asked to format itself without a formatter.
    """

    pass


class RemoteLookupError(FeatureSpliceException):
    """
    Base class for failures reported by a remote lookup.
    """

    pass


class NotFoundError(RemoteLookupError):
    """
    Raised by a remote lookup when the requested accession does not exist.
    """

    pass


class TransientError(RemoteLookupError):
    """
    Raised by a remote lookup when the accession could not be retrieved right now, for example a network failure.
    """

    pass


class SpliceWarning(UserWarning):
    """
    Base class for non-fatal observations made while splicing a feature.
    """

    pass


class StrandInconsistencyWarning(SpliceWarning):
    """
    A sub-interval is on a different strand than the nominal strand of the feature.
    """

    pass


class MixedStrandWarning(StrandInconsistencyWarning):
    """
    The children of a compound location are on more than one strand, so they are not sorted.
    """

    pass


class RecordInconsistencyWarning(SpliceWarning):
    """
    A sub-interval references a sequence record other than the one the feature is attached to.
    """

    pass


class RemoteUnavailableWarning(SpliceWarning):
    """
    A remote sub-interval was found but no remote lookup was provided. Placeholder residues were used.
    """

    pass


class RemoteLookupFailedWarning(SpliceWarning):
    """
    A remote lookup failed. Placeholder residues were used. The original exception is available as ``cause``.
    """

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class InvalidLookupWarning(SpliceWarning):
    """
    The object passed as a remote lookup does not implement the RemoteLookup interface and was ignored.
    """

    pass


class RelativeCoordinatesWarning(SpliceWarning):
    """
    A coordinate segment that is not in absolute coordinates was spliced. Strands may be incorrect.
    """

    pass

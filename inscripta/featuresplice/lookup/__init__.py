from inscripta.featuresplice.lookup.lookup import (  # noqa: F401
    RemoteLookup,
    SeqRecordLookup,
    CachingLookup,
    strip_version,
)

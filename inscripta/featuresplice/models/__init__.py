"""
Data models. These models allow for validation and export of spliced sequence reports.
"""

from inscripta.featuresplice.models.models import SplicedSegmentModel, SpliceReportModel  # noqa: F401

"""
Test exporting spliced sequences to SpliceReportModel objects and dictionaries.
"""
import warnings

from inscripta.featuresplice.feature import Feature
from inscripta.featuresplice.location import AtomicLocation, CompoundLocation, Strand
from inscripta.featuresplice.models import SpliceReportModel, SplicedSegmentModel
from inscripta.featuresplice.sequence import Alphabet, SequenceRecord
from inscripta.featuresplice.splice import splice_feature


report = SpliceReportModel(
    sequence_id="chr1_spliced_feat",
    sequence="ATGCGTACCTNNNNN",
    nominal_strand=Strand.PLUS,
    segments=[
        SplicedSegmentModel(start=1, end=10, strand=Strand.PLUS),
        SplicedSegmentModel(start=5, end=9, strand=Strand.PLUS, seq_id="X77802", remote=True, placeholder=True),
    ],
)


class TestSpliceReportModel:
    def test_from_splice_result(self, host_30):
        feature = Feature(
            CompoundLocation([AtomicLocation(1, 10), AtomicLocation(5, 9, seq_id="X77802")]), entire_seq=host_30
        )
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            result = splice_feature(feature)
        assert SpliceReportModel.from_splice_result(result) == report

    def test_dump_load(self):
        dumped = SpliceReportModel.Schema().dump(report)
        assert dumped["sequence"] == "ATGCGTACCTNNNNN"
        assert len(dumped["segments"]) == 2
        assert dumped["segments"][1]["placeholder"] is True
        assert SpliceReportModel.Schema().load(dumped) == report

    def test_placeholder_segments(self):
        assert [segment.seq_id for segment in report.placeholder_segments] == ["X77802"]

    def test_segment_to_location(self):
        segment = report.segments[1]
        assert segment.to_location() == AtomicLocation(5, 9, seq_id="X77802")
        assert segment.length == 5

    def test_to_sequence_record(self):
        assert report.to_sequence_record(Alphabet.NT_EXTENDED) == SequenceRecord(
            "ATGCGTACCTNNNNN", Alphabet.NT_EXTENDED, id="chr1_spliced_feat"
        )

    def test_minus_strand(self, host_60):
        feature = Feature(
            CompoundLocation([AtomicLocation(10, 20, Strand.MINUS), AtomicLocation(50, 60, Strand.MINUS)]),
            entire_seq=host_60,
        )
        model = SpliceReportModel.from_splice_result(splice_feature(feature))
        assert model.nominal_strand == Strand.MINUS
        assert [(segment.start, segment.strand) for segment in model.segments] == [
            (50, Strand.MINUS),
            (10, Strand.MINUS),
        ]
        assert model.sorted_order
        assert not model.preserve_input_order
        assert not model.mixed_strand

    def test_preserve_input_order(self, host_60):
        feature = Feature(
            CompoundLocation([AtomicLocation(10, 20, Strand.MINUS), AtomicLocation(50, 60, Strand.MINUS)]),
            entire_seq=host_60,
        )
        model = SpliceReportModel.from_splice_result(splice_feature(feature, preserve_input_order=True))
        assert model.preserve_input_order
        assert not model.sorted_order
        assert [segment.start for segment in model.segments] == [10, 50]

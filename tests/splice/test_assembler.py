import pytest

from inscripta.featuresplice.exc import StructureError, AlphabetError
from inscripta.featuresplice.location import AtomicLocation, CompoundLocation, Strand
from inscripta.featuresplice.sequence import Alphabet
from inscripta.featuresplice.splice import assemble, reverse_complement, SubintervalResolution


def _resolution(start, end, strand, residues):
    return SubintervalResolution(AtomicLocation(start, end, strand), residues)


class TestReverseComplement:
    @pytest.mark.parametrize(
        "residues,expected",
        [
            ("ACCGT", "ACGGT"),
            ("aacg", "cgtt"),
            ("NNNN", "NNNN"),
            ("ACGTRY", "RYACGT"),
        ],
    )
    def test_reverse_complement(self, residues, expected):
        assert reverse_complement(residues) == expected


class TestAssemble:
    def test_plus(self):
        resolutions = [_resolution(1, 3, Strand.PLUS, "AAC"), _resolution(5, 6, Strand.PLUS, "GT")]
        assert assemble(resolutions) == "AACGT"

    def test_unstranded_is_plus(self):
        resolutions = [_resolution(1, 3, Strand.UNSTRANDED, "AAC"), _resolution(5, 6, Strand.UNSTRANDED, "GT")]
        assert assemble(resolutions) == assemble(resolutions, sorted_order=False) == "AACGT"

    def test_minus_sorted(self):
        resolutions = [_resolution(5, 6, Strand.MINUS, "GG"), _resolution(1, 3, Strand.MINUS, "AAC")]
        assert assemble(resolutions) == "CCGTT"

    def test_minus_input_order_prepends(self):
        resolutions = [_resolution(1, 3, Strand.MINUS, "AAC"), _resolution(5, 6, Strand.MINUS, "GG")]
        assert assemble(resolutions, sorted_order=False) == "CCGTT"

    def test_mixed_input_order(self):
        resolutions = [
            _resolution(1, 3, Strand.PLUS, "AAC"),
            _resolution(5, 6, Strand.MINUS, "GA"),
            _resolution(8, 9, Strand.PLUS, "TT"),
        ]
        assert assemble(resolutions) == "AACTCTT"
        assert assemble(resolutions, sorted_order=False) == "TCAACTT"

    def test_overlaps_are_not_checked(self):
        resolutions = [_resolution(1, 3, Strand.PLUS, "AAC"), _resolution(2, 4, Strand.PLUS, "ACG")]
        assert assemble(resolutions) == "AACACG"

    def test_custom_reverse_complement(self):
        resolutions = [_resolution(1, 3, Strand.MINUS, "AAC"), _resolution(5, 6, Strand.PLUS, "GT")]
        assert assemble(resolutions, reverse_complement=str.lower) == "aacGT"

    def test_empty(self):
        assert assemble([]) == ""

    def test_unrecognized_location(self):
        compound = CompoundLocation([AtomicLocation(1, 3), AtomicLocation(5, 6)])
        with pytest.raises(StructureError):
            assemble([SubintervalResolution(compound, "AACGT")])

    def test_protein_minus_strand(self):
        resolutions = [_resolution(1, 3, Strand.MINUS, "MKV")]
        with pytest.raises(AlphabetError):
            assemble(resolutions, alphabet=Alphabet.AA)

    def test_protein_plus_strand(self):
        resolutions = [_resolution(1, 3, Strand.PLUS, "MKV"), _resolution(5, 6, Strand.UNSTRANDED, "AA")]
        assert assemble(resolutions, alphabet=Alphabet.AA) == "MKVAA"

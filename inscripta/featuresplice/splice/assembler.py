from collections import deque
from typing import Callable, Iterable

from Bio.Seq import reverse_complement as _reverse_complement

from inscripta.featuresplice.exc import StructureError, AlphabetError
from inscripta.featuresplice.location import AtomicLocation, Strand
from inscripta.featuresplice.sequence import Alphabet
from inscripta.featuresplice.splice.resolver import SubintervalResolution


def reverse_complement(residues: str) -> str:
    """Reverse complement of a string of nucleotides, preserving case and IUPAC ambiguity codes"""
    return str(_reverse_complement(residues))


def assemble(
    resolutions: Iterable[SubintervalResolution],
    sorted_order: bool = True,
    reverse_complement: Callable[[str], str] = reverse_complement,
    alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED,
) -> str:
    """Concatenate resolved intervals into one sequence, 5' to 3'.

    Intervals on the minus strand are reverse complemented. When the intervals are in sorted order they are all
    appended. When the caller asked for input order, minus strand intervals are instead prepended, because
    unsorted minus strand joins are conventionally listed 3' to 5'.

    Unstranded intervals are treated as plus strand. Overlapping or adjacent intervals are not checked.

    Args:
        resolutions: Resolved intervals, in the order they were normalized.
        sorted_order: False if the intervals are in the order the caller provided.
        reverse_complement: Function used to reverse complement minus strand residues.
        alphabet: Alphabet of the residues. Only nucleotide residues can be reverse complemented.

    Raises:
        StructureError: if a resolution is not for an atomic location.
        AlphabetError: if a minus strand interval is assembled with a non-nucleotide alphabet.
    """
    pieces = deque()
    for resolution in resolutions:
        if not isinstance(resolution.location, AtomicLocation):
            raise StructureError(f"Cannot assemble location {resolution.location}")
        if resolution.location.strand != Strand.MINUS:
            pieces.append(resolution.residues)
            continue
        if not alphabet.is_nucleotide_alphabet():
            raise AlphabetError(f"Cannot reverse complement {resolution.location} with alphabet {alphabet}")
        if sorted_order:
            pieces.append(reverse_complement(resolution.residues))
        else:
            pieces.appendleft(reverse_complement(resolution.residues))
    return "".join(pieces)

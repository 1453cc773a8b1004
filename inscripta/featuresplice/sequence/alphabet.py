from enum import Enum
from typing import Dict


class Alphabet(Enum):
    NT_STRICT = "ACGT"
    NT_EXTENDED = "ATUCGNWSMKRYBDHV"
    NT_STRICT_GAPPED = "ACGT-"
    NT_EXTENDED_GAPPED = "ATUCGNWSMKRYBDHV-"
    AA = "GALMFWKQESPVICYHRNDT*X"
    GENERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZ-"

    def is_nucleotide_alphabet(self) -> bool:
        if self in [
            Alphabet.NT_STRICT,
            Alphabet.NT_EXTENDED,
            Alphabet.NT_STRICT_GAPPED,
            Alphabet.NT_EXTENDED_GAPPED,
        ]:
            return True
        if self in [Alphabet.AA, Alphabet.GENERIC]:
            return False
        raise NotImplementedError("Not implemented for alphabet {}".format(self))

    @property
    def placeholder(self) -> str:
        """Residue used to pad sequence that could not be retrieved"""
        return "N" if self.is_nucleotide_alphabet() else "X"


def _complement_map(pairs: str, gapped: bool = False) -> Dict[str, str]:
    """Build an upper and lower case complement lookup from a string of base/complement pairs"""
    mapping = {}
    for base, comp in zip(pairs[::2], pairs[1::2]):
        mapping[base] = comp
        mapping[base.lower()] = comp.lower()
    if gapped:
        mapping["-"] = "-"
    return mapping


_STRICT_PAIRS = "ATCGGCTA"
_EXTENDED_PAIRS = _STRICT_PAIRS + "UAYRRYSSWWKMMKBVDHHDVBNN"

ALPHABET_TO_NUCLEOTIDE_COMPLEMENT = {
    Alphabet.NT_STRICT: _complement_map(_STRICT_PAIRS),
    Alphabet.NT_EXTENDED: _complement_map(_EXTENDED_PAIRS),
    Alphabet.NT_STRICT_GAPPED: _complement_map(_STRICT_PAIRS, gapped=True),
    Alphabet.NT_EXTENDED_GAPPED: _complement_map(_EXTENDED_PAIRS, gapped=True),
}

from typing import Optional, Union

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from inscripta.featuresplice.exc import AlphabetError, OutOfRangeError, InvalidPositionException
from inscripta.featuresplice.sequence.alphabet import Alphabet, ALPHABET_TO_NUCLEOTIDE_COMPLEMENT


class SequenceRecord:
    """A sequence with an alphabet and a display identifier.

    Positions in :meth:`subsequence()` are 1-based and inclusive. Slicing with ``[]`` uses python semantics.
    """

    sequence: Seq

    def __init__(
        self,
        data: Union[str, Seq],
        alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED,
        id: Optional[str] = None,
        validate_alphabet: bool = True,
    ):
        """
        Parameters
        ----------
            data
                The contents of the sequence
            alphabet
                Alphabet
            id
                Display identifier of the sequence record
            validate_alphabet
                Whether to validate this sequence against its alphabet
        """
        self.sequence = Seq(str(data))
        self.alphabet = alphabet
        self.id = id
        self._len = len(self.sequence)
        if validate_alphabet:
            self._validate_alphabet()

    def __eq__(self, other):
        if type(other) is not SequenceRecord:
            return False
        if self.id != other.id:
            return False
        if self.alphabet != other.alphabet:
            return False
        return self.sequence == other.sequence

    def __hash__(self):
        return hash((self.id, self.alphabet, str(self.sequence)))

    def __str__(self):
        """Returns the sequence data as a string"""
        return str(self.sequence)

    def __len__(self):
        return self._len

    def __getitem__(self, key: Union[int, slice]) -> "SequenceRecord":
        """Returns a slice of the current SequenceRecord as a new SequenceRecord with no identifier"""
        return SequenceRecord(str(self.sequence[key]), self.alphabet, validate_alphabet=False)

    def __repr__(self):
        return "<{}>".format(self.summary())

    def summary(self) -> str:
        """Returns a short string summary of this SequenceRecord"""
        if self.id:
            id = self.id
        elif len(self) <= 20:
            id = "Sequence={}".format(str(self))
        else:
            id = "Sequence"
        return "{};\n  Alphabet={};\n  Length={}".format(id, self.alphabet.name, len(self))

    def _validate_alphabet(self):
        """Raises AlphabetError if this SequenceRecord does not conform to its alphabet"""
        SequenceRecord.validate_alphabet(str(self), self.alphabet)

    @staticmethod
    def validate_alphabet(sequence: str, alphabet: Alphabet):
        if sequence.upper().strip(alphabet.value) != "":
            raise AlphabetError("Invalid sequence for alphabet {}".format(alphabet.name))

    @property
    def display_id(self) -> Optional[str]:
        return self.id

    @property
    def is_empty(self) -> bool:
        """Is this a len 0 sequence?"""
        return self._len == 0

    def whole_sequence(self) -> str:
        return str(self.sequence)

    def subsequence(self, start: int, end: int) -> str:
        """Returns the residues from ``start`` to ``end``, 1-based and inclusive.

        Raises:
            OutOfRangeError: if the bounds do not fall within this record.
        """
        if start > end:
            raise InvalidPositionException(f"Start ({start}) must be <= end ({end})")
        if start < 1 or end > self._len:
            raise OutOfRangeError(
                f"Subsequence {start}..{end} is out of range for {self.id or 'sequence'} of length {self._len}"
            )
        return str(self.sequence[start - 1 : end])

    def reverse_complement(self, new_id: Optional[str] = None) -> "SequenceRecord":
        """Returns a new SequenceRecord corresponding to the reverse complement of this SequenceRecord.

        Parameters
        ----------
        new_id
            ID for the returned SequenceRecord. If no value is provided, None is used.
        """
        if not self.alphabet.is_nucleotide_alphabet():
            raise AlphabetError("Cannot reverse complement sequence with alphabet {}".format(self.alphabet))
        rc_map = ALPHABET_TO_NUCLEOTIDE_COMPLEMENT[self.alphabet]
        try:
            seq_data = "".join([rc_map[c] for c in str(self)[::-1]])
        except KeyError as e:
            raise AlphabetError("Character {} not found for alphabet {}".format(str(e), self.alphabet))
        return SequenceRecord(seq_data, self.alphabet, id=new_id, validate_alphabet=False)

    def to_fasta(self, num_chars: Optional[int] = 60) -> str:
        """Returns a FASTA-formatted string for this sequence. These are line-broken every num_chars.

        Parameters
        ----------
        num_chars:
            Number of characters per line. Defaults to 60, which is the same as BioPython.
        """
        r = [f">{self.id}"]
        for i in range(0, self._len, num_chars):
            r.append(str(self)[i : i + num_chars])
        return "\n".join(r)

    def to_seqrecord(self) -> SeqRecord:
        """Convert to a BioPython SeqRecord"""
        return SeqRecord(Seq(str(self)), id=self.id or "<unknown id>", description="")

    @staticmethod
    def from_seqrecord(
        record: SeqRecord,
        alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED,
        validate_alphabet: bool = True,
    ) -> "SequenceRecord":
        """Convert a BioPython SeqRecord, keeping the record id as the display identifier"""
        return SequenceRecord(str(record.seq), alphabet, id=record.id, validate_alphabet=validate_alphabet)

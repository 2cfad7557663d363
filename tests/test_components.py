"""
vigenere_vernam — Component Tests
=================================
Alphabet, Codec, Validator, RandomIndexGenerator and the index transforms,
exercised on their own.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from vigenere_vernam import (
    Alphabet,
    Codec,
    Validator,
    RandomIndexGenerator,
    shift_forward,
    shift_backward,
    DuplicateSymbolError,
    AmbiguousSymbolError,
    InvalidSymbolError,
    EntropyError,
    IndexOutOfRangeError,
    VigenereError,
)


# ── Alphabet ─────────────────────────────────────────────────────────────────
def test_alphabet_defaults_when_empty():
    assert Alphabet() == Alphabet([])
    assert len(Alphabet()) == 26
    assert Alphabet().symbol_at(25) == "Z"

def test_alphabet_duplicate_reports_first_repeat():
    with pytest.raises(DuplicateSymbolError) as info:
        Alphabet(["A", "B", "C", "B", "A"])
    assert info.value.symbol == "B"
    assert info.value.position == 3

def test_alphabet_duplicate_is_value_error():
    with pytest.raises(ValueError):
        Alphabet("ABA")
    assert issubclass(DuplicateSymbolError, VigenereError)

def test_alphabet_rejects_prefix_symbol():
    with pytest.raises(AmbiguousSymbolError) as info:
        Alphabet(["AC", "X", "B", "A"])
    assert info.value.prefix == "A"
    assert info.value.symbol == "AC"
    assert isinstance(info.value, ValueError)

def test_alphabet_allows_shared_suffix():
    assert len(Alphabet(["AB", "B", "CB"])) == 3

def test_alphabet_rejects_empty_symbol():
    with pytest.raises(ValueError):
        Alphabet(["A", ""])

def test_alphabet_rejects_non_string_symbol():
    with pytest.raises(TypeError):
        Alphabet(["A", 1])

def test_alphabet_lookup():
    a = Alphabet(["X", "Y", "ZZ"])
    assert a.index_of("ZZ") == 2
    assert a.index_of("Q") is None
    assert "Y" in a and "Q" not in a
    assert list(a) == ["X", "Y", "ZZ"]
    assert a.longest_symbol == 2

def test_alphabet_is_immutable():
    a = Alphabet(["A", "B"])
    with pytest.raises(AttributeError):
        a.symbols = ("C",)
    assert isinstance(a.symbols, tuple)

def test_alphabet_from_generator_is_copied():
    source = ["A", "B"]
    a = Alphabet(s for s in source)
    source.append("C")
    assert len(a) == 2

# ── Codec ────────────────────────────────────────────────────────────────────
def test_codec_split_single_character_alphabet():
    assert Codec(Alphabet()).split("AB1") == ["A", "B", "1"]

def test_codec_split_multi_character_symbols():
    codec = Codec(Alphabet(["LL", "A", "M"]))
    assert codec.split("LLAMA") == ["LL", "A", "M", "A"]

def test_codec_split_suffix_overlap_decodes_back():
    codec = Codec(Alphabet(["AB", "B"]))
    assert codec.split("BAB") == ["B", "AB"]
    assert codec.split(codec.decode([1, 0, 1, 1])) == ["B", "AB", "B", "B"]

def test_codec_split_unknown_is_one_character():
    codec = Codec(Alphabet(["ab", "c"]))
    assert codec.split("axc") == ["a", "x", "c"]

def test_codec_encode_raises_on_unknown_symbol():
    with pytest.raises(InvalidSymbolError) as info:
        Codec(Alphabet()).encode("AB?D")
    assert info.value.symbol == "?"
    assert info.value.position == 2

def test_codec_decode():
    assert Codec(Alphabet(["é", "ß", "Ω"])).decode([2, 0, 1]) == "Ωéß"

def test_codec_decode_out_of_range():
    with pytest.raises(IndexOutOfRangeError) as info:
        Codec(Alphabet(["A", "B"])).decode([0, 2])
    assert info.value.index == 2
    assert info.value.length == 2
    assert isinstance(info.value, IndexError)

# ── Validator ────────────────────────────────────────────────────────────────
def test_validator_find_invalid():
    validator = Validator(Codec(Alphabet()))
    assert validator.find_invalid("HELLO") is None
    assert validator.find_invalid("HE LLO") == (2, " ")

def test_validator_counts_positions_in_symbols():
    validator = Validator(Codec(Alphabet(["CH", "A"])))
    assert validator.validate_string("CHACH")
    assert validator.find_invalid("CHAX") == (2, "X")
    with pytest.raises(InvalidSymbolError):
        validator.ensure_valid("CHAX")

# ── RandomIndexGenerator ─────────────────────────────────────────────────────
def sequence_source(values):
    data = bytearray(values)
    def read(size):
        chunk = bytes(data[:size])
        del data[:size]
        return chunk
    return read

def test_rng_rejection_sampling_covers_range_exactly():
    # Bytes 0..31 masked to 5 bits; 26..31 are rejected
    rng = RandomIndexGenerator(26, sequence_source(range(32)))
    assert rng.indices(26) == list(range(26))

def test_rng_masks_high_bits():
    rng = RandomIndexGenerator(26, sequence_source([0b11100010]))
    assert rng.next_index() == 2

def test_rng_multi_byte_range():
    rng = RandomIndexGenerator(300, sequence_source([0x01, 0x2C, 0x00, 0xFF]))
    # 0x012C = 300 is rejected, 0x00FF = 255 accepted
    assert rng.next_index() == 255

def test_rng_short_read_is_entropy_error():
    rng = RandomIndexGenerator(300, sequence_source([0x01]))
    with pytest.raises(EntropyError):
        rng.next_index()

def test_rng_wrong_type_is_entropy_error():
    rng = RandomIndexGenerator(26, lambda size: "A" * size)
    with pytest.raises(EntropyError):
        rng.next_index()

def test_rng_source_exception_is_chained():
    def broken(size):
        raise OSError("device gone")
    rng = RandomIndexGenerator(26, broken)
    with pytest.raises(EntropyError) as info:
        rng.next_index()
    assert isinstance(info.value.__cause__, OSError)

def test_rng_rejects_non_callable_source():
    with pytest.raises(TypeError):
        RandomIndexGenerator(26, "not callable")

def test_rng_rejects_empty_range():
    with pytest.raises(ValueError):
        RandomIndexGenerator(0)

def test_rng_default_source_stays_in_range():
    rng = RandomIndexGenerator(7)
    assert all(0 <= i < 7 for i in rng.indices(500))

# ── Transforms ───────────────────────────────────────────────────────────────
def test_shift_forward_wraps():
    assert shift_forward([25, 0, 13], [1, 0, 13], 26) == [0, 0, 0]

def test_shift_backward_single_correction():
    assert shift_backward([0, 5, 25], [25, 5, 0], 26) == [1, 0, 25]

def test_shift_ignores_extra_secret():
    assert shift_forward([1], [1, 9, 9], 26) == [2]
    assert shift_backward([1], [1, 9, 9], 26) == [0]

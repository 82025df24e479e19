"""Tests for the shuffled alphabet."""

import secrets

import pytest

from shortid.alphabet import ABC_SIZE, DEFAULT_ABC, Abc, shuffle
from shortid.exceptions import (
    CapacityError,
    ConfigError,
    DecodingError,
    EncodingError,
    InvalidAlphabetError,
    InvalidDigitsError,
    InvalidSeedError,
    SymbolIndexError,
)

SEED_1 = "gzmZM7VINvOFcpho01x-fYPs8Q_urjq6RkiWGn4SHDdK5t2TAJbaBLEyUwlX9C3e"
SEED_2 = "ip8bKduCDxnMQy-JrVHAN5h1s396jBvmFZOL0Pg2WTqwIE7f4ackXzoUSYlGt_eR"
SEED_345234 = "U8dEc3Hnuq_RfyDApaT1ZxQmYePBCNMkF4-KJSvhjw609I7GlbzsriOL52XVoWgt"


class TestShuffle:
    """Tests for the seed-driven permutation."""

    @pytest.mark.parametrize(
        "seed,expected",
        [
            (1, SEED_1),
            (2, SEED_2),
            (345234, SEED_345234),
        ],
    )
    def test_known_permutations(self, seed: int, expected: str):
        """The permutation for a seed never changes between releases."""
        assert Abc(DEFAULT_ABC, seed).alphabet == expected
        assert shuffle(DEFAULT_ABC, seed) == expected

    def test_same_seed_same_permutation(self):
        """Independently built alphabets agree when seeds agree."""
        assert Abc(DEFAULT_ABC, 1234).alphabet == Abc(DEFAULT_ABC, 1234).alphabet

    def test_permutation_keeps_all_symbols(self):
        """Every seed yields a permutation of the same 64 symbols."""
        for seed in range(1, 300):
            shuffled = Abc(DEFAULT_ABC, seed).alphabet
            assert len(shuffled) == ABC_SIZE
            assert sorted(shuffled) == sorted(DEFAULT_ABC)

    def test_large_seed(self):
        """Seeds far beyond the generator modulus are accepted."""
        shuffled = Abc(DEFAULT_ABC, 2**62 + 7).alphabet
        assert sorted(shuffled) == sorted(DEFAULT_ABC)

    def test_custom_alphabet(self):
        """Any 64 unique characters can be used, including non-ASCII ones."""
        funky = "①②③④⑤⑥⑦⑧⑨⑩⑪⑫ⒶⒷⒸⒹⒺⒻⒼⒽⒾⒿⓀⓁⓂⓃⓄⓅⓆⓇⓈⓉⓊⓋⓌⓍⓎⓏⓐⓑⓒⓓⓔⓕⓖⓗⓘⓙⓚⓛⓜⓝⓞⓟⓠⓡⓢⓣⓤⓥⓦⓧⓨⓩ"
        abc = Abc(funky, 1)
        assert sorted(abc.alphabet) == sorted(funky)
        assert abc.source == funky

    def test_normalize_ignores_input_order(self):
        """Sorted alphabets shuffle identically whatever order they were given in."""
        reversed_abc = DEFAULT_ABC[::-1]
        assert Abc(reversed_abc, 7).alphabet != Abc(DEFAULT_ABC, 7).alphabet
        assert Abc(reversed_abc, 7, normalize=True).alphabet == Abc(DEFAULT_ABC, 7, normalize=True).alphabet

    def test_str(self):
        """String form shows the permuted alphabet."""
        assert str(Abc()) == f"Abc(alphabet='{SEED_1}')"


class TestValidation:
    """Tests for alphabet and seed validation."""

    @pytest.mark.parametrize(
        "alphabet",
        [
            "asgliaeprugb",
            "aasefvowefvjaHEFV",
            "1234567890qwertzuiopüäsdfghjklöä$<yxcvbnm,.->YXCVBNM;:_ASDFGHJKLQWERTZ",
            DEFAULT_ABC + "!",
        ],
    )
    def test_wrong_length(self, alphabet: str):
        """Alphabets not made of exactly 64 symbols are rejected."""
        with pytest.raises(InvalidAlphabetError):
            Abc(alphabet, 1)

    def test_non_unique(self):
        """Duplicate symbols are rejected even when the length is right."""
        duplicated = DEFAULT_ABC[:5] + "A" + DEFAULT_ABC[6:]
        assert len(duplicated) == ABC_SIZE
        with pytest.raises(InvalidAlphabetError, match="found 63 unique"):
            Abc(duplicated, 1)

    @pytest.mark.parametrize("seed", [0, -1, True, 1.5])
    def test_invalid_seed(self, seed):
        """Seeds must be positive integers."""
        with pytest.raises(InvalidSeedError):
            Abc(DEFAULT_ABC, seed)

    def test_config_errors_share_base(self):
        """Configuration problems are all ConfigError."""
        with pytest.raises(ConfigError):
            Abc("short", 1)
        with pytest.raises(ConfigError):
            Abc(DEFAULT_ABC, 0)


class TestResetAndSeed:
    """Tests for reset and set_seed."""

    def test_set_seed_reshuffles(self):
        """A new seed produces the permutation of that seed."""
        abc = Abc(DEFAULT_ABC, 1)
        abc.set_seed(2)
        assert abc.alphabet == SEED_2
        assert abc.seed == 2

    def test_reset_restores_permutation(self):
        """Reset rebuilds from the seed set last, not the construction seed."""
        abc = Abc(DEFAULT_ABC, 1)
        abc.set_seed(2)
        assert abc.alphabet == SEED_2
        abc.reset()
        assert abc.alphabet == SEED_2
        assert abc.index_of("i") == 0

    def test_set_seed_invalid(self):
        """An invalid new seed leaves the alphabet unchanged."""
        abc = Abc(DEFAULT_ABC, 1)
        with pytest.raises(InvalidSeedError):
            abc.set_seed(0)
        assert abc.alphabet == SEED_1
        assert abc.seed == 1


class TestLookup:
    """Tests for symbol lookup."""

    def test_lookup(self):
        abc = Abc()
        assert abc.lookup(0) == "g"
        assert abc.lookup(63) == "e"
        assert abc.index_of("g") == 0
        assert abc.index_of("e") == 63

    @pytest.mark.parametrize("index", [-1, 64, 1000])
    def test_lookup_out_of_range(self, index: int):
        with pytest.raises(SymbolIndexError):
            Abc().lookup(index)

    def test_lookup_error_is_index_error(self):
        with pytest.raises(IndexError):
            Abc().lookup(64)

    def test_index_of_unknown_symbol(self):
        with pytest.raises(DecodingError):
            Abc().index_of("!")


class TestEncode:
    """Tests for encoding values into symbols."""

    def test_zero(self):
        """Zero takes one symbol."""
        assert len(Abc().encode(0, 1, 4)) == 1

    def test_small_value_needs_width(self):
        """48 needs 6 bits, more than one 4-bit symbol can hold."""
        abc = Abc()
        with pytest.raises(CapacityError) as exc_info:
            abc.encode(48, 1, 4)
        assert exc_info.value.required == 2
        assert exc_info.value.width == 1
        assert len(abc.encode(48, 2, 4)) == 2

    def test_huge_value(self):
        abc = Abc()
        with pytest.raises(CapacityError):
            abc.encode(214235345234524356, 14, 4)
        assert len(abc.encode(214235345234524356, 15, 4)) == 15

    def test_automatic_width(self):
        abc = Abc()
        assert len(abc.encode(214235345234524356, 0, 4)) == 15
        assert len(abc.encode(214235345234524356, 0, 6)) == 10
        assert len(abc.encode(25, 0, 4)) == 2

    def test_width_larger_than_required(self):
        """Extra positions are padded with encoded zeros."""
        abc = Abc()
        encoded = abc.encode(1, 4, 6)
        assert encoded == "z" + "g" * 3

    @pytest.mark.parametrize("digits", [4, 5, 6])
    def test_supported_digits(self, digits: int):
        assert Abc().encode(25, 0, digits)

    @pytest.mark.parametrize("digits", [2, 3, 7])
    def test_unsupported_digits(self, digits: int):
        with pytest.raises(InvalidDigitsError):
            Abc().encode(25, 0, digits)

    def test_unsupported_digits_is_config_and_encoding_error(self):
        with pytest.raises(ConfigError):
            Abc().encode(25, 0, 3)
        with pytest.raises(EncodingError):
            Abc().encode(25, 0, 3)

    def test_negative_value(self):
        with pytest.raises(EncodingError):
            Abc().encode(-1)

    def test_six_digits_is_deterministic(self):
        """Without random bits each symbol is the plain index lookup."""
        abc = Abc()
        assert abc.encode(0, 0, 6) == "g"
        assert abc.encode(1, 0, 6) == "z"
        assert abc.encode(64, 0, 6) == "gz"
        assert abc.encode(64, 0, 6) == abc.encode(64, 0, 6)

    def test_five_digits_only_randomizes_high_bit(self):
        """With 5 payload bits a symbol is one of two candidates."""
        abc = Abc()
        for _ in range(50):
            symbol = abc.encode(3, 1, 5)
            assert symbol in (abc.lookup(3), abc.lookup(3 | 32))

    def test_random_source_failure_falls_back(self, monkeypatch: pytest.MonkeyPatch):
        """Encoding keeps working when the secure random source is missing."""

        def no_entropy(size):
            raise NotImplementedError("no entropy source")

        monkeypatch.setattr(secrets, "token_bytes", no_entropy)
        abc = Abc()
        encoded = abc.encode(123456, 8, 5)
        assert len(encoded) == 8
        assert abc.decode(encoded, 5) == 123456


class TestDecode:
    """Tests for decoding symbols back into values."""

    @pytest.mark.parametrize(
        "value,digits",
        [
            (0, 4),
            (48, 4),
            (2**40 - 1, 5),
            (31, 5),
            (4095, 6),
            (214235345234524356, 6),
        ],
    )
    def test_decode_recovers_value(self, value: int, digits: int):
        """Random filler bits never leak into the decoded payload."""
        abc = Abc(DEFAULT_ABC, 155000)
        assert abc.decode(abc.encode(value, 0, digits), digits) == value

    def test_decode_empty(self):
        with pytest.raises(DecodingError):
            Abc().decode("")

    def test_decode_unknown_symbol(self):
        with pytest.raises(DecodingError):
            Abc().decode("gz!")

    def test_decode_with_other_seed_differs(self):
        """Ids only decode correctly with the seed they were encoded with."""
        encoded = Abc(DEFAULT_ABC, 1).encode(123456, 0, 6)
        assert Abc(DEFAULT_ABC, 2).decode(encoded, 6) != 123456

"""Tests for XORAnalyzer and its result objects"""

import pytest

from tests.conftest import TERMINATOR_KEY
from xorcrack.config import AnalysisConfig
from xorcrack.detectors.xor_analyzer import (
    DetectionResult,
    KeyLengthResult,
    RepeatingKeyXORResult,
    SingleByteXORResult,
    XORAnalyzer,
)
from xorcrack.utils.codec import decode_base16


@pytest.fixture
def analyzer():
    return XORAnalyzer()


class TestSingleByte:

    def test_break_single_byte(self, analyzer):
        message = decode_base16(
            "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"
        )

        result = analyzer.break_single_byte(message)

        assert isinstance(result, SingleByteXORResult)
        assert result.key == 0x58
        assert result.plaintext == b"Cooking MC's like a pound of bacon"
        assert "0x58" in str(result)

    def test_empty_ciphertext(self, analyzer):
        result = analyzer.break_single_byte(b"")
        assert (result.key, result.score, result.plaintext) == (0, 0.0, b"")

    def test_rank_single_byte_keys(self, analyzer):
        message = bytes(b ^ 0x13 for b in b"meet me by the old mill at noon")

        ranking = analyzer.rank_single_byte_keys(message, top_n=3)

        assert len(ranking) == 3
        assert ranking[0].key == 0x13
        assert ranking[0].score >= ranking[1].score >= ranking[2].score

    def test_rank_ties_keep_key_order(self, analyzer):
        ranking = analyzer.rank_single_byte_keys(b"\x00\x41", top_n=2)
        assert [r.key for r in ranking] == [0x20, 0x61]


class TestDetection:

    def test_finds_encrypted_line(self, analyzer, single_byte_candidates):
        detection = analyzer.detect_single_byte_xor(
            decode_base16(line) for line in single_byte_candidates
        )

        assert isinstance(detection, DetectionResult)
        assert detection.index == 17
        assert detection.result.key == 0x35
        assert detection.result.plaintext == b"Now that the party is jumping\n"

    def test_no_candidates(self, analyzer):
        assert analyzer.detect_single_byte_xor([]) is None

    def test_first_candidate_wins_ties(self, analyzer):
        detection = analyzer.detect_single_byte_xor([b"\x00", b"\x00"])
        assert detection.index == 0


class TestRepeatingKey:

    def test_estimate_key_length(self, analyzer, repeating_key_ciphertext):
        estimate = analyzer.estimate_key_length(repeating_key_ciphertext)

        assert isinstance(estimate, KeyLengthResult)
        assert estimate.key_length == len(TERMINATOR_KEY)

    def test_break_repeating_key(self, analyzer, repeating_key_ciphertext, long_plaintext):
        result = analyzer.break_repeating_key(repeating_key_ciphertext)

        assert isinstance(result, RepeatingKeyXORResult)
        assert result.key == TERMINATOR_KEY
        assert result.key_length == len(TERMINATOR_KEY)
        assert result.plaintext == long_plaintext
        assert result.score > 0.5
        assert "Terminator X" in str(result)

    def test_max_key_length_is_respected(self, repeating_key_ciphertext):
        analyzer = XORAnalyzer(AnalysisConfig(max_key_length=5))

        result = analyzer.break_repeating_key(repeating_key_ciphertext)

        assert 1 <= result.key_length <= 5
        assert len(result.key) == result.key_length

    def test_short_ciphertext(self, analyzer):
        result = analyzer.break_repeating_key(b"x")
        assert result.key_length == 1
        assert result.distance == 1.0
        assert len(result.plaintext) == 1

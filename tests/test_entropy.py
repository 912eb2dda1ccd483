"""Tests for the entropy calculator and quoted-candidate extraction."""

import random
import string

from secretsweep.scanner.entropy import extract_candidates, shannon_entropy


class TestShannonEntropy:
    def test_empty_string(self):
        assert shannon_entropy("") == 0.0

    def test_single_char_repeated(self):
        for ch in "a7Z-":
            assert shannon_entropy(ch * 40) == 0.0

    def test_two_symbols_balanced(self):
        assert abs(shannon_entropy("ab" * 16) - 1.0) < 1e-9

    def test_four_symbols_balanced(self):
        assert abs(shannon_entropy("abcd" * 8) - 2.0) < 1e-9

    def test_uniform_distribution(self):
        s = string.ascii_lowercase[:16]
        assert abs(shannon_entropy(s) - 4.0) < 1e-9

    def test_permutation_invariant(self):
        s = "Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5aaab"
        shuffled = list(s)
        random.Random(7).shuffle(shuffled)
        assert abs(shannon_entropy(s) - shannon_entropy("".join(shuffled))) < 1e-9

    def test_english_word_low(self):
        assert shannon_entropy("password") < 3.5

    def test_random_token_high(self):
        assert shannon_entropy("Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5") > 4.5


class TestCandidateExtraction:
    def test_double_quoted(self):
        line = 'key = "Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5"'
        assert extract_candidates(line) == ["Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5"]

    def test_single_quoted(self):
        line = "key = 'Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5'"
        assert extract_candidates(line) == ["Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5"]

    def test_mismatched_quotes_ignored(self):
        line = "key = \"Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5'"
        assert extract_candidates(line) == []

    def test_window_bounds(self):
        assert extract_candidates('"' + "a" * 19 + '"') == []
        assert extract_candidates('"' + "a" * 20 + '"') == ["a" * 20]
        assert extract_candidates('"' + "a" * 100 + '"') == ["a" * 100]
        assert extract_candidates('"' + "a" * 101 + '"') == []

    def test_multiple_candidates(self):
        a = "A" * 25
        b = "B" * 30
        line = f'x = ["{a}", \'{b}\']'
        assert extract_candidates(line) == [a, b]

    def test_custom_window(self):
        line = 'k = "short_value"'
        assert extract_candidates(line, min_length=5, max_length=20) == ["short_value"]

    def test_unquoted_ignored(self):
        assert extract_candidates("TOKEN=Zx9Qm2Lp7Rt4Vb8Nc1Kd6Hf3Jg5") == []

import io
import sys

import pytest

from drillbox.palindrome import is_palindrome, main


@pytest.mark.parametrize("word", ["arara", "ovo", "a", "", "abba", "racecar"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["casa", "ab", "palavra", "Arara"])
def test_non_palindromes(word):
    assert is_palindrome(word) is False


def test_reversal_is_symmetric():
    for word in ["abc", "level", "xyzzy"]:
        assert is_palindrome(word) == is_palindrome(word[::-1])


def test_main_reports_palindrome(capsys):
    assert main(["arara"]) == 0
    assert "A palavra inserida é palíndroma." in capsys.readouterr().out


def test_main_reports_non_palindrome(capsys):
    assert main(["casa"]) == 0
    assert "A palavra inserida não é palíndroma." in capsys.readouterr().out


def test_main_uses_first_word_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ovo casa\n"))
    assert main([]) == 0
    assert "é palíndroma." in capsys.readouterr().out
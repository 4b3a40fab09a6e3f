import io

import pytest

from wordlist.errors import OutputError
from wordlist.sink import open_output, write_lines, write_words


def test_write_words_one_per_line():
    buf = io.StringIO()
    assert write_words(["a", "b"], buf) == 2
    assert buf.getvalue() == "a\nb\n"


def test_write_lines_as_given():
    buf = io.StringIO()
    assert write_lines([], buf) == 0
    assert buf.getvalue() == ""


def test_open_output_creates_parent_dirs(tmp_path):
    target = tmp_path / "nested" / "deeper" / "words.txt"
    with open_output(str(target)) as f:
        write_words(["één", "two"], f)
    assert target.read_text(encoding="utf-8") == "één\ntwo\n"


def test_open_output_unusable_path_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(OutputError):
        with open_output(str(blocker / "sub" / "words.txt")):
            pass


def test_open_output_stdout(capsys):
    with open_output(None) as f:
        write_words(["x"], f)
    assert capsys.readouterr().out == "x\n"


def test_open_output_stdout_is_utf8_with_bare_newlines(capsysbinary):
    with open_output(None) as f:
        write_words(["привет", "Ärger"], f)
    assert capsysbinary.readouterr().out == "привет\nÄrger\n".encode("utf-8")

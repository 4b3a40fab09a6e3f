import cli
from wordlist.sources import hunspell_adapter


def _fake_source(words):
    def read_words(filename):
        return iter(words)
    return read_words


def test_cli_words_to_file(tmp_path, monkeypatch):
    monkeypatch.setattr(hunspell_adapter, "read_words", _fake_source(["Dog", "cat", "dog", "Ant"]))
    out = tmp_path / "out" / "words.txt"
    rc = cli.main(["words", "en.dic", "-u", "-s", "-i", "-l", "-o", str(out)])
    assert rc == 0
    assert out.read_text(encoding="utf-8") == "ant\ncat\ndog\n"


def test_cli_words_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr(hunspell_adapter, "read_words", _fake_source(["b", "a", "b"]))
    assert cli.main(["words", "en"]) == 0
    assert capsys.readouterr().out == "b\na\nb\n"


def test_cli_words_config_file(tmp_path, monkeypatch):
    monkeypatch.setattr(hunspell_adapter, "read_words", _fake_source(["b", "a", "b"]))
    out = tmp_path / "w.txt"
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(f"words:\n  unique: true\n  sort: true\noutput:\n  path: {out}\n", encoding="utf-8")
    assert cli.main(["words", "en.dic", "--config", str(cfg)]) == 0
    assert out.read_text(encoding="utf-8") == "a\nb\n"


def test_cli_words_missing_dictionary(tmp_path):
    assert cli.main(["words", str(tmp_path / "none.dic")]) == 1


def test_cli_compact(tmp_path):
    src = tmp_path / "sorted.txt"
    src.write_text("apple\napply\napt\n", encoding="utf-8")
    out = tmp_path / "c" / "compact.txt"
    assert cli.main(["compact", str(src), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "apple\n<y\n<<<t\n"


def test_cli_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "words" in capsys.readouterr().out


def test_cli_words_missing_dictionary_keeps_existing_output(tmp_path):
    out = tmp_path / "words.txt"
    out.write_text("keep me\n", encoding="utf-8")
    assert cli.main(["words", str(tmp_path / "typo.dic"), "-o", str(out)]) == 1
    assert out.read_text(encoding="utf-8") == "keep me\n"


def test_cli_compact_missing_input_keeps_existing_output(tmp_path):
    out = tmp_path / "compact.txt"
    out.write_text("keep me\n", encoding="utf-8")
    assert cli.main(["compact", str(tmp_path / "missing.txt"), "-o", str(out)]) == 1
    assert out.read_text(encoding="utf-8") == "keep me\n"

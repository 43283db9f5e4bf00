import io
import json

from unitranslit.cli import main


def test_cli_transliterates_arguments(capsys, monkeypatch):
    monkeypatch.delenv("UNITRANSLIT_MODE", raising=False)
    assert main(["Fußgängerübergänge"]) == 0
    assert capsys.readouterr().out == "Fussgaengeruebergaenge\n"


def test_cli_joins_multiple_arguments(capsys):
    assert main(["I", "❤", "cofée"]) == 0
    assert capsys.readouterr().out == "I red heart cofee\n"


def test_cli_custom_map(capsys):
    assert main(["test_custom", "--map", "_=-"]) == 0
    assert capsys.readouterr().out == "test-custom\n"


def test_cli_mapping_file(tmp_path, capsys):
    path = tmp_path / "mapping.json"
    path.write_text(json.dumps({"_": "+"}), encoding="utf-8")
    assert main(["a_b", "--mapping-file", str(path), "--map", "b=c"]) == 0
    assert capsys.readouterr().out == "a+c\n"


def test_cli_without_default_mapping(capsys):
    assert main(["--no-default-mapping", "Fußgänger"]) == 0
    assert capsys.readouterr().out == "Fußganger\n"


def test_cli_compose_mode(capsys):
    assert main(["--mode", "nfc", "cofée"]) == 0
    assert capsys.readouterr().out == "cofée\n"


def test_cli_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Я люблю\n\nединорогов\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Ya lyublyu\n\nedinorogov\n"


def test_cli_reports_invalid_mapping(capsys):
    assert main(["abc", "--map", "toolongkey=x"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error:")


def test_cli_reports_unreadable_mapping_file(tmp_path, capsys):
    path = tmp_path / "mapping.json"
    path.write_text("{not json", encoding="utf-8")
    assert main(["abc", "--mapping-file", str(path)]) == 2
    assert capsys.readouterr().err.startswith("error:")

    assert main(["abc", "--mapping-file", str(tmp_path / "missing.json")]) == 2
    assert capsys.readouterr().err.startswith("error:")

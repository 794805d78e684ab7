import io

import pytest

from joguinhos.cadastro import Registry, default_records
from joguinhos.cadastro_classic import format_row, main, table


def run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_format_row_is_bar_delimited_and_right_aligned():
    record = default_records()[0]
    row = format_row(record)
    assert row.startswith("|")
    assert row.endswith("|")
    assert not row.endswith("||")
    assert len(row) == 1 + 5 * 20 + 4 * 2 + 1
    assert row.split("||")[0] == "|" + record.name.rjust(20)


def test_table_of_one_record():
    registry = Registry()
    lines = table(registry, 2, 3).splitlines()
    assert len(lines) == 5
    assert lines[1].startswith("|                NOME||")
    assert lines[1].endswith("TELEFONE|")
    assert lines[3] == format_row(registry[2])
    assert lines[2] == lines[4]


def test_table_defaults_to_every_record():
    registry = Registry()
    lines = table(registry).splitlines()
    assert len(lines) == 3 + len(registry) + 1
    assert all(len(line) == len(lines[0]) for line in lines[1:])


@pytest.mark.parametrize("start, stop", [(-1, 2), (3, 2), (0, 11)])
def test_table_rejects_bad_ranges(start, stop):
    with pytest.raises(IndexError):
        table(Registry(), start, stop)


def test_main_shows_banner_and_table(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1\nn\n\n\n")
    assert code == 0
    assert "Utilize somente letras maiusculas" in out
    assert out.count(format_row(default_records()[0])) == 2


def test_main_edits_found_record(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1\ns\nn\nAlan\ns\nn\nZeca\nn\n\n\n")
    assert code == 0
    final = out.rsplit("\x1b[2J\x1b[H", 1)[1]
    assert " Zeca||" in final
    assert " Alan||" not in final


def test_main_reports_missing_record(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1\ns\nt\nnobody\n\n\n")
    assert code == 0
    assert "Nao achou" in out
    assert "Deseja editar cadastro" not in out


def test_main_edits_last_of_duplicate_names(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1\ns\nn\nAugusto\ns\ne\nAvenida\nn\n\n\n")
    assert code == 0
    final = out.rsplit("\x1b[2J\x1b[H", 1)[1]
    rows = [line for line in final.splitlines() if "Augusto" in line]
    assert len(rows) == 2
    assert "Avenida" not in rows[0]
    assert "Avenida" in rows[1]


def test_main_fills_records_by_hand(monkeypatch, capsys):
    entries = "".join(
        f"N{i}\nE{i}\nC{i}\nB{i}\nT{i}\n" for i in range(1, 11)
    )
    code, out = run(monkeypatch, capsys, "2\n" + entries + "n\n\n\n")
    assert code == 0
    final = out.rsplit("\x1b[2J\x1b[H", 1)[1]
    assert "N10||" in final
    assert "Augusto" not in final


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    code, _ = run(monkeypatch, capsys, "1\n")
    assert code == 1
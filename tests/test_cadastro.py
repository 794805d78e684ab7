import io

import pytest

from joguinhos.cadastro import (
    Field,
    Record,
    Registry,
    default_records,
    format_row,
    main,
)


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_default_records_hold_source_data():
    records = default_records()
    assert len(records) == 10
    assert records[0].name == "Augusto"
    assert records[1].name == "Henrique Martins"
    assert records[0].postal_code == "74000102"
    assert records[9].postal_code == "74000111"
    assert records[9].address == "Rua 10"
    assert records[6].district == "Centro-Oeste"


def test_default_phones_are_distinct():
    phones = [record.phone for record in default_records()]
    assert len(set(phones)) == len(phones)


def test_search_finds_every_match_in_order():
    registry = Registry()
    assert registry.search(Field.NAME, "Augusto") == [0, 7]


def test_search_by_letter_matches_enum():
    registry = Registry()
    phone = registry[4].phone
    assert registry.search("t", phone) == registry.search(Field.PHONE, phone) == [4]


def test_search_is_exact():
    registry = Registry()
    assert registry.search(Field.NAME, "augusto") == []
    assert registry.search(Field.NAME, "Augusto ") == []


def test_search_rejects_unknown_field():
    with pytest.raises(ValueError):
        Registry().search("x", "Alan")


def test_update_changes_record():
    registry = Registry()
    registry.update(3, Field.DISTRICT, "Vila Nova")
    assert registry[3].district == "Vila Nova"
    assert registry.search("b", "Vila Nova") == [3]


def test_update_out_of_range_raises():
    registry = Registry()
    with pytest.raises(IndexError):
        registry.update(10, Field.NAME, "Ana")
    with pytest.raises(IndexError):
        registry.update(-1, Field.NAME, "Ana")


def test_update_enforces_field_limits():
    registry = Registry()
    with pytest.raises(ValueError):
        registry.update(0, Field.POSTAL_CODE, "1" * 9)
    with pytest.raises(ValueError):
        registry.update(0, Field.NAME, "x" * 21)
    registry.update(0, Field.NAME, "x" * 20)
    assert registry[0].name == "x" * 20


def test_record_rejects_long_values():
    with pytest.raises(ValueError):
        Record("Ana", "Rua 1", "123456789", "Centro", "0000000001")


def test_format_row_layout():
    record = default_records()[3]
    row = format_row(record, 4)
    assert row.startswith("|                Alan||")
    assert row.endswith("||4")
    assert len(row) == len(format_row(record, 5))
    assert row.count("||") == 5


def test_table_header_and_rows():
    table = Registry().table()
    lines = table.splitlines()
    assert lines[1] == (
        "|                NOME||            ENDERECO||                 CEP||"
        "              BAIRRO||            TELEFONE||ID "
    )
    assert len(lines) == 3 + 10 + 1
    assert lines[3].endswith("||1")
    assert lines[12].endswith("||10")


def test_table_slice_numbers_rows_by_position():
    lines = Registry().table(7, 8).splitlines()
    assert len(lines) == 5
    assert lines[3] == format_row(default_records()[7], 8)


def test_table_rejects_bad_range():
    registry = Registry()
    with pytest.raises(IndexError):
        registry.table(5, 3)
    with pytest.raises(IndexError):
        registry.table(0, 11)


def test_main_prefilled_without_search(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\nn\n\n")
    assert code == 0
    assert "Bem vindo ao Modulo de Cadastro!" in out
    assert out.count("Henrique Martins") == 2


def test_main_edits_single_match(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\ns\nn\nNelson\ns\nt\n0000000099\nn\n\n")
    assert code == 0
    assert "0000000099" in out.split("Telefone: ")[-1]


def test_main_reports_missing_then_finds(monkeypatch, capsys):
    phone = default_records()[2].phone
    code, out = _run(monkeypatch, capsys, f"1\ns\nt\n123\n{phone}\nn\nn\n\n")
    assert code == 0
    assert "Nao achou" in out
    assert out.count("Gostaria de localizar algum cadastro?(s/n) : ") == 2


def test_main_asks_id_for_several_matches(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\ns\nn\nAugusto\ns\n8\nn\nAugusta\nn\n\n")
    assert code == 0
    assert "Digite o ID do cadastro: " in out
    final = out.split("\x1b[2J\x1b[H")[-1]
    row8 = next(line for line in final.splitlines() if line.endswith("||8"))
    assert "Augusta" in row8
    row1 = next(line for line in final.splitlines() if line.endswith("||1"))
    assert "Augusto" in row1


def test_main_manual_mode(monkeypatch, capsys):
    entries = "".join(
        f"Pessoa {n}\nRua {n}\n7400{n:04d}\nBairro {n}\n{n:010d}\n" for n in range(1, 11)
    )
    code, out = _run(monkeypatch, capsys, "2\n" + entries + "n\n\n")
    assert code == 0
    assert "Inserir cadastro 10 de 10 cadastros" in out
    assert "Pessoa 10" in out
    assert "Augusto" not in out.split("\x1b[2J\x1b[H")[-1]


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    code, _ = _run(monkeypatch, capsys, "")
    assert code == 1
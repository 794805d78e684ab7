"""A small registry of ten contact records with search and in-place editing."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from enum import Enum
from typing import TextIO

RECORD_COUNT = 10
FIELD_WIDTH = 20

_CLEAR_SCREEN = "\x1b[2J\x1b[H"

_HEADER = (
    "_" * 111
    + "\n"
    + "|                NOME||            ENDERECO||                 CEP||"
    + "              BAIRRO||            TELEFONE||ID \n"
    + "|" + "-" * 108 + "||    \n"
)
_FOOTER = "|" + "-" * 108 + "||\n"

_BANNER = (
    "\n\n"
    "|**************************************|\n"
    "|                                      |\n"
    "|  Bem vindo ao Modulo de Cadastro!    |\n"
    "|                                      |\n"
    "|                                      |\n"
    "|______________________________________|\n"
    "\n\n"
)


class Field(str, Enum):
    """A record field, keyed by the letter used to pick it."""

    NAME = "n"
    ADDRESS = "e"
    POSTAL_CODE = "c"
    DISTRICT = "b"
    PHONE = "t"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self]

    @property
    def max_length(self) -> int:
        return _LIMITS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_ATTRIBUTES = {
    Field.NAME: "name",
    Field.ADDRESS: "address",
    Field.POSTAL_CODE: "postal_code",
    Field.DISTRICT: "district",
    Field.PHONE: "phone",
}

_LIMITS = {
    Field.NAME: 20,
    Field.ADDRESS: 20,
    Field.POSTAL_CODE: 8,
    Field.DISTRICT: 20,
    Field.PHONE: 20,
}

_LABELS = {
    Field.NAME: "Nome",
    Field.ADDRESS: "Endereco",
    Field.POSTAL_CODE: "CEP",
    Field.DISTRICT: "Bairro",
    Field.PHONE: "Telefone",
}


def _check(field: Field, value: str) -> str:
    if len(value) > field.max_length:
        raise ValueError(
            f"{field.label} holds at most {field.max_length} characters"
        )
    return value


@dataclasses.dataclass
class Record:
    """One entry of the registry."""

    name: str
    address: str
    postal_code: str
    district: str
    phone: str

    def __post_init__(self) -> None:
        for field in Field:
            _check(field, getattr(self, field.attribute))

    def values(self) -> tuple[str, ...]:
        """The field values in table order."""
        return tuple(getattr(self, field.attribute) for field in Field)


def default_records() -> list[Record]:
    """The ten records the registry starts with."""
    names = [
        "Augusto", "Henrique Martins", "Jose Paulo", "Alan", "Paulo Henrique",
        "Ana Carolina", "Loren", "Augusto", "Nelson", "Bruno",
    ]
    districts = [
        "Centro", "leste", "Oeste", "Norte", "sul",
        "Noroeste", "Centro-Oeste", "Sudeste", "Sudoeste", "Nordeste",
    ]
    return [
        Record(
            name=name,
            address=f"Rua {number}",
            postal_code=str(74000101 + number),
            district=district,
            phone=f"{number:010d}",
        )
        for number, (name, district) in enumerate(zip(names, districts), start=1)
    ]


def format_row(record: Record, number: int) -> str:
    """One table line for ``record``, ending with its one-based ``number``."""
    cells = "||".join(f"{value:>{FIELD_WIDTH}}" for value in record.values())
    return f"|{cells}||{number}"


@dataclasses.dataclass
class Registry:
    """The records held by the program."""

    records: list[Record] = dataclasses.field(default_factory=default_records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.records):
            raise IndexError(f"no record at position {index}")

    def search(self, field: Field | str, value: str) -> list[int]:
        """Positions of the records whose ``field`` equals ``value`` exactly."""
        attribute = Field(field).attribute
        return [
            index
            for index, record in enumerate(self.records)
            if getattr(record, attribute) == value
        ]

    def update(self, index: int, field: Field | str, value: str) -> Record:
        """Set ``field`` of the record at ``index`` to ``value``."""
        self._check_index(index)
        field = Field(field)
        setattr(self.records[index], field.attribute, _check(field, value))
        return self.records[index]

    def table(self, start: int = 0, stop: int | None = None) -> str:
        """The records from ``start`` up to ``stop`` drawn as a table."""
        if stop is None:
            stop = len(self.records)
        if not 0 <= start <= stop <= len(self.records):
            raise IndexError(f"invalid record range {start}..{stop}")
        rows = "".join(
            format_row(self.records[index], index + 1) + "\n"
            for index in range(start, stop)
        )
        return _HEADER + rows + _FOOTER


class _Console:
    """Prompts over a pair of text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def line(self, prompt: str) -> str:
        self.write(prompt)
        return self._readline()

    def char(self, prompt: str) -> str:
        self.write(prompt)
        while True:
            text = self._readline().strip()
            if text:
                return text[0]

    def integer(self, prompt: str) -> int | None:
        try:
            return int(self.line(prompt).strip())
        except ValueError:
            return None

    def pause(self) -> None:
        self.write("Pressione Enter para continuar. . .")
        try:
            self._readline()
        except EOFError:
            pass
        self.write("\n")


def _ask_value(console: _Console, field: Field, prompt: str) -> str:
    while True:
        value = console.line(prompt)
        try:
            return _check(field, value)
        except ValueError:
            console.write(f"Maximo de {field.max_length} caracteres!\n")


def _fill(console: _Console) -> list[Record]:
    prompts = {
        Field.NAME: "Nome : ",
        Field.ADDRESS: "Endereco : ",
        Field.POSTAL_CODE: "cep : ",
        Field.DISTRICT: "bairro : ",
        Field.PHONE: "telefone : ",
    }
    records = []
    for number in range(1, RECORD_COUNT + 1):
        console.write(f"Inserir cadastro {number} de {RECORD_COUNT} cadastros\n")
        values = {}
        for field, prompt in prompts.items():
            values[field.attribute] = _ask_value(console, field, prompt)
            console.write("\n")
        records.append(Record(**values))
    return records


def _choose_mode(console: _Console, registry: Registry) -> None:
    console.write(
        "Deseja utilizar o sistema no modo prego na areia ou prego na madeira?\n"
        "Prego na areia = Dados preenchidos | "
        "Prego na madeira = Preencher manualmente os 10 cadastros\n"
    )
    while True:
        mode = console.integer("Areia(1), Madeira(2) : ")
        if mode == 2:
            console.write("\n")
            registry.records = _fill(console)
            return
        if mode == 1:
            return


def _edit(console: _Console, registry: Registry, index: int) -> None:
    while True:
        while True:
            console.write("Nome(n), Endereco(e), CEP(c), Bairro(b) e telefone(t)\n")
            key = console.char("Qual campo deseja editar ? : ")
            try:
                field = Field(key)
            except ValueError:
                continue
            break
        value = _ask_value(console, field, f"{field.label}: ")
        registry.update(index, field, value)
        while True:
            answer = console.char("Deseja editar outro campo? (s/n) : ")
            if answer == "n":
                return
            if answer == "s":
                break
            console.write("Favor digitar opcao correta!\n")


def _search_and_edit(console: _Console, registry: Registry, field: Field) -> bool:
    """Search until something is found; return whether a record was edited."""
    while True:
        console.write("\n")
        query = console.line("Digite os dados para buscar:")
        matches = registry.search(field, query)
        if matches:
            break
        console.write("Nao achou\n")

    for index in matches:
        console.write("\n")
        console.write(registry.table(index, index + 1))

    while True:
        console.write("\n")
        answer = console.char("Deseja editar cadastro?(s/n): ")
        console.write("\n")
        if answer == "s":
            index = matches[-1]
            if len(matches) > 1:
                console.write("Qual cadastro deseja editar?\n")
                while True:
                    number = console.integer("Digite o ID do cadastro: ")
                    if number is not None and 1 <= number <= len(registry):
                        break
                index = number - 1
                console.write("\n")
            _edit(console, registry, index)
            return True
        if answer == "n":
            return False
        console.write("Favor digitar opcao valida!\n ")


def _choose_search(console: _Console, registry: Registry) -> None:
    while True:
        while True:
            choice = console.char("Gostaria de localizar algum cadastro?(s/n) : ")
            console.write("\n")
            if choice in ("s", "n"):
                break
        if choice == "n":
            return
        while True:
            console.write("\n")
            kind = console.char("Buscar por NOME(n) ou TELEFONE(t) : ")
            if kind == "n":
                field = Field.NAME
                break
            if kind == "t":
                field = Field.PHONE
                break
            console.write("Favor digitar opcao valida!\n ")
        if _search_and_edit(console, registry, field):
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive registry."""
    parser = argparse.ArgumentParser(
        prog="cadastro", description="Browse, search and edit ten records."
    )
    parser.parse_args(argv)

    console = _Console(sys.stdin, sys.stdout)
    registry = Registry()
    try:
        console.write(_BANNER)
        _choose_mode(console, registry)
        console.write(_CLEAR_SCREEN)
        console.write(registry.table())
        console.write("\n")
        _choose_search(console, registry)
        console.write(_CLEAR_SCREEN)
        console.write(registry.table())
        console.pause()
    except EOFError:
        console.write("\n")
        return 1
    return 0
"""The first release of the record registry: a five-column table and a single search."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from joguinhos.cadastro import FIELD_WIDTH, RECORD_COUNT, Field, Record, Registry

_CLEAR_SCREEN = "\x1b[2J\x1b[H"

_RULE = "|" + "-" * 108 + "|\n"
_HEADER = (
    "_" * 110
    + "\n"
    + "|                NOME||            ENDERECO||                 CEP||"
    + "              BAIRRO||            TELEFONE|\n"
    + _RULE
)
_FOOTER = _RULE

_BANNER = (
    "\n\n"
    "|**************************************|\n"
    "|     Bem vindo ao Modulo Cadastro!    |\n"
    "|                                      |\n"
    "| Utilize somente letras maiusculas    |\n"
    "|   para a busca e o cadastro.         |\n"
    "|______________________________________|\n"
    "\n\n"
)

_FILL_PROMPTS = {
    Field.NAME: "Nome : ",
    Field.ADDRESS: "Endereco : ",
    Field.POSTAL_CODE: "cep : ",
    Field.DISTRICT: "bairro : ",
    Field.PHONE: "telefone : ",
}


def format_row(record: Record) -> str:
    """One table line for ``record``, closed by a single bar."""
    cells = "||".join(f"{value:>{FIELD_WIDTH}}" for value in record.values())
    return f"|{cells}|"


def table(registry: Registry, start: int = 0, stop: int | None = None) -> str:
    """The records of ``registry`` from ``start`` up to ``stop`` drawn as a table."""
    if stop is None:
        stop = len(registry)
    if not 0 <= start <= stop <= len(registry):
        raise IndexError(f"invalid record range {start}..{stop}")
    rows = "".join(format_row(registry[index]) + "\n" for index in range(start, stop))
    return _HEADER + rows + _FOOTER


class _Console:
    """Line-based prompts over a pair of text streams."""

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
        if len(value) <= field.max_length:
            return value
        console.write(f"Maximo de {field.max_length} caracteres!\n")


def _fill(console: _Console) -> list[Record]:
    records = []
    for number in range(1, RECORD_COUNT + 1):
        console.write(f"Inserir cadastro {number} de {RECORD_COUNT} cadastros\n")
        values = {}
        for field, prompt in _FILL_PROMPTS.items():
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
    if console.integer("Areia(1), Madeira(2) : ") == 2:
        console.write("\n")
        registry.records = _fill(console)


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
        registry.update(index, field, _ask_value(console, field, f"{field.label}: "))
        while True:
            answer = console.char("Deseja editar outro campo? (s/n) : ")
            if answer == "n":
                return
            if answer == "s":
                break
            console.write("Favor digitar opcao correta!\n")


def _search(console: _Console, registry: Registry, field: Field) -> None:
    console.write("\n")
    query = console.line("Digite os dados para buscar:")
    matches = registry.search(field, query)
    for index in matches:
        console.write("\n")
        console.write(table(registry, index, index + 1))
    if not matches:
        console.write("Nao achou\n")
        return
    while True:
        console.write("\n")
        answer = console.char("Deseja editar cadastro?(s/n): ")
        console.write("\n")
        if answer == "s":
            _edit(console, registry, matches[-1])
            return
        if answer == "n":
            return
        console.write("Favor digitar opcao valida!\n ")


def _choose_search(console: _Console, registry: Registry) -> None:
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
            _search(console, registry, Field.NAME)
            return
        if kind == "t":
            _search(console, registry, Field.PHONE)
            return
        console.write("Favor digitar opcao valida!\n ")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive registry in its first-release form."""
    parser = argparse.ArgumentParser(
        prog="cadastro-classic", description="Browse, search and edit ten records."
    )
    parser.parse_args(argv)

    console = _Console(sys.stdin, sys.stdout)
    registry = Registry()
    try:
        console.write(_BANNER)
        _choose_mode(console, registry)
        console.write(_CLEAR_SCREEN)
        console.write(table(registry))
        console.write("\n")
        _choose_search(console, registry)
        console.pause()
        console.write(_CLEAR_SCREEN)
        console.write(table(registry))
        console.pause()
    except EOFError:
        console.write("\n")
        return 1
    return 0
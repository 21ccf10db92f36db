"""Interactive menus that show the available options and read the user's choice."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from .console import Console

EXIT = 0

_RULE = "------------------"

_INTEGER_PATTERN = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")

_MAIN_ITEMS = (
    "1.Cadastros",
    "2.Relatorios",
    "3.Consultas",
    "4.Arquivos",
    "0.Sair do programa",
)

_REGISTRATION_ITEMS = (
    "1.Cadastro de usuarios do sistema",
    "2.Cadastro de pessoas (funcionarios)",
    "3.Ordenar funcionarios (A-Z)",
    "4.Inativar funcionario",
    "5.Excluir funcionario",
    "0.Retornar ao menu principal",
)

_REPORT_ITEMS = (
    "1.Listar dados dos usuarios do sistema",
    "2.Listar cadastro de funcionarios",
    "3.Listar funcionarios por faixa salarial",
    "4.Listar funcionarios ativos",
    "5.Listar funcionarios por funcao",
    "0.Retornar ao menu principal",
)

_QUERY_ITEMS = (
    "1.Localizar pessoa por nome (funcionario)",
    "0.Retornar ao menu principal",
)

_FILE_ITEMS = (
    "1.Exportar dados para aquivo texto",
    "2.Exportar dados para formato csv (Excel)",
    "0.Retornar ao menu principal",
)


def _parse_option(text: str) -> Optional[int]:
    """Read a leading integer (decimal, octal or hex) as an unsigned byte."""
    match = _INTEGER_PATTERN.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits, 16)
    elif len(digits) > 1 and digits.startswith("0"):
        octal = re.match(r"[0-7]*", digits).group()
        value = int(octal, 8) if octal else 0
    else:
        value = int(digits)
    if sign == "-":
        value = -value
    return value & 0xFF


def _choose(console: Console, title: str, items: Sequence[str]) -> Optional[int]:
    console.clear_screen()
    lines = [title, _RULE, *items]
    console.write("\n".join(lines) + "\n")
    return _parse_option(console.read_line("::: "))


def main_menu(console: Console) -> Optional[int]:
    """Show the main menu; return the chosen option, or None if unreadable."""
    return _choose(console, "| MENU PRINCIPAL |", _MAIN_ITEMS)


def registrations_menu(console: Console) -> Optional[int]:
    return _choose(console, "| MENU CADASTROS |", _REGISTRATION_ITEMS)


def reports_menu(console: Console) -> Optional[int]:
    return _choose(console, "| MENU RELATORIOS |", _REPORT_ITEMS)


def queries_menu(console: Console) -> Optional[int]:
    return _choose(console, "| MENU CONSULTAS |", _QUERY_ITEMS)


def files_menu(console: Console) -> Optional[int]:
    return _choose(console, "| MENU MANIPULACAO DE ARQUIVOS |", _FILE_ITEMS)
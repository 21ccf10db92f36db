"""Text reports over employee records."""

from __future__ import annotations

from typing import Iterable

from .console import header
from .model import Employee, Status


def _signed_byte(value: int) -> int:
    value &= 0xFF
    return value - 256 if value > 127 else value


def format_employee(employee: Employee) -> str:
    """Return the labelled block describing one employee."""
    lines = [
        f"Codigo.....................: {_signed_byte(employee.code)}",
        f"Nome da pessoa.............: {employee.name}",
        f"Email da pessoa............: {employee.email}",
        f"CPF da pessoa..............: {employee.cpf}",
        f"Funcao.....................: {employee.function}",
        f"Salario....................: {employee.salary:.2f}",
        f"Data da admissao...........: {employee.admission}",
    ]
    if employee.status == Status.INACTIVE:
        lines.append(f"Data da demissao...........: {employee.dismissal}")
    lines.append(f"Status.....................: {int(employee.status)}")
    return "\n".join(lines) + "\n"


def all_employees_report(employees: Iterable[Employee]) -> str:
    body = "".join(format_employee(employee) + "\n" for employee in employees)
    return header("Relatorio de Funcionarios") + body


def salary_range_report(
    employees: Iterable[Employee], minimum: float, maximum: float
) -> str:
    """List employees whose salary lies within the inclusive range."""
    matches = [e for e in employees if minimum <= e.salary <= maximum]
    text = (
        f"Funcionarios com salario entre R$ {minimum:.2f} e R$ {maximum:.2f}: \n\n"
    )
    text += "".join(
        format_employee(e) + "\n======================================\n"
        for e in matches
    )
    if not matches:
        text += "Nenhum funcionario encontrado dentro desta faixa\n"
    return text


def active_employees_report(employees: Iterable[Employee]) -> str:
    body = "".join(
        format_employee(e) + "\n" for e in employees if e.status == Status.ACTIVE
    )
    return header("Relatorio de Funcionarios Ativos") + body


def function_report(function: str, employees: Iterable[Employee]) -> str:
    """List employees holding exactly the given function."""
    matches = [e for e in employees if e.function == function]
    text = header("Relatorio de Funcionarios por Funcao")
    text += "".join(format_employee(e) + "\n" for e in matches)
    if not matches:
        text += f"Nao ha funcionarios exercendo a funcao {function}\n"
    return text
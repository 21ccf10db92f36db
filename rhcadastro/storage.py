"""Binary persistence and text/CSV export of employee records."""

from __future__ import annotations

import struct
from functools import partial
from os import PathLike
from typing import Iterable, Union

from .model import Date, Employee, Registry, Status
from .reports import format_employee

PathType = Union[str, "PathLike[str]"]

_NAME_SIZE = 100
_CPF_SIZE = 15

# Fixed-size record: code, name, e-mail, CPF, function, salary, admission and
# dismissal dates, status, then alignment padding and an unused link slot.
_RECORD = struct.Struct(f"<B{_NAME_SIZE}s{_NAME_SIZE}s{_CPF_SIZE}s{_NAME_SIZE}sf7i12x")
RECORD_SIZE = _RECORD.size

_TEXT_RULE = "----------------------------------"
_CSV_HEADER = "CODIGO;NOME;Email;CPF;FUNCAO;SALARIO;ADMISSAO;DEMISSAO;STATUS\n"


def _encode(text: str, size: int) -> bytes:
    # Leave room for the terminating NUL.
    return text.encode("utf-8")[: size - 1]


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def pack_record(employee: Employee) -> bytes:
    """Encode one employee as a fixed-size binary record."""
    return _RECORD.pack(
        employee.code & 0xFF,
        _encode(employee.name, _NAME_SIZE),
        _encode(employee.email, _NAME_SIZE),
        _encode(employee.cpf, _CPF_SIZE),
        _encode(employee.function, _NAME_SIZE),
        employee.salary,
        employee.admission.day,
        employee.admission.month,
        employee.admission.year,
        employee.dismissal.day,
        employee.dismissal.month,
        employee.dismissal.year,
        int(employee.status),
    )


def unpack_record(data: bytes) -> Employee:
    """Decode one binary record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"record must be {RECORD_SIZE} bytes, got {len(data)}")
    (code, name, email, cpf, function, salary,
     adm_day, adm_month, adm_year,
     dis_day, dis_month, dis_year, status) = _RECORD.unpack(data)
    return Employee(
        name=_decode(name),
        email=_decode(email),
        cpf=_decode(cpf),
        function=_decode(function),
        salary=salary,
        admission=Date(adm_day, adm_month, adm_year),
        dismissal=Date(dis_day, dis_month, dis_year),
        status=Status(status),
        code=code,
    )


def save_binary(path: PathType, employees: Iterable[Employee]) -> None:
    with open(path, "wb") as stream:
        for employee in employees:
            stream.write(pack_record(employee))


def load_binary(path: PathType, registry: Registry) -> int:
    """Read records into the front of the registry; return how many were read.

    A trailing incomplete record is ignored.
    """
    loaded = 0
    with open(path, "rb") as stream:
        for chunk in iter(partial(stream.read, RECORD_SIZE), b""):
            if len(chunk) < RECORD_SIZE:
                break
            registry.insert_front(unpack_record(chunk))
            loaded += 1
    return loaded


def export_text(path: PathType, employees: Iterable[Employee]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.write(f"{_TEXT_RULE}\nRelatorio Completo de Funcionarios\n{_TEXT_RULE}\n\n")
        for employee in employees:
            stream.write(format_employee(employee) + "\n")


def export_csv(path: PathType, employees: Iterable[Employee]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.write(_CSV_HEADER)
        for employee in employees:
            code = employee.code & 0xFF
            fields = [
                str(code - 256 if code > 127 else code),
                employee.name,
                employee.email,
                employee.cpf,
                employee.function,
                f"{employee.salary:.2f}",
                str(employee.admission),
                str(employee.dismissal),
                str(int(employee.status)),
            ]
            stream.write(";".join(fields) + "\n")
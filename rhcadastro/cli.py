"""Command-line front end of the employee register."""

from __future__ import annotations

import re
import sys
from typing import Callable, Mapping, Optional, Sequence

from .console import Console, to_upper
from .menus import (
    EXIT,
    files_menu,
    main_menu,
    queries_menu,
    registrations_menu,
    reports_menu,
)
from .model import Employee, Registry, parse_date
from .reports import (
    active_employees_report,
    all_employees_report,
    format_employee,
    function_report,
    salary_range_report,
)
from .storage import PathType, export_csv, export_text, load_binary, save_binary

_TEXT_SIZE = 100
_CPF_SIZE = 15

_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_float(text: str) -> float:
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def _read_field(console: Console, prompt: str, size: int = _TEXT_SIZE) -> str:
    return console.read_line(prompt)[: size - 1]


def new_employee(console: Console) -> Employee:
    """Ask the user for the data of a new, active employee."""
    name = to_upper(_read_field(console, "Nome da pessoa.............: "))
    email = to_upper(_read_field(console, "Email da pessoa............: "))
    cpf = _read_field(console, "CPF da pessoa..............: ", _CPF_SIZE)
    function = to_upper(_read_field(console, "Funcao.....................: "))
    salary = _parse_float(console.read_line("Salario....................: "))
    admission = parse_date(console.read_line("Data da admissao...........: "))
    return Employee(
        name=name,
        email=email,
        cpf=cpf,
        function=function,
        salary=salary,
        admission=admission,
    )


class App:
    """The interactive register bound to one binary data file."""

    def __init__(
        self,
        path: PathType,
        at_front: bool = True,
        console: Optional[Console] = None,
    ) -> None:
        self.path = path
        self.at_front = at_front
        self.console = console if console is not None else Console()
        self.registry = Registry()

    def run(self) -> None:
        """Load the data file, serve the menus, then save the records."""
        self._load()
        self.registry.sort_by_name()
        submenus: Mapping[int, Callable[[], None]] = {
            1: self._registrations,
            2: self._reports,
            3: self._queries,
            4: self._files,
        }
        try:
            while True:
                option = main_menu(self.console)
                if option == EXIT:
                    break
                handler = submenus.get(option)
                if handler is not None:
                    handler()
        except EOFError:
            pass
        if not self.registry.is_empty():
            self._save()

    def _load(self) -> None:
        try:
            load_binary(self.path, self.registry)
        except (OSError, ValueError):
            self.console.write("Falha ao abrir o arquivo!\n")

    def _save(self) -> None:
        try:
            save_binary(self.path, self.registry)
        except OSError:
            self.console.write(f"Erro ao tentar abrir o arquivo {self.path}\n")

    def _serve(
        self,
        menu: Callable[[Console], Optional[int]],
        actions: Mapping[int, Callable[[], None]],
    ) -> None:
        while True:
            option = menu(self.console)
            if option == EXIT:
                return
            action = actions.get(option)
            if action is not None:
                action()

    def _ask_name(self, prompt: str) -> str:
        return to_upper(_read_field(self.console, prompt))

    def _not_registered(self, message: str) -> None:
        self.console.write(message)
        self.console.press_enter()

    # Registrations

    def _registrations(self) -> None:
        self._serve(
            registrations_menu,
            {
                2: self._add_employee,
                3: self.registry.sort_by_name,
                4: self._inactivate_employee,
                5: self._delete_employee,
            },
        )

    def _add_employee(self) -> None:
        try:
            employee = new_employee(self.console)
        except ValueError as error:
            self.console.write(f"{error}\n")
            return
        if self.at_front:
            self.registry.insert_front(employee)
        else:
            self.registry.insert_back(employee)

    def _inactivate_employee(self) -> None:
        self.console.clear_screen()
        name = self._ask_name("Qual o nome do funcionario? ")
        employee = self.registry.find_by_name(name)
        if employee is None:
            self._not_registered(f"{name} nao esta cadastrado!\n")
            return
        self.console.write(format_employee(employee))
        answer = self.console.read_line(
            "\nConfirma a inativacao do funcionario (S/N)? "
        )
        if answer[:1] in ("S", "s"):
            text = self.console.read_line("Informe a data do desligamento: ")
            try:
                employee.inactivate(parse_date(text))
            except ValueError as error:
                self.console.write(f"{error}\n")

    def _delete_employee(self) -> None:
        self.console.clear_screen()
        name = self._ask_name("Qual funcionario vc quer excluir? ")
        employee = self.registry.find_by_name(name)
        if employee is None:
            self._not_registered(f"{name} nao esta cadastrado em nosso sistema\n")
            return
        self.console.write(format_employee(employee))
        answer = self.console.read_line(
            "\nConfirma para excluir digite a letra /s/ e para nao excluir "
            "digite a letra /n/? "
        )
        if answer[:1] == "s":
            self.registry.remove(employee)
            self.console.write("\nexcluido\n")
            self.console.press_enter()

    # Reports

    def _reports(self) -> None:
        self._serve(
            reports_menu,
            {
                2: self._list_all,
                3: self._salary_range,
                4: self._list_active,
                5: self._list_by_function,
            },
        )

    def _list_all(self) -> None:
        self.console.clear_screen()
        self.console.write(all_employees_report(self.registry))
        self.console.press_enter()

    def _salary_range(self) -> None:
        self.console.write("\n=== RELATORIO DE FAIXA SALARIAL ===\n")
        try:
            minimum = _parse_float(self.console.read_line("Digite o salario minimo: "))
            maximum = _parse_float(self.console.read_line("Digite o salario maximo: "))
        except ValueError as error:
            self.console.write(f"{error}\n")
            self.console.press_enter()
            return
        if minimum > maximum:
            self.console.write("Erro, salario minimo maior que o maximo!\n")
            self.console.press_enter()
            return
        self.console.write(salary_range_report(self.registry, minimum, maximum))
        if not any(minimum <= e.salary <= maximum for e in self.registry):
            self.console.press_enter()
        self.console.press_enter()

    def _list_active(self) -> None:
        self.console.clear_screen()
        self.console.write(active_employees_report(self.registry))
        self.console.press_enter()

    def _list_by_function(self) -> None:
        self.console.clear_screen()
        function = self._ask_name("Qual a funcao? ")
        self.console.clear_screen()
        self.console.write(function_report(function, self.registry))
        self.console.press_enter()

    # Queries

    def _queries(self) -> None:
        self._serve(queries_menu, {1: self._find_employee})

    def _find_employee(self) -> None:
        self.console.clear_screen()
        name = self._ask_name("Qual o nome do funcionario? ")
        employee = self.registry.find_by_name(name)
        if employee is None:
            self._not_registered(f"{name} nao esta cadastrado!\n")
            return
        self.console.write(format_employee(employee))
        self.console.press_enter()

    # Files

    def _files(self) -> None:
        self._serve(
            files_menu,
            {
                1: lambda: self._export(
                    "Qual o nome do arquivo de saida? ", export_text
                ),
                2: lambda: self._export(
                    "Qual o nome do arquivo de saida (extensao .csv)? ", export_csv
                ),
            },
        )

    def _export(self, prompt: str, exporter: Callable[[str, Registry], None]) -> None:
        self.console.clear_screen()
        self.console.header("Exportar dados para arquivo do tipo texto\n")
        path = _read_field(self.console, prompt)
        try:
            exporter(path, self.registry)
        except OSError:
            self.console.write(f"erro ao abrir o arquivo {path}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the register on a data file, inserting at 'inicio' or 'fim'."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Numero de parametros errado")
        print("Uso: rhcadastro (nome_arquivo.bin) inicio ou fim ")
        return 1
    path, insertion = args
    if insertion not in ("inicio", "fim"):
        print("insercao errada.")
        print(
            "Use 'inicio' para inserir no comeco da lista ou 'fim' para "
            "inserir no final."
        )
        return 1
    App(path, at_front=insertion == "inicio").run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
import io

import pytest

from rhcadastro.cli import App, main, new_employee
from rhcadastro.console import Console
from rhcadastro.model import Date, Employee, Registry, Status
from rhcadastro.storage import load_binary, save_binary


def make_console(text):
    return Console(stdin=io.StringIO(text), stdout=io.StringIO(), clear_command=None)


def make_employee(name, salary=1000.0, function="DEV"):
    return Employee(
        name=name,
        email=f"{name.lower()}@example.com",
        cpf="111",
        function=function,
        salary=salary,
        admission=Date(1, 1, 2020),
    )


def employee_input(name, salary="1500", function="dev", date="1/2/2020"):
    return f"{name}\n{name}@example.com\n12345\n{function}\n{salary}\n{date}\n"


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "rh.bin"
    save_binary(path, [make_employee("ZE", 3000.0), make_employee("ANA", 500.0)])
    return path


def test_new_employee_upper_cases_text_fields():
    console = make_console(employee_input("ana", salary="1234.5", date="3/4/2021"))
    employee = new_employee(console)
    assert employee.name == "ANA"
    assert employee.email == "ANA@EXAMPLE.COM"
    assert employee.cpf == "12345"
    assert employee.function == "DEV"
    assert employee.salary == pytest.approx(1234.5)
    assert employee.admission == Date(3, 4, 2021)
    assert employee.dismissal == Date()
    assert employee.status == Status.ACTIVE


def test_new_employee_truncates_cpf():
    text = "ana\nana@example.com\n" + "9" * 20 + "\ndev\n1\n1/1/2000\n"
    employee = new_employee(make_console(text))
    assert employee.cpf == "9" * 14


def test_new_employee_rejects_bad_salary():
    with pytest.raises(ValueError):
        new_employee(make_console(employee_input("ana", salary="abc")))


def test_run_loads_and_sorts(data_file):
    app = App(data_file, console=make_console("0\n"))
    app.run()
    assert [e.name for e in app.registry] == ["ANA", "ZE"]


def test_missing_file_reports_failure(tmp_path):
    console = make_console("0\n")
    app = App(tmp_path / "none.bin", console=console)
    app.run()
    assert "Falha ao abrir o arquivo!\n" in console.stdout.getvalue()
    assert app.registry.is_empty()
    assert not (tmp_path / "none.bin").exists()


def test_register_employee_and_save(tmp_path):
    path = tmp_path / "rh.bin"
    script = "1\n2\n" + employee_input("bia") + "0\n0\n"
    app = App(path, console=make_console(script))
    app.run()
    loaded = Registry()
    assert load_binary(path, loaded) == 1
    assert [e.name for e in loaded] == ["BIA"]


@pytest.mark.parametrize("at_front, expected", [(True, ["CAIO", "BIA"]), (False, ["BIA", "CAIO"])])
def test_insertion_position(tmp_path, at_front, expected):
    script = (
        "1\n2\n" + employee_input("bia") + "2\n" + employee_input("caio") + "0\n0\n"
    )
    app = App(tmp_path / "rh.bin", at_front=at_front, console=make_console(script))
    app.run()
    assert [e.name for e in app.registry] == expected


def test_inactivate_employee(data_file):
    app = App(data_file, console=make_console("1\n4\nana\nS\n5/6/2021\n0\n0\n"))
    app.run()
    employee = app.registry.find_by_name("ANA")
    assert employee.status == Status.INACTIVE
    assert employee.dismissal == Date(5, 6, 2021)


def test_declined_inactivation_keeps_status(data_file):
    app = App(data_file, console=make_console("1\n4\nana\nn\n0\n0\n"))
    app.run()
    assert app.registry.find_by_name("ANA").status == Status.ACTIVE


def test_delete_employee(data_file):
    console = make_console("1\n5\nana\ns\n\n0\n0\n")
    app = App(data_file, console=console)
    app.run()
    assert [e.name for e in app.registry] == ["ZE"]
    assert "\nexcluido\n" in console.stdout.getvalue()


def test_query_unknown_person(data_file):
    console = make_console("3\n1\nbob\n\n0\n0\n")
    App(data_file, console=console).run()
    assert "BOB nao esta cadastrado!\n" in console.stdout.getvalue()


def test_query_known_person_shows_record(data_file):
    console = make_console("3\n1\nze\n\n0\n0\n")
    App(data_file, console=console).run()
    assert "Nome da pessoa.............: ZE\n" in console.stdout.getvalue()


def test_salary_range_rejects_inverted_bounds(data_file):
    console = make_console("2\n3\n2000\n1000\n\n0\n0\n")
    App(data_file, console=console).run()
    assert "Erro, salario minimo maior que o maximo!\n" in console.stdout.getvalue()


def test_salary_range_lists_matches(data_file):
    console = make_console("2\n3\n100\n1000\n\n0\n0\n")
    App(data_file, console=console).run()
    output = console.stdout.getvalue()
    assert "Nome da pessoa.............: ANA\n" in output
    assert "Nome da pessoa.............: ZE\n" not in output


def test_function_report_upper_cases_query(tmp_path):
    path = tmp_path / "rh.bin"
    save_binary(path, [make_employee("ANA", function="GERENTE")])
    console = make_console("2\n5\ngerente\n\n0\n0\n")
    App(path, console=console).run()
    assert "Nome da pessoa.............: ANA\n" in console.stdout.getvalue()


def test_export_csv(data_file, tmp_path):
    out = tmp_path / "out.csv"
    App(data_file, console=make_console(f"4\n2\n{out}\n0\n0\n")).run()
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "CODIGO;NOME;Email;CPF;FUNCAO;SALARIO;ADMISSAO;DEMISSAO;STATUS"
    assert [line.split(";")[1] for line in lines[1:]] == ["ANA", "ZE"]


def test_export_text(data_file, tmp_path):
    out = tmp_path / "out.txt"
    App(data_file, console=make_console(f"4\n1\n{out}\n0\n0\n")).run()
    text = out.read_text(encoding="utf-8")
    assert "Relatorio Completo de Funcionarios\n" in text
    assert "Nome da pessoa.............: ZE\n" in text


def test_end_of_input_still_saves(tmp_path):
    path = tmp_path / "rh.bin"
    app = App(path, console=make_console("1\n2\n" + employee_input("bia")))
    app.run()
    loaded = Registry()
    assert load_binary(path, loaded) == 1


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Numero de parametros errado" in capsys.readouterr().out


def test_main_wrong_insertion(capsys, tmp_path):
    assert main([str(tmp_path / "rh.bin"), "meio"]) == 1
    assert "insercao errada." in capsys.readouterr().out
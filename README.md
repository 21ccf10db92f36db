# rhcadastro

A small interactive terminal program for keeping a register of employees:
name, e-mail address, CPF, job function, salary, hiring date and, for
inactive staff, the date they left. Records are kept in a binary data file
between sessions and can be exported as a plain-text report or as a CSV file
(semicolon separated, ready for a spreadsheet).

The prompts and menus are in Portuguese.

## Installation

```
pip install .
```

## Usage

```
rhcadastro DATAFILE inicio
rhcadastro DATAFILE fim
```

- `DATAFILE` is the binary file holding the records. It is read at start-up;
  if it cannot be read, `Falha ao abrir o arquivo!` is shown and the program
  starts with an empty register. On exit the records are written back to the
  file, but only when the register is not empty.
- The second argument chooses where new employees go: `inicio` puts them at
  the start of the list, `fim` at the end. Any other value, or the wrong
  number of arguments, prints a usage message and exits with status 1.

On start-up the records are sorted alphabetically by name. The main menu
then offers:

1. **Cadastros**: add an employee, sort the list A–Z, mark an employee as
   inactive (recording the date they left), or delete an employee.
2. **Relatorios**: list every employee, employees within a salary range
   (both ends included), active employees only, or employees holding a given
   function.
3. **Consultas**: look up an employee by name.
4. **Arquivos**: export the register to a text report or to a `.csv` file.

Choose `0` in any menu to go back, and `0` in the main menu to quit and save.
Reaching the end of input also ends the program, saving as above.

Names, e-mail addresses and functions are stored in upper case, and lookups
by name or function compare exactly against the upper-cased text you type.
Salaries are typed as numbers such as `3500.50`; dates as `day/month/year`,
for example `15/3/2024`. Each new record gets a numeric code counting up from
the number of records already held.

The screen is cleared between menus by running the `clear` command.

## What it does not do

- The menu entries for system users ("Cadastro de usuarios do sistema" and
  "Listar dados dos usuarios do sistema") do nothing: there are no user
  accounts or logins.
- Records cannot be edited once entered; an employee can only be marked
  inactive or deleted.
- Dates are not checked for being real calendar dates.

## Using the library

The register is also usable from Python:

```python
from rhcadastro.model import Employee, Registry, parse_date
from rhcadastro.reports import salary_range_report
from rhcadastro.storage import export_csv, load_binary, save_binary

registry = Registry()
registry.insert_back(Employee(name="MARIA SOUZA", email="maria@example.com",
                              cpf="EXEMPLO", function="ANALISTA",
                              salary=3500.0, admission=parse_date("1/2/2023")))
registry.sort_by_name()

print(salary_range_report(registry, 3000.0, 4000.0))
export_csv("funcionarios.csv", registry)
save_binary("funcionarios.bin", registry)

again = Registry()
load_binary("funcionarios.bin", again)   # returns the number of records read
```

- `rhcadastro.model`: `Employee`, `Date`, `Status` (`ACTIVE`, `INACTIVE`),
  `parse_date`, and `Registry` with `insert_front`, `insert_back`, `remove`,
  `find_by_name`, `sort_by_name`, `last` and `is_empty`.
- `rhcadastro.reports`: `format_employee`, `all_employees_report`,
  `salary_range_report`, `active_employees_report` and `function_report`,
  each returning the report as a string.
- `rhcadastro.storage`: `save_binary` and `load_binary` for the fixed-size
  binary records (`pack_record` / `unpack_record` for single records, of
  `RECORD_SIZE` bytes), and `export_text` / `export_csv`. `load_binary` puts
  each record it reads at the front of the registry and ignores a trailing
  incomplete record.
- `rhcadastro.console`: `Console`, the line-based input and output used by
  the menus, which can be given any pair of text streams.
- `rhcadastro.cli`: `App`, the interactive program bound to one data file,
  and `main`, the entry point of the `rhcadastro` command.

## Running the tests

```
pip install .[test]
pytest
```
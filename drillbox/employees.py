"""In-memory employee registry with an interactive menu."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

MINIMUM_SALARY_FILTER = 1509.0

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_MENU = (
    "\nOpções disponíveis:\n"
    "[1] Cadastrar novo funcionário\n"
    "[2] Atualizar funcionário\n"
    "[3] Exibir todos os funcionários\n"
    "[4] Buscar funcionário pelo ID\n"
    "[5] Deletar funcionário\n"
    "[6] Filtrar por salário\n"
    "[7] Encerrar programa\n"
    "\nOpção selecionada: "
)
_NOT_FOUND = "Funcionário não encontrado.\n"


class InvalidInputError(ValueError):
    """Raised when typed input is not of the expected numeric type."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid input: {text!r}")
        self.text = text


class EmployeeNotFoundError(LookupError):
    """Raised when no matching employee exists."""

    def __init__(self, employee_id: int) -> None:
        super().__init__(f"employee not found: {employee_id}")
        self.employee_id = employee_id


@dataclass
class Employee:
    id: int
    name: str
    position: str
    salary: float
    active: bool = True


def parse_int(text: str) -> int:
    """Parse a whole-line integer, surrounding whitespace allowed."""
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        raise InvalidInputError(text)
    return int(stripped)


def parse_float(text: str) -> float:
    """Parse a whole-line decimal number, surrounding whitespace allowed."""
    stripped = text.strip()
    if not _FLOAT_PATTERN.fullmatch(stripped):
        raise InvalidInputError(text)
    return float(stripped)


def format_employee(employee: Employee) -> str:
    return (
        f"\nFuncionário ID {employee.id}:\n"
        f"\nNome: {employee.name}\n"
        f"Cargo: {employee.position}\n"
        f"Salário: R$ {employee.salary:.2f}\n"
    )


class EmployeeRegistry:
    """Employees numbered from 1; deletion only marks a record inactive."""

    def __init__(self) -> None:
        self._employees: list[Employee] = []

    def __len__(self) -> int:
        return len(self._employees)

    def _record(self, employee_id: int) -> Employee:
        if employee_id <= 0:
            raise ValueError("employee ids start at 1")
        if employee_id > len(self._employees):
            raise EmployeeNotFoundError(employee_id)
        return self._employees[employee_id - 1]

    def register(self, name: str, position: str, salary: float) -> Employee:
        employee = Employee(len(self._employees) + 1, name, position, salary)
        self._employees.append(employee)
        return employee

    def update(
        self, employee_id: int, name: str, position: str, salary: float
    ) -> Employee:
        """Replace an employee's details; deleted records can be updated too."""
        employee = self._record(employee_id)
        employee.name = name
        employee.position = position
        employee.salary = salary
        return employee

    def get(self, employee_id: int) -> Employee:
        employee = self._record(employee_id)
        if not employee.active:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def delete(self, employee_id: int) -> None:
        self.get(employee_id).active = False

    def active(self) -> list[Employee]:
        return [employee for employee in self._employees if employee.active]

    def earning_more_than(self, salary: float) -> list[Employee]:
        """Every record, deleted ones included, paid strictly more than salary."""
        return [employee for employee in self._employees if employee.salary > salary]


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _ask_id(action: str) -> int:
    while True:
        employee_id = parse_int(
            _read_line(f"\nInsira o ID do funcionário que deseja {action}: ")
        )
        if employee_id > 0:
            return employee_id
        sys.stdout.write("ID inválido. Insira somente IDs a partir de 1.\n")


def _ask_details(name_prompt: str, position_prompt: str, salary_prompt: str):
    name = _read_line(name_prompt)
    position = _read_line(position_prompt)
    salary = parse_float(_read_line(salary_prompt))
    return name, position, salary


def _run(registry: EmployeeRegistry) -> None:
    out = sys.stdout
    while True:
        option = parse_int(_read_line(_MENU))
        if option == 1:
            name, position, salary = _ask_details(
                "Insira o nome do funcionário: ",
                "Insira o cargo do funcionário: ",
                "Insira o salário do funcionário (em R$): ",
            )
            employee = registry.register(name, position, salary)
            out.write(f"Funcionário ID {employee.id} cadastrado com sucesso!\n")
        elif option == 2:
            employee_id = _ask_id("atualizar")
            try:
                current = registry._record(employee_id)
            except EmployeeNotFoundError:
                out.write(_NOT_FOUND)
                continue
            out.write(format_employee(current))
            name, position, salary = _ask_details(
                "Atualize o nome: ", "Atualize o cargo: ", "Atualize o salário (em R$): "
            )
            registry.update(employee_id, name, position, salary)
            out.write(f"Funcionário ID {employee_id} atualizado com sucesso!\n")
        elif option == 3:
            for employee in registry.active():
                out.write(format_employee(employee))
        elif option == 4:
            try:
                out.write(format_employee(registry.get(_ask_id("buscar"))))
            except EmployeeNotFoundError:
                out.write(_NOT_FOUND)
        elif option == 5:
            try:
                registry.delete(_ask_id("deletar"))
                out.write("Funcionário deletado com sucesso!\n")
            except EmployeeNotFoundError:
                out.write(_NOT_FOUND)
        elif option == 6:
            while True:
                salary = parse_float(
                    _read_line("\nInsira o valor do salário pelo qual deseja filtrar: ")
                )
                if salary >= MINIMUM_SALARY_FILTER:
                    break
                out.write("Salário inválido. O mínimo a ser inserido é R$ 1509.00.\n")
            matches = registry.earning_more_than(salary)
            for employee in matches:
                out.write(format_employee(employee))
            if not matches:
                out.write(f"Nenhum funcionário ganha mais que R$ {salary:.2f}.\n")
        elif option == 7:
            out.write("Programa encerrado!\n")
            return
        else:
            out.write("\nOpção inválida. Insira somente as opções listadas.\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive employee registry.")
    parser.parse_args(argv)
    try:
        _run(EmployeeRegistry())
    except InvalidInputError:
        print("Erro: tipo da entrada é inválido!", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())
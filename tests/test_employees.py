import io
import sys

import pytest

from drillbox.employees import (
    Employee,
    EmployeeNotFoundError,
    EmployeeRegistry,
    InvalidInputError,
    format_employee,
    main,
    parse_float,
    parse_int,
)


@pytest.fixture
def registry():
    reg = EmployeeRegistry()
    reg.register("Ana", "Dev", 2500.0)
    reg.register("Bruno", "QA", 1800.0)
    return reg


def test_parse_int_accepts_signs_and_spaces():
    assert parse_int("42") == 42
    assert parse_int("  -7  ") == -7
    assert parse_int("+3") == 3


@pytest.mark.parametrize("text", ["", "+", "abc", "1.5", "12abc", "   "])
def test_parse_int_rejects(text):
    with pytest.raises(InvalidInputError):
        parse_int(text)


def test_parse_float_accepts_decimal_forms():
    assert parse_float("1509.5") == 1509.5
    assert parse_float(" .5 ") == 0.5
    assert parse_float("-2") == -2.0


@pytest.mark.parametrize("text", ["", "x1", "1_000", "1.2.3", "-"])
def test_parse_float_rejects(text):
    with pytest.raises(InvalidInputError):
        parse_float(text)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        parse_int("nope")


def test_format_employee():
    text = format_employee(Employee(1, "Ana", "Dev", 2500.0))
    assert text == "\nFuncionário ID 1:\n\nNome: Ana\nCargo: Dev\nSalário: R$ 2500.00\n"


def test_register_assigns_sequential_ids(registry):
    assert len(registry) == 2
    assert [e.id for e in registry.active()] == [1, 2]
    assert registry.register("Caio", "PM", 3000.0).id == 3


def test_get_returns_registered(registry):
    employee = registry.get(2)
    assert (employee.name, employee.position, employee.salary) == ("Bruno", "QA", 1800.0)


def test_get_unknown_raises(registry):
    with pytest.raises(EmployeeNotFoundError):
        registry.get(5)


def test_non_positive_id_rejected(registry):
    with pytest.raises(ValueError):
        registry.get(0)


def test_delete_hides_employee(registry):
    registry.delete(1)
    with pytest.raises(EmployeeNotFoundError):
        registry.get(1)
    with pytest.raises(EmployeeNotFoundError):
        registry.delete(1)
    assert [e.id for e in registry.active()] == [2]
    assert len(registry) == 2


def test_update_changes_details(registry):
    registry.update(1, "Ana Paula", "Lead", 4000.0)
    employee = registry.get(1)
    assert (employee.name, employee.position, employee.salary) == ("Ana Paula", "Lead", 4000.0)


def test_update_reaches_deleted_record(registry):
    registry.delete(2)
    updated = registry.update(2, "Bea", "Ops", 2000.0)
    assert updated.name == "Bea"
    assert updated.active is False


def test_update_unknown_raises(registry):
    with pytest.raises(EmployeeNotFoundError):
        registry.update(9, "X", "Y", 1.0)


def test_earning_more_than_is_strict_and_includes_deleted(registry):
    registry.delete(1)
    assert [e.id for e in registry.earning_more_than(1800.0)] == [1]
    assert registry.earning_more_than(2500.0) == []


def _run_main(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_main_register_and_list(monkeypatch, capsys):
    assert _run_main(monkeypatch, "1\nAna\nDev\n2500\n3\n7\n") == 0
    out = capsys.readouterr().out
    assert "Funcionário ID 1 cadastrado com sucesso!" in out
    assert "Salário: R$ 2500.00" in out
    assert out.endswith("Programa encerrado!\n")


def test_main_invalid_option(monkeypatch, capsys):
    assert _run_main(monkeypatch, "9\n7\n") == 0
    assert "Opção inválida. Insira somente as opções listadas." in capsys.readouterr().out


def test_main_search_missing_and_bad_id(monkeypatch, capsys):
    assert _run_main(monkeypatch, "4\n0\n3\n7\n") == 0
    out = capsys.readouterr().out
    assert "ID inválido. Insira somente IDs a partir de 1." in out
    assert "Funcionário não encontrado." in out


def test_main_delete_then_search(monkeypatch, capsys):
    assert _run_main(monkeypatch, "1\nAna\nDev\n2500\n5\n1\n4\n1\n7\n") == 0
    out = capsys.readouterr().out
    assert "Funcionário deletado com sucesso!" in out
    assert out.count("Funcionário não encontrado.") == 1


def test_main_filter_enforces_minimum(monkeypatch, capsys):
    assert _run_main(monkeypatch, "6\n100\n2000\n7\n") == 0
    out = capsys.readouterr().out
    assert "Salário inválido. O mínimo a ser inserido é R$ 1509.00." in out
    assert "Nenhum funcionário ganha mais que R$ 2000.00." in out


def test_main_bad_input_exits_with_code_3(monkeypatch, capsys):
    assert _run_main(monkeypatch, "abc\n") == 3
    assert "Erro: tipo da entrada é inválido!" in capsys.readouterr().err


def test_main_end_of_input_exits_with_code_3(monkeypatch):
    assert _run_main(monkeypatch, "") == 3
import locale

import pytest
from pydantic import ValidationError

from contracts.sorting_dto import SortRequestDTO, SortResponseDTO
from linesort import sort_lines
from linesort.sorting import Direction, LineSortService, Variant


@pytest.fixture
def service():
    return LineSortService()


@pytest.mark.parametrize(
    "variant,direction,lines,expected",
    [
        ("lexicographic", "ascending", ["banana", "apple", "cherry"], ["apple", "banana", "cherry"]),
        ("integer", "ascending", ["10", "-3", "", "7"], ["", "-3", "7", "10"]),
        ("integer", "descending", ["10", "-3", "", "7"], ["10", "7", "-3", ""]),
        ("decimal_dot", "ascending", ["1.5", "-2.5", "0.0"], ["-2.5", "0.0", "1.5"]),
    ],
)
def test_scenarios(service, variant, direction, lines, expected):
    response = service.process(SortRequestDTO(lines=lines, variant=variant, direction=direction))
    assert response.ok
    assert response.lines == expected
    assert response.failed_line_index is None


def test_scenario_unparseable_line(service):
    request = SortRequestDTO(lines=["3,14", "1,0", "abc"], variant="decimal_comma")
    response = service.process(request)
    assert not response.ok
    assert response.failed_line_index == 2
    assert response.lines is None
    assert response.variant is Variant.DECIMAL_COMMA


def test_request_defaults():
    request = SortRequestDTO(lines=["b", "a"])
    assert request.variant is Variant.LEXICOGRAPHIC
    assert request.direction is Direction.ASCENDING


def test_request_rejects_unknown_variant():
    with pytest.raises(ValidationError):
        SortRequestDTO(lines=["1"], variant="natural")


def test_response_requires_exactly_one_outcome():
    with pytest.raises(ValidationError):
        SortResponseDTO(variant="integer", direction="ascending")
    with pytest.raises(ValidationError):
        SortResponseDTO(lines=["1"], failed_line_index=0, variant="integer", direction="ascending")


def test_service_sort_returns_result(service):
    result = service.sort(["2", "1"], Variant.INTEGER, Direction.DESCENDING)
    assert result.unwrap() == ["2", "1"]


def test_sort_lines_shortcut():
    assert sort_lines(["10", "-3", "", "7"], "integer").lines == ["", "-3", "7", "10"]
    assert sort_lines(["b", "a"]).lines == ["a", "b"]


def test_results_ignore_comma_decimal_host_conventions(monkeypatch):
    # Хост с немецкими правилами: запятая - разделитель дроби, точка - тысяч
    german = dict(locale.localeconv(), decimal_point=",", thousands_sep=".")
    monkeypatch.setattr(locale, "localeconv", lambda: german)

    assert locale.localeconv()["decimal_point"] == ","
    assert sort_lines(["1,5", "1,25", "10,0", ""], "decimal_comma").lines == ["", "1,25", "1,5", "10,0"]
    assert sort_lines(["1.5", "-2.5", "0.0"], "decimal_dot").lines == ["-2.5", "0.0", "1.5"]
    assert sort_lines(["1.000", "2"], "decimal_dot").lines == ["1.000", "2"]
    assert sort_lines(["1.5", "x"], "decimal_dot").failed_line_index == 1


@pytest.fixture
def comma_decimal_host_locale():
    previous = locale.setlocale(locale.LC_NUMERIC)
    for name in ("de_DE.UTF-8", "ru_RU.UTF-8", "fr_FR.UTF-8"):
        try:
            locale.setlocale(locale.LC_NUMERIC, name)
        except locale.Error:
            continue
        yield name
        locale.setlocale(locale.LC_NUMERIC, previous)
        return
    pytest.skip("на хосте не установлена локаль с десятичной запятой")


def test_results_do_not_depend_on_installed_host_locale(comma_decimal_host_locale):
    assert locale.localeconv()["decimal_point"] == ","
    assert sort_lines(["1,5", "1,25", "10,0", ""], "decimal_comma").lines == ["", "1,25", "1,5", "10,0"]
    assert sort_lines(["1.5", "-2.5", "0.0"], "decimal_dot").lines == ["-2.5", "0.0", "1.5"]
    assert sort_lines(["1.5", "x"], "decimal_dot").failed_line_index == 1

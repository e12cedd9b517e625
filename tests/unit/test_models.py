from __future__ import annotations

import io

import pytest
from pydantic import ValidationError

from recordkit.domain import DEFAULT_NAME, DEFAULT_VALUE, Record


class TestDefaultConstruction:
    def test_default_fields(self):
        record = Record()
        assert record.name == "null"
        assert record.value == -1

    def test_default_matches_module_constants(self):
        record = Record()
        assert (record.name, record.value) == (DEFAULT_NAME, DEFAULT_VALUE)


class TestExplicitConstruction:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("sumeet", 2),
            ("", 0),
            ("negative", -42),
            ("  padded  ", 10**20),
            ("null", -1),
        ],
    )
    def test_fields_equal_arguments(self, name: str, value: int):
        record = Record.of(name, value)
        assert record.name == name
        assert record.value == value

    def test_keyword_construction_equals_positional(self):
        assert Record(name="sumeet", value=2) == Record.of("sumeet", 2)

    def test_no_coercion_of_text_to_int(self):
        with pytest.raises(ValidationError):
            Record(name="sumeet", value="2")

    def test_no_coercion_of_int_to_text(self):
        with pytest.raises(ValidationError):
            Record(name=5, value=2)


class TestCopyConstruction:
    def test_copy_has_source_fields(self):
        source = Record.of("sumeet", 2)
        copied = Record.copy_of(source)
        assert copied.name == source.name
        assert copied.value == source.value
        assert copied == source

    def test_copy_is_new_instance(self):
        source = Record.of("sumeet", 2)
        assert Record.copy_of(source) is not source

    def test_copy_of_default(self):
        assert Record.copy_of(Record()) == Record()

    def test_copy_unaffected_by_later_derivation_from_source(self):
        source = Record.of("sumeet", 2)
        copied = Record.copy_of(source)
        changed = source.model_copy(update={"name": "other", "value": 99})

        assert changed.name == "other"
        assert copied.name == "sumeet"
        assert copied.value == 2

    def test_records_reject_assignment(self):
        record = Record.of("sumeet", 2)
        with pytest.raises(ValidationError):
            record.name = "other"
        assert record.name == "sumeet"


class TestRender:
    def test_render_default(self, capsys: pytest.CaptureFixture[str]):
        Record().render()
        assert capsys.readouterr().out == "key null\n value -1\n"

    def test_render_empty_name_and_zero(self, capsys: pytest.CaptureFixture[str]):
        Record.of("", 0).render()
        assert capsys.readouterr().out == "key \n value 0\n"

    def test_render_to_explicit_file(self):
        sink = io.StringIO()
        Record.of("sumeet", 2).render(file=sink)
        assert sink.getvalue() == "key sumeet\n value 2\n"

    def test_render_is_idempotent_and_stateless(self):
        record = Record.of("sumeet", 2)
        first, second = io.StringIO(), io.StringIO()

        record.render(file=first)
        record.render(file=second)

        assert first.getvalue() == second.getvalue()
        assert (record.name, record.value) == ("sumeet", 2)

    def test_to_text_matches_render(self):
        record = Record.of("x", -7)
        sink = io.StringIO()
        record.render(file=sink)
        assert record.to_text() == sink.getvalue() == "key x\n value -7\n"

"""
Tests for length case serialization and checking.

These tests ensure cases survive JSON/YAML storage (including embedded
terminators) and that checking reports passes and failures correctly.
"""

import pytest
from strlit.cases import (
    CaseFormatError,
    LengthCase,
    case_from_dict,
    cases_from_json,
    cases_from_yaml,
    cases_to_json,
    cases_to_yaml,
    check_cases,
    format_report,
    run_case,
)
from strlit.examples import build_example_cases


class TestSerialization:
    """Test storing and loading cases."""

    def test_json_roundtrip(self):
        cases = build_example_cases()
        assert cases_from_json(cases_to_json(cases)) == cases

    def test_yaml_roundtrip_keeps_embedded_terminator(self):
        cases = [LengthCase(name="embedded", text="a\0b", expected=1)]
        restored = cases_from_yaml(cases_to_yaml(cases))
        assert restored[0].text == "a\0b"
        assert len(restored[0].text) == 3

    def test_yaml_null_text(self):
        doc = """
cases:
  - name: null reference
    text: null
"""
        cases = cases_from_yaml(doc)
        assert cases[0].text is None
        assert cases[0].expects_null_reference

    def test_yaml_escape_in_document(self):
        doc = 'cases:\n  - {name: esc, text: "x\\0y", expected: 1}\n'
        assert cases_from_yaml(doc)[0].text == "x\0y"

    def test_top_level_list_accepted(self):
        doc = '[{"name": "abc", "text": "abc", "expected": 3}]'
        assert cases_from_json(doc) == [LengthCase(name="abc", text="abc", expected=3)]


class TestCaseFormat:
    """Test rejection of malformed cases."""

    def test_missing_name(self):
        with pytest.raises(CaseFormatError):
            case_from_dict({"text": "abc", "expected": 3})

    def test_non_mapping(self):
        with pytest.raises(CaseFormatError):
            case_from_dict(["abc", 3])

    def test_non_string_text(self):
        with pytest.raises(CaseFormatError):
            case_from_dict({"name": "n", "text": 5, "expected": 1})

    @pytest.mark.parametrize("expected", [None, -1, 1.5, True, "3"])
    def test_bad_expected(self, expected):
        with pytest.raises(CaseFormatError):
            case_from_dict({"name": "n", "text": "abc", "expected": expected})

    def test_null_case_with_expected(self):
        with pytest.raises(CaseFormatError):
            case_from_dict({"name": "n", "text": None, "expected": 0})

    def test_format_error_is_value_error(self):
        assert issubclass(CaseFormatError, ValueError)

    def test_mapping_without_cases_key(self):
        """A bare case mapping is not mistaken for an empty case list."""
        with pytest.raises(CaseFormatError):
            cases_from_yaml("name: simple\ntext: abc\nexpected: 3\n")

    def test_bad_document_shape(self):
        with pytest.raises(CaseFormatError):
            cases_from_yaml("just a string")


class TestChecking:
    """Test running cases."""

    def test_examples_all_pass(self):
        results = check_cases(build_example_cases())
        assert all(r.passed for r in results)

    def test_null_case_records_error_name(self):
        result = run_case(LengthCase(name="null", text=None))
        assert result.passed
        assert result.raised == "NullReference"
        assert result.actual is None

    def test_wrong_expectation_fails(self):
        result = run_case(LengthCase(name="wrong", text="abc", expected=2))
        assert not result.passed
        assert result.actual == 3

    def test_report_summary(self):
        report = format_report(check_cases(build_example_cases()))
        assert "4/4 cases passed" in report
        assert "Case: embedded terminator" in report
        assert "(null)" in report

    def test_report_warns_on_failure(self):
        results = check_cases([LengthCase(name="wrong", text="abc", expected=2)])
        with pytest.warns(UserWarning, match="wrong"):
            report = format_report(results)
        assert "FAIL" in report
        assert "0/1 cases passed" in report

"""
Length cases: a small table of literal inputs and their expected lengths.

Each case names a text (or None, meaning "construct from a null
reference") and the expected strlen result. Cases can be stored as
JSON or YAML and checked in one go.

Serialization keeps the structure explicit and stable:

    cases:
      - name: embedded terminator
        text: "a\\0b"
        expected: 1
      - name: null reference
        text: null
        expected: null

Embedded NULs survive YAML because double-quoted scalars support the
``\\0`` escape; JSON writes them as ``\\u0000``.
"""
from __future__ import annotations

import json
import warnings
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml

from strlit.literal import StringLiteral
from strlit.require import NullReference, RequireError
from strlit.strlen import strlen


class CaseFormatError(ValueError):
    """Raised when a length case document is malformed."""
    pass


@dataclass(frozen=True)
class LengthCase:
    """
    One strlen input and its expected outcome.

    Properties:
        name: Human-readable label
        text: Sequence to measure, or None for a null reference
        expected: Expected length, or None when NullReference is expected
    """

    name: str
    text: Optional[str]
    expected: Optional[int] = None

    @property
    def expects_null_reference(self) -> bool:
        return self.text is None


@dataclass
class CaseResult:
    """Outcome of running a single LengthCase."""

    case: LengthCase
    actual: Optional[int] = None
    raised: Optional[str] = None
    passed: bool = False


def case_to_dict(c: LengthCase) -> Dict[str, Any]:
    return {"name": c.name, "text": c.text, "expected": c.expected}


def case_from_dict(d: Any) -> LengthCase:
    if not isinstance(d, dict):
        raise CaseFormatError(f"Case must be a mapping, got {type(d).__name__}")
    name = d.get("name")
    if not isinstance(name, str) or not name:
        raise CaseFormatError(f"Case is missing a name: {d!r}")

    text = d.get("text")
    if text is not None and not isinstance(text, str):
        raise CaseFormatError(f"Case '{name}': text must be a string or null")

    expected = d.get("expected")
    if text is None:
        if expected is not None:
            raise CaseFormatError(f"Case '{name}': a null reference has no expected length")
    else:
        # bool is an int subclass; reject it explicitly
        if isinstance(expected, bool) or not isinstance(expected, int) or expected < 0:
            raise CaseFormatError(f"Case '{name}': expected must be a non-negative integer")

    return LengthCase(name=name, text=text, expected=expected)


def cases_to_dict(cases: List[LengthCase]) -> Dict[str, Any]:
    return {"cases": [case_to_dict(c) for c in cases]}


def cases_from_dict(d: Any) -> List[LengthCase]:
    if isinstance(d, dict):
        if "cases" not in d:
            raise CaseFormatError("Case mapping is missing its 'cases' list")
        d = d["cases"]
    if not isinstance(d, list):
        raise CaseFormatError("Expected a list of cases or a mapping with a 'cases' list")
    return [case_from_dict(item) for item in d]


def cases_to_json(cases: List[LengthCase]) -> str:
    return json.dumps(cases_to_dict(cases), sort_keys=True)


def cases_from_json(s: str) -> List[LengthCase]:
    return cases_from_dict(json.loads(s))


def cases_to_yaml(cases: List[LengthCase]) -> str:
    return yaml.safe_dump(cases_to_dict(cases), sort_keys=False)


def cases_from_yaml(s: str) -> List[LengthCase]:
    return cases_from_dict(yaml.safe_load(s))


def run_case(case: LengthCase) -> CaseResult:
    """
    Measure a single case.

    A RequireError raised while building the view is recorded by class
    name rather than propagated, so one bad case does not hide the rest.
    """
    result = CaseResult(case=case)
    try:
        result.actual = strlen(StringLiteral(case.text))
    except RequireError as e:
        result.raised = type(e).__name__

    if case.expects_null_reference:
        result.passed = result.raised == NullReference.__name__
    else:
        result.passed = result.raised is None and result.actual == case.expected
    return result


def check_cases(cases: List[LengthCase]) -> List[CaseResult]:
    return [run_case(c) for c in cases]


def _describe_expected(case: LengthCase) -> str:
    if case.expects_null_reference:
        return NullReference.__name__
    return str(case.expected)


def _describe_actual(result: CaseResult) -> str:
    if result.raised is not None:
        return result.raised
    return str(result.actual)


def format_report(results: List[CaseResult]) -> str:
    """
    Render results as a plain-text report.

    Failing cases are also reported through warnings.warn.
    """
    lines = ["Length cases report:"]
    failed = 0
    for r in results:
        status = "ok" if r.passed else "FAIL"
        text = "(null)" if r.case.text is None else repr(r.case.text)
        lines.append(f"\nCase: {r.case.name}")
        lines.append(f" Text    : {text}")
        lines.append(f" Expected: {_describe_expected(r.case)}")
        lines.append(f" Actual  : {_describe_actual(r)}")
        lines.append(f" Status  : {status}")
        if not r.passed:
            failed += 1
            warnings.warn(
                f"Length case '{r.case.name}' failed: expected "
                f"{_describe_expected(r.case)}, got {_describe_actual(r)}",
                UserWarning,
            )
    lines.append(f"\n{len(results) - failed}/{len(results)} cases passed")
    return "\n".join(lines)


__all__ = [
    "CaseFormatError",
    "LengthCase",
    "CaseResult",
    "case_to_dict",
    "case_from_dict",
    "cases_to_dict",
    "cases_from_dict",
    "cases_to_json",
    "cases_from_json",
    "cases_to_yaml",
    "cases_from_yaml",
    "run_case",
    "check_cases",
    "format_report",
]

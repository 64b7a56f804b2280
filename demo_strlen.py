#!/usr/bin/env python3
"""
Demo: measure the example length cases and print a report.

Also shows the cases as YAML, the format check files are kept in.
"""

from strlit.examples import build_example_cases
from strlit.cases import check_cases, format_report, cases_to_yaml


def main():
    cases = build_example_cases()

    print("=" * 80)
    print("STRLEN DEMO")
    print("=" * 80)

    print("\nCASES (YAML):")
    print("-" * 80)
    print(cases_to_yaml(cases))

    print("-" * 80)
    print(format_report(check_cases(cases)))
    print("=" * 80)


if __name__ == "__main__":
    main()

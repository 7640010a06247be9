from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from softverify.metrics import summarize
from softverify.record import VerificationRecord


def _case_name(index: int, record: VerificationRecord) -> str:
    return f"[{index}] {record.message.strip()}"


def write_junit(
    path: Path, records: Iterable[VerificationRecord], suite_name: str = "softverify"
) -> Path:
    """Write one test suite with a test case per record, return path."""
    records = list(records)
    summary = summarize(records)

    suite = TestSuite(suite_name)
    suite.add_property("pass_rate", str(summary.pass_rate))
    suite.add_property("waited", str(summary.waited))
    for metric_name, stats in (
        ("attempts", summary.attempts),
        ("elapsed_millis", summary.elapsed_millis),
    ):
        for stat_name, stat_val in stats.to_dict().items():
            if stat_val is not None:
                suite.add_property(f"{metric_name}_{stat_name}", str(stat_val))

    for index, record in enumerate(records, start=1):
        case = TestCase(_case_name(index, record))
        case.classname = suite_name
        case.time = record.elapsed_millis / 1000
        if not record.passed:
            case.result = Failure(record.format())
        suite.add_testcase(case)

    # Set time after add_testcase (add_testcase resets it via update_statistics)
    suite.time = sum(r.elapsed_millis for r in records) / 1000

    xml = JUnitXml()
    xml.append(suite)
    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path


def read_junit_summary(path: Path) -> dict[str, Any]:
    """Return totals and failure messages from a junit.xml file."""
    xml = JUnitXml.fromfile(str(path))
    # a file holding a single <testsuite> root parses as a TestSuite
    suites = [xml] if isinstance(xml, TestSuite) else list(xml)

    tests = failures = errors = 0
    messages: list[str] = []
    for suite in suites:
        tests += suite.tests
        failures += suite.failures
        errors += suite.errors
        for case in suite:
            for result in case.result:
                if isinstance(result, Failure):
                    messages.append(result.message or "")

    return {
        "suites": len(suites),
        "tests": tests,
        "failures": failures,
        "errors": errors,
        "messages": messages,
    }

"""
Unit tests for the diagnostic projector and the extraction pipeline.
"""
import math
import os

import pytest

from vlint.parsing import extract_diagnostics, extract_records
from vlint.parsing.classifier import OutputFormat
from vlint.parsing.diagnostics import (
    DiagnosticRecord,
    Position,
    Range,
    Severity,
    SOURCE_TAG,
    project,
    resolve_file,
)
from vlint.parsing.tokenizer import NAN

CWD = os.path.abspath("/work/project")


class TestProject:

    @pytest.mark.parametrize("line,column", [(1, 0), (3, 1), (10, 4), (250, 80)])
    def test_range_is_one_character_at_column(self, line, column):
        record = DiagnosticRecord(file="main.v", line=line, column=column, message="m")
        diag = project(record, Severity.ERROR, CWD)
        assert diag.range == Range(Position(line - 1, column), Position(line - 1, column + 1))

    def test_fields(self):
        record = DiagnosticRecord(file="main.v", line=3, column=1, message="unexpected token")
        diag = project(record, Severity.WARNING, CWD)
        assert diag.file_uri == os.path.join(CWD, "main.v")
        assert diag.severity is Severity.WARNING
        assert diag.message == "unexpected token"
        assert diag.source == SOURCE_TAG == "V"

    def test_nan_position_does_not_raise(self):
        record = DiagnosticRecord(file="", line=NAN, column=NAN, message="")
        diag = project(record, Severity.ERROR, CWD)
        assert math.isnan(diag.range.start.line)
        assert math.isnan(diag.range.end.character)
        assert diag.file_uri == CWD


class TestResolveFile:

    def test_relative_file(self):
        assert resolve_file(CWD, "sub/util.v") == os.path.join(CWD, "sub", "util.v")

    def test_parent_segments_normalised(self):
        assert resolve_file(CWD, "sub/../main.v") == os.path.join(CWD, "main.v")

    def test_absolute_file_kept(self):
        other = os.path.abspath("/elsewhere/x.v")
        assert resolve_file(CWD, other) == other


class TestPipeline:

    def test_error_example(self):
        fmt, diags = extract_diagnostics("error: main.v:3:1: unexpected token", CWD)
        assert fmt is OutputFormat.ERROR
        assert len(diags) == 1
        assert diags[0].range == Range(Position(2, 1), Position(2, 2))
        assert diags[0].severity is Severity.ERROR

    def test_warning_example(self):
        stderr = "warning: file.v:10:4: unused variable `x`\n* consider removing it"
        fmt, records = extract_records(stderr)
        assert fmt is OutputFormat.WARNING
        assert records == [DiagnosticRecord(
            file="file.v", line=10, column=4,
            message="unused variable `x`\n * consider removing it",
        )]

    def test_clean_output(self):
        assert extract_diagnostics("", CWD) == (OutputFormat.CLEAN, [])

    def test_pipeline_is_idempotent(self):
        stderr = (
            "warning: a.v:1:2: first\n"
            "* note\n"
            "warning: b.v:3:4: second\n"
        )
        assert extract_diagnostics(stderr, CWD) == extract_diagnostics(stderr, CWD)

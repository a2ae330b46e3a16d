"""
End-to-end pipeline tests

Tests the full CLI pipeline: input directory → env_check → documents_scan
→ report_save → YAML report, without going through the plugin wrapper.
"""

from argparse import Namespace

import pytest

from modeline.__main__ import env_check, documents_scan, report_save, results_report
from modeline.lib.report import report_load
from modeline.models import ProgramState, pipeline


@pytest.fixture
def tree(tmp_path):
    """Input directory with a mix of files, and an empty output directory"""
    inputdir = tmp_path / "in"
    outputdir = tmp_path / "out"
    (inputdir / "src").mkdir(parents=True)

    (inputdir / "src" / "main.c").write_text(
        "// vim: expandtab:ts=8:encoding=UTF-8\n\n#include <stdio.h>\n"
    )
    (inputdir / "notes.txt").write_text("nothing to see here\n")
    (inputdir / "latin.py").write_bytes(
        "# -*- coding: latin-1 -*-\n# geany: fileencoding=ISO-8859-1 wrap\nname = 'caf\xe9'\n".encode("latin-1")
    )
    (inputdir / "bad.txt").write_text("# vim: encoding=no-such-codec\n")
    return inputdir, outputdir


def run(inputdir, outputdir, **options):
    state = ProgramState(inputdir=inputdir, outputdir=outputdir, verbosity=0, **options)
    return pipeline(state, env_check, documents_scan, report_save, results_report)


class TestPipeline:
    """Test a complete run"""

    def test_report_written(self, tree):
        """Report lands in outputdir with one entry per file"""
        inputdir, outputdir = tree
        state = run(inputdir, outputdir)

        assert state.envOK is True
        assert state.reportFile == outputdir / "modelines.yaml"
        assert state.reportFile.exists()

        report = report_load(state.reportFile)
        files = [entry['file'] for entry in report['files']]
        assert files == ["bad.txt", "latin.py", "notes.txt", "src/main.c"]
        assert report['summary'] == {'files': 4, 'modelines': 3, 'errors': 1}

    def test_entries(self, tree):
        """Entries carry directives and final settings"""
        inputdir, outputdir = tree
        state = run(inputdir, outputdir)
        entries = {entry['file']: entry for entry in report_load(state.reportFile)['files']}

        main = entries["src/main.c"]
        assert main['modeline_line'] == 0
        assert main['modeline'] == "// vim: expandtab:ts=8:encoding=UTF-8"
        assert main['directives'] == [
            {'name': 'expandtab', 'value': True},
            {'name': 'tabstop', 'value': 8},
            {'name': 'fileencoding', 'value': 'UTF-8'},
        ]
        assert main['settings']['indent_mode'] == 'spaces'
        assert main['settings']['indent_width'] == 8
        assert main['error'] is None

        latin = entries["latin.py"]
        assert latin['modeline_line'] == 1
        assert latin['settings']['encoding'] == 'ISO-8859-1'
        assert latin['settings']['line_wrapping'] is True
        assert latin['settings']['wrap_mode'] == 'word'

        notes = entries["notes.txt"]
        assert notes['modeline_line'] is None
        assert notes['directives'] == []
        assert notes['settings']['indent_mode'] == 'tabs'

    def test_reload_error_recorded(self, tree):
        """A failing reload is recorded and the run continues"""
        inputdir, outputdir = tree
        state = run(inputdir, outputdir)
        entries = {entry['file']: entry for entry in report_load(state.reportFile)['files']}

        assert "no-such-codec" in entries["bad.txt"]['error']
        assert entries["bad.txt"]['settings']['encoding'] == "no-such-codec"

    def test_reload_error_keeps_modeline(self, tree):
        """Directives applied before a failed reload are still reported"""
        inputdir, outputdir = tree
        (inputdir / "bad.txt").write_text("# vim: ts=2 encoding=no-such-codec\n")
        state = run(inputdir, outputdir)
        entries = {entry["file"]: entry for entry in report_load(state.reportFile)["files"]}

        bad = entries["bad.txt"]
        assert bad["modeline_line"] == 0
        assert bad["directives"] == [
            {"name": "tabstop", "value": 2},
            {"name": "fileencoding", "value": "no-such-codec"},
        ]
        assert bad["settings"]["indent_width"] == 2
        assert "no-such-codec" in bad["error"]

    def test_modeline_count_independent_of_reload(self, tree):
        """Reload failures do not change the modeline count"""
        inputdir, outputdir = tree
        with_reload = run(inputdir, outputdir).reportResult
        without_reload = run(inputdir, outputdir, noReload=True).reportResult
        assert with_reload["modelines"] == without_reload["modelines"] == 3

    def test_no_reload(self, tree):
        """--noReload scans without reloading, so no codec errors"""
        inputdir, outputdir = tree
        state = run(inputdir, outputdir, noReload=True)

        assert state.reportResult == {'files': 4, 'modelines': 3, 'errors': 0}

    def test_input_filter(self, tree):
        """Only files matching the filter are scanned"""
        inputdir, outputdir = tree
        state = run(inputdir, outputdir, inputFilter="**/*.c")

        assert [p.name for p in state.inputFiles] == ["main.c"]
        assert state.reportResult['files'] == 1

    def test_missing_inputdir(self, tmp_path):
        """Missing input directory exits"""
        with pytest.raises(SystemExit):
            run(tmp_path / "missing", tmp_path / "out")


class TestProgramState:
    """Test state construction"""

    def test_from_namespace(self, tmp_path):
        """Unknown namespace entries are dropped"""
        options = Namespace(inputFilter="*.py", noReload=True, verbosity=2, unrelated="x")
        state = ProgramState.state_createFromNamespace(options, tmp_path, tmp_path / "out")

        assert state.inputFilter == "*.py"
        assert state.noReload is True
        assert state.verbosity == 2
        assert state.inputdir == tmp_path
        assert not hasattr(state, "unrelated")

    def test_copy_is_independent(self):
        """copy() returns a new instance"""
        state = ProgramState(verbosity=3)
        copied = state.copy()
        copied.verbosity = 1
        assert state.verbosity == 3

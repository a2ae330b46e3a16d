#!/usr/bin/env python3
"""
modeline - Editor modeline interpreter

Scans every file in an input directory for a vim/geany-style modeline,
applies its formatting directives to an in-memory document, and writes a
YAML report of the resulting per-file settings.

The CLI is packaged as a ChRIS plugin: inputdir and outputdir are
positional, and the report is the only thing written to outputdir.

Recognized modelines (first match within the first 50 lines):
    /* vim: set expandtab ts=4 sw=4: */
    # vi: noexpandtab wrap
    // geany: fileencoding=ISO-8859-1

Usage:
    modeline inputdir/ outputdir/ [--inputFilter GLOB]

Examples:
    # Scan everything under src/
    modeline src/ out/

    # Only C sources, no reload under the declared encoding
    modeline src/ out/ --inputFilter '**/*.c' --noReload

    # Trace every token
    modeline src/ out/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin

from .config import appsettings
from .lib import (
    BufferDocument,
    ModelineScanner,
    __version__,
    LOG,
    state_connectToLogger,
    document_connectToLogger,
    document_logger,
)
from .lib import report
from .models import ProgramState, DocumentReloadError, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="modeline - apply editor modelines and report per-file formatting settings",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFilter",
    default="**/*",
    type=str,
    help="Glob pattern (relative to inputdir) selecting files to scan",
)

parser.add_argument(
    "--noReload",
    action="store_true",
    default=False,
    help="Scan only; do not reload documents under the encoding their modeline declares",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and collect input files.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputFiles: Files under inputdir matching inputFilter
            - reportFile: Path of the YAML report
            - envOK: True if environment is valid

    Exits:
        1 if inputdir does not exist
    """

    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    if not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputFiles = sorted(p for p in state.inputdir.glob(state.inputFilter) if p.is_file())
    LOG(f"Selected {len(state.inputFiles)} files with '{state.inputFilter}'", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.reportFile = state.outputdir / appsettings.report_filename
    LOG(f"Report file: {state.reportFile}", level=2)

    state.envOK = True
    return state


def documents_scan(inputstate: ProgramState) -> ProgramState:
    """
    Open each input file as a document and apply its modeline.

    Each document is scanned, then reloaded under the encoding it ends up
    with (the "document opened" lifecycle). A file that cannot be read or
    reloaded is recorded with its error and the run continues; a reload
    failure keeps the modeline that was already applied.

    Returns:
        ProgramState with added field:
            - scanEntries: One report entry per input file
    """

    state = inputstate.copy()

    LOG("Scanning documents...", level=1)

    scanner = ModelineScanner()
    entries = []
    for path in state.inputFiles:
        name = str(path.relative_to(state.inputdir))
        result = None
        document = None
        error = None
        document_connectToLogger(name)
        try:
            document = BufferDocument.from_path(path)
        except OSError as e:
            document_logger().warning(str(e))
            error = str(e)

        if document is not None:
            # Reload failure keeps the scan result
            result = scanner.document_scan(document)
            if not state.noReload and document.is_valid:
                try:
                    document.encoding_reload(document.encoding)
                except DocumentReloadError as e:
                    document_logger().warning(str(e))
                    error = str(e)

        if result is not None and result.found:
            LOG(f"{name}: modeline on line {result.line_index}", level=2)

        settings = document.settings_snapshot() if document is not None else {}
        entries.append(report.entry_build(name, result, settings, error))

    document_connectToLogger(None)

    state.scanEntries = entries
    return state


def report_save(inputstate: ProgramState) -> ProgramState:
    """
    Write the YAML report.

    Returns:
        ProgramState with added field:
            - reportResult: The report summary

    Exits:
        1 if the report cannot be written
    """

    state = inputstate.copy()

    if state.scanEntries is None:
        print("Error: No scan results available", file=sys.stderr)
        sys.exit(1)

    built = report.report_build(state.scanEntries)
    try:
        report.report_write(built, state.reportFile)
    except report.ReportError as e:
        print(f"Report error: {e}", file=sys.stderr)
        sys.exit(1)

    state.reportResult = built['summary']
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a run summary.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    if not state.reportResult:
        print("Error: Scan failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Scan complete", level=1)
    LOG(f"  Files:     {state.reportResult['files']}", level=1)
    LOG(f"  Modelines: {state.reportResult['modelines']}", level=1)
    LOG(f"  Errors:    {state.reportResult['errors']}", level=1)
    LOG(f"  Report:    {state.reportFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="modeline - editor modeline interpreter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - scan inputdir for modelines and report to outputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths and select input files
        2. documents_scan: Apply each file's modeline
        3. report_save: Write the YAML report
        4. results_report: Display a summary

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, documents_scan, report_save, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature

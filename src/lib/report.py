"""
Scan report builder and writer

Collects per-file scan outcomes into a plain dict and writes it as YAML.

Report layout:
    files:
      - file: src/main.c
        modeline_line: 0
        modeline: "// vim: expandtab:ts=8:encoding=UTF-8"
        directives:
          - {name: expandtab, value: true}
          - {name: tabstop, value: 8}
        settings: {indent_mode: spaces, indent_width: 8, ...}
        error: null
    summary:
      files: 1
      modelines: 1
      errors: 0
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.directives import ScanResult


class ReportError(Exception):
    """Raised when the report cannot be written"""
    pass


def entry_build(
    name: str,
    result: Optional[ScanResult],
    settings: Dict[str, Any],
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the report entry for one file

    Args:
        name: File name as it should appear in the report
        result: Scan outcome, None if the file was never scanned
        settings: Formatting state after the scan
        error: Error message, if the file failed

    Returns:
        Report entry dict
    """
    found = result is not None and result.found
    return {
        'file': name,
        'modeline_line': result.line_index if found else None,
        'modeline': result.line if found else None,
        'directives': [
            {'name': a.spec.name, 'value': a.value}
            for a in (result.applications if found else [])
        ],
        'settings': settings,
        'error': error,
    }


def report_build(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap file entries with a summary"""
    return {
        'files': entries,
        'summary': {
            'files': len(entries),
            'modelines': sum(1 for e in entries if e['modeline_line'] is not None),
            'errors': sum(1 for e in entries if e['error']),
        },
    }


def report_write(report: Dict[str, Any], path: Path) -> Path:
    """
    Write a report as YAML

    Raises:
        ReportError: If the file cannot be written or serialized
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(report, f, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as e:
        raise ReportError(f"Failed to serialize report: {e}")
    except OSError as e:
        raise ReportError(f"Failed to write {path}: {e}")
    return path


def report_load(path: Path) -> Dict[str, Any]:
    """
    Read a report written by report_write()

    Raises:
        ReportError: If the file is missing or not valid YAML
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            report: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ReportError(f"Failed to parse {path}: {e}")
    except OSError as e:
        raise ReportError(f"Failed to load {path}: {e}")
    return report or {}

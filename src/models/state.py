"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the scan pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFilter, noReload
        - env_check: inputFiles, reportFile, envOK
        - documents_scan: scanEntries
        - report_save: reportResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the files to scan
        outputdir: Directory the YAML report is written to
        verbosity: Logging verbosity level (1-3)
        inputFilter: Glob pattern selecting files under inputdir
        noReload: Scan only, do not reload documents under their new encoding
        envOK: Environment validation passed
        inputFiles: Files selected by inputFilter
        reportFile: Resolved path of the report
        scanEntries: One report entry per scanned file
        reportResult: Summary of the written report (files, modelines, errors)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFilter: str = field(default="**/*")
    noReload: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputFiles: List[Path] = field(default_factory=list)
    reportFile: Path = field(default=Path("/"))
    scanEntries: Optional[List[Dict[str, Any]]] = field(default=None)
    reportResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFilter, noReload, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for the report

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Namespace may carry options ProgramState doesn't know about
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            documents_scan,
            report_save,
            results_report
        )

    This is equivalent to:
        results_report(report_save(documents_scan(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)

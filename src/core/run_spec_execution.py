"""Shared run-spec execution engine for CLI and SDK workflows.

This module maps validated run-spec steps to client operations so different
entry points can execute one declarative analysis path without drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from core.config import ParetoConfig
from core.constants import DEFAULT_RANK_PREVIEW_SIZE
from core.errors import ParetoRunSpecError
from core.report_format import (
    RANKED_HEADER_LINE,
    render_ranked_line,
    render_report_path_lines,
    render_result_lines,
)
from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from core.run_spec_fields import (
    optional_bool,
    optional_columns,
    optional_int,
    optional_share_list,
    optional_string,
    required_string,
)
from core.types import AnalysisOptions, AnalysisRunResult, RankedCustomer, TransactionColumns


class RunSpecClient(Protocol):
    """Client API contract required by run-spec execution."""

    @property
    def config(self) -> ParetoConfig: ...

    def analyze(self, options: AnalysisOptions) -> AnalysisRunResult: ...

    def rank(
        self,
        source_path: str,
        columns: TransactionColumns | None = None,
    ) -> Sequence[RankedCustomer]: ...


@dataclass(frozen=True)
class RunSpecExecutionContext:
    """In-memory context used to execute run-spec steps."""

    client: RunSpecClient
    base_dir: Path
    default_output_dir: str | None
    default_target_shares: tuple[object, ...]


def execute_run_spec_file(client: RunSpecClient, spec_file: str) -> tuple[str, ...]:
    """Load and execute a run-spec file, returning printable output lines."""
    spec = load_run_spec(spec_file)
    return execute_run_spec(client, spec)


def execute_run_spec(client: RunSpecClient, spec: RunSpec) -> tuple[str, ...]:
    """Execute a parsed run-spec object and return output lines."""
    context = RunSpecExecutionContext(
        client=client,
        base_dir=spec.base_dir,
        default_output_dir=spec.defaults.output_dir,
        default_target_shares=spec.defaults.target_shares or (),
    )
    output_lines: list[str] = []
    for step in spec.steps:
        output_lines.extend(_execute_step(context, step))
    return tuple(output_lines)


def _execute_step(context: RunSpecExecutionContext, step: RunSpecStep) -> tuple[str, ...]:
    if step.command == "analyze":
        return _execute_analyze_step(context, step)
    if step.command == "rank":
        return _execute_rank_step(context, step)
    raise ParetoRunSpecError(f"Unsupported run-spec command '{step.command}'.")


def _execute_analyze_step(
    context: RunSpecExecutionContext,
    step: RunSpecStep,
) -> tuple[str, ...]:
    target_shares = optional_share_list(step.args, "target_shares")
    if target_shares is None:
        target_shares = context.default_target_shares
    options = AnalysisOptions(
        source_path=_resolve_source(context, step),
        target_shares=target_shares,
        columns=optional_columns(step.args, "columns"),
        output_dir=_resolve_output_dir(context, step),
    )
    run_result = context.client.analyze(options)
    output_lines: list[str] = []
    for index, result in enumerate(run_result.report.results):
        if index > 0:
            output_lines.append("")
        output_lines.extend(render_result_lines(result))
    if run_result.report_paths is not None:
        output_lines.extend(render_report_path_lines(run_result.report_paths))
    return tuple(output_lines)


def _execute_rank_step(context: RunSpecExecutionContext, step: RunSpecStep) -> tuple[str, ...]:
    top = optional_int(step.args, "top")
    limit = DEFAULT_RANK_PREVIEW_SIZE if top is None else top
    if limit < 1:
        raise ParetoRunSpecError(f"Run-spec field 'top' must be >= 1, got {limit}.")
    ranked = context.client.rank(
        _resolve_source(context, step),
        optional_columns(step.args, "columns"),
    )
    return (RANKED_HEADER_LINE, *(render_ranked_line(customer) for customer in ranked[:limit]))


def _resolve_source(context: RunSpecExecutionContext, step: RunSpecStep) -> str:
    source_path = Path(required_string(step.args, "source")).expanduser()
    if not source_path.is_absolute():
        source_path = context.base_dir / source_path
    return str(source_path)


def _resolve_output_dir(context: RunSpecExecutionContext, step: RunSpecStep) -> Path | None:
    """Pick the export directory for an analyze step.

    An explicit step ``output_dir`` implies export. Otherwise ``export: true``
    uses the spec default, then the client's configured output directory.
    """
    step_output_dir = optional_string(step.args, "output_dir")
    export = optional_bool(step.args, "export", default_value=step_output_dir is not None)
    if not export:
        return None
    raw_output_dir = step_output_dir or context.default_output_dir
    if raw_output_dir is None:
        return context.client.config.output_dir
    output_dir = Path(raw_output_dir).expanduser()
    if not output_dir.is_absolute():
        output_dir = context.base_dir / output_dir
    return output_dir


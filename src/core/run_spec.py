"""Typed run-spec parsing for declarative Pareto analyses.

This module loads and validates YAML run-spec files used by the CLI.
A run-spec lists analysis steps so several sources and target share
sets can be evaluated in one invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping, Sequence, cast

from core.errors import ParetoDependencyError, ParetoRunSpecError

RunSpecCommand = Literal["analyze", "rank"]
SUPPORTED_RUN_SPEC_COMMANDS: tuple[RunSpecCommand, ...] = ("analyze", "rank")
_STEP_ARG_KEYS: Mapping[str, frozenset[str]] = {
    "analyze": frozenset({"source", "target_shares", "columns", "export", "output_dir"}),
    "rank": frozenset({"source", "columns", "top"}),
}


@dataclass(frozen=True)
class RunSpecDefaults:
    """Default values applied to run-spec steps."""

    output_dir: str | None = None
    target_shares: tuple[object, ...] | None = None


@dataclass(frozen=True)
class RunSpecStep:
    """One runnable analysis step from a run-spec file."""

    command: RunSpecCommand
    args: Mapping[str, object]


@dataclass(frozen=True)
class RunSpec:
    """Validated run-spec root object.

    Attributes:
        version: Schema version, currently always 1.
        defaults: Values shared by every step.
        steps: Steps in execution order.
        base_dir: Directory used to resolve relative source paths.
    """

    version: int
    defaults: RunSpecDefaults
    steps: tuple[RunSpecStep, ...]
    base_dir: Path


def load_run_spec(spec_path: str) -> RunSpec:
    """Load and validate a YAML run-spec from disk.

    Args:
        spec_path: File path to YAML run-spec.

    Returns:
        Fully validated run-spec object.

    Raises:
        ParetoDependencyError: If PyYAML is unavailable.
        ParetoRunSpecError: If file is invalid or schema checks fail.
    """
    spec_file = Path(spec_path).expanduser().resolve()
    payload = _load_yaml_payload(spec_file)
    root_mapping = _expect_mapping(payload, "run spec root")
    _validate_keys(root_mapping, {"version", "defaults", "steps"}, "run spec root")
    version = _parse_version(root_mapping)
    defaults = _parse_defaults(root_mapping)
    steps = _parse_steps(root_mapping)
    return RunSpec(version=version, defaults=defaults, steps=steps, base_dir=spec_file.parent)


def _load_yaml_payload(spec_file: Path) -> object:
    try:
        import yaml
    except ImportError as error:  # pragma: no cover - dependency failure
        raise ParetoDependencyError(
            "YAML run-spec support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    if not spec_file.exists():
        raise ParetoRunSpecError(
            f"Run spec file does not exist at {spec_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(spec_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ParetoRunSpecError(
            f"Failed to read run spec at {spec_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise ParetoRunSpecError(
            f"Failed to parse YAML run spec at {spec_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise ParetoRunSpecError(f"Run spec at {spec_file} is empty. Define 'version' and 'steps'.")
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise ParetoRunSpecError(
            f"Invalid {context}: expected object mapping, got {type(value).__name__}."
        )
    for key in value:
        if not isinstance(key, str):
            raise ParetoRunSpecError(
                f"Invalid {context}: expected string keys, got {type(key).__name__}."
            )
    return cast(Mapping[str, object], value)


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise ParetoRunSpecError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if isinstance(raw_version, bool) or not isinstance(raw_version, int):
        raise ParetoRunSpecError("Run spec field 'version' must be an integer. Set version: 1.")
    if raw_version != 1:
        raise ParetoRunSpecError(f"Unsupported run spec version {raw_version}. Use version: 1.")
    return raw_version


def _parse_defaults(root_mapping: Mapping[str, object]) -> RunSpecDefaults:
    raw_defaults = root_mapping.get("defaults")
    if raw_defaults is None:
        return RunSpecDefaults()
    defaults_mapping = _expect_mapping(raw_defaults, "run spec defaults")
    _validate_keys(defaults_mapping, {"output_dir", "target_shares"}, "run spec defaults")
    raw_output_dir = defaults_mapping.get("output_dir")
    if raw_output_dir is not None and not isinstance(raw_output_dir, str):
        raise ParetoRunSpecError("Run spec defaults field 'output_dir' must be a string.")
    raw_shares = defaults_mapping.get("target_shares")
    target_shares = None
    if raw_shares is not None:
        target_shares = tuple(_expect_sequence(raw_shares, "run spec defaults target_shares"))
    return RunSpecDefaults(output_dir=raw_output_dir, target_shares=target_shares)


def _parse_steps(root_mapping: Mapping[str, object]) -> tuple[RunSpecStep, ...]:
    raw_steps = root_mapping.get("steps")
    if raw_steps is None:
        raise ParetoRunSpecError(
            "Run spec missing required field 'steps'. Add a non-empty list of commands."
        )
    step_rows = _expect_sequence(raw_steps, "run spec steps")
    if len(step_rows) == 0:
        raise ParetoRunSpecError("Run spec field 'steps' must include at least one step.")
    return tuple(_parse_step(step_value, index) for index, step_value in enumerate(step_rows))


def _parse_step(step_value: object, step_index: int) -> RunSpecStep:
    context = f"run spec step #{step_index + 1}"
    step_mapping = _expect_mapping(step_value, context)
    raw_command = step_mapping.get("command")
    if not isinstance(raw_command, str):
        raise ParetoRunSpecError(f"Invalid {context}: field 'command' must be a string.")
    command = _parse_command(raw_command, context)
    args_mapping = _parse_step_args(step_mapping, context)
    _validate_keys(args_mapping, set(_STEP_ARG_KEYS[command]), f"{context} ({command})")
    return RunSpecStep(command=command, args=args_mapping)


def _parse_command(raw_command: str, context: str) -> RunSpecCommand:
    if raw_command in SUPPORTED_RUN_SPEC_COMMANDS:
        return cast(RunSpecCommand, raw_command)
    supported_rows = ", ".join(SUPPORTED_RUN_SPEC_COMMANDS)
    raise ParetoRunSpecError(
        f"Unsupported command '{raw_command}' in {context}. Use one of: {supported_rows}."
    )


def _parse_step_args(step_mapping: Mapping[str, object], context: str) -> Mapping[str, object]:
    if "args" in step_mapping:
        if len(step_mapping.keys() - {"command", "args"}) > 0:
            raise ParetoRunSpecError(
                f"Invalid {context}: when using 'args', do not mix inline keys."
            )
        return _expect_mapping(step_mapping["args"], f"{context} args")
    return {key: value for key, value in step_mapping.items() if key != "command"}


def _validate_keys(mapping: Mapping[str, object], allowed_keys: set[str], context: str) -> None:
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise ParetoRunSpecError(
            f"Invalid {context}: unknown fields {', '.join(unknown_keys)}."
        )

"""Detect command - list release domains impacted by a diff."""

from __future__ import annotations

from pathlib import Path

import typer

from impacted import __version__
from impacted.cli.commands._helpers import RULE, exit_with_code
from impacted.cli.context import CLIContext, build_context
from impacted.core.config import DetectInputs
from impacted.core.errors import ErrorCode
from impacted.core.result import Err
from impacted.domains import DetectionOutputs
from impacted.output.actions import error_command, in_github_actions, write_outputs
from impacted.output.console import ConsoleProtocol, Style
from impacted.output.errors import detect_error_exit_code, print_detect_error
from impacted.services.detect import DetectionReport, DetectService

ACTION_NAME = "detect-impacted-domains"


def print_banner(console: ConsoleProtocol, inputs: DetectInputs) -> None:
    console.print(RULE, Style.DIM)
    console.print(f"{ACTION_NAME} -Version:{__version__}", Style.BOLD)
    console.print(RULE, Style.DIM)
    console.print(f"Base Ref      : {inputs.base_ref}")
    console.print(f"Head Ref      : {inputs.head_ref}")
    console.print(RULE, Style.DIM)
    console.newline()


def render_report(report: DetectionReport, console: ConsoleProtocol) -> None:
    """Render progress, warnings and the summary for a finished run."""
    inputs = report.inputs
    console.info(
        f"Loaded sfdx-project.json with "
        f"{len(report.manifest.package_directories)} package directories"
    )

    if report.outcome == "no_config_files":
        for warning in report.warnings:
            console.warning(warning)
        return

    console.info(f"Found {len(report.config_files)} release config file(s)")
    for domain in report.domains:
        console.info(f"  - {domain.name}: {len(domain.packages)} packages ({domain.config_file})")
    for warning in report.warnings:
        console.warning(warning)

    if report.outcome == "no_valid_configs":
        return

    console.newline()
    console.info(f"Detecting changes between {inputs.base_ref} and {inputs.head_ref}...")
    console.info(f"Found {len(report.changed_files)} changed file(s)")
    if report.outcome == "no_changes":
        console.info("No changes detected")
        return

    console.newline()
    console.info("Analyzing impacted domains...")
    if report.outcome == "not_impacted":
        console.info("No domains impacted by the changes")
        return

    console.newline()
    console.header("Impacted domains:")
    for impacted in report.impacted:
        console.info(f"  - {impacted.name}: {', '.join(impacted.changed_packages)}")

    console.newline()
    console.print(RULE, Style.DIM)
    console.print("Detection Summary", Style.BOLD)
    console.print(RULE, Style.DIM)
    console.print(f"Changed files : {len(report.changed_files)}")
    console.print(f"Total domains : {len(report.domains)}")
    console.print(f"Impacted      : {len(report.impacted)}")
    console.print(f"Domains       : {', '.join(report.outputs.impacted_domains)}")
    console.print(RULE, Style.DIM)


def emit_outputs(ctx: CLIContext, outputs: DetectionOutputs, github_output: Path | None) -> None:
    """Echo the outputs and append them to ``$GITHUB_OUTPUT`` when available."""
    values = outputs.as_action_outputs()
    ctx.console.newline()
    for name, value in values.items():
        ctx.console.print(f"{name}={value}", Style.DIM)

    target = github_output
    if target is None and ctx.environ.get("GITHUB_OUTPUT"):
        target = Path(ctx.environ["GITHUB_OUTPUT"])
    if target is None:
        return

    result = write_outputs(target, values)
    if isinstance(result, Err):
        ctx.console.error(result.error.message)
        exit_with_code(int(ErrorCode.IO_ERROR))


def detect(
    release_config_path: str | None = typer.Option(
        None,
        "--release-config-path",
        help="Glob for release config files (default: config/release-config-*.yaml)",
    ),
    base_ref: str | None = typer.Option(None, "--base-ref", help="Diff base (default: origin/main)"),
    head_ref: str | None = typer.Option(None, "--head-ref", help="Diff head (default: HEAD)"),
    sfdx_project_path: str | None = typer.Option(
        None,
        "--sfdx-project-path",
        help="Project manifest (default: sfdx-project.json)",
    ),
    root: Path | None = typer.Option(None, "--root", help="Repository root (default: cwd)"),
    github_output: Path | None = typer.Option(
        None,
        "--github-output",
        help="File receiving step outputs (default: $GITHUB_OUTPUT)",
    ),
) -> None:
    """Detect release domains impacted by changes between two refs.

    Unset options fall back to the GitHub Actions INPUT_* variables, then to
    defaults.
    """
    ctx = build_context(root)
    inputs = DetectInputs.from_env(ctx.environ).with_overrides(
        release_config_path=release_config_path,
        base_ref=base_ref,
        head_ref=head_ref,
        sfdx_project_path=sfdx_project_path,
    )

    print_banner(ctx.console, inputs)

    result = DetectService(root=ctx.root, inputs=inputs).run()
    if isinstance(result, Err):
        error = result.error
        print_detect_error(error, ctx.console)
        if in_github_actions(ctx.environ):
            ctx.console.print(error_command(error.message))
        exit_with_code(detect_error_exit_code(error))

    report = result.value
    render_report(report, ctx.console)
    emit_outputs(ctx, report.outputs, github_output)

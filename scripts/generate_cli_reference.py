#!/usr/bin/env python3
"""Generate CLI reference documentation from the cashfmt typer app."""

import inspect
import sys
from pathlib import Path
from typing import Any

# Add parent directory to path to import cashfmt
sys.path.insert(0, str(Path(__file__).parent.parent))

from cashfmt.cli import app


def option_row(param_name: str, option: Any) -> str:
    """Render one typer option as a Markdown table row."""
    flags = list(getattr(option, "param_decls", None) or []) or [f"--{param_name.replace('_', '-')}"]
    flag_str = ", ".join(f"`{flag}`" for flag in flags)

    help_text = getattr(option, "help", None) or ""
    default = getattr(option, "default", None)
    if default not in (None, False, ...):
        help_text = f"{help_text} (default: `{default}`)".strip()

    return f"| {flag_str} | {help_text} |"


def split_parameters(callback: Any) -> tuple[list[str], list[str]]:
    """Split a command callback's parameters into arguments and option rows."""
    arguments = []
    options = []

    for param_name, param in inspect.signature(callback).parameters.items():
        if param.default is inspect.Parameter.empty:
            arguments.append(param_name.upper())
        elif hasattr(param.default, "param_decls"):
            options.append(option_row(param_name, param.default))

    return arguments, options


def command_section(name: str, callback: Any) -> list[str]:
    """Build the Markdown section for a single command."""
    summary = (callback.__doc__ or "No description available.").strip().splitlines()[0]
    arguments, options = split_parameters(callback)

    usage = " ".join(["cashfmt", name, *arguments, "[OPTIONS]" if options else ""]).strip()
    lines = [f"### {name}", "", summary, "", "```bash", usage, "```", ""]

    if options:
        lines += ["| Option | Description |", "|--------|-------------|", *options, ""]

    return lines


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "# cashfmt CLI Reference",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
    ]

    if app.registered_callback and app.registered_callback.callback:
        lines += split_parameters(app.registered_callback.callback)[1]
    lines += ["| `--help` | Show help message and exit |", "", "## Commands", ""]

    for command in sorted(app.registered_commands, key=lambda c: c.name or c.callback.__name__):
        lines += command_section(command.name or command.callback.__name__, command.callback)

    return "\n".join(lines)


def main() -> None:
    """Write the CLI reference to docs/cli.md, or to the path given as argument."""
    if len(sys.argv) > 1:
        output_path = Path(sys.argv[1])
    else:
        output_path = Path(__file__).parent.parent / "docs" / "cli.md"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()

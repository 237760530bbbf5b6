"""Command-line entry point: ``acul init <projectName>``."""

from __future__ import annotations

import argparse
import asyncio
import sys

from acul_cli import __version__
from acul_cli.config import Config
from acul_cli.prompts import collect_options
from acul_cli.scaffolder import ProjectComposer, ProjectOptions, ProjectTree, ScaffoldError
from acul_cli.scaffolder.composer import validate_project_name
from acul_cli.utils import (
    console,
    create_progress,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    """Create the ``acul`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="acul",
        description="Scaffold Auth0 Advanced Customizations for Universal Login (ACUL) projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  acul init my-acul-app\n"
            "  ACUL_DEV_SERVER_PORT=3000 acul init my-acul-app\n"
        ),
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    init = subparsers.add_parser(
        "init",
        help="Initialize a new ACUL project",
        description="Initialize a new ACUL project in a new directory",
    )
    init.add_argument(
        "project_name",
        metavar="projectName",
        help="Name of the project folder (also the npm package name)",
    )
    return parser


async def _generate(
    options: ProjectOptions, config: Config, project_name: str
) -> ProjectTree:
    composer = ProjectComposer(options, config)
    with create_progress() as progress:
        task = progress.add_task("Creating project structure...", total=None)
        tree = await composer.compose(
            project_name,
            on_step=lambda msg: progress.update(task, description=msg),
        )
    return tree


def _print_next_steps(project_name: str, options: ProjectOptions, tree: ProjectTree) -> None:
    print_summary_table(
        {
            "Location": str(tree.root),
            "Framework": options.framework.value,
            "Screens": ", ".join(s.value for s in options.screens),
            "UI library": options.ui_library.value,
            "Local development": "enabled" if options.local_dev else "disabled",
            "Files written": str(len(tree.files)),
        },
        title="Project",
    )
    console.print("[bold]Next steps:[/bold]")
    console.print(f"  cd {project_name}")
    console.print("  npm install")
    if options.local_dev:
        console.print("  npm run acul:dev    [dim]# start local development with mock data[/dim]")
    else:
        console.print("  npm run dev         [dim]# start the development server[/dim]")
    console.print("  npm run build       [dim]# build the screen bundles for Auth0[/dim]")
    console.print()


def init_project(project_name: str, config: Config | None = None) -> int:
    """Run the interactive init flow and return the process exit status."""
    config = config or Config.from_env()

    try:
        project_name = validate_project_name(project_name)
    except ScaffoldError as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    target = config.project_path(project_name)
    if target.exists():
        print_warning(
            f"The directory {project_name} already exists. Please choose a "
            "different name or delete the existing directory."
        )
        return 1

    print_header(f"Creating ACUL project: {project_name}")

    try:
        options = collect_options()
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_warning("Project creation cancelled.")
        return 1

    try:
        tree = asyncio.run(_generate(options, config, project_name))
    except (ScaffoldError, OSError) as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    print_success("ACUL project created successfully!")
    _print_next_steps(project_name, options, tree)
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``acul`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "init":
        sys.exit(init_project(args.project_name))


if __name__ == "__main__":
    main()

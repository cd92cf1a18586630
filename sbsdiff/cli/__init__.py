"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer runs in standalone mode and reports usage errors itself; every
    non-zero exit is returned as 1.
    """
    import typer

    from sbsdiff.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from sbsdiff.api.get_package_version import get_package_version

        print(f"sbsdiff {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(args=argv, prog_name="sbsdiff")
        return 0
    except SystemExit as e:
        return 0 if not e.code else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1

"""Main entry point for the manga catalog command line."""

from pathlib import Path
from typing import Optional

import typer

from manga_catalog.coordinators import (
    CatalogAssembler,
    CatalogGenerator,
    CatalogReconciler,
)
from manga_catalog.io import (
    CatalogRepository,
    CatalogWriteError,
    ConfigurationError,
    FilesystemChapterEnumerator,
    ManifestReader,
)
from manga_catalog.services import GitHistoryLog, SettingsManager, UploadDateResolver

app = typer.Typer(
    name="manga-catalog",
    help="Keep a work's chapter catalog in sync with its chapter folders.",
    add_completion=False,
)


def build_generator(settings: SettingsManager) -> CatalogGenerator:
    """
    Wire all components for one run.
    This is the only place that knows how to instantiate them.
    """
    root = settings.project_root

    repository = CatalogRepository(
        config_path=settings.get_config_path(),
        catalog_path=settings.get_catalog_path(),
    )
    history_log = GitHistoryLog(root, git_executable=settings.get_git_executable())
    reconciler = CatalogReconciler(
        manifest_reader=ManifestReader(root),
        upload_date_resolver=UploadDateResolver(root, history_log),
    )

    return CatalogGenerator(
        repository=repository,
        enumerator=FilesystemChapterEnumerator(root),
        reconciler=reconciler,
        assembler=CatalogAssembler(),
    )


@app.callback()
def cli():
    """Manga catalog maintenance."""


@app.command()
def generate(
    root: Optional[Path] = typer.Option(
        None, "--root", help="Work root holding chapter folders (default: current directory)"
    ),
):
    """Regenerate the catalog from chapter folders and configuration.

    Examples:

        manga-catalog generate
        manga-catalog generate --root ./my-manga
    """
    settings = SettingsManager(project_root=root)
    typer.echo(f"Generating {settings.get_catalog_path().name}...\n")

    try:
        report = build_generator(settings).generate()
    except (ConfigurationError, CatalogWriteError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"\n{report.catalog_path.name} generated successfully!")
    for line in report.summary_lines():
        typer.echo(f"  {line}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

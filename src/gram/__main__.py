"""CLI entry point for gram.

Provides the settings diff command that checks a repository's
live settings against a settings TOML file.
"""

import asyncio
from pathlib import Path

import click

from gram import __version__
from gram.services.flattener import SETTINGS_FIELDS


def _settings_file_help() -> str:
    keys = "\n".join(f"  {key}" for key, _ in SETTINGS_FIELDS)
    return (
        "\b\n"
        "The settings file is a TOML file. For example:\n"
        "-----------------------------------------\n"
        'description = "This is a test repository"\n'
        'protected = ["main"]\n'
        "[options]\n"
        "allow-squash-merge = true\n"
        "delete-branch-on-merge = true\n"
        "-----------------------------------------\n"
        "\n"
        "\b\n"
        "Keys gram diffs:\n"
        f"{keys}"
    )


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """gram - GitHub repository settings as code.

    Compares the live settings of a GitHub repository with the
    settings declared in a local file.
    """
    pass


@cli.group()
def settings() -> None:
    """Work with repository settings."""
    pass


@settings.command("diff", epilog=_settings_file_help())
@click.option("--owner", "-o", required=True, help="The owner of the repository.")
@click.option("--repo", "-r", required=True, help="The name of the repository.")
@click.option(
    "--file",
    "-f",
    "settings_file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the settings TOML file.",
)
@click.option(
    "--token",
    "-t",
    envvar="GITHUB_TOKEN",
    show_envvar=True,
    required=True,
    help="GitHub personal access token used to authenticate.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to gram configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def diff_settings(
    owner: str,
    repo: str,
    settings_file: Path,
    token: str,
    config: Path | None,
    verbose: bool,
) -> None:
    """Diff actual settings with expected settings defined in a
    settings TOML file.

    gram will only diff settings defined in the given file. It will
    not mention any settings which are not defined in that file.
    """
    from gram.config.loader import load_config
    from gram.errors import GramError
    from gram.services.github import GithubClient
    from gram.services.reconciler import SettingsDiffCommand
    from gram.services.retriever import SettingsRetriever
    from gram.services.settings_reader import SettingsReader
    from gram.utils.logging import configure_logging

    try:
        cfg = load_config(config)
    except GramError as e:
        raise click.ClickException(str(e)) from e

    logging_config = cfg.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(logging_config)

    async def main() -> None:
        async with GithubClient(token, cfg.github) as github:
            command = SettingsDiffCommand(SettingsReader(), SettingsRetriever(github))
            await command.run(owner, repo, settings_file)

    try:
        asyncio.run(main())
    except GramError as e:
        raise click.ClickException(str(e)) from e


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

import sys

import click

from vscode_search.provider.definitions import provider_labels


@click.command(epilog="Set $SEARCHPROVIDER_LOG_LEVEL to control the log level.")
@click.option("--providers", "list_providers", is_flag=True, default=False, help="List all providers and exit.")
@click.version_option(package_name="gnome-search-providers-vscode")
def main(list_providers: bool) -> None:
    """Gnome search providers for recent workspaces in VSCode variants."""
    if list_providers:
        for label in provider_labels():
            click.echo(label)
        return

    from importlib.metadata import version

    from loguru import logger

    from vscode_search.provider.log import setup_logging
    from vscode_search.provider.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Started VSCode search provider version: {}", version("gnome-search-providers-vscode"))

    # Imported late: the bus and GObject bindings are not needed to list providers.
    from vscode_search.provider.app import StartupError, start_service

    try:
        start_service(settings)
    except StartupError as exc:
        logger.error("Failed to start DBus event loop: {}", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Point d'entrée en ligne de commande.

Usage:
    linux-php-env install
    linux-php-env use 7.4 --update-cli --install-ext
    linux-php-env use default
    linux-php-env which --real
"""

import argparse
import os
import sys
from typing import List, Optional

from linux_php_env import __version__
from linux_php_env.commands import AnsiCommandFormatter, LinuxCommandExecutor
from linux_php_env.config import EnvironmentSettings, load_settings
from linux_php_env.errors import (
    ApplicationError,
    ConsoleErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
)
from linux_php_env.filesystem import LinuxFilesystem
from linux_php_env.logging import FileLogger, Logger
from linux_php_env.packages import detect_package_manager
from linux_php_env.php import PhpFpm
from linux_php_env.php.versions import DEFAULT_TOKEN
from linux_php_env.services import detect_service_manager

LOG_FILE_NAME = "linux-php-env.log"


def build_parser() -> argparse.ArgumentParser:
    """Construit l'analyseur des arguments."""
    parser = argparse.ArgumentParser(
        prog="linux-php-env",
        description="Gère PHP-FPM et ses versions sur la machine locale.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", help="Fichier de paramètres (.toml ou .json)"
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Affiche les commandes sans les exécuter",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("install", help="Installe et configure PHP-FPM")
    commands.add_parser("uninstall", help="Retire le pool PHP-FPM géré")
    commands.add_parser("status", help="Affiche le statut du service FPM")

    use = commands.add_parser("use", help="Change la version de PHP-FPM")
    use.add_argument(
        "php_version", nargs="?", default=None,
        help='Version cible (ex: 8.1) ou "default"',
    )
    use.add_argument(
        "--update-cli", action="store_true",
        help="Fait aussi pointer le binaire php vers cette version",
    )
    use.add_argument(
        "--install-ext", action="store_true",
        help="(Ré)installe les extensions communes",
    )

    which = commands.add_parser("which", help="Affiche la version active")
    which.add_argument(
        "--real", action="store_true",
        help="Ignore la version épinglée",
    )
    return parser


def build_fpm(
    settings: EnvironmentSettings,
    logger: Logger,
    dry_run: bool = False,
) -> PhpFpm:
    """Assemble l'orchestrateur à partir des variantes détectées.

    Raises:
        AvailabilityError: Si la distribution n'est pas supportée
    """
    executor = LinuxCommandExecutor(
        logger=logger,
        dry_run=dry_run,
        console_formatter=AnsiCommandFormatter() if dry_run else None,
    )
    pm = detect_package_manager(executor, logger)
    sm = detect_service_manager(executor, logger)
    files = LinuxFilesystem(logger, user=settings.user, dry_run=dry_run)
    return PhpFpm(pm, sm, executor, files, settings, logger)


def run(args: argparse.Namespace, fpm: PhpFpm, logger: Logger) -> None:
    """Exécute la sous-commande demandée."""
    if args.command == "install":
        fpm.install()
    elif args.command == "uninstall":
        fpm.uninstall()
    elif args.command == "status":
        fpm.status()
    elif args.command == "which":
        print(fpm.get_version(real=args.real) or DEFAULT_TOKEN)
    elif args.command == "use":
        result = fpm.change_version(
            args.php_version,
            update_cli=args.update_cli,
            install_ext=args.install_ext,
        )
        result.raise_for_error()
        final = result.final_version or DEFAULT_TOKEN
        logger.log_info(f"PHP-FPM utilise maintenant PHP {final}.")


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée du script linux-php-env.

    Returns:
        Code de sortie (0 succès, 1 erreur)
    """
    args = build_parser().parse_args(argv)
    chain = ErrorHandlerChain(ConsoleErrorHandler())

    try:
        settings = load_settings(args.config)
        logger = FileLogger(
            os.path.join(settings.log_path, LOG_FILE_NAME),
            console_output=True,
        )
        chain.add_handler(LoggerErrorHandler(logger))
        run(args, build_fpm(settings, logger, args.dry_run), logger)
    except ApplicationError as e:
        chain.handle(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

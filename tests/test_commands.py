"""Tests pour le module commands."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from linux_php_env.commands import (
    COMMAND_NOT_FOUND,
    AnsiCommandFormatter,
    CommandBuilder,
    CommandResult,
    LinuxCommandExecutor,
    PlainCommandFormatter,
)
from linux_php_env.logging.base import Logger


# --- Tests CommandResult ---


class TestCommandResult:
    """Tests pour la dataclass CommandResult."""

    def test_creation_avec_tous_les_champs(self):
        """Test de la création avec tous les champs."""
        result = CommandResult(
            command=["dpkg", "-l", "php8.1-fpm"],
            return_code=0,
            stdout="ii  php8.1-fpm",
            stderr="",
            success=True,
            duration=0.5,
        )
        assert result.command == ["dpkg", "-l", "php8.1-fpm"]
        assert result.return_code == 0
        assert result.success is True
        assert result.executed_as_root is False

    def test_frozen(self):
        """Test que la dataclass est immuable."""
        result = CommandResult(
            command=["ls"],
            return_code=0,
            stdout="",
            stderr="",
            success=True,
            duration=0.0,
        )
        with pytest.raises(AttributeError):
            result.return_code = 1


# --- Tests CommandBuilder ---


class TestCommandBuilder:
    """Tests pour le constructeur fluent CommandBuilder."""

    def test_build_programme_seul(self):
        assert CommandBuilder("ls").build() == ["ls"]

    def test_options_puis_arguments(self):
        """Les options précèdent toujours les arguments."""
        cmd = (
            CommandBuilder("apt-get")
            .with_args(["php8.1-fpm"])
            .with_options(["install", "-y"])
            .build()
        )
        assert cmd == ["apt-get", "install", "-y", "php8.1-fpm"]

    def test_with_flag(self):
        cmd = CommandBuilder("pacman").with_flag("--needed").build()
        assert cmd == ["pacman", "--needed"]

    def test_programme_vide_leve_erreur(self):
        with pytest.raises(ValueError, match="requis"):
            CommandBuilder("  ")


# --- Tests LinuxCommandExecutor.run ---


class TestLinuxCommandExecutorRun:
    """Tests pour la méthode run() de LinuxCommandExecutor."""

    def setup_method(self):
        """Initialise les mocks pour chaque test."""
        self.mock_logger = MagicMock(spec=Logger)
        self.executor = LinuxCommandExecutor(logger=self.mock_logger)

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_run_commande_reussie(self, mock_run):
        """Test d'une commande réussie."""
        mock_run.return_value = MagicMock(
            returncode=0, stdout="sortie", stderr="",
        )
        result = self.executor.run(["echo", "test"])

        assert result.success is True
        assert result.stdout == "sortie"
        assert result.command == ["echo", "test"]
        assert result.duration >= 0

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_run_commande_echouee(self, mock_run):
        """Test d'une commande échouée : erreur loguée, pas levée."""
        mock_run.return_value = MagicMock(
            returncode=100, stdout="", stderr="E: Unable to locate",
        )
        result = self.executor.run(["apt-get", "install", "-y", "x"])

        assert result.success is False
        assert result.return_code == 100
        assert result.stderr == "E: Unable to locate"
        self.mock_logger.log_error.assert_called_once()

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_run_commande_introuvable(self, mock_run):
        """Un binaire absent donne le code 127 et le message en stderr."""
        mock_run.side_effect = FileNotFoundError(
            "No such file or directory: 'eopkg'"
        )
        result = self.executor.run(["eopkg", "list-installed"])

        assert result.success is False
        assert result.return_code == COMMAND_NOT_FOUND
        assert "eopkg" in result.stderr

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_run_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(
            cmd=["sleep", "100"], timeout=5,
        )
        result = self.executor.run(["sleep", "100"], timeout=5)

        assert result.success is False
        assert result.return_code == -1

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_pas_de_timeout_par_defaut(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        self.executor.run(["apt-get", "install", "-y", "php8.1-fpm"])

        assert mock_run.call_args[1]["timeout"] is None

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_env_fusionne_avec_l_environnement(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        self.executor.run(
            ["apt-get", "install", "-y", "php8.1-fpm"],
            env={"DEBIAN_FRONTEND": "noninteractive"},
        )

        env = mock_run.call_args[1]["env"]
        assert env["DEBIAN_FRONTEND"] == "noninteractive"
        assert "PATH" in env

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_sans_env_herite_de_l_environnement(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        self.executor.run(["ls"])

        assert mock_run.call_args[1]["env"] is None

    @patch("linux_php_env.commands.runner.os.getuid", return_value=0)
    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_log_prefixe_root(self, mock_run, _mock_uid):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        executor = LinuxCommandExecutor(logger=self.mock_logger)
        result = executor.run(["systemctl", "restart", "php8.1-fpm"])

        message = self.mock_logger.log_info.call_args[0][0]
        assert message == "[ROOT] Exécution : systemctl restart php8.1-fpm"
        assert result.executed_as_root is True


# --- Tests CommandExecutor.capture ---


class TestCapture:
    """Tests du contrat capture() : sortie, handler d'échec."""

    def setup_method(self):
        self.executor = LinuxCommandExecutor()

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_retourne_sortie_nettoyee(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=0, stdout="  /usr/bin/apt-get\n", stderr="",
        )
        assert self.executor.capture(["which", "apt-get"]) == (
            "/usr/bin/apt-get"
        )

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_handler_recoit_code_et_stderr(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=3, stdout="", stderr="boom",
        )
        handler = MagicMock()

        self.executor.capture(["false"], on_error=handler)

        handler.assert_called_once_with(3, "boom")

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_exception_du_handler_propagee(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=1, stdout="", stderr="boom",
        )

        def fail(code, stderr):
            raise RuntimeError(stderr)

        with pytest.raises(RuntimeError, match="boom"):
            self.executor.capture(["false"], on_error=fail)

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_sans_handler_echec_silencieux(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=1, stdout="partiel\n", stderr="boom",
        )
        assert self.executor.capture(["dpkg", "-l", "x"]) == "partiel"

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_handler_non_appele_si_succes(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        handler = MagicMock()

        self.executor.capture(["true"], on_error=handler)

        handler.assert_not_called()


# --- Tests dry-run ---


class TestLinuxCommandExecutorDryRun:
    """Tests du mode simulation."""

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_dry_run_n_execute_rien(self, mock_run):
        logger = MagicMock(spec=Logger)
        executor = LinuxCommandExecutor(logger=logger, dry_run=True)

        result = executor.run(["apt-get", "install", "-y", "php8.1-fpm"])

        mock_run.assert_not_called()
        assert result.success is True
        assert "[dry-run]" in logger.log_info.call_args[0][0]

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_dry_run_affiche_en_console(self, mock_run, capsys):
        executor = LinuxCommandExecutor(
            dry_run=True, console_formatter=AnsiCommandFormatter(),
        )
        executor.run(["systemctl", "stop", "php8.1-fpm"])

        assert "systemctl stop php8.1-fpm" in capsys.readouterr().out

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_dry_run_lance_les_lectures(self, mock_run):
        mock_run.return_value = MagicMock(
            returncode=0, stdout="/usr/bin/apt-get\n", stderr="",
        )
        executor = LinuxCommandExecutor(dry_run=True)

        output = executor.capture(["which", "apt-get"], read_only=True)

        assert output == "/usr/bin/apt-get"
        mock_run.assert_called_once()

    @patch("linux_php_env.commands.runner.subprocess.run")
    def test_dry_run_ecriture_simulee_malgre_lectures(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        executor = LinuxCommandExecutor(dry_run=True)

        executor.run(["dpkg", "-l", "php8.1-fpm"], read_only=True)
        executor.run(["apt-get", "install", "-y", "php8.1-fpm"])

        assert mock_run.call_count == 1
        assert mock_run.call_args[0][0] == ["dpkg", "-l", "php8.1-fpm"]


# --- Tests formateurs ---


class TestFormatters:
    """Tests pour PlainCommandFormatter et AnsiCommandFormatter."""

    def test_plain_prefixe_user(self):
        message = PlainCommandFormatter().format_start(["ls"], False)
        assert message == "[user] Exécution : ls"

    def test_plain_dry_run(self):
        message = PlainCommandFormatter().format_dry_run(["ls"], True)
        assert message == "[ROOT] [dry-run] ls"

    def test_ansi_sans_tty_texte_brut(self):
        formatter = AnsiCommandFormatter()
        with patch.object(formatter, "_is_tty", return_value=False):
            assert formatter.format_start(["ls"], True) == (
                "[ROOT] Exécution : ls"
            )

    def test_ansi_avec_tty_colore(self):
        formatter = AnsiCommandFormatter()
        with patch.object(formatter, "_is_tty", return_value=True):
            message = formatter.format_start(["ls"], True)
        assert message.startswith(AnsiCommandFormatter.ROOT_STYLE)
        assert message.endswith(AnsiCommandFormatter.RESET)

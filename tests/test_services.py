"""Tests pour les gestionnaires de services."""

from unittest.mock import MagicMock

import pytest

from linux_php_env.errors.exceptions import (
    AvailabilityError,
    ServiceCommandError,
    UnknownServiceError,
    ValidationError,
)
from linux_php_env.logging.base import Logger
from linux_php_env.services import (
    LinuxService,
    Systemd,
    detect_service_manager,
    is_not_found_status,
    validate_service_name,
)

SYSTEMD_ENABLED = """\
● php8.1-fpm.service - The PHP 8.1 FastCGI Process Manager
     Loaded: loaded (/lib/systemd/system/php8.1-fpm.service; enabled; \
vendor preset: enabled)
     Active: active (running) since Mon 2024-01-08 09:12:44 CET
"""

SYSTEMD_DISABLED = """\
○ php7.4-fpm.service - The PHP 7.4 FastCGI Process Manager
     Loaded: loaded (/lib/systemd/system/php7.4-fpm.service; disabled; \
vendor preset: enabled)
     Active: inactive (dead)
"""

SYSTEMD_UNKNOWN = "Unit php5.6-fpm.service could not be found."

SYSTEMD_RUNNING_WITH_JOURNAL = SYSTEMD_ENABLED + """\

Jan 08 09:12:44 host php-fpm[42]: [WARNING] [pool valet] child 42 said \
into stderr: "File not found."
Jan 08 09:12:45 host php-fpm[42]: [WARNING] [pool valet] child 43 said \
into stderr: "Unit not-found"
"""


@pytest.fixture
def logger():
    return MagicMock(spec=Logger)


@pytest.fixture
def systemd(executor, logger):
    return Systemd(executor, logger)


class TestIsNotFoundStatus:
    """Tests du prédicat de service inconnu."""

    @pytest.mark.parametrize("status", [
        SYSTEMD_UNKNOWN,
        "not-found (Reason: Unit php5.6-fpm.service not found.)",
        "Loaded: not-found (Reason: No such file or directory)",
        "php5.6-fpm: unrecognized service",
        "Failed to stop php5.6-fpm.service: Unit php5.6-fpm.service "
        "not loaded. No such unit.",
        "Failed to enable unit: Unit file php5.6-fpm.service does not "
        "exist.",
    ])
    def test_services_inconnus(self, status):
        assert is_not_found_status(status) is True

    @pytest.mark.parametrize("status", [
        SYSTEMD_ENABLED,
        SYSTEMD_DISABLED,
        SYSTEMD_RUNNING_WITH_JOURNAL,
        "",
        None,
    ])
    def test_services_connus(self, status):
        assert is_not_found_status(status) is False


class TestValidateServiceName:
    """Tests de validate_service_name()."""

    @pytest.mark.parametrize("name", [
        "php8.1-fpm", "php81-php-fpm", "php-fpm74", "getty@tty1",
    ])
    def test_noms_valides(self, name):
        assert validate_service_name(name) == name

    @pytest.mark.parametrize("name", [
        "", "../etc/passwd", "php/fpm", "-php", "php fpm", "php;reboot",
    ])
    def test_noms_invalides(self, name):
        with pytest.raises(ValidationError):
            validate_service_name(name)


class TestSystemd:
    """Tests pour le gestionnaire Systemd."""

    def test_status_reunit_les_sorties(self, systemd, executor):
        executor.script(
            ["systemctl", "status", "php5.6-fpm"],
            return_code=4,
            stderr=SYSTEMD_UNKNOWN,
        )
        assert systemd.status("php5.6-fpm") == SYSTEMD_UNKNOWN
        assert systemd.is_unknown("php5.6-fpm") is True

    def test_journal_d_un_service_actif(self, systemd, executor):
        """Un "not found" relayé par le journal ne rend pas inconnu."""
        executor.script(
            ["systemctl", "status", "php8.1-fpm"],
            stdout=SYSTEMD_RUNNING_WITH_JOURNAL,
        )

        assert systemd.is_unknown("php8.1-fpm") is False
        assert executor.read_only_calls == [
            ["systemctl", "status", "php8.1-fpm"],
        ]

    def test_disabled(self, systemd, executor):
        executor.script(
            ["systemctl", "status", "php7.4-fpm"],
            return_code=3,
            stdout=SYSTEMD_DISABLED,
        )
        executor.script(
            ["systemctl", "status", "php8.1-fpm"], stdout=SYSTEMD_ENABLED
        )
        assert systemd.disabled("php7.4-fpm") is True
        assert systemd.disabled("php8.1-fpm") is False

    def test_service_inconnu_non_desactive(self, systemd, executor):
        executor.script(
            ["systemctl", "status", "php5.6-fpm"],
            return_code=4,
            stderr=SYSTEMD_UNKNOWN,
        )
        assert systemd.disabled("php5.6-fpm") is False

    def test_actions(self, systemd, executor):
        systemd.enable("php8.1-fpm")
        systemd.restart("php8.1-fpm")
        systemd.stop("php8.1-fpm")
        systemd.disable("php8.1-fpm")

        assert executor.calls == [
            ["systemctl", "enable", "php8.1-fpm"],
            ["systemctl", "restart", "php8.1-fpm"],
            ["systemctl", "stop", "php8.1-fpm"],
            ["systemctl", "disable", "php8.1-fpm"],
        ]

    def test_restart_service_inconnu(self, systemd, executor):
        executor.script(
            ["systemctl", "restart", "php5.6-fpm"],
            return_code=5,
            stderr="Failed to restart php5.6-fpm.service: Unit "
                   "php5.6-fpm.service not found.",
        )
        with pytest.raises(UnknownServiceError) as exc_info:
            systemd.restart("php5.6-fpm")
        assert exc_info.value.service == "php5.6-fpm"

    def test_enable_inconnu_detecte_par_le_statut(self, systemd, executor):
        executor.script(
            ["systemctl", "enable", "php5.6-fpm"],
            return_code=1,
            stderr="Failed to enable unit",
        )
        executor.script(
            ["systemctl", "status", "php5.6-fpm"],
            return_code=4,
            stderr=SYSTEMD_UNKNOWN,
        )
        with pytest.raises(UnknownServiceError):
            systemd.enable("php5.6-fpm")

    def test_restart_service_connu_en_echec(self, systemd, executor):
        executor.script(
            ["systemctl", "restart", "php8.1-fpm"],
            return_code=1,
            stderr="Job for php8.1-fpm.service failed.",
        )
        executor.script(
            ["systemctl", "status", "php8.1-fpm"], stdout=SYSTEMD_ENABLED
        )
        with pytest.raises(ServiceCommandError) as exc_info:
            systemd.restart("php8.1-fpm")

        error = exc_info.value
        assert error.action == "restart"
        assert error.return_code == 1
        assert "Job for php8.1-fpm.service failed." in error.stderr

    def test_stop_service_inconnu_avertit(self, systemd, executor, logger):
        executor.script(
            ["systemctl", "stop", "php5.6-fpm"],
            return_code=5,
            stderr="Failed to stop php5.6-fpm.service: Unit "
                   "php5.6-fpm.service not loaded. No such unit.",
        )

        systemd.stop("php5.6-fpm")

        logger.log_warning.assert_called_once_with(
            "stop ignoré : service php5.6-fpm inconnu."
        )

    def test_disable_service_inconnu_avertit(
        self, systemd, executor, logger
    ):
        executor.script(
            ["systemctl", "disable", "php5.6-fpm"],
            return_code=1,
            stderr="Failed to disable unit: Unit file php5.6-fpm.service "
                   "does not exist.",
        )
        executor.script(
            ["systemctl", "status", "php5.6-fpm"],
            return_code=4,
            stderr=SYSTEMD_UNKNOWN,
        )

        systemd.disable("php5.6-fpm")

        logger.log_warning.assert_called_once()

    def test_nom_invalide_rien_n_est_execute(self, systemd, executor):
        with pytest.raises(ValidationError):
            systemd.restart("php;reboot")
        assert executor.calls == []

    def test_print_status(self, systemd, executor, capsys):
        executor.script(
            ["systemctl", "status", "php8.1-fpm"], stdout=SYSTEMD_ENABLED
        )
        systemd.print_status("php8.1-fpm")
        assert "Active: active (running)" in capsys.readouterr().out


class TestLinuxService:
    """Tests pour le gestionnaire SysV (service, update-rc.d)."""

    @pytest.fixture
    def rc_root(self, tmp_path):
        for level in range(2, 6):
            (tmp_path / f"rc{level}.d").mkdir()
        return tmp_path

    @pytest.fixture
    def sysv(self, executor, logger, rc_root):
        return LinuxService(executor, logger, rc_dirs=f"{rc_root}/rc[2-5].d")

    def test_commandes(self, sysv, executor):
        sysv.enable("php8.1-fpm")
        sysv.restart("php8.1-fpm")
        sysv.disable("php8.1-fpm")

        assert executor.calls == [
            ["update-rc.d", "php8.1-fpm", "enable"],
            ["service", "php8.1-fpm", "restart"],
            ["update-rc.d", "php8.1-fpm", "disable"],
        ]

    def test_active_si_lien_de_demarrage(self, sysv, executor, rc_root):
        executor.script(
            ["service", "php8.1-fpm", "status"],
            stdout="* php-fpm8.1 is running",
        )
        (rc_root / "rc3.d" / "S01php8.1-fpm").touch()

        assert sysv.disabled("php8.1-fpm") is False

    def test_desactive_sans_lien(self, sysv, executor, rc_root):
        executor.script(
            ["service", "php7.4-fpm", "status"],
            return_code=3,
            stdout="* php-fpm7.4 is not running",
        )
        (rc_root / "rc3.d" / "K01php7.4-fpm").touch()

        assert sysv.disabled("php7.4-fpm") is True

    def test_service_inconnu(self, sysv, executor):
        executor.script(
            ["service", "php5.6-fpm", "status"],
            return_code=1,
            stderr="php5.6-fpm: unrecognized service",
        )
        executor.script(
            ["service", "php5.6-fpm", "restart"],
            return_code=1,
            stderr="php5.6-fpm: unrecognized service",
        )

        assert sysv.disabled("php5.6-fpm") is False
        with pytest.raises(UnknownServiceError):
            sysv.restart("php5.6-fpm")


class TestDetection:
    """Tests de detect_service_manager()."""

    def test_systemd_prioritaire(self, executor, logger):
        executor.script(["which", "systemctl"], stdout="/usr/bin/systemctl")
        executor.script(["which", "service"], stdout="/usr/sbin/service")

        assert isinstance(detect_service_manager(executor, logger), Systemd)

    def test_repli_sur_service(self, executor, logger):
        executor.script(["which", "service"], stdout="/usr/sbin/service")

        manager = detect_service_manager(executor, logger)

        assert isinstance(manager, LinuxService)
        logger.log_info.assert_called_once_with(
            "Gestionnaire de services : LinuxService"
        )

    def test_aucun_systeme_d_init(self, executor, logger):
        with pytest.raises(AvailabilityError):
            detect_service_manager(executor, logger)

"""
Convergence settings for the backup/restore workflows.

The backup check aborts on the first failing fetch while the restore
check keeps polling through fetch errors, so each gets its own PollConfig.
"""

from dataclasses import dataclass, field

from converge.env import Env, TimeParser
from converge.poll import FetchErrorPolicy, PollConfig


@dataclass(slots=True)
class ConvergenceConfig:
    backup: PollConfig = field(
        default_factory=lambda: PollConfig(
            interval=2.0,
            timeout=180.0,
            fetch_error_policy=FetchErrorPolicy.FATAL,
        )
    )
    restore: PollConfig = field(
        default_factory=lambda: PollConfig(
            interval=2.0,
            timeout=1200.0,
            fetch_error_policy=FetchErrorPolicy.TOLERATE,
        )
    )
    install_timeout: float = 300.0


def create_convergence_config_from_env(env: Env) -> ConvergenceConfig:
    """Create convergence configuration from environment settings."""
    parser = TimeParser()
    interval = parser.parse(env.CONVERGE_POLL_INTERVAL)

    return ConvergenceConfig(
        backup=PollConfig(
            interval=interval,
            timeout=parser.parse(env.CONVERGE_BACKUP_TIMEOUT),
            fetch_error_policy=FetchErrorPolicy.from_name(
                env.CONVERGE_BACKUP_FETCH_ERROR_POLICY
            ),
        ),
        restore=PollConfig(
            interval=interval,
            timeout=parser.parse(env.CONVERGE_RESTORE_TIMEOUT),
            fetch_error_policy=FetchErrorPolicy.from_name(
                env.CONVERGE_RESTORE_FETCH_ERROR_POLICY
            ),
        ),
        install_timeout=parser.parse(env.CONVERGE_INSTALL_TIMEOUT),
    )

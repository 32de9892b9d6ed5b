from converge.logging import LoggingConfig

from .env import Env


def configure_logging_from_env(env: Env) -> LoggingConfig:
    """Apply the CONVERGE_LOG_* settings to the shared logging config."""
    config = LoggingConfig()
    config.update(
        log_directory=env.CONVERGE_LOGS_DIRECTORY,
        log_level=env.CONVERGE_LOG_LEVEL,
        log_output=env.CONVERGE_LOG_OUTPUT,
    )

    return config

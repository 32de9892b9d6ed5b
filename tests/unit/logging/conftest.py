import msgspec
import pytest

from converge.logging import LoggingConfig


@pytest.fixture(autouse=True)
def configure_log_level():
    config = LoggingConfig()
    config.update(log_level="trace")
    yield
    config.update(log_level="info")


@pytest.fixture
def read_log_lines():
    def read(path) -> list[dict]:
        with open(path, "rb") as logfile:
            return [
                msgspec.json.decode(line)
                for line in logfile.read().splitlines()
                if line
            ]

    return read

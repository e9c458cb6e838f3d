from tests.e2e.helpers.cli import last_json_line, run_cli, write_temp_config
from tests.e2e.helpers.server import Scenario, start_fake_server

__all__ = [
    "Scenario",
    "last_json_line",
    "run_cli",
    "start_fake_server",
    "write_temp_config",
]

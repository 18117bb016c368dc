__version__ = "0.1.0"

from .aggregator import Aggregator, assemble_status, first_line
from .command_config import BarConfig, CommandSpec, default_config
from .command_executor import CommandExecutor
from .command_status import CommandState, CommandStatus
from .exceptions import (
    CmdbarError,
    ConfigError,
    PublishError,
    ShellSpawnError,
)
from .load_config import load_config, parse_config, read_config, write_default_config
from .local_subprocess_executor import LocalSubprocessExecutor
from .logging_config import disable_logging, get_log_file_path, setup_logging
from .output_cell import OutputCell
from .publisher import Publisher, XRootPublisher
from .respawn_scheduler import RespawnScheduler
from .run_result import RunResult
from .scheduled_command import ScheduledCommand
from .status_bar import StatusBar
from .types import CompletionMessage

__all__ = [
    # Version
    "__version__",
    # Core Components
    "Aggregator",
    "BarConfig",
    "CommandSpec",
    "CommandState",
    "CommandStatus",
    "CompletionMessage",
    "OutputCell",
    "RespawnScheduler",
    "RunResult",
    "ScheduledCommand",
    "StatusBar",
    # Configuration
    "default_config",
    "load_config",
    "parse_config",
    "read_config",
    "write_default_config",
    # Utilities
    "assemble_status",
    "first_line",
    "disable_logging",
    "get_log_file_path",
    "setup_logging",
    # Executors
    "CommandExecutor",
    "LocalSubprocessExecutor",
    # Publishers
    "Publisher",
    "XRootPublisher",
    # Exceptions
    "CmdbarError",
    "ConfigError",
    "PublishError",
    "ShellSpawnError",
]

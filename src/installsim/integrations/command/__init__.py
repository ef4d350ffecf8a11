from installsim.integrations.command.abc import CommandExecutor
from installsim.integrations.command.fake import FakeCommandExecutor
from installsim.integrations.command.real import RealCommandExecutor
from installsim.integrations.command.types import CommandResponse, ExecutedCommand

__all__ = [
    "CommandExecutor",
    "CommandResponse",
    "ExecutedCommand",
    "FakeCommandExecutor",
    "RealCommandExecutor",
]

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from ob.core.config import Config, EnvSettings, load_config_or_default
from ob.core.errors import ErrorCode
from ob.core.mode import ExecutionMode
from ob.core.result import Err
from ob.output.console import ConsoleProtocol, RichConsole
from ob.platform.detection import PlatformGuesser
from ob.tools.docker import DockerEngine
from ob.tools.runner import ToolRunner


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: Config
    env: EnvSettings
    console: ConsoleProtocol
    guesser: PlatformGuesser
    runner: ToolRunner

    @property
    def mode(self) -> ExecutionMode:
        return self.env.mode


def build_context() -> CLIContext:
    root = Path.cwd()
    console = RichConsole()
    env = EnvSettings.from_environ(os.environ)

    config_result = load_config_or_default(root)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
    config = config_result.value

    engine = DockerEngine(
        console=console,
        namespace=config.tools.namespace,
        mount_point=config.tools.mount_point,
        buildkit=env.buildkit,
    )
    return CLIContext(
        root=root,
        config=config,
        env=env,
        console=console,
        guesser=PlatformGuesser(os_override=env.goos, arch_override=env.goarch),
        runner=ToolRunner(engine=engine, console=console),
    )

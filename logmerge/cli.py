#!filepath: logmerge/cli.py
import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich import print

from logmerge import __version__, init_logging, logs
from logmerge.config.app_config import AppConfig
from logmerge.config.merge_config import MergeConfig
from logmerge.merge.async_merge import async_sorted_merge
from logmerge.merge.sync_merge import sync_sorted_merge
from logmerge.observability.metrics import MetricRecorder
from logmerge.observability.timer import Timer
from logmerge.sinks.printer import ConsolePrinter
from logmerge.sources.random_source import make_sources
from logmerge.utils.errors import UserInputError

app = typer.Typer(help="LogMerge: print entries from many log sources in chronological order")

ConfigOpt = typer.Option(None, "--config", "-c", help="YAML config file (default: packaged base.yml)")
SourcesOpt = typer.Option(None, "--sources", "-n", help="Number of synthetic log sources")
SeedOpt = typer.Option(None, "--seed", help="Seed for reproducible sources")
TimeoutOpt = typer.Option(None, "--timeout", help="Seconds to wait for one async fetch")
DelayOpt = typer.Option(None, "--max-delay-ms", help="Upper bound of the simulated async fetch delay")
QuietOpt = typer.Option(False, "--quiet", "-q", help="Only print the summary")


def _settings(
    config: Optional[Path],
    sources: Optional[int],
    seed: Optional[int],
    timeout: Optional[float],
    max_delay_ms: Optional[int],
    quiet: bool,
) -> MergeConfig:
    """
    config 文件 → CLI 覆盖
    """
    app_config = AppConfig.load(str(config) if config else None)
    init_logging(app_config.log)

    updates = {}
    if sources is not None:
        if sources < 0:
            raise UserInputError(f"--sources must be >= 0, got {sources}")
        updates["source_count"] = sources
    if seed is not None:
        updates["seed"] = seed
    if timeout is not None:
        if timeout <= 0:
            raise UserInputError(f"--timeout must be > 0, got {timeout}")
        updates["fetch_timeout"] = timeout
    if max_delay_ms is not None:
        if max_delay_ms < 0:
            raise UserInputError(f"--max-delay-ms must be >= 0, got {max_delay_ms}")
        updates["max_fetch_delay_ms"] = max_delay_ms
    if quiet:
        updates["echo"] = False

    return app_config.merge.model_copy(update=updates)


@logs.catch(msg="sync merge failed")
def _run_sync(settings: MergeConfig, timer: Timer, metrics: MetricRecorder) -> None:
    log_sources = make_sources(
        settings.source_count,
        seed=settings.seed,
        max_delay_ms=settings.max_fetch_delay_ms,
    )
    printer = ConsolePrinter(echo=settings.echo)

    with timer.measure("sync"):
        sync_sorted_merge(log_sources, printer)

    metrics.record("sync.logs_printed", printer.logs_printed)
    metrics.record("sync.elapsed_s", round(timer.elapsed["sync"], 4))


@logs.catch(msg="async merge failed")
def _run_async(settings: MergeConfig, timer: Timer, metrics: MetricRecorder) -> None:
    log_sources = make_sources(
        settings.source_count,
        seed=settings.seed,
        max_delay_ms=settings.max_fetch_delay_ms,
    )
    printer = ConsolePrinter(echo=settings.echo)

    with timer.measure("async"):
        asyncio.run(
            async_sorted_merge(
                log_sources,
                printer,
                fetch_timeout=settings.fetch_timeout,
            )
        )

    metrics.record("async.logs_printed", printer.logs_printed)
    metrics.record("async.elapsed_s", round(timer.elapsed["async"], 4))


def _execute(modes, config, sources, seed, timeout, max_delay_ms, quiet) -> None:
    try:
        settings = _settings(config, sources, seed, timeout, max_delay_ms, quiet)
    except UserInputError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    timer = Timer()
    metrics = MetricRecorder()
    for mode in modes:
        print(f"[blue]Running {mode} merge over {settings.source_count} sources[/blue]")
        if mode == "sync":
            _run_sync(settings, timer, metrics)
        else:
            _run_async(settings, timer, metrics)
        print(f"[green]{mode.capitalize()} sort complete.[/green]")


@app.command()
def version():
    print(f"v{__version__}")


@app.command("sync")
def sync_cmd(
    config: Optional[Path] = ConfigOpt,
    sources: Optional[int] = SourcesOpt,
    seed: Optional[int] = SeedOpt,
    quiet: bool = QuietOpt,
):
    """
    Blocking merge：所有 source 同步 pop
    """
    _execute(("sync",), config, sources, seed, None, None, quiet)


@app.command("async")
def async_cmd(
    config: Optional[Path] = ConfigOpt,
    sources: Optional[int] = SourcesOpt,
    seed: Optional[int] = SeedOpt,
    timeout: Optional[float] = TimeoutOpt,
    max_delay_ms: Optional[int] = DelayOpt,
    quiet: bool = QuietOpt,
):
    """
    Pipelined merge：每个 source 始终保持一个 in-flight pop_async
    """
    _execute(("async",), config, sources, seed, timeout, max_delay_ms, quiet)


@app.command()
def run(
    config: Optional[Path] = ConfigOpt,
    sources: Optional[int] = SourcesOpt,
    seed: Optional[int] = SeedOpt,
    timeout: Optional[float] = TimeoutOpt,
    max_delay_ms: Optional[int] = DelayOpt,
    quiet: bool = QuietOpt,
):
    """
    先 sync 再 async，两次使用相同配置
    """
    _execute(("sync", "async"), config, sources, seed, timeout, max_delay_ms, quiet)


if __name__ == "__main__":
    app()

# python -m logmerge run --sources 100 --quiet

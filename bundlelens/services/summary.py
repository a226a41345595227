from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from bundlelens.config.schema import AppConfig
from bundlelens.models.bundle import AnalysisResult
from bundlelens.models.enums import Impact
from bundlelens.models.insight import Insight
from bundlelens.services.formatting import format_bytes
from bundlelens.services.stats import (
    average_module_size,
    chunk_breakdown,
    compression_ratio,
    estimate_load_time,
    largest_modules,
    type_breakdown,
)

_IMPACT_STYLE = {
    Impact.HIGH: "bold red",
    Impact.MEDIUM: "yellow",
    Impact.LOW: "green",
}


def _stats_panel(result: AnalysisResult) -> Panel:
    body = (
        f"Files: [bold]{result.metadata.file_count}[/bold]\n"
        f"Modules: [bold]{len(result.modules)}[/bold]\n"
        f"Chunks: [bold]{len(result.chunks)}[/bold]\n"
        f"Total Size: [bold]{format_bytes(result.total_size)}[/bold]\n"
        f"Compressed: [bold]{format_bytes(result.total_compressed_size)}[/bold] "
        f"({compression_ratio(result):.1f}% smaller)\n"
        f"Average Module: [bold]{format_bytes(average_module_size(result))}[/bold]\n"
        f"Load Time: [bold]{estimate_load_time(result.total_size)}[/bold]"
    )
    return Panel(body, title="Bundle Summary", border_style="blue")


def _type_table(result: AnalysisResult) -> Table:
    table = Table(title="Size by Type", header_style="bold magenta")
    table.add_column("Type")
    table.add_column("Modules", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Share", justify="right")
    for row in type_breakdown(result):
        table.add_row(row.type.value, str(row.count), format_bytes(row.size), f"{row.share * 100:.1f}%")
    return table


def _modules_table(result: AnalysisResult, top_n: int) -> Table:
    table = Table(title="Largest Modules", header_style="bold cyan")
    table.add_column("Module")
    table.add_column("Type", justify="center")
    table.add_column("Size", justify="right")
    for module in largest_modules(result.modules, top_n):
        table.add_row(escape(module.name), module.type.value, format_bytes(module.size))
    return table


def _chunks_table(result: AnalysisResult, top_n: int) -> Table:
    table = Table(title="Chunks", header_style="bold cyan")
    table.add_column("Chunk")
    table.add_column("Entry", justify="center")
    table.add_column("Size", justify="right")
    table.add_column("Share", justify="right")
    for row in chunk_breakdown(result)[:top_n]:
        table.add_row(
            escape(row.chunk.name),
            "yes" if row.chunk.is_entry else "",
            format_bytes(row.chunk.size),
            f"{row.share * 100:.1f}%",
        )
    return table


def _insights_table(insights: Sequence[Insight]) -> Table:
    table = Table(title="Optimization Insights", header_style="bold yellow")
    table.add_column("Impact", justify="center")
    table.add_column("Category")
    table.add_column("Finding")
    table.add_column("Savings", justify="right")
    for item in insights:
        savings = item.estimated_savings_bytes
        table.add_row(
            f"[{_IMPACT_STYLE[item.impact]}]{item.impact.value}[/]",
            item.category.label,
            f"[bold]{escape(item.title)}[/bold]\n{escape(item.description)}\n[dim]{escape(item.recommendation)}[/dim]",
            format_bytes(savings) if savings is not None else "",
        )
    return table


def render_summary(console: Console, result: AnalysisResult, config: AppConfig) -> None:
    console.print(_stats_panel(result))
    if result.modules:
        console.print(_type_table(result))
        console.print(_modules_table(result, config.top_count))
    if result.chunks:
        console.print(_chunks_table(result, config.top_count))
    if result.insights:
        console.print(_insights_table(result.insights))
    else:
        console.print("[green]No optimization issues found.[/green]")

"""Terminal rendering of rent-increase decisions."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .models import Advice, Decision, LeaseFacts

_RISK_STYLE = {"Low": "green", "Medium": "yellow", "High": "red"}
_BAR_WIDTH = 40


def comparison_rows(decision: Decision) -> list[tuple[str, float]]:
    """(label, amount) rows for the current / benchmark / new-max comparison."""
    benchmark_label = "Valuation" if decision.valuation_used else "RERA Index"
    amounts = decision.comparison()
    return [
        ("Current Rent", amounts["current_rent"]),
        (benchmark_label, amounts["benchmark_rent"]),
        ("New Max Rent", amounts["new_max_rent"]),
    ]


def _bar(amount: float, largest: float) -> str:
    if largest <= 0 or amount <= 0:
        return ""
    return "█" * max(1, round(_BAR_WIDTH * amount / largest))


def render_decision(
    console: Console,
    facts: LeaseFacts,
    decision: Decision,
    advice: Advice | None = None,
) -> None:
    """Print eligibility, notice, risk, rationale, comparison and advice."""
    if decision.insufficient_input:
        console.print("[yellow]Enter the current rent and a market or valuation figure.[/yellow]")
        for note in decision.notes:
            console.print(f"[dim]{note}[/dim]")
        return

    verdict = (
        f"[bold green]Increase allowed: {decision.increase_percentage}%[/bold green]"
        if decision.is_eligible
        else "[bold]No increase this cycle[/bold]"
    )
    title = f"{facts.bedrooms} {facts.unit_type}" + (f" in {facts.area}" if facts.area else "")
    console.print(Panel(f"{verdict}\n{decision.plain_english_summary}", title=title))

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Max increase", f"AED {decision.max_increase_amount:,.0f}")
    table.add_row("New max rent", f"AED {decision.new_max_rent:,.0f}")
    table.add_row("Gap to benchmark", f"{decision.gap_percent:.1f}% ({decision.band_reason})")
    notice_style = "green" if decision.is_notice_valid else "red"
    table.add_row("Notice", f"[{notice_style}]{decision.notice_message}[/{notice_style}]")
    risk_style = _RISK_STYLE.get(decision.risk_level, "white")
    table.add_row("Risk", f"[{risk_style}]{decision.risk_level}[/{risk_style}] - {decision.risk_reason}")
    table.add_row("Why", decision.why_result)
    table.add_row("RDC expectation", decision.rdc_expectation)
    console.print(table)

    if decision.edge_case_warning:
        console.print(f"[yellow]Warning: {decision.edge_case_warning}[/yellow]")
    for note in decision.notes:
        console.print(f"[dim]{note}[/dim]")

    rows = comparison_rows(decision)
    largest = max(amount for _, amount in rows)
    chart = Table(title="Rent Comparison (AED / year)", show_header=False, box=None)
    chart.add_column("Label", style="dim")
    chart.add_column("Bar", style="magenta")
    chart.add_column("Amount", justify="right")
    for label, amount in rows:
        chart.add_row(label, _bar(amount, largest), f"{amount:,.0f}")
    console.print(chart)

    if advice is not None:
        console.print("\n[bold]Recommended Next Steps[/bold]")
        for i, step in enumerate(advice.next_steps, 1):
            console.print(f"  {i}. {step}")
        console.print(f"[dim]{advice.market_context}[/dim]")

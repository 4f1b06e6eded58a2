"""CLI for the RERA rent increase checker."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dotenv import load_dotenv
from typing import Optional

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

import typer
from rich.console import Console
from rich.logging import RichHandler

from .advisory import AdvisoryService, GeminiAdvisor, OfflineAdvisor
from .config import get_advisory_settings, load_config
from .eligibility import RentEligibilityEngine
from .forms import build_lease_facts
from .report import render_decision

app = typer.Typer(
    name="rera-rent",
    help="Dubai rent increase checker (RERA Decree No. 43 of 2013)",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _get_advisor(cfg: dict, offline: bool = False) -> AdvisoryService:
    """Gemini when an API key is configured, otherwise the offline fallback."""
    if offline:
        return OfflineAdvisor()
    advisor = GeminiAdvisor(settings=get_advisory_settings(cfg))
    if not advisor.api_key:
        console.print("[dim]GEMINI_API_KEY not set; using standard next steps.[/dim]")
        return OfflineAdvisor()
    return advisor


@app.command()
def check(
    current_rent: str = typer.Option(..., "--current-rent", "-r", help="Current annual rent (AED)"),
    market_rent: Optional[str] = typer.Option(None, "--market-rent", "-m", help="RERA Index annual rent (AED)"),
    valuation: Optional[str] = typer.Option(None, "--valuation", "-v", help="Valuation certificate amount (AED)"),
    expiry_date: Optional[str] = typer.Option(None, "--expiry", help="Lease expiry date (YYYY-MM-DD)"),
    notice_date: Optional[str] = typer.Option(None, "--notice", help="Date renewal notice was served (YYYY-MM-DD)"),
    tenant_flip_flop: bool = typer.Option(False, "--flip-flop", help="Tenant declined renewal then requested it"),
    area: str = typer.Option("", "--area", "-a", help="Community / area"),
    unit_type: str = typer.Option("Apartment", "--unit-type", "-u", help="Apartment or Villa"),
    bedrooms: str = typer.Option("1 Bedroom", "--bedrooms", "-b", help="e.g. Studio, 2 Bedrooms"),
    estimate: bool = typer.Option(False, "--estimate", help="Estimate the market rent when none is given"),
    no_advice: bool = typer.Option(False, "--no-advice", help="Skip the advisory service"),
    as_json: bool = typer.Option(False, "--json", help="Print the decision as JSON"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
) -> None:
    """Check whether a rent increase is allowed at renewal."""
    _setup_logging(verbose)
    cfg = load_config(config_path)
    advisor = _get_advisor(cfg, offline=no_advice)

    raw = {
        "current_rent": current_rent,
        "market_rent": market_rent,
        "has_valuation": valuation is not None,
        "valuation_amount": valuation,
        "expiry_date": expiry_date,
        "notice_date": notice_date,
        "tenant_flip_flop": tenant_flip_flop,
        "area": area,
        "unit_type": unit_type,
        "bedrooms": bedrooms,
    }
    facts = build_lease_facts(raw)
    if estimate and not facts.market_rent and facts.area:
        estimated = advisor.estimate_market_rent(facts.area, facts.unit_type, facts.bedrooms)
        if estimated:
            console.print(f"[dim]Estimated RERA Index rent: AED {estimated:,.0f}[/dim]")
            facts = build_lease_facts({**raw, "market_rent": estimated})

    engine = RentEligibilityEngine(config=cfg)
    decision = engine.evaluate(facts)

    if decision.insufficient_input:
        render_decision(console, facts, decision)
        raise typer.Exit(1)

    # Advice prompt embeds the decision, so it is requested afterwards
    advice = advisor.advise(facts, decision)

    if as_json:
        console.print_json(json.dumps({
            "facts": facts.to_dict(),
            "decision": decision.to_dict(),
            "advice": advice.to_dict(),
        }))
        return
    render_decision(console, facts, decision, advice)


@app.command("estimate")
def estimate_rent(
    area: str = typer.Argument(..., help="Community / area"),
    unit_type: str = typer.Option("Apartment", "--unit-type", "-u", help="Apartment or Villa"),
    bedrooms: str = typer.Option("1 Bedroom", "--bedrooms", "-b", help="e.g. Studio, 2 Bedrooms"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
) -> None:
    """Estimate the RERA Index annual rent for a unit."""
    _setup_logging(verbose)
    cfg = load_config(config_path)
    advisor = _get_advisor(cfg)
    estimated = advisor.estimate_market_rent(area, unit_type, bedrooms)
    if estimated is None:
        console.print("[yellow]No estimate available. Enter the RERA Index rent manually.[/yellow]")
        raise typer.Exit(1)
    console.print(f"[green]Estimated annual rent for {bedrooms} {unit_type} in {area}: AED {estimated:,.0f}[/green]")


if __name__ == "__main__":
    app()

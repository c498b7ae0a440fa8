"""Typer CLI interface for Furusato."""

import json
import logging
from decimal import Decimal
from pathlib import Path

import typer

from furusato.exceptions import TaxComputationError

BANNER = r"""
    _______
   /       \
  |  FURU-  |
  |  SATO   |
  |   ¥¥¥   |
   \_______/

  Furusato
  "Donate up to the limit, pay 2,000 yen."
"""

app = typer.Typer(
    name="furusato",
    help="Furusato — income tax, resident tax and hometown-tax donation limits.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log intermediate figures"),
) -> None:
    """Furusato — income tax, resident tax and hometown-tax donation limits."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    if ctx.invoked_subcommand is None:
        typer.echo(BANNER)
        typer.echo("Run `furusato estimate furusato.yml` to compute your donation limit.")
        raise typer.Exit()


def _build_rules(region: str, resident_tax_rate: float | None):
    from furusato.engines.rules import rules_for_region

    rules = rules_for_region(region)
    if resident_tax_rate is not None:
        rules = rules.with_resident_tax_rate(Decimal(str(resident_tax_rate)))
    return rules


def _load(input_path: Path, strict: bool):
    from furusato.ingestion.loader import load_input

    try:
        return load_input(input_path, strict=strict)
    except FileNotFoundError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


@app.command()
def estimate(
    input_path: Path = typer.Argument(
        Path("furusato.yml"), help="YAML or JSON file with the taxpayer's figures"
    ),
    region: str = typer.Option(
        "standard",
        "--region",
        "-r",
        help="Resident tax region: standard, kanagawa",
    ),
    resident_tax_rate: float | None = typer.Option(
        None,
        "--resident-tax-rate",
        help="Override the resident tax rate (e.g. 0.10025)",
    ),
    amounts: list[int] | None = typer.Option(
        None,
        "--amount",
        "-a",
        help="Also report savings for this donation amount (repeatable)",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Reject an unrecognized declarationMethod"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Compute income tax, resident tax and the hometown-tax donation limit."""
    from furusato.engines.estimator import FurusatoEstimator

    taxpayer = _load(input_path, strict)
    try:
        engine = FurusatoEstimator(_build_rules(region, resident_tax_rate))
        result = engine.estimate(taxpayer, amounts or [])
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(result.model_dump_json(indent=2, by_alias=True))
        return

    typer.echo("INPUT")
    typer.echo(
        json.dumps(
            taxpayer.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False
        )
    )
    typer.echo("")
    typer.echo("INCOME")
    typer.echo(f"  Earned Income Deduction:    ¥{result.earned_income_deduction:>12,}")
    typer.echo(f"  Total Income:               ¥{result.total_income:>12,}")
    typer.echo("")
    typer.echo("DEDUCTIONS")
    typer.echo(f"  Medical:                    ¥{result.medical_deduction:>12,}")
    typer.echo(f"  Blue Return:                ¥{result.filing_deduction:>12,}")
    typer.echo(f"  Social Insurance:           ¥{taxpayer.social_insurance:>12,}")
    typer.echo(f"  Dependents:                 ¥{result.dependent_deduction:>12,}")
    typer.echo(f"  Spouse:                     ¥{result.spouse_deduction:>12,}")
    typer.echo("")
    typer.echo("INCOME TAX")
    typer.echo(f"  Taxable Income:             ¥{result.taxable_income_for_income_tax:>12,}")
    typer.echo(f"  Marginal Rate:              {result.income_tax_rate:>13.0%}")
    typer.echo(f"  Income Tax (incl. surtax):  ¥{result.income_tax:>12,}")
    typer.echo("")
    typer.echo("RESIDENT TAX")
    typer.echo(f"  Taxable Income:             ¥{result.taxable_income_for_resident_tax:>12,}")
    typer.echo(f"  Rate:                       {result.resident_tax_rate:>13.3%}")
    typer.echo(f"  Income Levy:                ¥{result.resident_tax:>12,}")
    typer.echo("")
    typer.echo("HOMETOWN TAX")
    typer.echo(f"  Income Tax Ceiling:         ¥{result.ceilings.income_tax:>12,}")
    typer.echo(f"  Resident Basic Ceiling:     ¥{result.ceilings.resident_basic:>12,}")
    typer.echo(f"  Resident Special Ceiling:   ¥{result.ceilings.resident_special:>12,}")
    typer.echo("  ══════════════════════════════════════════")
    typer.echo(f"  DONATION LIMIT:             ¥{result.donation_limit:>12,}")
    typer.echo(f"  Income Tax Saving:          ¥{result.income_tax_saving:>12,}")
    typer.echo(f"  Resident Tax Saving:        ¥{result.resident_tax_saving:>12,}")

    if result.effects:
        typer.echo("")
        typer.echo("SCENARIOS")
        for effect in result.effects:
            typer.echo(
                f"  ¥{effect.amount:>10,}  saves ¥{effect.total_saving:>10,}"
                f"  (you pay ¥{effect.self_burden:,})"
            )

    if result.warnings:
        typer.echo("")
        typer.echo("WARNINGS:")
        for w in result.warnings:
            typer.echo(f"  - {w}")


@app.command()
def savings(
    input_path: Path = typer.Argument(..., help="YAML or JSON file with the taxpayer's figures"),
    amounts: list[int] = typer.Option(
        ..., "--amount", "-a", help="Donation amount to evaluate (repeatable)"
    ),
    region: str = typer.Option("standard", "--region", "-r", help="Resident tax region"),
    resident_tax_rate: float | None = typer.Option(
        None, "--resident-tax-rate", help="Override the resident tax rate"
    ),
) -> None:
    """Show income tax and resident tax savings for donation amounts."""
    from rich.console import Console
    from rich.table import Table

    from furusato.engines.donation import donation_effects, donation_limit

    taxpayer = _load(input_path, strict=False)
    if not taxpayer.has_recognized_method:
        typer.echo(
            f"Warning: unrecognized declaration method {taxpayer.declaration_method.raw!r}; "
            f"no blue-return deduction applied",
            err=True,
        )
    try:
        rules = _build_rules(region, resident_tax_rate)
        effects = donation_effects(taxpayer, amounts, rules)
        limit = donation_limit(taxpayer, rules)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    console = Console()
    tbl = Table(title="Donation Savings", show_header=True)
    tbl.add_column("Donation", justify="right", style="cyan")
    tbl.add_column("Income Tax", justify="right")
    tbl.add_column("Resident Tax", justify="right")
    tbl.add_column("Total", justify="right", style="green")
    tbl.add_column("You Pay", justify="right", style="yellow")
    for effect in effects:
        tbl.add_row(
            f"¥{effect.amount:,}" + (" *" if effect.amount > limit else ""),
            f"¥{effect.income_tax_saving:,}",
            f"¥{effect.resident_tax_saving:,}",
            f"¥{effect.total_saving:,}",
            f"¥{effect.self_burden:,}",
        )
    console.print(tbl)
    console.print(f"Donation limit: ¥{limit:,}")
    if any(effect.amount > limit for effect in effects):
        console.print("[yellow]* above the limit; actual savings will be lower than shown.[/yellow]")

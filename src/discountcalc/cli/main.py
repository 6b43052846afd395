"""
CLI presentation layer: quote, presets, share, interactive.
Configuration comes from DISCOUNTCALC_* environment variables.
"""
from __future__ import annotations

import asyncio
import json
import logging

import typer

from discountcalc.capabilities import CallbackShareTarget, CapabilitiesModule
from discountcalc.core import CalculatorApp, ConfigError, load_config_from_env, setup_logging
from discountcalc.pricing import pricing_module
from discountcalc.session import CalculatorSession, SessionUpdated

app = typer.Typer(help="Discount calculator: discounted price and price with GST.")

_INTERACTIVE_HELP = "a <amount> | d <discount> | p <preset> | s (share) | q (quit)"

# "-5" reaches the validator as an argument instead of failing as an unknown option
_RAW_ARGUMENTS = {"ignore_unknown_options": True}


@app.callback()
def _root(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


def _build_app() -> CalculatorApp:
    try:
        config = load_config_from_env()
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
    capabilities = CapabilitiesModule().in_memory().share_target(CallbackShareTarget(typer.echo))
    return CalculatorApp(config).register(pricing_module()).register(capabilities)


def _session_for(amount: str, discount: str) -> CalculatorSession:
    """Session with both fields typed in; rejected or incomplete input exits with code 1."""
    session = _build_app().session()
    session.edit_amount(amount)
    session.edit_discount(discount)
    if session.state.amount_raw != amount:
        typer.echo(f"Invalid amount: {amount!r}", err=True)
        raise typer.Exit(1)
    if session.state.discount_raw != discount:
        typer.echo(f"Invalid discount: {discount!r}", err=True)
        raise typer.Exit(1)
    if session.quote is None:
        typer.echo("No result: amount and discount must both be complete numbers in range", err=True)
        raise typer.Exit(1)
    return session


def _render(session: CalculatorSession) -> str:
    quote = session.quote
    if quote is None:
        return "(no result)"
    return f"Discounted price: {quote.discounted_display}\nwith GST: {quote.with_gst_display}"


@app.command(context_settings=_RAW_ARGUMENTS)
def quote(
    amount: str = typer.Argument(..., help="Base amount, e.g. 1000 or 250.5"),
    discount: str = typer.Argument(..., help="Discount percent, e.g. 50"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of text"),
) -> None:
    """Print the discounted price and the price with GST."""
    session = _session_for(amount, discount)
    if json_output:
        q = session.quote
        typer.echo(json.dumps({
            "amount": amount,
            "discount": discount,
            "discounted_price": q.discounted_display,
            "price_with_gst": q.with_gst_display,
        }))
    else:
        typer.echo(_render(session))


@app.command()
def presets() -> None:
    """List preset discount percentages."""
    calculator = _build_app()
    typer.echo(" ".join(f"{p}%" for p in calculator.config.preset_discounts))


@app.command(context_settings=_RAW_ARGUMENTS)
def share(
    amount: str = typer.Argument(..., help="Base amount"),
    discount: str = typer.Argument(..., help="Discount percent"),
) -> None:
    """Print the shareable summary line."""
    session = _session_for(amount, discount)
    if not asyncio.run(session.share()):
        typer.echo("Share failed", err=True)
        raise typer.Exit(1)


@app.command()
def interactive() -> None:
    """Prompt loop; the result is re-rendered after every change."""
    session = _build_app().session()
    session.events.subscribe(SessionUpdated, lambda event: typer.echo(_render(session)))
    typer.echo(_INTERACTIVE_HELP)
    while True:
        line = typer.prompt(">", default="", show_default=False).strip()
        cmd, _, arg = line.partition(" ")
        arg = arg.strip()
        if cmd == "q":
            break
        if cmd == "a":
            if session.edit_amount(arg).amount_raw != arg:
                typer.echo(f"Ignored: {arg!r} is not a number")
        elif cmd == "d":
            if session.edit_discount(arg).discount_raw != arg:
                typer.echo(f"Ignored: {arg!r} is not a number")
        elif cmd == "p":
            try:
                session.select_preset(int(arg))
            except ValueError:
                typer.echo(f"Presets: {', '.join(str(p) for p in session.presets)}")
        elif cmd == "s":
            if not asyncio.run(session.share()):
                typer.echo("(nothing to share)")
        elif cmd:
            typer.echo(_INTERACTIVE_HELP)


def main() -> None:
    """Entry point for the discountcalc console command."""
    app()


if __name__ == "__main__":
    main()

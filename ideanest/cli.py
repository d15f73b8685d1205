"""Click CLI entry point for IdeaNest."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import TYPE_CHECKING, NoReturn

import click
import redis

from ideanest.config import Settings
from ideanest.errors import IdeaValidationError, SignupError
from ideanest.logging import configure_logging
from ideanest.models.auxiliary import (
    AuxiliaryResult,
    CompetitorSet,
    MarketStrategy,
    RefinementSet,
)
from ideanest.models.idea import IdeaSubmission
from ideanest.notifications import NotificationQueue
from ideanest.session import SessionMode, SessionState
from ideanest.storage import IdeaStore

if TYPE_CHECKING:
    from ideanest.models.evaluation import EvaluationResult

_DOUBLE_LINE = "\u2550" * 62
_SINGLE_LINE = "\u2500" * 56


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """IdeaNest: VC-style evaluation of startup ideas."""
    ctx.ensure_object(dict)
    settings = Settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)
    ctx.obj["settings"] = settings


def _print_notifications(queue: NotificationQueue) -> None:
    for note in queue.drain():
        line = f"[{note.level.value}] {note.title}"
        if note.description:
            line += f" - {note.description}"
        click.echo(line, err=True)


def _read_description(description: str | None, description_file: str | None) -> str:
    if description_file:
        with open(description_file, encoding="utf-8") as fh:
            return fh.read()
    return description or ""


# ----------------------------------------------------------------------
# Rendering
# ----------------------------------------------------------------------


def _render_evaluation(title: str, result: EvaluationResult, mode: SessionMode) -> None:
    out = click.echo
    scores = result.display_scores

    out(f"\n  {_DOUBLE_LINE}")
    out(f"    EVALUATION \u2014 {title}")
    out(f"  {_DOUBLE_LINE}")
    if mode is SessionMode.SUBSTITUTE:
        out("  Demo Mode Active: evaluation service unavailable, showing sample data")

    out(f"\n  {'Overall:':<16s}{result.scores.average():.1f}/10")
    out(f"  {'Innovation:':<16s}{scores.innovation:.1f}")
    out(f"  {'Feasibility:':<16s}{scores.feasibility:.1f}")
    out(f"  {'Scalability:':<16s}{scores.scalability:.1f}")

    for heading, text in (
        ("Problem", result.problem_statement),
        ("Existing Solutions", result.existing_solutions),
        ("Proposed Solution", result.proposed_solution),
        ("Market Potential", result.market_potential),
        ("Business Model", result.business_model),
    ):
        out(f"\n  {heading}")
        out(f"  {_SINGLE_LINE}")
        out(f"    {text}")

    swot = result.swot_analysis
    out("\n  SWOT")
    out(f"  {_SINGLE_LINE}")
    for heading, items in (
        ("Strengths", swot.strengths),
        ("Weaknesses", swot.weaknesses),
        ("Opportunities", swot.opportunities),
        ("Threats", swot.threats),
    ):
        out(f"  {heading}")
        for item in items:
            out(f"    \u2022 {item}")

    for heading, items in (
        ("Pros", result.pros),
        ("Cons", result.cons),
        ("Improvements", result.improvements),
    ):
        out(f"\n  {heading}")
        for item in items:
            out(f"    \u2022 {item}")

    out("\n  Pitch")
    out(f"  {_SINGLE_LINE}")
    out(f"    {result.pitch_summary}")


def _render_auxiliary(result: AuxiliaryResult) -> None:
    out = click.echo
    data = result.data
    suffix = " (demo)" if result.mode is SessionMode.SUBSTITUTE else ""

    if isinstance(data, RefinementSet):
        out(f"\n  REFINEMENTS{suffix}")
        out(f"  {_SINGLE_LINE}")
        for i, ref in enumerate(data.refinements, 1):
            out(f"  {i}. {ref.title}")
            out(f"     {ref.description}")
            out(f"     Why: {ref.reasoning}")
    elif isinstance(data, CompetitorSet):
        out(f"\n  COMPETITORS{suffix}")
        out(f"  {_SINGLE_LINE}")
        for comp in data.competitors:
            facts = ", ".join(
                f"{label} {value}"
                for label, value in (
                    ("pricing", comp.pricing),
                    ("share", comp.market_share),
                    ("founded", comp.founded),
                )
                if value
            )
            out(f"  {comp.name}" + (f" ({facts})" if facts else ""))
            out(f"    {comp.description}")
            for feature in comp.key_features:
                out(f"    \u2022 {feature}")
            out(f"    Differentiator: {comp.differentiator}")
    elif isinstance(data, MarketStrategy):
        out(f"\n  MARKET STRATEGY{suffix}")
        out(f"  {_SINGLE_LINE}")
        out(f"  {'Primary:':<16s}{data.target_audience.primary}")
        out(f"  {'Secondary:':<16s}{data.target_audience.secondary}")
        for demo in data.target_audience.demographics:
            out(f"    \u2022 {demo}")
        gtm = data.go_to_market_strategy
        for i, phase in enumerate((gtm.phase1, gtm.phase2, gtm.phase3), 1):
            out(f"  Phase {i}: {phase}")
        rev = data.revenue_model
        out(f"  {'Revenue:':<16s}{rev.primary}")
        out(f"  {'Secondary rev.:':<16s}{rev.secondary}")
        out(f"  {'Pricing:':<16s}{rev.pricing}")
        out("  Channels")
        for channel in data.marketing_channels:
            out(f"    \u2022 {channel}")


# ----------------------------------------------------------------------
# Commands
# ----------------------------------------------------------------------


async def _run_evaluate(
    settings: Settings,
    idea: IdeaSubmission,
    followups: list[str],
    notifications: NotificationQueue,
) -> tuple[EvaluationResult, SessionMode, list[AuxiliaryResult]]:
    from ideanest.client import EvaluationServiceClient
    from ideanest.orchestrator import IdeaOrchestrator

    async with EvaluationServiceClient.from_settings(settings) as service:
        orchestrator = IdeaOrchestrator(
            service=service,
            session=SessionState(),
            notifications=notifications,
            settings=settings,
            store=IdeaStore.from_settings(settings),
        )
        result, mode = await orchestrator.evaluate(idea.title, idea.description)
        extras: list[AuxiliaryResult] = []
        for name in followups:
            extras.append(await getattr(orchestrator, name)())
        await orchestrator.flush()
        return result, mode, extras


@cli.command()
@click.argument("title")
@click.option("-d", "--description", help="Idea description (at least 150 characters)")
@click.option(
    "-f",
    "--description-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read the description from a file",
)
@click.option("--refine", is_flag=True, help="Also suggest refinements")
@click.option("--competitors", is_flag=True, help="Also analyze competitors")
@click.option("--market-strategy", is_flag=True, help="Also draft a market strategy")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def evaluate(
    ctx: click.Context,
    title: str,
    description: str | None,
    description_file: str | None,
    refine: bool,
    competitors: bool,
    market_strategy: bool,
    as_json: bool,
) -> None:
    """Evaluate a startup idea like a VC analyst would."""
    settings = ctx.obj["settings"]
    try:
        idea = IdeaSubmission.create(title, _read_description(description, description_file))
    except IdeaValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    followups = [
        name
        for name, wanted in (
            ("refine", refine),
            ("competitors", competitors),
            ("market_strategy", market_strategy),
        )
        if wanted
    ]
    notifications = NotificationQueue()
    result, mode, extras = asyncio.run(_run_evaluate(settings, idea, followups, notifications))

    if as_json:
        payload: dict[str, object] = {
            "title": idea.title,
            "mode": mode.value,
            "evaluation": result.to_wire(),
            "displayScores": result.display_scores.to_wire(),
        }
        for extra in extras:
            payload[extra.kind.value] = extra.data.to_wire()
        click.echo(json.dumps(payload, indent=2))
    else:
        _render_evaluation(idea.title, result, mode)
        for extra in extras:
            _render_auxiliary(extra)
    _print_notifications(notifications)


@cli.command()
@click.option("--email", required=True, help="Account email")
@click.option("--name", required=True, help="Display name")
@click.password_option(help="Account password (at least 6 characters)")
@click.pass_context
def signup(ctx: click.Context, email: str, name: str, password: str) -> None:
    """Create a new account."""
    from ideanest.auth import signup as do_signup
    from ideanest.client import EvaluationServiceClient

    settings = ctx.obj["settings"]

    async def _run() -> str:
        async with EvaluationServiceClient.from_settings(settings) as service:
            user = await do_signup(service, email=email, password=password, name=name)
            return user.id

    try:
        user_id = asyncio.run(_run())
    except SignupError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Account created successfully: {user_id}")


def _require_store(settings: Settings) -> IdeaStore:
    store = IdeaStore.from_settings(settings)
    if store is None:
        click.echo("Error: no idea store configured (set IDEANEST_REDIS_URL)", err=True)
        sys.exit(1)
    return store


def _store_unavailable(exc: redis.RedisError) -> NoReturn:
    click.echo(f"Error: idea store unavailable ({exc})", err=True)
    sys.exit(1)


@cli.command()
@click.pass_context
def ideas(ctx: click.Context) -> None:
    """List stored idea ids."""
    store = _require_store(ctx.obj["settings"])
    try:
        ids = store.list_ids()
    except redis.RedisError as exc:
        _store_unavailable(exc)
    if not ids:
        click.echo("No stored ideas.")
        return
    for idea_id in ids:
        click.echo(idea_id)


@cli.command()
@click.argument("idea_id")
@click.option("--json", "as_json", is_flag=True, help="Print the stored record as JSON")
@click.pass_context
def show(ctx: click.Context, idea_id: str, as_json: bool) -> None:
    """Show a stored evaluation."""
    store = _require_store(ctx.obj["settings"])
    try:
        record = store.get(idea_id)
    except redis.RedisError as exc:
        _store_unavailable(exc)
    if record is None:
        click.echo(f"Idea {idea_id} not found.", err=True)
        sys.exit(1)
    if as_json:
        click.echo(json.dumps(record.model_dump(mode="json", by_alias=True), indent=2))
    else:
        _render_evaluation(record.title, record.evaluation, SessionMode.LIVE)


if __name__ == "__main__":
    cli()

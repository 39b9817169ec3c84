"""Game lookup commands."""

import click

from ..api.errors import ApiError
from ..helpers.box_score import box_score_frame, calculate_player_stats, calculate_team_totals
from ..monitoring import capture_errors


@click.group()
@click.pass_context
def game(ctx):
    """Game lookup commands."""
    pass


@game.command()
@click.argument('game_id')
@click.pass_context
@capture_errors(action="game_show")
def show(ctx, game_id):
    """Show a game's matchup, status and score."""
    from .main import get_client

    client = get_client(ctx)
    try:
        result = client.get_game(game_id)
    except ApiError as e:
        raise click.ClickException(e.message)

    click.echo(result.matchup)
    click.echo(f"Date:   {result.date}")
    click.echo(f"Status: {result.status.value}")
    click.echo(f"Score:  {result.home_score} - {result.away_score}")
    if result.roster:
        click.echo("Roster:")
        for member in result.roster:
            click.echo(f"  {member.label}")


@game.command('box-score')
@click.argument('game_id')
@click.option('--limit', default=100, type=int, help='Maximum events to fetch')
@click.pass_context
@capture_errors(action="box_score")
def box_score(ctx, game_id, limit):
    """Print the box score computed from a game's events."""
    from .main import get_client

    client = get_client(ctx)
    try:
        result = client.get_game(game_id)
        events = client.list_events(game_id, limit=limit)
    except ApiError as e:
        raise click.ClickException(e.message)

    players = calculate_player_stats(events, roster=result.roster)

    click.echo("=" * 60)
    click.echo(f"{result.matchup}  {result.home_score}-{result.away_score}")
    click.echo("=" * 60)

    if not players:
        click.echo(click.style("No events recorded for this game.", fg='yellow'))
        return

    totals = calculate_team_totals(result.team_name or "Team", players)
    frame = box_score_frame(players, totals)
    click.echo(frame.to_string(index=False))

"""Interactive live stat tracking."""

import shlex

import click

from ..models.event import EventType
from ..tracking.live_game import LiveGameTracker, StatType
from ..tracking.results import Result

HELP_TEXT = """Commands:
  players                 list the roster
  select <player>         select by id, jersey number or name
  shot <2|3> <made|miss>  record a shot for the selected player
  oreb | dreb | ast | stl | blk
  opp +<n> | opp -1       adjust the opponent score
  undo                    undo the last event (while the window is open)
  status                  score, hot players and recent events
  end                     finish the game
  quit                    leave without finishing"""

STAT_COMMANDS = {
    'oreb': StatType.OREB,
    'dreb': StatType.DREB,
    'ast': StatType.AST,
    'stl': StatType.STL,
    'blk': StatType.BLK,
}


def _echo_result(result: Result, success_text: str = "") -> None:
    if result.is_success:
        text = success_text or result.message
        if text:
            click.echo(click.style(text, fg='green'))
    elif result.is_skipped:
        click.echo(click.style(result.message, fg='yellow'))
    else:
        click.echo(click.style(f"Error: {result.message}", fg='red'))


def _echo_status(tracker: LiveGameTracker) -> None:
    session = tracker.session
    click.echo(f"Score: {tracker.home_score} - {tracker.opponent_score}")
    click.echo(f"Server events: {len(tracker.server_events)}")
    if session.selected_player_id:
        click.echo(f"Selected: {session.selected_player_name or session.selected_player_id}")
    if session.hot_players:
        hot = ", ".join(f"{pid} ({streak})" for pid, streak in session.hot_players.items())
        click.echo(click.style(f"Hot: {hot}", fg='red'))
    if session.can_undo:
        click.echo(f"Undo available for {tracker.undo_seconds_remaining:.0f}s: {session.last_event.describe()}")
    for event in session.local_events[:5]:
        click.echo(f"  {event.describe()}")


def handle_command(tracker: LiveGameTracker, line: str) -> bool:
    """
    Run one prompt line against the tracker.

    Returns:
        False when the session should end
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg='red'))
        return True
    if not parts:
        return True

    command, args = parts[0].lower(), parts[1:]

    if command in ('quit', 'exit'):
        tracker.leave()
        return False

    if command == 'help':
        click.echo(HELP_TEXT)

    elif command == 'players':
        for member in tracker.game.roster:
            click.echo(f"  {member.label} ({member.player_id})")

    elif command == 'select':
        if not args:
            tracker.select_player(None)
            click.echo("Selection cleared")
        else:
            member = tracker.game.find_player(" ".join(args))
            if member is None:
                click.echo(click.style(f"No player matching '{' '.join(args)}'", fg='red'))
            else:
                tracker.select_player(member.player_id, member.name)
                click.echo(f"Selected {member.label}")

    elif command == 'shot':
        if len(args) != 2 or args[0] not in ('2', '3') or args[1] not in ('made', 'miss'):
            click.echo("Usage: shot <2|3> <made|miss>")
        else:
            result = tracker.record_shot(points=int(args[0]), made=args[1] == 'made')
            _echo_recorded(tracker, result)

    elif command in STAT_COMMANDS:
        result = tracker.record_stat(STAT_COMMANDS[command])
        _echo_recorded(tracker, result)

    elif command == 'opp':
        if args == ['-1']:
            _echo_result(tracker.subtract_opponent_point())
        elif len(args) == 1 and args[0].lstrip('+').isdigit():
            _echo_result(tracker.add_opponent_points(int(args[0].lstrip('+'))))
        else:
            click.echo("Usage: opp +<n> | opp -1")
        click.echo(f"Score: {tracker.home_score} - {tracker.opponent_score}")

    elif command == 'undo':
        _echo_result(tracker.undo())

    elif command == 'status':
        _echo_status(tracker)

    elif command == 'end':
        if click.confirm("Are you sure you want to end this game?", default=False):
            result = tracker.end_game()
            _echo_result(result, f"Final: {tracker.home_score} - {tracker.opponent_score}")
            if result.is_success:
                return False

    else:
        click.echo(f"Unknown command '{command}'. Type 'help' for commands.")

    return True


def _echo_recorded(tracker: LiveGameTracker, result: Result) -> None:
    if not result.is_success:
        _echo_result(result)
        return
    event = result.data
    click.echo(click.style(f"{event.describe()}  (undo within {tracker.config.undo_seconds:.0f}s)", fg='green'))
    if event.event_type == EventType.SHOT:
        click.echo(f"Score: {tracker.home_score} - {tracker.opponent_score}")
    if tracker.session.last_milestone:
        click.echo(click.style(tracker.session.last_milestone, fg='magenta', bold=True))


@click.command()
@click.argument('game_id')
@click.pass_context
def track(ctx, game_id):
    """Track live stats for an in-progress game."""
    from .main import get_client

    config = ctx.obj['config']
    tracker = LiveGameTracker(get_client(ctx), game_id, config=config.tracking)

    result = tracker.start()
    if not result.is_success:
        raise click.ClickException(result.message)

    click.echo("=" * 60)
    click.echo(f"Tracking {tracker.game.matchup}")
    click.echo("=" * 60)
    click.echo("Type 'help' for commands.")

    running = True
    while running:
        try:
            line = click.prompt("track", default="", show_default=False)
        except click.Abort:
            tracker.leave()
            break
        # Undo windows that ran out while waiting for input close now
        tracker.tick()
        running = handle_command(tracker, line)

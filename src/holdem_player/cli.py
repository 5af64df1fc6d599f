"""CLI entry point for holdem-player."""

from __future__ import annotations

import logging

import click

from holdem_player.game.actions import Action
from holdem_player.game.card import Card, parse_cards
from holdem_player.game.player import Player
from holdem_player.game.rules import DEFAULT_BLINDS, DEFAULT_STARTING_CASH, BlindStructure


def _cards_option(value: str) -> list[Card]:
    try:
        return parse_cards(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _echo_player(title: str, player: Player, include_cards: bool) -> None:
    data = player.to_dict(include_cards=include_cards)
    click.echo(f"{title}:")
    for key, value in data.items():
        if key == "cards":
            value = " ".join(value) or "-"
        click.echo(f"  {key:<9} {value}")


def _echo_blind(player: Player) -> None:
    if player.action is not None and player.action.is_blind:
        click.echo(f"{player} {player.action.verb}: cash {player.cash}, bet {player.bet}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log player state changes")
def cli(verbose: bool) -> None:
    """Hold'em player state: blinds, cash, hole cards and public views."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
def actions() -> None:
    """List the actions a player can record."""
    for action in Action:
        click.echo(f"  {action.value:<12} {action.label}")


@cli.command()
@click.option("--name", default="Alice", help="Player name")
@click.option("--cash", default=DEFAULT_STARTING_CASH, type=click.IntRange(min=0), help="Starting cash")
@click.option("--small-blind", default=DEFAULT_BLINDS.small_blind, help="Small blind")
@click.option("--big-blind", default=DEFAULT_BLINDS.big_blind, help="Big blind")
@click.option("--cards", default="As Kd", help="Hole cards, e.g. 'As Kd'")
def demo(name: str, cash: int, small_blind: int, big_blind: int, cards: str) -> None:
    """Walk one player through two hands: small blind and an all-in, then the big blind."""
    try:
        blinds = BlindStructure(small_blind=small_blind, big_blind=big_blind)
        player = Player(name, cash)
        hole_cards = _cards_option(cards)
        player.set_cards(hole_cards)
        player.post_small_blind(blinds.small_blind)
        _echo_blind(player)
        player.pay_cash(player.cash)
        click.echo(f"{player} pushes the rest: cash {player.cash}, all-in {player.is_all_in()}")
        player.reset_bet()
    except (ValueError, RuntimeError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Next round, recorded action: {player.action}")
    _echo_player("Private view", player, include_cards=True)
    _echo_player("Public view", player.public_clone(), include_cards=True)

    try:
        player.win(cash * 2)
        click.echo(f"{player} wins {cash * 2}")
        player.reset_hand()
        player.set_cards(hole_cards)
        player.post_big_blind(blinds.big_blind)
        _echo_blind(player)
    except (ValueError, RuntimeError) as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("name")
@click.option("--cash", default=DEFAULT_STARTING_CASH, type=click.IntRange(min=0), help="Current cash")
@click.option("--bet", default=0, type=click.IntRange(min=0), help="Current bet")
@click.option("--cards", default="", help="Hole cards, e.g. 'Qh Qc'")
def clone(name: str, cash: int, bet: int, cards: str) -> None:
    """Show what opponents see of a player."""
    try:
        player = Player(name, cash)
        player.set_cards(_cards_option(cards))
        player.bet = bet
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    _echo_player("Public view", player.public_clone(), include_cards=True)

from collections.abc import Mapping, Sequence
from typing import Protocol
from uuid import uuid4

from pydantic import BaseModel

from cardleague.config import config
from cardleague.models.db.game import Game
from cardleague.models.db.team import Team
from cardleague.utils.id_types import TeamId
from cardleague.utils.logging import logger


class DeliveryReceipt(BaseModel):
    recipient: str
    success: bool
    message_id: str | None = None
    error: str | None = None


class NotificationSender(Protocol):
    async def send(self, recipients: Sequence[str], message: str) -> list[DeliveryReceipt]: ...


class LoggingSmsSender:
    """Stand-in SMS gateway that logs every message instead of delivering it."""

    def __init__(self, from_number: str | None = None) -> None:
        self.from_number = from_number or config.sms_sender_number

    async def send(self, recipients: Sequence[str], message: str) -> list[DeliveryReceipt]:
        receipts: list[DeliveryReceipt] = []
        for recipient in recipients:
            if recipient.strip() == "":
                receipts.append(
                    DeliveryReceipt(recipient=recipient, success=False, error="No phone number")
                )
                continue

            logger.info(f"SMS from {self.from_number} to {recipient}: {message}")
            receipts.append(
                DeliveryReceipt(recipient=recipient, success=True, message_id=f"sms-{uuid4().hex}")
            )
        return receipts


def get_notification_sender() -> NotificationSender:
    return LoggingSmsSender()


def build_next_match_message(
    loser: Team, winner: Team, round_: int, next_game: Game | None, teams: Mapping[TeamId, Team]
) -> str:
    message = (
        f"Tough loss, {loser.name}. Please confirm the final result of round {round_} "
        f"against {winner.name}."
    )
    if next_game is None:
        return message

    opponent_id = next_game.opponent_of(loser.id)
    opponent = teams.get(opponent_id) if opponent_id is not None else None
    table = (
        f"table {next_game.table_number}" if next_game.table_number is not None else "your table"
    )
    opponent_name = opponent.name if opponent is not None else "your next opponent"
    return f"{message} Then proceed to {table} to play {opponent_name} in round {next_game.round}."


async def notify_losing_team(
    sender: NotificationSender,
    game: Game,
    teams: Sequence[Team],
    next_game: Game | None,
) -> list[DeliveryReceipt]:
    loser_id = game.get_loser_id()
    winner_id = game.get_winner_id()
    teams_by_id = {team.id: team for team in teams}
    if loser_id is None or winner_id is None:
        return []

    loser = teams_by_id.get(loser_id)
    winner = teams_by_id.get(winner_id)
    if loser is None or winner is None:
        return []

    message = build_next_match_message(loser, winner, game.round, next_game, teams_by_id)
    receipts = await sender.send([loser.phone_number or ""], message)
    for receipt in receipts:
        if not receipt.success:
            logger.warning(
                f"Could not notify team {loser.id} ({receipt.recipient}): {receipt.error}"
            )
    return receipts

from typing import NewType

TournamentId = NewType("TournamentId", str)
TeamId = NewType("TeamId", str)
GameId = NewType("GameId", str)

from heliclockter import datetime_utc

from cardleague.models.db.game import BostonSide, Game
from cardleague.models.db.team import Team
from cardleague.utils.id_types import GameId, TeamId, TournamentId

DUMMY_MOCK_TIME = datetime_utc(2024, 1, 11, 4, 32, 11, tzinfo=datetime_utc.now().tzinfo)

DUMMY_TOURNAMENT_ID = TournamentId("league-2024")

DUMMY_TEAM1 = Team(
    id=TeamId("T1"),
    tournament_id=DUMMY_TOURNAMENT_ID,
    team_number=1,
    name="Aces High",
    city="Indianapolis",
    phone_number="3175550101",
    created=DUMMY_MOCK_TIME,
)

DUMMY_TEAM2 = Team(
    id=TeamId("T2"),
    tournament_id=DUMMY_TOURNAMENT_ID,
    team_number=2,
    name="Bid Busters",
    city="Carmel",
    phone_number="3175550102",
    created=DUMMY_MOCK_TIME,
)

DUMMY_TEAM3 = Team(
    id=TeamId("T3"),
    tournament_id=DUMMY_TOURNAMENT_ID,
    team_number=3,
    name="Trump Cards",
    city="Fishers",
    phone_number="3175550103",
    created=DUMMY_MOCK_TIME,
)

DUMMY_TEAM4 = Team(
    id=TeamId("T4"),
    tournament_id=DUMMY_TOURNAMENT_ID,
    team_number=4,
    name="Euchre Express",
    city="Zionsville",
    phone_number=None,
    created=DUMMY_MOCK_TIME,
)

DUMMY_TEAMS = [DUMMY_TEAM1, DUMMY_TEAM2, DUMMY_TEAM3, DUMMY_TEAM4]

DUMMY_GAME1 = Game(
    id=GameId("G1"),
    tournament_id=DUMMY_TOURNAMENT_ID,
    round=1,
    table_number=1,
    team1_id=DUMMY_TEAM1.id,
    team2_id=DUMMY_TEAM2.id,
    score1=10,
    score2=5,
    hands1=3,
    hands2=1,
    boston=BostonSide.TEAM1,
    confirmed=True,
    submitted_by=DUMMY_TEAM1.id,
    confirmed_by=DUMMY_TEAM2.id,
    created=DUMMY_MOCK_TIME,
)

DUMMY_GAME2 = Game(
    id=GameId("G2"),
    tournament_id=DUMMY_TOURNAMENT_ID,
    round=1,
    table_number=2,
    team1_id=DUMMY_TEAM3.id,
    team2_id=DUMMY_TEAM4.id,
    score1=8,
    score2=7,
    hands1=2,
    hands2=2,
    confirmed=True,
    submitted_by=DUMMY_TEAM4.id,
    confirmed_by=DUMMY_TEAM3.id,
    created=DUMMY_MOCK_TIME,
)

DUMMY_GAME3 = Game(
    id=GameId("G3"),
    tournament_id=DUMMY_TOURNAMENT_ID,
    round=2,
    table_number=1,
    team1_id=DUMMY_TEAM1.id,
    team2_id=DUMMY_TEAM3.id,
    confirmed=False,
    created=DUMMY_MOCK_TIME,
)

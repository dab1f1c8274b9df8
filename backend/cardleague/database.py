from databases import Database

from cardleague.config import config

database = Database(config.pg_dsn)

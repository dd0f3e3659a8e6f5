# itemboard/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

DB_URL = "sqlite:///db.sqlite"  # file in project root


def get_engine(url: str = DB_URL, echo: bool = False) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
        # one shared connection, otherwise every checkout sees a fresh empty db
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(url, echo=echo, pool_pre_ping=True)

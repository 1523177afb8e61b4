# app/data/dialect.py
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert_insert(db: Session, model):
    """
    INSERT z obsluga ON CONFLICT dla aktualnego silnika bazy.

    Oba dialekty daja on_conflict_do_nothing / on_conflict_do_update
    i atrybut `excluded`, wiec repozytoria nie musza wiedziec, na czym stoja.
    """
    dialect = db.get_bind().dialect.name
    try:
        insert = _INSERTS[dialect]
    except KeyError:
        raise NotImplementedError(f"ON CONFLICT is not supported for dialect {dialect!r}") from None
    return insert(model)

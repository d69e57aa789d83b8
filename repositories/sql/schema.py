from sqlalchemy import Column, Engine, Integer, MetaData, String, Table

metadata = MetaData()

employee_table = Table(
    'employee',
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('name', String(255), nullable=False),
    Column('role', String(255), nullable=False),
    # SQLite: AUTOINCREMENT never reuses an id, not even one chosen by the caller
    sqlite_autoincrement=True,
)


def create_schema(engine: Engine) -> None:
    metadata.create_all(engine)

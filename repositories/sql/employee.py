import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Connection, Engine, delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models import Employee
from repositories import EmployeeAlreadyExistsError, EmployeeNotFoundError, EmployeeRepository, RepositoryError

from .schema import employee_table

logger = logging.getLogger(__name__)

# Ids are stored as signed 64-bit integers
MAX_EMPLOYEE_ID = 2**63 - 1


def storable_id(employee_id: int) -> bool:
    return 0 <= employee_id <= MAX_EMPLOYEE_ID


class SqlEmployeeRepository(EmployeeRepository):
    """Employee store backed by a relational database.

    Each operation runs in its own transaction, and every write is a single
    statement, so concurrent writers on the same id never mix fields. Ids
    that do not fit the id column can never be stored, so lookups, updates
    and deletes treat them as absent.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        try:
            with self.engine.begin() as connection:
                yield connection
        except RepositoryError:
            raise
        except SQLAlchemyError as err:
            logger.error('Database error: %s', err)
            raise RepositoryError('Database operation failed') from err

    def create(self, name: str, role: str) -> Employee:
        with self.transaction() as conn:
            result = conn.execute(insert(employee_table).values(name=name, role=role))
            employee_id = int(result.inserted_primary_key[0])

        logger.debug('Created employee %d', employee_id)
        return Employee(id=employee_id, name=name, role=role)

    def create_with_id(self, employee_id: int, name: str, role: str) -> Employee:
        if not storable_id(employee_id):
            raise RepositoryError(f'Employee id {employee_id} is out of range')

        with self.transaction() as conn:
            try:
                conn.execute(insert(employee_table).values(id=employee_id, name=name, role=role))
            except IntegrityError as err:
                raise EmployeeAlreadyExistsError(employee_id) from err

        logger.debug('Created employee %d with explicit id', employee_id)
        return Employee(id=employee_id, name=name, role=role)

    def find_by_id(self, employee_id: int) -> Employee | None:
        if not storable_id(employee_id):
            return None

        with self.transaction() as conn:
            row = conn.execute(select(employee_table).where(employee_table.c.id == employee_id)).fetchone()

        if row is None:
            return None

        return Employee(id=row.id, name=row.name, role=row.role)

    def find_all(self) -> list[Employee]:
        with self.transaction() as conn:
            rows = conn.execute(select(employee_table)).fetchall()

        return [Employee(id=row.id, name=row.name, role=row.role) for row in rows]

    def update(self, employee_id: int, name: str, role: str) -> Employee:
        if not storable_id(employee_id):
            raise EmployeeNotFoundError(employee_id)

        with self.transaction() as conn:
            result = conn.execute(
                update(employee_table).where(employee_table.c.id == employee_id).values(name=name, role=role)
            )
            if result.rowcount == 0:
                raise EmployeeNotFoundError(employee_id)

        logger.debug('Updated employee %d', employee_id)
        return Employee(id=employee_id, name=name, role=role)

    def delete_by_id(self, employee_id: int) -> None:
        if not storable_id(employee_id):
            return

        with self.transaction() as conn:
            conn.execute(delete(employee_table).where(employee_table.c.id == employee_id))

        logger.debug('Deleted employee %d', employee_id)

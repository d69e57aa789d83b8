from dependency_injector import containers, providers

from repositories.memory import MemoryEmployeeRepository
from repositories.rest import RestEmployeeRepository
from repositories.sql import SqlEmployeeRepository, make_engine


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(packages=['blueprints'])

    config = providers.Configuration(
        default={
            'store': 'memory',
            'db': {'url': 'sqlite://'},
        }
    )

    db_engine = providers.Singleton(make_engine, config.db.url)

    employee_repo = providers.Selector(
        config.store,
        memory=providers.Singleton(MemoryEmployeeRepository),
        sql=providers.Singleton(SqlEmployeeRepository, db_engine),
        rest=providers.Singleton(RestEmployeeRepository, config.svc.employee.url),
    )

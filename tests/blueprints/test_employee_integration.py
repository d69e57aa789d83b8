import json
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize
from werkzeug.test import TestResponse

from app import create_app
from repositories import EmployeeRepository
from repositories.memory import MemoryEmployeeRepository
from repositories.sql import SqlEmployeeRepository, create_schema, make_engine


class TestEmployeeIntegration(ParametrizedTestCase):
    """Exercise the API end to end against real stores."""

    STORES = [('memory',), ('sql',)]

    def setUp(self) -> None:
        self.faker = Faker()
        self.app = create_app()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.engine = make_engine(f'sqlite:///{os.path.join(self.tmp_dir.name, "employees.db")}')
        create_schema(self.engine)

    def tearDown(self) -> None:
        self.app.container.employee_repo.reset_override()
        self.engine.dispose()
        self.tmp_dir.cleanup()

    def use_store(self, store: str) -> EmployeeRepository:
        repo: EmployeeRepository
        if store == 'sql':
            repo = SqlEmployeeRepository(self.engine)
        else:
            repo = MemoryEmployeeRepository()

        self.app.container.employee_repo.override(repo)
        return repo

    def post(self, body: dict[str, Any]) -> TestResponse:
        return self.app.test_client().post('/employees', json=body)

    def put(self, employee_id: int, body: dict[str, Any]) -> TestResponse:
        return self.app.test_client().put(f'/employees/{employee_id}', json=body)

    @parametrize('store', STORES)
    def test_create_and_get(self, store: str) -> None:
        repo = self.use_store(store)

        resp = self.post({'name': 'John Doe', 'role': 'Developer'})

        self.assertEqual(resp.status_code, 201)
        created = json.loads(resp.get_data())
        self.assertIsNotNone(created['id'])
        self.assertEqual((created['name'], created['role']), ('John Doe', 'Developer'))
        self.assertEqual(resp.headers['Location'], f'http://localhost/employees/{created["id"]}')

        resp = self.app.test_client().get(f'/employees/{created["id"]}')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data()), created)

        stored = repo.find_by_id(created['id'])
        self.assertEqual((stored.name, stored.role), ('John Doe', 'Developer'))  # type: ignore[union-attr]

    @parametrize('store', STORES)
    def test_list(self, store: str) -> None:
        self.use_store(store)
        for name, role in [('Alice', 'Manager'), ('Bob', 'Developer'), ('Charlie', 'Designer')]:
            self.post({'name': name, 'role': role})

        resp = self.app.test_client().get('/employees')

        self.assertEqual(resp.status_code, 200)
        employees = json.loads(resp.get_data())
        self.assertCountEqual([e['name'] for e in employees], ['Alice', 'Bob', 'Charlie'])
        self.assertCountEqual([e['role'] for e in employees], ['Manager', 'Developer', 'Designer'])

    @parametrize('store', STORES)
    def test_get_not_found(self, store: str) -> None:
        self.use_store(store)

        resp = self.app.test_client().get('/employees/999')

        self.assertEqual(resp.status_code, 404)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data['status'], 404)
        self.assertEqual(resp_data['error'], 'Not Found')
        self.assertEqual(resp_data['path'], '/employees/999')

    @parametrize('store', STORES)
    def test_invalid_body_leaves_store_unchanged(self, store: str) -> None:
        repo = self.use_store(store)
        self.post({'name': 'Mary', 'role': 'Manager'})

        resp = self.post({'name': '', 'role': ''})

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(len(repo.find_all()), 1)

    @parametrize('store', STORES)
    def test_put_updates_existing(self, store: str) -> None:
        repo = self.use_store(store)
        employee_id = json.loads(self.post({'name': 'Eve', 'role': 'Developer'}).get_data())['id']

        resp = self.put(employee_id, {'name': 'Eve Smith', 'role': 'Senior Developer'})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            json.loads(resp.get_data()),
            {'id': employee_id, 'name': 'Eve Smith', 'role': 'Senior Developer'},
        )
        self.assertEqual(resp.headers['Content-Location'], f'http://localhost/employees/{employee_id}')
        stored = repo.find_by_id(employee_id)
        self.assertEqual((stored.name, stored.role), ('Eve Smith', 'Senior Developer'))  # type: ignore[union-attr]

    @parametrize('store', STORES)
    def test_put_creates_with_path_id(self, store: str) -> None:
        self.use_store(store)

        first = self.put(1234, {'name': 'New Employee', 'role': 'Analyst'})
        second = self.put(1234, {'name': 'New Employee', 'role': 'Analyst'})

        self.assertEqual(first.status_code, 201)
        self.assertEqual(second.status_code, 200)
        expected = {'id': 1234, 'name': 'New Employee', 'role': 'Analyst'}
        self.assertEqual(json.loads(first.get_data()), expected)
        self.assertEqual(json.loads(second.get_data()), expected)

        resp = self.app.test_client().get('/employees/1234')
        self.assertEqual(json.loads(resp.get_data()), expected)

        # Server-assigned ids keep clear of the caller-chosen one
        created = json.loads(self.post({'name': 'Next', 'role': 'Developer'}).get_data())
        self.assertNotEqual(created['id'], 1234)

    @parametrize('store', STORES)
    def test_delete(self, store: str) -> None:
        repo = self.use_store(store)
        names = ['Tom Cat', 'Jerry', 'Spike', 'Tyke']
        ids = {name: json.loads(self.post({'name': name, 'role': 'Cartoon'}).get_data())['id'] for name in names}

        first = self.app.test_client().delete(f'/employees/{ids["Jerry"]}')
        second = self.app.test_client().delete(f'/employees/{ids["Jerry"]}')

        self.assertEqual(first.status_code, 204)
        self.assertEqual(second.status_code, 204)
        self.assertIsNone(repo.find_by_id(ids['Jerry']))
        self.assertCountEqual([e.name for e in repo.find_all()], ['Tom Cat', 'Spike', 'Tyke'])

        resp = self.app.test_client().get(f'/employees/{ids["Jerry"]}')
        self.assertEqual(resp.status_code, 404)

    @parametrize('store', STORES)
    def test_special_characters(self, store: str) -> None:
        self.use_store(store)

        for name in ['José García', '李明', "O'Brien", 'Zoë Müller-Łukasz']:
            resp = self.post({'name': name, 'role': 'International employee'})
            self.assertEqual(resp.status_code, 201)

            employee_id = json.loads(resp.get_data())['id']
            stored = json.loads(self.app.test_client().get(f'/employees/{employee_id}').get_data())
            self.assertEqual(stored['name'], name)

    @parametrize('store', STORES)
    def test_concurrent_creates(self, store: str) -> None:
        repo = self.use_store(store)
        count = 10

        with ThreadPoolExecutor(max_workers=5) as executor:
            responses = list(
                executor.map(lambda i: self.post({'name': f'Concurrent employee {i}', 'role': 'Worker'}), range(count))
            )

        self.assertTrue(all(resp.status_code == 201 for resp in responses))
        created = [json.loads(resp.get_data()) for resp in responses]
        self.assertEqual(len({employee['id'] for employee in created}), count)
        self.assertCountEqual([e['name'] for e in created], [f'Concurrent employee {i}' for i in range(count)])
        self.assertEqual(len(repo.find_all()), count)

    @parametrize('store', STORES)
    def test_concurrent_replaces(self, store: str) -> None:
        repo = self.use_store(store)
        employee_id = json.loads(self.post({'name': 'Initial', 'role': 'Initial'}).get_data())['id']
        payloads = [{'name': f'Name {i}', 'role': f'Role {i}'} for i in range(10)]

        with ThreadPoolExecutor(max_workers=5) as executor:
            responses = list(executor.map(lambda body: self.put(employee_id, body), payloads))

        self.assertTrue(all(resp.status_code == 200 for resp in responses))
        final = repo.find_by_id(employee_id)
        self.assertIn({'name': final.name, 'role': final.role}, payloads)  # type: ignore[union-attr]

    @parametrize('store', STORES)
    def test_concurrent_reads(self, store: str) -> None:
        self.use_store(store)
        employee_id = json.loads(self.post({'name': 'Concurrent test', 'role': 'Worker'}).get_data())['id']

        with ThreadPoolExecutor(max_workers=5) as executor:
            responses = list(
                executor.map(lambda _: self.app.test_client().get(f'/employees/{employee_id}'), range(10))
            )

        for resp in responses:
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(
                json.loads(resp.get_data()),
                {'id': employee_id, 'name': 'Concurrent test', 'role': 'Worker'},
            )

    @parametrize('store', STORES)
    def test_id_beyond_64_bits(self, store: str) -> None:
        repo = self.use_store(store)
        self.post({'name': 'Mary', 'role': 'Manager'})
        client = self.app.test_client()

        get_resp = client.get('/employees/18446744073709551616')
        delete_resp = client.delete('/employees/18446744073709551616')

        self.assertEqual(get_resp.status_code, 404)
        self.assertEqual(json.loads(get_resp.get_data())['path'], '/employees/18446744073709551616')
        self.assertEqual(delete_resp.status_code, 204)
        self.assertEqual(len(repo.find_all()), 1)

    def test_put_id_beyond_64_bits_on_sql_store(self) -> None:
        repo = self.use_store('sql')

        resp = self.put(2**64, {'name': 'Mary', 'role': 'Manager'})

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(json.loads(resp.get_data())['error'], 'Internal Server Error')
        self.assertEqual(repo.find_all(), [])

from typing import Any, NoReturn

import requests


class RestBaseRepository:
    def __init__(self, base_url: str, timeout: float = 10) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def get(self, url: str) -> requests.Response:
        return self.session.get(url, timeout=self.timeout)

    def post(self, url: str, data: dict[str, Any]) -> requests.Response:
        return self.session.post(url, json=data, timeout=self.timeout)

    def put(self, url: str, data: dict[str, Any]) -> requests.Response:
        return self.session.put(url, json=data, timeout=self.timeout)

    def delete(self, url: str) -> requests.Response:
        return self.session.delete(url, timeout=self.timeout)

    def unexpected_error(self, resp: requests.Response) -> NoReturn:
        resp.raise_for_status()

        raise requests.HTTPError(f'Unexpected response from server: {resp.status_code}', response=resp)

import asyncio

from functools import partial
from typing import List

import requests

from .configs import ViewConfig
from .errors import DecodeError, TransportError
from .transfer import Transfer
from .utils import Logger


HEADERS = {'Content-Type': 'application/json'}


class GraphQLClient:
    """Client of the indexer graph API.

    Each call issues exactly one POST; the blocking request runs in the
    event loop's default executor.
    """
    def __init__(self, config: ViewConfig, session: requests.Session = None):
        """
        :param ViewConfig config: endpoint, query and timeout settings
        :param requests.Session session: optional session, a new one is created otherwise
        """
        self.config = config
        self.session = session or requests.Session()

    def _post(self, payload: dict) -> requests.Response:
        response = self.session.post(
            self.config.endpoint_url,
            json=payload,
            headers=HEADERS,
            timeout=self.config.timeout,
        )
        response.raise_for_status()
        return response

    async def query(self, query: str, params: str):
        """Run a graph query and return the decoded JSON body.

        :param str query: GraphQL query text
        :param str params: literal params value sent alongside the query

        :raises TransportError: connection failure, timeout or HTTP error status
        :raises DecodeError: the body is not valid JSON
        """
        payload = {'query': query, 'params': params}
        try:
            response = await asyncio.get_event_loop().run_in_executor(
                None, partial(self._post, payload)
            )
        except requests.RequestException as e:
            raise TransportError(f'request to {self.config.endpoint_url} failed: {e}') from e

        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            raise DecodeError(f'response from {self.config.endpoint_url} is not JSON: {e}') from e

    async def fetch_transfers(self) -> List[Transfer]:
        """Fetch all transfers with the configured query.

        :returns: transfers in the order the server returned them
        :rtype: list
        """
        result = await self.query(self.config.query, self.config.params)
        if not isinstance(result, list):
            raise DecodeError(f'expected a list of transfers, got {type(result).__name__}')
        transfers = [Transfer.from_dict(item) for item in result]
        Logger.log('received', len(transfers), 'transfers')
        return transfers

    def close(self):
        self.session.close()

import asyncio

from typing import (
    Dict,
    Tuple,
)

from .client import GraphQLClient
from .configs import ViewConfig
from .errors import FetchError
from .render import render_page, render_transfer_list
from .state import (
    ViewState,
    fetch_cancelled,
    fetch_failed,
    fetch_started,
    fetch_succeeded,
    sort_transfers,
    tally_assets,
)
from .transfer import Transfer
from .utils import Logger


class TransferView:
    """Table of transfers fetched from the indexer graph API.

    idle -> fetching -> (success | failure) -> idle, with is_fetching as the
    observable flag. A fetch is a background task bound to the view lifetime:
    after unmount() pending fetches are cancelled and late completions are
    ignored.
    """
    def __init__(self, config: ViewConfig, client: GraphQLClient = None):
        self.config = config
        self.client = client or GraphQLClient(config)

        self.state = ViewState()
        self.background_tasks = set()
        self.mounted = False
        self.torn_down = False

    @property
    def is_fetching(self) -> bool:
        return self.state.is_fetching

    @property
    def transfers(self) -> Tuple[Transfer, ...]:
        return self.state.transfers

    @property
    def asset_to_num_transfers(self) -> Dict[str, int]:
        return tally_assets(self.state.transfers)

    def run_in_background(self, coroutine) -> asyncio.Task:
        task = asyncio.create_task(coroutine)

        # Strong reference until the task is done
        self.background_tasks.add(task)
        task.add_done_callback(self.background_tasks.discard)
        return task

    def mount(self) -> asyncio.Task:
        """Mount the view and start fetching transfers in the background.
        """
        if self.torn_down:
            raise RuntimeError('view has been unmounted')
        self.mounted = True
        Logger.log('mounted')
        return self.run_in_background(self.fetch_transfers())

    def unmount(self):
        self.mounted = False
        if self.state.is_fetching:
            self.state = fetch_cancelled(self.state)
        self.torn_down = True
        for task in list(self.background_tasks):
            task.cancel()
        self.client.close()
        Logger.log('unmounted')

    def _apply(self, transition, *args):
        if self.torn_down:
            Logger.log('view unmounted, dropping', transition.__name__)
            return
        self.state = transition(self.state, *args)

    async def fetch_transfers(self) -> Tuple[Transfer, ...]:
        self._apply(fetch_started)
        try:
            transfers = await self.client.fetch_transfers()
        except FetchError as e:
            Logger.log('fetching transfers failed:', e, important=True)
            self._apply(fetch_failed)
        else:
            self._apply(fetch_succeeded, sort_transfers(transfers, self.config.id_order))
        return self.state.transfers

    def render(self) -> str:
        return render_transfer_list(self.state.transfers, self.config)

    def render_page(self) -> str:
        return render_page(self.render(), self.config)

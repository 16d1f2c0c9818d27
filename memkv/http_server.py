import logging

from aiohttp import web

from . import __version__
from .errors import BindError
from .store import KeyValueStore

logger = logging.getLogger(__name__)

BANNER = f"memkv v{__version__}"


class HTTPKVStore:
    """Serves a KeyValueStore under ``/-/{key}``.

    Absent keys answer 404 with an empty body; an empty stored value answers
    200 with an empty body.
    """

    def __init__(self, store: KeyValueStore, host="127.0.0.1", port=3000, expose_delete=True):
        self.store = store
        self.host = host
        self.port = port
        self.expose_delete = expose_delete
        self.runner = None
        self.app = self._create_app()

    def _create_app(self):
        app = web.Application()

        app.router.add_get('/', self.handle_root)
        app.router.add_get('/-/{key}', self.handle_get)
        app.router.add_post('/-/{key}', self.handle_post)
        if self.expose_delete:
            app.router.add_delete('/-/{key}', self.handle_delete)

        return app

    async def handle_root(self, request):
        return web.Response(text=BANNER)

    async def handle_get(self, request):
        key = request.match_info['key']
        value = self.store.get(key)

        if value is None:
            logger.debug("get key: %s, but not found", key)
            return web.Response(status=404, text="")

        logger.debug("get key: %s value: %s", key, value)
        return web.Response(text=value)

    async def handle_post(self, request):
        key = request.match_info['key']
        # The request charset is ignored; values are always UTF-8.
        raw = await request.read()
        try:
            body = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("post key: %s, but body is not valid UTF-8", key)
            return web.Response(status=400, text="")

        value = self.store.put(key, body)
        logger.debug("post key: %s value: %s", key, value)
        return web.Response(text=value)

    async def handle_delete(self, request):
        key = request.match_info['key']
        value = self.store.delete(key)

        if value is None:
            logger.debug("delete key: %s, but not found", key)
            return web.Response(status=404, text="")

        logger.debug("delete key: %s value: %s", key, value)
        return web.Response(text=value)

    async def start(self):
        """Bind and start serving. Raises BindError if the address is unusable."""
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()

        site = web.TCPSite(self.runner, self.host, self.port)
        try:
            await site.start()
        except OSError as e:
            await self.runner.cleanup()
            self.runner = None
            raise BindError(self.host, self.port, e) from e

        logger.debug("listening on %s:%s", self.host, self.port)

    async def stop(self):
        if self.runner:
            await self.runner.cleanup()
            self.runner = None

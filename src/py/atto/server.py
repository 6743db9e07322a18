import asyncio
import socket
import threading
from dataclasses import dataclass
from signal import SIGINT, SIGTERM
from typing import Any

from .config import ServerConfig
from .handler import process
from .utils.logging import debug, error, event, exception, info, warning

# Accepting connections times out after this many seconds, so that a stop
# request is noticed even when no client connects.
POLLING: float = 1.0


class ServerSetupError(Exception):
	"""Raised when the listening socket can't be created, bound or listened on."""


@dataclass(slots=True)
class ServerState:
	isRunning: bool = True
	# The port actually bound, set once the server listens
	port: int | None = None

	def stop(self) -> None:
		info("Server stopping…")
		self.isRunning = False

	def onException(
		self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]
	) -> None:
		e = context.get("exception")
		if e:
			exception(e)


class AIOSocketServer:
	"""AsyncIO backend using sockets directly."""

	@classmethod
	async def OnRequest(
		cls,
		client: socket.socket,
		*,
		loop: asyncio.AbstractEventLoop,
		config: ServerConfig,
	) -> bool:
		"""Handles a single connection: one read, at most one response, then
		the connection is closed. Returns `True` when a response was sent."""
		try:
			try:
				data: bytes = await loop.sock_recv(client, config.readsize)
			except OSError as e:
				warning(
					"Failed to receive data from client", Error=e.strerror or str(e)
				)
				return False
			if not data:
				warning("Client did not send any data")
				return False
			response = process(data, config)
			debug("Sending response", Status=response.status, Size=len(response.body))
			try:
				await loop.sock_sendall(client, response.payload())
			except ConnectionError as e:
				# Client did an early close
				warning("Failed to send response", Error=e.strerror or str(e))
				return False
			return True
		except Exception as e:
			exception(e)
			return False
		finally:
			client.close()

	@staticmethod
	def Listen(config: ServerConfig) -> socket.socket:
		"""Creates the listening socket, raising `ServerSetupError` on failure."""
		try:
			server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
		except OSError as e:
			error(f"Failed to create a socket: {e.strerror}", "SOCKET")
			raise ServerSetupError(str(e)) from e
		try:
			server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
			if hasattr(socket, "SO_REUSEPORT"):
				server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
			server.bind((config.host, config.port))
			# The argument is the backlog of connections that will be accepted before
			# they are refused.
			server.listen(config.backlog)
		# An out of range port raises an `OverflowError`
		except (OSError, OverflowError) as e:
			server.close()
			error(
				f"Failed to listen on {config.host}:{config.port}: {getattr(e, 'strerror', None) or e}",
				"HOSTPORTERR",
			)
			raise ServerSetupError(str(e)) from e
		# This is what we need to use it with asyncio
		server.setblocking(False)
		return server

	@classmethod
	async def Serve(
		cls,
		config: ServerConfig = ServerConfig(),
		state: ServerState | None = None,
	) -> None:
		"""Main server coroutine, which runs until the state is stopped."""
		server = cls.Listen(config)
		loop = asyncio.get_running_loop()
		state = state or ServerState()
		state.port = server.getsockname()[1]
		tasks: set[asyncio.Task[bool]] = set()
		# Registers handlers for signals and exception (so that we log them). Note
		# that signal handlers can only be set from the main thread.
		if threading.current_thread() is threading.main_thread():
			loop.add_signal_handler(SIGINT, state.stop)
			loop.add_signal_handler(SIGTERM, state.stop)
		loop.set_exception_handler(state.onException)

		info(
			f"Serving {config.root} on http://localhost:{state.port}/",
			icon="🚀",
			Host=config.host,
			Port=state.port,
			Listing=config.listing,
		)

		try:
			while state.isRunning:
				try:
					client, _ = await asyncio.wait_for(
						loop.sock_accept(server), timeout=POLLING
					)
				except asyncio.TimeoutError:
					continue
				except OSError as e:
					exception(e)
					continue
				if config.concurrent:
					task = loop.create_task(
						cls.OnRequest(client, loop=loop, config=config)
					)
					tasks.add(task)
					task.add_done_callback(tasks.discard)
				else:
					# No new connection is accepted until this one is done
					await cls.OnRequest(client, loop=loop, config=config)
		finally:
			server.close()
			if threading.current_thread() is threading.main_thread():
				loop.remove_signal_handler(SIGINT)
				loop.remove_signal_handler(SIGTERM)
			await asyncio.gather(*tasks, return_exceptions=True)


def run(config: ServerConfig = ServerConfig()) -> int:
	"""High level function to run the server, returning the process exit
	status."""
	try:
		asyncio.run(AIOSocketServer.Serve(config))
	except ServerSetupError:
		return 1
	except KeyboardInterrupt:
		event("ManualShutdown")
	event("EOK")
	return 0


# EOF

"""Network tab: send a line over TCP and show what comes back."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from ..dispatcher import IEventDispatcher
from ..errors import describe_error, log_and_continue
from ..logging_config import get_logger
from ..models import Event, ItemId, LoggingLevel, PendantEventType
from ..service import IController
from .base import HandlerGroup

logger = get_logger(__name__)

RESPONSE_BUFFER_SIZE = 100
READ_TIMEOUT_MESSAGE = "Write successful, timeout on response read"


@dataclass
class RelayResult:
    """Outcome of one write-then-read round trip."""

    response: str = ""
    error: str = ""
    timed_out: bool = False


@asynccontextmanager
async def network_access(
    controller: IController, interface: str, port: int, protocol: str
) -> AsyncIterator[int]:
    """Hold a controller network-access handle for the duration of the block."""
    handle = await controller.request_network_access(interface, port, protocol)
    logger.debug("Network access %s granted for %s/%s", handle, port, protocol)
    try:
        yield handle
    finally:
        with log_and_continue(f"removing network access {handle}"):
            await controller.remove_network_access(handle)


async def relay(
    host: str,
    port: int,
    payload: str,
    read_timeout: float,
    connect_timeout: float,
) -> RelayResult:
    """Write payload (UTF-8) to host:port and make one bounded read of the reply.

    A read timeout is reported in the result, as is any other read error.
    Connect and write failures raise.
    """
    try:
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port), connect_timeout
        )
    except asyncio.TimeoutError:
        raise TimeoutError(f"Connecting to {host}:{port} timed out") from None

    try:
        writer.write(payload.encode("utf-8"))
        await asyncio.wait_for(writer.drain(), connect_timeout)

        try:
            data = await asyncio.wait_for(reader.read(RESPONSE_BUFFER_SIZE), read_timeout)
        except asyncio.TimeoutError:
            return RelayResult(error=READ_TIMEOUT_MESSAGE, timed_out=True)
        except Exception as e:
            return RelayResult(error=describe_error(e))
        return RelayResult(response=data.decode("utf-8", errors="replace"))
    finally:
        writer.close()
        with log_and_continue("closing the network connection"):
            await writer.wait_closed()


class NetworkHandlers(HandlerGroup):
    def register(self, dispatcher: IEventDispatcher) -> None:
        dispatcher.register(ItemId.NETWORK_SEND, PendantEventType.CLICKED, self.on_network_send_clicked)

    async def on_network_send_clicked(self, event: Event) -> None:
        pendant = self._ctx.pendant
        settings = self._ctx.settings
        try:
            data = f"{await pendant.get_property(ItemId.NETWORK_DATA.value, 'text')}\n"
            host = str(await pendant.get_property(ItemId.NETWORK_IP_ADDRESS.value, "text"))
            port = int(await pendant.get_property(ItemId.NETWORK_PORT.value, "text"))

            # Requested per send because the port comes from the UI
            async with network_access(self._ctx.controller, "LAN", port, "tcp"):
                result = await relay(
                    host,
                    port,
                    data,
                    read_timeout=settings.network_read_timeout,
                    connect_timeout=settings.network_connect_timeout,
                )

            if result.error and not result.timed_out:
                await self._ctx.remote_log(
                    LoggingLevel.DEBUG,
                    f"Unable to read network message response: {result.error}",
                )

            with log_and_continue("writing the network response"):
                await pendant.set_property(ItemId.NETWORK_RESPONSE.value, "text", result.response)
            with log_and_continue("writing the network error"):
                await pendant.set_property(ItemId.NETWORK_ERROR.value, "text", result.error)

            if not result.error:
                await pendant.notice("Data Sent", f"The data was sent to {host}:{port}", "")
            logger.info(
                "Network send to %s:%s finished%s",
                host,
                port,
                f" ({result.error})" if result.error else "",
            )

        except Exception as e:
            error = describe_error(e)
            with log_and_continue("writing the network error"):
                await pendant.set_property(ItemId.NETWORK_ERROR.value, "text", error)
            logger.error("Unable to send network message: %s", error)
            await self._ctx.remote_log(
                LoggingLevel.DEBUG, f"Unable to send network message: {error}"
            )

import asyncio

from config.settings import settings


async def simulated_latency() -> None:
    """
    Retraso cosmético antes de cada request (SIMULATED_LATENCY_MS).
    Sin semántica de orden ni cancelación.
    """
    if settings.SIMULATED_LATENCY_MS > 0:
        await asyncio.sleep(settings.SIMULATED_LATENCY_MS / 1000)

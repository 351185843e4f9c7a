import asyncio
import sys
import time
from config import DisplayConfig, load_config
from internal.logging import get_logger

class EngineState:
    STOPPED = "stopped"
    RUNNING = "running"

class LifeEngine:
    """Steps a Simulation and writes each generation to `out` at a fixed frame rate."""

    def __init__(self, simulation, config=None, display=None, out=None):
        self.simulation = simulation
        self.config = config or load_config().simulation
        self.display = display or DisplayConfig()
        self.out = out or sys.stdout
        self.frames = 0
        self._state = EngineState.STOPPED
        self._task = None
        self._stop = asyncio.Event()
        self._log = get_logger()

    @property
    def state(self):
        return self._state

    async def start(self):
        if self._task:
            return
        self._stop.clear()
        self.frames = 0
        self._state = EngineState.RUNNING
        self._task = asyncio.create_task(self._loop())

    async def stop(self):
        self._stop.set()
        try:
            if self._task:
                task, self._task = self._task, None
                await task
        finally:
            self._state = EngineState.STOPPED

    async def run(self):
        """Run in the foreground until the configured generation count is reached or stop() is called.

        Each call starts a fresh frame count; the simulation carries on from its current generation.
        """
        await self.start()
        try:
            await self._task
        finally:
            self._task = None
            self._state = EngineState.STOPPED
        return self.frames

    def draw(self):
        self.out.write(self.display.clear)
        self.out.write(self.simulation.render(self.display.alive, self.display.dead))
        self.out.flush()
        self.frames += 1

    async def _loop(self):
        frame_interval = self.config.frame_interval
        limit = self.config.generations
        next_frame_time = time.perf_counter()
        self._log.info("engine start", interval=frame_interval, generations=limit)

        while not self._stop.is_set() and (limit <= 0 or self.frames < limit):
            now = time.perf_counter()
            wait_time = next_frame_time - now
            if wait_time > 0:
                try:
                    await asyncio.wait_for(self._stop.wait(), timeout=wait_time)
                    break
                except asyncio.TimeoutError:
                    pass
            else:
                # Behind schedule: yield so stop() can run, and drop the missed ticks.
                await asyncio.sleep(0)
                if self._stop.is_set():
                    break
                next_frame_time = now
            next_frame_time += frame_interval

            self.simulation.step()
            self.draw()

        self._log.info("engine stop", generation=self.simulation.generation,
                       population=self.simulation.population, frames=self.frames)

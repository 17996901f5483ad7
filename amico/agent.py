"""The agent: runs an event generator and an action selector side by side."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from os import PathLike

from amico.config import CoreConfig
from amico.errors import ActionError, ActionSelectorError, EventPoolError
from amico.events import EventPool
from amico.traits import ActionSelector, EventGenerator

logger = logging.getLogger(__name__)

EventGeneratorFactory = Callable[[], EventGenerator]
ActionSelectorFactory = Callable[[], ActionSelector]

_EVENT_SOURCE = "example_source"


class Agent:
    """Feeds generated events into a shared pool and executes selected actions.

    Each of the generator and the selector runs in its own thread, built by
    its factory inside that thread.
    """

    def __init__(
        self,
        config_path: str | PathLike[str],
        event_generator_factory: EventGeneratorFactory,
        action_selector_factory: ActionSelectorFactory,
    ) -> None:
        config = CoreConfig.load(config_path)
        self.name = config.name
        self._running = threading.Event()
        self._pool = EventPool(config.event_config.expiry_time)
        self._pool_lock = threading.Lock()
        self._event_generator_factory = event_generator_factory
        self._action_selector_factory = action_selector_factory
        self._threads: list[threading.Thread] = []
        self._threads_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._running.is_set()

    def before_start(self) -> None:
        """Set up logging and report what is being loaded."""
        logging.basicConfig()
        logger.info("Loading objects for agent: %s", self.name)

    def start(self) -> None:
        """Start the generator and selector threads."""
        self.before_start()
        self._running.set()
        logger.info("Agent %s started.", self.name)

        threads = [
            threading.Thread(target=self._generate_loop, name=f"{self.name}-generator", daemon=True),
            threading.Thread(target=self._select_loop, name=f"{self.name}-selector", daemon=True),
        ]
        for thread in threads:
            thread.start()
        with self._threads_lock:
            self._threads.extend(threads)

    def stop(self) -> None:
        """Ask both threads to finish after their current iteration."""
        logger.info("Agent %s stopping.", self.name)
        self._running.clear()

    def join(self) -> None:
        """Wait for all started threads to finish."""
        with self._threads_lock:
            threads, self._threads = self._threads, []
        for thread in threads:
            thread.join()
        logger.info("All threads have finished.")

    def _generate_loop(self) -> None:
        generator = self._event_generator_factory()
        while self._running.is_set():
            new_events = generator.generate_event(_EVENT_SOURCE, {})
            logger.info("Extending %d events", len(new_events))
            with self._pool_lock:
                try:
                    self._pool.extend_events(new_events)
                except EventPoolError as exc:
                    logger.error("Failed to extend events: %s", exc)

    def _select_loop(self) -> None:
        selector = self._action_selector_factory()
        while self._running.is_set():
            with self._pool_lock:
                events = self._pool.get_events()
            try:
                action, event_ids = selector.select_action(events)
            except ActionSelectorError as exc:
                logger.error("%s", exc)
                continue

            logger.info("Removing %d events", len(event_ids))
            with self._pool_lock:
                try:
                    self._pool.remove_events(event_ids)
                except EventPoolError as exc:
                    logger.error("Failed to remove events: %s", exc)

            try:
                action.execute()
            except ActionError as exc:
                logger.error("%s", exc)
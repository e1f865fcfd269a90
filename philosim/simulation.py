"""Dining philosophers: one thread per philosopher, watched by a monitor."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import TextIO

from philosim.arguments import Parameters
from philosim.errors import ThreadCreationError, ThreadJoinError
from philosim.timing import now_ms, sleep_precise


@dataclass(eq=False)
class Philosopher:
    """A seated philosopher sharing a fork with each neighbour."""

    id: int
    sim: Simulation = field(repr=False)
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    last_meal: int = 0
    meals_eaten: int = 0
    thread: threading.Thread | None = field(default=None, repr=False)

    def routine(self) -> None:
        """Take forks, eat, sleep and think until the simulation ends."""
        if self.id % 2 == 0:
            sleep_precise(1)
        while not self.sim.has_ended():
            if not self.take_forks():
                continue
            self.eat()
            self.release_forks()
            self.sleep()
            self.think()

    def take_forks(self) -> bool:
        """Pick up both forks; return False if they could not both be held.

        A lone philosopher has a single fork: it holds it until it starves,
        then puts it back down.
        """
        self.right_fork.acquire()
        self.sim.log(self.id, "has taken a fork")
        if self.sim.params.nb_philo == 1:
            sleep_precise(self.sim.params.time_to_die + 1)
            self.right_fork.release()
            return False
        self.left_fork.acquire()
        self.sim.log(self.id, "has taken a fork")
        return True

    def eat(self) -> None:
        """Record a meal and spend the eating time."""
        self.sim.log(self.id, "is eating")
        with self.sim.meal_lock:
            self.last_meal = now_ms()
            self.meals_eaten += 1
        sleep_precise(self.sim.params.time_to_eat)

    def release_forks(self) -> None:
        """Put both forks back on the table."""
        self.left_fork.release()
        self.right_fork.release()

    def sleep(self) -> None:
        """Spend the sleeping time."""
        self.sim.log(self.id, "is sleeping")
        sleep_precise(self.sim.params.time_to_sleep)

    def think(self) -> None:
        """Announce thinking; it lasts until the forks are free."""
        self.sim.log(self.id, "is thinking")


class Simulation:
    """The table, its forks and the philosophers around it."""

    def __init__(self, params: Parameters, stream: TextIO | None = None) -> None:
        self.params = params
        self.stream = sys.stdout if stream is None else stream
        self._ended = False
        self._print_lock = threading.Lock()
        self._end_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.start_time = now_ms()
        count = params.nb_philo
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                id=index,
                sim=self,
                left_fork=self.forks[index],
                right_fork=self.forks[index - 1],
                last_meal=self.start_time,
            )
            for index in range(count)
        ]

    def has_ended(self) -> bool:
        """Tell whether the simulation has stopped."""
        with self._end_lock:
            return self._ended

    def end(self) -> None:
        """Stop the simulation; philosophers leave after their current step."""
        with self._end_lock:
            self._ended = True

    def log(self, philosopher_id: int, action: str) -> None:
        """Print a timestamped action unless the simulation has ended."""
        elapsed = now_ms() - self.start_time
        with self._print_lock:
            if not self.has_ended():
                self.stream.write(f"{elapsed} {philosopher_id + 1} {action}\n")
                self.stream.flush()

    def run(self) -> None:
        """Start the philosophers, watch them until the end, then join them."""
        self.start_threads()
        self.monitor()
        self.join_threads()

    def start_threads(self) -> None:
        """Start one thread per philosopher."""
        for philosopher in self.philosophers:
            thread = threading.Thread(
                target=philosopher.routine,
                name=f"philosopher-{philosopher.id + 1}",
                daemon=True,
            )
            philosopher.thread = thread
            try:
                thread.start()
            except RuntimeError as exc:
                philosopher.thread = None
                self.end()
                raise ThreadCreationError() from exc

    def join_threads(self) -> None:
        """Wait for every started philosopher thread to finish."""
        for philosopher in self.philosophers:
            if philosopher.thread is None:
                continue
            try:
                philosopher.thread.join()
            except RuntimeError as exc:
                raise ThreadJoinError() from exc

    def monitor(self) -> None:
        """Block until a philosopher dies or all have eaten enough."""
        running = True
        while running:
            with self.meal_lock:
                if self.check_deaths() or self.check_eating_goal():
                    running = False
            sleep_precise(1)

    def check_deaths(self) -> bool:
        """Announce the first starved philosopher and end; report whether one was."""
        current = now_ms()
        for philosopher in self.philosophers:
            if current - philosopher.last_meal > self.params.time_to_die:
                self.log(philosopher.id, "died")
                self.end()
                return True
        return False

    def check_eating_goal(self) -> bool:
        """End the simulation once every philosopher has eaten the goal."""
        goal = self.params.eat_goal
        if goal is None:
            return False
        if any(p.meals_eaten < goal for p in self.philosophers):
            return False
        self.end()
        return True
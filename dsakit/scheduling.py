"""CPU scheduling: first-come first-served, shortest job first, priority and round robin."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process to schedule; a lower priority value means a more urgent process."""

    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError("arrival time must not be negative")
        if self.burst < 0:
            raise ValueError("burst time must not be negative")


@dataclass(frozen=True)
class ProcessStats:
    """Timing of one scheduled process; pid is its place in arrival order."""

    pid: int
    arrival: int
    burst: int
    priority: int
    response: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass(frozen=True)
class ScheduleResult:
    """Per-process timings, in pid order, with their averages."""

    stats: tuple[ProcessStats, ...]

    @property
    def average_turnaround(self) -> float:
        return sum(s.turnaround for s in self.stats) / len(self.stats)

    @property
    def average_waiting(self) -> float:
        return sum(s.waiting for s in self.stats) / len(self.stats)


_Job = tuple[int, Process]


def _prepare(processes: Iterable[Process]) -> list[_Job]:
    """Order processes by arrival (stably) and number them in that order."""
    ordered = sorted(processes, key=lambda p: p.arrival)
    if not ordered:
        raise ValueError("no processes to schedule")
    return list(enumerate(ordered))


def _stats(pid: int, process: Process, response: int, completion: int) -> ProcessStats:
    return ProcessStats(
        pid=pid,
        arrival=process.arrival,
        burst=process.burst,
        priority=process.priority,
        response=response,
        completion=completion,
    )


def _result(done: dict[int, ProcessStats]) -> ScheduleResult:
    return ScheduleResult(tuple(done[pid] for pid in sorted(done)))


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """Run processes to completion in order of arrival."""
    done: dict[int, ProcessStats] = {}
    clock = 0
    for pid, process in _prepare(processes):
        clock = max(clock, process.arrival)
        response = clock - process.arrival
        clock += process.burst
        done[pid] = _stats(pid, process, response, clock)
    return _result(done)


def _non_preemptive(
    processes: Iterable[Process], key: Callable[[Process], int]
) -> ScheduleResult:
    pending = _prepare(processes)
    done: dict[int, ProcessStats] = {}
    clock = 0
    while pending:
        ready = [job for job in pending if job[1].arrival <= clock]
        if not ready:
            clock = min(p.arrival for _, p in pending)
            continue
        job = min(ready, key=lambda j: key(j[1]))
        pid, process = job
        response = clock - process.arrival
        clock += process.burst
        done[pid] = _stats(pid, process, response, clock)
        pending.remove(job)
    return _result(done)


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive shortest job first; ties go to the earlier arrival."""
    return _non_preemptive(processes, lambda p: p.burst)


def priority_schedule(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive priority scheduling; the lowest priority value runs first."""
    return _non_preemptive(processes, lambda p: p.priority)


def round_robin(processes: Iterable[Process], time_slice: int) -> ScheduleResult:
    """Round robin with the given time slice, cycling through processes in arrival order.

    A process that has not yet arrived goes back to the end of the queue; the
    clock advances by one whenever no queued process has arrived.
    """
    if time_slice < 1:
        raise ValueError("time slice must be positive")
    jobs = _prepare(processes)
    queue: deque[_Job] = deque(jobs)
    remaining = {pid: process.burst for pid, process in jobs}
    responses: dict[int, int] = {}
    done: dict[int, ProcessStats] = {}
    clock = 0
    while queue:
        pid, process = queue.popleft()
        if process.arrival <= clock:
            responses.setdefault(pid, clock - process.arrival)
            run = min(remaining[pid], time_slice)
            remaining[pid] -= run
            clock += run
            if remaining[pid] == 0:
                done[pid] = _stats(pid, process, responses[pid], clock)
            else:
                queue.append((pid, process))
        else:
            queue.append((pid, process))
            if not any(p.arrival <= clock for _, p in queue):
                clock += 1
    return _result(done)


_HEADER = (
    "PID | Arr_time | Burst_time | Priority | Resp_time | Comp_time "
    "| turnaround_time | wait_time"
)


def format_table(result: ScheduleResult) -> str:
    """The schedule as a table followed by the average turnaround and waiting times."""
    lines = [_HEADER, "-" * 95]
    for s in result.stats:
        lines.append(
            f"{s.pid:<4d}|{s.arrival:<10d}|{s.burst:<12d}|{s.priority:<10d}"
            f"|{s.response:<11d}|{s.completion:<11d}|{s.turnaround:<17d}|{s.waiting:d}"
        )
    lines.append("")
    lines.append(f"Avg turnaround time={result.average_turnaround:.2f}")
    lines.append(f"Avg waiting time={result.average_waiting:.2f}")
    return "\n".join(lines)
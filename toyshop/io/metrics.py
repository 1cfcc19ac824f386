"""Metrics instrumentation."""

from __future__ import annotations

from prometheus_client import Counter, Gauge

draws_total = Counter("toyshop_draws_total", "Prize draws by outcome", ["outcome"])
toys_added_total = Counter("toyshop_toys_added_total", "Toys added to the inventory")
persistence_failures_total = Counter(
    "toyshop_persistence_failures_total",
    "Failed reads or writes of the toy file",
    ["operation"],
)
pool_tickets = Gauge("toyshop_pool_tickets", "Prize tickets remaining in the pool")


def inc_draws(outcome: str) -> None:
    draws_total.labels(outcome=outcome).inc()


def inc_toys_added(n: int = 1) -> None:
    toys_added_total.inc(n)


def inc_persistence_failures(operation: str) -> None:
    persistence_failures_total.labels(operation=operation).inc()


def set_pool_tickets(n: int) -> None:
    pool_tickets.set(n)

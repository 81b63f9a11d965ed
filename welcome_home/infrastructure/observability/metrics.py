"""Prometheus metrics for move-in computations and fee catalog usage"""

from prometheus_client import Counter, Histogram

# Computation metrics
computation_counter = Counter(
    "welcome_home_computations_total",
    "Total move-in computations",
    ["proration_method"],
)

next_month_rent_counter = Counter(
    "welcome_home_next_month_rent_total",
    "Computations that charged next month's rent (move-in after the 25th)",
)

total_due_histogram = Histogram(
    "welcome_home_total_due_dollars",
    "Total due at move-in",
    buckets=[0, 500, 1000, 2000, 3000, 5000, 10000],
)

# Fee metrics
fee_items_created_counter = Counter(
    "welcome_home_fee_items_created_total",
    "Fee line items created from catalog templates",
    ["category"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_computation(proration_method: str, charge_next_month: bool, total_due_at_move_in: float) -> None:
    """Record computation metrics for proration mix and move-in totals"""
    computation_counter.labels(proration_method=proration_method).inc()
    if charge_next_month:
        next_month_rent_counter.inc()
    total_due_histogram.observe(total_due_at_move_in)

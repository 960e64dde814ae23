from prometheus_client import Counter, Histogram


class BookingMetrics:
    """Seat reservation and catalogue write metrics, exposed on /metrics."""

    def __init__(self):
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking requests by outcome',
            ['result'],  # success / insufficient_capacity / not_found / timeout / error
        )

        self.booked_seats = Counter(
            'booked_seats_total',
            'Seats successfully reserved',
        )

        self.reservation_duration = Histogram(
            'seat_reservation_duration_seconds',
            'Time spent in the locked reservation transaction',
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
        )

        self.event_writes = Counter(
            'event_writes_total',
            'Event create/update/delete operations',
            ['operation', 'result'],
        )

    def record_booking(self, *, result: str, seats: int = 0, duration: float | None = None):
        self.booking_requests.labels(result=result).inc()
        if result == 'success' and seats:
            self.booked_seats.inc(seats)
        if duration is not None:
            self.reservation_duration.observe(duration)

    def record_event_write(self, *, operation: str, result: str):
        self.event_writes.labels(operation=operation, result=result).inc()


metrics = BookingMetrics()

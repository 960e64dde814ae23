import pytest

from event_booking.platform.exception.exceptions import (
    InsufficientCapacityError,
    ValidationError,
)
from event_booking.service.booking.domain.entity.event_entity import EventEntity
from event_booking.service.booking.domain.value_object.event_patch import EventPatch


@pytest.mark.unit
class TestEventCreate:
    def test_new_event_starts_fully_available(self):
        event = EventEntity.create(name='Concert', total_seats=10, description='Live')

        assert event.total_seats == 10
        assert event.seats_available == 10
        assert event.booked_seats == 0
        assert event.description == 'Live'
        assert event.id is None

    def test_name_is_stripped(self):
        event = EventEntity.create(name='  Concert  ', total_seats=1)
        assert event.name == 'Concert'

    @pytest.mark.parametrize('name', [None, '', '   '])
    def test_missing_name_is_rejected(self, name):
        with pytest.raises(ValidationError, match='Name and positive total_seats are required'):
            EventEntity.create(name=name, total_seats=10)

    @pytest.mark.parametrize('total_seats', [None, 0, -5, 2.5, '10', True])
    def test_non_positive_or_non_integer_capacity_is_rejected(self, total_seats):
        with pytest.raises(ValidationError):
            EventEntity.create(name='Concert', total_seats=total_seats)

    def test_seats_available_cannot_exceed_total(self):
        with pytest.raises(ValidationError):
            EventEntity(name='Concert', total_seats=5, seats_available=6)


@pytest.mark.unit
class TestReserveSeats:
    def test_reserve_decrements_available(self):
        event = EventEntity(name='Concert', total_seats=10)

        event.reserve_seats(7)

        assert event.seats_available == 3
        assert event.booked_seats == 7

    def test_reserve_exactly_remaining_seats(self):
        event = EventEntity(name='Concert', total_seats=10, seats_available=3)

        event.reserve_seats(3)

        assert event.seats_available == 0

    def test_reserve_more_than_available_leaves_event_unchanged(self):
        event = EventEntity(name='Concert', total_seats=10, seats_available=3)

        with pytest.raises(InsufficientCapacityError, match='Not enough seats available'):
            event.reserve_seats(5)

        assert event.seats_available == 3


@pytest.mark.unit
class TestApplyPatch:
    def test_omitted_fields_are_unchanged(self):
        event = EventEntity(name='Concert', total_seats=10, description='Live')

        event.apply_patch(EventPatch(name='Gala'))

        assert event.name == 'Gala'
        assert event.description == 'Live'
        assert event.total_seats == 10
        assert event.seats_available == 10

    def test_growing_capacity_keeps_booked_seats(self):
        # 4 booked
        event = EventEntity(name='Concert', total_seats=10, seats_available=6)

        event.apply_patch(EventPatch(total_seats=20))

        assert event.total_seats == 20
        assert event.seats_available == 16

    def test_shrinking_capacity_down_to_booked_count(self):
        event = EventEntity(name='Concert', total_seats=10, seats_available=6)

        event.apply_patch(EventPatch(total_seats=4))

        assert event.total_seats == 4
        assert event.seats_available == 0

    def test_capacity_below_booked_is_rejected_and_event_unchanged(self):
        event = EventEntity(name='Concert', total_seats=10, seats_available=6)

        with pytest.raises(
            ValidationError, match='New total_seats is less than already booked seats'
        ):
            event.apply_patch(EventPatch(total_seats=3))

        assert event.total_seats == 10
        assert event.seats_available == 6

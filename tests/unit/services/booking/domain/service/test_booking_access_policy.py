import pytest

from services.booking.domain.enum import BookingStatus
from services.booking.domain.service import BookingAccessPolicy
from services.catalog.domain.value_object import DriverId
from services.shared.domain import Actor, Capability, Role
from services.shared.domain.exception import ForbiddenException


class TestBookingAccessPolicy:
    @pytest.fixture
    def policy(self):
        return BookingAccessPolicy()

    @pytest.mark.parametrize("target", list(BookingStatus))
    def test_admin_may_request_any_target(self, policy, admin, create_booking, target):
        policy.authorize_status_change(admin, create_booking(), target)

    @pytest.mark.parametrize(
        "target", [BookingStatus.IN_PROGRESS, BookingStatus.COMPLETED]
    )
    def test_assigned_driver_may_progress_booking(
        self, policy, driver_actor, driver_id, create_booking, target
    ):
        booking = create_booking(driver_id=str(driver_id))
        policy.authorize_status_change(driver_actor, booking, target, driver_id)

    def test_driver_cannot_cancel(
        self, policy, driver_actor, driver_id, create_booking
    ):
        booking = create_booking(driver_id=str(driver_id))
        with pytest.raises(ForbiddenException):
            policy.authorize_status_change(
                driver_actor, booking, BookingStatus.CANCELLED, driver_id
            )

    def test_unassigned_driver_is_forbidden(
        self, policy, driver_actor, create_booking
    ):
        booking = create_booking(driver_id="driver-999")
        with pytest.raises(ForbiddenException):
            policy.authorize_status_change(
                driver_actor,
                booking,
                BookingStatus.IN_PROGRESS,
                DriverId(value="driver-001"),
            )

    def test_driver_without_profile_is_forbidden(
        self, policy, driver_actor, create_booking
    ):
        booking = create_booking(driver_id="driver-001")
        with pytest.raises(ForbiddenException):
            policy.authorize_status_change(
                driver_actor, booking, BookingStatus.IN_PROGRESS, None
            )

    def test_owner_may_cancel(self, policy, customer, create_booking):
        booking = create_booking(user_id=customer.user_id)
        policy.authorize_status_change(customer, booking, BookingStatus.CANCELLED)

    def test_owner_cannot_complete(self, policy, customer, create_booking):
        booking = create_booking(user_id=customer.user_id)
        with pytest.raises(ForbiddenException):
            policy.authorize_status_change(customer, booking, BookingStatus.COMPLETED)

    def test_other_customer_cannot_cancel(
        self, policy, other_customer, create_booking
    ):
        booking = create_booking(user_id="user-customer-1")
        with pytest.raises(ForbiddenException):
            policy.authorize_status_change(
                other_customer, booking, BookingStatus.CANCELLED
            )

    def test_actor_without_capabilities_is_forbidden(self, policy, create_booking):
        actor = Actor(
            user_id="user-x",
            role=Role.CUSTOMER,
            capabilities=frozenset({Capability.VIEW_ANY_BOOKING}),
        )
        with pytest.raises(ForbiddenException):
            policy.authorize_status_change(
                actor, create_booking(), BookingStatus.CANCELLED
            )

    def test_only_admin_may_assign_driver(self, policy, admin, customer, driver_actor):
        policy.authorize_assign_driver(admin)
        for actor in (customer, driver_actor):
            with pytest.raises(ForbiddenException):
                policy.authorize_assign_driver(actor)

    def test_view_rules(
        self, policy, admin, customer, other_customer, driver_actor, create_booking
    ):
        booking = create_booking(user_id=customer.user_id, driver_id="driver-001")

        policy.authorize_view(admin, booking)
        policy.authorize_view(customer, booking)
        policy.authorize_view(driver_actor, booking, DriverId(value="driver-001"))
        with pytest.raises(ForbiddenException):
            policy.authorize_view(other_customer, booking)
        with pytest.raises(ForbiddenException):
            policy.authorize_view(driver_actor, booking, DriverId(value="driver-002"))

    def test_payment_rules(
        self, policy, admin, customer, other_customer, create_booking
    ):
        booking = create_booking(user_id=customer.user_id)

        policy.authorize_payment(admin, booking)
        policy.authorize_payment(customer, booking)
        with pytest.raises(ForbiddenException):
            policy.authorize_payment(other_customer, booking)

from services.booking.applications.assign_driver import AssignDriverService
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.estimate_cost import EstimateCostService
from services.booking.applications.get_booking import GetBookingService
from services.booking.applications.list_bookings import ListBookingsService
from services.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service import BookingAccessPolicy, PricingCalculator
from services.booking.domain.value_object import PricingPolicy
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBDriverRepository,
    DynamoDBTourRepository,
    DynamoDBVehicleRepository,
)

# =============================================================================
# 依存関係の組み立て（Composition Root）
# =============================================================================
booking_repository = DynamoDBBookingRepository()
tour_repository = DynamoDBTourRepository()
vehicle_repository = DynamoDBVehicleRepository()
driver_repository = DynamoDBDriverRepository()

policy = BookingAccessPolicy()
calculator = PricingCalculator(PricingPolicy.from_env())


def estimate_cost_service() -> EstimateCostService:
    return EstimateCostService(
        tour_repository=tour_repository,
        vehicle_repository=vehicle_repository,
        calculator=calculator,
    )


def create_booking_service() -> CreateBookingService:
    return CreateBookingService(
        repository=booking_repository,
        driver_repository=driver_repository,
        estimator=estimate_cost_service(),
        factory=BookingFactory(),
    )


def get_booking_service() -> GetBookingService:
    return GetBookingService(
        repository=booking_repository,
        driver_repository=driver_repository,
        policy=policy,
    )


def list_bookings_service() -> ListBookingsService:
    return ListBookingsService(
        repository=booking_repository, driver_repository=driver_repository
    )


def update_booking_status_service() -> UpdateBookingStatusService:
    return UpdateBookingStatusService(
        repository=booking_repository,
        driver_repository=driver_repository,
        policy=policy,
    )


def assign_driver_service() -> AssignDriverService:
    return AssignDriverService(
        repository=booking_repository,
        driver_repository=driver_repository,
        policy=policy,
    )


def cancel_booking_service() -> CancelBookingService:
    return CancelBookingService(repository=booking_repository, policy=policy)

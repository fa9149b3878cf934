import pytest

from services.shared.domain import Actor, Capability, Role


class TestActor:
    def test_admin_capabilities(self, admin):
        assert admin.can(Capability.ASSIGN_DRIVER)
        assert admin.can(Capability.FORCE_ANY_TRANSITION)
        assert not admin.can(Capability.SELF_TRANSITION_ASSIGNED_BOOKING)

    def test_driver_capabilities(self, driver_actor):
        assert driver_actor.capabilities == {
            Capability.SELF_TRANSITION_ASSIGNED_BOOKING
        }
        assert driver_actor.is_driver

    def test_customer_capabilities(self, customer):
        assert customer.capabilities == {Capability.CANCEL_OWN_BOOKING}

    def test_explicit_capabilities_override_role(self):
        actor = Actor(
            user_id="ops-1",
            role=Role.CUSTOMER,
            capabilities=frozenset({Capability.ASSIGN_DRIVER}),
        )
        assert actor.can(Capability.ASSIGN_DRIVER)
        assert not actor.can(Capability.CANCEL_OWN_BOOKING)

    def test_empty_user_id_raises_error(self):
        with pytest.raises(ValueError):
            Actor(user_id="", role=Role.CUSTOMER)

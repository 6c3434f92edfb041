class ServiceValidationError(ValueError):
    """Raised when service fields violate the catalog rules (missing name, negative price, ...)."""
    pass


class ServiceInUseError(RuntimeError):
    """Raised when deleting a service that active appointments still reference."""

    def __init__(self, service_id: str, appointment_ids: list[str]) -> None:
        super().__init__(
            f"Service {service_id} is referenced by active appointments: {', '.join(appointment_ids)}"
        )
        self.service_id = service_id
        self.appointment_ids = appointment_ids


class SlotUnavailableError(RuntimeError):
    """Raised when a booking targets a time slot that is no longer free."""
    pass

"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DonationNotFoundError(DomainException):
    """No stored donation matches the requested id"""

    def __init__(self, donation_id: str):
        super().__init__(f"Donation {donation_id} not found")
        self.donation_id = donation_id


class IntakeServiceError(DomainException):
    """Intake service rejected a submission or could not be reached"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
